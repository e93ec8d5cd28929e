# termsnake/config.py
from dataclasses import dataclass, replace
from typing import Optional, Literal

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board / session
    board_size: int = 10
    start_len: int = 3
    boundary: Literal["wrap", "walled"] = "wrap"
    seed: Optional[int] = None

    # play loop
    tick_ms: int = 80

    # storage
    data_dir: str = "~/.termsnake"
    boards_file: str = "boards.json"
    scores_file: str = "scores.json"
    session_log: Optional[str] = None    # CSV of finished sessions, off when None

    # logging (curses owns the terminal, so records go to a file)
    log_file: Optional[str] = "termsnake.log"   # relative paths land in data_dir
    log_level: str = "INFO"


    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
