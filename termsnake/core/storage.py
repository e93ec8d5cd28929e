from __future__ import annotations
import json, os
import logging
from typing import Dict, Iterator, List, Optional

from .board import Board
from .errors import DuplicateBoardError

log = logging.getLogger(__name__)


def _read_json(path: str):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _write_json(path: str, data) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    tmp = path + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    os.replace(tmp, path)


class BoardCatalog:
    """Named boards kept in one JSON file. Nothing is written until save()."""

    def __init__(self, path: Optional[str] = None, boards: Optional[Dict[str, Board]] = None):
        self.path = path
        self._boards: Dict[str, Board] = dict(boards or {})

    @classmethod
    def load(cls, path: str) -> "BoardCatalog":
        if not os.path.exists(path):
            log.info("no board catalog at %s, starting from the default board", path)
            default = Board.default()
            return cls(path, {default.name: default})
        raw = _read_json(path)
        boards = {}
        for name, data in raw.items():
            data = dict(data)
            data.setdefault("name", name)
            boards[name] = Board.from_dict(data)
        return cls(path, boards)

    def save(self, path: Optional[str] = None) -> None:
        path = path or self.path
        if path is None:
            raise ValueError("BoardCatalog has no path to save to")
        _write_json(path, {name: b.to_dict() for name, b in self._boards.items()})
        log.info("saved %d boards to %s", len(self._boards), path)

    def get(self, name: str) -> Optional[Board]:
        return self._boards.get(name)

    def names(self) -> List[str]:
        return sorted(self._boards)

    def add(self, board: Board) -> None:
        if board.name in self._boards:
            raise DuplicateBoardError(board.name)
        self._boards[board.name] = board

    def __contains__(self, name: str) -> bool:
        return name in self._boards

    def __iter__(self) -> Iterator[Board]:
        return (self._boards[n] for n in self.names())

    def __len__(self) -> int:
        return len(self._boards)


class Scoreboard:
    """Score history per board name. Nothing is written until save()."""

    def __init__(self, path: Optional[str] = None, scores: Optional[Dict[str, List[int]]] = None):
        self.path = path
        self._scores: Dict[str, List[int]] = {k: list(v) for k, v in (scores or {}).items()}

    @classmethod
    def load(cls, path: str) -> "Scoreboard":
        if not os.path.exists(path):
            return cls(path)
        raw = _read_json(path)
        return cls(path, {name: [int(s) for s in scores] for name, scores in raw.items()})

    def save(self, path: Optional[str] = None) -> None:
        path = path or self.path
        if path is None:
            raise ValueError("Scoreboard has no path to save to")
        _write_json(path, self._scores)

    def add(self, board_name: str, score: int) -> None:
        self._scores.setdefault(board_name, []).append(int(score))

    def get(self, board_name: str) -> List[int]:
        """Scores for `board_name`, best first."""
        return sorted(self._scores.get(board_name, []), reverse=True)

    def best(self, board_name: str) -> Optional[int]:
        scores = self._scores.get(board_name)
        return max(scores) if scores else None

    def names(self) -> List[str]:
        return sorted(self._scores)


class Storage:
    """Persistence service handed to the runners.

    Boards live in `<root>/<boards_file>`, scores in `<root>/<scores_file>`.
    Every call loads and saves explicitly; no state is cached between calls.
    """

    def __init__(self, root_dir: str, boards_file: str = "boards.json", scores_file: str = "scores.json"):
        self.root_dir = root_dir
        self.boards_path = os.path.join(root_dir, boards_file)
        self.scores_path = os.path.join(root_dir, scores_file)

    @classmethod
    def from_config(cls, cfg) -> "Storage":
        return cls(os.path.expanduser(cfg.data_dir), cfg.boards_file, cfg.scores_file)

    def load_boards(self) -> BoardCatalog:
        return BoardCatalog.load(self.boards_path)

    def save_boards(self, catalog: BoardCatalog) -> None:
        catalog.save(self.boards_path)

    def load_scoreboard(self) -> Scoreboard:
        return Scoreboard.load(self.scores_path)

    def load_scores(self, board_name: str) -> List[int]:
        return self.load_scoreboard().get(board_name)

    def record_score(self, board_name: str, score: int) -> Scoreboard:
        """Append `score` and persist; returns the updated scoreboard."""
        scoreboard = self.load_scoreboard()
        scoreboard.add(board_name, score)
        scoreboard.save()
        log.info("recorded score %d on %r", score, board_name)
        return scoreboard
