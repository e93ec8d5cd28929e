from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol

from .core.interfaces import Snapshot

SESSION_KEYS = ["step", "board", "score", "steps", "reason", "length"]


class Logger(Protocol):
    def log(self, step: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="", encoding="utf-8")
        self._writer = None

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        scalars = {"step": step, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",   # unseen keys are dropped, not fatal
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "CSVLogger":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class SessionLogger:
    """One CSV row per finished game. The 'step' column counts sessions in this file."""
    def __init__(self, logger: Logger):
        self.logger = logger
        self._count = 0

    @classmethod
    def open(cls, path: str) -> "SessionLogger":
        return cls(CSVLogger(path, fieldnames=SESSION_KEYS))

    def log_session(self, snap: Snapshot) -> None:
        self._count += 1
        self.logger.log(self._count, {
            "board": snap.board_name,
            "score": snap.score,
            "steps": snap.step_count,
            "reason": snap.reason or "",
            "length": len(snap.body),
        })
        self.logger.flush()

    def close(self) -> None:
        self.logger.close()
