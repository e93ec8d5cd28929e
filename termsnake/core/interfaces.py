# termsnake/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .direction import Direction
from .point import Point


class BoundaryMode(Enum):
    WRAP = "wrap"       # leaving one edge re-enters from the opposite edge
    WALLED = "walled"   # the frame is solid


@dataclass(frozen=True)
class Snapshot:
    body: Tuple[Point, ...]   # head first
    food: Optional[Point]   # None after a "full" finish
    heading: Direction
    score: int
    step_count: int
    terminated: bool
    reason: Optional[str]
    size: int
    board_name: str

