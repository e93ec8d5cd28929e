# termsnake/core/direction.py
from __future__ import annotations
from enum import Enum
from typing import Tuple


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"   # render sentinel for the open ends of the body, never a heading

    @property
    def delta(self) -> Tuple[int, int]:
        """(dx, dy) with x as the row and y as the column."""
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def is_opposite(self, other: "Direction") -> bool:
        return self is not Direction.NONE and _OPPOSITES[self] is other

    @classmethod
    def headings(cls) -> Tuple["Direction", ...]:
        return (cls.UP, cls.DOWN, cls.LEFT, cls.RIGHT)


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
    Direction.NONE: (0, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.NONE: Direction.NONE,
}
