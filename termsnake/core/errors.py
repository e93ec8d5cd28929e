# termsnake/core/errors.py
from __future__ import annotations


class SnakeError(Exception):
    """Base class for everything the game core raises."""


class OutOfRangeError(SnakeError, ValueError):
    """A wall coordinate given to Board.add_wall lies outside the board."""

    def __init__(self, point, size: int):
        super().__init__(f"the point {point.as_tuple()} is out of range for a board of size {size}")
        self.point = point
        self.size = size


class InvalidSizeError(SnakeError, ValueError):
    """Board too small for the requested setup."""


class NonAdjacentGlyphError(SnakeError, RuntimeError):
    """Two consecutive body segments are not neighbours; the body is corrupt."""


class BoardFullError(SnakeError):
    """No free cell is left for food."""


class DuplicateBoardError(SnakeError, KeyError):
    """A board with this name is already in the catalog."""

    def __str__(self) -> str:
        return f"a board named {self.args[0]!r} already exists"
