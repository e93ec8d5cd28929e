# termsnake/core/point.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .direction import Direction


@dataclass(frozen=True, slots=True)
class Point:
    x: int  # row
    y: int  # column

    def neighbor(self, direction: Direction, wrap_size: Optional[int] = None) -> "Point":
        """One cell over in `direction`; wrapped into [0, wrap_size) when given."""
        dx, dy = direction.delta
        p = Point(self.x + dx, self.y + dy)
        return p.wrapped(wrap_size) if wrap_size else p

    def wrapped(self, size: int) -> "Point":
        # python's % is already euclidean for a positive modulus
        return Point(self.x % size, self.y % size)

    def in_bounds(self, size: int) -> bool:
        return 0 <= self.x < size and 0 <= self.y < size

    def direction_to(self, other: "Point", wrap_size: Optional[int] = None) -> Direction:
        """Unit heading towards an orthogonal neighbour, Direction.NONE otherwise.

        With `wrap_size`, cells adjacent across the board edge count as
        neighbours too. Plain adjacency is preferred when both apply.
        """
        for d in Direction.headings():
            if self.neighbor(d) == other:
                return d
        if wrap_size:
            for d in Direction.headings():
                if self.neighbor(d, wrap_size) == other.wrapped(wrap_size):
                    return d
        return Direction.NONE

    def as_tuple(self):
        return (self.x, self.y)
