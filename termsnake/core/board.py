# termsnake/core/board.py
from __future__ import annotations
from typing import Any, Dict, Iterable, Iterator, Set

import numpy as np

from . import glyphs
from .errors import InvalidSizeError, OutOfRangeError
from .point import Point


class Board:
    """Static play-field: a square of `size` cells plus a set of wall cells.

    Raw walls are folded into range with a euclidean modulo, so construction
    never rejects a point. Later edits through add_wall are bound-checked.
    """

    def __init__(self, name: str, size: int, walls: Iterable[Point] = ()):
        if size < 1:
            raise InvalidSizeError(f"board size must be at least 1, got {size}")
        self._name = name
        self._size = int(size)
        self._walls: Set[Point] = {_as_point(p).wrapped(self._size) for p in walls}

    @classmethod
    def default(cls) -> "Board":
        return cls("test board", 10, [Point(5, 5)])

    @property
    def name(self) -> str:
        return self._name

    @property
    def size(self) -> int:
        return self._size

    @property
    def walls(self) -> frozenset:
        return frozenset(self._walls)

    def is_wall(self, point: Point) -> bool:
        return point in self._walls

    __contains__ = is_wall

    def __iter__(self) -> Iterator[Point]:
        return iter(self._walls)

    def __len__(self) -> int:
        return len(self._walls)

    def __repr__(self) -> str:
        return f"<Board name={self._name!r} size={self._size} walls={len(self._walls)}>"

    def add_wall(self, point: Point) -> None:
        if not point.in_bounds(self._size):
            raise OutOfRangeError(point, self._size)
        self._walls.add(point)

    def remove_wall(self, point: Point) -> None:
        self._walls.discard(point)

    def copy_with_name(self, name: str) -> "Board":
        return Board(name, self._size, self._walls)

    def render_grid(self) -> np.ndarray:
        n = self._size + 2
        grid = np.full((n, n), glyphs.BLANK, dtype="<U1")
        for p in self._walls:
            grid[p.x + 1, p.y + 1] = glyphs.WALL
        _put_border(grid)
        return grid

    # ---- JSON shape ----
    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self._name,
            "size": self._size,
            "walls": sorted(p.as_tuple() for p in self._walls),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Board":
        return cls(data["name"], int(data["size"]), data.get("walls", []))


def _as_point(p) -> Point:
    return p if isinstance(p, Point) else Point(int(p[0]), int(p[1]))


def _put_border(grid: np.ndarray) -> None:
    last = grid.shape[0] - 1
    grid[0, :] = glyphs.HORIZONTAL
    grid[last, :] = glyphs.HORIZONTAL
    grid[1:last, 0] = glyphs.VERTICAL
    grid[1:last, last] = glyphs.VERTICAL
    grid[0, 0], grid[0, last] = glyphs.TOP_LEFT, glyphs.TOP_RIGHT
    grid[last, 0], grid[last, last] = glyphs.BOTTOM_LEFT, glyphs.BOTTOM_RIGHT
