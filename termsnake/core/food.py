# termsnake/core/food.py
from __future__ import annotations
import random
from typing import Collection

from .board import Board
from .errors import BoardFullError
from .point import Point


def place_food(board: Board, occupied: Collection[Point], rng: random.Random) -> Point:
    """Rejection-sample a cell that is neither a wall nor in `occupied`."""
    size = board.size
    taken = set(board.walls)
    taken.update(occupied)
    if len(taken) >= size * size:
        raise BoardFullError(f"no free cell left on {board.name!r}")

    while True:
        p = Point(rng.randrange(size), rng.randrange(size))
        if p not in taken:
            return p
