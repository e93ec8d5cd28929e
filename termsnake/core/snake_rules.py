# termsnake/core/snake_rules.py  (pure rules, no curses)
from __future__ import annotations
from collections import deque
from itertools import pairwise
from typing import Deque, Optional
import logging
import random

import numpy as np

from . import glyphs
from .board import Board
from .direction import Direction
from .errors import BoardFullError, InvalidSizeError, NonAdjacentGlyphError
from .food import place_food
from .interfaces import BoundaryMode, Snapshot
from .point import Point

log = logging.getLogger(__name__)


class Game:
    """One Snake session on a fixed board.

    Running until a tick collides; after that the session is terminal and
    step() keeps returning False. Start a new Game to play again.
    """

    def __init__(
        self,
        board: Board,
        initial_length: int = 3,
        boundary: BoundaryMode = BoundaryMode.WRAP,
        seed: Optional[int] = None,
    ):
        self.board = board
        self.boundary = boundary
        self.rng = random.Random(seed)

        self.body: Deque[Point] = create_body(board.size, initial_length)
        self._heading = Direction.RIGHT   # heading for the next tick
        self._moved = Direction.RIGHT     # heading used by the last tick
        # None once the body has filled every free cell
        self.food: Optional[Point] = place_food(board, self.body, self.rng)
        self._score = 0
        self.step_count = 0
        self.terminated = False
        self.reason: Optional[str] = None

    @classmethod
    def from_config(cls, board: Board, cfg) -> "Game":
        return cls(board, cfg.start_len, BoundaryMode(cfg.boundary), cfg.seed)

    # ---- read side ----
    @property
    def score(self) -> int:
        return self._score

    @property
    def heading(self) -> Direction:
        return self._heading

    @property
    def head(self) -> Point:
        return self.body[0]

    @property
    def wrap_size(self) -> Optional[int]:
        return self.board.size if self.boundary is BoundaryMode.WRAP else None

    # ---- input ----
    def set_heading(self, direction: Direction) -> None:
        if direction is Direction.NONE:
            raise ValueError("Direction.NONE is not a heading")
        # the last move counts too, so two quick turns cannot fold back into the neck
        if direction.is_opposite(self._heading) or direction.is_opposite(self._moved):
            return
        self._heading = direction

    # ---- tick ----
    def step(self) -> bool:
        if self.terminated:
            return False
        self.step_count += 1

        new_head = self.head.neighbor(self._heading, self.wrap_size)
        self._moved = self._heading

        reason = self._collision(new_head)
        if reason is not None:
            self.body.pop()
            return self._end(reason)

        self.body.appendleft(new_head)
        if new_head == self.food:
            self._score += 1
            log.info("food eaten at %s, score=%d", new_head.as_tuple(), self._score)
            try:
                self.food = place_food(self.board, self.body, self.rng)
            except BoardFullError:
                self.food = None
                return self._end("full")
        else:
            self.body.pop()

        log.debug("tick %d head=%s heading=%s", self.step_count, new_head.as_tuple(), self._heading.value)
        return True

    def _collision(self, new_head: Point) -> Optional[str]:
        if not new_head.in_bounds(self.board.size):
            return "edge"
        if self.board.is_wall(new_head):
            return "wall"
        # the tail moves out of the way this tick
        if new_head != self.body[-1] and new_head in self.body:
            return "self"
        return None

    def _end(self, reason: str) -> bool:
        self.terminated = True
        self.reason = reason
        log.info("game over on %r: %s after %d ticks, score=%d",
                 self.board.name, reason, self.step_count, self._score)
        return False

    # ---- render ----
    def render_grid(self) -> np.ndarray:
        grid = self.board.render_grid()
        if self.food is not None:
            grid[self.food.x + 1, self.food.y + 1] = glyphs.FOOD
        self._put_body(grid)
        return grid

    def _put_body(self, grid: np.ndarray) -> None:
        if not self.body:
            return
        if len(self.body) == 1:
            p = self.body[0]
            grid[p.x + 1, p.y + 1] = glyphs.segment_glyph(Direction.NONE, self._moved)
            return

        wrap = self.wrap_size
        before = Direction.NONE
        for cur, nxt in pairwise(self.body):
            after = cur.direction_to(nxt, wrap)
            if after is Direction.NONE:
                raise NonAdjacentGlyphError(f"body segments {cur.as_tuple()} and {nxt.as_tuple()} are not neighbours")
            grid[cur.x + 1, cur.y + 1] = glyphs.segment_glyph(before, after)
            before = nxt.direction_to(cur, wrap)
        tail = self.body[-1]
        grid[tail.x + 1, tail.y + 1] = glyphs.segment_glyph(before, Direction.NONE)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            body=tuple(self.body),
            food=self.food,
            heading=self._heading,
            score=self._score,
            step_count=self.step_count,
            terminated=self.terminated,
            reason=self.reason,
            size=self.board.size,
            board_name=self.board.name,
        )


def create_body(size: int, length: int) -> Deque[Point]:
    """Horizontal body centred on the board, head (rightmost) first.

    Raises InvalidSizeError unless a one-cell margin is left on both sides.
    """
    if length < 1:
        raise InvalidSizeError(f"snake length must be at least 1, got {length}")
    half = (size - 1) // 2
    offset = length // 2
    lo = half - offset
    hi = half + offset - (1 if length % 2 == 0 else 0)
    if lo < 1 or hi > size - 2:
        raise InvalidSizeError(
            f"a snake of length {length} needs a board of at least {min_board_size(length)} cells, got {size}"
        )
    return deque(Point(half, y) for y in range(hi, lo - 1, -1))


def min_board_size(length: int) -> int:
    size = 1
    while True:
        half = (size - 1) // 2
        offset = length // 2
        if half - offset >= 1 and half + offset - (1 - length % 2) <= size - 2:
            return size
        size += 1
