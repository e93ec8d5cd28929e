# tests/conftest.py
import os
import sys

# Ensure project root is importable when running from a plain checkout
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest


class FakeWindow:
    """Stands in for a curses window: getch() replays scripted keys, then -1."""
    def __init__(self, keys=()):
        self.keys = list(keys)

    def push(self, *keys):
        self.keys.extend(keys)

    def getch(self):
        return self.keys.pop(0) if self.keys else -1


@pytest.fixture
def board_factory():
    from termsnake.core.board import Board
    def make(size=7, walls=(), name="test"):
        return Board(name, size, walls)
    return make


@pytest.fixture
def game_factory(board_factory):
    from termsnake.core.snake_rules import Game
    from termsnake.core.interfaces import BoundaryMode
    def make(size=7, length=3, walls=(), boundary=BoundaryMode.WRAP, seed=0, **state):
        game = Game(board_factory(size, walls), length, boundary, seed)
        arrange(game, **state)
        return game
    return make


def arrange(game, body=None, heading=None, food=None, terminated=None, reason=None):
    """Put a game into a hand-picked position; heading also counts as the last move."""
    from collections import deque
    from termsnake.core.direction import Direction
    from termsnake.core.point import Point
    if body is not None:
        game.body = deque(Point(x, y) for x, y in body)
    if heading is not None:
        game._heading = game._moved = Direction(heading)
    if food is not None:
        game.food = Point(*food)
    if terminated is not None:
        game.terminated = terminated
    if reason is not None:
        game.reason = reason


@pytest.fixture
def window():
    return FakeWindow()


@pytest.fixture
def storage(tmp_path):
    from termsnake.core.storage import Storage
    return Storage(str(tmp_path / "data"))
