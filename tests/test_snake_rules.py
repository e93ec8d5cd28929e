# tests/test_snake_rules.py
import random

import pytest

from termsnake.config import AppConfig
from termsnake.core.board import Board
from termsnake.core.direction import Direction
from termsnake.core.errors import InvalidSizeError
from termsnake.core.interfaces import BoundaryMode
from termsnake.core.point import Point
from termsnake.core.snake_rules import Game, create_body, min_board_size


def pts(*xy):
    return [Point(x, y) for x, y in xy]


# ---- construction ----

@pytest.mark.parametrize("size,length,expected", [
    (7, 3, [(3, 4), (3, 3), (3, 2)]),
    (8, 3, [(3, 4), (3, 3), (3, 2)]),
    (7, 4, [(3, 4), (3, 3), (3, 2), (3, 1)]),
    (8, 4, [(3, 4), (3, 3), (3, 2), (3, 1)]),
    (5, 3, [(2, 3), (2, 2), (2, 1)]),
    (3, 1, [(1, 1)]),
])
def test_create_body_is_centred_head_first(size, length, expected):
    assert list(create_body(size, length)) == pts(*expected)

@pytest.mark.parametrize("size,length", [(4, 3), (5, 4), (7, 6), (2, 1), (10, 0)])
def test_create_body_needs_a_margin(size, length):
    with pytest.raises(InvalidSizeError):
        create_body(size, length)

def test_min_board_size_matches_create_body():
    for length in range(1, 9):
        n = min_board_size(length)
        create_body(n, length)
        with pytest.raises(InvalidSizeError):
            create_body(n - 1, length)

def test_new_game(game_factory):
    game = game_factory(7, 3)
    assert list(game.body) == pts((3, 4), (3, 3), (3, 2))
    assert game.heading is Direction.RIGHT
    assert game.score == 0
    assert not game.terminated
    assert game.food not in game.body

def test_new_game_too_long_fails():
    with pytest.raises(InvalidSizeError, match="at least"):
        Game(Board("tiny", 4), 3)

def test_from_config():
    game = Game.from_config(Board("b", 9), AppConfig(start_len=5, boundary="walled", seed=3))
    assert len(game.body) == 5
    assert game.boundary is BoundaryMode.WALLED


# ---- heading ----

def test_reversal_is_ignored(game_factory):
    game = game_factory()
    game.set_heading(Direction.LEFT)
    assert game.heading is Direction.RIGHT

def test_non_opposite_heading_changes(game_factory):
    game = game_factory()
    game.set_heading(Direction.UP)
    assert game.heading is Direction.UP
    game.set_heading(Direction.RIGHT)
    assert game.heading is Direction.RIGHT

def test_reversal_of_the_pending_heading_is_ignored(game_factory):
    game = game_factory(7, 3, food=(0, 0))
    game.set_heading(Direction.UP)
    game.set_heading(Direction.DOWN)
    assert game.heading is Direction.UP
    assert game.step()
    assert game.head == Point(2, 4)

def test_last_accepted_turn_before_tick_wins(game_factory):
    game = game_factory(7, 3, food=(0, 0))
    game.set_heading(Direction.UP)
    game.set_heading(Direction.LEFT)   # reverse of the last move, ignored
    game.set_heading(Direction.DOWN)   # reverse of the pending heading, ignored
    assert game.heading is Direction.UP
    game.set_heading(Direction.RIGHT)
    assert game.heading is Direction.RIGHT
    assert game.step()
    assert game.head == Point(3, 5)

def test_reversal_guard_follows_the_last_move(game_factory):
    game = game_factory(7, 3, food=(0, 0))
    game.set_heading(Direction.DOWN)
    game.step()
    game.set_heading(Direction.UP)
    assert game.heading is Direction.DOWN

def test_none_is_not_a_heading(game_factory):
    with pytest.raises(ValueError):
        game_factory().set_heading(Direction.NONE)


# ---- step ----

def test_walk():
    game = Game(Board("b", 5), 3, seed=1)
    game.food = Point(0, 0)

    assert list(game.body) == pts((2, 3), (2, 2), (2, 1))
    assert game.step()
    assert list(game.body) == pts((2, 4), (2, 3), (2, 2))

    game.set_heading(Direction.DOWN)
    assert game.step()
    assert list(game.body) == pts((3, 4), (2, 4), (2, 3))

    game.set_heading(Direction.LEFT)
    assert game.step()
    assert list(game.body) == pts((3, 3), (3, 4), (2, 4))

    game.set_heading(Direction.UP)
    assert game.step()
    assert list(game.body) == pts((2, 3), (3, 3), (3, 4))
    assert game.score == 0

def test_moving_into_the_body_ends_the_game(game_factory):
    game = game_factory(7, 5, food=(6, 6), heading="left",
                        body=[(1, 1), (2, 1), (2, 0), (1, 0), (0, 0)])
    game.set_heading(Direction.LEFT)
    assert not game.step()
    assert game.terminated
    assert game.reason == "self"
    assert list(game.body) == pts((1, 1), (2, 1), (2, 0), (1, 0))

def test_walk_and_eat(game_factory):
    game = game_factory(7, 3, food=(4, 5))
    assert game.step()
    assert list(game.body) == pts((3, 5), (3, 4), (3, 3))

    game.set_heading(Direction.DOWN)
    assert game.heading is Direction.DOWN
    assert game.step()
    assert list(game.body) == pts((4, 5), (3, 5), (3, 4), (3, 3))
    assert game.score == 1
    assert game.food not in game.body

    game.food = Point(0, 0)
    assert game.step()
    assert list(game.body) == pts((5, 5), (4, 5), (3, 5), (3, 4))
    assert game.step()
    assert game.score == 1

def test_growth_law(game_factory):
    game = game_factory(7, 3, food=(3, 5))
    n = len(game.body)
    assert game.step()
    assert (len(game.body), game.score) == (n + 1, 1)
    game.food = Point(0, 0)
    assert game.step()
    assert (len(game.body), game.score) == (n + 1, 1)

def test_the_tail_cell_is_free_to_enter(game_factory):
    game = game_factory(7, 4, food=(6, 6), heading="down",
                        body=[(1, 1), (1, 2), (2, 2), (2, 1)])
    assert game.step()
    assert list(game.body) == pts((2, 1), (1, 1), (1, 2), (2, 2))

def test_wall_collision(game_factory):
    game = game_factory(7, 3, walls=[Point(3, 5)], food=(0, 0))
    assert not game.step()
    assert game.reason == "wall"
    assert list(game.body) == pts((3, 4), (3, 3))

def test_wrap_re_enters_on_the_opposite_edge(game_factory):
    game = game_factory(5, 3, food=(0, 0))
    game.step()
    assert game.step()
    assert game.head == Point(2, 0)

def test_walled_mode_edge_collision(game_factory):
    game = game_factory(5, 3, boundary=BoundaryMode.WALLED, food=(0, 0))
    assert game.step()
    assert not game.step()
    assert game.reason == "edge"

def test_termination_is_final(game_factory):
    game = game_factory(7, 3, walls=[Point(3, 5)], food=(0, 0))
    assert not game.step()
    body, count = list(game.body), game.step_count
    game.set_heading(Direction.UP)
    assert not game.step()
    assert list(game.body) == body
    assert game.step_count == count

def test_filling_the_board_ends_the_game():
    free = {Point(1, 1), Point(1, 2)}
    walls = [Point(x, y) for x in range(3) for y in range(3) if Point(x, y) not in free]
    game = Game(Board("full", 3, walls), 1, seed=0)
    assert game.food == Point(1, 2)
    assert not game.step()
    assert game.reason == "full"
    assert game.score == 1
    assert list(game.body) == pts((1, 2), (1, 1))
    assert game.food is None
    assert game.snapshot().food is None
    assert "●" not in game.render_grid()


# ---- invariants under random play ----

def _assert_invariants(game):
    body = list(game.body)
    assert len(set(body)) == len(body)
    assert game.food not in game.body
    assert not game.board.is_wall(game.food)
    for a, b in zip(body, body[1:]):
        assert a.direction_to(b, game.wrap_size) is not Direction.NONE

@pytest.mark.parametrize("boundary", list(BoundaryMode))
def test_invariants_hold_during_random_play(board_factory, boundary):
    rng = random.Random(7)
    walls = [Point(0, 0), Point(5, 2), Point(2, 6)]
    for seed in range(10):
        game = Game(board_factory(8, walls), 3, boundary, seed)
        _assert_invariants(game)
        for _ in range(300):
            game.set_heading(rng.choice(Direction.headings()))
            score = game.score
            alive = game.step()
            if not alive:
                break
            assert game.score - score in (0, 1)
            _assert_invariants(game)


# ---- determinism ----

def test_same_seed_same_session(game_factory):
    a = game_factory(9, 3, seed=42)
    b = game_factory(9, 3, seed=42)
    assert a.food == b.food
    for d in [Direction.UP, Direction.LEFT, Direction.LEFT, Direction.DOWN, Direction.DOWN, Direction.RIGHT]:
        a.set_heading(d)
        b.set_heading(d)
        assert a.step() == b.step()
        assert a.snapshot() == b.snapshot()

def test_snapshot(game_factory):
    game = game_factory(7, 3, food=(0, 0))
    game.step()
    snap = game.snapshot()
    assert snap.body == tuple(game.body)
    assert snap.food == Point(0, 0)
    assert (snap.score, snap.step_count, snap.terminated, snap.reason) == (0, 1, False, None)
    assert (snap.size, snap.board_name) == (7, "test")
