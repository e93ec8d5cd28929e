# termsnake/runners/run_snake.py
from __future__ import annotations
import curses
import logging
from typing import Optional

from termsnake.config import AppConfig
from termsnake.core.board import Board
from termsnake.core.direction import Direction
from termsnake.core.interfaces import Snapshot
from termsnake.core.snake_rules import Game
from termsnake.core.storage import Storage
from termsnake.session_log import SessionLogger
from termsnake.viz.keyboard import Keyboard
from termsnake.viz.render_iface import Renderer
from termsnake.viz.renderer_curses import CursesRenderer

log = logging.getLogger(__name__)

GAME_OVER_MS = 3000


def play(game: Game, rend: Renderer, kbd: Keyboard, tick_ms: int) -> Snapshot:
    """Drive one session until it ends or the player quits."""
    rend.draw(game.render_grid(), game.snapshot())
    while not game.terminated:
        if _drain_input(game, rend, kbd) == "quit":
            log.info("player quit on %r at score %d", game.board.name, game.score)
            break
        game.step()
        rend.draw(game.render_grid(), game.snapshot())
        rend.tick(tick_ms)
    return game.snapshot()


def _drain_input(game: Game, rend: Renderer, kbd: Keyboard) -> Optional[str]:
    # every pending key is applied, so the last accepted heading wins
    while True:
        event = kbd.poll()
        if event is None:
            return None
        if isinstance(event, Direction):
            game.set_heading(event)
        elif event == "quit":
            return "quit"
        elif event == "pause":
            if _pause(rend, kbd) == "quit":
                return "quit"


def _pause(rend: Renderer, kbd: Keyboard) -> Optional[str]:
    rend.set_overlay("Paused. Esc to continue, q/Q to quit.")
    try:
        while True:
            event = kbd.poll()
            if event in ("pause", "quit"):
                return "quit" if event == "quit" else None
            rend.tick(50)
    finally:
        rend.set_overlay(None)


def game_over_message(board_name: str, score: int, best: Optional[int]) -> str:
    best = score if best is None else best
    suffix = "The best record." if score >= best else f"The best record is {best}"
    return f"Game Over :(!\nYour score is {score} in the {board_name} board.\n{suffix}"


def finish_session(snap: Snapshot, storage: Storage, session_log: Optional[SessionLogger] = None) -> Optional[int]:
    """Record the final score and return the best score on that board."""
    best = storage.record_score(snap.board_name, snap.score).best(snap.board_name)
    if session_log is not None:
        session_log.log_session(snap)
    return best


def pick_board(storage: Storage, name: Optional[str]) -> Board:
    catalog = storage.load_boards()
    if name is None:
        names = catalog.names()
        if not names:
            return Board.default()
        return catalog.get(names[0])
    board = catalog.get(name)
    if board is None:
        raise KeyError(f"unknown board {name!r}; known boards: {', '.join(catalog.names())}")
    return board


def main(cfg: AppConfig, board_name: Optional[str] = None) -> int:
    storage = Storage.from_config(cfg)
    board = pick_board(storage, board_name)
    game = Game.from_config(board, cfg)   # setup errors surface before curses starts
    log.info("starting %r (size %d, %s) with length %d", board.name, board.size, cfg.boundary, cfg.start_len)

    session_log = SessionLogger.open(cfg.session_log) if cfg.session_log else None
    try:
        return curses.wrapper(_run, game, storage, cfg, session_log)
    finally:
        if session_log is not None:
            session_log.close()


def _run(stdscr, game: Game, storage: Storage, cfg: AppConfig, session_log: Optional[SessionLogger]) -> int:
    rend = CursesRenderer(stdscr)
    rend.open()
    kbd = Keyboard(stdscr)

    snap = play(game, rend, kbd, cfg.tick_ms)
    best = finish_session(snap, storage, session_log)

    rend.set_overlay(game_over_message(snap.board_name, snap.score, best))
    rend.draw(game.render_grid(), snap)
    rend.tick(GAME_OVER_MS)
    rend.close()
    return snap.score
