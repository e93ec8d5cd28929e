# termsnake/runners/create_board.py
from __future__ import annotations
import curses
import logging
from enum import Enum
from typing import Optional

import numpy as np

from termsnake.config import AppConfig
from termsnake.core import glyphs
from termsnake.core.board import Board
from termsnake.core.errors import DuplicateBoardError, OutOfRangeError
from termsnake.core.point import Point
from termsnake.core.storage import BoardCatalog, Storage
from termsnake.viz.keyboard import BACKSPACE_KEYS, ENTER_KEYS, ESC, direction_for
from termsnake.viz.renderer_curses import CursesRenderer

log = logging.getLogger(__name__)

EDIT_HELP = "Use arrows or h j k l to move, space to toggle a wall, enter to name the board, q to quit."
NAME_HELP = "Type a name, enter to save, esc to go back to the walls."


class EditorMode(Enum):
    WALL = "wall"
    NAME = "name"


class BoardEditor:
    """Key-driven state for laying out walls and naming a new board."""

    def __init__(self, size: int, catalog: BoardCatalog, name: str = ""):
        self.board = Board(name, size)
        self.catalog = catalog
        self.cursor = Point(0, 0)
        self.mode = EditorMode.WALL
        self.name = name
        self.error = ""
        self.exit = False
        self.finish = False

    @property
    def done(self) -> bool:
        return self.exit or self.finish

    def handle_key(self, key: int) -> None:
        if self.mode is EditorMode.WALL:
            self._key_wall(key)
        else:
            self._key_name(key)

    def _key_wall(self, key: int) -> None:
        direction = direction_for(key)
        if direction is not None:
            self.cursor = self.cursor.neighbor(direction, self.board.size)
        elif key == ord("q"):
            self.exit = True
        elif key == ord(" "):
            self.toggle_wall()
        elif key in ENTER_KEYS:
            self.mode = EditorMode.NAME

    def _key_name(self, key: int) -> None:
        if key in ENTER_KEYS:
            self.store()
        elif key in BACKSPACE_KEYS:
            self.name = self.name[:-1]
        elif key == ESC:
            self.mode = EditorMode.WALL
            self.error = ""
        elif 32 <= key < 127:
            self.name += chr(key)

    def toggle_wall(self) -> None:
        try:
            if self.board.is_wall(self.cursor):
                self.board.remove_wall(self.cursor)
            else:
                self.board.add_wall(self.cursor)
        except OutOfRangeError as e:
            self.error = str(e)

    def store(self) -> Optional[Board]:
        name = self.name.strip()
        if not name:
            self.error = "the board needs a name"
            return None
        board = self.board.copy_with_name(name)
        try:
            self.catalog.add(board)
        except DuplicateBoardError as e:
            self.error = str(e)
            return None
        self.error = ""
        self.finish = True
        return board

    def render_grid(self) -> np.ndarray:
        grid = self.board.render_grid()
        cell = (self.cursor.x + 1, self.cursor.y + 1)
        grid[cell] = glyphs.CURSOR_EMPTY if grid[cell] == glyphs.BLANK else glyphs.CURSOR_WALL
        return grid


def main(cfg: AppConfig, name: str = "", size: Optional[int] = None) -> Optional[Board]:
    storage = Storage.from_config(cfg)
    catalog = storage.load_boards()
    editor = BoardEditor(size or cfg.board_size, catalog, name)

    curses.wrapper(_run, editor)

    if not editor.finish:
        return None
    storage.save_boards(catalog)
    board = catalog.get(editor.name.strip())
    log.info("created board %r (size %d, %d walls)", board.name, board.size, len(board))
    return board


def _run(stdscr, editor: BoardEditor) -> None:
    rend = CursesRenderer(stdscr, footer=EDIT_HELP)
    rend.open()
    stdscr.nodelay(False)   # the editor blocks on input
    while not editor.done:
        if editor.mode is EditorMode.NAME:
            rend.footer = NAME_HELP
            rend.set_overlay(f"Name: {editor.name}\n{editor.error}")
        else:
            rend.footer = EDIT_HELP
            rend.set_overlay(editor.error)
        rend.draw(editor.render_grid())
        editor.handle_key(stdscr.getch())
    rend.close()
