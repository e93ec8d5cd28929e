# termsnake/viz/renderer_curses.py
from __future__ import annotations
import curses
from typing import Optional

import numpy as np

from termsnake.core.interfaces import Snapshot
from .render_iface import PLAY_HELP, Renderer, grid_lines, title_for


class CursesRenderer(Renderer):
    """Draws glyph grids centred in a curses window.

    The window is owned by the caller (normally the one curses.wrapper hands out).
    """
    def __init__(self, stdscr, footer: str = PLAY_HELP):
        self.scr = stdscr
        self.footer = footer
        self._overlay_text: Optional[str] = None

    def set_overlay(self, text: Optional[str]) -> None:
        self._overlay_text = text or ""

    def open(self) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # some terminals cannot hide the cursor
        self.scr.nodelay(True)
        self.scr.keypad(True)

    def draw(self, grid: np.ndarray, snap: Optional[Snapshot] = None) -> None:
        scr = self.scr
        scr.erase()
        height, width = scr.getmaxyx()

        self._centered(0, title_for(snap), width)
        lines = grid_lines(grid)
        top = max(1, (height - len(lines)) // 2)
        for i, line in enumerate(lines):
            self._centered(top + i, line, width)

        if self._overlay_text:
            for i, text in enumerate(self._overlay_text.splitlines()):
                self._centered(top + len(lines) + 1 + i, text, width, curses.A_BOLD)

        self._centered(height - 1, self.footer, width)
        scr.refresh()

    def tick(self, ms: int) -> None:
        curses.napms(ms)

    def close(self) -> None:
        self.scr.nodelay(False)

    # internals
    def _centered(self, row: int, text: str, width: int, attr: int = 0) -> None:
        height, _ = self.scr.getmaxyx()
        if not text or not 0 <= row < height:
            return
        text = text[: max(0, width - 1)]
        col = max(0, (width - len(text)) // 2)
        try:
            self.scr.addstr(row, col, text, attr)
        except curses.error:
            pass  # writing the bottom-right cell raises even though it succeeds
