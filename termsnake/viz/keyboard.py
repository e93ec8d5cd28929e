# termsnake/viz/keyboard.py
from __future__ import annotations
import curses
from typing import Optional, Union

from termsnake.core.direction import Direction

ESC = 27
ENTER_KEYS = (curses.KEY_ENTER, 10, 13)
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 8, 127)

KEY_DIRECTIONS = {
    curses.KEY_UP: Direction.UP, ord("k"): Direction.UP,
    curses.KEY_DOWN: Direction.DOWN, ord("j"): Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT, ord("h"): Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT, ord("l"): Direction.RIGHT,
}

Event = Union[Direction, str]


def direction_for(key: int) -> Optional[Direction]:
    return KEY_DIRECTIONS.get(key)


class Keyboard:
    """Turns raw curses key codes into headings and 'pause' / 'quit' signals."""
    def __init__(self, window):
        self.window = window

    def read(self) -> int:
        return self.window.getch()

    def poll(self) -> Optional[Event]:
        """Next meaningful event, or None once the input buffer is empty."""
        while True:
            key = self.read()
            if key == -1:
                return None
            event = self.translate(key)
            if event is not None:
                return event

    @staticmethod
    def translate(key: int) -> Optional[Event]:
        if key in (ord("q"), ord("Q")):
            return "quit"
        if key == ESC:
            return "pause"
        return direction_for(key)
