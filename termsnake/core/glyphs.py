# termsnake/core/glyphs.py
from __future__ import annotations
from typing import Dict, Tuple

from .direction import Direction
from .errors import NonAdjacentGlyphError

BLANK = " "
WALL = "█"
FOOD = "●"
CURSOR_EMPTY = "■"
CURSOR_WALL = "▀"

TOP_LEFT, TOP_RIGHT = "┌", "┐"
BOTTOM_LEFT, BOTTOM_RIGHT = "└", "┘"
HORIZONTAL, VERTICAL = "─", "│"

U, D, L, R, N = Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT, Direction.NONE

# (towards previous segment, towards next segment) -> glyph
SEGMENT_GLYPHS: Dict[Tuple[Direction, Direction], str] = {
    # turns
    (D, R): TOP_LEFT, (R, D): TOP_LEFT,
    (D, L): TOP_RIGHT, (L, D): TOP_RIGHT,
    (U, R): BOTTOM_LEFT, (R, U): BOTTOM_LEFT,
    (U, L): BOTTOM_RIGHT, (L, U): BOTTOM_RIGHT,
    # straight runs
    (L, R): HORIZONTAL, (R, L): HORIZONTAL,
    (U, D): VERTICAL, (D, U): VERTICAL,
    # head and tail
    (N, L): HORIZONTAL, (L, N): HORIZONTAL,
    (N, R): HORIZONTAL, (R, N): HORIZONTAL,
    (N, U): VERTICAL, (U, N): VERTICAL,
    (N, D): VERTICAL, (D, N): VERTICAL,
}


def segment_glyph(before: Direction, after: Direction) -> str:
    try:
        return SEGMENT_GLYPHS[(before, after)]
    except KeyError:
        raise NonAdjacentGlyphError(
            f"no body glyph for neighbours {before.value}/{after.value}"
        ) from None
