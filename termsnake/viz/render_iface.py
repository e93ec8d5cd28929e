# termsnake/viz/render_iface.py
from __future__ import annotations
from typing import List, Optional, Protocol

import numpy as np

from termsnake.core.interfaces import Snapshot

PLAY_HELP = "Use arrows or h j k l to move, esc to stop/play, q/Q to quit game."


class Renderer(Protocol):
    def open(self) -> None: ...
    def draw(self, grid: np.ndarray, snap: Optional[Snapshot] = None) -> None: ...
    def set_overlay(self, text: Optional[str]) -> None: ...
    def tick(self, ms: int) -> None: ...
    def close(self) -> None: ...


def grid_lines(grid: np.ndarray) -> List[str]:
    """Join each row of a glyph grid into one printable line."""
    return ["".join(row) for row in grid.tolist()]


def title_for(snap: Optional[Snapshot]) -> str:
    if snap is None:
        return ""
    return f"Your score {snap.score}"
