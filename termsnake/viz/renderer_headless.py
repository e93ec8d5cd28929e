# termsnake/viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional

import numpy as np

from termsnake.core.interfaces import Snapshot
from .render_iface import Renderer, grid_lines


class HeadlessRenderer(Renderer):
    """Keeps frames in memory instead of drawing; used by tests and dry runs."""
    def __init__(self, keep: int = 0):
        self.keep = keep        # 0 keeps only the latest frame
        self.frames: List[List[str]] = []
        self.last_snap: Optional[Snapshot] = None
        self.overlay: Optional[str] = None
        self.ticks = 0

    def open(self) -> None:
        self.frames.clear()
        self.ticks = 0

    def draw(self, grid: np.ndarray, snap: Optional[Snapshot] = None) -> None:
        lines = grid_lines(grid)
        if self.keep:
            self.frames.append(lines)
            del self.frames[:-self.keep]
        else:
            self.frames[:] = [lines]
        self.last_snap = snap

    def set_overlay(self, text: Optional[str]) -> None:
        self.overlay = text or None

    def tick(self, ms: int) -> None:
        self.ticks += 1

    def close(self) -> None:
        pass
