# termsnake/runners/run_scoreboard.py
from __future__ import annotations
from typing import Optional

from termsnake.config import AppConfig
from termsnake.core.storage import BoardCatalog, Scoreboard, Storage
from termsnake.viz.render_iface import grid_lines


def format_scores(scoreboard: Scoreboard, board_name: Optional[str] = None) -> str:
    names = [board_name] if board_name else scoreboard.names()
    if not names:
        return "No scores yet."
    out = []
    for name in names:
        out.append(f"{name}:")
        scores = scoreboard.get(name)
        if not scores:
            out.append("  (no games played)")
        out.extend(f"  {i}: {s}" for i, s in enumerate(scores))
    return "\n".join(out)


def format_boards(catalog: BoardCatalog) -> str:
    out = []
    for board in catalog:
        out.append(f"{board.name} (size {board.size}, {len(board)} walls)")
        out.extend(grid_lines(board.render_grid()))
        out.append("")
    return "\n".join(out).rstrip("\n")


def show_scores(cfg: AppConfig, board_name: Optional[str] = None) -> str:
    return format_scores(Storage.from_config(cfg).load_scoreboard(), board_name)


def show_boards(cfg: AppConfig) -> str:
    return format_boards(Storage.from_config(cfg).load_boards())
