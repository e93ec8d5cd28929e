from .direction import Direction
from .point import Point
from .board import Board
from .interfaces import BoundaryMode, Snapshot
from .snake_rules import Game

__all__ = ["Direction", "Point", "Board", "BoundaryMode", "Snapshot", "Game"]
