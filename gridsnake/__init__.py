"""
gridsnake — grid-based snake game.

The model (GridModel, SnakeEngine) has no pygame dependency; the view and
controller modules import pygame.
"""

from .errors import GridSnakeError, InvalidDimension, InvalidSnakeLength
from .grid import GridLine, GridModel
from .model import ALL_DIRS, Direction, SnakeEngine

__all__ = [
    "GridSnakeError", "InvalidDimension", "InvalidSnakeLength",
    "GridLine", "GridModel",
    "ALL_DIRS", "Direction", "SnakeEngine",
]
