"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate keys and button clicks into view-model commands.
  - Drive the loop: tick the view-model, ask the view to render.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about movement rules (that's the Model's job).

The controller is the only layer that imports pygame directly for events.
"""

import logging
import sys
from typing import Optional

import pygame

from .config import FPS
from .model import Direction
from .view import GameView, window_size
from .viewmodel import SnakeViewModel

logger = logging.getLogger(__name__)

DIRECTION_KEYS = {
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_a:     Direction.LEFT,
    pygame.K_UP:    Direction.UP,
    pygame.K_w:     Direction.UP,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d:     Direction.RIGHT,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_s:     Direction.DOWN,
}


class GameController:
    """
    Owns the main loop.
    Glues ViewModel <-> View without them knowing about each other.
    """

    def __init__(self, viewmodel: Optional[SnakeViewModel] = None):
        pygame.init()
        self.viewmodel = viewmodel or SnakeViewModel()
        self.screen    = pygame.display.set_mode(window_size(self.viewmodel))
        pygame.display.set_caption("Snake")
        self.clock     = pygame.time.Clock()
        self.view      = GameView(self.screen, self.viewmodel)

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        logger.info("Game loop started")
        while True:
            dt = self.clock.tick(FPS) / 1000.0
            self._handle_events()
            self.viewmodel.update(dt)
            self.view.render(self.viewmodel)

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handle_click(event.pos)

    def _handle_keydown(self, key: int) -> None:
        if key in (pygame.K_q, pygame.K_ESCAPE):
            self._quit()
        elif key in DIRECTION_KEYS:
            self._request_move(DIRECTION_KEYS[key])
        elif key == pygame.K_SPACE:
            self.viewmodel.toggle_auto()
        elif key == pygame.K_r:
            self.viewmodel.restart()

    def _handle_click(self, pos: tuple[int, int]) -> None:
        direction = self.view.button_at(pos)
        if direction is not None:
            self._request_move(direction)

    def _request_move(self, direction: Direction) -> None:
        # Disabled buttons ignore input, keys included
        if self.viewmodel.is_enabled(direction):
            self.viewmodel.move(direction)

    # ── Utilities ─────────────────────────────────────────────────
    @staticmethod
    def _quit() -> None:
        logger.info("Quit requested")
        pygame.quit()
        sys.exit()
