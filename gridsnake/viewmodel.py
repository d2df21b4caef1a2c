"""
viewmodel.py — Orchestration between input and the model.

Responsibilities:
  - Hold the SnakeEngine for the current game.
  - Apply the no-reversal rule before changing direction.
  - Compute which direction buttons are usable from the current head.
  - Drive optional timed auto-advance and restart.

Knows nothing about pygame.
"""

import logging
from typing import Optional

from .config import CELL, ROWS, COLS, SNAKE_LENGTH, AUTO_STEP_SPEED
from .grid import GridModel
from .model import ALL_DIRS, Direction, SnakeEngine

logger = logging.getLogger(__name__)


class SnakeViewModel:
    """
    Presentation state for one game.

    Each move request turns the snake (unless that would reverse it) and
    advances it a single cell, then refreshes the button states.
    """

    def __init__(self, engine: Optional[SnakeEngine] = None,
                 auto_speed: float = AUTO_STEP_SPEED):
        if engine is None:
            engine = SnakeEngine(GridModel(CELL, ROWS, COLS), SNAKE_LENGTH)
        self.engine = engine
        self.auto: bool = False
        self.auto_speed = auto_speed
        self.step_timer: float = 0.0
        self.button_states: dict[Direction, bool] = {}
        self._update_button_states()

    # ── Read-only projections ────────────────────────────────────
    @property
    def grid(self) -> GridModel:
        return self.engine.grid

    @property
    def board_width(self) -> int:
        return self.engine.grid.width

    @property
    def board_height(self) -> int:
        return self.engine.grid.height

    @property
    def segments(self):
        return self.engine.segments

    def is_enabled(self, direction: Direction) -> bool:
        return self.button_states.get(direction, False)

    # ── Commands ─────────────────────────────────────────────────
    def move(self, direction: Direction) -> bool:
        """
        Turn towards `direction` unless it is the reverse of the current
        heading, then step once. Returns True if the snake moved.
        """
        if direction.is_opposite(self.engine.direction):
            logger.debug("Ignoring reversal from %r to %r",
                         self.engine.direction, direction)
        else:
            self.engine.set_direction(direction)
        moved = self.engine.step()
        self._update_button_states()
        return moved

    def advance(self) -> bool:
        """
        Step once in the current direction, only while that direction is
        enabled. A wall or body cell ahead holds the snake in place.
        """
        self._update_button_states()
        if not self.is_enabled(self.engine.direction):
            return False
        moved = self.engine.step()
        self._update_button_states()
        return moved

    def restart(self) -> None:
        self.engine.reset()
        self.auto = False
        self.step_timer = 0.0
        self._update_button_states()

    def toggle_auto(self) -> None:
        self.auto = not self.auto
        self.step_timer = 0.0
        logger.info("Auto-advance %s", "on" if self.auto else "off")

    def update(self, dt: float) -> None:
        """Advance by dt seconds. Only moves while auto-advance is on."""
        if not self.auto or self.auto_speed <= 0:
            return
        interval = 1.0 / self.auto_speed
        self.step_timer += dt
        while self.step_timer >= interval:
            self.step_timer -= interval
            self.advance()

    # ── Private helpers ──────────────────────────────────────────
    def _update_button_states(self) -> None:
        engine = self.engine
        current = engine.direction
        states = {}
        for d in ALL_DIRS:
            nx, ny = engine.next_position(d)
            states[d] = (
                not engine.is_out_of_bounds(nx, ny)
                and not d.is_opposite(current)
                and not engine.is_collision_with_body(nx, ny)
            )
        self.button_states = states
