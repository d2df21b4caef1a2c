"""
model.py — Model layer.

Owns the snake state and its movement rules. Zero rendering, zero input
handling. The view-model reads and drives it through the public API below.

Classes:
    Direction    — immutable (dx, dy) value object, NONE means stationary
    SnakeEngine  — segment positions, current direction, step and queries
"""

import logging
from typing import Callable

from .errors import InvalidSnakeLength
from .grid import GridModel

logger = logging.getLogger(__name__)

Position = tuple[int, int]


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    NONE  = None  # filled below after class definition
    LEFT  = None
    UP    = None
    RIGHT = None
    DOWN  = None

    __slots__ = ("x", "y", "name")

    def __init__(self, x: int, y: int, name: str = ""):
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "name", name)

    def __setattr__(self, attr, value):
        raise AttributeError(f"Direction is immutable, cannot set {attr!r}")

    def is_opposite(self, other: "Direction") -> bool:
        return not self.is_none and self.opposite() == other

    @property
    def is_none(self) -> bool:
        return self.x == 0 and self.y == 0

    def opposite(self) -> "Direction":
        for d in ALL_DIRS:
            if d.x == -self.x and d.y == -self.y:
                return d
        return Direction.NONE

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction.{self.name}" if self.name else f"Direction({self.x}, {self.y})"


Direction.NONE  = Direction( 0,  0, "NONE")
Direction.LEFT  = Direction(-1,  0, "LEFT")
Direction.UP    = Direction( 0, -1, "UP")
Direction.RIGHT = Direction( 1,  0, "RIGHT")
Direction.DOWN  = Direction( 0,  1, "DOWN")
ALL_DIRS = [Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN]


# ───────────────────────── SnakeEngine ───────────────────────────
class SnakeEngine:
    """
    Live snake on a GridModel.

    Segments are pixel-aligned positions (multiples of grid.cell_size), head
    first. Every state change bumps `version` and notifies subscribers so a
    view can redraw without holding on to the internal segment list.
    """

    def __init__(self, grid: GridModel, initial_length: int):
        if (isinstance(initial_length, bool) or not isinstance(initial_length, int)
                or not 2 <= initial_length <= grid.cols):
            raise InvalidSnakeLength(initial_length, grid.cols)
        self._grid = grid
        self._length = initial_length
        self._segments: list[Position] = []
        self._direction: Direction = Direction.NONE
        self._version: int = 0
        self._listeners: list[Callable[["SnakeEngine"], None]] = []
        self._layout()
        logger.info("Snake of length %d created on %r", initial_length, grid)

    # ── Accessors ────────────────────────────────────────────────
    @property
    def grid(self) -> GridModel:
        return self._grid

    @property
    def length(self) -> int:
        return self._length

    @property
    def segments(self) -> tuple[Position, ...]:
        """Snapshot of the segment positions, head first."""
        return tuple(self._segments)

    @property
    def head(self) -> Position:
        return self._segments[0]

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def version(self) -> int:
        return self._version

    # ── Change notification ──────────────────────────────────────
    def subscribe(self, callback: Callable[["SnakeEngine"], None]) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: Callable[["SnakeEngine"], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _changed(self) -> None:
        self._version += 1
        for callback in list(self._listeners):
            callback(self)

    # ── Commands ─────────────────────────────────────────────────
    def set_direction(self, direction: Direction) -> None:
        """
        Replace the current direction. No reversal guard is applied here;
        refusing a 180° turn is the caller's policy.
        """
        if direction != self._direction:
            self._direction = direction
            self._changed()

    def step(self) -> bool:
        """
        Advance one cell in the current direction.
        Returns True if the snake moved, False if it is stationary or the
        move would leave the grid (the move is suppressed, not fatal).
        Self-collision is not checked here.
        """
        if self._direction.is_none:
            return False

        nx, ny = self.next_position(self._direction)
        if self.is_out_of_bounds(nx, ny):
            logger.debug("Move %r to (%d, %d) suppressed: out of bounds",
                         self._direction, nx, ny)
            return False

        segments = self._segments
        for i in range(self._length - 1, 0, -1):
            segments[i] = segments[i - 1]
        segments[0] = (nx, ny)
        self._changed()
        return True

    def reset(self) -> None:
        """Put the snake back in its start layout, stationary."""
        self._layout()
        self._changed()
        logger.info("Snake reset to start layout")

    # ── Queries ──────────────────────────────────────────────────
    def next_position(self, direction: Direction) -> Position:
        hx, hy = self.head
        cell = self._grid.cell_size
        return hx + direction.x * cell, hy + direction.y * cell

    def is_out_of_bounds(self, x: int, y: int) -> bool:
        return x < 0 or x >= self._grid.width or y < 0 or y >= self._grid.height

    def is_collision_with_body(self, x: int, y: int) -> bool:
        """True if (x, y) is occupied by any segment except the head."""
        for i in range(1, self._length):
            if self._segments[i] == (x, y):
                return True
        return False

    # ── Private helpers ──────────────────────────────────────────
    def _layout(self) -> None:
        grid = self._grid
        cell = grid.cell_size
        start = (grid.cols + self._length - 1) // 2
        y = (grid.rows // 2) * cell
        self._segments = [
            (max(0, (start - i) * cell), y) for i in range(self._length)
        ]
        self._direction = Direction.NONE

    def __repr__(self):
        return (f"SnakeEngine(length={self._length}, head={self.head}, "
                f"direction={self._direction!r})")
