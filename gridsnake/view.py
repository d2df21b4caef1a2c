"""
view.py — View layer.

  - Pre-rendered grid surface built from GridModel.compute_grid_lines()
    (solid border, dashed interior lines)
  - Board surface cached and rebuilt only when the engine version changes
  - Snake segments slightly smaller than a cell, darker glowing head
  - Four direction buttons under the board, greyed out when disabled

Public API:
    GameView(screen, viewmodel)  — bind to a pygame surface
    view.draw(viewmodel)         — draw the current frame
    view.render(viewmodel)       — draw and flip the display
    view.button_at(pos)          — direction button under a screen point
"""

import logging
from typing import Optional

import pygame

from .config import (
    MARGIN, OFFSET_X, OFFSET_Y, BUTTON_SIZE, BUTTON_GAP, PANEL_H,
    BG, GRID_COL, SNAKE_COL, HEAD_COL, HEAD_GLOW,
    BUTTON_COL, BUTTON_OFF, BUTTON_TEXT, UI_COL,
    SEGMENT_SCALE, DASH_PATTERN, HEAD_GLOW_RADIUS,
)
from .grid import GridLine
from .model import Direction
from .viewmodel import SnakeViewModel

logger = logging.getLogger(__name__)


def window_size(viewmodel: SnakeViewModel) -> tuple[int, int]:
    """Window size needed to show the board plus the button panel."""
    return (viewmodel.board_width + 2 * MARGIN,
            viewmodel.board_height + 2 * MARGIN + PANEL_H)


# ─────────────────────── drawing helpers ─────────────────────────
def _with_alpha(color: tuple, alpha: int) -> tuple:
    return (*color[:3], max(0, min(255, alpha)))


def _draw_dashed_line(surf: pygame.Surface, color: tuple, line: GridLine,
                      pattern: tuple[int, int] = DASH_PATTERN) -> None:
    dash, gap = pattern
    if line.vertical:
        start, end = line.y1, line.y2
    else:
        start, end = line.x1, line.x2
    pos = start
    while pos < end:
        stop = min(pos + dash, end)
        if line.vertical:
            pygame.draw.line(surf, color, (line.x1, pos), (line.x1, stop - 1))
        else:
            pygame.draw.line(surf, color, (pos, line.y1), (stop - 1, line.y1))
        pos = stop + gap


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the board and the direction buttons from a SnakeViewModel."""

    # ── Construction ─────────────────────────────────────────────
    def __init__(self, screen: pygame.Surface, viewmodel: SnakeViewModel):
        self.screen = screen
        self._init_fonts()
        self._build_static_surfaces(viewmodel)
        self._layout_buttons(viewmodel)
        self._board_surf: Optional[pygame.Surface] = None
        self._board_version: int = -1

    # ── Main entry ───────────────────────────────────────────────
    def draw(self, viewmodel: SnakeViewModel) -> None:
        engine = viewmodel.engine
        if self._board_surf is None or self._board_version != engine.version:
            self._board_surf = self._build_board(viewmodel)
            self._board_version = engine.version

        self.screen.fill(BG)
        self.screen.blit(self._board_surf, (OFFSET_X, OFFSET_Y))
        self._draw_buttons(viewmodel)
        self._draw_hint(viewmodel)

    def render(self, viewmodel: SnakeViewModel) -> None:
        self.draw(viewmodel)
        pygame.display.flip()

    def button_at(self, pos: tuple[int, int]) -> Optional[Direction]:
        for direction, rect in self.button_rects.items():
            if rect.collidepoint(pos):
                return direction
        return None

    # ── Static surface pre-builds ─────────────────────────────────
    def _build_static_surfaces(self, viewmodel: SnakeViewModel) -> None:
        grid = viewmodel.grid
        # One extra pixel so the right/bottom border lines are visible
        self._grid_surf = pygame.Surface((grid.width + 1, grid.height + 1),
                                         pygame.SRCALPHA)
        for line in grid.compute_grid_lines():
            if line.dashed:
                _draw_dashed_line(self._grid_surf, GRID_COL, line)
            else:
                pygame.draw.line(self._grid_surf, GRID_COL,
                                 (line.x1, line.y1), (line.x2, line.y2))

        r = HEAD_GLOW_RADIUS
        glow = pygame.Surface((grid.cell_size + 2 * r, grid.cell_size + 2 * r),
                              pygame.SRCALPHA)
        for i in range(r, 0, -2):
            a = int(70 * (1 - i / r) ** 1.5)
            pygame.draw.rect(glow, _with_alpha(HEAD_GLOW, a),
                             (r - i, r - i, grid.cell_size + 2 * i, grid.cell_size + 2 * i),
                             border_radius=i)
        self._glow_surf = glow

    def _layout_buttons(self, viewmodel: SnakeViewModel) -> None:
        cx = OFFSET_X + viewmodel.board_width // 2
        top = OFFSET_Y + viewmodel.board_height + MARGIN
        step = BUTTON_SIZE + BUTTON_GAP
        half = BUTTON_SIZE // 2
        self.button_rects: dict[Direction, pygame.Rect] = {
            Direction.UP:    pygame.Rect(cx - half,        top,            BUTTON_SIZE, BUTTON_SIZE),
            Direction.LEFT:  pygame.Rect(cx - half - step, top + step,     BUTTON_SIZE, BUTTON_SIZE),
            Direction.RIGHT: pygame.Rect(cx - half + step, top + step,     BUTTON_SIZE, BUTTON_SIZE),
            Direction.DOWN:  pygame.Rect(cx - half,        top + 2 * step, BUTTON_SIZE, BUTTON_SIZE),
        }

    # ── Board ────────────────────────────────────────────────────
    def _build_board(self, viewmodel: SnakeViewModel) -> pygame.Surface:
        grid = viewmodel.grid
        r = HEAD_GLOW_RADIUS
        surf = pygame.Surface((grid.width + 1, grid.height + 1), pygame.SRCALPHA)
        surf.blit(self._grid_surf, (0, 0))

        segments = viewmodel.segments
        size = int(grid.cell_size * SEGMENT_SCALE)
        hx, hy = segments[0]
        surf.blit(self._glow_surf, (hx - r, hy - r))
        # Tail first so the head is drawn on top
        for i in range(len(segments) - 1, -1, -1):
            sx, sy = segments[i]
            color = HEAD_COL if i == 0 else SNAKE_COL
            pygame.draw.rect(surf, color, (sx, sy, size, size))
        return surf

    # ── Buttons ──────────────────────────────────────────────────
    def _draw_buttons(self, viewmodel: SnakeViewModel) -> None:
        for direction, rect in self.button_rects.items():
            enabled = viewmodel.is_enabled(direction)
            pygame.draw.rect(self.screen, BUTTON_COL if enabled else BUTTON_OFF,
                             rect, border_radius=6)
            self._draw_arrow(rect, direction, BUTTON_TEXT)

    def _draw_arrow(self, rect: pygame.Rect, direction: Direction, color: tuple) -> None:
        cx, cy = rect.center
        s = rect.width // 4
        dx, dy = direction.x, direction.y
        px, py = -dy, dx  # perpendicular
        tip = (cx + dx * s, cy + dy * s)
        left = (cx - dx * s + px * s, cy - dy * s + py * s)
        right = (cx - dx * s - px * s, cy - dy * s - py * s)
        pygame.draw.polygon(self.screen, color, (tip, left, right))

    def _draw_hint(self, viewmodel: SnakeViewModel) -> None:
        mode = "AUTO" if viewmodel.auto else "STEP"
        text = f"{mode}  |  SPACE AUTO  R RESTART  Q QUIT"
        surf = self.font_small.render(text, True, UI_COL)
        bottom = self.screen.get_height() - MARGIN // 2
        self.screen.blit(surf, surf.get_rect(midbottom=(self.screen.get_width() // 2, bottom)))

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self.font_small = pygame.font.SysFont("courier", 12, bold=True)
        except (pygame.error, OSError) as exc:
            logger.warning("System font unavailable, using default: %s", exc)
            self.font_small = pygame.font.Font(None, 14)
