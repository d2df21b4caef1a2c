"""Tests for the pygame view, drawn onto an off-screen surface."""

import pygame
import pytest

from gridsnake.config import (
    OFFSET_X, OFFSET_Y, BG, SNAKE_COL, HEAD_COL, BUTTON_COL, BUTTON_OFF,
)
from gridsnake.model import Direction
from gridsnake.view import GameView, window_size


@pytest.fixture
def view(viewmodel):
    pygame.font.init()
    screen = pygame.Surface(window_size(viewmodel))
    return GameView(screen, viewmodel)


def _pixel(view, x, y):
    return tuple(view.screen.get_at((x, y)))[:3]


class TestLayout:
    def test_window_size(self, viewmodel):
        width, height = window_size(viewmodel)
        assert width == 350 + 2 * OFFSET_X
        assert height > 350 + 2 * OFFSET_Y

    def test_buttons_below_board(self, view, viewmodel):
        board_bottom = OFFSET_Y + viewmodel.board_height
        assert set(view.button_rects) == {
            Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN,
        }
        for rect in view.button_rects.values():
            assert rect.top > board_bottom
            assert view.screen.get_rect().contains(rect)

    def test_button_at(self, view):
        for direction, rect in view.button_rects.items():
            assert view.button_at(rect.center) == direction
        assert view.button_at((0, 0)) is None


class TestDraw:
    def test_snake_drawn_on_board(self, view, viewmodel):
        view.draw(viewmodel)
        hx, hy = viewmodel.engine.head
        assert _pixel(view, OFFSET_X + hx + 10, OFFSET_Y + hy + 10) == HEAD_COL
        tx, ty = viewmodel.segments[-1]
        assert _pixel(view, OFFSET_X + tx + 10, OFFSET_Y + ty + 10) == SNAKE_COL

    def test_empty_cell_shows_background(self, view, viewmodel):
        view.draw(viewmodel)
        assert _pixel(view, OFFSET_X + 25, OFFSET_Y + 25) == BG

    def test_button_colours_follow_state(self, view, viewmodel):
        view.draw(viewmodel)
        left = view.button_rects[Direction.LEFT]
        up = view.button_rects[Direction.UP]
        assert _pixel(view, left.x + 8, left.y + 8) == BUTTON_OFF
        assert _pixel(view, up.x + 8, up.y + 8) == BUTTON_COL

    def test_board_redrawn_after_move(self, view, viewmodel):
        view.draw(viewmodel)
        cached = view._board_surf
        view.draw(viewmodel)
        assert view._board_surf is cached

        viewmodel.move(Direction.UP)
        view.draw(viewmodel)
        assert view._board_surf is not cached
        assert _pixel(view, OFFSET_X + 250 + 10, OFFSET_Y + 100 + 10) == HEAD_COL
