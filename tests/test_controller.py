"""Tests for GameController input handling (headless SDL)."""

import pygame
import pytest

from gridsnake.controller import GameController
from gridsnake.model import Direction


@pytest.fixture
def controller(viewmodel):
    ctrl = GameController(viewmodel)
    yield ctrl
    pygame.display.quit()


class TestKeys:
    def test_arrow_moves_snake(self, controller):
        controller._handle_keydown(pygame.K_UP)
        assert controller.viewmodel.engine.head == (250, 100)

    def test_wasd_moves_snake(self, controller):
        controller._handle_keydown(pygame.K_d)
        assert controller.viewmodel.engine.head == (300, 150)

    def test_disabled_direction_ignored(self, controller):
        start = controller.viewmodel.segments
        controller._handle_keydown(pygame.K_LEFT)
        assert controller.viewmodel.segments == start
        assert controller.viewmodel.engine.direction == Direction.NONE

    def test_restart(self, controller):
        start = controller.viewmodel.segments
        controller._handle_keydown(pygame.K_UP)
        controller._handle_keydown(pygame.K_r)
        assert controller.viewmodel.segments == start

    def test_space_toggles_auto(self, controller):
        controller._handle_keydown(pygame.K_SPACE)
        assert controller.viewmodel.auto is True

    def test_quit(self, controller):
        with pytest.raises(SystemExit):
            controller._handle_keydown(pygame.K_q)


class TestClicks:
    def test_click_on_button(self, controller):
        rect = controller.view.button_rects[Direction.DOWN]
        controller._handle_click(rect.center)
        assert controller.viewmodel.engine.head == (250, 200)

    def test_click_outside_buttons(self, controller):
        start = controller.viewmodel.segments
        controller._handle_click((1, 1))
        assert controller.viewmodel.segments == start

    def test_click_on_disabled_button(self, controller):
        start = controller.viewmodel.segments
        rect = controller.view.button_rects[Direction.LEFT]
        controller._handle_click(rect.center)
        assert controller.viewmodel.segments == start
