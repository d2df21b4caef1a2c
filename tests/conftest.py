import os

# Headless pygame for the view and controller tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from gridsnake.grid import GridModel
from gridsnake.model import SnakeEngine
from gridsnake.viewmodel import SnakeViewModel


@pytest.fixture
def grid():
    """The board the game ships with: 7x7 cells of 50px."""
    return GridModel(50, 7, 7)


@pytest.fixture
def engine(grid):
    return SnakeEngine(grid, 5)


@pytest.fixture
def viewmodel(engine):
    return SnakeViewModel(engine, auto_speed=4)
