import os

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest

from snakeworld.config import EngineConfig, GridSize
from snakeworld.engine import SnakeEngine
from snakeworld.scheduler import ManualScheduler
from snakeworld.scores import InMemoryScoreSink


@pytest.fixture
def pygame_display():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def sink():
    return InMemoryScoreSink()


@pytest.fixture
def engine_factory(scheduler, sink):
    def make(**kwargs):
        config = EngineConfig(seed=123, **kwargs)
        return SnakeEngine(config, scheduler=scheduler, score_sink=sink)
    return make


@pytest.fixture
def small_config():
    # 5x5 grid, snake pointing at the right wall
    return dict(grid_size=GridSize(rows=5, cols=5), initial_snake=((2, 2), (1, 2), (0, 2)))

