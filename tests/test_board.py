import numpy as np

from snakeworld.board import BODY, FOOD, HEAD, encode_planes, free_cells, render_text
from snakeworld.config import EngineConfig, GridSize
from snakeworld.engine import SnakeEngine


def make_snapshot():
    config = EngineConfig(grid_size=GridSize(rows=6, cols=8), initial_snake=((3, 2), (2, 2), (1, 2)), seed=4)
    return SnakeEngine(config).snapshot()


def test_planes_mark_body_head_and_food():
    snap = make_snapshot()
    planes = encode_planes(snap)

    assert planes.shape == (3, 6, 8)
    assert planes.dtype == np.float32
    assert planes[HEAD, 2, 3] == 1.0
    assert planes[HEAD].sum() == 1.0
    assert planes[BODY].sum() == 3.0
    fx, fy = snap.food
    assert planes[FOOD, fy, fx] == 1.0
    assert planes[FOOD].sum() == 1.0


def test_free_cells():
    assert free_cells(make_snapshot()) == 6 * 8 - 3


def test_render_text():
    snap = make_snapshot()
    lines = render_text(snap).splitlines()

    assert len(lines) == 7
    assert lines[2].split()[1:4] == ["o", "o", "H"]
    assert sum(line.count("F") for line in lines[:6]) == 1
    assert lines[-1].startswith("score=0")
    assert "status=READY" in lines[-1]
