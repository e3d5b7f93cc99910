from __future__ import annotations

import numpy as np

from snakeworld.engine import Snapshot

BODY, HEAD, FOOD = 0, 1, 2


def encode_planes(snapshot: Snapshot) -> np.ndarray:
    """Occupancy planes of shape (3, rows, cols): body, head, food."""
    h, w = snapshot.grid_size.rows, snapshot.grid_size.cols
    planes = np.zeros((3, h, w), dtype=np.float32)

    for x, y in snapshot.snake:
        planes[BODY, y, x] = 1.0

    head_x, head_y = snapshot.snake[0]
    planes[HEAD, head_y, head_x] = 1.0

    if snapshot.food is not None:
        food_x, food_y = snapshot.food
        planes[FOOD, food_y, food_x] = 1.0

    return planes


def free_cells(snapshot: Snapshot) -> int:
    planes = encode_planes(snapshot)
    return int(planes[BODY].size - np.count_nonzero(planes[BODY]))


def render_text(snapshot: Snapshot) -> str:
    """
    Plain text board, row 0 at the top:
    . = empty, F = food, H = head, o = body
    """
    planes = encode_planes(snapshot)
    board = np.full(planes.shape[1:], ".", dtype="<U1")
    board[planes[BODY] > 0] = "o"
    board[planes[FOOD] > 0] = "F"
    board[planes[HEAD] > 0] = "H"

    lines = [" ".join(row) for row in board]
    lines.append(
        f"score={snapshot.score} high={snapshot.high_score} "
        f"speed={snapshot.speed}ms status={snapshot.status.value}"
    )
    return "\n".join(lines)
