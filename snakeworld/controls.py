from __future__ import annotations

from typing import Dict, Optional

import pygame

from snakeworld.game import Direction

KEY_BINDINGS: Dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

SWIPE_THRESHOLD_PX = 10


def key_direction(key: int) -> Optional[Direction]:
    return KEY_BINDINGS.get(key)


def swipe_direction(dx: float, dy: float, threshold: float = SWIPE_THRESHOLD_PX) -> Optional[Direction]:
    """Resolve a drag from start to end (screen coordinates, y grows downward).

    The dominant axis wins; moves at or under ``threshold`` pixels are ignored.
    """
    if abs(dx) > abs(dy):
        if dx > threshold:
            return Direction.RIGHT
        if dx < -threshold:
            return Direction.LEFT
        return None
    if dy > threshold:
        return Direction.DOWN
    if dy < -threshold:
        return Direction.UP
    return None


class SwipeTracker:
    """Turns mouse or finger drags into at most one direction per gesture."""

    def __init__(self, threshold: float = SWIPE_THRESHOLD_PX) -> None:
        self.threshold = threshold
        self._origin = None

    def press(self, pos) -> None:
        self._origin = pos

    def release(self) -> None:
        self._origin = None

    def move(self, pos) -> Optional[Direction]:
        if self._origin is None:
            return None
        direction = swipe_direction(pos[0] - self._origin[0], pos[1] - self._origin[1], self.threshold)
        if direction is not None:
            # one gesture, one turn
            self._origin = None
        return direction
