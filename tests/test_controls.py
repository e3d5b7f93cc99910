import pygame

from snakeworld.controls import SwipeTracker, key_direction, swipe_direction
from snakeworld.game import Direction


def test_arrow_and_wasd_keys():
    assert key_direction(pygame.K_UP) is Direction.UP
    assert key_direction(pygame.K_w) is Direction.UP
    assert key_direction(pygame.K_s) is Direction.DOWN
    assert key_direction(pygame.K_LEFT) is Direction.LEFT
    assert key_direction(pygame.K_d) is Direction.RIGHT
    assert key_direction(pygame.K_SPACE) is None


def test_swipe_uses_dominant_axis():
    assert swipe_direction(20, 3) is Direction.RIGHT
    assert swipe_direction(-20, 15) is Direction.LEFT
    assert swipe_direction(4, 30) is Direction.DOWN
    assert swipe_direction(-3, -30) is Direction.UP


def test_short_swipes_are_ignored():
    assert swipe_direction(5, 3) is None
    assert swipe_direction(0, -10) is None


def test_tracker_emits_one_turn_per_gesture():
    tracker = SwipeTracker()
    assert tracker.move((50, 50)) is None

    tracker.press((100, 100))
    assert tracker.move((104, 102)) is None
    assert tracker.move((100, 130)) is Direction.DOWN
    assert tracker.move((100, 200)) is None

    tracker.press((100, 100))
    tracker.release()
    assert tracker.move((0, 100)) is None
