import pygame
import pytest

from snakeworld.pygame_timer import PygameScheduler
from snakeworld.scheduler import ManualScheduler


def test_manual_scheduler_fires_per_interval():
    ticks = []
    scheduler = ManualScheduler()
    scheduler.arm(100, lambda: ticks.append(1))

    assert scheduler.advance(250) == 2
    assert scheduler.advance(50) == 1
    assert len(ticks) == 3


def test_manual_scheduler_disarm_stops_ticks():
    ticks = []
    scheduler = ManualScheduler()
    scheduler.arm(100, lambda: ticks.append(1))
    scheduler.disarm()

    assert not scheduler.armed
    assert scheduler.interval_ms is None
    assert scheduler.advance(1000) == 0
    assert not scheduler.fire()
    assert ticks == []


def test_rearm_from_callback_restarts_period():
    scheduler = ManualScheduler()

    def tick():
        scheduler.arm(50, tick)

    scheduler.arm(100, tick)
    assert scheduler.advance(120) == 1
    assert scheduler.interval_ms == 50
    assert scheduler.advance(50) == 1


def test_arm_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        ManualScheduler().arm(0, lambda: None)


@pytest.fixture
def timer_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(pygame.time, "set_timer", lambda event, millis: calls.append((event, millis)))
    monkeypatch.setattr(pygame.event, "clear", lambda *args, **kwargs: None)
    return calls


def test_pygame_scheduler_replaces_timer(timer_calls):
    event_type = pygame.USEREVENT + 1
    scheduler = PygameScheduler(event_type)

    scheduler.arm(150, lambda: None)
    scheduler.arm(140, lambda: None)
    assert timer_calls == [(event_type, 0), (event_type, 150), (event_type, 0), (event_type, 140)]
    assert scheduler.interval_ms == 140

    scheduler.disarm()
    assert timer_calls[-1] == (event_type, 0)
    assert not scheduler.armed


def test_pygame_scheduler_dispatch(timer_calls):
    event_type = pygame.USEREVENT + 2
    ticks = []
    scheduler = PygameScheduler(event_type)
    scheduler.arm(100, lambda: ticks.append(1))

    assert scheduler.dispatch(pygame.event.Event(event_type))
    assert not scheduler.dispatch(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
    assert ticks == [1]

    # a tick queued before disarm is swallowed
    scheduler.disarm()
    assert scheduler.dispatch(pygame.event.Event(event_type))
    assert ticks == [1]
