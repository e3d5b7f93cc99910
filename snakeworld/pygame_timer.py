from __future__ import annotations

from typing import Optional

import pygame

from snakeworld.scheduler import TickCallback


class PygameScheduler:
    """Scheduler backed by ``pygame.time.set_timer``.

    Each instance owns one custom event type, so re-arming replaces the
    previous timer instead of adding a second one. The host loop must pass
    every event it pulls from the queue to :meth:`dispatch`.
    """

    def __init__(self, event_type: Optional[int] = None) -> None:
        self.event_type = event_type if event_type is not None else pygame.event.custom_type()
        self._callback: Optional[TickCallback] = None
        self._interval_ms: Optional[int] = None

    @property
    def armed(self) -> bool:
        return self._callback is not None

    @property
    def interval_ms(self) -> Optional[int]:
        return self._interval_ms

    def arm(self, interval_ms: int, callback: TickCallback) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.disarm()
        self._callback = callback
        self._interval_ms = interval_ms
        pygame.time.set_timer(self.event_type, interval_ms)

    def disarm(self) -> None:
        pygame.time.set_timer(self.event_type, 0)
        # drop ticks already queued by the old timer
        pygame.event.clear(self.event_type)
        self._callback = None
        self._interval_ms = None

    def dispatch(self, event) -> bool:
        """Run the tick callback if ``event`` is ours. Returns True when handled."""
        if event.type != self.event_type:
            return False
        if self._callback is not None:
            self._callback()
        return True
