from __future__ import annotations

from typing import Callable, Optional, Protocol

TickCallback = Callable[[], None]


class Scheduler(Protocol):
    """Interval timer that calls back into the engine once per tick.

    Implementations hold at most one armed callback; arming again replaces it
    and restarts the period.
    """

    @property
    def armed(self) -> bool: ...

    @property
    def interval_ms(self) -> Optional[int]: ...

    def arm(self, interval_ms: int, callback: TickCallback) -> None: ...

    def disarm(self) -> None: ...


class ManualScheduler:
    """Virtual clock driven by explicit ``advance`` calls.

    Used by tests and headless runs; no real time passes.
    """

    def __init__(self) -> None:
        self._callback: Optional[TickCallback] = None
        self._interval_ms: Optional[int] = None
        self._elapsed_ms = 0
        self.arm_count = 0

    @property
    def armed(self) -> bool:
        return self._callback is not None

    @property
    def interval_ms(self) -> Optional[int]:
        return self._interval_ms

    def arm(self, interval_ms: int, callback: TickCallback) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self._callback = callback
        self._interval_ms = interval_ms
        self._elapsed_ms = 0
        self.arm_count += 1

    def disarm(self) -> None:
        self._callback = None
        self._interval_ms = None
        self._elapsed_ms = 0

    def fire(self) -> bool:
        """Run the armed callback once, ignoring elapsed time."""
        if self._callback is None:
            return False
        self._callback()
        return True

    def advance(self, elapsed_ms: int) -> int:
        """Let ``elapsed_ms`` pass and return how many ticks fired."""
        fired = 0
        self._elapsed_ms += elapsed_ms
        while self._callback is not None and self._elapsed_ms >= self._interval_ms:
            self._elapsed_ms -= self._interval_ms
            self._callback()
            fired += 1
        if self._callback is None:
            self._elapsed_ms = 0
        return fired
