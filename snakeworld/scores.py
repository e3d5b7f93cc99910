from __future__ import annotations

import logging
from typing import List, Protocol

logger = logging.getLogger(__name__)


class ScoreSink(Protocol):
    """Owner of the high score. The engine only reads it and reports improvements."""

    @property
    def high_score(self) -> int: ...

    def report_score(self, candidate: int) -> None: ...


class InMemoryScoreSink:
    """Keeps the best score for the lifetime of the process."""

    def __init__(self, high_score: int = 0) -> None:
        if high_score < 0:
            raise ValueError(f"high_score must not be negative, got {high_score}")
        self._high_score = high_score
        self.reports: List[int] = []

    @property
    def high_score(self) -> int:
        return self._high_score

    def report_score(self, candidate: int) -> None:
        self.reports.append(candidate)
        if candidate > self._high_score:
            logger.info("New high score: %s (was %s)", candidate, self._high_score)
            self._high_score = candidate
