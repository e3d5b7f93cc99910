from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from snakeworld.config import EngineConfig, GridSize
from snakeworld.game import Direction, GameState, GameStatus, Vec2, initial_state, step
from snakeworld.scheduler import ManualScheduler, Scheduler
from snakeworld.scores import ScoreSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Vec2, ...]
    food: Optional[Vec2]
    direction: Direction
    pending_direction: Direction
    score: int
    high_score: int
    speed: int
    status: GameStatus
    grid_size: GridSize


class SnakeEngine:
    """Tick-driven snake state machine.

    READY -> PLAYING <-> PAUSED -> GAME_OVER -> (start) PLAYING.

    The engine owns one scheduler and keeps it armed exactly while the status
    is PLAYING. Control calls that do not apply to the current status are
    ignored. Collisions end the run; they are not errors.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        scheduler: Optional[Scheduler] = None,
        score_sink: Optional[ScoreSink] = None,
    ) -> None:
        self.config = config if config is not None else EngineConfig()
        self.scheduler = scheduler if scheduler is not None else ManualScheduler()
        self.score_sink = score_sink
        self.random = random.Random(self.config.seed)

        self._status = GameStatus.READY
        self._high_score = 0
        self._state: GameState = initial_state(self.config, self.random)
        self._pending: Direction = self._state.direction
        self.last_collision: Optional[str] = None

    # --- read side ---

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def speed(self) -> int:
        return self._state.speed

    @property
    def direction(self) -> Direction:
        return self._state.direction

    @property
    def pending_direction(self) -> Direction:
        return self._pending

    @property
    def high_score(self) -> int:
        """The sink's record when one is attached, otherwise the engine's own."""
        if self.score_sink is None:
            return self._high_score
        return self.score_sink.high_score

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=self._state.snake,
            food=self._state.food,
            direction=self._state.direction,
            pending_direction=self._pending,
            score=self._state.score,
            high_score=self.high_score,
            speed=self._state.speed,
            status=self._status,
            grid_size=self.config.grid_size,
        )

    # --- controls ---

    def start(self) -> None:
        if self._status not in (GameStatus.READY, GameStatus.GAME_OVER):
            logger.debug("start() ignored while %s", self._status.value)
            return
        self.reset()
        self._status = GameStatus.PLAYING
        self._arm()
        logger.info("Run started at %sms per tick", self._state.speed)

    def pause(self) -> None:
        if self._status is not GameStatus.PLAYING:
            logger.debug("pause() ignored while %s", self._status.value)
            return
        self._disarm()
        self._status = GameStatus.PAUSED
        logger.info("Paused at score %s", self._state.score)

    def resume(self) -> None:
        if self._status is not GameStatus.PAUSED:
            logger.debug("resume() ignored while %s", self._status.value)
            return
        self._status = GameStatus.PLAYING
        self._arm()
        logger.info("Resumed at %sms per tick", self._state.speed)

    def reset(self) -> None:
        """Start the run state over. Status is left to the caller."""
        self._disarm()
        self._state = initial_state(self.config, self.random)
        self._pending = self._state.direction
        self.last_collision = None
        if self._status is GameStatus.PLAYING:
            self._arm()

    def turn(self, direction: Union[Direction, str]) -> None:
        parsed = Direction.parse(direction)
        if parsed is None:
            logger.debug("turn() ignored unknown direction %r", direction)
            return
        if self._status is not GameStatus.PLAYING:
            return
        if parsed.is_opposite(self._state.direction):
            return
        self._pending = parsed

    def set_food(self, cell: Vec2) -> None:
        """Put the food on a chosen free cell, e.g. for scripted levels or replays."""
        cell = tuple(cell)
        x, y = cell
        grid = self.config.grid_size
        if not (0 <= x < grid.cols and 0 <= y < grid.rows):
            raise ValueError(f"food cell {cell} is outside a {grid.cols}x{grid.rows} grid")
        if cell in self._state.snake:
            raise ValueError(f"food cell {cell} is on the snake")
        self._state = replace(self._state, food=cell)

    def tick(self) -> None:
        if self._status is not GameStatus.PLAYING:
            return

        previous_speed = self._state.speed
        result = step(self._state, self._pending, self.config, self.random)
        self._state = result.state

        if result.done:
            self._end_run(result.collision)
            return

        if self._state.speed != previous_speed:
            logger.info("Speed up: %sms -> %sms at score %s", previous_speed, self._state.speed, self._state.score)
            self._arm()

    def close(self) -> None:
        self._disarm()

    def __enter__(self) -> "SnakeEngine":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --- internals ---

    def _arm(self) -> None:
        self._disarm()
        self.scheduler.arm(self._state.speed, self.tick)

    def _disarm(self) -> None:
        if self.scheduler.armed:
            self.scheduler.disarm()

    def _end_run(self, reason: Optional[str]) -> None:
        self._disarm()
        self._status = GameStatus.GAME_OVER
        self.last_collision = reason
        score = self._state.score
        logger.info("Game over (%s collision), score %s", reason, score)

        if score <= self.high_score:
            return
        if self.score_sink is None:
            self._high_score = score
        else:
            self.score_sink.report_score(score)
