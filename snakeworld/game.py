from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from snakeworld.config import EngineConfig, GridSize

Vec2 = Tuple[int, int]


def add_pos(a: Vec2, b: Vec2) -> Vec2:
    return a[0] + b[0], a[1] + b[1]


def opposite(a: Vec2, b: Vec2) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def vector(self) -> Vec2:
        return self.value

    def is_opposite(self, other: "Direction") -> bool:
        return opposite(self.value, other.value)

    @classmethod
    def parse(cls, value) -> Optional["Direction"]:
        """Accept a Direction or its name; return None for anything else."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


class GameStatus(str, Enum):
    READY = "READY"
    PLAYING = "PLAYING"
    PAUSED = "PAUSED"
    GAME_OVER = "GAME_OVER"


@dataclass(frozen=True)
class GameState:
    """Per-run simulation state. Head is ``snake[0]``."""

    snake: Tuple[Vec2, ...]
    food: Optional[Vec2]
    direction: Direction
    score: int
    speed: int

    @property
    def head(self) -> Vec2:
        return self.snake[0]

    @property
    def tail(self) -> Vec2:
        return self.snake[-1]


@dataclass(frozen=True)
class StepResult:
    state: GameState
    ate_food: bool
    collision: Optional[str]  # None, "wall" or "self"

    @property
    def done(self) -> bool:
        return self.collision is not None


def in_bounds(pos: Vec2, grid_size: "GridSize") -> bool:
    x, y = pos
    return 0 <= x < grid_size.cols and 0 <= y < grid_size.rows


def place_food(snake: Sequence[Vec2], grid_size: "GridSize", rng: random.Random) -> Optional[Vec2]:
    """Rejection-sample a uniformly random free cell.

    Returns None when the snake covers every cell of the grid.
    """
    occupied = set(snake)
    if len(occupied) >= grid_size.rows * grid_size.cols:
        return None
    while True:
        candidate = (rng.randrange(grid_size.cols), rng.randrange(grid_size.rows))
        if candidate not in occupied:
            return candidate


def initial_state(config: "EngineConfig", rng: random.Random) -> GameState:
    snake = tuple(tuple(cell) for cell in config.initial_snake)
    return GameState(
        snake=snake,
        food=place_food(snake, config.grid_size, rng),
        direction=config.initial_direction,
        score=0,
        speed=config.initial_speed_ms,
    )


def next_speed(score: int, speed: int, config: "EngineConfig") -> int:
    if score > 0 and score % config.speed_up_threshold_score == 0:
        # never slower than the current interval
        return min(speed, max(speed - config.speed_step_ms, config.min_speed_ms))
    return speed


def step(
    state: GameState,
    pending: Direction,
    config: "EngineConfig",
    rng: random.Random,
) -> StepResult:
    """Advance one tick.

    On collision the returned state keeps the pre-collision body and food;
    only the committed direction is updated.
    """
    committed = replace(state, direction=pending)
    new_head = add_pos(state.head, pending.vector)

    if not in_bounds(new_head, config.grid_size):
        return StepResult(state=committed, ate_food=False, collision="wall")

    # the tail vacates this tick unless food is eaten
    if new_head in state.snake[:-1]:
        return StepResult(state=committed, ate_food=False, collision="self")

    snake = (new_head,) + state.snake

    if new_head == state.food:
        score = state.score + config.score_per_food
        return StepResult(
            state=GameState(
                snake=snake,
                food=place_food(snake, config.grid_size, rng),
                direction=pending,
                score=score,
                speed=next_speed(score, state.speed, config),
            ),
            ate_food=True,
            collision=None,
        )

    return StepResult(
        state=replace(committed, snake=snake[:-1]),
        ate_food=False,
        collision=None,
    )
