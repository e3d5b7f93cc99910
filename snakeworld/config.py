from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from snakeworld.game import Direction, Vec2, add_pos


class ConfigError(ValueError):
    """Raised when an EngineConfig cannot describe a playable run."""


@dataclass(frozen=True)
class GridSize:
    rows: int = 20
    cols: int = 20

    @property
    def cells(self) -> int:
        return self.rows * self.cols


DEFAULT_COLS = 20
DEFAULT_SNAKE: Tuple[Vec2, ...] = ((8, 10), (7, 10), (6, 10))


@dataclass(frozen=True)
class EngineConfig:
    grid_size: GridSize = field(default_factory=GridSize)
    initial_snake: Tuple[Vec2, ...] = DEFAULT_SNAKE
    initial_direction: Direction = Direction.RIGHT

    # speed is a tick interval, lower is faster
    initial_speed_ms: int = 150
    speed_step_ms: int = 10
    min_speed_ms: int = 50

    score_per_food: int = 10
    speed_up_threshold_score: int = 50

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        # normalise lists from callers/CLI into hashable tuples
        object.__setattr__(
            self, "initial_snake", tuple(tuple(cell) for cell in self.initial_snake)
        )
        self.validate()

    def with_(self, **kwargs) -> "EngineConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

    def validate(self) -> None:
        rows, cols = self.grid_size.rows, self.grid_size.cols
        if rows <= 0 or cols <= 0:
            raise ConfigError(f"grid dimensions must be positive, got rows={rows} cols={cols}")
        if self.initial_speed_ms <= 0:
            raise ConfigError(f"initial_speed_ms must be positive, got {self.initial_speed_ms}")
        if self.min_speed_ms <= 0:
            raise ConfigError(f"min_speed_ms must be positive, got {self.min_speed_ms}")
        if self.min_speed_ms > self.initial_speed_ms:
            raise ConfigError(
                f"min_speed_ms ({self.min_speed_ms}) must not exceed initial_speed_ms ({self.initial_speed_ms})"
            )
        if self.speed_step_ms < 0:
            raise ConfigError(f"speed_step_ms must not be negative, got {self.speed_step_ms}")
        if self.score_per_food <= 0:
            raise ConfigError(f"score_per_food must be positive, got {self.score_per_food}")
        if self.speed_up_threshold_score <= 0:
            raise ConfigError(
                f"speed_up_threshold_score must be positive, got {self.speed_up_threshold_score}"
            )
        if not isinstance(self.initial_direction, Direction):
            raise ConfigError(f"initial_direction must be a Direction, got {self.initial_direction!r}")

        snake = self.initial_snake
        if not snake:
            raise ConfigError("initial_snake needs at least one cell")
        for x, y in snake:
            if not (0 <= x < cols and 0 <= y < rows):
                raise ConfigError(f"initial_snake cell {(x, y)} is outside a {cols}x{rows} grid")
        if len(set(snake)) != len(snake):
            raise ConfigError("initial_snake contains duplicate cells")
        if len(snake) >= self.grid_size.cells:
            raise ConfigError("initial_snake leaves no free cell for food")
        if len(snake) > 1:
            if add_pos(snake[0], self.initial_direction.vector) == snake[1]:
                raise ConfigError("initial_direction points back into the snake's body")
