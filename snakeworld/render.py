from __future__ import annotations

import pygame

from snakeworld.engine import Snapshot
from snakeworld.game import GameStatus

CELL_SIZE = 20
VIEWPORT_FRACTION = 0.75
HUD_HEIGHT = 28

BACKGROUND = (20, 20, 20)
GRID_LINE = (30, 30, 30)
HEAD_COLOR = (0, 200, 0)
BODY_COLOR = (0, 150, 0)
FOOD_COLOR = (200, 50, 50)
TEXT_COLOR = (230, 230, 230)

OVERLAY_TEXT = {
    GameStatus.READY: "Ready to play? Press Space",
    GameStatus.PAUSED: "Paused - Space to resume",
    GameStatus.GAME_OVER: "Game over! Space to play again",
}


def rows_for_viewport(height_px: int, cell_size: int = CELL_SIZE, fraction: float = VIEWPORT_FRACTION) -> int:
    """Grid rows that fit in ``fraction`` of the available height, at least one."""
    return max(1, int(height_px * fraction // cell_size))


class Renderer:
    def __init__(self, rows: int, cols: int, cell_size: int = CELL_SIZE, title: str = "Snake World") -> None:
        self.rows = rows
        self.cols = cols
        self.cell_size = cell_size

        width_px = cols * cell_size
        height_px = rows * cell_size + HUD_HEIGHT
        self._window = pygame.display.set_mode((width_px, height_px))
        pygame.display.set_caption(title)
        self._font = pygame.font.Font(None, 24)

    def _cell_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(
            x * self.cell_size,
            y * self.cell_size + HUD_HEIGHT,
            self.cell_size,
            self.cell_size,
        )

    def draw(self, snapshot: Snapshot) -> None:
        self._window.fill(BACKGROUND)
        for x in range(self.cols):
            for y in range(self.rows):
                pygame.draw.rect(self._window, GRID_LINE, self._cell_rect(x, y), 1)

        for i, (x, y) in enumerate(snapshot.snake):
            color = HEAD_COLOR if i == 0 else BODY_COLOR
            pygame.draw.rect(self._window, color, self._cell_rect(x, y))

        if snapshot.food is not None:
            pygame.draw.rect(self._window, FOOD_COLOR, self._cell_rect(*snapshot.food))

        hud = f"Score {snapshot.score}   High {snapshot.high_score}   {snapshot.speed}ms"
        self._blit_text(hud, (8, 6))

        overlay = OVERLAY_TEXT.get(snapshot.status)
        if overlay:
            surface = self._font.render(overlay, True, TEXT_COLOR)
            rect = surface.get_rect(center=self._window.get_rect().center)
            self._window.blit(surface, rect)

        pygame.display.flip()

    def _blit_text(self, text: str, pos) -> None:
        self._window.blit(self._font.render(text, True, TEXT_COLOR), pos)
