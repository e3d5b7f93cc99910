from __future__ import annotations

import argparse
import logging

import pygame

from snakeworld.board import render_text
from snakeworld.config import DEFAULT_COLS, EngineConfig, GridSize
from snakeworld.controls import SwipeTracker, key_direction
from snakeworld.engine import SnakeEngine
from snakeworld.game import GameStatus
from snakeworld.pygame_timer import PygameScheduler
from snakeworld.render import CELL_SIZE, Renderer, rows_for_viewport
from snakeworld.scores import InMemoryScoreSink

logger = logging.getLogger("snakeworld.play")

FRAME_RATE = 60


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake World")
    parser.add_argument("--rows", type=int, default=None, help="Grid rows (default: fit the display height)")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS)
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE)
    parser.add_argument("--speed", type=int, default=150, help="Initial tick interval in ms")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--high-score", type=int, default=0, help="High score to beat")
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args()


def toggle(engine: SnakeEngine) -> None:
    """Space bar: the single action button of the game screen."""
    if engine.status in (GameStatus.READY, GameStatus.GAME_OVER):
        engine.start()
    elif engine.status is GameStatus.PLAYING:
        engine.pause()
    elif engine.status is GameStatus.PAUSED:
        engine.resume()


def summary(engine: SnakeEngine) -> str:
    if engine.status is GameStatus.GAME_OVER:
        return f"Game over! Final score: {engine.score}  High score: {engine.high_score}"
    return f"Quit at score {engine.score}  High score: {engine.high_score}"


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    pygame.init()
    rows = args.rows
    if rows is None:
        height = pygame.display.Info().current_h
        rows = rows_for_viewport(height, args.cell_size) if height > 0 else 20

    config = EngineConfig(
        grid_size=GridSize(rows=rows, cols=args.cols),
        initial_speed_ms=args.speed,
        seed=args.seed,
    )
    logger.info("Grid %sx%s, %sms per tick", config.grid_size.cols, config.grid_size.rows, config.initial_speed_ms)

    renderer = Renderer(rows=rows, cols=args.cols, cell_size=args.cell_size)
    scheduler = PygameScheduler()
    sink = InMemoryScoreSink(high_score=args.high_score)
    swipe = SwipeTracker()
    clock = pygame.time.Clock()

    with SnakeEngine(config, scheduler=scheduler, score_sink=sink) as engine:
        running = True
        while running:
            for event in pygame.event.get():
                if scheduler.dispatch(event):
                    continue
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        toggle(engine)
                    elif event.key == pygame.K_r:
                        engine.reset()
                    else:
                        direction = key_direction(event.key)
                        if direction is not None:
                            engine.turn(direction)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    swipe.press(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP:
                    swipe.release()
                elif event.type == pygame.MOUSEMOTION:
                    direction = swipe.move(event.pos)
                    if direction is not None:
                        engine.turn(direction)

            renderer.draw(engine.snapshot())
            clock.tick(FRAME_RATE)

        logger.debug("Final board:\n%s", render_text(engine.snapshot()))
        print(summary(engine))

    pygame.quit()


if __name__ == "__main__":
    main()
