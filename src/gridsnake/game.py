from __future__ import annotations

import logging

import pygame

from . import config
from .controls import Controller
from .engine import Engine
from .highscore import HighScoreStore
from .render import Renderer, window_size
from .scheduler import Ticker

logger = logging.getLogger(__name__)


def run(settings: config.Settings) -> int:
    """Open the window and play until the player quits. Returns the best score."""
    engine = Engine(grid_size=settings.grid_size, high_scores=HighScoreStore(settings.high_score_file))
    renderer = Renderer(settings.grid_size, settings.theme)
    engine.subscribe(renderer.update)
    renderer.update(engine.snapshot())

    ticker = Ticker(engine, settings.tick_ms)
    controller = Controller(engine, ticker, renderer, settings.difficulty, settings.tick_ms)

    pygame.init()
    pygame.display.set_caption("Snake")
    screen = pygame.display.set_mode(window_size(settings.grid_size))
    font = pygame.font.SysFont(None, 26)
    clock = pygame.time.Clock()

    try:
        running = True
        while running:
            running = controller.handle(pygame.event.get())
            ticker.advance(clock.get_time())
            renderer.draw(screen, font, controller.status_text())
            pygame.display.flip()
            clock.tick(config.FPS)
    finally:
        ticker.disarm()
        pygame.quit()

    logger.info("Exiting with score %d (best %d)", engine.score, engine.high_score)
    return engine.high_score
