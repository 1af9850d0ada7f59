from __future__ import annotations

import logging

import pygame

from . import config
from .state import DOWN, LEFT, RIGHT, UP, Difficulty, GameStatus

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}
KEY_DIFFICULTY = {
    pygame.K_1: Difficulty.EASY,
    pygame.K_2: Difficulty.NORMAL,
    pygame.K_3: Difficulty.HARD,
}
START_KEYS = (pygame.K_SPACE, pygame.K_RETURN)
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


class Controller:
    """Turns pygame events into engine commands.

    Difficulty and speed picked here are held until the next start (speed
    also applies on resume); the running game is never changed underneath.
    """

    def __init__(self, engine, ticker, renderer, difficulty=Difficulty.EASY, speed_ms: int = config.TICK_MS):
        self.engine = engine
        self.ticker = ticker
        self.renderer = renderer
        self.difficulty = Difficulty.parse(difficulty)
        self.speed_ms = speed_ms

    def start(self) -> None:
        self.engine.start(self.difficulty)
        self.ticker.arm(self.speed_ms)

    def toggle_pause(self) -> None:
        if not self.engine.toggle_pause():
            return
        if self.engine.status is GameStatus.RUNNING:
            self.ticker.arm(self.speed_ms)

    def cycle_theme(self) -> None:
        names = list(config.THEMES)
        i = names.index(self.renderer.theme)
        self.renderer.theme = names[(i + 1) % len(names)]

    def change_speed(self, faster: bool) -> None:
        presets = sorted(config.SPEEDS.values(), reverse=True)
        if faster:
            options = [ms for ms in presets if ms < self.speed_ms]
            self.speed_ms = options[0] if options else self.speed_ms
        else:
            options = [ms for ms in reversed(presets) if ms > self.speed_ms]
            self.speed_ms = options[0] if options else self.speed_ms
        logger.debug("Tick interval for next start/resume: %d ms", self.speed_ms)

    def status_text(self) -> str:
        parts = [f"{self.speed_ms}ms", self.renderer.theme]
        if self.difficulty is not self.engine.difficulty:
            parts.insert(0, f"next: {self.difficulty.value}")
        return "   ".join(parts)

    def handle(self, events) -> bool:
        """Apply a batch of events. Returns False once the player asks to quit."""
        for event in events:
            if event.type == pygame.QUIT:
                return False
            if event.type != pygame.KEYDOWN:
                continue

            key = event.key
            if key in QUIT_KEYS:
                return False
            if key in KEY_DIRECTIONS:
                self.engine.set_direction(KEY_DIRECTIONS[key])
            elif key in START_KEYS:
                self.start()
            elif key == pygame.K_p:
                self.toggle_pause()
            elif key in KEY_DIFFICULTY:
                self.difficulty = KEY_DIFFICULTY[key]
            elif key == pygame.K_t:
                self.cycle_theme()
            elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                self.change_speed(faster=False)
            elif key in (pygame.K_EQUALS, pygame.K_KP_PLUS):
                self.change_speed(faster=True)
        return True
