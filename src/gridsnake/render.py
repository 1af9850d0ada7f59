from __future__ import annotations

import pygame

from . import config
from .state import GameStatus, Snapshot


def window_size(grid_size: int = config.GRID_SIZE) -> tuple[int, int]:
    return (grid_size * config.CELL, grid_size * config.CELL + config.HUD_HEIGHT)


def _cell_rect(x: int, y: int, top: int) -> pygame.Rect:
    return pygame.Rect(x * config.CELL, top + y * config.CELL, config.CELL, config.CELL)


def draw_board(surface: pygame.Surface, snap: Snapshot, palette: dict, grid_size: int, top: int = 0) -> None:
    board = pygame.Rect(0, top, grid_size * config.CELL, grid_size * config.CELL)
    surface.fill(palette["background"], board)

    for i in range(1, grid_size):
        px = i * config.CELL
        pygame.draw.line(surface, palette["grid"], (px, top), (px, board.bottom - 1))
        pygame.draw.line(surface, palette["grid"], (0, top + px), (board.right - 1, top + px))

    for x, y in snap.obstacles:
        pygame.draw.rect(surface, palette["obstacle"], _cell_rect(x, y, top), border_radius=4)

    if snap.food is not None:
        fx, fy = snap.food
        pygame.draw.rect(surface, palette["food"], _cell_rect(fx, fy, top).inflate(-6, -6), border_radius=6)

    for i, (x, y) in enumerate(snap.snake):
        color = palette["head"] if i == 0 else palette["snake"]
        pygame.draw.rect(surface, color, _cell_rect(x, y, top).inflate(-2, -2))


def draw_hud(surface: pygame.Surface, font: pygame.font.Font, snap: Snapshot, palette: dict, info: str = "") -> None:
    bar = pygame.Rect(0, 0, surface.get_width(), config.HUD_HEIGHT)
    surface.fill(palette["background"], bar)
    text = f"Score: {snap.score}   Best: {snap.high_score}   {snap.difficulty.value}"
    if info:
        text = f"{text}   {info}"
    label = font.render(text, True, palette["text"])
    surface.blit(label, label.get_rect(midleft=(10, bar.centery)))


def _overlay_lines(snap: Snapshot) -> list[str]:
    if snap.status is GameStatus.IDLE:
        return ["SNAKE", "Space to start", "1/2/3 difficulty  T theme  -/= speed"]
    if snap.status is GameStatus.PAUSED:
        return ["Paused", "P to resume"]
    if snap.status is GameStatus.GAME_OVER:
        return ["Game Over", f"Final score: {snap.score}", "Space to play again"]
    return []


def draw_overlay(surface: pygame.Surface, font: pygame.font.Font, snap: Snapshot, palette: dict) -> None:
    lines = _overlay_lines(snap)
    if not lines:
        return
    shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    shade.fill((0, 0, 0, 150))
    surface.blit(shade, (0, 0))

    line_h = font.get_linesize() + 6
    y = surface.get_height() // 2 - line_h * len(lines) // 2
    for line in lines:
        label = font.render(line, True, palette["text"])
        surface.blit(label, label.get_rect(center=(surface.get_width() // 2, y + line_h // 2)))
        y += line_h


class Renderer:
    """Keeps the latest snapshot and paints it. Never touches the engine."""

    def __init__(self, grid_size: int = config.GRID_SIZE, theme: str = config.DEFAULT_THEME):
        self.grid_size = grid_size
        self.theme = theme
        self.snapshot: Snapshot | None = None

    @property
    def palette(self) -> dict:
        return config.THEMES[self.theme]

    def update(self, snap: Snapshot) -> None:
        self.snapshot = snap

    def draw(self, screen: pygame.Surface, font: pygame.font.Font, info: str = "") -> None:
        if self.snapshot is None:
            return
        draw_hud(screen, font, self.snapshot, self.palette, info)
        draw_board(screen, self.snapshot, self.palette, self.grid_size, top=config.HUD_HEIGHT)
        draw_overlay(screen, font, self.snapshot, self.palette)
