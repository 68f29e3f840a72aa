"""Heads-up display — score, best score, elapsed time, letters per second."""

from __future__ import annotations

import pygame

from wordfall.board import GameBoard
from wordfall.renderer.colors import HUD_TEXT


def render_hud(surface: pygame.Surface, board: GameBoard, font: pygame.font.Font) -> None:
    parts = [
        f"Score: {board.score}",
        f"Best: {board.best_score}",
        f"Time: {board.time_text}",
        f"BPS: {board.throughput_text}",
    ]
    x = 10
    for part in parts:
        text = font.render(part, True, HUD_TEXT)
        surface.blit(text, (x, 20))
        x += text.get_width() + 32
