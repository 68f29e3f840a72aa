"""Play area with the falling word."""

from __future__ import annotations

import pygame

from wordfall.config import PLAY_AREA_HEIGHT, PLAY_AREA_WIDTH, WINDOW_WIDTH, WORD_HEIGHT
from wordfall.renderer.colors import PLAY_AREA, PLAY_AREA_BORDER, WORD_TEXT

PLAY_AREA_X = (WINDOW_WIDTH - PLAY_AREA_WIDTH) // 2
PLAY_AREA_Y = 70


def play_area_rect() -> pygame.Rect:
    return pygame.Rect(PLAY_AREA_X, PLAY_AREA_Y, PLAY_AREA_WIDTH, PLAY_AREA_HEIGHT)


def render_play_area(surface: pygame.Surface, word: str, word_y: float, font: pygame.font.Font) -> None:
    """Draw the play area and the word at ``word_y`` pixels below its top edge."""
    area = play_area_rect()
    pygame.draw.rect(surface, PLAY_AREA, area)
    pygame.draw.rect(surface, PLAY_AREA_BORDER, area, width=2)

    if not word:
        return

    text = font.render(word.upper(), True, WORD_TEXT)
    x = area.centerx - text.get_width() // 2
    y = area.y + int(word_y) + (WORD_HEIGHT - text.get_height()) // 2

    # Words spawned above the top edge are clipped, not drawn over the HUD.
    previous_clip = surface.get_clip()
    surface.set_clip(area)
    surface.blit(text, (x, y))
    surface.set_clip(previous_clip)
