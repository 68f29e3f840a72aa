"""Letter boxes below the play area, one per letter of the falling word."""

from __future__ import annotations

import pygame

from wordfall.board import LetterSlot
from wordfall.models import LetterState
from wordfall.renderer.colors import SLOT_EMPTY, SLOT_FILLED, SLOT_TEXT, SLOT_WRONG

BOX_SIZE = 44
BOX_GAP = 8

_SLOT_COLORS = {
    LetterState.EMPTY: SLOT_EMPTY,
    LetterState.CORRECT: SLOT_FILLED,
    LetterState.INCORRECT: SLOT_WRONG,
}


def render_letters(surface: pygame.Surface, slots: list[LetterSlot], top: int, font: pygame.font.Font) -> None:
    if not slots:
        return
    total_w = len(slots) * BOX_SIZE + (len(slots) - 1) * BOX_GAP
    x = surface.get_width() // 2 - total_w // 2

    for slot in slots:
        rect = pygame.Rect(x, top, BOX_SIZE, BOX_SIZE)
        pygame.draw.rect(surface, _SLOT_COLORS[slot.state], rect, border_radius=6)
        if slot.char:
            text = font.render(slot.char.upper(), True, SLOT_TEXT)
            surface.blit(text, (rect.centerx - text.get_width() // 2, rect.centery - text.get_height() // 2))
        x += BOX_SIZE + BOX_GAP
