"""Map pygame key events onto session input events."""

from __future__ import annotations

import pygame

from wordfall.config import ALPHABET
from wordfall.models import Backspace, InputEvent, Letter, StartRequested, StopRequested

_CONTROL_KEYS: dict[int, InputEvent] = {
    pygame.K_BACKSPACE: Backspace(),
    pygame.K_DELETE: Backspace(),
    pygame.K_RETURN: StartRequested(),
    pygame.K_KP_ENTER: StartRequested(),
    pygame.K_ESCAPE: StopRequested(),
}


class KeyboardInput:
    """Translates KEYDOWN events; everything else maps to None."""

    def translate(self, event: pygame.event.Event) -> InputEvent | None:
        if event.type != pygame.KEYDOWN:
            return None
        if event.key in _CONTROL_KEYS:
            return _CONTROL_KEYS[event.key]
        ch = getattr(event, "unicode", "").lower()
        if len(ch) == 1 and ch in ALPHABET:
            return Letter(ch)
        return None
