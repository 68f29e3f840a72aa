"""Main menu with the best score and a how-to-play overlay."""

from __future__ import annotations

import pygame

from wordfall.config import WINDOW_TITLE
from wordfall.renderer import colors as colors_mod
from wordfall.views.base import ViewAction, ViewContext

GUIDELINES = [
    "A word falls down the play area.",
    "Type its letters before it reaches the bottom.",
    "Green boxes are right, red boxes are wrong.",
    "Backspace deletes the last letter.",
    "Every finished word scores a point and speeds things up.",
]


class MenuView:
    name = "menu"

    def __init__(self) -> None:
        self._context: ViewContext | None = None
        self._show_guidelines = False
        self._font: pygame.font.Font | None = None
        self._title_font: pygame.font.Font | None = None

    def on_enter(self, context: ViewContext) -> None:
        self._context = context
        self._show_guidelines = False

    def on_exit(self) -> None:
        pass

    def handle_event(self, event: pygame.event.Event) -> ViewAction | None:
        if event.type != pygame.KEYDOWN:
            return None

        if self._show_guidelines:
            if event.key in (pygame.K_ESCAPE, pygame.K_g, pygame.K_RETURN):
                self._show_guidelines = False
            return None

        if event.key == pygame.K_ESCAPE:
            return ViewAction(kind="quit")
        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            return ViewAction(kind="switch", target="game")
        if event.key == pygame.K_g:
            self._show_guidelines = True
        return None

    def update(self, dt: float) -> ViewAction | None:
        return None

    def draw(self, surface: pygame.Surface) -> None:
        if self._context is None:
            return
        if self._font is None or self._title_font is None:
            self._font = pygame.font.SysFont("monospace", 20)
            self._title_font = pygame.font.SysFont("monospace", 48, bold=True)

        surface.fill(colors_mod.BG)
        w, h = surface.get_size()

        title = self._title_font.render(WINDOW_TITLE, True, colors_mod.ACCENT)
        surface.blit(title, (w // 2 - title.get_width() // 2, 120))

        best = self._font.render(
            f"Best score: {self._context.session.score.best_score}", True, colors_mod.HUD_TEXT
        )
        surface.blit(best, (w // 2 - best.get_width() // 2, 220))

        legend = self._font.render("Enter: start | G: how to play | Esc: quit", True, colors_mod.DIM_TEXT)
        surface.blit(legend, (w // 2 - legend.get_width() // 2, h - 60))

        if self._show_guidelines:
            self._draw_guidelines(surface)

    def _draw_guidelines(self, surface: pygame.Surface) -> None:
        w, h = surface.get_size()
        shade = pygame.Surface((w, h), pygame.SRCALPHA)
        shade.fill(colors_mod.OVERLAY)
        surface.blit(shade, (0, 0))

        y = h // 2 - len(GUIDELINES) * 16
        for line in GUIDELINES + ["", "Esc: close"]:
            text = self._font.render(line, True, colors_mod.HUD_TEXT)
            surface.blit(text, (w // 2 - text.get_width() // 2, y))
            y += 32
