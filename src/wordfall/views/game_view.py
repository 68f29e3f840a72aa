"""Gameplay view: falling word, letter boxes, HUD, and the game-over overlay."""

from __future__ import annotations

import pygame

from wordfall.models import Letter, StartRequested, StopRequested
from wordfall.renderer import colors as colors_mod
from wordfall.renderer.hud import render_hud
from wordfall.renderer.letters import render_letters
from wordfall.renderer.play_area import play_area_rect, render_play_area
from wordfall.views.base import ViewAction, ViewContext


class GameView:
    name = "game"

    def __init__(self) -> None:
        self._context: ViewContext | None = None
        self._font: pygame.font.Font | None = None
        self._word_font: pygame.font.Font | None = None

    def on_enter(self, context: ViewContext) -> None:
        self._context = context
        context.session.start()

    def on_exit(self) -> None:
        if self._context:
            self._context.session.stop()

    def handle_event(self, event: pygame.event.Event) -> ViewAction | None:
        ctx = self._context
        if ctx is None:
            return None

        action = ctx.keyboard_input.translate(event)
        if action is None:
            return None

        if isinstance(action, StopRequested):
            return ViewAction(kind="switch", target="menu")
        if ctx.board.game_over and action == Letter("m"):
            return ViewAction(kind="switch", target="menu")
        if isinstance(action, StartRequested) and not ctx.board.game_over:
            return None
        ctx.session.handle(action)
        return None

    def update(self, dt: float) -> ViewAction | None:
        if self._context:
            self._context.session.update(dt)
        return None

    def draw(self, surface: pygame.Surface) -> None:
        ctx = self._context
        if ctx is None:
            return
        if self._font is None or self._word_font is None:
            self._font = pygame.font.SysFont("monospace", 20)
            self._word_font = pygame.font.SysFont("monospace", 32, bold=True)

        board = ctx.board
        surface.fill(colors_mod.BG)
        render_hud(surface, board, self._font)
        render_play_area(surface, board.word, board.word_y, self._word_font)
        render_letters(surface, board.slots, play_area_rect().bottom + 30, self._word_font)

        legend = self._font.render("Esc: back to menu", True, colors_mod.DIM_TEXT)
        surface.blit(legend, (10, surface.get_height() - 34))

        if board.game_over:
            self._draw_game_over(surface)

    def _draw_game_over(self, surface: pygame.Surface) -> None:
        board = self._context.board
        w, h = surface.get_size()
        shade = pygame.Surface((w, h), pygame.SRCALPHA)
        shade.fill(colors_mod.OVERLAY)
        surface.blit(shade, (0, 0))

        title = self._word_font.render("Game Over", True, colors_mod.SLOT_WRONG)
        y = h // 2 - 110
        surface.blit(title, (w // 2 - title.get_width() // 2, y))

        lines = [
            (f"Score: {board.final_score}", colors_mod.HUD_TEXT),
            (f"Best: {board.final_best}", colors_mod.HUD_TEXT),
            (f"Time: {board.time_text}   BPS: {board.throughput_text}", colors_mod.HUD_TEXT),
            ("Enter: play again | M: menu", colors_mod.DIM_TEXT),
        ]
        y += 60
        for line, color in lines:
            text = self._font.render(line, True, color)
            surface.blit(text, (w // 2 - text.get_width() // 2, y))
            y += 44
