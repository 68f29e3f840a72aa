"""Top-level application: initializes pygame, manages screens, and runs the game loop."""

from __future__ import annotations

import logging

import pygame

from wordfall.board import GameBoard
from wordfall.config import FPS, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH, GameConfig
from wordfall.keyboard_input import KeyboardInput
from wordfall.session import GameSession
from wordfall.storage import KeyValueStore, MemoryStore
from wordfall.views.base import ViewContext, ViewManager
from wordfall.views.game_view import GameView
from wordfall.views.menu_view import MenuView

logger = logging.getLogger(__name__)


class App:
    def __init__(self, config: GameConfig | None = None, persist: bool = True) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        # A broken best-score file must not keep the game from starting
        store = self._try_store() if persist else None
        self.session = GameSession(config, store=store or MemoryStore())
        self.board = GameBoard(best_score=self.session.score.best_score)
        self.session.subscribe(self.board)

        context = ViewContext(
            screen_size=(WINDOW_WIDTH, WINDOW_HEIGHT),
            session=self.session,
            board=self.board,
            keyboard_input=KeyboardInput(),
        )

        self.views = ViewManager(context)
        self.views.register(MenuView)
        self.views.register(GameView)

        # Start on the menu
        self.views.push("menu")

    def run(self) -> None:
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif not self.views.handle_event(event):
                    running = False
            if running:
                if not self.views.update(dt):
                    running = False
            self.views.draw(self.screen)
            pygame.display.flip()

        self._cleanup()
        pygame.quit()

    def _cleanup(self) -> None:
        while self.views.active_view:
            self.views.pop()
        self.session.stop()

    @staticmethod
    def _try_store() -> KeyValueStore | None:
        try:
            from wordfall.storage import JsonFileStore
            return JsonFileStore()
        except Exception as exc:
            logger.warning("Best score will not be saved: %s", exc)
            return None
