"""Game session — the Idle/Running/Over state machine that drives one play-through."""

from __future__ import annotations

import logging
import random
import time
from typing import Callable

from wordfall.config import ALPHABET, GameConfig
from wordfall.fall import FallController
from wordfall.matcher import TypingMatcher
from wordfall.models import (
    Backspace,
    ClockUpdated,
    FallEvent,
    FloorOutcome,
    InputEvent,
    Letter,
    MatchResult,
    RenderEvent,
    RenderListener,
    ScoreUpdated,
    SessionEnded,
    SessionState,
    StartRequested,
    StateChanged,
    StopRequested,
)
from wordfall.scheduler import TickScheduler
from wordfall.scoring import ScoreTracker
from wordfall.storage import KeyValueStore, MemoryStore
from wordfall.word_bank import WordBank

logger = logging.getLogger(__name__)


class GameSession:
    """Coordinates the word bank, matcher, fall controller and score tracker.

    All state lives on the instance, so independent sessions do not interfere.
    Presentation code subscribes to render events and feeds input events to
    ``handle()``; the frame loop calls ``update(dt)`` to run the periodic ticks.
    Input that is not valid in the current state is ignored.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: KeyValueStore | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = (config or GameConfig()).validate()
        self.words = WordBank(self.config.words, rng=rng)
        self.score = ScoreTracker(
            store if store is not None else MemoryStore(),
            key=self.config.storage_key,
            policy=self.config.policy,
            score_floor=self.config.score_floor,
            clock=clock,
        )
        self.scheduler = TickScheduler()
        self._listeners: list[RenderListener] = []
        self._state = SessionState.IDLE
        self.matcher: TypingMatcher | None = None
        self.fall: FallController | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    def subscribe(self, listener: RenderListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: RenderListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: RenderEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    def _set_state(self, state: SessionState) -> None:
        logger.debug("Session %s -> %s", self._state.name, state.name)
        self._state = state
        self._emit(StateChanged(state=state))

    # --- Transitions ---

    def start(self) -> bool:
        """Begin a fresh session from Idle or Over. Returns False if already running."""
        if self._state == SessionState.RUNNING:
            return False

        # Leftover ticks from an earlier session must never reach the new one.
        self.scheduler.cancel_all()

        cfg = self.config
        self.score.start_session()
        self.matcher = TypingMatcher(emit=self._emit, on_correct_letter=self.score.record_correct_character)
        self.fall = FallController(
            start_speed=cfg.start_speed,
            max_speed=cfg.max_speed,
            floor_y=cfg.floor_y,
            tolerance=cfg.floor_tolerance,
            emit=self._emit,
        )
        self._set_state(SessionState.RUNNING)
        self._emit(ScoreUpdated(score=self.score.score, best_score=self.score.best_score))
        self._emit(ClockUpdated(elapsed=0.0, throughput=0.0))
        self._spawn_word()

        self.scheduler.every(cfg.fall_interval_ms, self.tick_fall)
        self.scheduler.every(cfg.timer_interval_ms, self.tick_clock)
        return True

    def stop(self) -> bool:
        """Abandon the session and go back to Idle. Returns False if already idle."""
        if self._state == SessionState.IDLE:
            return False
        self.scheduler.cancel_all()
        self.matcher = None
        self.fall = None
        self._set_state(SessionState.IDLE)
        return True

    def _end(self) -> None:
        self.scheduler.cancel_all()
        elapsed = self.score.elapsed()
        self._set_state(SessionState.OVER)
        self._emit(SessionEnded(
            score=self.score.score,
            best_score=self.score.best_score,
            elapsed=elapsed,
            throughput=self.score.throughput(elapsed),
        ))
        logger.info("Game over: score %d, best %d", self.score.score, self.score.best_score)

    def _spawn_word(self) -> None:
        word = self.words.next_word()
        self.matcher.reset(word)
        self.fall.reset(self.config.start_offset)

    # --- Input ---

    def handle(self, event: InputEvent) -> None:
        if isinstance(event, Letter):
            self.type_letter(event.char)
        elif isinstance(event, Backspace):
            self.delete_letter()
        elif isinstance(event, StartRequested):
            self.start()
        elif isinstance(event, StopRequested):
            self.stop()

    def type_letter(self, ch: str) -> MatchResult:
        if self._state != SessionState.RUNNING:
            return MatchResult.UNCHANGED
        ch = ch.lower()
        if ch not in ALPHABET:
            return MatchResult.UNCHANGED

        result = self.matcher.append_letter(ch)
        if result == MatchResult.COMPLETED:
            self._on_word_completed()
        return result

    def delete_letter(self) -> None:
        if self._state == SessionState.RUNNING:
            self.matcher.delete_last_letter()

    def _on_word_completed(self) -> None:
        self.score.on_word_completed()
        self.fall.increase_speed(self.config.speed_increment)
        self._emit(ScoreUpdated(score=self.score.score, best_score=self.score.best_score))
        self._spawn_word()

    # --- Periodic ticks ---

    def update(self, dt: float) -> None:
        """Feed ``dt`` seconds of wall time to the periodic triggers."""
        self.scheduler.advance(dt)

    def tick_fall(self) -> FallEvent | None:
        if self._state != SessionState.RUNNING:
            return None
        event = self.fall.tick()
        if event == FallEvent.FLOOR_REACHED:
            self._on_floor_reached()
        return event

    def tick_clock(self) -> None:
        if self._state != SessionState.RUNNING:
            return
        elapsed = self.score.elapsed()
        self._emit(ClockUpdated(elapsed=elapsed, throughput=self.score.throughput(elapsed)))

    def _on_floor_reached(self) -> None:
        outcome = self.score.on_floor_reached()
        if outcome == FloorOutcome.GAME_OVER:
            self._end()
            return
        self._emit(ScoreUpdated(score=self.score.score, best_score=self.score.best_score))
        self._spawn_word()

    # --- Queries ---

    @property
    def current_word(self) -> str | None:
        return self.matcher.word if self.matcher else None

    @property
    def speed(self) -> float | None:
        return self.fall.speed if self.fall else None

    @property
    def position_y(self) -> float | None:
        return self.fall.position_y if self.fall else None
