"""Render collaborator — folds session events into state the renderers can draw."""

from __future__ import annotations

from dataclasses import dataclass, field

from wordfall.models import (
    ClockUpdated,
    LetterSlotUpdated,
    LetterState,
    PositionUpdated,
    RenderEvent,
    ScoreUpdated,
    SessionEnded,
    SessionState,
    StateChanged,
    WordChanged,
)


@dataclass
class LetterSlot:
    char: str = ""
    state: LetterState = LetterState.EMPTY


@dataclass
class GameBoard:
    """Everything on screen, updated only through ``__call__``."""

    state: SessionState = SessionState.IDLE
    word: str = ""
    slots: list[LetterSlot] = field(default_factory=list)
    word_y: float = 0.0
    score: int = 0
    best_score: int = 0
    elapsed: float = 0.0
    throughput: float = 0.0
    final_score: int | None = None
    final_best: int | None = None

    def __call__(self, event: RenderEvent) -> None:
        if isinstance(event, StateChanged):
            self.state = event.state
            if event.state == SessionState.RUNNING:
                self.final_score = None
                self.final_best = None
            elif event.state == SessionState.IDLE:
                self.word = ""
                self.slots = []
                self.word_y = 0.0
        elif isinstance(event, WordChanged):
            self.word = event.word
            self.slots = [LetterSlot() for _ in range(event.slot_count)]
        elif isinstance(event, LetterSlotUpdated):
            if 0 <= event.index < len(self.slots):
                self.slots[event.index] = LetterSlot(event.char, event.state)
        elif isinstance(event, PositionUpdated):
            self.word_y = event.y
        elif isinstance(event, ScoreUpdated):
            self.score = event.score
            self.best_score = event.best_score
        elif isinstance(event, ClockUpdated):
            self.elapsed = event.elapsed
            self.throughput = event.throughput
        elif isinstance(event, SessionEnded):
            self.final_score = event.score
            self.final_best = event.best_score
            self.best_score = event.best_score
            self.elapsed = event.elapsed
            self.throughput = event.throughput

    @property
    def game_over(self) -> bool:
        return self.state == SessionState.OVER

    @property
    def time_text(self) -> str:
        total = int(self.elapsed)
        return f"{total // 60:02d}:{total % 60:02d}"

    @property
    def throughput_text(self) -> str:
        return f"{self.throughput:.2f}"
