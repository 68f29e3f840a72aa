"""Core data models shared across the engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Union


class SessionState(Enum):
    IDLE = auto()
    RUNNING = auto()
    OVER = auto()


class MatchResult(Enum):
    UNCHANGED = auto()  # prefix already full, letter dropped
    BUILDING = auto()
    COMPLETED = auto()
    MISMATCH = auto()


class LetterState(Enum):
    EMPTY = auto()
    CORRECT = auto()
    INCORRECT = auto()


class FallEvent(Enum):
    AIRBORNE = auto()
    FLOOR_REACHED = auto()
    GROUNDED = auto()  # floor already reported for this word


class FloorPolicy(Enum):
    STRICT = auto()   # floor contact ends the session
    LENIENT = auto()  # floor contact costs a point


class FloorOutcome(Enum):
    CONTINUE = auto()
    GAME_OVER = auto()


# --- Input events (input collaborator -> session) ---


@dataclass(frozen=True)
class Letter:
    char: str


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class StartRequested:
    pass


@dataclass(frozen=True)
class StopRequested:
    pass


InputEvent = Union[Letter, Backspace, StartRequested, StopRequested]


# --- Render events (session -> render collaborator) ---


@dataclass(frozen=True)
class StateChanged:
    state: SessionState


@dataclass(frozen=True)
class WordChanged:
    word: str
    slot_count: int


@dataclass(frozen=True)
class LetterSlotUpdated:
    index: int
    char: str  # "" when the slot was cleared
    state: LetterState


@dataclass(frozen=True)
class PositionUpdated:
    y: float


@dataclass(frozen=True)
class ScoreUpdated:
    score: int
    best_score: int


@dataclass(frozen=True)
class ClockUpdated:
    elapsed: float  # seconds
    throughput: float  # correct characters per second


@dataclass(frozen=True)
class SessionEnded:
    score: int
    best_score: int
    elapsed: float
    throughput: float


RenderEvent = Union[
    StateChanged,
    WordChanged,
    LetterSlotUpdated,
    PositionUpdated,
    ScoreUpdated,
    ClockUpdated,
    SessionEnded,
]

RenderListener = Callable[[RenderEvent], None]
