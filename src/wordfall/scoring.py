"""Score tracking — current and best score, best-score persistence, throughput."""

from __future__ import annotations

import logging
import time
from typing import Callable

from wordfall.config import LENIENT_SCORE_FLOOR, STORAGE_KEY_BEST_SCORE
from wordfall.models import FloorOutcome, FloorPolicy
from wordfall.storage import KeyValueStore

logger = logging.getLogger(__name__)


def parse_score(raw: str | None) -> int:
    """Parse a stored best score. Missing, malformed, or negative values read as 0."""
    if raw is None:
        return 0
    try:
        value = int(raw.strip(), 10)
    except (AttributeError, ValueError):
        return 0
    return max(0, value)


class ScoreTracker:
    """Owns the score of the running session and the best score across sessions.

    The best score is loaded once at construction and written back every time
    it is beaten, so nothing needs saving when a session is abandoned.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = STORAGE_KEY_BEST_SCORE,
        policy: FloorPolicy = FloorPolicy.STRICT,
        score_floor: int = LENIENT_SCORE_FLOOR,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._store = store
        self._key = key
        self.policy = policy
        self.score_floor = score_floor
        self._clock = clock
        self.score = 0
        self.correct_characters = 0
        self.started_at = clock()
        self.best_score = self.load_best()

    def start_session(self) -> None:
        self.score = 0
        self.correct_characters = 0
        self.started_at = self._clock()

    def on_word_completed(self) -> None:
        self.score += 1
        if self.score > self.best_score:
            self.best_score = self.score
            self.persist_best()

    def on_floor_reached(self) -> FloorOutcome:
        if self.policy == FloorPolicy.STRICT:
            return FloorOutcome.GAME_OVER
        self.score -= 1
        if self.score < self.score_floor:
            return FloorOutcome.GAME_OVER
        return FloorOutcome.CONTINUE

    def record_correct_character(self) -> None:
        self.correct_characters += 1

    def elapsed(self) -> float:
        return max(0.0, self._clock() - self.started_at)

    def throughput(self, elapsed: float) -> float:
        """Correct characters per second; 0.0 when no time has passed."""
        if elapsed <= 0:
            return 0.0
        return self.correct_characters / elapsed

    def load_best(self) -> int:
        try:
            raw = self._store.get(self._key)
        except Exception as exc:
            logger.warning("Could not load best score: %s", exc)
            return 0
        return parse_score(raw)

    def persist_best(self) -> None:
        try:
            self._store.set(self._key, str(self.best_score))
        except Exception as exc:
            logger.warning("Could not save best score %d: %s", self.best_score, exc)
