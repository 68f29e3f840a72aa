"""Tests for score tracking and best-score persistence."""

import pytest

from wordfall.models import FloorOutcome, FloorPolicy
from wordfall.scoring import ScoreTracker, parse_score
from wordfall.storage import MemoryStore


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


class BrokenStore:
    def get(self, key):
        raise OSError("disk on fire")

    def set(self, key, value):
        raise OSError("disk on fire")


@pytest.mark.parametrize("raw, expected", [
    (None, 0),
    ("12", 12),
    (" 7\n", 7),
    ("abc", 0),
    ("", 0),
    ("3.5", 0),
    ("-4", 0),
])
def test_parse_score(raw, expected):
    assert parse_score(raw) == expected


def test_corrupt_stored_best_loads_as_zero():
    tracker = ScoreTracker(MemoryStore({"best": "not a number"}), key="best")
    assert tracker.best_score == 0


def test_new_best_is_persisted():
    store = MemoryStore({"best": "1"})
    tracker = ScoreTracker(store, key="best")
    tracker.on_word_completed()
    assert store.get("best") == "1"
    tracker.on_word_completed()
    assert tracker.best_score == 2
    assert store.get("best") == "2"


def test_best_survives_new_session():
    tracker = ScoreTracker(MemoryStore())
    for _ in range(3):
        tracker.on_word_completed()
    tracker.start_session()
    assert tracker.score == 0
    assert tracker.best_score == 3
    tracker.on_word_completed()
    assert tracker.best_score == 3


def test_store_failures_are_swallowed():
    tracker = ScoreTracker(BrokenStore())
    assert tracker.best_score == 0
    tracker.on_word_completed()
    assert tracker.best_score == 1


def test_strict_floor_ends_game():
    tracker = ScoreTracker(MemoryStore(), policy=FloorPolicy.STRICT)
    tracker.on_word_completed()
    assert tracker.on_floor_reached() == FloorOutcome.GAME_OVER
    assert tracker.score == 1


def test_lenient_floor_costs_points_until_below_floor():
    tracker = ScoreTracker(MemoryStore(), policy=FloorPolicy.LENIENT, score_floor=-2)
    assert tracker.on_floor_reached() == FloorOutcome.CONTINUE  # -1
    assert tracker.on_floor_reached() == FloorOutcome.CONTINUE  # -2
    assert tracker.on_floor_reached() == FloorOutcome.GAME_OVER  # -3
    assert tracker.score == -3


def test_throughput():
    clock = FakeClock()
    tracker = ScoreTracker(MemoryStore(), clock=clock)
    tracker.start_session()
    assert tracker.throughput(tracker.elapsed()) == 0.0
    for _ in range(6):
        tracker.record_correct_character()
    clock.now += 4.0
    assert tracker.elapsed() == 4.0
    assert tracker.throughput(tracker.elapsed()) == 1.5
    assert tracker.throughput(0) == 0.0
