"""Tests for the render-state board."""

from wordfall.board import GameBoard
from wordfall.models import (
    ClockUpdated,
    LetterSlotUpdated,
    LetterState,
    PositionUpdated,
    ScoreUpdated,
    SessionEnded,
    SessionState,
    StateChanged,
    WordChanged,
)


def test_word_change_creates_empty_slots():
    board = GameBoard()
    board(WordChanged(word="code", slot_count=4))
    assert board.word == "code"
    assert len(board.slots) == 4
    assert all(s.state == LetterState.EMPTY for s in board.slots)


def test_slot_updates_out_of_range_ignored():
    board = GameBoard()
    board(WordChanged(word="cat", slot_count=3))
    board(LetterSlotUpdated(index=2, char="t", state=LetterState.CORRECT))
    board(LetterSlotUpdated(index=7, char="z", state=LetterState.INCORRECT))
    assert board.slots[2].char == "t"
    assert len(board.slots) == 3


def test_time_and_throughput_text():
    board = GameBoard()
    board(ClockUpdated(elapsed=125.9, throughput=2.456))
    assert board.time_text == "02:05"
    assert board.throughput_text == "2.46"


def test_game_over_and_restart():
    board = GameBoard()
    board(StateChanged(SessionState.RUNNING))
    board(PositionUpdated(y=120.0))
    board(ScoreUpdated(score=4, best_score=9))
    board(StateChanged(SessionState.OVER))
    board(SessionEnded(score=4, best_score=9, elapsed=30.0, throughput=1.2))
    assert board.game_over
    assert (board.final_score, board.final_best) == (4, 9)

    board(StateChanged(SessionState.RUNNING))
    assert not board.game_over
    assert board.final_score is None


def test_idle_clears_word():
    board = GameBoard()
    board(WordChanged(word="cat", slot_count=3))
    board(PositionUpdated(y=50.0))
    board(StateChanged(SessionState.IDLE))
    assert board.word == ""
    assert board.slots == []
    assert board.word_y == 0.0
