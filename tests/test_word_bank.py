"""Tests for the word bank and word-list loading."""

import random

import pytest

from wordfall.config import ConfigError
from wordfall.word_bank import WordBank, load_words


def test_next_word_comes_from_vocabulary():
    bank = WordBank(["cat", "dog", "code"], rng=random.Random(7))
    for _ in range(50):
        assert bank.next_word() in {"cat", "dog", "code"}


def test_all_words_eventually_picked():
    bank = WordBank(["cat", "dog", "code"], rng=random.Random(1))
    seen = {bank.next_word() for _ in range(200)}
    assert seen == {"cat", "dog", "code"}


def test_empty_vocabulary_is_config_error():
    with pytest.raises(ConfigError):
        WordBank([])


def test_non_letter_word_is_config_error():
    with pytest.raises(ConfigError):
        WordBank(["cat", "Dog"])
    with pytest.raises(ConfigError):
        WordBank(["two words"])


def test_load_words_skips_blanks_and_comments(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("# animals\ncat\n\n  Dog  \n")
    assert load_words(path) == ("cat", "dog")


def test_load_words_rejects_bad_word(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat\nc4t\n")
    with pytest.raises(ConfigError, match=":2:"):
        load_words(path)


def test_load_words_missing_or_empty(tmp_path):
    with pytest.raises(ConfigError):
        load_words(tmp_path / "nope.txt")
    empty = tmp_path / "empty.txt"
    empty.write_text("# nothing here\n")
    with pytest.raises(ConfigError):
        load_words(empty)
