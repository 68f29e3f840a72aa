"""Vocabulary of falling words."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Iterable

from wordfall.config import ConfigError, is_word


class WordBank:
    """Fixed vocabulary that yields uniformly random words."""

    def __init__(self, words: Iterable[str], rng: random.Random | None = None) -> None:
        self._words = tuple(words)
        if not self._words:
            raise ConfigError("vocabulary must contain at least one word")
        for word in self._words:
            if not is_word(word):
                raise ConfigError(f"invalid word {word!r}: expected lowercase letters a-z")
        self._rng = rng or random.Random()

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def next_word(self) -> str:
        return self._rng.choice(self._words)


def load_words(path: str | Path) -> tuple[str, ...]:
    """Read a word list: one word per line, blank lines and ``#`` comments skipped.

    Words are lower-cased. Raises ConfigError if the file cannot be read, holds a
    non-letter word, or has no words at all.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read word list {path}: {exc}") from exc

    words: list[str] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        word = line.strip().lower()
        if not word or word.startswith("#"):
            continue
        if not is_word(word):
            raise ConfigError(f"{path}:{lineno}: invalid word {word!r}")
        words.append(word)

    if not words:
        raise ConfigError(f"word list {path} is empty")
    return tuple(words)
