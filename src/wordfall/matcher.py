"""Input matching — compare the player's typed letters to the falling word."""

from __future__ import annotations

from typing import Callable

from wordfall.models import LetterSlotUpdated, LetterState, MatchResult, RenderListener, WordChanged


class TypingMatcher:
    """Stateful matcher for the word currently falling.

    Letters are appended until the typed prefix is as long as the word; after
    that further letters are dropped until one is deleted. A full-length prefix
    that differs from the word stays as typed.
    """

    def __init__(
        self,
        emit: RenderListener | None = None,
        on_correct_letter: Callable[[], None] | None = None,
    ) -> None:
        self._emit = emit
        self._on_correct_letter = on_correct_letter
        self._word = ""
        self._typed: list[str] = []

    @property
    def word(self) -> str:
        return self._word

    @property
    def typed(self) -> str:
        return "".join(self._typed)

    def reset(self, word: str) -> None:
        self._word = word
        self._typed = []
        if self._emit:
            self._emit(WordChanged(word=word, slot_count=len(word)))

    def append_letter(self, ch: str) -> MatchResult:
        if len(self._typed) >= len(self._word):
            return MatchResult.UNCHANGED

        index = len(self._typed)
        self._typed.append(ch)
        state = self.letter_state(index)
        if state == LetterState.CORRECT and self._on_correct_letter:
            self._on_correct_letter()
        if self._emit:
            self._emit(LetterSlotUpdated(index=index, char=ch, state=state))

        if len(self._typed) < len(self._word):
            return MatchResult.BUILDING
        if self.typed == self._word:
            return MatchResult.COMPLETED
        return MatchResult.MISMATCH

    def delete_last_letter(self) -> None:
        if not self._typed:
            return
        self._typed.pop()
        if self._emit:
            self._emit(LetterSlotUpdated(index=len(self._typed), char="", state=LetterState.EMPTY))

    def letter_state(self, index: int) -> LetterState:
        if index >= len(self._typed):
            return LetterState.EMPTY
        if self._typed[index] == self._word[index]:
            return LetterState.CORRECT
        return LetterState.INCORRECT

    def letter_states(self) -> list[LetterState]:
        return [self.letter_state(i) for i in range(len(self._word))]
