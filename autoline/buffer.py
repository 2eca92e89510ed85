"""Autocorrect buffer — accumulates keystrokes, corrects words at boundaries."""
import logging
from dataclasses import dataclass
from typing import Optional

from autoline.dictionary import Dictionary

logger = logging.getLogger(__name__)

WORD_DELIMITERS = set(' ,:;')
SENTENCE_DELIMITERS = set('.?!')


@dataclass
class CorrectionEntry:
    original: str   # what the user typed
    corrected: str  # what was committed instead


class AutocorrectBuffer:
    """Committed text plus the word currently being typed.

    When a delimiter is typed the pending word is corrected against the
    dictionary and committed together with the delimiter. The first word
    of a sentence longer than one letter is capitalized.
    """

    def __init__(self, dictionary: Dictionary):
        self._dictionary = dictionary
        self._committed: list[str] = []
        self._pending: list[str] = []
        self._capitalize_next = True
        self.last_correction: Optional[CorrectionEntry] = None

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    @property
    def committed(self) -> str:
        return ''.join(self._committed)

    @property
    def pending(self) -> str:
        return ''.join(self._pending)

    @property
    def capitalize_next(self) -> bool:
        return self._capitalize_next

    def insert_char(self, char: str):
        """Add a typed character, committing the pending word on a delimiter."""
        if char in WORD_DELIMITERS:
            self._commit(char, sentence_end=False)
        elif char in SENTENCE_DELIMITERS:
            self._commit(char, sentence_end=True)
        else:
            self._pending.append(char)

    def delete_char(self):
        """Backspace: pending word first, then raw committed text."""
        if self._pending:
            self._pending.pop()
        elif self._committed:
            self._committed.pop()

    def delete_word(self):
        """Drop the pending word, or the last space-delimited chunk of committed text."""
        if self._pending:
            self._pending.clear()
            return

        spaces = 0
        while self._committed:
            char = self._committed.pop()
            if char == ' ':
                spaces += 1
            if spaces == 2:
                self._committed.append(' ')
                break

    def render(self) -> str:
        return ''.join(self._committed) + ''.join(self._pending)

    def _commit(self, delimiter: str, sentence_end: bool):
        typed = self.pending
        corrected = self._dictionary.correct(typed.lower())

        if not sentence_end and self._capitalize_next and len(typed) > 1:
            corrected = corrected[:1].title() + corrected[1:]
            self._capitalize_next = False

        if corrected != typed:
            logger.debug("Corrected %r → %r", typed, corrected)
            self.last_correction = CorrectionEntry(original=typed, corrected=corrected)

        self._committed.extend(corrected)
        self._committed.append(delimiter)
        self._pending.clear()

        if sentence_end:
            self._capitalize_next = True
