"""Word dictionary — nearest-match lookup over a static word list."""
import logging
from pathlib import Path
from typing import Iterable, Iterator

from autoline.distance import similarity

logger = logging.getLogger(__name__)

# Entries further than this from the typed word's length are never scored.
MAX_LENGTH_DIFF = 3


class DictionaryError(Exception):
    """Raised when a dictionary cannot be built from its source."""


class Dictionary:
    """Immutable ordered list of known lowercase words.

    Lookup is a linear scan in stored order, so the order words were loaded
    in decides ties between equally close candidates.
    """

    def __init__(self, words: Iterable[str]):
        self._words = tuple(w.strip().lower() for w in words if w and w.strip())
        if not self._words:
            raise DictionaryError("dictionary is empty")

    @classmethod
    def from_file(cls, path) -> "Dictionary":
        """Load a whitespace-separated word list."""
        path = Path(path).expanduser()
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryError(f"cannot read dictionary {path}: {e}") from e

        words = text.split()
        if not words:
            raise DictionaryError(f"dictionary {path} has no words")

        logger.info("Loaded %d words from %s", len(words), path)
        return cls(words)

    @classmethod
    def from_builtin(cls, language: str = "en", size: int = 10000) -> "Dictionary":
        """Take the `size` most frequent words of pyspellchecker's word list.

        Most frequent words come first, so they win ties.
        """
        from spellchecker import SpellChecker

        try:
            spell = SpellChecker(language=language)
        except (ValueError, OSError) as e:
            raise DictionaryError(f"no builtin dictionary for language {language!r}") from e

        words = [w for w, _ in spell.word_frequency.dictionary.most_common(size) if w.isalpha()]
        if not words:
            raise DictionaryError(f"builtin dictionary for {language!r} has no words")

        logger.info("Loaded %d builtin '%s' words", len(words), language)
        return cls(words)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word) -> bool:
        return word in self._words

    def correct(self, word: str) -> str:
        """Return the closest dictionary word, or the lowercased input.

        A candidate replaces the current best only with a strictly higher
        similarity, starting from the input itself at 0.0. The pronoun "i"
        always comes back as "I".
        """
        lower = word.lower()
        if not lower:
            return lower

        closest = lower
        best_score = 0.0
        for entry in self._words:
            if abs(len(entry) - len(lower)) > MAX_LENGTH_DIFF:
                continue
            score = similarity(entry, lower)
            if score > best_score:
                closest = entry
                best_score = score

        if closest == "i":
            return "I"
        return closest
