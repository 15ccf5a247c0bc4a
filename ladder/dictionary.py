"""Guess/seed word lists for ladder validation and puzzle generation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from ladder.constants import DEFAULT_GUESS_FILE, DEFAULT_SEED_FILE, WORD_LENGTH

logger = logging.getLogger(__name__)


def normalize_word(word: str) -> str:
    return word.strip().lower()


def _clean(words: Iterable[str], word_length: int) -> tuple[str, ...]:
    """Normalise, keep alphabetic words of the right length, drop repeats."""
    seen: set[str] = set()
    cleaned: list[str] = []
    for raw in words:
        word = normalize_word(raw)
        if len(word) != word_length or not word.isalpha() or not word.isascii():
            continue
        if word not in seen:
            seen.add(word)
            cleaned.append(word)
    return tuple(cleaned)


def _read_words(path: str | Path) -> list[str]:
    words: list[str] = []
    with open(path) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                words.append(line)
    return words


class Dictionary:
    """Read-only pair of word lists.

    The guess set holds every word accepted as input. The seed set is a
    smaller list of common words used to pick puzzle endpoints and to bias
    path discovery. Iteration order is load order, which keeps searches
    deterministic for a given dictionary.
    """

    def __init__(self, guess_words: Iterable[str],
                 seed_words: Iterable[str] = (),
                 word_length: int = WORD_LENGTH) -> None:
        self.word_length = word_length
        self._guess = _clean(guess_words, word_length)
        self._seed = _clean(seed_words, word_length)
        self._guess_set = frozenset(self._guess)
        self._seed_set = frozenset(self._seed)

    @classmethod
    def from_files(cls, guess_path: str | Path,
                   seed_path: str | Path | None = None,
                   word_length: int = WORD_LENGTH) -> Dictionary:
        """Load words from text files (one word per line, '#' comments)."""
        guess = _read_words(guess_path)
        seed = _read_words(seed_path) if seed_path is not None else []
        d = cls(guess, seed, word_length=word_length)
        logger.debug("Loaded %d guess words and %d seed words",
                     d.word_count, len(d.seed_words))
        return d

    @property
    def guess_words(self) -> tuple[str, ...]:
        return self._guess

    @property
    def seed_words(self) -> tuple[str, ...]:
        return self._seed

    @property
    def source_words(self) -> tuple[str, ...]:
        """Words puzzle endpoints are drawn from: seed set, else guess set."""
        return self._seed if self._seed else self._guess

    @property
    def word_count(self) -> int:
        return len(self._guess)

    def is_valid_word(self, word: str) -> bool:
        return normalize_word(word) in self._guess_set

    def is_common(self, word: str) -> bool:
        """Membership in the source list (seed set, or guess set if no seeds)."""
        if self._seed:
            return word in self._seed_set
        return word in self._guess_set

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid_word(word)

    def __len__(self) -> int:
        return len(self._guess)

    def __iter__(self) -> Iterator[str]:
        return iter(self._guess)


def default_data_dir() -> Path:
    return Path(__file__).resolve().parent.parent / "data"


def load_default_dictionary() -> Dictionary:
    """Load the bundled word lists from the data/ directory."""
    data_dir = default_data_dir()
    guess_path = data_dir / DEFAULT_GUESS_FILE
    seed_path = data_dir / DEFAULT_SEED_FILE
    if not guess_path.exists():
        raise FileNotFoundError(
            f"Word list not found at {guess_path}. "
            f"Place a list of {WORD_LENGTH}-letter words at data/{DEFAULT_GUESS_FILE}"
        )
    return Dictionary.from_files(
        guess_path, seed_path if seed_path.exists() else None,
    )
