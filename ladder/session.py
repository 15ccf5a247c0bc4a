"""Ladder session state machine: row editing, move validation, hints."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ladder.constants import (
    ERROR_DISPLAY_SECONDS,
    MAX_ATTEMPTS,
    MAX_DISTANCE,
    MIN_DISTANCE,
    RARE_LETTERS,
)
from ladder.dictionary import Dictionary, normalize_word
from ladder.generator import Puzzle, generate_puzzle
from ladder.graph import diff_count, find_shortest_path

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class LadderError(Enum):
    """Advisory rejections shown to the player. Never raised."""
    INCOMPLETE_WORD = "Not enough letters"
    NOT_IN_DICTIONARY = "Not in word list"
    NO_CHANGE = "Enter a new word"
    TOO_MANY_CHANGES = "Change exactly one letter"
    NO_CONNECTION_FOUND = "No connection found!"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class ErrorSignal:
    kind: LadderError
    expires_at: float

    @property
    def message(self) -> str:
        return self.kind.message


@dataclass(frozen=True)
class SubmitResult:
    accepted: bool
    status: GameStatus
    error: LadderError | None = None


class LadderSession:
    """One puzzle being played: five attempt rows and a win/loss status.

    Rows before ``current_row`` are fixed, ``current_row`` is the only
    editable row while playing, and later rows are empty. State changes only
    through ``set_row_content`` (and its keyboard helpers), ``submit_row``,
    ``hint`` and ``clear_ladder``.
    """

    def __init__(self, puzzle: Puzzle, dictionary: Dictionary,
                 clock: Callable[[], float] = time.time) -> None:
        self.puzzle = puzzle
        self.dictionary = dictionary
        self._clock = clock
        self.rows: list[str] = [""] * MAX_ATTEMPTS
        self.current_row = 0
        self.status = GameStatus.PLAYING
        self.error: ErrorSignal | None = None
        self.started_at = clock()
        self.finished_at: float | None = None

    @property
    def word_length(self) -> int:
        return self.dictionary.word_length

    @property
    def start_word(self) -> str:
        return self.puzzle.start

    @property
    def target_word(self) -> str:
        return self.puzzle.target

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.PLAYING

    @property
    def previous_word(self) -> str:
        """Word the current row must be one letter away from."""
        if self.current_row == 0:
            return self.puzzle.start
        return self.rows[self.current_row - 1]

    @property
    def current_content(self) -> str:
        return self.rows[self.current_row]

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def set_row_content(self, text: str) -> None:
        """Replace the editable row's letters (lowercased, capped at word length)."""
        if self.is_over:
            return
        self.error = None
        letters = "".join(ch for ch in text.lower() if ch.isalpha())
        self.rows[self.current_row] = letters[:self.word_length]

    def type_letter(self, ch: str) -> None:
        if len(ch) == 1 and ch.isalpha() and len(self.current_content) < self.word_length:
            self.set_row_content(self.current_content + ch)

    def backspace(self) -> None:
        self.set_row_content(self.current_content[:-1])

    def clear_ladder(self) -> None:
        """Wipe every row and resume play on the same puzzle."""
        self.rows = [""] * MAX_ATTEMPTS
        self.current_row = 0
        self.status = GameStatus.PLAYING
        self.error = None
        self.finished_at = None

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def submit_row(self, word: str | None = None) -> SubmitResult:
        """Validate the editable row and advance, win or lose.

        Checks run in order and the first failure is reported: length,
        dictionary membership, then exactly one letter changed from the
        previous word. A rejected word leaves the fixed rows untouched.
        """
        if self.is_over:
            return SubmitResult(False, self.status)
        if word is not None:
            # Submitted words are checked as given, not capped like typed input
            self.error = None
            self.rows[self.current_row] = normalize_word(word)

        candidate = normalize_word(self.current_content)

        if len(candidate) != self.word_length:
            return self._reject(LadderError.INCOMPLETE_WORD)
        if not self.dictionary.is_valid_word(candidate):
            return self._reject(LadderError.NOT_IN_DICTIONARY)

        changes = diff_count(self.previous_word, candidate)
        if changes == 0:
            return self._reject(LadderError.NO_CHANGE)
        if changes > 1:
            return self._reject(LadderError.TOO_MANY_CHANGES)

        self.error = None
        if candidate == self.puzzle.target:
            self._finish(GameStatus.WON)
        elif self.current_row == MAX_ATTEMPTS - 1:
            # Last row must land on the target
            self._finish(GameStatus.LOST)
        else:
            self.current_row += 1
        return SubmitResult(True, self.status)

    def hint(self) -> str | None:
        """Stage the next word of a shortest ladder in the editable row."""
        if self.is_over:
            return None
        prev = self.previous_word
        path = find_shortest_path(prev, self.puzzle.target, self.dictionary)
        if path is None or len(path) < 2:
            logger.warning("No ladder from %r to target %r; dictionary and puzzle disagree",
                           prev, self.puzzle.target)
            self._trigger_error(LadderError.NO_CONNECTION_FOUND)
            return None
        self.set_row_content(path[1])
        return path[1]

    def _reject(self, kind: LadderError) -> SubmitResult:
        self._trigger_error(kind)
        return SubmitResult(False, self.status, kind)

    def _trigger_error(self, kind: LadderError) -> None:
        self.error = ErrorSignal(kind, self._clock() + ERROR_DISPLAY_SECONDS)

    def _finish(self, status: GameStatus) -> None:
        self.status = status
        self.finished_at = self._clock()

    # ------------------------------------------------------------------
    # Read-only queries
    # ------------------------------------------------------------------

    def active_error(self) -> ErrorSignal | None:
        """The pending error, or None once its display time has passed."""
        if self.error is not None and self._clock() >= self.error.expires_at:
            self.error = None
        return self.error

    @property
    def optimal_steps(self) -> int:
        path = find_shortest_path(self.puzzle.start, self.puzzle.target, self.dictionary)
        return len(path) - 1 if path else MAX_ATTEMPTS

    @property
    def moves(self) -> int:
        """Rows accepted so far, counting the final winning or losing row."""
        return self.current_row + 1 if self.is_over else self.current_row

    @property
    def hearts(self) -> int:
        if self.status is GameStatus.LOST:
            return 0
        return MAX_ATTEMPTS - self.current_row

    @property
    def elapsed_seconds(self) -> float:
        if self.finished_at is None:
            return 0.0
        return self.finished_at - self.started_at

    def fixed_rows(self) -> list[str]:
        if self.is_over:
            return self.rows[:self.current_row + 1]
        return self.rows[:self.current_row]

    def correct_positions(self, row: int) -> list[int]:
        """Indices where a submitted row already matches the target."""
        if row >= len(self.fixed_rows()):
            return []
        word = self.rows[row]
        return [i for i, (a, b) in enumerate(zip(word, self.puzzle.target)) if a == b]

    def target_rarity(self) -> str:
        rare = sum(1 for ch in self.puzzle.target if ch in RARE_LETTERS)
        if rare > 1:
            return "legendary"
        if rare == 1:
            return "rare"
        return "common"

    def to_dict(self) -> dict:
        """Snapshot of everything a front end needs to draw the board."""
        error = self.active_error()
        result = {
            "start": self.puzzle.start,
            "target": self.puzzle.target,
            "rows": list(self.rows),
            "current_row": self.current_row,
            "status": self.status.value,
            "error": error.message if error else None,
            "error_kind": error.kind.name if error else None,
            "hearts": self.hearts,
            "moves": self.moves,
            "correct": [self.correct_positions(i) for i in range(MAX_ATTEMPTS)],
        }
        if self.is_over:
            result["optimal_steps"] = self.optimal_steps
            result["elapsed_seconds"] = round(self.elapsed_seconds, 1)
            result["rarity"] = self.target_rarity()
        return result


def new_session(dictionary: Dictionary,
                min_dist: int = MIN_DISTANCE,
                max_dist: int = MAX_DISTANCE,
                rng: random.Random | None = None,
                clock: Callable[[], float] = time.time) -> LadderSession:
    """Generate a fresh puzzle and wrap it in a new session."""
    puzzle = generate_puzzle(dictionary, min_dist, max_dist, rng=rng)
    return LadderSession(puzzle, dictionary, clock=clock)
