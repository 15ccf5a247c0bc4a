"""Puzzle generation biased toward ladders through common words."""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass

from ladder.constants import MAX_DISTANCE, MAX_GENERATION_ATTEMPTS, MIN_DISTANCE
from ladder.dictionary import Dictionary
from ladder.graph import neighbors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Puzzle:
    """A start word and the target the player must ladder to."""
    start: str
    target: str


def _common_first(words: list[str], dictionary: Dictionary) -> list[str]:
    # Stable sort: common words keep their relative order ahead of the rest
    return sorted(words, key=lambda w: not dictionary.is_common(w))


def _candidate_targets(start: str, dictionary: Dictionary,
                       min_dist: int, max_dist: int) -> list[str]:
    """Common words whose BFS layer from *start* lies in [min_dist, max_dist]."""
    queue: deque[tuple[str, int]] = deque([(start, 0)])
    visited = {start}
    candidates: list[str] = []

    while queue:
        word, dist = queue.popleft()

        if min_dist <= dist <= max_dist and dictionary.is_common(word):
            candidates.append(word)

        if dist >= max_dist:
            continue

        found = neighbors(word, dictionary, exclude=visited)
        for w in _common_first(found, dictionary):
            visited.add(w)
            queue.append((w, dist + 1))

    return candidates


def generate_puzzle(dictionary: Dictionary,
                    min_dist: int = MIN_DISTANCE,
                    max_dist: int = MAX_DISTANCE,
                    rng: random.Random | None = None,
                    max_attempts: int = MAX_GENERATION_ATTEMPTS) -> Puzzle:
    """Pick a start/target pair whose shortest ladder is min_dist..max_dist steps.

    Start words are drawn from the seed list (or the guess list when there
    are no seeds). Each attempt runs a layered BFS over the full guess list,
    enqueueing common neighbours first, and picks a random common word from
    the layers in range. If every attempt comes up empty the first two
    source words are returned instead, so a puzzle is always produced.
    """
    source = dictionary.source_words
    if len(source) < 2:
        raise ValueError(
            f"Puzzle generation needs at least 2 seed words, got {len(source)}"
        )
    if min_dist < 1 or min_dist > max_dist:
        raise ValueError(f"Invalid distance bounds: {min_dist}..{max_dist}")

    rng = rng or random.Random()

    for attempt in range(1, max_attempts + 1):
        start = rng.choice(source)
        candidates = _candidate_targets(start, dictionary, min_dist, max_dist)
        if candidates:
            target = rng.choice(candidates)
            logger.debug("Puzzle %s -> %s found on attempt %d (%d candidates)",
                         start, target, attempt, len(candidates))
            return Puzzle(start, target)
        logger.debug("Attempt %d: no targets %d-%d steps from %s",
                     attempt, min_dist, max_dist, start)

    logger.warning(
        "No puzzle within %d-%d steps after %d attempts; using fallback %s -> %s",
        min_dist, max_dist, max_attempts, source[0], source[1],
    )
    return Puzzle(source[0], source[1])
