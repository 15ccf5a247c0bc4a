"""One-letter-change adjacency and breadth-first shortest ladders."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Container

from ladder.dictionary import Dictionary

logger = logging.getLogger(__name__)


def is_one_off(a: str, b: str) -> bool:
    """True iff *a* and *b* have equal length and differ in exactly one position."""
    if len(a) != len(b):
        return False
    diffs = 0
    for ca, cb in zip(a, b):
        if ca != cb:
            diffs += 1
            if diffs > 1:
                return False
    return diffs == 1


def diff_count(a: str, b: str) -> int:
    """Positions where *a* and *b* differ, counting extra length as changes."""
    return sum(1 for ca, cb in zip(a, b) if ca != cb) + abs(len(a) - len(b))


def neighbors(word: str, dictionary: Dictionary,
              exclude: Container[str] | None = None) -> list[str]:
    """Guess words one letter away from *word*, in dictionary order."""
    if exclude is None:
        return [w for w in dictionary.guess_words if is_one_off(word, w)]
    return [w for w in dictionary.guess_words
            if w not in exclude and is_one_off(word, w)]


def _reconstruct(end: str, parents: dict[str, str | None]) -> list[str]:
    path = [end]
    node = parents[end]
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()
    return path


def find_shortest_path(start: str, end: str,
                       dictionary: Dictionary) -> list[str] | None:
    """Breadth-first search for a shortest ladder from *start* to *end*.

    Nodes are guess words; edges join words one letter apart. Returns the
    full path including both endpoints, ``[start]`` when they are equal,
    or None when *end* cannot be reached.
    """
    if start == end:
        return [start]

    parents: dict[str, str | None] = {start: None}
    frontier: deque[str] = deque([start])

    while frontier:
        current = frontier.popleft()
        if current == end:
            path = _reconstruct(end, parents)
            logger.debug("Path %s -> %s: %d steps", start, end, len(path) - 1)
            return path
        for word in neighbors(current, dictionary, exclude=parents.keys()):
            parents[word] = current
            frontier.append(word)

    logger.debug("No path %s -> %s after visiting %d words", start, end, len(parents))
    return None


def path_distance(start: str, end: str, dictionary: Dictionary) -> int | None:
    """Number of steps on a shortest ladder, or None if unreachable."""
    path = find_shortest_path(start, end, dictionary)
    if path is None:
        return None
    return len(path) - 1


def distances_from(start: str, dictionary: Dictionary,
                   max_depth: int | None = None) -> dict[str, int]:
    """BFS layer of every word reachable from *start* (up to *max_depth*)."""
    dist = {start: 0}
    frontier: deque[str] = deque([start])
    while frontier:
        current = frontier.popleft()
        if max_depth is not None and dist[current] >= max_depth:
            continue
        for word in neighbors(current, dictionary, exclude=dist.keys()):
            dist[word] = dist[current] + 1
            frontier.append(word)
    return dist


def is_valid_ladder(path: list[str], dictionary: Dictionary) -> bool:
    """Every step is one letter apart and every word after the first is a guess word."""
    if not path:
        return False
    if any(not dictionary.is_valid_word(w) for w in path[1:]):
        return False
    return all(is_one_off(a, b) for a, b in zip(path, path[1:]))
