"""Shared fixtures for word ladder tests."""

from __future__ import annotations

import random

import pytest

from ladder.dictionary import Dictionary

# cares-cards-carts-parts-ports-posts-poses-roses-rises-rides-sides, with a
# cores/cords detour between cares and cards
CHAIN_WORDS = [
    "cares", "cards", "carts", "parts", "ports", "posts", "poses",
    "roses", "rises", "rides", "sides", "cores", "cords",
]


class FakeClock:
    """Manually advanced stand-in for time.time."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def cold_warm_dictionary() -> Dictionary:
    """The four-letter example ladder COLD -> CORD -> CARD -> WARD -> WARM."""
    words = ["cold", "cord", "card", "ward", "warm", "corn"]
    return Dictionary(words, words, word_length=4)


@pytest.fixture
def chain_dictionary() -> Dictionary:
    """Thirteen connected five-letter words, every one of them common."""
    return Dictionary(CHAIN_WORDS, CHAIN_WORDS)


@pytest.fixture
def biased_dictionary() -> Dictionary:
    """Chain words plus rare detours; only some words are common."""
    guess = CHAIN_WORDS + ["carps", "harps", "hares"]
    seed = ["cares", "cards", "parts", "posts", "roses", "sides"]
    return Dictionary(guess, seed)


@pytest.fixture
def disconnected_dictionary() -> Dictionary:
    """No two words are one letter apart."""
    words = ["apple", "bring", "crowd", "dwelt"]
    return Dictionary(words, words)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
