"""Tests for one-letter adjacency and shortest-path search."""

from __future__ import annotations

from itertools import product

import pytest

from ladder.dictionary import Dictionary
from ladder.graph import (
    diff_count,
    distances_from,
    find_shortest_path,
    is_one_off,
    is_valid_ladder,
    neighbors,
    path_distance,
)


class TestIsOneOff:
    def test_single_change(self) -> None:
        assert is_one_off("cold", "cord")
        assert is_one_off("cares", "cards")

    def test_same_word_not_adjacent(self) -> None:
        assert not is_one_off("cares", "cares")

    def test_two_changes(self) -> None:
        assert not is_one_off("cold", "card")

    def test_length_mismatch(self) -> None:
        assert not is_one_off("cord", "cords")
        assert not is_one_off("", "a")

    def test_symmetric_over_dictionary(self, chain_dictionary: Dictionary) -> None:
        words = chain_dictionary.guess_words
        for a, b in product(words, repeat=2):
            assert is_one_off(a, b) == is_one_off(b, a)

    def test_case_sensitive(self) -> None:
        # Callers normalise first; "Cold" vs "cold" is one change
        assert is_one_off("Cold", "cold")


class TestDiffCount:
    def test_counts_positions(self) -> None:
        assert diff_count("cold", "cold") == 0
        assert diff_count("cold", "cord") == 1
        assert diff_count("cold", "warm") == 4

    def test_length_difference_counts(self) -> None:
        assert diff_count("card", "cards") == 1


class TestNeighbors:
    def test_dictionary_order(self, chain_dictionary: Dictionary) -> None:
        assert neighbors("cares", chain_dictionary) == ["cards", "carts", "cores"]

    def test_exclude(self, chain_dictionary: Dictionary) -> None:
        assert neighbors("cares", chain_dictionary, exclude={"cards"}) == ["carts", "cores"]


class TestFindShortestPath:
    def test_cold_to_warm(self, cold_warm_dictionary: Dictionary) -> None:
        path = find_shortest_path("cold", "warm", cold_warm_dictionary)
        assert path == ["cold", "cord", "card", "ward", "warm"]

    def test_same_word(self, chain_dictionary: Dictionary) -> None:
        assert find_shortest_path("ports", "ports", chain_dictionary) == ["ports"]

    def test_unreachable(self, disconnected_dictionary: Dictionary) -> None:
        assert find_shortest_path("apple", "bring", disconnected_dictionary) is None

    def test_target_outside_dictionary(self, chain_dictionary: Dictionary) -> None:
        assert find_shortest_path("cares", "zzzzz", chain_dictionary) is None

    def test_start_outside_dictionary(self, chain_dictionary: Dictionary) -> None:
        # "wards" is not a guess word but still works as the search root
        assert find_shortest_path("wards", "cards", chain_dictionary) == ["wards", "cards"]

    def test_all_pairs_are_shortest_ladders(self, chain_dictionary: Dictionary) -> None:
        words = chain_dictionary.guess_words
        for start in words:
            layers = distances_from(start, chain_dictionary)
            for end in words:
                path = find_shortest_path(start, end, chain_dictionary)
                assert path is not None
                assert path[0] == start
                assert path[-1] == end
                assert all(is_one_off(a, b) for a, b in zip(path, path[1:]))
                assert len(path) - 1 == layers[end]

    def test_takes_shortcut(self, chain_dictionary: Dictionary) -> None:
        path = find_shortest_path("cares", "ports", chain_dictionary)
        assert path == ["cares", "carts", "parts", "ports"]

    def test_deterministic(self, chain_dictionary: Dictionary) -> None:
        first = find_shortest_path("cores", "sides", chain_dictionary)
        for _ in range(3):
            assert find_shortest_path("cores", "sides", chain_dictionary) == first


class TestPathDistance:
    def test_distance(self, cold_warm_dictionary: Dictionary) -> None:
        assert path_distance("cold", "warm", cold_warm_dictionary) == 4
        assert path_distance("cold", "cold", cold_warm_dictionary) == 0

    def test_unreachable(self, disconnected_dictionary: Dictionary) -> None:
        assert path_distance("apple", "crowd", disconnected_dictionary) is None


class TestDistancesFrom:
    def test_layers(self, cold_warm_dictionary: Dictionary) -> None:
        layers = distances_from("cold", cold_warm_dictionary)
        assert layers == {
            "cold": 0, "cord": 1, "card": 2, "corn": 2, "ward": 3, "warm": 4,
        }

    def test_max_depth(self, cold_warm_dictionary: Dictionary) -> None:
        layers = distances_from("cold", cold_warm_dictionary, max_depth=2)
        assert max(layers.values()) == 2
        assert "ward" not in layers


class TestIsValidLadder:
    def test_valid(self, cold_warm_dictionary: Dictionary) -> None:
        assert is_valid_ladder(["cold", "cord", "card"], cold_warm_dictionary)

    @pytest.mark.parametrize("path", [
        [],
        ["cold", "card"],
        ["cold", "cold"],
        ["cold", "bold"],
    ])
    def test_invalid(self, path: list[str], cold_warm_dictionary: Dictionary) -> None:
        assert not is_valid_ladder(path, cold_warm_dictionary)
