"""CLI entry point for the word ladder game."""

from __future__ import annotations

import argparse
import logging
import random
import sys

from ladder.constants import MAX_DISTANCE, MIN_DISTANCE
from ladder.dictionary import Dictionary, load_default_dictionary
from ladder.display import print_result, print_session
from ladder.graph import find_shortest_path
from ladder.session import LadderSession, new_session


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Word Ladder: change one letter at a time to reach the target",
    )
    parser.add_argument(
        "--path", "-p",
        nargs=2,
        metavar=("START", "TARGET"),
        help="Print a shortest ladder between two words and exit",
    )
    parser.add_argument(
        "--min-dist",
        type=int,
        default=MIN_DISTANCE,
        help=f"Minimum puzzle length in steps (default: {MIN_DISTANCE})",
    )
    parser.add_argument(
        "--max-dist",
        type=int,
        default=MAX_DISTANCE,
        help=f"Maximum puzzle length in steps (default: {MAX_DISTANCE})",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        help="Random seed for reproducible puzzles",
    )
    parser.add_argument(
        "--guess-words",
        type=str,
        help="Word list accepted as guesses (default: data/guess_words.txt)",
    )
    parser.add_argument(
        "--seed-words",
        type=str,
        help="Common-word list for puzzle endpoints (default: data/seed_words.txt)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log search and generation details",
    )
    return parser.parse_args(argv)


def load_dictionary(args: argparse.Namespace) -> Dictionary:
    if args.guess_words:
        return Dictionary.from_files(args.guess_words, args.seed_words)
    return load_default_dictionary()


def show_path(start: str, target: str, dictionary: Dictionary) -> int:
    path = find_shortest_path(start.lower(), target.lower(), dictionary)
    if path is None:
        print(f"No path from {start} to {target}.")
        return 1
    print(" -> ".join(w.upper() for w in path))
    print(f"{len(path) - 1} steps")
    return 0


def play_loop(session: LadderSession, dictionary: Dictionary,
              args: argparse.Namespace, rng: random.Random) -> None:
    """Interactive loop: read a word per line until the player quits."""
    while True:
        print_session(session)
        if session.is_over:
            print_result(session)
            print("\n[N]ew puzzle / [Q]uit")
        else:
            print("\nType a word and press Enter. ? = hint, ! = clear, n = new, q = quit")

        try:
            raw = input("> ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print("\nBye.")
            break

        if raw == "q":
            break
        if raw == "n":
            session = new_session(dictionary, args.min_dist, args.max_dist, rng=rng)
            continue
        if session.is_over:
            print("Invalid choice.")
            continue
        if raw == "?":
            word = session.hint()
            if word is not None:
                print(f"Hint: try {word.upper()}")
            continue
        if raw == "!":
            session.clear_ladder()
            continue

        session.submit_row(raw)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print("Loading dictionary...")
    try:
        dictionary = load_dictionary(args)
    except FileNotFoundError as e:
        print(e)
        return 1
    print(f"Loaded {dictionary.word_count} words ({len(dictionary.seed_words)} common).")

    if args.path:
        return show_path(args.path[0], args.path[1], dictionary)

    rng = random.Random(args.seed)
    try:
        session = new_session(dictionary, args.min_dist, args.max_dist, rng=rng)
    except ValueError as e:
        print(f"Cannot generate a puzzle: {e}")
        return 1
    print(f"\nLadder from {session.start_word.upper()} to {session.target_word.upper()}")
    play_loop(session, dictionary, args, rng)
    return 0


if __name__ == "__main__":
    sys.exit(main())
