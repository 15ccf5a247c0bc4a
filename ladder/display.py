"""Terminal rendering of a ladder session."""

from __future__ import annotations

from ladder.session import GameStatus, LadderSession


def _render_row(word: str, width: int, correct: list[int] | None = None,
                marker: str = " ") -> str:
    correct = correct or []
    cells: list[str] = []
    for i in range(width):
        if i < len(word):
            ch = word[i].upper()
            cells.append(f"[{ch}]" if i in correct else f" {ch} ")
        else:
            cells.append(" . ")
    return f"{marker} " + "".join(cells)


def render_session(session: LadderSession) -> str:
    """Render start word, attempt rows and target as a block of text.

    Letters in submitted rows that already match the target are bracketed.
    The editable row is marked with '>'.
    """
    width = session.word_length
    lines: list[str] = []
    hearts = "♥" * session.hearts + "♡" * (len(session.rows) - session.hearts)
    lines.append(f"  {hearts}")
    lines.append(_render_row(session.start_word, width, marker="S"))

    for i, word in enumerate(session.rows):
        active = i == session.current_row and not session.is_over
        lines.append(_render_row(
            word, width, session.correct_positions(i), marker=">" if active else " ",
        ))

    lines.append(_render_row(session.target_word, width, marker="T"))
    return "\n".join(lines)


def print_session(session: LadderSession) -> None:
    print("\n" + render_session(session))
    error = session.active_error()
    if error is not None:
        print(f"  ** {error.message} **")


def print_result(session: LadderSession) -> None:
    """Print the end-of-game summary."""
    if session.status is GameStatus.WON:
        print(f"\n  Solved {session.start_word.upper()} -> {session.target_word.upper()}!")
        print(f"  Your moves:   {session.moves}")
        print(f"  Optimal path: {session.optimal_steps}")
        print(f"  Solve time:   {session.elapsed_seconds:.1f}s")
    elif session.status is GameStatus.LOST:
        print("\n  Game over. The target word was:")
        print(f"  {session.target_word.upper()} ({session.target_rarity()})")
