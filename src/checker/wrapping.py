"""Greedy word wrapping of a phrase into fixed-width rows."""

from typing import List, Tuple

from .models import CharPosition


def _hard_break(word: str, width: int, rows: List[str]) -> str:
    """Emit full-width slices of an over-long word and return the remainder."""
    while len(word) > width:
        rows.append(word[:width])
        word = word[width:]
    return word


def wrap_phrase(phrase: str, width: int) -> List[str]:
    """
    Wrap a phrase into rows of at most `width` characters.

    Words are split on single spaces, so runs of spaces produce empty words
    that are kept as-is. A word longer than the row is cut into full-width
    pieces. Single greedy pass, no line balancing.

    Raises:
        ValueError: If width is not a positive integer
    """
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        raise ValueError(f"Row width must be a positive integer, got {width!r}")

    rows: List[str] = []
    current = ""
    for word in (phrase or "").split(" "):
        if not current:
            current = _hard_break(word, width, rows)
            continue
        if len(current) + 1 + len(word) <= width:
            current = f"{current} {word}"
        else:
            rows.append(current)
            current = _hard_break(word, width, rows)

    if current:
        rows.append(current)
    return rows


def char_positions(rows: List[str]) -> List[CharPosition]:
    """List the non-blank characters of the rows in row-major order."""
    return [
        CharPosition(row, col, ch)
        for row, line in enumerate(rows)
        for col, ch in enumerate(line)
        if ch != " "
    ]


def grid_size(rows: List[str]) -> Tuple[int, int]:
    """(row count, widest row) of the wrapped phrase."""
    return len(rows), max((len(r) for r in rows), default=0)
