"""Whitespace-delimited word boundaries within a single line."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence


class Direction(Enum):
    FORWARD = 1
    BACKWARD = -1


def find_boundary(
    line: Sequence[str], from_col: int, direction: Direction
) -> Optional[int]:
    """Return the index of the first whitespace character met from ``from_col``.

    Forward scans ``from_col, from_col + 1, ...``; backward scans
    ``from_col - 1, from_col - 2, ...``. ``None`` means the edge of the line
    was reached first.
    """

    if direction is Direction.FORWARD:
        indices = range(max(from_col, 0), len(line))
    else:
        indices = range(min(from_col, len(line)) - 1, -1, -1)
    for index in indices:
        if line[index].isspace():
            return index
    return None


def next_word_start(line: Sequence[str], col: int) -> Optional[int]:
    """Column of the next word after ``col``, or ``None`` if none remains."""

    boundary = find_boundary(line, col, Direction.FORWARD)
    if boundary is None:
        return None
    pos = boundary
    while pos < len(line) and line[pos].isspace():
        pos += 1
    if pos == len(line):
        return None
    return pos


def previous_word_start(line: Sequence[str], col: int) -> Optional[int]:
    """Column where the word before ``col`` starts.

    ``None`` when no whitespace precedes ``col``, i.e. the cursor already sits
    in or at the start of the line's first word.
    """

    if find_boundary(line, col, Direction.BACKWARD) is None:
        return None
    pos = col
    while pos > 0 and line[pos - 1].isspace():
        pos -= 1
    boundary = find_boundary(line, pos, Direction.BACKWARD)
    return 0 if boundary is None else boundary + 1


__all__ = ["Direction", "find_boundary", "next_word_start", "previous_word_start"]
