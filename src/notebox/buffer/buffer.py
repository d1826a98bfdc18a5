"""Ordered, never-empty collection of lines."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

from .line import Line


class Buffer:
    """Owns the document content as a list of :class:`Line` objects.

    A buffer always holds at least one line; an empty document is a single
    empty line. Row and column arguments are trusted: callers (the editor)
    guarantee they are in range.
    """

    __slots__ = ("_lines",)

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: List[Line] = [Line(text) for text in lines] or [Line()]

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def __getitem__(self, row: int) -> Line:
        return self._lines[row]

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_length(self, row: int) -> int:
        return len(self._lines[row])

    def snapshot(self) -> Tuple[str, ...]:
        """Return the current lines as immutable strings."""

        return tuple(line.text for line in self._lines)

    def replace(self, lines: Sequence[str]) -> None:
        self._lines = [Line(text) for text in lines] or [Line()]

    def clear(self) -> None:
        self._lines = [Line()]

    def insert_char(self, row: int, col: int, char: str) -> None:
        self._lines[row].insert(col, char)

    def delete_char(self, row: int, col: int) -> str:
        return self._lines[row].delete(col)

    def split_line(self, row: int, col: int) -> None:
        """Move the text after ``col`` onto a new line directly below ``row``."""

        tail = self._lines[row].split(col)
        self._lines.insert(row + 1, tail)

    def join_with_previous(self, row: int) -> int:
        """Append line ``row`` to line ``row - 1`` and drop it.

        Returns the previous line's length before the join, which is where the
        joined text starts.
        """

        previous = self._lines[row - 1]
        seam = len(previous)
        previous.extend(self._lines.pop(row))
        return seam


__all__ = ["Buffer"]
