"""A single row of text."""

from __future__ import annotations

from typing import Iterable, Iterator, List

from .sync import BufferValidationError

NEWLINE = "\n"


class Line:
    """Mutable sequence of characters that never holds a line terminator."""

    __slots__ = ("_chars",)

    def __init__(self, text: str | Iterable[str] = "") -> None:
        chars = list(text)
        if NEWLINE in chars:
            raise BufferValidationError("Line text cannot contain a newline")
        self._chars: List[str] = chars

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __getitem__(self, index: int) -> str:
        return self._chars[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Line):
            return self._chars == other._chars
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Line({self.text!r})"

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def insert(self, col: int, char: str) -> None:
        if char == NEWLINE:
            raise BufferValidationError("Line text cannot contain a newline")
        self._chars.insert(col, char)

    def delete(self, col: int) -> str:
        return self._chars.pop(col)

    def split(self, col: int) -> "Line":
        """Truncate this line at ``col`` and return the removed tail."""

        tail = Line(self._chars[col:])
        del self._chars[col:]
        return tail

    def extend(self, other: "Line") -> None:
        self._chars.extend(other._chars)


__all__ = ["Line", "NEWLINE"]
