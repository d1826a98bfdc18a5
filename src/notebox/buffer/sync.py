"""Boundary types exchanged between the editor and its host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

Position = Tuple[int, int]  # (row, column)


@dataclass(frozen=True, slots=True)
class BufferMirror:
    """Read-only snapshot a renderer draws from."""

    lines: Tuple[str, ...]
    cursor: Position
    viewport: Tuple[int, int]

    @property
    def visible_lines(self) -> Sequence[str]:
        first, last = self.viewport
        return self.lines[first:last]


class BufferValidationError(RuntimeError):
    """Raised when a host hands the buffer invalid content or positions."""

    def __init__(self, message: str, *, cursor: Position | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


__all__ = ["BufferMirror", "BufferValidationError", "Position"]
