"""Cursor position and the remembered column used for vertical movement."""

from __future__ import annotations

from dataclasses import dataclass

from .sync import Position


@dataclass(slots=True)
class Cursor:
    """Edit position inside a :class:`~notebox.buffer.Buffer`.

    ``col`` may equal the line length, meaning "after the last character".
    ``latch_col`` is the column last targeted by horizontal movement or an
    edit; vertical movement clamps to it but never changes it.
    """

    row: int = 0
    col: int = 0
    latch_col: int = 0

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    def set(self, row: int, col: int) -> None:
        """Move and latch the new column."""

        self.row = row
        self.col = col
        self.latch_col = col

    def set_vertical(self, row: int, line_length: int) -> None:
        """Move to ``row`` keeping the latched column where the line allows."""

        self.row = row
        self.col = min(self.latch_col, line_length)

    def reset(self) -> None:
        self.set(0, 0)


__all__ = ["Cursor"]
