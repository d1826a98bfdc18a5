"""Visible row window for a bounded-height display."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Viewport:
    first: int
    last: int  # exclusive

    @property
    def height(self) -> int:
        return self.last - self.first

    def __contains__(self, row: object) -> bool:
        return isinstance(row, int) and self.first <= row < self.last

    def as_tuple(self) -> tuple[int, int]:
        return (self.first, self.last)


def compute_viewport(cursor_row: int, total_rows: int, available_height: int) -> Viewport:
    """Return the rows to show so that ``cursor_row`` stays visible.

    The window starts at row 0 until the cursor moves past the first
    ``available_height`` rows; from then on the cursor row is the last visible
    row. Heights below one are treated as one.
    """

    height = max(available_height, 1)
    if height >= total_rows:
        return Viewport(0, total_rows)
    first = 0 if cursor_row < height else cursor_row - height + 1
    return Viewport(first, min(first + height, total_rows))


__all__ = ["Viewport", "compute_viewport"]
