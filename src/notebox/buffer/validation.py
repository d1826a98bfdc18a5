"""Validation helpers for positions handed in from outside the editor."""

from __future__ import annotations

from .buffer import Buffer
from .sync import BufferValidationError, Position


def ensure_position(buffer: Buffer, position: Position) -> Position:
    row, col = position
    if row < 0 or row >= buffer.line_count:
        raise BufferValidationError("Row out of range", cursor=position)
    if col < 0 or col > buffer.line_length(row):
        raise BufferValidationError("Column out of range", cursor=position)
    return position


__all__ = ["ensure_position"]
