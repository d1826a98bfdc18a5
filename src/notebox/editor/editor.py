"""Editor: the command surface over a buffer and its cursor."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional, Sequence, Tuple, Type

from notebox.buffer import (
    NEWLINE,
    Buffer,
    BufferMirror,
    Cursor,
    Position,
    ensure_position,
)
from notebox.runtime import telemetry

from . import commands as cmd
from .viewport import Viewport, compute_viewport
from .words import next_word_start, previous_word_start

DEFAULT_HEIGHT = 24


class Editor:
    """Owns one :class:`Buffer` and one :class:`Cursor`.

    Every command is total: when its precondition does not hold (moving left
    from the very first position, deleting at ``(0, 0)``...) it does nothing.
    After any command the cursor addresses a valid position. The viewport is
    derived from the cursor row and the current height on every read.
    """

    def __init__(
        self,
        lines: Optional[Iterable[str]] = None,
        *,
        height: int = DEFAULT_HEIGHT,
    ) -> None:
        self._buffer = Buffer(lines or ())
        self._cursor = Cursor()
        self._height = height

    # -- read-only surface -------------------------------------------------

    @property
    def cursor(self) -> Position:
        return self._cursor.position

    @property
    def latch_col(self) -> int:
        return self._cursor.latch_col

    @property
    def viewport(self) -> Viewport:
        return self.compute_viewport(self._height)

    def lines(self) -> Tuple[str, ...]:
        return self._buffer.snapshot()

    def pull_buffer(self) -> BufferMirror:
        return BufferMirror(
            lines=self._buffer.snapshot(),
            cursor=self._cursor.position,
            viewport=self.viewport.as_tuple(),
        )

    # -- host boundary -----------------------------------------------------

    def push_lines(self, lines: Sequence[str]) -> None:
        """Load new content and put the cursor at the top of it."""

        self._buffer.replace(lines)
        self._cursor.reset()

    def place_cursor(self, row: int, col: int) -> None:
        """Move to an explicit position supplied by the host (e.g. a click)."""

        ensure_position(self._buffer, (row, col))
        self._cursor.set(row, col)

    def resize(self, height: int) -> Viewport:
        self._height = height
        return self.viewport

    def compute_viewport(self, available_height: int) -> Viewport:
        return compute_viewport(
            self._cursor.row, self._buffer.line_count, available_height
        )

    # -- command entry point -----------------------------------------------

    def dispatch(self, command: cmd.Command) -> Viewport:
        """Apply ``command`` and return the recomputed viewport."""

        handler = _HANDLERS[type(command)]
        label = cmd.command_name(command)
        with telemetry.span(
            f"editor::{label}",
            component="editor",
            metadata={"command": label},
        ) as handle:
            handler(self, command)
            handle.add_metadata("cursor", self._cursor.position)
        return self.viewport

    # -- mutation ----------------------------------------------------------

    def insert_char(self, char: str) -> None:
        if char == NEWLINE:
            self.insert_newline()
            return
        row, col = self._cursor.position
        self._buffer.insert_char(row, col, char)
        self._cursor.set(row, col + 1)

    def insert_newline(self) -> None:
        row, col = self._cursor.position
        self._buffer.split_line(row, col)
        self._cursor.set(row + 1, 0)

    def delete_backward(self) -> None:
        row, col = self._cursor.position
        if col > 0:
            self._buffer.delete_char(row, col - 1)
            self._cursor.set(row, col - 1)
        elif row > 0:
            seam = self._buffer.join_with_previous(row)
            self._cursor.set(row - 1, seam)

    def reset(self) -> None:
        self._buffer.clear()
        self._cursor.reset()

    # -- navigation --------------------------------------------------------

    def move_left(self) -> None:
        row, col = self._cursor.position
        if col > 0:
            self._cursor.set(row, col - 1)
        elif row > 0:
            self._cursor.set(row - 1, self._buffer.line_length(row - 1))

    def move_right(self) -> None:
        row, col = self._cursor.position
        if col < self._buffer.line_length(row):
            self._cursor.set(row, col + 1)
        elif row < self._buffer.line_count - 1:
            self._cursor.set(row + 1, 0)

    def move_up(self) -> None:
        row = self._cursor.row
        if row > 0:
            self._cursor.set_vertical(row - 1, self._buffer.line_length(row - 1))

    def move_down(self) -> None:
        row = self._cursor.row
        if row < self._buffer.line_count - 1:
            self._cursor.set_vertical(row + 1, self._buffer.line_length(row + 1))

    def move_word_next(self) -> None:
        row, col = self._cursor.position
        line = self._buffer[row]
        target = next_word_start(line, col)
        if target is not None:
            self._cursor.set(row, target)
        elif row < self._buffer.line_count - 1:
            self._cursor.set(row + 1, 0)
        else:
            self._cursor.set(row, len(line))

    def move_word_prev(self) -> None:
        row, col = self._cursor.position
        target = previous_word_start(self._buffer[row], col)
        if target is not None:
            self._cursor.set(row, target)
        elif row > 0:
            self._cursor.set(row - 1, self._buffer.line_length(row - 1))
        else:
            self._cursor.set(row, 0)


_HANDLERS: Dict[Type[object], Callable[[Editor, cmd.Command], None]] = {
    cmd.InsertChar: lambda editor, command: editor.insert_char(command.char),  # type: ignore[union-attr]
    cmd.InsertNewline: lambda editor, _: editor.insert_newline(),
    cmd.DeleteBackward: lambda editor, _: editor.delete_backward(),
    cmd.MoveLeft: lambda editor, _: editor.move_left(),
    cmd.MoveRight: lambda editor, _: editor.move_right(),
    cmd.MoveUp: lambda editor, _: editor.move_up(),
    cmd.MoveDown: lambda editor, _: editor.move_down(),
    cmd.MoveWordNext: lambda editor, _: editor.move_word_next(),
    cmd.MoveWordPrev: lambda editor, _: editor.move_word_prev(),
    cmd.Reset: lambda editor, _: editor.reset(),
}


__all__ = ["Editor", "DEFAULT_HEIGHT"]
