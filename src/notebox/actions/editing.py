"""Actions that drive the editor while a note is open."""

from __future__ import annotations

from notebox.editor import (
    Command,
    DeleteBackward,
    InsertNewline,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveUp,
    MoveWordNext,
    MoveWordPrev,
    Reset,
)
from notebox.notes import Note, title_from_lines
from notebox.views.base_view import ViewContext, ViewResult


def _apply(context: ViewContext, command: Command) -> ViewResult:
    context.editor.dispatch(command)
    context.bus.emit("editor.changed", context.editor.cursor)
    return ViewResult(consumed=True, status="edit")


def move_left(context: ViewContext, binding) -> ViewResult:
    del binding
    return _apply(context, MoveLeft())


def move_right(context: ViewContext, binding) -> ViewResult:
    del binding
    return _apply(context, MoveRight())


def move_up(context: ViewContext, binding) -> ViewResult:
    del binding
    return _apply(context, MoveUp())


def move_down(context: ViewContext, binding) -> ViewResult:
    del binding
    return _apply(context, MoveDown())


def move_word_next(context: ViewContext, binding) -> ViewResult:
    del binding
    return _apply(context, MoveWordNext())


def move_word_prev(context: ViewContext, binding) -> ViewResult:
    del binding
    return _apply(context, MoveWordPrev())


def insert_newline(context: ViewContext, binding) -> ViewResult:
    del binding
    return _apply(context, InsertNewline())


def delete_backward(context: ViewContext, binding) -> ViewResult:
    del binding
    return _apply(context, DeleteBackward())


def close_note(context: ViewContext, binding) -> ViewResult:
    """Store the editor's lines back into the note and return to the list.

    A new note that is still a single empty line is dropped instead of saved.
    """

    del binding
    lines = list(context.editor.lines())
    title = title_from_lines(lines)
    note = None
    if context.editing_id is not None:
        note = context.notes.get(context.editing_id)

    if note is not None:
        if note.content == lines:
            return _back_to_list(context, status="close_unchanged")
        note.update(title, lines)
        payload = {"action": "update", "id": note.id}
    elif lines == [""]:
        return _back_to_list(context, status="close_empty")
    else:
        note = context.notes.insert(Note(id=0, title=title, content=lines))
        context.selected = len(context.notes) - 1
        payload = {"action": "insert", "id": note.id}

    context.bus.emit("notes.changed", payload)
    return _back_to_list(context, status="close_saved", message=note.title)


def discard_note(context: ViewContext, binding) -> ViewResult:
    del binding
    context.editor.dispatch(Reset())
    return _back_to_list(context, status="discard")


def _back_to_list(
    context: ViewContext, *, status: str, message: str | None = None
) -> ViewResult:
    context.editing_id = None
    return ViewResult(consumed=True, switch_to="list", status=status, message=message)


__all__ = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "move_word_next",
    "move_word_prev",
    "insert_newline",
    "delete_backward",
    "close_note",
    "discard_note",
]
