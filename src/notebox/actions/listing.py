"""Actions available while browsing the note list."""

from __future__ import annotations

from notebox.editor import Reset
from notebox.views.base_view import ViewContext, ViewResult


def quit_app(context: ViewContext, binding) -> ViewResult:
    del binding
    context.should_quit = True
    context.bus.emit("app.quit", None)
    return ViewResult(consumed=True, status="quit")


def select_previous(context: ViewContext, binding) -> ViewResult:
    del binding
    if context.selected > 0:
        context.selected -= 1
    return _selection_result(context)


def select_next(context: ViewContext, binding) -> ViewResult:
    del binding
    if context.selected < len(context.notes) - 1:
        context.selected += 1
    return _selection_result(context)


def open_note(context: ViewContext, binding) -> ViewResult:
    del binding
    note = context.selected_note()
    if note is None:
        return ViewResult(consumed=False, status="no_note")
    context.editor.push_lines(note.content)
    context.editing_id = note.id
    return ViewResult(
        consumed=True, switch_to="editor", status="open_note", message=note.display
    )


def new_note(context: ViewContext, binding) -> ViewResult:
    del binding
    context.editor.dispatch(Reset())
    context.editing_id = None
    return ViewResult(consumed=True, switch_to="editor", status="new_note")


def delete_note(context: ViewContext, binding) -> ViewResult:
    del binding
    note = context.selected_note()
    if note is None:
        return ViewResult(consumed=False, status="no_note")
    context.notes.remove(note.id)
    context.selected = max(0, min(context.selected, len(context.notes) - 1))
    context.bus.emit("notes.changed", {"action": "delete", "id": note.id})
    return ViewResult(consumed=True, status="delete_note", message=note.display)


def _selection_result(context: ViewContext) -> ViewResult:
    context.bus.emit("list.selection", context.selected)
    return ViewResult(consumed=True, status="select", message=str(context.selected))


__all__ = [
    "quit_app",
    "select_previous",
    "select_next",
    "open_note",
    "new_note",
    "delete_note",
]
