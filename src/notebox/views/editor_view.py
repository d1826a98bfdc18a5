"""Editing a single note."""

from __future__ import annotations

from typing import Optional

from notebox.editor import InsertChar

from .base_view import KeyInput, KeymapView, ViewResult

_TEXT_BLOCKING_MODIFIERS = frozenset({"ctrl", "alt", "meta"})


class EditorView(KeymapView):
    """Keys bound in the ``editor`` table run editor actions; any other key
    carrying one printable character is typed into the buffer."""

    name = "editor"

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        self.context.bus.emit("editor.open", self.context.editing_id)

    def handle_unbound(self, key: KeyInput) -> ViewResult:
        text = key.text
        if not text or len(text) != 1 or not text.isprintable():
            return ViewResult(consumed=False, status="unbound")
        if _TEXT_BLOCKING_MODIFIERS.intersection(mod.lower() for mod in key.modifiers):
            return ViewResult(consumed=False, status="unbound")
        self.context.editor.dispatch(InsertChar(text))
        self.context.bus.emit("editor.changed", self.context.editor.cursor)
        return ViewResult(consumed=True, status="insert_char")


__all__ = ["EditorView"]
