"""Browsing the note collection."""

from __future__ import annotations

from typing import Optional

from .base_view import KeyInput, KeymapView, ViewResult


class ListView(KeymapView):
    """Keeps the selection inside the list and the ``has_notes`` flag current,
    so open and delete only fire when there is a note to act on."""

    name = "list"

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        self._sync_selection()

    def handle_key(self, key: KeyInput) -> ViewResult:
        self._sync_selection()
        return super().handle_key(key)

    def _sync_selection(self) -> None:
        notes = self.context.notes
        self.context.selected = max(0, min(self.context.selected, len(notes) - 1))
        self._flags["has_notes"] = not notes.is_empty()


__all__ = ["ListView"]
