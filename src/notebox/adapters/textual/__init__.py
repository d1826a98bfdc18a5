"""Textual host integration. ``app`` needs the ``textual`` package at import."""

from .controller import TextualNotesAdapter, TextualUIHooks
from .render import cursor_label, nav_hints, note_rows, render_lines

__all__ = [
    "TextualNotesAdapter",
    "TextualUIHooks",
    "cursor_label",
    "nav_hints",
    "note_rows",
    "render_lines",
]
