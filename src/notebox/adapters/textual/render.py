"""Pure rendering helpers shared by the Textual app and its tests."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from rich.text import Text

from notebox.buffer import BufferMirror
from notebox.keymaps import KeymapRegistry
from notebox.notes import Note

CURSOR_STYLE = "black on bright_yellow"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


def render_lines(mirror: BufferMirror, *, cursor_style: str = CURSOR_STYLE) -> List[Text]:
    """One ``Text`` per visible row, with the cursor cell highlighted.

    A cursor past the end of its line highlights a trailing space.
    """

    first, _ = mirror.viewport
    cursor_row, cursor_col = mirror.cursor
    rendered: List[Text] = []
    for row, line in enumerate(mirror.visible_lines, start=first):
        if row != cursor_row:
            rendered.append(Text(line))
            continue
        text = Text(line[:cursor_col])
        text.append(line[cursor_col : cursor_col + 1] or " ", style=cursor_style)
        text.append(line[cursor_col + 1 :])
        rendered.append(text)
    return rendered


def cursor_label(mirror: BufferMirror) -> str:
    """1-based ``Ln, Col`` position shown in the editor border."""

    row, col = mirror.cursor
    return f"Ln {row + 1}, Col {col + 1}"


def note_rows(notes: Iterable[Note]) -> List[Tuple[str, str, str]]:
    return [
        (str(note.id), note.title, note.created_at.strftime(TIMESTAMP_FORMAT))
        for note in notes
    ]


def nav_hints(registry: KeymapRegistry, view: str) -> str:
    """``(key) description`` for each action bound in ``view``, first key wins."""

    hints: dict[str, str] = {}
    for binding in registry.bindings(view):
        if binding.action_id not in hints:
            action = registry.action(binding.action_id)
            hints[binding.action_id] = f"({binding.token}) {action.description}"
    return "  ".join(hints[action_id] for action_id in sorted(hints))


__all__ = ["render_lines", "cursor_label", "note_rows", "nav_hints", "CURSOR_STYLE"]
