"""Executable Textual app hosting the notebox views."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import DataTable, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use notebox.adapters.textual.app"
    ) from exc

from rich.text import Text

from notebox.buffer import BufferMirror
from notebox.editor import Editor
from notebox.notes import DEFAULT_NOTES_PATH, NoteList, load_notes
from notebox.runtime import telemetry
from notebox.views import EditorView, ListView, ViewBus, ViewContext
from notebox.views.view_manager import ViewManager

from .controller import TextualNotesAdapter, TextualUIHooks
from .render import cursor_label, nav_hints, render_lines

# header, status line, hint line, and the editor border
CHROME_ROWS = 5

_NAMED_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "backspace": "BACKSPACE",
    "tab": "TAB",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
}


def create_default_manager(notes: NoteList | None = None) -> ViewManager:
    """Build a ViewManager with the list and editor views and default keymaps."""

    context = ViewContext(notes=notes or NoteList(), editor=Editor(), bus=ViewBus())
    manager = ViewManager(context)
    manager.register_view(ListView)
    manager.register_view(EditorView)
    return manager


def normalize_key(key: str, character: Optional[str]) -> Tuple[str, Optional[str], Tuple[str, ...]]:
    """Split a Textual key name into ``(key, text, modifiers)``."""

    *modifiers, name = key.split("+") if key != "plus" else ["+"]
    if name in _NAMED_KEYS:
        return (_NAMED_KEYS[name], None, tuple(modifiers))
    if character and len(character) == 1 and character.isprintable():
        plain = tuple(mod for mod in modifiers if mod != "shift")
        return (character, character, plain)
    return (name.upper() if len(name) > 1 else name, None, tuple(modifiers))


class NoteboxApp(App[None]):
    """Note list plus a bounded-height editor pane."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #notes-table {
        height: 1fr;
    }

    #editor-view {
        height: 1fr;
        border: round $accent;
        padding: 0 1;
    }

    #status-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }

    #hint-line {
        height: 1;
        background: $surface-darken-2;
        padding: 0 1;
    }
    """

    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, *, notes_path: Path, notes: NoteList | None = None) -> None:
        super().__init__()
        self.notes_path = notes_path
        self.manager = create_default_manager(notes)
        self.adapter: TextualNotesAdapter | None = None
        self._table: DataTable | None = None
        self._editor_widget: Static | None = None
        self._status_widget: Static | None = None
        self._hint_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="body"):
            self._table = DataTable(id="notes-table", cursor_type="row")
            self._table.can_focus = False
            yield self._table
            self._editor_widget = Static("", id="editor-view")
            yield self._editor_widget
        self._status_widget = Static("", id="status-line")
        self._hint_widget = Static("", id="hint-line")
        yield self._status_widget
        yield self._hint_widget

    def on_mount(self) -> None:
        assert self._table is not None
        self._table.add_columns("ID", "Title", "Created At")
        hooks = TextualUIHooks(
            update_editor=self._update_editor,
            update_list=self._update_list,
            update_status=self._update_status,
            show_view=self._show_view,
            request_quit=self.exit,
            log=lambda line: telemetry.get_logger("notebox.app").debug(line),
        )
        self.adapter = TextualNotesAdapter(
            self.manager, hooks, notes_path=self.notes_path
        )
        self.adapter.resize(max(1, self.size.height - CHROME_ROWS))

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(max(1, event.size.height - CHROME_ROWS))

    def on_key(self, event: events.Key) -> None:
        if not self.adapter or event.key == "ctrl+q":
            return
        key, text, modifiers = normalize_key(event.key, event.character)
        result = self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        if result.consumed:
            event.stop()

    def _update_editor(self, mirror: BufferMirror) -> None:
        if self._editor_widget:
            self._editor_widget.update(Text("\n").join(render_lines(mirror)))
            self._editor_widget.border_title = cursor_label(mirror)

    def _update_list(self, rows: List[Tuple[str, str, str]], selected: int) -> None:
        if not self._table:
            return
        self._table.clear()
        for row in rows:
            self._table.add_row(*row)
        if rows:
            self._table.move_cursor(row=selected)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _show_view(self, name: str) -> None:
        editing = name == "editor"
        if self._table:
            self._table.display = not editing
        if self._editor_widget:
            self._editor_widget.display = editing
        if self._hint_widget:
            self._hint_widget.update(nav_hints(self.manager.keymap_registry, name))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse and edit notes.")
    parser.add_argument(
        "--notes-path",
        type=Path,
        default=Path(os.environ.get("NOTEBOX_NOTES_PATH", str(DEFAULT_NOTES_PATH))),
        help="JSON file holding the notes (default: ./notes/notes.json)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="Telemetry preset; NOTEBOX_* environment variables apply otherwise",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    notes = load_notes(args.notes_path)
    NoteboxApp(notes_path=args.notes_path, notes=notes).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
