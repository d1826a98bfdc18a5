from __future__ import annotations

import json
from pathlib import Path
from typing import List, Tuple

import pytest

from notebox.adapters.textual import (
    TextualNotesAdapter,
    TextualUIHooks,
    cursor_label,
    nav_hints,
    note_rows,
    render_lines,
)
from notebox.editor import Editor
from notebox.keymaps import KeymapRegistry
from notebox.keymaps.defaults import load_default_keymaps
from notebox.notes import Note, NoteList
from notebox.views import EditorView, ListView, ViewBus, ViewContext
from notebox.views.view_manager import ViewManager


def make_manager(notes: NoteList | None = None) -> ViewManager:
    context = ViewContext(notes=notes or NoteList(), editor=Editor(), bus=ViewBus())
    manager = ViewManager(context)
    manager.register_view(ListView)
    manager.register_view(EditorView)
    return manager


def write_note(adapter: TextualNotesAdapter, text: str) -> None:
    adapter.handle_textual_key("n", text="n")
    for char in text:
        adapter.handle_textual_key(char, text=char)
    adapter.handle_textual_key("ESC")


def test_adapter_updates_editor_and_status() -> None:
    manager = make_manager()
    updates: List[Tuple[str, ...]] = []
    statuses: List[str] = []
    views: List[str] = []
    hooks = TextualUIHooks(
        update_editor=lambda mirror: updates.append(mirror.lines),
        update_status=statuses.append,
        show_view=views.append,
    )
    adapter = TextualNotesAdapter(manager, hooks)

    adapter.handle_textual_key("n", text="n")
    adapter.handle_textual_key("a", text="a")

    assert updates[-1] == ("a",)
    assert "new_note" in statuses
    assert "insert_char" in statuses
    assert views[0] == "list"
    assert views[-1] == "editor"


def test_adapter_saves_notes_on_change(tmp_path: Path) -> None:
    path = tmp_path / "notes.json"
    manager = make_manager()
    rows: List[List[Tuple[str, str, str]]] = []
    hooks = TextualUIHooks(
        update_editor=lambda mirror: None,
        update_list=lambda table, selected: rows.append(table),
    )
    adapter = TextualNotesAdapter(manager, hooks, notes_path=path)

    write_note(adapter, "groceries")

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert [record["title"] for record in saved] == ["groceries"]
    assert rows[-1][0][:2] == ("1", "groceries")


def test_adapter_reports_save_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    statuses: List[str] = []
    hooks = TextualUIHooks(update_editor=lambda mirror: None, update_status=statuses.append)
    adapter = TextualNotesAdapter(
        make_manager(), hooks, notes_path=blocker / "notes.json"
    )

    write_note(adapter, "x")

    assert any(status.startswith("save failed") for status in statuses)
    assert len(adapter.manager.context.notes) == 1


def test_adapter_save_without_path_is_noop() -> None:
    adapter = TextualNotesAdapter(
        make_manager(), TextualUIHooks(update_editor=lambda mirror: None)
    )

    assert adapter.save() is False


def test_adapter_relays_events_and_quit() -> None:
    events: List[str] = []
    quits: List[bool] = []
    hooks = TextualUIHooks(
        update_editor=lambda mirror: None,
        handle_event=lambda name, payload: events.append(name),
        request_quit=lambda: quits.append(True),
    )
    adapter = TextualNotesAdapter(make_manager(), hooks)

    adapter.handle_textual_key("n", text="n")
    adapter.handle_textual_key("z", text="z")
    adapter.handle_textual_key("ESC")
    adapter.handle_textual_key("q", text="q")

    assert events[:2] == ["editor.open", "editor.changed"]
    assert "notes.changed" in events
    assert events[-1] == "app.quit"
    assert quits == [True]


def test_adapter_lowercases_modifiers() -> None:
    adapter = TextualNotesAdapter(
        make_manager(NoteList([Note(id=1, title="t", content=["one two"])])),
        TextualUIHooks(update_editor=lambda mirror: None),
    )

    adapter.handle_textual_key("ENTER")
    adapter.handle_textual_key("RIGHT", modifiers=("Ctrl",))

    assert adapter.manager.context.editor.cursor == (0, 4)


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    hooks = TextualUIHooks(update_editor=lambda mirror: None, log=logs.append)
    adapter = TextualNotesAdapter(make_manager(), hooks)

    adapter.handle_textual_key("n", text="n")

    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)


def test_adapter_resize_refreshes_viewport() -> None:
    mirrors = []
    manager = make_manager(NoteList([Note(id=1, title="t", content=list("abcdefgh"))]))
    adapter = TextualNotesAdapter(
        manager, TextualUIHooks(update_editor=mirrors.append)
    )
    adapter.handle_textual_key("ENTER")

    adapter.resize(3)

    assert mirrors[-1].viewport == (0, 3)
    assert len(render_lines(mirrors[-1])) == 3


def test_render_lines_highlights_cursor_cell() -> None:
    editor = Editor(["abc", "de"])
    editor.place_cursor(1, 2)

    rendered = render_lines(editor.pull_buffer())

    assert [text.plain for text in rendered] == ["abc", "de "]
    span = rendered[1].spans[0]
    assert (span.start, span.end) == (2, 3)
    assert rendered[0].spans == []


def test_render_lines_only_shows_viewport() -> None:
    editor = Editor([f"row {i}" for i in range(10)], height=2)
    editor.place_cursor(5, 0)

    rendered = render_lines(editor.pull_buffer())

    assert [text.plain for text in rendered] == ["row 4", "row 5"]


def test_cursor_label_is_one_based() -> None:
    editor = Editor(["one", "two three"])
    assert cursor_label(editor.pull_buffer()) == "Ln 1, Col 1"

    editor.place_cursor(1, 4)

    assert cursor_label(editor.pull_buffer()) == "Ln 2, Col 5"


def test_note_rows_and_hints() -> None:
    registry = load_default_keymaps(KeymapRegistry())
    notes = NoteList([Note(id=3, title="plan", content=["plan"])])

    rows = note_rows(notes)
    hints = nav_hints(registry, "list")

    assert rows[0][:2] == ("3", "plan")
    assert "(q) Quit" in hints
    assert "(n) New note" in hints
    assert "(ctrl+RIGHT) Next word" in nav_hints(registry, "editor")


def test_normalize_key_maps_textual_names() -> None:
    pytest.importorskip("textual")
    from notebox.adapters.textual.app import normalize_key

    assert normalize_key("ctrl+right", None) == ("RIGHT", None, ("ctrl",))
    assert normalize_key("escape", None) == ("ESC", None, ())
    assert normalize_key("a", "a") == ("a", "a", ())
    assert normalize_key("shift+a", "A") == ("A", "A", ())
    assert normalize_key("ctrl+r", "\x12") == ("r", None, ("ctrl",))
