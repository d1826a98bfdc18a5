from __future__ import annotations

from typing import Iterable, List, Optional

from notebox.editor import Editor
from notebox.notes import Note, NoteList
from notebox.views import EditorView, KeyInput, ListView, ViewBus, ViewContext
from notebox.views.view_manager import ViewManager


def make_manager(notes: Optional[NoteList] = None) -> ViewManager:
    context = ViewContext(notes=notes or NoteList(), editor=Editor(), bus=ViewBus())
    manager = ViewManager(context)
    manager.register_view(ListView)
    manager.register_view(EditorView)
    return manager


def make_notes(*contents: List[str]) -> NoteList:
    notes = NoteList()
    for lines in contents:
        notes.insert(Note(id=0, title=lines[0], content=lines))
    return notes


def type_text(manager: ViewManager, text: str) -> None:
    for char in text:
        manager.handle_key(KeyInput(key=char, text=char))


def press(manager: ViewManager, *keys: str, modifiers: Iterable[str] = ()) -> None:
    for key in keys:
        manager.handle_key(KeyInput(key=key, modifiers=tuple(modifiers)))


def active(manager: ViewManager) -> str:
    view = manager.active_view
    assert view is not None
    return view.name


def test_list_view_is_active_first() -> None:
    manager = make_manager()

    assert active(manager) == "list"
    assert manager.context.extras["keymap_flags"]["has_notes"] is False


def test_new_note_is_written_and_saved_on_close() -> None:
    manager = make_manager()
    changes: list[object] = []
    manager.context.bus.subscribe("notes.changed", changes.append)

    result = manager.handle_key(KeyInput(key="n", text="n"))
    assert result.switch_to == "editor"
    assert active(manager) == "editor"

    type_text(manager, "hi")
    press(manager, "ENTER")
    type_text(manager, "there")
    closed = manager.handle_key(KeyInput(key="ESC"))

    assert closed.status == "close_saved"
    assert active(manager) == "list"
    notes = manager.context.notes
    assert len(notes) == 1
    assert notes[0].id == 1
    assert notes[0].title == "hi"
    assert notes[0].content == ["hi", "there"]
    assert changes == [{"action": "insert", "id": 1}]


def test_empty_new_note_is_dropped() -> None:
    manager = make_manager()

    press(manager, "n")
    result = manager.handle_key(KeyInput(key="ESC"))

    assert result.status == "close_empty"
    assert manager.context.notes.is_empty()


def test_new_note_starts_from_blank_editor() -> None:
    manager = make_manager(make_notes(["old text"]))

    press(manager, "ENTER")
    press(manager, "ESC")
    press(manager, "n")

    assert manager.context.editor.lines() == ("",)
    assert manager.context.editing_id is None


def test_open_requires_notes() -> None:
    manager = make_manager()

    result = manager.handle_key(KeyInput(key="ENTER"))

    assert result.consumed is True
    assert result.status == "inactive"
    assert result.message == "Open note: nothing to act on"
    assert active(manager) == "list"


def test_open_edit_and_close_updates_note() -> None:
    manager = make_manager(make_notes(["first"], ["second", "body"]))

    press(manager, "DOWN")
    assert manager.context.selected == 1
    press(manager, "ENTER")
    assert manager.context.editing_id == 2
    assert manager.context.editor.lines() == ("second", "body")

    press(manager, "DOWN")
    type_text(manager, "!")
    result = manager.handle_key(KeyInput(key="ESC"))

    assert result.status == "close_saved"
    assert manager.context.notes.get(2).content == ["second", "!body"]
    assert manager.context.editing_id is None


def test_closing_unchanged_note_does_not_emit_change() -> None:
    manager = make_manager(make_notes(["keep"]))
    changes: list[object] = []
    manager.context.bus.subscribe("notes.changed", changes.append)

    press(manager, "ENTER", "RIGHT")
    result = manager.handle_key(KeyInput(key="ESC"))

    assert result.status == "close_unchanged"
    assert changes == []


def test_discard_leaves_note_untouched() -> None:
    manager = make_manager(make_notes(["keep me"]))

    press(manager, "ENTER")
    type_text(manager, "junk")
    result = manager.handle_key(KeyInput(key="r", modifiers=("ctrl",)))

    assert result.status == "discard"
    assert active(manager) == "list"
    assert manager.context.notes[0].content == ["keep me"]
    assert manager.context.editor.lines() == ("",)


def test_selection_is_clamped() -> None:
    manager = make_manager(make_notes(["a"], ["b"]))

    press(manager, "k", "UP")
    assert manager.context.selected == 0

    press(manager, "j", "j", "DOWN")
    assert manager.context.selected == 1


def test_delete_removes_selected_note() -> None:
    manager = make_manager(make_notes(["a"], ["b"]))

    press(manager, "j")
    result = manager.handle_key(KeyInput(key="d", text="d"))

    assert result.status == "delete_note"
    assert result.message == "2 b"
    assert [note.id for note in manager.context.notes] == [1]
    assert manager.context.selected == 0


def test_quit_keys_set_flag() -> None:
    for key, modifiers in (("q", ()), ("ESC", ()), ("c", ("ctrl",))):
        manager = make_manager()
        quits: list[object] = []
        manager.context.bus.subscribe("app.quit", quits.append)

        result = manager.handle_key(KeyInput(key=key, modifiers=modifiers))

        assert result.status == "quit"
        assert manager.context.should_quit is True
        assert quits == [None]


def test_editor_word_motion_bindings() -> None:
    manager = make_manager(make_notes(["alpha beta gamma"]))

    press(manager, "ENTER")
    press(manager, "RIGHT", modifiers=("ctrl",))
    assert manager.context.editor.cursor == (0, 6)

    press(manager, "RIGHT", modifiers=("ctrl",))
    press(manager, "LEFT", modifiers=("ctrl",))
    assert manager.context.editor.cursor == (0, 6)


def test_editor_backspace_and_arrows() -> None:
    manager = make_manager()

    press(manager, "n")
    type_text(manager, "abc")
    press(manager, "LEFT", "BACKSPACE")

    assert manager.context.editor.lines() == ("ac",)
    assert manager.context.editor.cursor == (0, 1)


def test_editor_ignores_modified_characters() -> None:
    manager = make_manager()
    press(manager, "n")

    result = manager.handle_key(KeyInput(key="x", text="x", modifiers=("ctrl",)))

    assert result.consumed is False
    assert manager.context.editor.lines() == ("",)


def test_list_keys_are_not_bound_in_editor() -> None:
    manager = make_manager()
    press(manager, "n")

    type_text(manager, "qnjd")

    assert active(manager) == "editor"
    assert manager.context.editor.lines() == ("qnjd",)


def test_resize_updates_editor_viewport() -> None:
    manager = make_manager(make_notes([str(i) for i in range(30)]))
    press(manager, "ENTER")
    manager.resize(4)

    for _ in range(10):
        press(manager, "DOWN")

    assert manager.context.editor.viewport.as_tuple() == (7, 11)
