"""Built-in keymaps for the list and editor views."""

from __future__ import annotations

from typing import Dict, Tuple

from notebox.actions import editing as editing_actions
from notebox.actions import listing as listing_actions

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef("list.quit", listing_actions.quit_app, "Quit"),
    ActionRef("list.select_previous", listing_actions.select_previous, "Previous note"),
    ActionRef("list.select_next", listing_actions.select_next, "Next note"),
    ActionRef("list.open_note", listing_actions.open_note, "Open note"),
    ActionRef("list.new_note", listing_actions.new_note, "New note"),
    ActionRef("list.delete_note", listing_actions.delete_note, "Delete note"),
    ActionRef("editor.move_left", editing_actions.move_left, "Cursor left"),
    ActionRef("editor.move_right", editing_actions.move_right, "Cursor right"),
    ActionRef("editor.move_up", editing_actions.move_up, "Cursor up"),
    ActionRef("editor.move_down", editing_actions.move_down, "Cursor down"),
    ActionRef("editor.move_word_next", editing_actions.move_word_next, "Next word"),
    ActionRef("editor.move_word_prev", editing_actions.move_word_prev, "Previous word"),
    ActionRef("editor.insert_newline", editing_actions.insert_newline, "New line"),
    ActionRef("editor.delete_backward", editing_actions.delete_backward, "Backspace"),
    ActionRef("editor.close", editing_actions.close_note, "Save and close"),
    ActionRef("editor.discard", editing_actions.discard_note, "Discard changes"),
)

# view -> (key, action id, required flags)
DEFAULT_KEYS: Dict[str, Tuple[Tuple[str, str, Tuple[str, ...]], ...]] = {
    "list": (
        ("q", "list.quit", ()),
        ("ESC", "list.quit", ()),
        ("ctrl+c", "list.quit", ()),
        ("n", "list.new_note", ()),
        ("ENTER", "list.open_note", ("has_notes",)),
        ("d", "list.delete_note", ("has_notes",)),
        ("UP", "list.select_previous", ()),
        ("k", "list.select_previous", ()),
        ("DOWN", "list.select_next", ()),
        ("j", "list.select_next", ()),
    ),
    "editor": (
        ("ESC", "editor.close", ()),
        ("ctrl+r", "editor.discard", ()),
        ("ENTER", "editor.insert_newline", ()),
        ("BACKSPACE", "editor.delete_backward", ()),
        ("LEFT", "editor.move_left", ()),
        ("RIGHT", "editor.move_right", ()),
        ("UP", "editor.move_up", ()),
        ("DOWN", "editor.move_down", ()),
        ("ctrl+RIGHT", "editor.move_word_next", ()),
        ("ctrl+LEFT", "editor.move_word_prev", ()),
    ),
}


def default_bindings() -> list[Binding]:
    """One binding per ``DEFAULT_KEYS`` row, with ids like ``list:ctrl+c``."""

    bindings = []
    for view, rows in DEFAULT_KEYS.items():
        for key, action_id, requires in rows:
            stroke = KeyStroke.parse(key)
            bindings.append(
                Binding(
                    id=f"{view}:{stroke.token}",
                    view=view,
                    stroke=stroke,
                    action_id=action_id,
                    requires=requires,
                )
            )
    return bindings


def load_default_keymaps(registry: KeymapRegistry) -> KeymapRegistry:
    """Register the built-in actions and bindings on ``registry``."""

    for action in DEFAULT_ACTIONS:
        registry.add_action(action)
    for binding in default_bindings():
        registry.bind(binding)
    return registry


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_KEYS", "default_bindings", "load_default_keymaps"]
