"""Actions bound to keys in each view."""

from .editing import (
    close_note,
    delete_backward,
    discard_note,
    insert_newline,
    move_down,
    move_left,
    move_right,
    move_up,
    move_word_next,
    move_word_prev,
)
from .listing import (
    delete_note,
    new_note,
    open_note,
    quit_app,
    select_next,
    select_previous,
)

__all__ = [
    "close_note",
    "delete_backward",
    "discard_note",
    "insert_newline",
    "move_down",
    "move_left",
    "move_right",
    "move_up",
    "move_word_next",
    "move_word_prev",
    "delete_note",
    "new_note",
    "open_note",
    "quit_app",
    "select_next",
    "select_previous",
]
