"""Editing core: commands, the Editor, word motion, and viewport math."""

from .commands import (
    Command,
    DeleteBackward,
    InsertChar,
    InsertNewline,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveUp,
    MoveWordNext,
    MoveWordPrev,
    Reset,
)
from .editor import DEFAULT_HEIGHT, Editor
from .viewport import Viewport, compute_viewport
from .words import Direction, find_boundary

__all__ = [
    "Command",
    "InsertChar",
    "InsertNewline",
    "DeleteBackward",
    "MoveLeft",
    "MoveRight",
    "MoveUp",
    "MoveDown",
    "MoveWordNext",
    "MoveWordPrev",
    "Reset",
    "Editor",
    "DEFAULT_HEIGHT",
    "Viewport",
    "compute_viewport",
    "Direction",
    "find_boundary",
]
