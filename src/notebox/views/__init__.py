"""Application views: browsing the note list and editing a note."""

from .base_view import KeyInput, KeymapView, View, ViewBus, ViewContext, ViewResult
from .editor_view import EditorView
from .list_view import ListView

__all__ = [
    "KeyInput",
    "KeymapView",
    "View",
    "ViewBus",
    "ViewContext",
    "ViewResult",
    "EditorView",
    "ListView",
]
