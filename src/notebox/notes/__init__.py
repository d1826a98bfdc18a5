"""Note records and their JSON file storage."""

from .models import UNTITLED, Note, NoteList, title_from_lines
from .store import (
    DEFAULT_NOTES_PATH,
    NoteStoreError,
    load_notes,
    read_notes,
    save_notes,
)

__all__ = [
    "Note",
    "NoteList",
    "UNTITLED",
    "title_from_lines",
    "DEFAULT_NOTES_PATH",
    "NoteStoreError",
    "load_notes",
    "read_notes",
    "save_notes",
]
