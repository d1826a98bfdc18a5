"""JSON persistence for :class:`NoteList`.

The file holds a JSON array of note objects::

    [{"id": 1, "title": "...", "content": ["line", ...], "created_at": "..."}]

Writes go to a temporary sibling file that then replaces the target, so an
interrupted save never leaves a half-written collection behind.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, List, Mapping

from notebox.runtime import telemetry

from .models import Note, NoteList

DEFAULT_NOTES_PATH = Path("notes") / "notes.json"


class NoteStoreError(RuntimeError):
    """Raised when the note file cannot be read, parsed, or written."""

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


def read_notes(path: Path | str) -> NoteList:
    """Parse the note file at ``path``; any problem raises :class:`NoteStoreError`."""

    path = Path(path)
    with telemetry.span(
        "notes::read", component="notes", metadata={"path": str(path)}
    ) as handle:
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise NoteStoreError(f"Could not read {path}: {exc}", path=path) from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise NoteStoreError(f"Invalid JSON in {path}: {exc}", path=path) from exc
        if not isinstance(data, list):
            raise NoteStoreError(f"{path} must hold a JSON array", path=path)

        notes = [_note_from_record(record, path) for record in data]
        handle.add_metadata("count", len(notes))
        return NoteList(notes)


def load_notes(path: Path | str) -> NoteList:
    """Load notes for a session, falling back to an empty collection.

    A missing file is a fresh start. Unreadable or malformed content is logged
    and rejected as a whole rather than partially loaded.
    """

    path = Path(path)
    if not path.exists():
        telemetry.record_event("notes.missing", data={"path": str(path)})
        return NoteList()
    try:
        return read_notes(path)
    except NoteStoreError as exc:
        telemetry.record_event(
            "notes.load_failed",
            level="warning",
            data={"path": str(path), "reason": str(exc)},
        )
        return NoteList()


def save_notes(notes: NoteList, path: Path | str) -> None:
    """Write ``notes`` to ``path`` atomically, creating parent directories."""

    path = Path(path)
    temp_path = path.with_name(path.name + ".tmp")
    with telemetry.span(
        "notes::save",
        component="notes",
        metadata={"path": str(path), "count": len(notes)},
    ):
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_path, "w", encoding="utf-8") as handle:
                json.dump(notes.to_records(), handle, indent=2, ensure_ascii=False)
                handle.write("\n")
            temp_path.replace(path)
        except OSError as exc:
            if temp_path.exists():
                temp_path.unlink()
            raise NoteStoreError(f"Could not write {path}: {exc}", path=path) from exc


def _note_from_record(record: Any, path: Path) -> Note:
    if not isinstance(record, Mapping):
        raise NoteStoreError("Note records must be JSON objects", path=path)
    try:
        note_id = record["id"]
        title = record["title"]
        content = record["content"]
        created_raw = record["created_at"]
    except KeyError as exc:
        raise NoteStoreError(f"Note record missing {exc}", path=path) from exc

    if not isinstance(note_id, int) or isinstance(note_id, bool):
        raise NoteStoreError(f"Note id must be an integer: {note_id!r}", path=path)
    if not isinstance(title, str):
        raise NoteStoreError(f"Note {note_id} has a non-string title", path=path)
    lines = _content_lines(content, note_id, path)
    try:
        created_at = datetime.fromisoformat(str(created_raw))
    except ValueError as exc:
        raise NoteStoreError(
            f"Note {note_id} has an invalid created_at: {created_raw!r}", path=path
        ) from exc
    return Note(id=note_id, title=title, content=lines, created_at=created_at)


def _content_lines(content: Any, note_id: int, path: Path) -> List[str]:
    if not isinstance(content, list) or not all(
        isinstance(line, str) for line in content
    ):
        raise NoteStoreError(
            f"Note {note_id} content must be a list of strings", path=path
        )
    if any("\n" in line for line in content):
        raise NoteStoreError(
            f"Note {note_id} content lines cannot contain newlines", path=path
        )
    return list(content) or [""]


__all__ = [
    "DEFAULT_NOTES_PATH",
    "NoteStoreError",
    "load_notes",
    "read_notes",
    "save_notes",
]
