"""Note records and the in-memory note collection."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Dict, Iterator, List, Optional, Sequence

UNTITLED = "Untitled"
TITLE_WIDTH = 40


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def title_from_lines(lines: Sequence[str]) -> str:
    """First non-blank line, trimmed to a list-friendly width."""

    for line in lines:
        stripped = line.strip()
        if stripped:
            return stripped[:TITLE_WIDTH]
    return UNTITLED


@dataclass(slots=True)
class Note:
    id: int
    title: str
    content: List[str] = field(default_factory=lambda: [""])
    created_at: datetime = field(default_factory=_utcnow)

    @property
    def display(self) -> str:
        return f"{self.id} {self.title}"

    def update(self, title: str, content: Sequence[str]) -> None:
        self.title = title
        self.content = list(content) or [""]

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "title": self.title,
            "content": list(self.content),
            "created_at": self.created_at.isoformat(),
        }


class NoteList:
    """Ordered notes with ids assigned on insert."""

    def __init__(self, notes: Optional[Sequence[Note]] = None) -> None:
        self._notes: List[Note] = list(notes or ())

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self._notes)

    def __getitem__(self, index: int) -> Note:
        return self._notes[index]

    def is_empty(self) -> bool:
        return not self._notes

    def max_note_id(self) -> Optional[int]:
        return max((note.id for note in self._notes), default=None)

    def insert(self, note: Note) -> Note:
        """Store a copy of ``note`` under the next free id and return it."""

        current = self.max_note_id()
        stored = replace(
            note, id=1 if current is None else current + 1, content=list(note.content)
        )
        self._notes.append(stored)
        return stored

    def get(self, note_id: int) -> Optional[Note]:
        return next((note for note in self._notes if note.id == note_id), None)

    def remove(self, note_id: int) -> Optional[Note]:
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                return self._notes.pop(index)
        return None

    def to_records(self) -> List[Dict[str, object]]:
        return [note.to_dict() for note in self._notes]


__all__ = ["Note", "NoteList", "UNTITLED", "title_from_lines"]
