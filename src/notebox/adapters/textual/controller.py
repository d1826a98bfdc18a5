"""Adapter wiring the ViewManager to Textual-facing UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from notebox.buffer import BufferMirror
from notebox.notes import NoteStoreError, save_notes
from notebox.runtime import telemetry
from notebox.views import KeyInput, ViewResult
from notebox.views.view_manager import ViewManager

from .render import note_rows


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_editor: Callable[[BufferMirror], None]
    update_list: Callable[[List[Tuple[str, str, str]], int], None] = _noop
    update_status: Callable[[str], None] = _noop
    show_view: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    request_quit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


class TextualNotesAdapter:
    """Bridges ViewManager and bus events to a Textual-friendly surface.

    When ``notes_path`` is set, every ``notes.changed`` event saves the whole
    collection there. A failed save is reported through ``update_status`` and
    leaves the session untouched.
    """

    def __init__(
        self,
        manager: ViewManager,
        hooks: TextualUIHooks,
        *,
        notes_path: Path | str | None = None,
    ) -> None:
        self.manager = manager
        self.hooks = hooks
        self.notes_path = Path(notes_path) if notes_path is not None else None
        self._subscribe_events()
        self._refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ViewResult:
        """Translate a host key into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).lower() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.manager.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        status = result.message or result.status
        if status:
            self.hooks.update_status(status)
        self._refresh()
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def resize(self, editor_height: int) -> None:
        self.manager.resize(editor_height)
        self._refresh_editor()

    def save(self) -> bool:
        if self.notes_path is None:
            return False
        try:
            save_notes(self.manager.context.notes, self.notes_path)
        except NoteStoreError as exc:
            telemetry.record_event(
                "notes.save_failed",
                level="error",
                data={"path": str(self.notes_path), "reason": str(exc)},
            )
            self.hooks.update_status(f"save failed: {exc}")
            return False
        return True

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in (
            "app.quit",
            "notes.changed",
            "list.selection",
            "editor.open",
            "editor.changed",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name == "notes.changed":
            self.save()
        elif name == "app.quit":
            self.hooks.request_quit()

    def _refresh(self) -> None:
        view = self.manager.active_view
        if view is not None:
            self.hooks.show_view(view.name)
        context = self.manager.context
        self.hooks.update_list(note_rows(context.notes), context.selected)
        self._refresh_editor()

    def _refresh_editor(self) -> None:
        self.hooks.update_editor(self.manager.context.editor.pull_buffer())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        context = self.manager.context
        active_view = self.manager.active_view
        return {
            "view": active_view.name if active_view else "?",
            "cursor": context.editor.cursor,
            "viewport": context.editor.viewport.as_tuple(),
            "selected": context.selected,
            "notes": len(context.notes),
        }


__all__ = ["TextualNotesAdapter", "TextualUIHooks"]
