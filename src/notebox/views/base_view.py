"""Base classes and shared state for the application's views."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from notebox.editor import Editor
from notebox.keymaps import Resolution
from notebox.notes import Note, NoteList
from notebox.runtime import telemetry

from .keymap_helpers import key_to_token, keymap_flags, require_keymap_registry


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to views."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class ViewResult:
    """Outcome of ``View.handle_key``."""

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


class ViewBus:
    """Minimal event bus letting views and hosts exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ViewContext:
    """Session state shared by every view.

    ``editing_id`` is the id of the note open in the editor, or ``None`` while
    a new note is being written.
    """

    notes: NoteList
    editor: Editor
    bus: ViewBus
    selected: int = 0
    editing_id: Optional[int] = None
    should_quit: bool = False
    extras: Dict[str, object] = field(default_factory=dict)

    def selected_note(self) -> Optional[Note]:
        if self.notes.is_empty():
            return None
        return self.notes[self.selected]


class View:
    """Base class every concrete view inherits from."""

    name: str = "view"

    def __init__(self, context: ViewContext) -> None:
        self.context = context

    def on_enter(self, previous: Optional[str]) -> None:
        del previous

    def on_exit(self, next_view: Optional[str]) -> None:
        del next_view

    def handle_key(self, key: KeyInput) -> ViewResult:  # pragma: no cover - abstract
        raise NotImplementedError


class KeymapView(View):
    """View that looks keys up in its keymap table before anything else.

    Keys bound to an action whose required flags are unset are consumed and
    reported as ``inactive``. Unbound keys go to :meth:`handle_unbound`.
    """

    def __init__(self, context: ViewContext) -> None:
        super().__init__(context)
        self._registry = require_keymap_registry(context)
        self._flags = keymap_flags(context)

    def handle_key(self, key: KeyInput) -> ViewResult:
        resolution = self._registry.resolve(self.name, key_to_token(key), self._flags)
        if resolution.status == "match":
            return self._run(resolution)
        if resolution.status == "inactive":
            assert resolution.action is not None
            return ViewResult(
                consumed=True,
                status="inactive",
                message=f"{resolution.action.description}: nothing to act on",
            )
        return self.handle_unbound(key)

    def handle_unbound(self, key: KeyInput) -> ViewResult:
        del key
        return ViewResult(consumed=False, status="unbound")

    def _run(self, resolution: Resolution) -> ViewResult:
        binding, action = resolution.binding, resolution.action
        assert binding is not None and action is not None
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": binding.id, "action": action.id},
        ):
            outcome = action(self.context, binding)
        if isinstance(outcome, ViewResult):
            return outcome
        return ViewResult(consumed=True)


__all__ = [
    "KeyInput",
    "KeymapView",
    "View",
    "ViewBus",
    "ViewContext",
    "ViewResult",
]
