"""View manager: owns the active view, switches views, and dispatches keys."""

from __future__ import annotations

from typing import Dict, Optional, Type

from notebox.keymaps import KeymapRegistry
from notebox.keymaps.defaults import load_default_keymaps
from notebox.runtime import telemetry

from .base_view import KeyInput, View, ViewContext, ViewResult


class ViewManager:
    """Routes keys to the active view and follows the switches it asks for.

    Without an explicit ``keymap_registry`` a registry holding the built-in
    keymaps is created. The registry and the shared flag dict are published
    in ``context.extras`` for the views to pick up.
    """

    def __init__(
        self, context: ViewContext, *, keymap_registry: KeymapRegistry | None = None
    ) -> None:
        self.context = context
        self._views: Dict[str, View] = {}
        self._active: Optional[str] = None
        self.keymap_registry = keymap_registry or load_default_keymaps(
            KeymapRegistry(logger_name="notebox.keymaps")
        )
        self.context.extras["keymap_registry"] = self.keymap_registry
        self.context.extras.setdefault("keymap_flags", {})

    @property
    def active_view(self) -> Optional[View]:
        if self._active is None:
            return None
        return self._views.get(self._active)

    def register_view(self, view_cls: Type[View]) -> View:
        view = view_cls(self.context)
        if view.name in self._views:
            raise ValueError(f"View '{view.name}' already registered")
        self._views[view.name] = view
        if self._active is None:
            self._active = view.name
            view.on_enter(None)
        return view

    def switch_view(self, name: str) -> None:
        if name not in self._views:
            raise KeyError(f"Unknown view '{name}'")
        previous = self.active_view
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        self._views[name].on_enter(previous.name if previous else None)
        telemetry.record_event("view.switch", data={"view": name})

    def handle_key(self, key: KeyInput) -> ViewResult:
        view = self.active_view
        if view is None:
            raise RuntimeError("No active view registered")
        with telemetry.span(
            f"view::{view.name}",
            component=True,
            metadata={"key": key.key, "view": view.name},
        ):
            result = view.handle_key(key)
        if result.switch_to:
            self.switch_view(result.switch_to)
        return result

    def resize(self, editor_height: int) -> None:
        self.context.editor.resize(editor_height)


__all__ = ["ViewManager"]
