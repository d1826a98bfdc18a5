"""Per-view key tables and key resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Mapping, Optional

from notebox.runtime.telemetry import span

from .models import ActionRef, Binding


class KeymapConflictError(RuntimeError):
    """Raised when a key is bound twice in the same view."""

    def __init__(self, binding: Binding, existing: Binding) -> None:
        super().__init__(
            f"Key '{binding.token}' in view '{binding.view}' is already bound by "
            f"'{existing.id}'"
        )
        self.binding = binding
        self.existing = existing


@dataclass(frozen=True, slots=True)
class Resolution:
    """What a key means in a view right now.

    ``inactive`` means the key is bound but a required flag is unset.
    """

    status: Literal["match", "inactive", "miss"]
    binding: Optional[Binding] = None
    action: Optional[ActionRef] = None


class KeymapRegistry:
    """Actions by id, and for each view a ``token -> binding`` table."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._tables: Dict[str, Dict[str, str]] = {}
        self._logger_name = logger_name

    def action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def add_action(self, action: ActionRef) -> ActionRef:
        if action.id in self._actions:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def bind(self, binding: Binding) -> Binding:
        with span(
            "keymaps::bind",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "view": binding.view},
        ):
            if binding.action_id not in self._actions:
                raise KeyError(
                    f"Binding '{binding.id}' runs unknown action '{binding.action_id}'"
                )
            if binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")
            table = self._tables.setdefault(binding.view, {})
            holder = table.get(binding.token)
            if holder is not None:
                raise KeymapConflictError(binding, self._bindings[holder])
            table[binding.token] = binding.id
            self._bindings[binding.id] = binding
            return binding

    def bindings(self, view: str) -> list[Binding]:
        """Bindings of ``view`` in registration order."""

        return [self._bindings[binding_id] for binding_id in self._tables.get(view, {}).values()]

    def views(self) -> tuple[str, ...]:
        return tuple(sorted(self._tables))

    def resolve(
        self, view: str, token: str, flags: Mapping[str, bool] | None = None
    ) -> Resolution:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"view": view, "token": token},
        ) as handle:
            binding_id = self._tables.get(view, {}).get(token)
            if binding_id is None:
                handle.add_metadata("status", "miss")
                return Resolution("miss")
            binding = self._bindings[binding_id]
            action = self._actions[binding.action_id]
            status = "match" if binding.active(flags or {}) else "inactive"
            handle.add_metadata("status", status)
            return Resolution(status, binding, action)


__all__ = ["KeymapConflictError", "KeymapRegistry", "Resolution"]
