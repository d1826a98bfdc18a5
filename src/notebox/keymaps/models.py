"""Keys, actions, and the bindings that connect them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Mapping


def _modifier_set(modifiers: Iterable[str]) -> tuple[str, ...]:
    return tuple(sorted({mod.strip().lower() for mod in modifiers if mod.strip()}))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """A key plus the modifiers held with it.

    Named keys are upper case (``ENTER``, ``LEFT``); printable keys are the
    character itself. ``token`` is the ``ctrl+LEFT`` form that bindings are
    indexed by and that live input is looked up with.
    """

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _modifier_set(self.modifiers))

    @property
    def token(self) -> str:
        return "+".join((*self.modifiers, self.key))

    @classmethod
    def parse(cls, text: str) -> "KeyStroke":
        *modifiers, key = text.split("+")
        return cls(key, tuple(modifiers))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named handler a binding runs; called as ``handler(context, binding)``."""

    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("action id cannot be empty")

    def __call__(self, *args: object) -> object:
        return self.handler(*args)


@dataclass(frozen=True, slots=True)
class Binding:
    """``stroke`` pressed in ``view`` runs ``action_id``.

    Every flag in ``requires`` must be set in the view's flags for the
    binding to fire.
    """

    id: str
    view: str
    stroke: KeyStroke
    action_id: str
    requires: tuple[str, ...] = ()

    @property
    def token(self) -> str:
        return self.stroke.token

    def active(self, flags: Mapping[str, bool]) -> bool:
        return all(flags.get(flag, False) for flag in self.requires)


__all__ = ["ActionRef", "Binding", "KeyStroke"]
