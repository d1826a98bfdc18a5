"""Glue between views and the keymap registry kept in ``ViewContext.extras``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, cast

from notebox.keymaps import KeymapRegistry, KeyStroke

if TYPE_CHECKING:
    from .base_view import KeyInput, ViewContext


def key_to_token(key: "KeyInput") -> str:
    return KeyStroke(key.key, key.modifiers).token


def require_keymap_registry(context: "ViewContext") -> KeymapRegistry:
    registry = context.extras.get("keymap_registry")
    if not isinstance(registry, KeymapRegistry):
        raise RuntimeError("ViewContext.extras missing 'keymap_registry'")
    return registry


def keymap_flags(context: "ViewContext") -> Dict[str, bool]:
    """The flag dict bindings' ``requires`` are checked against."""

    return cast(Dict[str, bool], context.extras.setdefault("keymap_flags", {}))


__all__ = ["key_to_token", "keymap_flags", "require_keymap_registry"]
