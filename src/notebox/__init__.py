"""Terminal note keeping built around a line-oriented editing buffer."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "editor",
    "keymaps",
    "notes",
    "runtime",
    "views",
]

__version__ = "0.1.0"
