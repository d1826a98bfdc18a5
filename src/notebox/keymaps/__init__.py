"""Key tables mapping keystrokes in each view to named actions.

The built-in tables live in :mod:`notebox.keymaps.defaults`, which imports
the action handlers and so is not re-exported here.
"""

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, Resolution

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "KeymapConflictError",
    "KeymapRegistry",
    "Resolution",
]
