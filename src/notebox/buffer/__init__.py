"""Document storage: lines, the buffer that owns them, and the cursor."""

from .buffer import Buffer
from .line import NEWLINE, Line
from .state import Cursor
from .sync import BufferMirror, BufferValidationError, Position
from .validation import ensure_position

__all__ = [
    "Buffer",
    "Line",
    "NEWLINE",
    "Cursor",
    "Position",
    "BufferMirror",
    "BufferValidationError",
    "ensure_position",
]
