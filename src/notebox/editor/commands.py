"""The closed set of editing commands accepted by :class:`Editor`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class InsertChar:
    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError("InsertChar takes exactly one character")


@dataclass(frozen=True, slots=True)
class InsertNewline:
    pass


@dataclass(frozen=True, slots=True)
class DeleteBackward:
    pass


@dataclass(frozen=True, slots=True)
class MoveLeft:
    pass


@dataclass(frozen=True, slots=True)
class MoveRight:
    pass


@dataclass(frozen=True, slots=True)
class MoveUp:
    pass


@dataclass(frozen=True, slots=True)
class MoveDown:
    pass


@dataclass(frozen=True, slots=True)
class MoveWordNext:
    pass


@dataclass(frozen=True, slots=True)
class MoveWordPrev:
    pass


@dataclass(frozen=True, slots=True)
class Reset:
    pass


Command = Union[
    InsertChar,
    InsertNewline,
    DeleteBackward,
    MoveLeft,
    MoveRight,
    MoveUp,
    MoveDown,
    MoveWordNext,
    MoveWordPrev,
    Reset,
]


def command_name(command: Command) -> str:
    """Snake-case label used for telemetry, e.g. ``move_word_next``."""

    name = type(command).__name__
    return "".join(
        f"_{char.lower()}" if char.isupper() and index else char.lower()
        for index, char in enumerate(name)
    )


__all__ = [
    "Command",
    "InsertChar",
    "InsertNewline",
    "DeleteBackward",
    "MoveLeft",
    "MoveRight",
    "MoveUp",
    "MoveDown",
    "MoveWordNext",
    "MoveWordPrev",
    "Reset",
    "command_name",
]
