"""Discrete input events consumed by the prompt."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pi.prompt.keybindings import PromptKeybindingsManager, get_prompt_keybindings


class EventKind(Enum):
    CHAR = "char"
    ACCEPT = "accept"
    BACKSPACE = "backspace"
    DELETE = "delete"
    LEFT = "left"
    RIGHT = "right"
    OTHER = "other"


@dataclass(frozen=True)
class PromptEvent:
    """One key event. ``char`` is set only for ``EventKind.CHAR``."""

    kind: EventKind
    char: str | None = None

    def __post_init__(self) -> None:
        if self.kind is EventKind.CHAR:
            if self.char is None or len(self.char) != 1:
                raise ValueError(f"expected a single character, got {self.char!r}")
        elif self.char is not None:
            raise ValueError(f"{self.kind.value} event carries no character")

    @classmethod
    def key(cls, char: str) -> PromptEvent:
        return cls(EventKind.CHAR, char)


ACCEPT = PromptEvent(EventKind.ACCEPT)
BACKSPACE = PromptEvent(EventKind.BACKSPACE)
DELETE = PromptEvent(EventKind.DELETE)
LEFT = PromptEvent(EventKind.LEFT)
RIGHT = PromptEvent(EventKind.RIGHT)
OTHER = PromptEvent(EventKind.OTHER)


def _is_printable_char(data: str) -> bool:
    if len(data) != 1:
        return False
    code = ord(data)
    if code < 32 or code == 0x7F or 0x80 <= code <= 0x9F:
        return False
    return data.isprintable()


def decode_input(
    data: str, keybindings: PromptKeybindingsManager | None = None
) -> PromptEvent:
    """Translate one chunk of raw terminal input into a ``PromptEvent``."""
    kb = keybindings or get_prompt_keybindings()

    if kb.matches(data, "accept"):
        return ACCEPT
    if kb.matches(data, "deleteCharBackward"):
        return BACKSPACE
    if kb.matches(data, "deleteCharForward"):
        return DELETE
    if kb.matches(data, "cursorLeft"):
        return LEFT
    if kb.matches(data, "cursorRight"):
        return RIGHT

    if _is_printable_char(data):
        return PromptEvent.key(data)
    return OTHER
