"""CommandPrompt - single-line prompt that yields a command or a search query."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from pi.prompt.commands import (
    Cancel,
    Command,
    CommandParser,
    ExpectedArgument,
    Find,
    ParseCommandError,
    parse_command,
)
from pi.prompt.events import EventKind, PromptEvent, decode_input
from pi.prompt.keybindings import PromptKeybindingsManager

if TYPE_CHECKING:
    from pi.prompt.terminal import OutputSink

logger = logging.getLogger(__name__)


class PromptMode(Enum):
    # Parse the line as a command
    COMMAND = "command"
    # Use the line verbatim as a search query
    FIND = "find"


class CommandPrompt:
    """Editable line with a cursor, finalized into a ``Command``.

    ``handle_input`` consumes one event at a time. It returns ``None`` while
    the line is being edited, a ``Command`` once the prompt is done
    (``Cancel`` when backspacing out of an empty line), and raises
    :class:`ParseCommandError` when the accepted line is not valid. A failed
    finalize leaves the line untouched.
    """

    def __init__(
        self,
        mode: PromptMode,
        parser: CommandParser = parse_command,
        keybindings: PromptKeybindingsManager | None = None,
    ) -> None:
        self._mode = mode
        self._parser = parser
        self._keybindings = keybindings
        self._chars: list[str] = []
        self._cursor: int = 0

    @property
    def mode(self) -> PromptMode:
        return self._mode

    @property
    def cursor(self) -> int:
        return self._cursor

    def get_value(self) -> str:
        return "".join(self._chars)

    def handle_input(self, event: PromptEvent | str) -> Command | None:
        """Process one input event, either decoded or as raw terminal data."""
        if isinstance(event, str):
            event = decode_input(event, self._keybindings)

        match event.kind:
            case EventKind.ACCEPT:
                return self._finalize()
            case EventKind.BACKSPACE:
                return self._back()
            case EventKind.DELETE:
                self._delete()
            case EventKind.LEFT:
                self._left()
            case EventKind.RIGHT:
                self._right()
            case EventKind.CHAR:
                if event.char:
                    self._insert_character(event.char)
            case EventKind.OTHER:
                pass
        return None

    # -- edits --------------------------------------------------------------

    def _insert_character(self, char: str) -> None:
        self._chars.insert(self._cursor, char)
        self._cursor += 1

    def _left(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1

    def _right(self) -> None:
        if self._cursor < len(self._chars):
            self._cursor += 1

    def _delete(self) -> None:
        if self._cursor < len(self._chars):
            del self._chars[self._cursor]

    def _back(self) -> Command | None:
        if not self._chars:
            return Cancel()
        # Cursor at the start of a non-empty line has nothing to its left
        if self._cursor > 0:
            self._cursor -= 1
            del self._chars[self._cursor]
        return None

    # -- finalize -----------------------------------------------------------

    def _finalize(self) -> Command:
        value = self.get_value()
        match self._mode:
            case PromptMode.FIND:
                if not value:
                    raise ExpectedArgument("find")
                logger.debug("Find prompt accepted: %r", value)
                return Find(value)
            case PromptMode.COMMAND:
                try:
                    command = self._parser(value)
                except ParseCommandError as exc:
                    logger.debug("Command prompt rejected %r: %s", value, exc)
                    raise
                logger.debug("Command prompt accepted: %r", command)
                return command
        raise ValueError(f"Unhandled prompt mode: {self._mode!r}")

    # -- rendering ----------------------------------------------------------

    def render(self, out: OutputSink, row: int) -> None:
        """Draw the prompt on ``row`` of ``out``."""
        from pi.prompt.render import render

        render(self, out, row)
