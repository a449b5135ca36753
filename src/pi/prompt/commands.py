"""Command values produced by the prompt and the default command grammar.

``parse_command`` turns a prompt line such as ``"open notes.txt"`` or
``"move down 3"`` into one of the frozen command dataclasses below, or raises
a :class:`ParseCommandError` describing what was wrong with the line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Union, get_args


# --- Command values ---


@dataclass(frozen=True)
class Cancel:
    """The prompt was abandoned."""


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Save:
    pass


@dataclass(frozen=True)
class Open:
    path: str


@dataclass(frozen=True)
class SetTheme:
    name: str


@dataclass(frozen=True)
class NextBuffer:
    pass


@dataclass(frozen=True)
class PrevBuffer:
    pass


@dataclass(frozen=True)
class PageUp:
    pass


@dataclass(frozen=True)
class PageDown:
    pass


@dataclass(frozen=True)
class Undo:
    pass


@dataclass(frozen=True)
class Redo:
    pass


@dataclass(frozen=True)
class SelectAll:
    pass


@dataclass(frozen=True)
class ToggleLineNumbers:
    pass


@dataclass(frozen=True)
class Find:
    """Search for ``query`` in the current buffer."""

    query: str


@dataclass(frozen=True)
class FindNext:
    pass


@dataclass(frozen=True)
class FindPrev:
    pass


@dataclass(frozen=True)
class MoveTo:
    """Jump to a 1-based line number."""

    line: int


MoveDirection = Literal[
    "up", "down", "left", "right", "page-up", "page-down", "line-start", "line-end"
]

MOVE_DIRECTIONS: tuple[str, ...] = get_args(MoveDirection)


@dataclass(frozen=True)
class Move:
    direction: MoveDirection
    count: int = 1


Command = Union[
    Cancel,
    Quit,
    Save,
    Open,
    SetTheme,
    NextBuffer,
    PrevBuffer,
    PageUp,
    PageDown,
    Undo,
    Redo,
    SelectAll,
    ToggleLineNumbers,
    Find,
    FindNext,
    FindPrev,
    MoveTo,
    Move,
]

CommandParser = Callable[[str], Command]


# --- Parse errors ---


class ParseCommandError(ValueError):
    """Base class for prompt lines that do not form a valid command."""


class EmptyCommand(ParseCommandError):
    def __init__(self) -> None:
        super().__init__("no command given")


class UnknownCommand(ParseCommandError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown command: {name}")


class ExpectedArgument(ParseCommandError):
    def __init__(self, cmd: str) -> None:
        self.cmd = cmd
        super().__init__(f"{cmd} expects an argument")


class UnexpectedArgument(ParseCommandError):
    def __init__(self, cmd: str) -> None:
        self.cmd = cmd
        super().__init__(f"{cmd} takes no arguments")


class TooManyArguments(ParseCommandError):
    def __init__(self, cmd: str, expected: int, actual: int) -> None:
        self.cmd = cmd
        self.expected = expected
        self.actual = actual
        super().__init__(f"{cmd} expects at most {expected} argument(s), got {actual}")


class InvalidArgument(ParseCommandError):
    def __init__(self, cmd: str, argument: str) -> None:
        self.cmd = cmd
        self.argument = argument
        super().__init__(f"invalid argument for {cmd}: {argument!r}")


# --- Grammar ---

# Commands without arguments, keyed by canonical name
_NULLARY: dict[str, type] = {
    "quit": Quit,
    "save": Save,
    "next-buffer": NextBuffer,
    "prev-buffer": PrevBuffer,
    "page-up": PageUp,
    "page-down": PageDown,
    "undo": Undo,
    "redo": Redo,
    "select-all": SelectAll,
    "line-numbers": ToggleLineNumbers,
    "find-next": FindNext,
    "find-prev": FindPrev,
}

# Short aliases and the canonical names used in error messages
_CANONICAL: dict[str, str] = {
    "q": "quit",
    "s": "save",
    "bn": "next-buffer",
    "bp": "prev-buffer",
    "pu": "page-up",
    "pd": "page-down",
    "u": "undo",
    "r": "redo",
    "sa": "select-all",
    "ln": "line-numbers",
    "fn": "find-next",
    "fp": "find-prev",
    "o": "open",
    "t": "theme",
    "f": "find",
    "g": "goto",
    "m": "move",
}


def _positive_int(cmd: str, text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise InvalidArgument(cmd, text) from None
    if value < 1:
        raise InvalidArgument(cmd, text)
    return value


def _single_argument(cmd: str, args: list[str]) -> str:
    if not args:
        raise ExpectedArgument(cmd)
    if len(args) > 1:
        raise TooManyArguments(cmd, 1, len(args))
    return args[0]


def parse_command(text: str) -> Command:
    """Parse a command-mode prompt line into a command value."""
    line = text.strip()
    if not line:
        raise EmptyCommand()

    parts = line.split(maxsplit=1)
    name = parts[0]
    rest = parts[1] if len(parts) > 1 else ""
    args = rest.split()

    cmd = _CANONICAL.get(name, name)

    if cmd in _NULLARY:
        if args:
            raise UnexpectedArgument(cmd)
        return _NULLARY[cmd]()

    if cmd == "find":
        # The query is the rest of the line, spaces included
        if not rest:
            raise ExpectedArgument(cmd)
        return Find(rest)

    if cmd == "open":
        return Open(_single_argument(cmd, args))

    if cmd == "theme":
        return SetTheme(_single_argument(cmd, args))

    if cmd == "goto":
        return MoveTo(_positive_int(cmd, _single_argument(cmd, args)))

    if cmd == "move":
        if not args:
            raise ExpectedArgument(cmd)
        if len(args) > 2:
            raise TooManyArguments(cmd, 2, len(args))
        direction = args[0]
        if direction not in MOVE_DIRECTIONS:
            raise InvalidArgument(cmd, direction)
        count = _positive_int(cmd, args[1]) if len(args) == 2 else 1
        return Move(direction, count)  # type: ignore[arg-type]

    raise UnknownCommand(name)
