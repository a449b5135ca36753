"""Terminal output boundary for the prompt.

Provides the ``OutputSink`` and ``Terminal`` protocols the prompt renders
into, the ANSI cursor-positioning helpers it uses, and ``ProcessTerminal``,
a raw-mode stdin/stdout implementation used by the ``pi-prompt`` host.
"""

from __future__ import annotations

import os
import sys
import termios
import tty
from typing import Protocol

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

CLEAR_LINE = "\x1b[2K"
_CURSOR_TO_FMT = "\x1b[{};{}H"


def cursor_to(row: int, column: int) -> str:
    """Escape sequence moving the cursor to a 1-based ``row``/``column``."""
    return _CURSOR_TO_FMT.format(row, column)


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


class OutputSink(Protocol):
    """Anything that accepts formatted terminal output."""

    def write(self, data: str) -> None: ...


class Terminal(Protocol):
    """Interface for the terminal a prompt host drives."""

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def read(self) -> str:
        """Return the next chunk of input, or ``""`` at end of input."""
        ...

    def write(self, data: str) -> None: ...

    @property
    def rows(self) -> int: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Terminal backed by ``sys.stdin``/``sys.stdout`` in raw mode."""

    def __init__(self) -> None:
        self._original_termios: list | None = None

    # -- properties ---------------------------------------------------------

    @property
    def rows(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).lines
        except (ValueError, OSError):
            return 24

    # -- start / stop -------------------------------------------------------

    def start(self) -> None:
        """Save the terminal attributes and switch stdin to raw mode."""
        fd = sys.stdin.fileno()
        self._original_termios = termios.tcgetattr(fd)
        tty.setraw(fd)

    def stop(self) -> None:
        """Restore the terminal attributes saved by ``start``."""
        if self._original_termios is not None:
            termios.tcsetattr(
                sys.stdin.fileno(), termios.TCSADRAIN, self._original_termios
            )
            self._original_termios = None

    # -- io -----------------------------------------------------------------

    def read(self) -> str:
        """Block until stdin has data and return it decoded."""
        raw = os.read(sys.stdin.fileno(), 4096)
        return raw.decode("utf-8", errors="replace")

    def write(self, data: str) -> None:
        sys.stdout.write(data)
        sys.stdout.flush()
