"""Virtual terminal for testing -- implements the Terminal protocol in-memory.

Input is scripted up front as a list of chunks; every ``write`` is recorded
for assertions.
"""

from __future__ import annotations


class VirtualTerminal:
    """In-memory terminal that replays scripted input and records output.

    Parameters
    ----------
    chunks:
        Raw input chunks returned by successive ``read`` calls. Once they
        are exhausted ``read`` returns ``""`` (end of input).
    rows:
        Number of terminal rows (height).
    """

    def __init__(
        self, chunks: list[str] | None = None, rows: int = 24
    ) -> None:
        self._chunks = list(chunks or [])
        self._rows = rows
        self._buffer: list[str] = []
        self._started = False

    # -- Terminal protocol: properties --------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def started(self) -> bool:
        return self._started

    # -- Terminal protocol: lifecycle ---------------------------------------

    def start(self) -> None:
        self._started = True

    def stop(self) -> None:
        self._started = False

    # -- Terminal protocol: io ----------------------------------------------

    def read(self) -> str:
        if not self._chunks:
            return ""
        return self._chunks.pop(0)

    def write(self, data: str) -> None:
        """Append *data* to the internal buffer."""
        self._buffer.append(data)

    # -- Test helpers -------------------------------------------------------

    @property
    def output(self) -> str:
        """Return everything written to the terminal as a single string."""
        return "".join(self._buffer)

    @property
    def writes(self) -> list[str]:
        return list(self._buffer)

    @property
    def write_count(self) -> int:
        """Return the number of individual ``write`` calls made."""
        return len(self._buffer)

    def clear_buffer(self) -> None:
        """Discard all recorded output."""
        self._buffer.clear()


class FailingSink:
    """Output sink whose every write fails like a closed terminal."""

    def __init__(self) -> None:
        self.attempts = 0

    def write(self, data: str) -> None:
        self.attempts += 1
        raise OSError("terminal went away")


class AsciiSink:
    """Output sink backed by an ASCII-only byte stream."""

    def __init__(self) -> None:
        self.data = b""

    def write(self, data: str) -> None:
        self.data += data.encode("ascii")
