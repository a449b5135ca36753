"""Keyboard input parsing for the prompt.

Turns raw terminal input (legacy CSI/SS3 escape sequences, control bytes,
``ESC``-prefixed alt keys and plain characters) into key identifiers such as
``"left"``, ``"ctrl+h"`` or ``"shift+alt+b"``. ``matches_key`` compares raw
input against a configured key identifier.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------

KeyId = str

# ---------------------------------------------------------------------------
# Key helper object
# ---------------------------------------------------------------------------


class Key:
    """Named key constants and modifier combinators."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    delete = "delete"
    insert = "insert"
    home = "home"
    end = "end"
    page_up = "pageUp"
    page_down = "pageDown"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def shift(key: str) -> str:
        return f"shift+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# xterm modifier parameter, minus one, as a bit set
MODIFIERS: dict[str, int] = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

_MODIFIER_ORDER = ("ctrl", "shift", "alt")

_KEY_ALIASES: dict[str, str] = {
    "esc": "escape",
    "return": "enter",
    "pageup": "pageUp",
    "pagedown": "pageDown",
}

# Unmodified legacy escape sequences -> key names
LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[1~": "home",
    "\x1b[2~": "insert",
    "\x1b[3~": "delete",
    "\x1b[4~": "end",
    "\x1b[5~": "pageUp",
    "\x1b[6~": "pageDown",
    "\x1b[7~": "home",
    "\x1b[8~": "end",
    "\x1bOP": "f1",
    "\x1bOQ": "f2",
    "\x1bOR": "f3",
    "\x1bOS": "f4",
    "\x1b[15~": "f5",
    "\x1b[17~": "f6",
    "\x1b[18~": "f7",
    "\x1b[19~": "f8",
    "\x1b[20~": "f9",
    "\x1b[21~": "f10",
    "\x1b[23~": "f11",
    "\x1b[24~": "f12",
    "\x1b[Z": "shift+tab",
}

# Final byte of ``CSI 1;<mod><final>`` -> key name
_CSI_LETTER_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
    "P": "f1",
    "Q": "f2",
    "R": "f3",
    "S": "f4",
}

# Number of ``CSI <n>;<mod>~`` -> key name
_CSI_TILDE_KEYS: dict[int, str] = {
    1: "home",
    2: "insert",
    3: "delete",
    4: "end",
    5: "pageUp",
    6: "pageDown",
    15: "f5",
    17: "f6",
    18: "f7",
    19: "f8",
    20: "f9",
    21: "f10",
    23: "f11",
    24: "f12",
}

_CSI_LETTER_RE = re.compile(r"^\x1b\[1;(\d+)([A-DFHPQRS])$")
_CSI_TILDE_RE = re.compile(r"^\x1b\[(\d+);(\d+)~$")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _modifier_prefix(modifier: int) -> str:
    """Build the ``ctrl+shift+alt+`` prefix for an xterm modifier parameter."""
    mod = max(modifier - 1, 0)
    return "".join(f"{name}+" for name in _MODIFIER_ORDER if mod & MODIFIERS[name])


def _single_byte_key(ch: str) -> str | None:
    """Name a single non-escape byte, or return ``None`` if it is not special."""
    if ch == "\r" or ch == "\n":
        return "enter"
    if ch == "\t":
        return "tab"
    if ch == " ":
        return "space"
    if ch == "\x7f":
        return "backspace"
    if ch == "\x00":
        return "ctrl+space"
    if 1 <= ord(ch) <= 26:
        return "ctrl+" + chr(ord(ch) + ord("a") - 1)
    return None


def normalize_key_id(key_id: KeyId) -> KeyId:
    """Return *key_id* in canonical form (``ctrl+shift+alt+<key>``)."""
    parts = key_id.split("+")
    # "ctrl++" binds the plus key
    if key_id.endswith("++"):
        parts = parts[:-2] + ["+"]
    key = parts[-1]
    mods = {p.lower() for p in parts[:-1]}
    if len(key) > 1:
        key = _KEY_ALIASES.get(key.lower(), key)
        if key not in ("pageUp", "pageDown"):
            key = key.lower()
    prefix = "".join(f"{name}+" for name in _MODIFIER_ORDER if name in mods)
    return prefix + key


# ---------------------------------------------------------------------------
# parse_key -- determine what key was pressed from raw input
# ---------------------------------------------------------------------------


def parse_key(data: str) -> KeyId | None:
    """Parse raw terminal input and return the key identifier, or ``None``.

    The returned string uses the same format ``matches_key`` expects:
    e.g. ``"a"``, ``"ctrl+a"``, ``"shift+left"``, ``"f5"``.
    """
    if not data:
        return None

    if data in LEGACY_KEY_SEQUENCES:
        return LEGACY_KEY_SEQUENCES[data]

    # --- xterm modified sequences ---
    letter_match = _CSI_LETTER_RE.match(data)
    if letter_match:
        prefix = _modifier_prefix(int(letter_match.group(1)))
        return prefix + _CSI_LETTER_KEYS[letter_match.group(2)]

    tilde_match = _CSI_TILDE_RE.match(data)
    if tilde_match:
        name = _CSI_TILDE_KEYS.get(int(tilde_match.group(1)))
        if name is None:
            return None
        return _modifier_prefix(int(tilde_match.group(2))) + name

    # --- Single bytes ---
    if data == "\x1b":
        return "escape"
    if data == "\x08":
        # Most terminals send ctrl+h for ctrl+backspace or plain backspace
        return "ctrl+h"
    if len(data) == 1:
        special = _single_byte_key(data)
        if special is not None:
            return special
        if data.isprintable():
            return data
        return None

    # --- Alt + key (ESC prefix) ---
    if len(data) == 2 and data[0] == "\x1b":
        ch = data[1]
        if ch == "\x1b":
            return "alt+escape"
        if ch == "\x08":
            return "alt+backspace"
        special = _single_byte_key(ch)
        if special is not None:
            if special.startswith("ctrl+"):
                return "ctrl+alt+" + special[len("ctrl+"):]
            return "alt+" + special
        if ch.isupper():
            return "shift+alt+" + ch.lower()
        if ch.isprintable():
            return "alt+" + ch

    return None


def _sequence_length(data: str, pos: int) -> int | None:
    """Length of the key sequence starting at ``data[pos]``.

    Returns ``None`` when the sequence is cut off by the end of *data*.
    """
    if data[pos] != "\x1b" or pos + 1 >= len(data):
        return 1

    introducer = data[pos + 1]
    if introducer == "[":
        # CSI: parameters then a final byte in 0x40-0x7E
        end = pos + 2
        while end < len(data):
            if 0x40 <= ord(data[end]) <= 0x7E:
                return end - pos + 1
            end += 1
        return None
    if introducer == "O":
        return 3 if pos + 2 < len(data) else None
    return 2


def split_keys(data: str) -> tuple[list[str], str]:
    """Split raw input into complete key sequences.

    A read from the terminal can hold several keys at once (fast typing,
    pastes), or end in the middle of an escape sequence. Returns
    ``(keys, remainder)`` where *remainder* is the unterminated CSI or SS3
    sequence at the end of *data*, to be prefixed to the next read. A lone
    trailing ``ESC`` is the escape key.
    """
    keys: list[str] = []
    pos = 0
    while pos < len(data):
        length = _sequence_length(data, pos)
        if length is None:
            return keys, data[pos:]
        keys.append(data[pos : pos + length])
        pos += length
    return keys, ""


def matches_key(data: str, key_id: KeyId) -> bool:
    """Return ``True`` if raw input *data* is the key named by *key_id*."""
    parsed = parse_key(data)
    if parsed is None:
        return False
    if parsed == key_id:
        return True
    return normalize_key_id(parsed) == normalize_key_id(key_id)
