"""Terminal text width measurement."""

from __future__ import annotations

import wcwidth as _wcwidth

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


def char_width(ch: str) -> int:
    """Return the number of terminal columns one code point occupies.

    Wide characters count as two. Everything else counts as one, zero-width
    combining marks and unmeasurable control characters included, so every
    buffered character moves the cursor at least one column.
    """
    return max(_wcwidth.wcwidth(ch), 1)


def visible_width(text: str) -> int:
    """Return the terminal display width of *text* (plain, no ANSI codes)."""
    if not text:
        return 0
    if text.isascii() and text.isprintable():
        return len(text)

    cached = _width_cache.get(text)
    if cached is not None:
        return cached

    return _cache_width(text, sum(char_width(ch) for ch in text))
