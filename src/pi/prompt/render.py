"""Rendering of a ``CommandPrompt`` onto one terminal row.

The line is ``<indicator>:<text>``. The indicator is empty for command mode
and ``find`` for find mode; the screen cursor sits on the column of the
logical cursor, i.e. ``1 + width(indicator) + 1 + width(text[:cursor])``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pi.prompt.prompt import PromptMode
from pi.prompt.terminal import CLEAR_LINE, cursor_to
from pi.prompt.utils import visible_width

if TYPE_CHECKING:
    from pi.prompt.prompt import CommandPrompt
    from pi.prompt.terminal import OutputSink

logger = logging.getLogger(__name__)

SEPARATOR = ":"


@dataclass(frozen=True)
class RenderedLine:
    text: str
    cursor_column: int  # 1-based screen column


def mode_indicator(mode: PromptMode) -> str:
    match mode:
        case PromptMode.COMMAND:
            return ""
        case PromptMode.FIND:
            return "find"
    raise ValueError(f"No indicator for prompt mode: {mode!r}")


def render_line(prompt: CommandPrompt) -> RenderedLine:
    """Project the prompt to its line text and cursor column."""
    indicator = mode_indicator(prompt.mode)
    value = prompt.get_value()
    prefix = indicator + SEPARATOR
    cursor_column = 1 + visible_width(prefix) + visible_width(value[: prompt.cursor])
    return RenderedLine(text=prefix + value, cursor_column=cursor_column)


def render(prompt: CommandPrompt, out: OutputSink, row: int) -> None:
    """Clear ``row`` and draw the prompt on it, leaving the cursor in place.

    Output errors are logged and swallowed.
    """
    line = render_line(prompt)
    try:
        out.write(
            cursor_to(row, 1)
            + CLEAR_LINE
            + line.text
            + cursor_to(row, line.cursor_column)
        )
    except (OSError, ValueError) as exc:
        logger.error("Failed to render prompt: %s", exc)
