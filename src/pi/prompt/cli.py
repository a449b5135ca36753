"""``pi-prompt``: run one command or find prompt on the terminal.

Reads keys in raw mode, draws the prompt on a single row and prints the
resulting command when the prompt finishes.
"""

from __future__ import annotations

import argparse
import logging

from pi.prompt.commands import Cancel, Command, ParseCommandError
from pi.prompt.keybindings import PromptKeybindingsManager, get_prompt_keybindings
from pi.prompt.keys import split_keys
from pi.prompt.prompt import CommandPrompt, PromptMode
from pi.prompt.terminal import ProcessTerminal, Terminal

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pi-prompt",
        description="Read a command (or a search query) from a one-line prompt",
    )
    parser.add_argument("--find", action="store_true", help="Start in find mode")
    parser.add_argument("--row", type=int, default=None, help="Screen row to draw on (default: last row)")
    parser.add_argument("--log-level", default="warning", choices=["debug", "info", "warning", "error"])
    parser.add_argument("--log-file", default=None, help="Write logs to this file instead of stderr")
    return parser.parse_args(argv)


def run_prompt(
    prompt: CommandPrompt,
    terminal: Terminal,
    row: int,
    keybindings: PromptKeybindingsManager | None = None,
) -> Command | None:
    """Drive *prompt* from *terminal* until it yields a command.

    Returns ``None`` when the input ends first. A line that fails to parse
    is logged and the prompt stays open with its text intact.
    """
    kb = keybindings or get_prompt_keybindings()
    prompt.render(terminal, row)
    pending = ""

    while True:
        data = terminal.read()
        if not data:
            logger.info("Input closed before the prompt finished")
            return None

        keys, pending = split_keys(pending + data)
        for key in keys:
            if kb.matches(key, "cancel"):
                return Cancel()
            try:
                result = prompt.handle_input(key)
            except ParseCommandError as exc:
                logger.warning("Invalid input %r: %s", prompt.get_value(), exc)
                result = None
            if result is not None:
                return result
            prompt.render(terminal, row)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        filename=args.log_file,
    )

    terminal = ProcessTerminal()
    mode = PromptMode.FIND if args.find else PromptMode.COMMAND
    prompt = CommandPrompt(mode)
    row = args.row if args.row is not None else terminal.rows

    terminal.start()
    try:
        result = run_prompt(prompt, terminal, row)
    finally:
        terminal.stop()
        terminal.write("\r\n")

    if result is None or isinstance(result, Cancel):
        return 1
    print(repr(result))
    return 0
