"""pi-prompt: single-line command and find prompt for terminal applications."""

# Command values and grammar
from pi.prompt.commands import (
    Cancel,
    Command,
    CommandParser,
    EmptyCommand,
    ExpectedArgument,
    Find,
    InvalidArgument,
    ParseCommandError,
    TooManyArguments,
    UnexpectedArgument,
    UnknownCommand,
    parse_command,
)

# Input events
from pi.prompt.events import EventKind, PromptEvent, decode_input

# Keybindings
from pi.prompt.keybindings import (
    DEFAULT_PROMPT_KEYBINDINGS,
    PromptAction,
    PromptKeybindingsManager,
    get_prompt_keybindings,
    set_prompt_keybindings,
)

# Keyboard input parsing
from pi.prompt.keys import Key, KeyId, matches_key, parse_key, split_keys

# Prompt state
from pi.prompt.prompt import CommandPrompt, PromptMode

# Rendering
from pi.prompt.render import RenderedLine, mode_indicator, render, render_line

# Terminal
from pi.prompt.terminal import OutputSink, ProcessTerminal, Terminal

__all__ = [
    # Commands
    "Cancel",
    "Command",
    "CommandParser",
    "EmptyCommand",
    "ExpectedArgument",
    "Find",
    "InvalidArgument",
    "ParseCommandError",
    "TooManyArguments",
    "UnexpectedArgument",
    "UnknownCommand",
    "parse_command",
    # Events
    "EventKind",
    "PromptEvent",
    "decode_input",
    # Keybindings
    "DEFAULT_PROMPT_KEYBINDINGS",
    "PromptAction",
    "PromptKeybindingsManager",
    "get_prompt_keybindings",
    "set_prompt_keybindings",
    # Keys
    "Key",
    "KeyId",
    "matches_key",
    "parse_key",
    "split_keys",
    # Prompt
    "CommandPrompt",
    "PromptMode",
    # Rendering
    "RenderedLine",
    "mode_indicator",
    "render",
    "render_line",
    # Terminal
    "OutputSink",
    "ProcessTerminal",
    "Terminal",
]
