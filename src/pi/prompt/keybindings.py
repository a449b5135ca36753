"""Prompt keybindings manager."""

from __future__ import annotations

from typing import Literal

from pi.prompt.keys import KeyId, matches_key

PromptAction = Literal[
    "accept",
    "cancel",
    "deleteCharBackward",
    "deleteCharForward",
    "cursorLeft",
    "cursorRight",
]

PromptKeybindingsConfig = dict[PromptAction, KeyId | list[KeyId]]

DEFAULT_PROMPT_KEYBINDINGS: dict[PromptAction, KeyId | list[KeyId]] = {
    "accept": "enter",
    "cancel": ["escape", "ctrl+c"],
    "deleteCharBackward": ["backspace", "ctrl+h"],
    "deleteCharForward": "delete",
    "cursorLeft": "left",
    "cursorRight": "right",
}


class PromptKeybindingsManager:
    """Maps prompt actions to the keys that trigger them."""

    def __init__(self, config: PromptKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[PromptAction, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: PromptKeybindingsConfig) -> None:
        self._action_to_keys.clear()

        for action, keys in DEFAULT_PROMPT_KEYBINDINGS.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        # User config replaces the default list for an action
        for action, keys in config.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

    def matches(self, data: str, action: PromptAction) -> bool:
        """Check if raw input triggers a specific action."""
        keys = self._action_to_keys.get(action)
        if not keys:
            return False
        return any(matches_key(data, key) for key in keys)

    def get_keys(self, action: PromptAction) -> list[KeyId]:
        """Get keys bound to an action."""
        return self._action_to_keys.get(action, [])

    def set_config(self, config: PromptKeybindingsConfig) -> None:
        """Replace the user overrides."""
        self._build_maps(config)


_global_prompt_keybindings: PromptKeybindingsManager | None = None


def get_prompt_keybindings() -> PromptKeybindingsManager:
    global _global_prompt_keybindings
    if _global_prompt_keybindings is None:
        _global_prompt_keybindings = PromptKeybindingsManager()
    return _global_prompt_keybindings


def set_prompt_keybindings(manager: PromptKeybindingsManager) -> None:
    global _global_prompt_keybindings
    _global_prompt_keybindings = manager
