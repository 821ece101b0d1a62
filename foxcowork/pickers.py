"""Interactive pickers opened by slash commands given without an argument."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from foxcowork.commands import find_command
from foxcowork.options import (
    Provider,
    Settings,
    ollama_think_label,
    openrouter_reasoning_label,
)

_ACTIVE_SUFFIX = "  (active)"

_OPENROUTER_REASONING_OPTIONS = ("off", "minimal", "none", "low", "medium", "high", "xhigh")
_OLLAMA_REASONING_OPTIONS = ("off", "low", "medium", "high")

_OPENROUTER_MODELS = (
    "google/gemini-2.5-flash-lite",
    "google/gemini-3.1-flash-lite",
    "deepseek/deepseek-v4-flash",
    "deepseek/deepseek-v4-pro",
    "google/gemma-4-26b-a4b-it",
    "google/gemma-4-31b-it",
    "minimax/minimax-m2.7",
    "mistralai/mistral-small-2603",
)


@dataclass(frozen=True)
class PickerItem:
    """One row of a picker: what is shown and the argument it stands for."""

    display: str
    value: str


@dataclass
class SlashPicker:
    """A list of choices for one slash command, with a highlighted row."""

    command: str
    items: list[PickerItem] = field(default_factory=list)
    selected: int = 0

    def select_next(self) -> None:
        """Move the highlight down, wrapping to the top."""
        if self.items:
            self.selected = (self.selected + 1) % len(self.items)

    def select_prev(self) -> None:
        """Move the highlight up, wrapping to the bottom."""
        if self.items:
            self.selected = (self.selected - 1) % len(self.items)

    def selected_item(self) -> Optional[PickerItem]:
        """The highlighted item, or None if there is none."""
        if 0 <= self.selected < len(self.items):
            return self.items[self.selected]
        return None


def _picker(command: str, options: Sequence[str], current: str) -> SlashPicker:
    items = [
        PickerItem(f"{option}{_ACTIVE_SUFFIX}" if option == current else option, option)
        for option in options
    ]
    selected = next((i for i, option in enumerate(options) if option == current), 0)
    return SlashPicker(command, items, selected)


def static_picker(command_name: str, current: str) -> Optional[SlashPicker]:
    """Picker over a command's fixed options with ``current`` marked and preselected.

    Returns None for a command that is not in the table.
    """
    command = find_command(command_name)
    if command is None:
        return None
    return _picker(command.name, command.static_options, current)


def model_picker(models: Sequence[str], current: str) -> SlashPicker:
    """Picker over model names with ``current`` marked and preselected."""
    return _picker("/model", list(models), current)


def reasoning_picker(settings: Settings) -> Optional[SlashPicker]:
    """Picker over the reasoning levels of the active provider.

    Returns None for the local provider, whose reasoning is not configurable.
    """
    if settings.provider is Provider.OPENROUTER:
        current = openrouter_reasoning_label(settings.openrouter_reasoning)
        return _picker("/reasoning", _OPENROUTER_REASONING_OPTIONS, current)
    if settings.provider is Provider.OLLAMA:
        current = ollama_think_label(settings.ollama_think)
        return _picker("/reasoning", _OLLAMA_REASONING_OPTIONS, current)
    return None


def openrouter_model_list() -> list[str]:
    """Models offered by the OpenRouter model picker."""
    return list(_OPENROUTER_MODELS)