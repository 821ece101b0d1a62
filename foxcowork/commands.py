"""The table of slash commands and prefix matching over it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SlashCommand:
    """A slash command as shown in the completion popup."""

    name: str
    description: str
    has_arg: bool = False
    """Whether the command takes a trailing argument, e.g. "/dir <path>"."""
    has_picker: bool = False
    """Whether entering the command without an argument opens a picker."""
    static_options: tuple[str, ...] = ()
    """Fixed picker options; empty for commands with dynamic items."""


COMMANDS: tuple[SlashCommand, ...] = (
    SlashCommand("/clear", "Clear the conversation"),
    SlashCommand("/exit", "Quit the application"),
    SlashCommand("/dir", "Change working directory", has_arg=True),
    SlashCommand("/model", "Browse or switch model", has_arg=True, has_picker=True),
    SlashCommand("/skip-confirmations", "Toggle confirmation prompts"),
    SlashCommand("/streaming", "Toggle token-by-token streaming"),
    SlashCommand(
        "/thinking",
        "Set thinking display",
        has_arg=True,
        has_picker=True,
        static_options=("off", "inline", "full"),
    ),
    SlashCommand(
        "/tool-verbosity",
        "Set tool display verbosity",
        has_arg=True,
        has_picker=True,
        static_options=("default", "minimal", "full"),
    ),
    SlashCommand(
        "/reasoning",
        "Set reasoning/thinking level for the LLM",
        has_arg=True,
        has_picker=True,
    ),
    SlashCommand("/sessions", "List past sessions for this project"),
    SlashCommand(
        "/resume",
        "Resume a past session (browse or /resume <id>)",
        has_arg=True,
        has_picker=True,
    ),
)


def match_commands(prefix: str) -> list[SlashCommand]:
    """Commands whose name starts with ``prefix``, in table order."""
    return [command for command in COMMANDS if command.name.startswith(prefix)]


def find_command(name: str) -> Optional[SlashCommand]:
    """The command with exactly this name, or None."""
    return next((command for command in COMMANDS if command.name == name), None)