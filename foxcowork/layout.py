"""Screen geometry and labels for the popups and the input bar."""

from __future__ import annotations

from dataclasses import dataclass

from foxcowork.commands import SlashCommand

COMPLETIONS_WIDTH = 58
PICKER_WIDTH = 70


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int
    y: int
    width: int
    height: int

    def inner(self) -> "Rect":
        """The area inside a one-cell border on every side."""
        return Rect(
            self.x + 1,
            self.y + 1,
            max(self.width - 2, 0),
            max(self.height - 2, 0),
        )


def popup_area(count: int, max_width: int, chat_area: Rect, input_area: Rect) -> Rect:
    """Area of a bordered list of ``count`` rows sitting just above the input bar."""
    height = min(count + 2, chat_area.height)
    width = min(max_width, chat_area.width)
    y = max(input_area.y - height, 0)
    return Rect(chat_area.x, y, width, height)


def completion_label(command: SlashCommand) -> str:
    """How a command is named in the completion popup."""
    if command.has_picker:
        return f"{command.name} …"
    if command.has_arg:
        return f"{command.name} <…>"
    return command.name


def health_label(online: bool) -> str:
    """Status label next to the input bar."""
    return " Online" if online else "Offline"