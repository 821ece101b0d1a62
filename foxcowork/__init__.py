"""Settings, session storage, slash commands and text rendering for an AI file-management assistant."""

__version__ = "0.1.0"

__all__ = [
    "commands",
    "controller",
    "layout",
    "messages",
    "options",
    "pickers",
    "render",
    "storage",
]