"""Chat entries, context-size checks and the text shown around the chat."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from foxcowork.storage import SessionSummary


class ChatRole(Enum):
    """Who a chat entry comes from."""

    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"
    THINKING = "thinking"
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ChatEntry:
    """One entry of the visible chat log."""

    role: ChatRole
    content: str


class ContextFullError(Exception):
    """The conversation no longer fits the model's context window."""

    def __init__(self, estimated_tokens: int, max_tokens: int) -> None:
        self.estimated_tokens = estimated_tokens
        self.max_tokens = max_tokens
        super().__init__(
            f"Conversation is too long (~{estimated_tokens} tokens, limit {max_tokens}). "
            "Press Ctrl+L to clear and start fresh."
        )


def check_context(estimated_tokens: int, max_tokens: int, warn_ratio: float) -> Optional[str]:
    """Check an estimated token count against the context limit.

    Returns a warning message when the count reaches ``warn_ratio`` of the
    limit, None otherwise, and raises ContextFullError once the limit is
    reached. A limit of 0 disables the check.
    """
    if max_tokens == 0:
        return None
    ratio = estimated_tokens / max_tokens
    if ratio >= 1.0:
        raise ContextFullError(estimated_tokens, max_tokens)
    if ratio >= warn_ratio:
        pct = math.floor(ratio * 100.0 + 0.5)
        return (
            f"Context is ~{pct}% full (~{estimated_tokens} / {max_tokens} estimated tokens). "
            "Consider pressing Ctrl+L to clear soon."
        )
    return None


def format_timestamp(ts: int) -> str:
    """Render a Unix timestamp in local time; fall back to the raw number."""
    try:
        return datetime.fromtimestamp(ts).strftime("%Y-%m-%d %H:%M")
    except (OverflowError, OSError, ValueError):
        return str(ts)


def session_line(summary: SessionSummary) -> str:
    """One line of the session list."""
    return f"[{summary.id}]  {format_timestamp(summary.started_at)}  {summary.title}"


def input_title(streaming: bool, loading: bool, confirming: bool, has_dir: bool) -> str:
    """Title of the message input box for the current state."""
    if streaming:
        return " Streaming... — Esc to cancel "
    if loading:
        return " Waiting for response — Esc to cancel "
    if confirming:
        return " Press [y] to confirm or [n] to cancel "
    if not has_dir:
        return " Type /dir <path> to open a directory "
    return " Message — Enter to send · Ctrl+L clear · Tab switch panel "