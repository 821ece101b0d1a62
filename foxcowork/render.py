"""Plain-text rendering of the chat log, status line, file tree and popups."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from wcwidth import wcswidth, wcwidth

from foxcowork.layout import Rect
from foxcowork.messages import ChatEntry, ChatRole
from foxcowork.options import Settings, ThinkingDisplay, reasoning_label

CURSOR = "▌"
SEPARATOR = "│ "
CONTINUATION = "       │ "
MAX_MODEL_CHARS = 24
MAX_SCROLL_ROWS = 65535

HINT_NO_DIR = "No directory open. Use --dir <path> at startup or type /dir <path> here."
HINT_CHAT = "Type a message and press Enter to chat with the assistant."
CONFIRM_TITLE = " Confirm action "
CONFIRM_PROMPT = "[y] Confirm   [n] / [Esc] Cancel"

_PREFIXES = {
    ChatRole.ASSISTANT: " AI   ",
    ChatRole.USER: " You  ",
    ChatRole.TOOL: " Tool ",
    ChatRole.THINKING: " Think",
    ChatRole.ERROR: " Err  ",
    ChatRole.WARNING: " Warn ",
}


def _text_lines(text: str) -> list[str]:
    """Split into lines on LF, dropping a trailing CR and a final empty line."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _block(prefix: str, lines: Sequence[str], cursor: bool = False) -> list[str]:
    """Prefix the first line, indent the rest, optionally end with a cursor."""
    tail = CURSOR if cursor else ""
    if not lines:
        return [f"{prefix}{SEPARATOR}{tail}"]
    out = [f"{prefix}{SEPARATOR}{lines[0]}"]
    out += [f"{CONTINUATION}{line}" for line in lines[1:]]
    out[-1] += tail
    return out


def status_line(settings: Settings) -> str:
    """Provider, shortened model name and reasoning level shown above the chat."""
    _, sep, short = settings.model.partition("/")
    model = short if sep else settings.model
    if len(model) > MAX_MODEL_CHARS:
        model = model[: MAX_MODEL_CHARS - 1] + "…"
    return f" {settings.provider.value} · {model} · {reasoning_label(settings)} "


def chat_lines(
    entries: Sequence[ChatEntry],
    thinking_text: Optional[str],
    thinking_display: ThinkingDisplay,
    streaming_text: Optional[str],
    is_loading: bool,
) -> list[str]:
    """The chat log as display lines.

    An empty list means there is nothing to show yet; the caller shows
    HINT_NO_DIR or HINT_CHAT instead.
    """
    if not entries:
        return []

    lines: list[str] = []
    for entry in entries:
        lines += _block(_PREFIXES[entry.role], _text_lines(entry.content))
        lines.append("")

    if thinking_text is not None:
        if thinking_display is ThinkingDisplay.INLINE:
            label = f"[Thinking… ({len(thinking_text)} chars)]"
            lines.append(f"{_PREFIXES[ChatRole.THINKING]}{SEPARATOR}{label}")
        elif thinking_display is ThinkingDisplay.FULL:
            lines += _block(_PREFIXES[ChatRole.THINKING], _text_lines(thinking_text), cursor=True)

    if streaming_text is not None:
        lines += _block(_PREFIXES[ChatRole.ASSISTANT], _text_lines(streaming_text), cursor=True)
    elif is_loading:
        lines.append(f"{_PREFIXES[ChatRole.ASSISTANT]}{SEPARATOR}thinking...")
    return lines


def _width(line: str) -> int:
    width = wcswidth(line)
    if width >= 0:
        return width
    return sum(max(wcwidth(char), 0) for char in line)


def display_rows(lines: Iterable[str], width: int) -> int:
    """Screen rows the lines take when wrapped at ``width`` columns."""
    columns = max(width, 1)
    total = 0
    for line in lines:
        w = _width(line)
        total += 1 if w == 0 else -(-w // columns)
    return min(total, MAX_SCROLL_ROWS)


def scroll_offset(total: int, visible: int, chat_scroll: int) -> int:
    """First row to show: the bottom stays visible when ``chat_scroll`` is 0."""
    bottom = max(total - visible, 0)
    return max(bottom - chat_scroll, 0)


def centered_rect(percent_x: int, height: int, area: Rect) -> Rect:
    """A rectangle ``percent_x`` percent wide and ``height`` rows tall, centred in ``area``."""
    width = min(area.width * percent_x // 100, area.width)
    x = area.x + max(area.width - width, 0) // 2
    y = area.y + max(area.height - height, 0) // 2
    return Rect(x, y, width, min(height, area.height))


def file_tree_line(name: str, depth: int, is_dir: bool, expanded: bool) -> str:
    """One row of the file tree, indented by depth, directories with an arrow."""
    indent = "  " * depth
    if is_dir:
        return f"{indent}{'▼ ' if expanded else '▶ '}{name}"
    return f"{indent}  {name}"