import pytest

from foxcowork.layout import Rect
from foxcowork.messages import ChatEntry, ChatRole
from foxcowork.options import (
    OllamaThinkLevel,
    Provider,
    Reasoning,
    ReasoningEffort,
    Settings,
    ThinkingDisplay,
)
from foxcowork.render import (
    CONTINUATION,
    CURSOR,
    centered_rect,
    chat_lines,
    display_rows,
    file_tree_line,
    scroll_offset,
    status_line,
)


def test_status_line_strips_provider_prefix():
    line = status_line(Settings(model="google/gemini-2.5-flash-lite"))
    assert line == " openrouter · gemini-2.5-flash-lite · off "


def test_status_line_truncates_long_model():
    line = status_line(Settings(provider=Provider.OLLAMA, model="m" * 40))
    parts = line.strip().split(" · ")
    assert parts[0] == "ollama"
    assert parts[1] == "m" * 23 + "…"
    assert parts[2] == "off"


def test_status_line_reasoning_labels():
    openrouter = Settings(openrouter_reasoning=Reasoning(effort=ReasoningEffort.HIGH))
    assert status_line(openrouter).endswith(" · high ")
    ollama = Settings(provider=Provider.OLLAMA, model="qwen", ollama_think=OllamaThinkLevel.LOW)
    assert status_line(ollama).endswith(" · low ")
    local = Settings(provider=Provider.LOCAL, model="qwen")
    assert status_line(local).endswith(" · — ")


def test_chat_lines_empty_log_is_empty():
    assert chat_lines([], "thinking", ThinkingDisplay.FULL, "partial", True) == []


def test_chat_lines_user_entry_and_spacer():
    lines = chat_lines([ChatEntry(ChatRole.USER, "hi")], None, ThinkingDisplay.OFF, None, False)
    assert lines == [" You  │ hi", ""]


def test_chat_lines_multiline_continuation():
    entry = ChatEntry(ChatRole.ERROR, "first\nsecond\n")
    lines = chat_lines([entry], None, ThinkingDisplay.OFF, None, False)
    assert lines[0].endswith("first")
    assert lines[1] == CONTINUATION + "second"
    assert lines[2] == ""
    assert len(lines) == 3


def test_chat_lines_empty_content_keeps_prefix():
    lines = chat_lines([ChatEntry(ChatRole.TOOL, "")], None, ThinkingDisplay.OFF, None, False)
    assert lines[0] == " Tool │ "


def test_chat_lines_loading_indicator():
    lines = chat_lines([ChatEntry(ChatRole.USER, "q")], None, ThinkingDisplay.OFF, None, True)
    assert lines[-1] == " AI   │ thinking..."


def test_chat_lines_streaming_has_cursor_on_last_line():
    lines = chat_lines(
        [ChatEntry(ChatRole.USER, "q")], None, ThinkingDisplay.OFF, "one\ntwo", True
    )
    assert lines[-2] == " AI   │ one"
    assert lines[-1] == CONTINUATION + "two" + CURSOR
    assert not any("thinking..." in line for line in lines)


def test_chat_lines_inline_thinking_counts_chars():
    lines = chat_lines(
        [ChatEntry(ChatRole.USER, "q")], "abcde", ThinkingDisplay.INLINE, None, False
    )
    assert lines[-1] == " Think│ [Thinking… (5 chars)]"


def test_chat_lines_full_thinking_and_off():
    entries = [ChatEntry(ChatRole.USER, "q")]
    full = chat_lines(entries, "idea", ThinkingDisplay.FULL, None, False)
    assert full[-1] == " Think│ idea" + CURSOR
    off = chat_lines(entries, "idea", ThinkingDisplay.OFF, None, False)
    assert off == chat_lines(entries, None, ThinkingDisplay.OFF, None, False)


def test_display_rows_empty_line_counts_one():
    assert display_rows([""], 10) == 1


def test_display_rows_is_additive_and_wraps():
    assert display_rows(["abc"], 3) == display_rows(["abc"], 100) == 1
    assert display_rows(["abcd"], 3) > display_rows(["abc"], 3)
    lines = ["hello", "", "world wide"]
    assert display_rows(lines, 4) == sum(display_rows([line], 4) for line in lines)


def test_display_rows_wide_characters():
    assert display_rows(["界"], 1) == display_rows(["ab"], 1)


def test_display_rows_zero_width_is_treated_as_one_column():
    assert display_rows(["abc"], 0) == display_rows(["abc"], 1)


@pytest.mark.parametrize("total,visible", [(5, 10), (10, 10)])
def test_scroll_offset_short_content_starts_at_top(total, visible):
    assert scroll_offset(total, visible, 0) == 0


def test_scroll_offset_moves_up_and_clamps():
    bottom = scroll_offset(50, 10, 0)
    assert scroll_offset(50, 10, 3) == bottom - 3
    assert scroll_offset(50, 10, 10_000) == 0


def test_centered_rect_is_centred():
    area = Rect(2, 3, 100, 40)
    popup = centered_rect(76, 14, area)
    assert popup.width == 76
    assert popup.height == 14
    left = popup.x - area.x
    right = area.x + area.width - (popup.x + popup.width)
    top = popup.y - area.y
    bottom = area.y + area.height - (popup.y + popup.height)
    assert abs(left - right) <= 1
    assert abs(top - bottom) <= 1


def test_centered_rect_clips_to_small_area():
    area = Rect(0, 0, 20, 5)
    popup = centered_rect(76, 14, area)
    assert popup.height == area.height
    assert popup.y == area.y
    assert popup.width <= area.width


def test_file_tree_line_directories_and_files():
    assert file_tree_line("src", 0, True, False) == "▶ src"
    assert file_tree_line("src", 0, True, True) == "▼ src"
    nested = file_tree_line("main.rs", 2, False, False)
    assert nested.endswith("main.rs")
    assert nested[: -len("main.rs")] == " " * 6


def test_file_tree_line_files_align_with_directory_names():
    directory = file_tree_line("name", 1, True, True)
    plain = file_tree_line("name", 1, False, False)
    assert len(directory) == len(plain)
    assert directory.index("name") == plain.index("name")