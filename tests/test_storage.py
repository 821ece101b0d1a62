import pytest

from foxcowork.options import (
    OllamaThinkLevel,
    Reasoning,
    ReasoningEffort,
    Settings,
    ThinkingDisplay,
    ToolDisplayVerbosity,
)
from foxcowork.storage import ProjectStorage, Storage, apply_saved_settings, sanitize_path


@pytest.fixture
def storage(tmp_path):
    with Storage(tmp_path / "data") as store:
        yield store


def test_sanitize_path_example():
    assert sanitize_path("/home/nas/myproject") == "-home-nas-myproject"
    assert sanitize_path("C:\\work\\proj") == "C:-work-proj"


def test_settings_round_trip_and_upsert(storage):
    storage.save_setting("model", "a")
    storage.save_setting("model", "b")
    storage.save_setting("streaming_enabled", "false")
    assert sorted(storage.load_settings()) == [("model", "b"), ("streaming_enabled", "false")]


def test_settings_persist_across_instances(tmp_path):
    with Storage(tmp_path) as first:
        first.save_setting("model", "m1")
    with Storage(tmp_path) as second:
        assert second.load_settings() == [("model", "m1")]


def test_delete_setting(storage):
    storage.save_setting("model", "x")
    storage.delete_setting("model")
    assert storage.load_settings() == []


def test_falls_back_to_memory_when_root_unusable(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    with Storage(blocker) as store:
        store.save_setting("model", "x")
        assert store.load_settings() == [("model", "x")]


def test_sessions_round_trip(storage, tmp_path):
    project = storage.open_project(tmp_path / "work")
    assert storage.project is project
    session_id = project.create_session("first")
    assert project.load_session(session_id) == ("[]", "[]")
    project.save_session(session_id, '[{"a": 1}]', '["b"]')
    assert project.load_session(session_id) == ('[{"a": 1}]', '["b"]')
    assert project.load_session(session_id + 100) is None


def test_list_sessions_newest_first_and_limited(tmp_path):
    with ProjectStorage(tmp_path / "p" / "data.db") as project:
        ids = [project.create_session(f"s{n}") for n in range(25)]
        listed = project.list_sessions()
        assert len(listed) == 20
        assert [s.id for s in listed] == sorted(ids, reverse=True)[:20]
        started = [s.started_at for s in listed]
        assert started == sorted(started, reverse=True)
        assert listed[0].title == "s24"


def test_open_project_failure_gives_none(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    with Storage(tmp_path) as store:
        store.root = blocker
        assert store.open_project("/some/dir") is None
        assert store.project is None


def test_apply_saved_settings(storage):
    storage.save_setting("model", "custom/model")
    storage.save_setting("streaming_enabled", "false")
    storage.save_setting("thinking_display", "full")
    storage.save_setting("tool_display_verbosity", "minimal")
    storage.save_setting("openrouter_reasoning", "high")
    storage.save_setting("ollama_think", "low")
    base = Settings(openrouter_reasoning=Reasoning(effort=ReasoningEffort.LOW, summary="auto"))
    result = apply_saved_settings(base, storage)
    assert result.model == "custom/model"
    assert result.streaming_enabled is False
    assert result.thinking_display is ThinkingDisplay.FULL
    assert result.tool_display_verbosity is ToolDisplayVerbosity.MINIMAL
    assert result.openrouter_reasoning == Reasoning(effort=ReasoningEffort.HIGH, summary="auto")
    assert result.ollama_think is OllamaThinkLevel.LOW


def test_apply_saved_settings_off_and_invalid(storage):
    storage.save_setting("openrouter_reasoning", "off")
    storage.save_setting("ollama_think", "off")
    storage.save_setting("thinking_display", "bogus")
    base = Settings(
        openrouter_reasoning=Reasoning(effort=ReasoningEffort.LOW),
        ollama_think=True,
        thinking_display=ThinkingDisplay.OFF,
    )
    result = apply_saved_settings(base, storage)
    assert result.openrouter_reasoning is None
    assert result.ollama_think is None
    assert result.thinking_display is ThinkingDisplay.OFF


def test_skip_confirmations_is_purged(storage):
    storage.save_setting("skip_confirmations", "true")
    result = apply_saved_settings(Settings(), storage)
    assert result.skip_confirmations is False
    assert storage.load_settings() == []