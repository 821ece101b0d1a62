"""Slash-command handling and the chat state it acts on."""

from __future__ import annotations

import dataclasses
import json
import os
import sqlite3
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from foxcowork.messages import ChatEntry, ChatRole, session_line
from foxcowork.options import (
    OllamaThinkLevel,
    Provider,
    Reasoning,
    ReasoningEffort,
    Settings,
    ThinkingDisplay,
    ToolDisplayVerbosity,
    parse_ollama_think,
)
from foxcowork.pickers import (
    SlashPicker,
    model_picker,
    openrouter_model_list,
    reasoning_picker,
    static_picker,
)
from foxcowork.storage import SessionSummary, Storage

_NO_PROJECT = "No project open. Use /dir <path> first."
_NO_SESSIONS = "No sessions yet for this project."
_LOCAL_REASONING = "Reasoning is not configurable for the local provider."


class Action(Enum):
    """Background work a command asks the caller to start."""

    LOAD_FILE_TREE = "load_file_tree"
    HEALTH_CHECK = "health_check"
    FETCH_OLLAMA_MODELS = "fetch_ollama_models"


class SlashController:
    """Runs slash commands against the settings, storage and chat log."""

    def __init__(self, settings: Settings, storage: Storage) -> None:
        self.settings = settings
        self.storage = storage
        self.chat_messages: list[ChatEntry] = []
        self.conversation: list[Any] = []
        self.slash_picker: Optional[SlashPicker] = None
        self.working_dir: Optional[Path] = None
        self.current_session_id: Optional[int] = None
        self.should_quit = False

    # ── chat log ──────────────────────────────────────────────────────────────

    def push_info(self, message: str) -> None:
        self.chat_messages.append(ChatEntry(ChatRole.TOOL, message))

    def push_error(self, message: str) -> None:
        self.chat_messages.append(ChatEntry(ChatRole.ERROR, message))

    def clear_conversation(self) -> None:
        """Forget the conversation and start a fresh session."""
        self.chat_messages.clear()
        self.conversation.clear()
        self.slash_picker = None
        self.current_session_id = None

    # ── state changes ─────────────────────────────────────────────────────────

    def set_working_dir(self, path: Union[str, os.PathLike]) -> None:
        """Switch to another directory and open its project database."""
        self.working_dir = Path(path)
        self.current_session_id = None
        self.storage.open_project(self.working_dir)

    def resume_session(self, session_id: int) -> bool:
        """Load a saved session; False if it does not exist or cannot be read."""
        project = self.storage.project
        if project is None:
            return False
        try:
            stored = project.load_session(session_id)
        except sqlite3.Error:
            return False
        if stored is None:
            return False
        conversation_json, chat_json = stored
        try:
            conversation = json.loads(conversation_json)
            entries = [
                ChatEntry(ChatRole(item["role"]), str(item["content"]))
                for item in json.loads(chat_json)
            ]
        except (ValueError, TypeError, KeyError):
            return False
        self.conversation = list(conversation)
        self.chat_messages = entries
        self.current_session_id = session_id
        return True

    def models_loaded(self, models: Sequence[str]) -> None:
        """Open the model picker over fetched models, or report the failure."""
        if not models:
            self.push_error("Could not fetch models from Ollama. Is it running?")
        else:
            self.slash_picker = model_picker(models, self.settings.model)

    def _update(self, **changes: Any) -> None:
        self.settings = dataclasses.replace(self.settings, **changes)

    def _persist(self, key: str, value: str) -> None:
        try:
            self.storage.save_setting(key, value)
        except sqlite3.Error as exc:
            self.push_error(f"Warning: setting not persisted: {exc}")

    def _list_sessions(self) -> list[SessionSummary]:
        project = self.storage.project
        if project is None:
            return []
        try:
            return project.list_sessions()
        except sqlite3.Error:
            return []

    def _report_no_sessions(self) -> None:
        if self.storage.project is None:
            self.push_error(_NO_PROJECT)
        else:
            self.push_info(_NO_SESSIONS)

    # ── dispatch ──────────────────────────────────────────────────────────────

    def accept_picker(self) -> list[Action]:
        """Run the picker's command with the highlighted item and close the picker."""
        picker, self.slash_picker = self.slash_picker, None
        if picker is None:
            return []
        item = picker.selected_item()
        if item is None:
            return []
        return self.dispatch(f"{picker.command} {item.value}")

    def dispatch(self, text: str) -> list[Action]:
        """Run one slash command; returns the background work it asks for."""
        command, sep, rest = text.partition(" ")
        arg = rest.strip() if sep else ""

        if command == "/clear":
            self.clear_conversation()
        elif command == "/exit":
            self.should_quit = True
        elif command == "/dir":
            if not arg:
                self.push_error("Usage: /dir <path>")
            else:
                self.set_working_dir(arg)
                return [Action.LOAD_FILE_TREE, Action.HEALTH_CHECK]
        elif command == "/model":
            return self._model(arg)
        elif command == "/skip-confirmations":
            enabled = not self.settings.skip_confirmations
            self._update(skip_confirmations=enabled)
            # Never persisted: every launch starts with confirmations on.
            state = "disabled" if enabled else "enabled"
            self.push_info(f"Confirmations {state} (session only)")
        elif command == "/streaming":
            enabled = not self.settings.streaming_enabled
            self._update(streaming_enabled=enabled)
            self._persist("streaming_enabled", "true" if enabled else "false")
            self.push_info(f"Streaming {'on' if enabled else 'off'}")
        elif command == "/thinking":
            self._thinking(arg)
        elif command == "/tool-verbosity":
            self._tool_verbosity(arg)
        elif command == "/reasoning":
            if not arg:
                picker = reasoning_picker(self.settings)
                if picker is None:
                    self.push_info(_LOCAL_REASONING)
                else:
                    self.slash_picker = picker
            else:
                self._apply_reasoning(arg)
        elif command == "/sessions":
            self._sessions()
        elif command == "/resume":
            self._resume(arg)
        else:
            self.push_error(f"Unknown command: {command}")
        return []

    def _model(self, arg: str) -> list[Action]:
        if arg:
            self._update(model=arg)
            self._persist("model", arg)
            self.push_info(f"Model set to: {arg}")
        elif self.settings.provider is Provider.OPENROUTER:
            self.slash_picker = model_picker(openrouter_model_list(), self.settings.model)
        elif self.settings.provider is Provider.OLLAMA:
            return [Action.FETCH_OLLAMA_MODELS]
        else:
            self.push_info(f"Current model: {self.settings.model}")
        return []

    def _thinking(self, arg: str) -> None:
        if not arg:
            self.slash_picker = static_picker("/thinking", self.settings.thinking_display.value)
            return
        try:
            mode = ThinkingDisplay(arg)
        except ValueError:
            self.push_error("Usage: /thinking <off|inline|full>")
            return
        self._update(thinking_display=mode)
        self._persist("thinking_display", arg)
        self.push_info(f"Thinking display set to: {arg}")

    def _tool_verbosity(self, arg: str) -> None:
        if not arg:
            self.slash_picker = static_picker(
                "/tool-verbosity", self.settings.tool_display_verbosity.value
            )
            return
        try:
            mode = ToolDisplayVerbosity(arg)
        except ValueError:
            self.push_error("Usage: /tool-verbosity <default|minimal|full>")
            return
        self._update(tool_display_verbosity=mode)
        self._persist("tool_display_verbosity", arg)
        self.push_info(f"Tool verbosity set to: {arg}")

    def _apply_reasoning(self, arg: str) -> None:
        provider = self.settings.provider
        if provider is Provider.OPENROUTER:
            if arg == "off":
                self._update(openrouter_reasoning=None)
                self._persist("openrouter_reasoning", "off")
                self.push_info("OpenRouter reasoning disabled.")
                return
            try:
                effort = ReasoningEffort(arg)
            except ValueError:
                self.push_error("Usage: /reasoning <off|minimal|none|low|medium|high|xhigh>")
                return
            previous = self.settings.openrouter_reasoning
            summary = previous.summary if previous is not None else None
            self._update(openrouter_reasoning=Reasoning(effort=effort, summary=summary))
            self._persist("openrouter_reasoning", arg)
            self.push_info(f"OpenRouter reasoning set to: {arg}")
        elif provider is Provider.OLLAMA:
            if arg == "off":
                self._update(ollama_think=None)
                self._persist("ollama_think", "off")
                self.push_info("Ollama thinking disabled.")
                return
            try:
                think = parse_ollama_think(arg)
            except ValueError:
                self.push_error("Usage: /reasoning <off|low|medium|high>")
                return
            self._update(ollama_think=think)
            self._persist("ollama_think", arg)
            self.push_info(f"Ollama think set to: {arg}")
        else:
            self.push_info(_LOCAL_REASONING)

    def _sessions(self) -> None:
        sessions = self._list_sessions()
        if not sessions:
            self._report_no_sessions()
            return
        lines = ["Recent sessions — use /resume <id> to continue:"]
        lines += [session_line(summary) for summary in sessions]
        self.push_info("\n".join(lines))

    def _resume(self, arg: str) -> None:
        if not arg:
            sessions = self._list_sessions()
            if not sessions:
                self._report_no_sessions()
                return
            self.slash_picker = SlashPicker(
                "/resume",
                [_session_item(summary) for summary in sessions],
                0,
            )
            return
        try:
            session_id = int(arg)
        except ValueError:
            self.push_error("Usage: /resume <session-id>")
            return
        if self.resume_session(session_id):
            self.push_info(f"Session #{session_id} resumed.")
        else:
            self.push_error(
                f"Session #{session_id} not found. Use /sessions to list available sessions."
            )


def _session_item(summary: SessionSummary):
    from foxcowork.pickers import PickerItem

    return PickerItem(session_line(summary), str(summary.id))


__all__ = ["Action", "SlashController", "OllamaThinkLevel"]