"""SQLite persistence for global settings and per-project sessions."""

from __future__ import annotations

import dataclasses
import os
import sqlite3
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import platformdirs

from foxcowork.options import (
    Reasoning,
    ReasoningEffort,
    Settings,
    ThinkingDisplay,
    ToolDisplayVerbosity,
    parse_ollama_think,
)

APP_NAME = "foxmayn-cowork"

_GLOBAL_SCHEMA = """
CREATE TABLE IF NOT EXISTS settings (
    key   TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""

_PROJECT_SCHEMA = """
CREATE TABLE IF NOT EXISTS sessions (
    id                  INTEGER PRIMARY KEY AUTOINCREMENT,
    started_at          INTEGER NOT NULL,
    title               TEXT    NOT NULL DEFAULT '',
    conversation_json   TEXT    NOT NULL DEFAULT '[]',
    chat_messages_json  TEXT    NOT NULL DEFAULT '[]'
);
"""


def base_dir() -> Path:
    """The per-user data directory for the application."""
    return Path(platformdirs.user_data_dir(APP_NAME, appauthor=False))


def sanitize_path(path: Union[str, os.PathLike]) -> str:
    """Flatten a path into a directory name: ``/home/nas/p`` becomes ``-home-nas-p``."""
    return os.fspath(path).replace("/", "-").replace("\\", "-")


@dataclass(frozen=True)
class SessionSummary:
    """A row of the session list."""

    id: int
    started_at: int
    title: str


class ProjectStorage:
    """The session database of one project."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            pass
        self._conn = sqlite3.connect(path)
        try:
            self._conn.executescript(_PROJECT_SCHEMA)
        except sqlite3.Error:
            self._conn.close()
            raise

    def create_session(self, title: str) -> int:
        """Create a session row and return its id."""
        now = int(time.time())
        with self._conn:
            cursor = self._conn.execute(
                "INSERT INTO sessions (started_at, title) VALUES (?, ?)", (now, title)
            )
        return cursor.lastrowid

    def save_session(self, session_id: int, conversation_json: str, chat_messages_json: str) -> None:
        """Overwrite the JSON blobs of an existing session."""
        with self._conn:
            self._conn.execute(
                "UPDATE sessions SET conversation_json = ?, chat_messages_json = ? WHERE id = ?",
                (conversation_json, chat_messages_json, session_id),
            )

    def list_sessions(self) -> list[SessionSummary]:
        """The 20 most recent sessions, newest first."""
        rows = self._conn.execute(
            "SELECT id, started_at, title FROM sessions "
            "ORDER BY started_at DESC, id DESC LIMIT 20"
        )
        return [SessionSummary(*row) for row in rows]

    def load_session(self, session_id: int) -> Optional[tuple[str, str]]:
        """The conversation and chat-message JSON of a session, or None if absent."""
        row = self._conn.execute(
            "SELECT conversation_json, chat_messages_json FROM sessions WHERE id = ?",
            (session_id,),
        ).fetchone()
        return None if row is None else (row[0], row[1])

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "ProjectStorage":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class Storage:
    """Global settings database plus the currently open project, if any."""

    def __init__(self, root: Optional[Union[str, os.PathLike]] = None) -> None:
        self.root = Path(root) if root is not None else base_dir()
        self.project: Optional[ProjectStorage] = None
        try:
            self._global = self._open_global()
        except (sqlite3.Error, OSError):
            # Keep working without persistence.
            self._global = sqlite3.connect(":memory:")
            self._global.executescript(_GLOBAL_SCHEMA)

    def _open_global(self) -> sqlite3.Connection:
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError:
            pass
        conn = sqlite3.connect(self.root / "settings.db")
        try:
            conn.executescript(_GLOBAL_SCHEMA)
        except sqlite3.Error:
            conn.close()
            raise
        return conn

    def load_settings(self) -> list[tuple[str, str]]:
        """All saved settings as (key, value) pairs."""
        return [tuple(row) for row in self._global.execute("SELECT key, value FROM settings")]

    def save_setting(self, key: str, value: str) -> None:
        """Insert or replace one setting."""
        with self._global:
            self._global.execute(
                "INSERT INTO settings (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )

    def delete_setting(self, key: str) -> None:
        with self._global:
            self._global.execute("DELETE FROM settings WHERE key = ?", (key,))

    def open_project(self, working_dir: Union[str, os.PathLike]) -> Optional[ProjectStorage]:
        """Open the project database for ``working_dir``; None if it cannot be opened."""
        if self.project is not None:
            self.project.close()
        path = self.root / "projects" / sanitize_path(working_dir) / "data.db"
        try:
            self.project = ProjectStorage(path)
        except (sqlite3.Error, OSError):
            self.project = None
        return self.project

    def close(self) -> None:
        if self.project is not None:
            self.project.close()
            self.project = None
        self._global.close()

    def __enter__(self) -> "Storage":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def apply_saved_settings(settings: Settings, storage: Storage) -> Settings:
    """Overlay saved settings on ``settings``; saved values win.

    Skipping confirmations is never restored and any stale value is purged.
    """
    try:
        saved = storage.load_settings()
    except sqlite3.Error:
        return settings

    changes: dict = {}
    for key, value in saved:
        if key == "model":
            changes["model"] = value
        elif key == "skip_confirmations":
            try:
                storage.delete_setting("skip_confirmations")
            except sqlite3.Error:
                pass
        elif key == "streaming_enabled":
            changes["streaming_enabled"] = value == "true"
        elif key == "thinking_display":
            try:
                changes["thinking_display"] = ThinkingDisplay(value)
            except ValueError:
                pass
        elif key == "tool_display_verbosity":
            try:
                changes["tool_display_verbosity"] = ToolDisplayVerbosity(value)
            except ValueError:
                pass
        elif key == "openrouter_reasoning":
            if value == "off":
                changes["openrouter_reasoning"] = None
            else:
                try:
                    effort = ReasoningEffort(value)
                except ValueError:
                    continue
                previous = changes.get("openrouter_reasoning", settings.openrouter_reasoning)
                summary = previous.summary if previous is not None else None
                changes["openrouter_reasoning"] = Reasoning(effort=effort, summary=summary)
        elif key == "ollama_think":
            if value == "off":
                changes["ollama_think"] = None
            else:
                try:
                    changes["ollama_think"] = parse_ollama_think(value)
                except ValueError:
                    pass
    return dataclasses.replace(settings, **changes)