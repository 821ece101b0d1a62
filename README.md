# foxcowork

The core of a terminal assistant for AI-assisted file management, as a library.
It covers:

- runtime settings and the option values they can take (`foxcowork.options`),
- SQLite storage for global settings and per-project chat sessions
  (`foxcowork.storage`),
- the slash-command table and prefix matching (`foxcowork.commands`),
- pickers opened by commands given without an argument (`foxcowork.pickers`),
- a controller that runs the slash commands (`/clear`, `/exit`, `/dir`,
  `/model`, `/skip-confirmations`, `/streaming`, `/thinking`,
  `/tool-verbosity`, `/reasoning`, `/sessions`, `/resume`) against the
  settings, storage and chat log (`foxcowork.controller`),
- chat entries, context-size checks and input-box titles (`foxcowork.messages`),
- plain-text rendering and screen geometry (`foxcowork.render`,
  `foxcowork.layout`).

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from pathlib import Path

from foxcowork.commands import match_commands
from foxcowork.controller import SlashController
from foxcowork.options import Settings
from foxcowork.storage import Storage, apply_saved_settings

storage = Storage(Path("/tmp/foxcowork-data"))
settings = apply_saved_settings(Settings(), storage)

controller = SlashController(settings, storage)
controller.dispatch("/thinking full")
controller.dispatch("/sessions")

for entry in controller.chat_messages:
    print(entry.role.value, entry.content)

print([c.name for c in match_commands("/t")])
```

`Storage()` with no argument keeps its databases in the per-user data
directory; if that cannot be opened it falls back to an in-memory database.

Settings changed through slash commands are saved and restored by
`apply_saved_settings`, except `/skip-confirmations`, which always starts off;
a stale saved value for it is deleted.

Sessions are kept per working directory: `/dir <path>` opens that directory's
project database. `/sessions` lists the 20 most recent sessions, newest first,
and `/resume <id>` loads one back. `/resume` with no id, and `/model`,
`/thinking`, `/tool-verbosity` and `/reasoning` with no argument, set
`controller.slash_picker`; `controller.accept_picker()` runs the command with
the highlighted item.

`SlashController.dispatch` returns a list of `Action` values
(`LOAD_FILE_TREE`, `HEALTH_CHECK`, `FETCH_OLLAMA_MODELS`) naming background
work the caller should start. When Ollama models have been fetched, pass them
to `controller.models_loaded(models)`.

`foxcowork.messages.check_context` returns a warning once the estimated token
count reaches the warning ratio and raises `ContextFullError` once it reaches
the limit.

## Rendering

`foxcowork.render.chat_lines` turns chat entries, thinking text and streaming
text into plain display lines. `display_rows` counts the rows they take when
wrapped at a given width, and `scroll_offset` computes the first row to show
so the newest line stays visible. `status_line`, `file_tree_line` and
`centered_rect` cover the status line, file-tree rows and the confirmation
popup. `foxcowork.layout.popup_area` places the completion and picker popups
just above the input bar.

## What this package does not do

- It has no interactive terminal screen: nothing reads keys or draws to the
  terminal. Rendering produces plain strings and rectangles for a front end
  to draw.
- It does not talk to any model provider, check provider health, list
  directories or fetch model lists; the controller only reports these as
  `Action` values.
- It has no first-time setup wizard and does not write a configuration file;
  settings are built as `Settings` objects in code.
- It installs no command.