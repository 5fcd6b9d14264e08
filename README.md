# fuzzertui

A keyboard-driven terminal interface for preparing fuzzing projects. It can
create a new project directory, open an existing one, and show the project's
configuration. It runs on `curses` from the standard library and has no other
dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
fuzzertui
```

The command takes no options besides `--help`. The screen has a header
("FlashFuzz v1.0"), the current window in the middle, and a footer that shows
the name of the active window.

### Global keys

| Key | Action |
|-----|--------|
| `q` | Quit |
| `b` | Close the current window. Closing the last window quits |

When a popup is shown, the next key only closes it. While a window captures
all input (the project-name dialogue and the manual configuration screen),
every key goes to that window, so `q` and `b` can be typed into the dialogue.

### Project screen

The first window offers *Create New Project* and *Open Existing Project*.
Move with Up/Down or `k`/`j`, choose with Enter.

Both choices open a directory browser, listing directories first and a `..`
entry for the parent:

| Key | Action |
|-----|--------|
| Up / `k`, Down / `j` | Move the selection |
| Page Up / Page Down | Move by ten entries |
| Home / `g`, End / `G` | First / last entry |
| Left / Backspace / `h` | Go to the parent directory |
| Right / `l` | Enter the selected directory |
| Enter | Use the selected directory |
| Esc | Back to the project screen (when opening a project) |

*Create New Project*: press Enter on a directory, type a name in the dialogue
(Left/Right move the cursor, Backspace deletes, Esc cancels) and press Enter.
A directory of that name is made inside the selected one and given the
project layout.

*Open Existing Project*: press Enter on the project directory; its layout is
checked and the first missing part is reported in a popup.

On success the working directory changes to the project, the project screen
is replaced by the main menu, and a popup confirms the path.

## Project layout

```
<project>/
  corpus/
  crashes/
  config.json
  grammar.json
```

`config.json` and `grammar.json` are created empty; if they already exist they
are truncated. The same functions are available from code:

```python
from pathlib import Path
from fuzzertui.projects import (
    ProjectError,
    create_project_structure,
    validate_project_structure,
)

create_project_structure(Path("my_project"))
try:
    validate_project_structure(Path("my_project"))
except ProjectError as err:
    print(err)
```

## Main menu

The main menu lists *Static analysis*, *Fuzz !*, *Config* and *Quit*
(Up/Down to move, Enter to choose). *Config* opens the configuration window.
Every other entry, *Quit* included, only shows a popup naming it; use `q` to
quit.

The configuration window shows the text of `config.json` in the current
directory, or the error met while reading it. Its options are *From script*
and *Manual configuration*; the latter opens a screen that Esc leaves.

## What it does not do

- It does not run fuzzing or static analysis; those menu entries only show a
  popup.
- It writes no default configuration: new projects get an empty
  `config.json`.
- *From script* does nothing, and the manual configuration screen is an empty
  frame with no fields to edit.