import os
from pathlib import Path

import pytest

from fuzzertui.canvas import Canvas
from fuzzertui.geometry import Rect
from fuzzertui.main_window import MainWindow
from fuzzertui.popup import PopupType
from fuzzertui.project_window import ProjectState, ProjectWindow
from fuzzertui.projects import create_project_structure, validate_project_structure
from fuzzertui.window import KeyCode, KeyEvent, PopWindow, PushWindow, ShowPopup

UP = KeyEvent(KeyCode.UP)
DOWN = KeyEvent(KeyCode.DOWN)
ENTER = KeyEvent(KeyCode.ENTER)
ESC = KeyEvent(KeyCode.ESC)
END = KeyEvent(KeyCode.END)


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "work").mkdir()
    return tmp_path


def type_text(window, text):
    for char in text:
        assert window.handle_input(KeyEvent.from_char(char)) == []


def test_initial_state(workspace):
    window = ProjectWindow(workspace)
    assert window.name() == "Project Setup"
    assert window.capture_all_input() is False
    assert window.options == ["Create New Project", "Open Existing Project"]


def test_selection_is_clamped(workspace):
    window = ProjectWindow(workspace)
    window.handle_input(UP)
    assert window.selected_index == 0
    window.handle_input(DOWN)
    window.handle_input(KeyEvent.from_char("j"))
    assert window.selected_index == 1
    window.handle_input(KeyEvent.from_char("k"))
    assert window.selected_index == 0


def test_open_mode_and_escape(workspace):
    window = ProjectWindow(workspace)
    window.handle_input(DOWN)
    window.handle_input(ENTER)
    assert window.name() == "Open Project - Select Directory"
    window.handle_input(ESC)
    assert window.state is ProjectState.SELECTING_ACTION


def test_create_project_flow(workspace):
    window = ProjectWindow(workspace)
    window.handle_input(ENTER)
    assert window.name() == "Create Project - Select Directory"
    window.handle_input(DOWN)
    assert window.explorer.selected().name == "work"
    window.handle_input(ENTER)
    assert window.name() == "Create Project - Enter project name"
    assert window.capture_all_input() is True
    type_text(window, "proj")
    requests = window.handle_input(ENTER)

    expected = (workspace / "work" / "proj").resolve()
    assert isinstance(requests[0], PopWindow)
    assert isinstance(requests[1], PushWindow)
    assert isinstance(requests[1].window, MainWindow)
    popup = requests[2].popup
    assert popup.popup_type is PopupType.SUCCESS
    assert popup.message == f"Project opened successfully at: {expected}"
    validate_project_structure(expected)
    assert Path(os.getcwd()).resolve() == expected


def test_cancel_dialogue(workspace):
    window = ProjectWindow(workspace)
    window.handle_input(ENTER)
    window.handle_input(DOWN)
    window.handle_input(ENTER)
    type_text(window, "abc")
    assert window.handle_input(ESC) == []
    assert window.dialogue is None
    assert window.name() == "Create Project - Select Directory"


def test_create_on_file_asks_for_directory(workspace):
    (workspace / "a.txt").write_text("x")
    window = ProjectWindow(workspace)
    window.handle_input(ENTER)
    window.handle_input(END)
    assert window.explorer.selected().name == "a.txt"
    requests = window.handle_input(ENTER)
    assert len(requests) == 1
    assert requests[0].popup.popup_type is PopupType.INFO
    assert requests[0].popup.message == "Please select a directory."


def test_create_failure_reports_warning(workspace):
    (workspace / "work" / "taken").write_text("not a directory")
    window = ProjectWindow(workspace)
    window.handle_input(ENTER)
    window.handle_input(DOWN)
    window.handle_input(ENTER)
    type_text(window, "taken")
    requests = window.handle_input(ENTER)
    assert len(requests) == 1
    assert requests[0].popup.popup_type is PopupType.WARNING
    assert requests[0].popup.message.startswith("Failed to create project: ")
    assert window.capture_all_input() is True


def test_open_valid_project(workspace):
    project = workspace / "work"
    create_project_structure(project)
    window = ProjectWindow(workspace)
    window.handle_input(DOWN)
    window.handle_input(ENTER)
    window.handle_input(DOWN)
    requests = window.handle_input(ENTER)
    assert isinstance(requests[0], PopWindow)
    assert isinstance(requests[1].window, MainWindow)
    assert requests[2].popup.popup_type is PopupType.SUCCESS
    assert window.state is ProjectState.SELECTING_ACTION
    assert Path(os.getcwd()).resolve() == project.resolve()


def test_open_invalid_project(workspace):
    window = ProjectWindow(workspace)
    window.handle_input(DOWN)
    window.handle_input(ENTER)
    window.handle_input(DOWN)
    requests = window.handle_input(ENTER)
    assert len(requests) == 1
    assert isinstance(requests[0], ShowPopup)
    assert requests[0].popup.popup_type is PopupType.WARNING
    assert requests[0].popup.message == "Invalid project: Corpus directory not found."


def test_open_on_file_asks_for_directory(workspace):
    (workspace / "a.txt").write_text("x")
    window = ProjectWindow(workspace)
    window.handle_input(DOWN)
    window.handle_input(ENTER)
    window.handle_input(END)
    requests = window.handle_input(ENTER)
    assert requests[0].popup.message == "Please select a directory for project operations."
    assert window.state is ProjectState.BROWSING_FOR_OPEN


def test_render_menu_and_dialogue(workspace):
    window = ProjectWindow(workspace)
    canvas = Canvas(120, 40)
    assert window.render(canvas, Rect(0, 0, 120, 40)) == []
    assert any("Create New Project" in line for line in canvas.lines())
    assert any("Select Option" in line for line in canvas.lines())

    window.handle_input(ENTER)
    window.handle_input(DOWN)
    window.handle_input(ENTER)
    canvas = Canvas(120, 40)
    window.render(canvas, Rect(0, 0, 120, 40))
    assert any("Enter project name:" in line for line in canvas.lines())