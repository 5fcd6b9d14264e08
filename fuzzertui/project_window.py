"""The first screen: create a new project or open an existing one."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .canvas import Align, Canvas
from .file_explorer import FileExplorer
from .geometry import Direction, Min, Percentage, Rect, centered_rect, split
from .input_dialogue import Cancel, InputDialogue, Submit
from .main_window import BANNER, BANNER_STYLE, MainWindow
from .popup import Popup, PopupType
from .projects import ProjectError, create_project_structure, validate_project_structure
from .window import KeyCode, KeyEvent, PopWindow, PushWindow, Request, ShowPopup, Window

CREATE_OPTION = "Create New Project"
OPEN_OPTION = "Open Existing Project"


class ProjectState(Enum):
    SELECTING_ACTION = "selecting_action"
    BROWSING_FOR_CREATE = "browsing_for_create"
    BROWSING_FOR_OPEN = "browsing_for_open"


def _popup(kind: PopupType, message: str) -> list[Request]:
    return [ShowPopup(Popup(kind, message))]


class ProjectWindow(Window):
    """Lets the user pick a directory to create or open a project in."""

    def __init__(self, start_dir: Optional[Union[str, "os.PathLike[str]"]] = None) -> None:
        self.selected_index = 0
        self.options = [CREATE_OPTION, OPEN_OPTION]
        self.state = ProjectState.SELECTING_ACTION
        self.dialogue: Optional[InputDialogue] = None
        self.explorer = FileExplorer(start_dir)

    def _open_project(self, path: Path) -> list[Request]:
        try:
            os.chdir(path)
        except OSError as exc:
            return _popup(PopupType.WARNING, f"Failed to set current directory: {exc}")
        return [
            PopWindow(),
            PushWindow(MainWindow()),
            ShowPopup(Popup(PopupType.SUCCESS, f"Project opened successfully at: {path}")),
        ]

    def name(self) -> str:
        if self.state is ProjectState.BROWSING_FOR_CREATE:
            if self.dialogue is not None:
                return "Create Project - Enter project name"
            return "Create Project - Select Directory"
        if self.state is ProjectState.BROWSING_FOR_OPEN:
            return "Open Project - Select Directory"
        return "Project Setup"

    def capture_all_input(self) -> bool:
        return self.state is ProjectState.BROWSING_FOR_CREATE and self.dialogue is not None

    def render(self, canvas: Canvas, area: Rect) -> list[Request]:
        if self.state is ProjectState.SELECTING_ACTION:
            title_area, options_area = split(area, [Percentage(40), Min(3)], Direction.VERTICAL)
            canvas.text(title_area, BANNER, BANNER_STYLE, Align.CENTER)
            canvas.list(
                options_area,
                self.options,
                selected=self.selected_index,
                title="Select Option",
                align=Align.CENTER,
            )
        else:
            self.explorer.render(canvas, area)
            if self.state is ProjectState.BROWSING_FOR_CREATE and self.dialogue is not None:
                self.dialogue.render(canvas, centered_rect(30, 20, area))
        return []

    def handle_input(self, key: KeyEvent) -> list[Request]:
        if self.state is ProjectState.SELECTING_ACTION:
            return self._handle_selecting(key)
        if self.state is ProjectState.BROWSING_FOR_CREATE:
            return self._handle_create(key)
        return self._handle_open(key)

    def _handle_selecting(self, key: KeyEvent) -> list[Request]:
        if key.code is KeyCode.UP or key.is_char("k"):
            if self.selected_index > 0:
                self.selected_index -= 1
        elif key.code is KeyCode.DOWN or key.is_char("j"):
            if self.selected_index < len(self.options) - 1:
                self.selected_index += 1
        elif key.code is KeyCode.ENTER:
            choice = self.options[self.selected_index]
            if choice == CREATE_OPTION:
                self.state = ProjectState.BROWSING_FOR_CREATE
                self.dialogue = None
            elif choice == OPEN_OPTION:
                self.state = ProjectState.BROWSING_FOR_OPEN
        return []

    def _browse(self, key: KeyEvent) -> list[Request]:
        try:
            self.explorer.handle(key)
        except OSError as exc:
            self.state = ProjectState.SELECTING_ACTION
            self.dialogue = None
            return _popup(PopupType.WARNING, f"File browser error: {exc}")
        return []

    def _handle_create(self, key: KeyEvent) -> list[Request]:
        if self.dialogue is not None:
            result = self.dialogue.handle_input(key)
            if isinstance(result, Cancel):
                self.dialogue = None
            elif isinstance(result, Submit):
                selected = self.explorer.selected()
                if selected is None:
                    return _popup(PopupType.INFO, "Please select a directory.")
                new_project = selected.path / result.text
                try:
                    create_project_structure(new_project)
                except ProjectError as exc:
                    return _popup(PopupType.WARNING, f"Failed to create project: {exc}")
                return self._open_project(new_project)
            return []

        if key.code is KeyCode.ENTER:
            selected = self.explorer.selected()
            if selected is None:
                return []
            if selected.is_dir:
                self.dialogue = InputDialogue("Create Project", "Enter project name:")
                return []
            return _popup(PopupType.INFO, "Please select a directory.")
        return self._browse(key)

    def _handle_open(self, key: KeyEvent) -> list[Request]:
        if key.code is KeyCode.ENTER:
            selected = self.explorer.selected()
            if selected is None:
                return []
            if not selected.is_dir:
                return _popup(
                    PopupType.INFO, "Please select a directory for project operations."
                )
            self.state = ProjectState.SELECTING_ACTION
            try:
                validate_project_structure(selected.path)
            except ProjectError as exc:
                return _popup(PopupType.WARNING, f"Invalid project: {exc}")
            return self._open_project(selected.path)

        requests = self._browse(key)
        if requests:
            return requests
        if key.code is KeyCode.ESC:
            self.state = ProjectState.SELECTING_ACTION
        return []