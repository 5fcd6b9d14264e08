"""The configuration screen."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .canvas import Align, Canvas, Color, Style
from .geometry import Direction, Percentage, Rect, split
from .window import KeyCode, KeyEvent, Request, Window

CONFIG_FILE_NAME = "config.json"


class ConfigState(Enum):
    MAIN = "main"
    MANUAL_CONFIG = "manual_config"


class ConfigWindow(Window):
    """Shows the project's configuration and the ways to change it."""

    def __init__(self, config_path: Optional[Union[str, "os.PathLike[str]"]] = None) -> None:
        self._requested_path = Path(config_path) if config_path is not None else None
        self.state = ConfigState.MAIN
        self.config_file: Optional[Path] = None
        self.config_json = "Config string not read yet!"
        self.selected_idx = 0
        self.options = ["From script", "Manual configuration"]
        self.load_config_file()
        self.load_config_str()

    def load_config_file(self) -> None:
        """Choose the configuration file, by default config.json in the working directory."""
        self.config_file = self._requested_path or Path(CONFIG_FILE_NAME)

    def load_config_str(self) -> None:
        """Read the configuration file, keeping an error message if that fails."""
        if self.config_file is None:
            self.load_config_file()
        try:
            self.config_json = self.config_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self.config_json = f"Error reading config file: {exc}"

    def name(self) -> str:
        if self.state is ConfigState.MANUAL_CONFIG:
            return "Configuration Menu: Manual config"
        return "Configuration Menu"

    def capture_all_input(self) -> bool:
        return self.state is ConfigState.MANUAL_CONFIG

    def render(self, canvas: Canvas, area: Rect) -> list[Request]:
        canvas.clear(area)
        if self.state is ConfigState.MANUAL_CONFIG:
            canvas.box(
                area,
                title="Manual Configuration",
                title_style=Style(fg=Color.GREEN),
            )
            return []
        left, right = split(
            area.inner(1), [Percentage(50), Percentage(50)], Direction.HORIZONTAL
        )
        canvas.list(left, self.options, selected=self.selected_idx, title="Configuration Options")
        inner = canvas.box(right)
        canvas.text(inner, self.config_json, align=Align.LEFT)
        return []

    def handle_input(self, key: KeyEvent) -> list[Request]:
        if self.state is ConfigState.MAIN:
            if key.code is KeyCode.UP:
                if self.selected_idx > 0:
                    self.selected_idx -= 1
            elif key.code is KeyCode.DOWN:
                if self.selected_idx < len(self.options) - 1:
                    self.selected_idx += 1
            elif key.code is KeyCode.ENTER:
                if self.selected_idx == 1:
                    self.state = ConfigState.MANUAL_CONFIG
        if self.state is ConfigState.MANUAL_CONFIG and key.code is KeyCode.ESC:
            self.state = ConfigState.MAIN
        return []