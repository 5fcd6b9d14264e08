"""A keyboard-driven directory browser."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .canvas import Canvas
from .geometry import Rect
from .window import KeyCode, KeyEvent

PAGE_SIZE = 10
PARENT_NAME = ".."


@dataclass(frozen=True)
class FileInfo:
    """One entry of a directory listing."""

    name: str
    path: Path
    is_dir: bool

    @property
    def label(self) -> str:
        return f"{self.name}/" if self.is_dir else self.name


def _read_dir(directory: Path) -> list[FileInfo]:
    entries = []
    with os.scandir(directory) as listing:
        for entry in listing:
            try:
                is_dir = entry.is_dir()
            except OSError:
                is_dir = False
            entries.append(FileInfo(entry.name, directory / entry.name, is_dir))
    entries.sort(key=lambda info: (not info.is_dir, info.name))
    if directory.parent != directory:
        entries.insert(0, FileInfo(PARENT_NAME, directory.parent, True))
    return entries


class FileExplorer:
    """Lists a directory, directories first, with a movable selection."""

    def __init__(self, cwd: Optional[Union[str, "os.PathLike[str]"]] = None) -> None:
        self.cwd = Path(cwd if cwd is not None else Path.cwd()).resolve()
        self.files = _read_dir(self.cwd)
        self.selected_idx = 0

    def _change_dir(self, directory: Path, select: Optional[str] = None) -> None:
        directory = directory.resolve()
        files = _read_dir(directory)
        self.cwd = directory
        self.files = files
        self.selected_idx = next(
            (i for i, info in enumerate(files) if select is not None and info.name == select),
            0,
        )

    def _move(self, delta: int) -> None:
        if self.files:
            self.selected_idx = max(0, min(len(self.files) - 1, self.selected_idx + delta))

    def handle(self, key: KeyEvent) -> None:
        """Move the selection or change directory; raise OSError if a listing fails."""
        code = key.code
        if code is KeyCode.UP or key.is_char("k"):
            self._move(-1)
        elif code is KeyCode.DOWN or key.is_char("j"):
            self._move(1)
        elif code is KeyCode.PAGE_UP:
            self._move(-PAGE_SIZE)
        elif code is KeyCode.PAGE_DOWN:
            self._move(PAGE_SIZE)
        elif code is KeyCode.HOME or key.is_char("g"):
            self.selected_idx = 0
        elif code is KeyCode.END or key.is_char("G"):
            self.selected_idx = max(0, len(self.files) - 1)
        elif code in (KeyCode.LEFT, KeyCode.BACKSPACE) or key.is_char("h"):
            if self.cwd.parent != self.cwd:
                self._change_dir(self.cwd.parent, select=self.cwd.name)
        elif code is KeyCode.RIGHT or key.is_char("l"):
            current = self.selected()
            if current is not None and current.is_dir:
                self._change_dir(current.path)

    def selected(self) -> Optional[FileInfo]:
        """The highlighted entry, or None for an empty listing."""
        if 0 <= self.selected_idx < len(self.files):
            return self.files[self.selected_idx]
        return None

    def render(self, canvas: Canvas, area: Rect) -> None:
        visible_rows = max(1, area.inner(1).height)
        offset = max(0, self.selected_idx - visible_rows + 1)
        labels = [info.label for info in self.files[offset:]]
        canvas.list(area, labels, selected=self.selected_idx - offset, title=str(self.cwd))