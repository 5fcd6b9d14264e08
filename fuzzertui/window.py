"""Keys, requests and the base class every screen derives from."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .canvas import Canvas
    from .geometry import Rect
    from .popup import Popup


class KeyCode(Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    ENTER = "enter"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    TAB = "tab"
    DELETE = "delete"
    ESC = "esc"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """A key press; ``char`` is set for character keys."""

    code: KeyCode
    char: Optional[str] = None

    @classmethod
    def from_char(cls, char: str) -> KeyEvent:
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return cls(KeyCode.CHAR, char)

    def is_char(self, char: str) -> bool:
        return self.code is KeyCode.CHAR and self.char == char


@dataclass
class ShowPopup:
    """Ask the application to show a popup."""

    popup: Popup


@dataclass
class PushWindow:
    """Ask the application to open a window on top of the current one."""

    window: Window


@dataclass
class PopWindow:
    """Ask the application to close the current window."""


Request = Union[ShowPopup, PushWindow, PopWindow]


class Window(ABC):
    """A screen that draws itself and reacts to keys with requests."""

    @abstractmethod
    def name(self) -> str:
        """The name shown in the footer."""

    @abstractmethod
    def render(self, canvas: Canvas, area: Rect) -> list[Request]:
        """Draw into ``area``; return requests for the application."""

    @abstractmethod
    def handle_input(self, key: KeyEvent) -> list[Request]:
        """React to ``key``; return requests for the application."""

    def capture_all_input(self) -> bool:
        """Whether this window receives even the application's own keys."""
        return False