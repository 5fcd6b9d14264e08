"""Small message boxes shown on top of the current window."""

from __future__ import annotations

from enum import Enum

from .canvas import Align, Canvas, Color, Style
from .geometry import Rect
from .window import KeyEvent, Request, Window


class PopupType(Enum):
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"

    def title(self) -> str:
        return {
            PopupType.INFO: "Info",
            PopupType.WARNING: "Warning",
            PopupType.SUCCESS: "Success",
        }[self]

    def style(self) -> Style:
        colour = {
            PopupType.INFO: Color.BLUE,
            PopupType.WARNING: Color.YELLOW,
            PopupType.SUCCESS: Color.GREEN,
        }[self]
        return Style(fg=colour, bold=True)


class Popup(Window):
    """A titled message; any key dismisses it."""

    def __init__(self, popup_type: PopupType, message: str) -> None:
        self.popup_type = popup_type
        self.message = str(message)

    def __repr__(self) -> str:
        return f"Popup({self.popup_type!r}, {self.message!r})"

    def name(self) -> str:
        return self.popup_type.title()

    def render(self, canvas: Canvas, area: Rect) -> list[Request]:
        canvas.clear(area)
        body = Style(fg=Color.WHITE, bg=Color.BLACK)
        inner = canvas.box(
            area,
            title=self.popup_type.title(),
            style=body,
            title_style=self.popup_type.style(),
        )
        canvas.text(inner, self.message, body, Align.CENTER, wrap=True)
        return []

    def handle_input(self, key: KeyEvent) -> list[Request]:
        return []