"""The application: a stack of windows, an optional popup and the frame around them."""

from __future__ import annotations

from typing import Any, Optional

from .canvas import Align, Canvas, Color, Style
from .geometry import Direction, Length, Min, Rect, centered_rect, split
from .popup import Popup
from .project_window import ProjectWindow
from .window import KeyEvent, PopWindow, PushWindow, Request, ShowPopup, Window

HEADER = "FlashFuzz v1.0"
UNKNOWN_WINDOW = "Unknown Window"


class App:
    """Routes keys to the top window and carries out the requests it makes."""

    def __init__(self) -> None:
        self.window_stack: list[Window] = [ProjectWindow()]
        self.properties: dict[str, Any] = {}
        self.popup: Optional[Popup] = None

    @property
    def current_window(self) -> Optional[Window]:
        return self.window_stack[-1] if self.window_stack else None

    def handle_input(self, key: KeyEvent) -> bool:
        """Process one key; return False when the application should quit."""
        if self.popup is not None:
            self.popup = None
            return True

        current = self.current_window
        requests: list[Request] = []
        if current is not None and current.capture_all_input():
            requests = current.handle_input(key)
        elif key.is_char("q"):
            return False
        elif key.is_char("b"):
            if self.window_stack:
                self.window_stack.pop()
            if not self.window_stack:
                return False
        elif current is not None:
            requests = current.handle_input(key)

        for request in requests:
            self.handle_request(request)
        return True

    def render(self, canvas: Canvas) -> None:
        area = Rect(0, 0, canvas.width, canvas.height)
        header_area, body_area, footer_area = split(
            area, [Length(3), Min(0), Length(3)], Direction.VERTICAL
        )
        canvas.text(header_area, HEADER, Style(fg=Color.YELLOW, bold=True), Align.CENTER)

        current = self.current_window
        name = current.name() if current is not None else UNKNOWN_WINDOW
        canvas.text(footer_area, name, Style(fg=Color.GREEN, italic=True), Align.CENTER)

        if current is not None:
            for request in current.render(canvas, body_area):
                self.handle_request(request)

        if self.popup is not None:
            self.popup.render(canvas, centered_rect(30, 20, area))

    def handle_request(self, request: Request) -> None:
        if isinstance(request, ShowPopup):
            self.popup = request.popup
        elif isinstance(request, PushWindow):
            self.window_stack.append(request.window)
        elif isinstance(request, PopWindow):
            if len(self.window_stack) > 1:
                self.window_stack.pop()
        else:
            raise TypeError(f"unknown request: {request!r}")