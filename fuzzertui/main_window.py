"""The main menu shown once a project is open."""

from __future__ import annotations

from .canvas import Align, Canvas, Color, Style
from .config_window import ConfigWindow
from .geometry import Direction, Min, Percentage, Rect, split
from .popup import Popup, PopupType
from .window import KeyCode, KeyEvent, PushWindow, Request, ShowPopup, Window

BANNER = "\n\n" + "\n".join(
    [
        "░▒▓████████▓▒░▒▓█▓▒░       ░▒▓██████▓▒░ ░▒▓███████▓▒░▒▓█▓▒░░▒▓█▓▒░▒▓████████▓▒░▒▓█▓▒░░▒▓█▓▒░▒▓████████▓▒░▒▓████████▓▒░ ",
        "░▒▓█▓▒░      ░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░      ░▒▓█▓▒░      ░▒▓█▓▒░ ",
        "░▒▓█▓▒░      ░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░    ░▒▓██▓▒░     ░▒▓██▓▒░  ",
        "░▒▓██████▓▒░ ░▒▓█▓▒░      ░▒▓████████▓▒░░▒▓██████▓▒░░▒▓████████▓▒░▒▓██████▓▒░ ░▒▓█▓▒░░▒▓█▓▒░  ░▒▓██▓▒░     ░▒▓██▓▒░    ",
        "░▒▓█▓▒░      ░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░      ░▒▓█▓▒░▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░░▒▓██▓▒░     ░▒▓██▓▒░      ",
        "░▒▓█▓▒░      ░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░      ░▒▓█▓▒░▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░      ░▒▓█▓▒░        ",
        "░▒▓█▓▒░      ░▒▓████████▓▒░▒▓█▓▒░░▒▓█▓▒░▒▓███████▓▒░░▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░       ░▒▓██████▓▒░░▒▓████████▓▒░▒▓████████▓▒░ ",
    ]
) + "\n"

BANNER_STYLE = Style(fg=Color.MAGENTA, bold=True)


class MainWindow(Window):
    """The top-level menu of actions."""

    def __init__(self) -> None:
        self.selected = 0
        self.options = ["Static analysis", "Fuzz !", "Config", "Quit"]

    def name(self) -> str:
        return "Main Menu"

    def render(self, canvas: Canvas, area: Rect) -> list[Request]:
        title_area, menu_area = split(area, [Percentage(40), Min(5)], Direction.VERTICAL)
        canvas.text(title_area, BANNER, BANNER_STYLE, Align.CENTER)
        canvas.list(menu_area, self.options, selected=self.selected, title="Options", align=Align.CENTER)
        return []

    def handle_input(self, key: KeyEvent) -> list[Request]:
        if key.code is KeyCode.UP:
            if self.selected > 0:
                self.selected -= 1
        elif key.code is KeyCode.DOWN:
            if self.selected < len(self.options) - 1:
                self.selected += 1
        elif key.code is KeyCode.ENTER:
            choice = self.options[self.selected]
            if choice == "Config":
                return [PushWindow(ConfigWindow())]
            return [ShowPopup(Popup(PopupType.INFO, "You selected: " + choice))]
        return []