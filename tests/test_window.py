import pytest

from fuzzertui.canvas import Canvas
from fuzzertui.geometry import Rect
from fuzzertui.window import (
    KeyCode,
    KeyEvent,
    PopWindow,
    PushWindow,
    ShowPopup,
    Window,
)


class _Echo(Window):
    def __init__(self):
        self.keys = []

    def name(self):
        return "Echo"

    def render(self, canvas, area):
        canvas.text(area, "echo")
        return []

    def handle_input(self, key):
        self.keys.append(key)
        return [PopWindow()] if key.code is KeyCode.ESC else []


def test_from_char_builds_char_key():
    key = KeyEvent.from_char("q")
    assert key.code is KeyCode.CHAR
    assert key.char == "q"
    assert key == KeyEvent(KeyCode.CHAR, "q")


def test_from_char_rejects_multiple_characters():
    with pytest.raises(ValueError):
        KeyEvent.from_char("qq")


def test_is_char_matches_only_that_character():
    key = KeyEvent.from_char("b")
    assert key.is_char("b")
    assert not key.is_char("q")
    assert not KeyEvent(KeyCode.ENTER).is_char("b")


def test_window_is_abstract():
    with pytest.raises(TypeError):
        Window()


def test_capture_all_input_defaults_to_false():
    window = _Echo()
    assert Window.capture_all_input(window) is False
    assert window.capture_all_input() is False


def test_subclass_requests_and_rendering():
    window = _Echo()
    assert window.handle_input(KeyEvent(KeyCode.ESC)) == [PopWindow()]
    assert window.handle_input(KeyEvent(KeyCode.UP)) == []
    canvas = Canvas(6, 1)
    assert window.render(canvas, Rect(0, 0, 6, 1)) == []
    assert canvas.lines()[0].rstrip() == "echo"


def test_requests_carry_their_payload():
    window = _Echo()
    assert PushWindow(window).window is window
    marker = object()
    assert ShowPopup(marker).popup is marker