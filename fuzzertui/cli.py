"""Terminal front end: runs the application loop with curses."""

from __future__ import annotations

import argparse
import curses
from typing import Optional, Sequence, Union

from .app import App
from .canvas import Canvas
from .window import KeyCode, KeyEvent

POLL_MS = 251

_SPECIAL_KEYS = {
    curses.KEY_UP: KeyCode.UP,
    curses.KEY_DOWN: KeyCode.DOWN,
    curses.KEY_LEFT: KeyCode.LEFT,
    curses.KEY_RIGHT: KeyCode.RIGHT,
    curses.KEY_HOME: KeyCode.HOME,
    curses.KEY_END: KeyCode.END,
    curses.KEY_PPAGE: KeyCode.PAGE_UP,
    curses.KEY_NPAGE: KeyCode.PAGE_DOWN,
    curses.KEY_DC: KeyCode.DELETE,
    curses.KEY_BACKSPACE: KeyCode.BACKSPACE,
    curses.KEY_ENTER: KeyCode.ENTER,
}

_CONTROL_CHARS = {
    "\n": KeyCode.ENTER,
    "\r": KeyCode.ENTER,
    "\x1b": KeyCode.ESC,
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
    "\t": KeyCode.TAB,
}


def translate_key(code: Union[int, str]) -> KeyEvent:
    """Turn a curses key (an int code or a character) into a KeyEvent."""
    if isinstance(code, int):
        if code in _SPECIAL_KEYS:
            return KeyEvent(_SPECIAL_KEYS[code])
        if 0 <= code < 0x110000:
            code = chr(code)
        else:
            return KeyEvent(KeyCode.OTHER)
    if len(code) != 1:
        return KeyEvent(KeyCode.OTHER)
    if code in _CONTROL_CHARS:
        return KeyEvent(_CONTROL_CHARS[code])
    if code.isprintable():
        return KeyEvent.from_char(code)
    return KeyEvent(KeyCode.OTHER)


def _draw(screen, canvas: Canvas) -> None:
    screen.erase()
    for row, line in enumerate(canvas.lines()):
        try:
            screen.addstr(row, 0, line)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen.
            pass
    screen.refresh()


def _run(screen) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.keypad(True)
    screen.timeout(POLL_MS)
    app = App()
    while True:
        height, width = screen.getmaxyx()
        canvas = Canvas(width, height)
        app.render(canvas)
        _draw(screen, canvas)
        try:
            key = screen.get_wch()
        except curses.error:
            continue
        if key == curses.KEY_RESIZE:
            continue
        if not app.handle_input(translate_key(key)):
            break


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fuzzertui",
        description="Set up fuzzing projects and their configuration in the terminal.",
    )
    parser.parse_args(argv)
    curses.wrapper(_run)
    return 0