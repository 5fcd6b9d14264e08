"""A one-line text entry box with a cursor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .canvas import Canvas, Color, Style
from .geometry import Direction, Percentage, Rect, split
from .window import KeyCode, KeyEvent


@dataclass(frozen=True)
class Submit:
    """The user confirmed the entered text."""

    text: str


@dataclass(frozen=True)
class Cancel:
    """The user abandoned the dialogue."""


DialogueResult = Optional[Union[Submit, Cancel]]


class InputDialogue:
    """Collects a line of text; ``handle_input`` returns None while editing."""

    def __init__(self, title: str, prompt: str) -> None:
        self.title = title
        self.prompt = prompt
        self.input = ""
        self.current_pos = 0

    def handle_input(self, key: KeyEvent) -> DialogueResult:
        code = key.code
        if code is KeyCode.CHAR and key.char is not None:
            self.input = self.input[: self.current_pos] + key.char + self.input[self.current_pos :]
            self.current_pos += 1
        elif code is KeyCode.BACKSPACE:
            if self.current_pos > 0:
                self.input = self.input[: self.current_pos - 1] + self.input[self.current_pos :]
                self.current_pos -= 1
        elif code is KeyCode.LEFT:
            if self.current_pos > 0:
                self.current_pos -= 1
        elif code is KeyCode.RIGHT:
            if self.current_pos < len(self.input):
                self.current_pos += 1
        elif code is KeyCode.ENTER:
            return Submit(self.input)
        elif code is KeyCode.ESC:
            return Cancel()
        return None

    def render(self, canvas: Canvas, area: Rect) -> None:
        canvas.box(area, title=self.title, style=Style(fg=Color.WHITE, bg=Color.BLACK))
        prompt_area, input_area = split(
            area.inner(1), [Percentage(20), Percentage(80)], Direction.VERTICAL
        )
        cursor = min(self.current_pos, len(self.input))
        with_cursor = self.input[:cursor] + "|" + self.input[cursor:]
        canvas.text(prompt_area, self.prompt, Style(fg=Color.YELLOW))
        inner = canvas.box(input_area, style=Style(fg=Color.WHITE))
        canvas.text(inner, with_cursor, Style(fg=Color.WHITE))