"""A character grid that windows draw onto."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .geometry import Rect


class Color(Enum):
    DEFAULT = "default"
    BLACK = "black"
    WHITE = "white"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"


class Align(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class Style:
    """Colours and attributes of a cell."""

    fg: Color = Color.DEFAULT
    bg: Color = Color.DEFAULT
    bold: bool = False
    italic: bool = False
    reversed: bool = False


_DEFAULT_STYLE = Style()


class Canvas:
    """A fixed-size grid of characters, each carrying a style."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas size must be non-negative")
        self.width = width
        self.height = height
        self._chars = [[" "] * width for _ in range(height)]
        self._styles = [[_DEFAULT_STYLE] * width for _ in range(height)]

    def _cells(self, area: Rect):
        right = min(area.x + area.width, self.width)
        bottom = min(area.y + area.height, self.height)
        for y in range(area.y, bottom):
            for x in range(area.x, right):
                yield x, y

    def _put(self, x: int, y: int, char: str, style: Style) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._chars[y][x] = char
            self._styles[y][x] = style

    def _fill_style(self, area: Rect, style: Style) -> None:
        for x, y in self._cells(area):
            self._styles[y][x] = style

    def _write_line(self, x: int, y: int, width: int, line: str, style: Style, align: Align) -> None:
        line = line[:width]
        if align is Align.CENTER:
            x += (width - len(line)) // 2
        elif align is Align.RIGHT:
            x += width - len(line)
        for offset, char in enumerate(line):
            self._put(x + offset, y, char, style)

    def clear(self, area: Rect) -> None:
        """Blank every cell of ``area``."""
        for x, y in self._cells(area):
            self._chars[y][x] = " "
            self._styles[y][x] = _DEFAULT_STYLE

    def text(
        self,
        area: Rect,
        text: str,
        style: Optional[Style] = None,
        align: Align = Align.LEFT,
        wrap: bool = False,
    ) -> None:
        """Write ``text`` into ``area``, one line per row, clipped to the area."""
        style = style or _DEFAULT_STYLE
        if area.width == 0 or area.height == 0:
            return
        lines: list[str] = []
        for line in text.split("\n"):
            if wrap:
                lines.extend(textwrap.wrap(line, area.width) or [""])
            else:
                lines.append(line)
        for row, line in enumerate(lines[: area.height]):
            self._write_line(area.x, area.y + row, area.width, line, style, align)

    def box(
        self,
        area: Rect,
        title: str = "",
        style: Optional[Style] = None,
        title_style: Optional[Style] = None,
        title_align: Align = Align.LEFT,
    ) -> Rect:
        """Draw a bordered box with an optional title; return its inner area."""
        style = style or _DEFAULT_STYLE
        inner = area.inner(1)
        if area.width == 0 or area.height == 0:
            return inner
        self._fill_style(area, style)
        left, top = area.x, area.y
        right, bottom = area.x + area.width - 1, area.y + area.height - 1
        for x in range(left, right + 1):
            self._put(x, top, "─", style)
            self._put(x, bottom, "─", style)
        for y in range(top, bottom + 1):
            self._put(left, y, "│", style)
            self._put(right, y, "│", style)
        self._put(left, top, "┌", style)
        self._put(right, top, "┐", style)
        self._put(left, bottom, "└", style)
        self._put(right, bottom, "┘", style)
        if title and area.width > 2:
            self._write_line(left + 1, top, area.width - 2, title, title_style or style, title_align)
        return inner

    def list(
        self,
        area: Rect,
        items: Sequence[str],
        selected: Optional[int] = None,
        title: str = "",
        align: Align = Align.LEFT,
    ) -> None:
        """Draw a titled, bordered list; the selected row is highlighted."""
        inner = self.box(area, title=title, title_align=align)
        highlight = Style(fg=Color.YELLOW, reversed=True)
        for row, item in enumerate(items[: inner.height]):
            line_area = Rect(inner.x, inner.y + row, inner.width, 1)
            item_style = highlight if row == selected else _DEFAULT_STYLE
            self._fill_style(line_area, item_style)
            self.text(line_area, item, item_style, align)

    def lines(self) -> list[str]:
        """Return the grid's characters as one string per row."""
        return ["".join(row) for row in self._chars]