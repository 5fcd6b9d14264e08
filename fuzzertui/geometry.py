"""Rectangles and a small constraint-based layout splitter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union


@dataclass(frozen=True)
class Rect:
    """An axis-aligned area of terminal cells."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if min(self.x, self.y, self.width, self.height) < 0:
            raise ValueError(f"rectangle values must be non-negative: {self!r}")

    def inner(self, margin: int) -> Rect:
        """Shrink by ``margin`` cells on every side; empty if it does not fit."""
        if margin < 0:
            raise ValueError("margin must be non-negative")
        if self.width < 2 * margin or self.height < 2 * margin:
            return Rect(0, 0, 0, 0)
        return Rect(
            self.x + margin,
            self.y + margin,
            self.width - 2 * margin,
            self.height - 2 * margin,
        )


class Direction(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class Length:
    """A fixed number of cells."""

    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError("length must be non-negative")


@dataclass(frozen=True)
class Percentage:
    """A share of the available space, from 0 to 100."""

    percent: int

    def __post_init__(self) -> None:
        if not 0 <= self.percent <= 100:
            raise ValueError("percentage must be between 0 and 100")


@dataclass(frozen=True)
class Min:
    """At least ``minimum`` cells, growing to take any leftover space."""

    minimum: int

    def __post_init__(self) -> None:
        if self.minimum < 0:
            raise ValueError("minimum must be non-negative")


Constraint = Union[Length, Percentage, Min]


def _base_size(constraint: Constraint, total: int) -> int:
    if isinstance(constraint, Length):
        return constraint.length
    if isinstance(constraint, Percentage):
        return total * constraint.percent // 100
    if isinstance(constraint, Min):
        return constraint.minimum
    raise TypeError(f"unknown constraint: {constraint!r}")


def split(area: Rect, constraints: Sequence[Constraint], direction: Direction) -> list[Rect]:
    """Divide ``area`` along ``direction`` according to ``constraints``.

    Leftover space goes to the ``Min`` constraints, or to the last chunk when
    there are none; overflow is taken back from the end.
    """
    total = area.height if direction is Direction.VERTICAL else area.width
    sizes = [_base_size(c, total) for c in constraints]
    remaining = total - sum(sizes)

    if remaining > 0 and sizes:
        growable = [i for i, c in enumerate(constraints) if isinstance(c, Min)]
        if growable:
            share, extra = divmod(remaining, len(growable))
            for n, i in enumerate(growable):
                sizes[i] += share + (1 if n >= len(growable) - extra else 0)
        else:
            sizes[-1] += remaining
    elif remaining < 0:
        excess = -remaining
        for i in reversed(range(len(sizes))):
            cut = min(sizes[i], excess)
            sizes[i] -= cut
            excess -= cut
            if not excess:
                break

    chunks = []
    offset = 0
    for size in sizes:
        if direction is Direction.VERTICAL:
            chunks.append(Rect(area.x, area.y + offset, area.width, size))
        else:
            chunks.append(Rect(area.x + offset, area.y, size, area.height))
        offset += size
    return chunks


def centered_rect(percent_x: int, percent_y: int, parent_area: Rect) -> Rect:
    """Return a rectangle of the given percentages centred in ``parent_area``."""
    for value in (percent_x, percent_y):
        if not 0 <= value <= 100:
            raise ValueError("percentages must be between 0 and 100")
    rows = split(
        parent_area,
        [
            Percentage((100 - percent_y) // 2),
            Percentage(percent_y),
            Percentage((100 - percent_y) // 2),
        ],
        Direction.VERTICAL,
    )
    columns = split(
        rows[1],
        [
            Percentage((100 - percent_x) // 2),
            Percentage(percent_x),
            Percentage((100 - percent_x) // 2),
        ],
        Direction.HORIZONTAL,
    )
    return columns[1]