# matrix_rain/ui/column.py
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from .rainbow import rainbow_color
from .theme import BOLD, DIM, MATRIX_CHARS, RGB

GAP_MIN, GAP_SPAN = 5, 10
MIN_LENGTH = 3


@dataclass(frozen=True)
class DrawGlyph:
    row: int
    col: int
    glyph: str
    color: RGB
    intensity: int


@dataclass(frozen=True)
class EraseCell:
    row: int
    col: int


Instruction = Union[DrawGlyph, EraseCell]


def sample_gap(rng: random.Random) -> int:
    return rng.randrange(GAP_MIN, GAP_MIN + GAP_SPAN)


def sample_length(height: int, rng: random.Random) -> int:
    return rng.randrange(MIN_LENGTH, height // 2 + MIN_LENGTH)


@dataclass
class Column:
    """
    One falling stream. A column is either waiting out its gap or falling;
    ``active`` tells which. ``head`` is the 1-based row of the leading glyph
    and keeps counting past the bottom edge until the whole trail is gone.
    """

    active: bool
    head: int
    gap_remaining: int
    length: int
    color_offset: int
    last_glyph: Optional[str] = None

    @classmethod
    def new(cls, height: int, cycle: int, rng: random.Random) -> "Column":
        return cls(
            active=False,
            head=0,
            gap_remaining=sample_gap(rng),
            length=sample_length(height, rng),
            color_offset=rng.randrange(max(1, cycle)),
        )

    def advance(
        self,
        index: int,
        height: int,
        table: Sequence[RGB],
        rng: random.Random,
        glyphs: Sequence[str] = MATRIX_CHARS,
    ) -> List[Instruction]:
        """
        Step the column by one frame and return what has to be painted.

        ``index`` is the 0-based screen column; emitted coordinates are 1-based.
        The frame that ends the gap already paints row 1.
        """
        if not self.active:
            if self.gap_remaining > 0:
                self.gap_remaining -= 1
                return []
            self.active = True
            self.head = 1

        out: List[Instruction] = []
        x = index + 1
        head = self.head
        prev_glyph = self.last_glyph

        if 1 <= head <= height:
            glyph = rng.choice(glyphs)
            self.last_glyph = glyph
            out.append(
                DrawGlyph(head, x, glyph, rainbow_color(table, head + self.color_offset), BOLD)
            )

        trail = head - 1
        if 1 <= trail <= height and prev_glyph is not None:
            out.append(
                DrawGlyph(trail, x, prev_glyph, rainbow_color(table, trail + self.color_offset), DIM)
            )

        tail = head - self.length
        if 1 <= tail <= height:
            out.append(EraseCell(tail, x))

        self.head = head + 1

        if head > height + self.length:
            self._restart(height, len(table), rng)
        return out

    def _restart(self, height: int, cycle: int, rng: random.Random) -> None:
        self.active = False
        self.head = 0
        self.gap_remaining = sample_gap(rng)
        self.length = sample_length(height, rng)
        if cycle:
            # drift the hue for the next drop instead of starting over
            self.color_offset = (self.color_offset + rng.randrange(cycle)) % cycle
        self.last_glyph = None


def init_columns(count: int, height: int, cycle: int, rng: random.Random) -> List[Column]:
    return [Column.new(height, cycle, rng) for _ in range(count)]
