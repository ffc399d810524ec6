# matrix_rain/ui/rainbow.py
"""
Rainbow gradient lookup.

Each channel is a sine wave offset by a third of a turn from the others, so
walking the table rotates smoothly through the hue circle the way
``cmatrix | lolcat`` does.
"""
from __future__ import annotations

import math
from typing import List, Sequence

from ..config import RAINBOW_CYCLE, RAINBOW_FREQ
from .theme import RGB, WHITE

TWO_PI = 2 * math.pi


def _channel(angle: float) -> int:
    value = round(math.sin(angle) * 127 + 128)
    # sin() can land a hair outside [-1, 1] after rounding at exact peaks
    return max(0, min(255, value))


def build_rainbow_table(freq: float = RAINBOW_FREQ, cycle: int = RAINBOW_CYCLE) -> List[RGB]:
    """Return ``cycle`` RGB triples sampled along the phase-shifted sine."""
    table: List[RGB] = []
    for i in range(cycle):
        angle = freq * i
        table.append(
            (
                _channel(angle),
                _channel(angle + TWO_PI / 3),
                _channel(angle + 2 * TWO_PI / 3),
            )
        )
    return table


def rainbow_color(table: Sequence[RGB], position: int) -> RGB:
    """Colour for ``position``, wrapping in both directions; white if the table is empty."""
    if not table:
        return WHITE
    return table[position % len(table)]
