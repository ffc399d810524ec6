from __future__ import annotations

import math

from matrix_rain.config import RAINBOW_CYCLE, RAINBOW_FREQ
from matrix_rain.ui.rainbow import build_rainbow_table, rainbow_color


def test_table_has_cycle_entries_in_byte_range():
    table = build_rainbow_table(RAINBOW_FREQ, RAINBOW_CYCLE)
    assert len(table) == RAINBOW_CYCLE
    for rgb in table:
        assert len(rgb) == 3
        assert all(0 <= ch <= 255 for ch in rgb)


def test_first_entry_matches_sine_formula():
    r, g, b = build_rainbow_table()[0]
    assert r == 128
    assert g == round(math.sin(2 * math.pi / 3) * 127 + 128)
    assert b == round(math.sin(4 * math.pi / 3) * 127 + 128)


def test_peak_angle_never_overflows():
    # freq * 1 == pi/2 puts the red channel exactly on its peak
    table = build_rainbow_table(math.pi / 2, 4)
    assert table[1][0] == 255
    assert table[3][0] == 1


def test_lookup_is_periodic_and_wraps_negative():
    table = build_rainbow_table()
    c = len(table)
    for i in range(c):
        assert rainbow_color(table, i) == rainbow_color(table, i + c)
    assert rainbow_color(table, -1) == table[c - 1]


def test_empty_table_falls_back_to_white():
    assert rainbow_color([], 7) == (255, 255, 255)


def test_deterministic():
    assert build_rainbow_table() == build_rainbow_table()
