# matrix_rain/ui/terminal.py
from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from typing import IO, Iterator, Mapping, Optional, Sequence, Tuple

from ..config import FALLBACK_HEIGHT, FALLBACK_WIDTH, MIN_TERM_HEIGHT, MIN_TERM_WIDTH
from .theme import CSI, RESET

ALT_SCREEN_ON = f"{CSI}?1049h"
ALT_SCREEN_OFF = f"{CSI}?1049l"
CURSOR_HIDE = f"{CSI}?25l"
CURSOR_SHOW = f"{CSI}?25h"
WRAP_OFF = f"{CSI}?7l"
WRAP_ON = f"{CSI}?7h"
CLEAR = f"{CSI}2J"
HOME = f"{CSI}H"


def _size_of(stream: Optional[IO]) -> Optional[Tuple[int, int]]:
    if stream is None:
        return None
    try:
        size = os.get_terminal_size(stream.fileno())
    except (AttributeError, OSError, ValueError):
        return None
    if size.columns > 0 and size.lines > 0:
        return size.columns, size.lines
    return None


def _env_int(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = env.get(name, "")
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def query_dimensions(
    streams: Optional[Sequence[Optional[IO]]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Tuple[int, int]:
    """
    Return ``(width, height)`` of the controlling terminal.

    Tries stdout, then stdin; when neither is a terminal, COLUMNS / LINES are
    used if they hold positive integers, and anything still unknown is 80x24.
    """
    if streams is None:
        streams = (sys.stdout, sys.stdin)
    for stream in streams:
        size = _size_of(stream)
        if size:
            return size

    env = os.environ if env is None else env
    width = _env_int(env, "COLUMNS") or FALLBACK_WIDTH
    height = _env_int(env, "LINES") or FALLBACK_HEIGHT
    return width, height


def clamp_dimensions(width: int, height: int) -> Tuple[int, int]:
    return max(width, MIN_TERM_WIDTH), max(height, MIN_TERM_HEIGHT)


def clear_screen(sink: IO[str]) -> None:
    sink.write(CLEAR + HOME)


def enter_animation_mode(sink: IO[str]) -> None:
    sink.write(ALT_SCREEN_ON + CLEAR + CURSOR_HIDE + WRAP_OFF)
    sink.flush()


def exit_animation_mode(sink: IO[str]) -> None:
    sink.write(RESET + CURSOR_SHOW + WRAP_ON + ALT_SCREEN_OFF)
    sink.flush()


@contextmanager
def animation_mode(sink: IO[str]) -> Iterator[IO[str]]:
    """Bracket a run with the alternate screen; restoration always happens."""
    enter_animation_mode(sink)
    try:
        yield sink
    finally:
        exit_animation_mode(sink)
