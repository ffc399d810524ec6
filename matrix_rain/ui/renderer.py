# matrix_rain/ui/renderer.py
from __future__ import annotations

import random
import signal
import sys
import threading
import time
from contextlib import contextmanager
from typing import IO, Callable, Iterable, Iterator, List, Optional, Tuple

from ..config import RAINBOW_CYCLE, RAINBOW_FREQ, RainConfig
from .column import Column, DrawGlyph, EraseCell, Instruction, init_columns
from .rainbow import build_rainbow_table
from .terminal import animation_mode, clamp_dimensions, clear_screen, query_dimensions
from .theme import RESET, move_to, truecolor

MIN_FRAME_DELAY_MS = 20


def calculate_frame_delay(speed: int) -> int:
    """Milliseconds between frames; faster speeds shorten it down to a 20 ms floor."""
    return max(MIN_FRAME_DELAY_MS, 160 - speed * 12)


def calculate_column_count(width: int, density: int) -> int:
    return max(1, min(width, width * density // 100))


def encode(instructions: Iterable[Instruction]) -> str:
    """Turn draw/erase instructions into positioned escape sequences."""
    parts: List[str] = []
    for ins in instructions:
        if isinstance(ins, DrawGlyph):
            parts.append(f"{move_to(ins.row, ins.col)}{truecolor(ins.color, ins.intensity)}{ins.glyph}")
        elif isinstance(ins, EraseCell):
            parts.append(f"{RESET}{move_to(ins.row, ins.col)} ")
    return "".join(parts)


class RainEvents:
    """
    Pending resize / stop notifications, set asynchronously and polled by the
    frame loop. ``stop`` doubles as the interruptible inter-frame sleep.
    """

    def __init__(self) -> None:
        self.resize = threading.Event()
        self.stop = threading.Event()

    def take_resize(self) -> bool:
        """True if one or more resizes arrived since the last call."""
        if self.resize.is_set():
            self.resize.clear()
            return True
        return False

    def _on_resize(self, signum, frame) -> None:  # noqa: ANN001
        self.resize.set()

    def _on_stop(self, signum, frame) -> None:  # noqa: ANN001
        self.stop.set()

    @contextmanager
    def installed(self) -> Iterator["RainEvents"]:
        """Route SIGWINCH / SIGINT / SIGTERM here for the duration of the block."""
        if threading.current_thread() is not threading.main_thread():
            # signal.signal() only works from the main thread
            yield self
            return

        wanted = [(signal.SIGINT, self._on_stop), (signal.SIGTERM, self._on_stop)]
        sigwinch = getattr(signal, "SIGWINCH", None)
        if sigwinch is not None:
            wanted.append((sigwinch, self._on_resize))

        previous = []
        try:
            for signum, handler in wanted:
                previous.append((signum, signal.signal(signum, handler)))
            yield self
        finally:
            for signum, old in reversed(previous):
                signal.signal(signum, old)


class RainRenderer:
    """Owns the column collection and drives the fixed-rate frame loop."""

    def __init__(
        self,
        config: RainConfig,
        sink: IO[str],
        rng: Optional[random.Random] = None,
        events: Optional[RainEvents] = None,
        geometry: Callable[[], Tuple[int, int]] = query_dimensions,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config
        self.sink = sink
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.events = events if events is not None else RainEvents()
        self.geometry = geometry
        self.clock = clock

        self.table = build_rainbow_table(RAINBOW_FREQ, RAINBOW_CYCLE)
        self.delay = calculate_frame_delay(config.speed) / 1000.0
        self.width = 0
        self.height = 0
        self.columns: List[Column] = []
        self.frames = 0
        self.reset()

    def reset(self) -> None:
        """Re-read the terminal size and start every column from scratch."""
        self.width, self.height = clamp_dimensions(*self.geometry())
        count = calculate_column_count(self.width, self.config.density)
        self.columns = init_columns(count, self.height, len(self.table), self.rng)

    def render_frame(self) -> str:
        out: List[str] = []
        for idx, col in enumerate(self.columns):
            out.append(encode(col.advance(idx, self.height, self.table, self.rng)))
        out.append(RESET)
        return "".join(out)

    def tick(self) -> bool:
        """Run one frame; False once a stop was requested (nothing is drawn then)."""
        if self.events.stop.is_set():
            return False

        if self.events.take_resize():
            self.reset()
            clear_screen(self.sink)
            self.sink.flush()

        started = self.clock()
        self.sink.write(self.render_frame())
        self.sink.flush()
        self.frames += 1

        remaining = self.delay - (self.clock() - started)
        if remaining > 0:
            self.events.stop.wait(remaining)
        return True

    def run(self) -> int:
        """Tick until stopped (or until ``config.duration`` elapses); returns frames drawn."""
        deadline = None
        if self.config.duration is not None:
            deadline = self.clock() + self.config.duration
        while True:
            if deadline is not None and self.clock() >= deadline:
                break
            if not self.tick():
                break
        return self.frames


def play(
    config: RainConfig,
    sink: Optional[IO[str]] = None,
    rng: Optional[random.Random] = None,
) -> RainRenderer:
    """Full run: alternate screen, signal routing, frame loop, restoration."""
    sink = sink if sink is not None else sys.stdout
    renderer = RainRenderer(config, sink, rng=rng)
    with animation_mode(sink), renderer.events.installed():
        try:
            renderer.run()
        except KeyboardInterrupt:
            pass
    return renderer
