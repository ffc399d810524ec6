from __future__ import annotations

import io
import threading

import pytest
from typer.testing import CliRunner


# -----------------------------------------------------------------------------
# Compatibility shim for Click 7 vs 8+
# Ensures Result.stdout exists even on Click 7 where only .output is present.
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _click_stdout_shim(monkeypatch):
    try:
        from click.testing import Result  # type: ignore

        if not hasattr(Result, "stdout"):

            def _get_stdout(self):  # noqa: ANN001
                return self.output

            try:
                Result.stdout = property(_get_stdout)  # type: ignore[attr-defined]
            except Exception:
                pass
    except Exception:
        pass
    yield


class LowRandom:
    """
    Deterministic stand-in for random.Random: every draw returns the lowest
    value of its range, and choice() returns the first element.
    """

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def randrange(self, start, stop=None):  # noqa: ANN001
        self.calls.append(("randrange", start, stop))
        return 0 if stop is None else start

    def choice(self, seq):  # noqa: ANN001
        self.calls.append(("choice", len(seq)))
        return seq[0]


class RecordingEvent(threading.Event):
    """Event whose wait() never blocks; it records the requested timeouts."""

    def __init__(self) -> None:
        super().__init__()
        self.waits: list[float] = []

    def wait(self, timeout=None):  # noqa: ANN001
        self.waits.append(timeout)
        return self.is_set()


class FakeClock:
    def __init__(self, step: float = 0.0) -> None:
        self.now = 0.0
        self.step = step

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        return value


@pytest.fixture()
def low_rng() -> LowRandom:
    return LowRandom()


@pytest.fixture()
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def runner() -> CliRunner:
    # Avoid mix_stderr for Click < 8 compatibility
    return CliRunner()
