#!/usr/bin/env python3
"""
matrix-rain — option-by-option smoke test (no pytest required)

• Exercises each CLI path individually via Typer's CliRunner.
• Animation runs are bounded with --duration so the script always finishes.
• Safe to run locally: `python scripts/smoke_cli_methods.py`

Exit code is 0 if all checks pass, non-zero otherwise.
"""
from __future__ import annotations

import sys
from typing import Callable, List, Tuple

from typer.testing import CliRunner

ENTER = "\x1b[?1049h"
LEAVE = "\x1b[?1049l"


def out_of(result) -> str:
    """Support both Click 7 (result.output) and Click 8+ (result.stdout)"""
    return getattr(result, "stdout", getattr(result, "output", ""))


def must_ok(
    label: str,
    result,
    expect_exit: int = 0,
    *,
    contains: str | None = None,
    absent: str | None = None,
) -> bool:
    """Unified assertion helper (case-insensitive contains checks)."""
    text = result.output
    ok = (result.exit_code == expect_exit)
    if contains is not None:
        ok = ok and contains.lower() in text.lower()
    if absent is not None:
        ok = ok and absent not in text

    status = "PASS" if ok else "FAIL"
    # escape sequences would repaint the terminal running this script
    printable = text.replace("\x1b", "\\e")
    print(f"[{status}] {label} (exit {result.exit_code})\n{printable[:400]}")
    return ok


def t_help(runner: CliRunner) -> bool:
    from matrix_rain.__main__ import app
    ok = must_ok("--help", runner.invoke(app, ["--help"]), contains="--speed", absent=ENTER)
    ok &= must_ok("-h", runner.invoke(app, ["-h"]), contains="--density", absent=ENTER)
    return ok


def t_bad_speed(runner: CliRunner) -> bool:
    from matrix_rain.__main__ import app
    return must_ok("speed out of range", runner.invoke(app, ["-s", "11"]), expect_exit=2, absent=ENTER)


def t_bad_density(runner: CliRunner) -> bool:
    from matrix_rain.__main__ import app
    return must_ok("density not an int", runner.invoke(app, ["-d", "lots"]), expect_exit=2, absent=ENTER)


def t_unknown_flag(runner: CliRunner) -> bool:
    from matrix_rain.__main__ import app
    return must_ok("unknown flag", runner.invoke(app, ["--colour"]), expect_exit=2, contains="--colour")


def t_short_run(runner: CliRunner) -> bool:
    from matrix_rain.__main__ import app
    res = runner.invoke(app, ["--duration", "0.2", "-s", "10", "--seed", "7"])
    ok = must_ok("short run", res, contains=ENTER)
    return ok and out_of(res).rstrip().endswith(LEAVE)


def t_version(runner: CliRunner) -> bool:
    from matrix_rain.__main__ import app
    return must_ok("version", runner.invoke(app, ["--version"]), contains="matrix-rain")


def main() -> int:
    try:
        from matrix_rain.__main__ import app  # noqa: F401
    except Exception as e:
        print(f"Cannot import matrix_rain app: {e}")
        return 1

    # NOTE: Do not pass mix_stderr for compatibility with older Click/Typer.
    runner = CliRunner()

    tests: List[Tuple[str, Callable[[CliRunner], bool]]] = [
        ("help", t_help),
        ("bad_speed", t_bad_speed),
        ("bad_density", t_bad_density),
        ("unknown_flag", t_unknown_flag),
        ("short_run", t_short_run),
        ("version", t_version),
    ]

    passed = 0
    for name, fn in tests:
        try:
            ok = fn(runner)
            passed += int(ok)
        except Exception as e:  # continue suite on individual error
            print(f"[EXC ] {name}: {e}")

    total = len(tests)
    print("-" * 60)
    print(f"Summary: {passed}/{total} passed")
    return 0 if passed == total else 1


if __name__ == "__main__":
    sys.exit(main())
