from __future__ import annotations

import pytest

from matrix_rain.__main__ import app

ENTER = "\x1b[?1049h"
LEAVE = "\x1b[?1049l"


def test_help_exits_zero_without_animation(runner):
    for flag in ("--help", "-h"):
        res = runner.invoke(app, [flag])
        assert res.exit_code == 0
        assert "--speed" in res.stdout
        assert "--density" in res.stdout
        assert ENTER not in res.stdout


@pytest.mark.parametrize(
    "args",
    [
        ["--speed", "11"],
        ["-s", "0"],
        ["--speed", "fast"],
        ["--density", "0"],
        ["-d", "101"],
        ["-d", "1.5"],
    ],
)
def test_out_of_range_values_rejected(runner, args):
    res = runner.invoke(app, args)
    assert res.exit_code != 0
    assert ENTER not in res.output


def test_unknown_flag_is_named(runner):
    res = runner.invoke(app, ["--bogus"])
    assert res.exit_code == 2
    assert "--bogus" in res.output
    assert ENTER not in res.output


def test_non_positive_duration_rejected(runner):
    res = runner.invoke(app, ["--duration", "0"])
    assert res.exit_code == 2
    assert "duration" in res.output
    assert ENTER not in res.output


def test_short_run_restores_terminal(runner):
    res = runner.invoke(app, ["--duration", "0.05", "-s", "10", "-d", "50", "--seed", "3"])
    assert res.exit_code == 0
    assert ENTER in res.stdout
    assert res.stdout.rstrip().endswith(LEAVE)


def test_seed_from_environment(runner):
    res = runner.invoke(
        app,
        ["--verbose"],
        env={"MATRIX_RAIN_SEED": "11", "MATRIX_RAIN_DURATION": "0.05"},
    )
    assert res.exit_code == 0
    assert "seed=11" in res.output


def test_version(runner):
    res = runner.invoke(app, ["--version"])
    assert res.exit_code == 0
    assert "matrix-rain" in res.stdout
