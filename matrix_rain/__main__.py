from __future__ import annotations

import sys
from importlib import metadata
from typing import Optional

import typer

from .config import (
    DEFAULT_DENSITY,
    DEFAULT_SPEED,
    DENSITY_MAX,
    DENSITY_MIN,
    ENV_DURATION,
    ENV_SEED,
    SPEED_MAX,
    SPEED_MIN,
    ConfigError,
    RainConfig,
)
from .ui.renderer import calculate_column_count, calculate_frame_delay, play
from .ui.terminal import clamp_dimensions, query_dimensions
from .util.console import error, info, warn

app = typer.Typer(
    name="matrix-rain",
    help="Matrix Digital Rain - Rainbow Edition.",
    add_completion=False,
    no_args_is_help=False,
)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

EPILOG = (
    "Examples: 'matrix-rain' (defaults), 'matrix-rain -s 8 -d 100' (fast, full density), "
    "'matrix-rain -s 2 -d 50' (slow, sparse). Press Ctrl+C to stop the animation."
)


def _version_string() -> str:
    try:
        return metadata.version("matrix-rain")
    except metadata.PackageNotFoundError:  # pragma: no cover
        return "0.0.0"


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"matrix-rain {_version_string()}")
        raise typer.Exit(code=0)


@app.command(epilog=EPILOG, context_settings=CONTEXT_SETTINGS)
def rain(
    speed: int = typer.Option(
        DEFAULT_SPEED,
        "--speed",
        "-s",
        min=SPEED_MIN,
        max=SPEED_MAX,
        help="Animation speed (1 = slow, 10 = fast).",
    ),
    density: int = typer.Option(
        DEFAULT_DENSITY,
        "--density",
        "-d",
        min=DENSITY_MIN,
        max=DENSITY_MAX,
        help="Percentage of terminal width filled with columns.",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        envvar=ENV_SEED,
        help="Seed the random source for a reproducible run.",
        show_default=False,
    ),
    duration: Optional[float] = typer.Option(
        None,
        "--duration",
        envvar=ENV_DURATION,
        help="Stop after this many seconds instead of waiting for Ctrl+C.",
        show_default=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print resolved settings to stderr."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show matrix-rain version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
) -> None:
    """
    Recreates the falling rain animation from the Matrix movies, with a
    smoothly cycling rainbow gradient.
    """
    try:
        cfg = RainConfig(speed=speed, density=density, seed=seed, duration=duration)
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=2)

    sink = sys.stdout
    if not sink.isatty():
        warn("stdout is not a terminal; escape sequences will be written as-is.")

    if verbose:
        width, height = clamp_dimensions(*query_dimensions())
        info(
            f"speed={cfg.speed} density={cfg.density} "
            f"delay={calculate_frame_delay(cfg.speed)}ms "
            f"size={width}x{height} columns={calculate_column_count(width, cfg.density)} "
            f"seed={cfg.seed if cfg.seed is not None else 'random'}"
        )

    play(cfg, sink)


def main() -> None:
    app()


if __name__ == "__main__":
    # When run as a module: python -m matrix_rain
    sys.exit(main())
