# matrix_rain/util/console.py
from __future__ import annotations

from rich.console import Console
from rich.markup import escape

# stdout carries the animation byte stream; every diagnostic goes to stderr.
err_console = Console(stderr=True, highlight=False)


def info(msg: str) -> None:
    err_console.print(f"[cyan]ℹ[/] {escape(msg)}")


def warn(msg: str) -> None:
    err_console.print(f"[yellow]![/] {escape(msg)}")


def error(msg: str) -> None:
    err_console.print(f"[bold red]✖[/] {escape(msg)}")
