from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.theme import Theme

from inivars.cli.ui.formatters import (
    render_error,
    render_sources,
    render_summary,
    render_variables_table,
)
from inivars.logutil import configure_logging

THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "error": "bold red",
        "muted": "dim",
        "path": "cyan",
        "name": "bold",
    }
)


@dataclass(frozen=True)
class UI:
    console: Console
    err_console: Console
    verbose: bool = False


def get_ui(*, verbose: bool = False) -> UI:
    console = Console(theme=THEME)
    err_console = Console(theme=THEME, stderr=True)
    if verbose:
        configure_logging(level="DEBUG", console=err_console)
    return UI(console=console, err_console=err_console, verbose=verbose)


__all__ = [
    "THEME",
    "UI",
    "get_ui",
    "render_error",
    "render_sources",
    "render_summary",
    "render_variables_table",
]
