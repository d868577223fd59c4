from __future__ import annotations

from typing import Mapping, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from inivars.core.config import LoadedConfig
from inivars.core.models import ParseResult
from inivars.exporters.common import collect_variables


def _short(s: str, max_len: int = 140) -> str:
    s = s or ""
    if len(s) <= max_len:
        return s
    return s[:max_len] + "…"


# ----------------------------
# Variables
# ----------------------------

def render_variables_table(
    console: Console,
    result: ParseResult,
    namespace: Optional[Mapping[str, str]] = None,
    *,
    title: Optional[str] = None,
) -> None:
    if not result.entries:
        console.print("[muted]No variables.[/muted]")
        return

    final = collect_variables(result, namespace)

    table = Table(title=title or f"Variables ({len(result.entries)})", show_lines=False)
    table.add_column("Line", justify="right", no_wrap=True)
    table.add_column("Section", style="muted", no_wrap=True)
    table.add_column("Name", style="name", no_wrap=True)
    table.add_column("Value")

    for e in result.entries:
        # a later line with the same qualified name wins in the store
        overridden = final.get(e.name) != e.value
        value = Text(_short(e.value), style="muted" if overridden else "")
        if overridden:
            value.append(" (overridden)", style="warn")
        table.add_row(str(e.line), e.section or "-", e.name, value)

    console.print(table)


# ----------------------------
# Summary
# ----------------------------

def render_summary(
    console: Console,
    result: ParseResult,
    *,
    header: str = "Summary",
) -> None:
    table = Table(title=header, show_header=True, show_lines=False)
    for c in ("prefix", "sections", "variables", "section_names"):
        table.add_column(c, style="bold", no_wrap=True)
    table.add_row(
        result.prefix,
        str(result.section_count),
        str(len(result.variable_names)),
        " ".join(result.section_names) or "-",
    )

    console.print()
    console.print(table)


def render_sources(console: Console, loaded: LoadedConfig) -> None:
    console.print("[bold]Config sources:[/bold]")
    console.print(f"  global:  {loaded.global_path or '-'}")
    console.print(f"  project: {loaded.repo_path or '-'}")


# ----------------------------
# Errors
# ----------------------------

def render_error(console: Console, exc: BaseException) -> None:
    # Text, not markup: raw INI lines may contain [brackets].
    console.print(Text(str(exc), style="error"), soft_wrap=True)
