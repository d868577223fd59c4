from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from inivars.cli.ui import get_ui, render_error
from inivars.core.config import load_config
from inivars.core.engine import read_ini
from inivars.core.errors import ExitCode, IniError
from inivars.core.models import ParseOptions
from inivars.core.namespace import Namespace


def check_cmd(
    file: Path = typer.Argument(..., help="INI file to parse."),
    names: List[str] = typer.Argument(..., help="Qualified names that must be set, e.g. INI__db__host."),
    prefix: Optional[str] = typer.Option(None, "--prefix", "-p", help="Variable name prefix (default INI)."),
    section: Optional[str] = typer.Option(None, "--section", "-s", help="Only read keys from this section."),
    booleans: Optional[str] = typer.Option(None, "--booleans", "-b", help="'0' disables boolean normalization."),
    encoding: Optional[str] = typer.Option(None, "--encoding", help="File encoding (default utf-8)."),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Fail unless every given variable is set (and non-empty) in FILE."""
    ui = get_ui(verbose=verbose)

    try:
        loaded = load_config(
            Path.cwd(),
            cli_overrides={"parse": {"prefix": prefix, "booleans": booleans, "encoding": encoding}},
        )
        opts = ParseOptions(
            boolean_normalization=loaded.parse.booleans,
            prefix=loaded.parse.prefix,
            section=section,
        )
        namespace = Namespace()
        read_ini(file, opts, namespace=namespace, encoding=loaded.parse.encoding)
        namespace.require(names)
    except IniError as e:
        render_error(ui.err_console, e)
        raise typer.Exit(code=int(e.exit_code))

    ui.console.print(f"[ok]OK[/ok] {len(names)} variable(s) present in [path]{escape(str(file))}[/path]")
    raise typer.Exit(code=int(ExitCode.OK))
