from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

import typer

from inivars.cli.ui import get_ui, render_error, render_sources, render_summary, render_variables_table
from inivars.core.config import load_config
from inivars.core.engine import read_ini
from inivars.core.errors import ExitCode, IniError
from inivars.core.models import OutputFormat, ParseOptions
from inivars.core.namespace import Namespace
from inivars.exporters import export


def parse_cmd(
    file: Optional[Path] = typer.Argument(None, help="INI file to parse (optional with --clean)."),
    section: Optional[str] = typer.Argument(None, help="Only read keys from this section."),
    clean: bool = typer.Option(
        False, "--clean", "-c", help="Unset variables from a previous parse under the same prefix first."
    ),
    booleans: Optional[str] = typer.Option(
        None, "--booleans", "-b", help="'0' keeps yes/no/true/false/on/off as written; anything else maps them to 1/0."
    ),
    prefix: Optional[str] = typer.Option(None, "--prefix", "-p", help="Variable name prefix (default INI)."),
    fmt: Optional[OutputFormat] = typer.Option(
        None, "--format", "-f", case_sensitive=False, help="Output format (table/shell/json/yaml)."
    ),
    require: List[str] = typer.Option(
        [], "--require", "-r", help="Qualified name that must be set after parsing (repeatable)."
    ),
    encoding: Optional[str] = typer.Option(None, "--encoding", help="File encoding (default utf-8)."),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Parse an INI file into prefixed variables."""
    ui = get_ui(verbose=verbose)

    cli_overrides = {
        "parse": {"prefix": prefix, "booleans": booleans, "encoding": encoding},
        "output": {"format": fmt},
    }

    # The process environment stands in for the caller's shell variables,
    # so --clean can find what an earlier `eval` defined.
    namespace = Namespace(os.environ)

    try:
        loaded = load_config(Path.cwd(), cli_overrides=cli_overrides)
        if ui.verbose:
            render_sources(ui.err_console, loaded)

        opts = ParseOptions(
            boolean_normalization=loaded.parse.booleans,
            prefix=loaded.parse.prefix,
            reset=clean,
            section=section,
        )
        result = read_ini(file, opts, namespace=namespace, encoding=loaded.parse.encoding)
        namespace.require(require)
    except IniError as e:
        render_error(ui.err_console, e)
        raise typer.Exit(code=int(e.exit_code))

    out_fmt = loaded.output.format
    if out_fmt == OutputFormat.TABLE:
        render_variables_table(ui.console, result, namespace)
        if ui.verbose:
            render_summary(ui.console, result)
    else:
        typer.echo(export(result, namespace, out_fmt), nl=False)

    raise typer.Exit(code=int(ExitCode.OK))
