from __future__ import annotations

import typer
from rich.console import Console

from inivars import __version__
from inivars.cli.commands.check import check_cmd
from inivars.cli.commands.init import init_cmd
from inivars.cli.commands.parse import parse_cmd

app = typer.Typer(
    name="inivars",
    help="Read flat INI files into prefixed variables (PREFIX__section__key).",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"inivars {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", callback=_version_callback, is_eager=True
    ),
) -> None:
    pass


app.command("parse")(parse_cmd)
app.command("check")(check_cmd)
app.command("init")(init_cmd)
