from __future__ import annotations

from pathlib import Path

import typer

from inivars.cli.utils.files import ensure_dir, write_file


DEFAULT_CONFIG_TOML = """\
[parse]
# prefix for every variable name: PREFIX__section__key
prefix = "INI"
# false keeps yes/no/true/false/on/off as written instead of 1/0
booleans = true
encoding = "utf-8"

[output]
# table, shell, json or yaml
format = "table"
"""


def init_cmd(
    path: Path = typer.Argument(Path("."), help="Project path to initialize."),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config."),
) -> None:
    """Write a default .inivars/config.toml."""
    root = path.resolve()
    cfg_dir = root / ".inivars"
    ensure_dir(cfg_dir)

    cfg_path = cfg_dir / "config.toml"
    if write_file(cfg_path, DEFAULT_CONFIG_TOML, force=force):
        typer.echo(f"Initialized {cfg_path}")
    else:
        typer.echo(f"Kept existing {cfg_path} (use --force to overwrite)")
