from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from pydantic import ValidationError

from inivars.core.errors import ConfigError
from inivars.core.models import OutputConfig, ParseConfig

# Python 3.11+ has tomllib; for 3.9/3.10 use tomli
try:
    import tomllib  # type: ignore
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore


CONFIG_SECTIONS = ("parse", "output")

PROJECT_CONFIG = Path(".inivars") / "config.toml"

GLOBAL_CONFIGS = (
    "~/.config/inivars/config.toml",
    "~/.inivars/config.toml",
)


def _load_sections(path: Path) -> Dict[str, Dict[str, Any]]:
    """Read a config file, keeping only the [parse] and [output] tables."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8", errors="replace"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e

    out: Dict[str, Dict[str, Any]] = {}
    for sec in CONFIG_SECTIONS:
        table = data.get(sec)
        if isinstance(table, dict):
            out[sec] = table
    return out


def _overlay(
    base: Dict[str, Dict[str, Any]],
    layer: Dict[str, Dict[str, Any]],
) -> Dict[str, Dict[str, Any]]:
    # Both levels are shallow: sections, then keys. None in a layer means "not given".
    for sec, values in layer.items():
        dest = base.setdefault(sec, {})
        dest.update({k: v for k, v in (values or {}).items() if v is not None})
    return base


def _first_file(candidates: Iterable[Path]) -> Optional[Path]:
    return next((p for p in candidates if p.is_file()), None)


def find_repo_config(start_dir: Path) -> Optional[Path]:
    """Closest `.inivars/config.toml` at or above `start_dir`."""
    cur = start_dir.resolve()
    found = _first_file(d / PROJECT_CONFIG for d in (cur, *cur.parents))
    return found.resolve() if found else None


def find_global_config() -> Optional[Path]:
    return _first_file(Path(p).expanduser().resolve() for p in GLOBAL_CONFIGS)


@dataclass(frozen=True)
class LoadedConfig:
    parse: ParseConfig
    output: OutputConfig
    global_path: Optional[Path]
    repo_path: Optional[Path]


def load_config(
    start_dir: Path,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> LoadedConfig:
    """
    Build parse/output settings from, lowest precedence first:
      built-in defaults, the global file, the project file, cli_overrides
    """
    global_path = find_global_config()
    repo_path = find_repo_config(start_dir)

    merged: Dict[str, Dict[str, Any]] = {}
    for path in (global_path, repo_path):
        if path:
            _overlay(merged, _load_sections(path))
    _overlay(merged, cli_overrides or {})

    try:
        parse_cfg = ParseConfig.model_validate(merged.get("parse", {}))
        output_cfg = OutputConfig.model_validate(merged.get("output", {}))
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e

    return LoadedConfig(
        parse=parse_cfg,
        output=output_cfg,
        global_path=global_path,
        repo_path=repo_path,
    )
