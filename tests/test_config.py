import pytest

from inivars.core.config import find_repo_config, load_config
from inivars.core.errors import ConfigError
from inivars.core.models import OutputFormat


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults(isolated_config):
    loaded = load_config(isolated_config)
    assert loaded.parse.prefix == "INI"
    assert loaded.parse.booleans is True
    assert loaded.parse.encoding == "utf-8"
    assert loaded.output.format == OutputFormat.TABLE
    assert loaded.global_path is None
    assert loaded.repo_path is None


def test_project_config_found_from_subdirectory(isolated_config):
    cfg = _write(isolated_config / ".inivars" / "config.toml", '[parse]\nprefix = "APP"\n')
    sub = isolated_config / "a" / "b"
    sub.mkdir(parents=True)

    assert find_repo_config(sub) == cfg.resolve()
    assert load_config(sub).parse.prefix == "APP"


def test_precedence_global_project_cli(isolated_config):
    _write(
        isolated_config / "home" / ".config" / "inivars" / "config.toml",
        '[parse]\nprefix = "GLOBAL"\nencoding = "latin-1"\n[output]\nformat = "json"\n',
    )
    _write(isolated_config / ".inivars" / "config.toml", '[parse]\nprefix = "PROJECT"\n')

    loaded = load_config(isolated_config)
    assert loaded.parse.prefix == "PROJECT"
    assert loaded.parse.encoding == "latin-1"
    assert loaded.output.format == OutputFormat.JSON

    loaded = load_config(
        isolated_config,
        cli_overrides={"parse": {"prefix": "CLI", "encoding": None}, "output": {"format": "yaml"}},
    )
    assert loaded.parse.prefix == "CLI"
    assert loaded.parse.encoding == "latin-1"
    assert loaded.output.format == OutputFormat.YAML


def test_booleans_override_uses_off_sentinel(isolated_config):
    assert load_config(isolated_config, {"parse": {"booleans": "0"}}).parse.booleans is False
    assert load_config(isolated_config, {"parse": {"booleans": "no"}}).parse.booleans is True


def test_invalid_toml(isolated_config):
    _write(isolated_config / ".inivars" / "config.toml", "[parse\nprefix = 1")
    with pytest.raises(ConfigError):
        load_config(isolated_config)


def test_invalid_value(isolated_config):
    _write(isolated_config / ".inivars" / "config.toml", '[output]\nformat = "xml"\n')
    with pytest.raises(ConfigError):
        load_config(isolated_config)


def test_legacy_global_location(isolated_config):
    cfg = _write(isolated_config / "home" / ".inivars" / "config.toml", '[parse]\nprefix = "LEGACY"\n')
    loaded = load_config(isolated_config)
    assert loaded.global_path == cfg.resolve()
    assert loaded.parse.prefix == "LEGACY"


def test_unrelated_tables_are_ignored(isolated_config):
    _write(
        isolated_config / ".inivars" / "config.toml",
        'output = "json"\n[other]\nprefix = "NO"\n[parse]\nbooleans = "0"\n',
    )
    loaded = load_config(isolated_config)
    assert loaded.parse.prefix == "INI"
    assert loaded.parse.booleans is False
    assert loaded.output.format == OutputFormat.TABLE
