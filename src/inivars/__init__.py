"""
inivars: flat INI files as qualified variables.

    from inivars import read_ini, ParseOptions

    result = read_ini("app.ini", ParseOptions(prefix="APP"))
    result.as_dict()   # {"APP__db__host": "localhost", ...}
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from inivars.core.engine import read_ini, read_ini_text
from inivars.core.errors import (
    ConfigError,
    FileUnreadable,
    IniError,
    InvalidLine,
    InvalidPrefix,
    MissingVariable,
    UsageError,
)
from inivars.core.models import OutputFormat, ParseOptions, ParseResult
from inivars.core.namespace import Namespace, assert_variables_exist
from inivars.exporters import export
from inivars.parsers.types import Entry

try:
    __version__ = version("inivars")
except PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "__version__",
    "read_ini",
    "read_ini_text",
    "assert_variables_exist",
    "export",
    "Namespace",
    "ParseOptions",
    "ParseResult",
    "Entry",
    "OutputFormat",
    "IniError",
    "UsageError",
    "ConfigError",
    "InvalidPrefix",
    "FileUnreadable",
    "InvalidLine",
    "MissingVariable",
]
