from __future__ import annotations

from inivars.parsers.common import normalize_value, qualified_name
from inivars.parsers.ini_parser import iter_ini, parse_ini
from inivars.parsers.types import Entry, Section

__all__ = ["Entry", "Section", "iter_ini", "normalize_value", "parse_ini", "qualified_name"]
