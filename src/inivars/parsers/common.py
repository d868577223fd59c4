from __future__ import annotations

import re

PREFIX_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

TRUE_WORDS = frozenset({"yes", "true", "on"})
FALSE_WORDS = frozenset({"no", "false", "off"})


def is_valid_prefix(prefix: str) -> bool:
    return bool(PREFIX_RE.match(prefix or ""))


def qualified_name(prefix: str, section: str, key: str) -> str:
    """
    Build the flat variable name for a key.

    Examples:
      ("INI", "", "db.host")     -> "INI__db_host"
      ("INI", "main", "port")    -> "INI__main__port"
    """
    k = key.replace(".", "_")
    if not section:
        return f"{prefix}__{k}"
    return f"{prefix}__{section}__{k}"


def all_vars_name(prefix: str) -> str:
    return f"{prefix}__ALL_VARS"


def all_sections_name(prefix: str) -> str:
    return f"{prefix}__ALL_SECTIONS"


def num_sections_name(prefix: str) -> str:
    return f"{prefix}__NUMSECTIONS"


def metadata_names(prefix: str) -> tuple[str, str, str]:
    return (all_vars_name(prefix), all_sections_name(prefix), num_sections_name(prefix))


def unquote(val: str) -> tuple[str, bool]:
    """Strip one outer pair of matching quotes. Returns (value, was_quoted)."""
    if len(val) >= 2 and ((val[0] == val[-1] == '"') or (val[0] == val[-1] == "'")):
        return val[1:-1], True
    return val, False


def normalize_value(raw: str, *, booleans: bool) -> str:
    v, quoted = unquote(raw)
    if quoted or not booleans:
        return v

    low = v.lower()
    if low in TRUE_WORDS:
        return "1"
    if low in FALSE_WORDS:
        return "0"
    return v
