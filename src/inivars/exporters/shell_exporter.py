from __future__ import annotations

from typing import List, Mapping, Optional

from inivars.core.models import ParseResult
from inivars.exporters.common import collect_variables
from inivars.parsers.common import all_vars_name


def shell_quote(value: str) -> str:
    """
    Quote a value as a bash ANSI-C string.

    Examples:
      it's       -> $'it\\'s'
      C:\\temp    -> $'C:\\\\temp'
    """
    v = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"$'{v}'"


def export_shell(
    result: ParseResult,
    namespace: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Render assignments suitable for `eval "$(inivars parse -f shell FILE)"`.

    After a reset, the caller's shell unsets whatever its own
    `<prefix>__ALL_VARS` lists (those variables are usually not exported,
    so this process cannot see them), then the names removed from the store.
    """
    lines: List[str] = []

    if result.reset:
        lines.append(f"unset ${{{all_vars_name(result.prefix)}-}}")

    unset = list(getattr(namespace, "unset_names", None) or [])
    variables = collect_variables(result, namespace)
    unset = [n for n in unset if n not in variables]
    if unset:
        lines.append("unset " + " ".join(unset))

    for name, value in variables.items():
        lines.append(f"{name}={shell_quote(value)}")

    return "\n".join(lines) + ("\n" if lines else "")
