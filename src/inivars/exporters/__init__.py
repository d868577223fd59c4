from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional

from inivars.core.models import OutputFormat, ParseResult
from inivars.exporters.json_exporter import export_json
from inivars.exporters.shell_exporter import export_shell, shell_quote
from inivars.exporters.yaml_exporter import export_yaml

ExporterFn = Callable[[ParseResult, Optional[Mapping[str, str]]], str]

EXPORTERS: Dict[OutputFormat, ExporterFn] = {
    OutputFormat.SHELL: export_shell,
    OutputFormat.JSON: export_json,
    OutputFormat.YAML: export_yaml,
}


def export(
    result: ParseResult,
    namespace: Optional[Mapping[str, str]] = None,
    fmt: OutputFormat = OutputFormat.SHELL,
) -> str:
    try:
        fn = EXPORTERS[OutputFormat(fmt)]
    except (KeyError, ValueError) as e:
        raise ValueError(f"No text exporter for format: {fmt}") from e
    return fn(result, namespace)


__all__ = ["EXPORTERS", "export", "export_json", "export_shell", "export_yaml", "shell_quote"]
