from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

from inivars.core.models import ParseResult
from inivars.exporters.common import collect_variables
from inivars.parsers.common import num_sections_name


def to_document(
    result: ParseResult,
    namespace: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    doc: Dict[str, Any] = dict(collect_variables(result, namespace))
    num = num_sections_name(result.prefix)
    if num in doc:
        doc[num] = int(doc[num])
    return doc


def export_json(
    result: ParseResult,
    namespace: Optional[Mapping[str, str]] = None,
) -> str:
    return json.dumps(to_document(result, namespace), indent=2, ensure_ascii=False) + "\n"
