from __future__ import annotations

from typing import Mapping, Optional

import yaml

from inivars.core.models import ParseResult
from inivars.exporters.json_exporter import to_document


def export_yaml(
    result: ParseResult,
    namespace: Optional[Mapping[str, str]] = None,
) -> str:
    # Values stay strings ("1", "0", "yes" when quoted); safe_dump quotes them as needed.
    return yaml.safe_dump(
        to_document(result, namespace),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
