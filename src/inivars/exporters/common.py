from __future__ import annotations

from typing import Dict, Mapping, Optional

from inivars.core.models import ParseResult
from inivars.parsers.common import metadata_names


def collect_variables(
    result: ParseResult,
    namespace: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Variables produced by `result`, first-appearance order, values as the
    store holds them (last write wins), followed by the metadata names.

    Without a store, values and metadata come from the result itself.
    """
    out = result.as_dict()
    if namespace is None:
        out.update(result.metadata())
        return out

    for name in out:
        if name in namespace:
            out[name] = namespace[name]
    for name in metadata_names(result.prefix):
        if name in namespace:
            out[name] = namespace[name]
    return out
