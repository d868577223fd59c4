from __future__ import annotations

import io
import logging
import re
from typing import Iterable, Iterator, List, Optional, Union

from inivars.core.errors import InvalidLine
from inivars.parsers.common import normalize_value, qualified_name
from inivars.parsers.types import Entry, Section

log = logging.getLogger(__name__)

_SECTION_RE = re.compile(r"\[([A-Za-z0-9_]+)\]")
_KEY_VALUE_RE = re.compile(r"^[A-Za-z0-9._]+[ \t]*=")
_BLANKS = " \t"

Event = Union[Section, Entry]


def iter_ini(
    lines: Iterable[str],
    *,
    prefix: str = "INI",
    booleans: bool = True,
    section: Optional[str] = None,
) -> Iterator[Event]:
    """
    Scan INI lines one at a time, yielding Section and Entry events in
    document order.

    Supported:
      [section]            section names are [A-Za-z0-9_]+
      key = value          keys are [A-Za-z0-9._]+, split at the first '='
      ; comment / # comment, blank lines

    When `section` is given, every line outside that section is skipped
    (section markers are still reported). Any other line raises InvalidLine;
    events already yielded stay yielded.
    """
    current = ""

    for n, raw in enumerate(lines, start=1):
        raw = raw.rstrip("\r\n")
        if n == 1:
            raw = raw.lstrip("\ufeff")
        line = raw.lstrip(_BLANKS)

        if not line or line[0] in ";#":
            continue

        m = _SECTION_RE.fullmatch(line.rstrip(_BLANKS))
        if m:
            current = m.group(1)
            log.debug("line %d: entering section [%s]", n, current)
            yield Section(name=current, line=n)
            continue

        if section and current != section:
            continue

        if not _KEY_VALUE_RE.match(line):
            raise InvalidLine(n, raw)

        key, val = line.split("=", 1)
        key = key.strip(_BLANKS)
        val = val.lstrip(_BLANKS)

        yield Entry(
            name=qualified_name(prefix, current, key),
            value=normalize_value(val, booleans=booleans),
            section=current,
            key=key,
            line=n,
        )


def parse_ini(
    text: str,
    *,
    prefix: str = "INI",
    booleans: bool = True,
    section: Optional[str] = None,
) -> List[Entry]:
    """INI text -> entries, in document order (duplicates kept)."""
    if text is None:
        return []

    events = iter_ini(io.StringIO(text, newline=None), prefix=prefix, booleans=booleans, section=section)
    return [e for e in events if isinstance(e, Entry)]
