from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import Iterable, List, MutableMapping, Optional, Union

from inivars.core.errors import FileUnreadable, InvalidPrefix, UsageError
from inivars.core.models import DEFAULT_ENCODING, ParseOptions, ParseResult
from inivars.core.namespace import Namespace, clear_metadata, reset_namespace
from inivars.parsers.common import is_valid_prefix, metadata_names
from inivars.parsers.ini_parser import iter_ini
from inivars.parsers.types import Entry, Section

log = logging.getLogger(__name__)

PathLike = Union[str, Path]
Store = MutableMapping[str, str]


def _prepare(opts: ParseOptions, store: Store) -> None:
    if not is_valid_prefix(opts.prefix):
        raise InvalidPrefix(opts.prefix)

    if opts.reset:
        reset_namespace(store, opts.prefix)
    clear_metadata(store, opts.prefix)


def _check_file(path: Path) -> None:
    if not path.exists() or not os.access(path, os.R_OK):
        raise FileUnreadable(path)


def _scan(lines: Iterable[str], opts: ParseOptions, store: Store) -> ParseResult:
    """
    Fold the scanner's events into the store, in document order.

    Writes happen as lines are accepted; an InvalidLine raised mid-way
    leaves earlier writes in place.
    """
    vars_key, sections_key, num_key = metadata_names(opts.prefix)

    entries: List[Entry] = []
    sections: List[str] = []
    names: List[str] = []

    events = iter_ini(
        lines,
        prefix=opts.prefix,
        booleans=opts.boolean_normalization,
        section=opts.section,
    )
    for ev in events:
        if isinstance(ev, Section):
            sections.append(ev.name)
            store[sections_key] = " ".join(sections)
            continue

        entries.append(ev)
        store[ev.name] = ev.value
        names.append(ev.name)
        store[vars_key] = " ".join(names)
        log.debug("line %d: %s", ev.line, ev.name)

    store[vars_key] = " ".join(names)
    store[sections_key] = " ".join(sections)
    store[num_key] = str(len(sections))

    return ParseResult(
        prefix=opts.prefix,
        entries=tuple(entries),
        section_names=tuple(sections),
        variable_names=tuple(names),
        section_count=len(sections),
        reset=opts.reset,
    )


def read_ini(
    path: Optional[PathLike] = None,
    options: Optional[ParseOptions] = None,
    *,
    namespace: Optional[Store] = None,
    encoding: str = DEFAULT_ENCODING,
) -> ParseResult:
    """
    Parse an INI file into `namespace` (a fresh Namespace when omitted).

    Order of operations:
      usage check -> prefix check -> reset (if requested) -> metadata clear ->
      file check -> scan

    With `options.reset` and no path, only the reset happens and an empty
    result is returned.
    """
    opts = options or ParseOptions()
    store = namespace if namespace is not None else Namespace()

    if not path and not opts.reset:
        raise UsageError()

    _prepare(opts, store)

    if not path:
        return ParseResult(prefix=opts.prefix, reset=True)

    p = Path(path)
    _check_file(p)

    try:
        fh = p.open("r", encoding=encoding, newline=None)
    except OSError as e:
        raise FileUnreadable(p, e.strerror or str(e)) from e

    log.debug("reading %s (prefix=%s, section=%s)", p, opts.prefix, opts.section or "-")
    with fh:
        try:
            return _scan(fh, opts, store)
        except UnicodeDecodeError as e:
            raise FileUnreadable(p, f"not valid {encoding}") from e


def read_ini_text(
    text: str,
    options: Optional[ParseOptions] = None,
    *,
    namespace: Optional[Store] = None,
) -> ParseResult:
    """Same as read_ini, for a document already in memory."""
    opts = options or ParseOptions()
    store = namespace if namespace is not None else Namespace()

    _prepare(opts, store)
    return _scan(io.StringIO(text, newline=None), opts, store)
