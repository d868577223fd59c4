from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Mapping, MutableMapping, Optional

from inivars.core.errors import MissingVariable
from inivars.parsers.common import all_vars_name, metadata_names

log = logging.getLogger(__name__)


class Namespace(MutableMapping[str, str]):
    """
    Destination store for parsed variables.

    An ordered str -> str mapping that also remembers which names were
    deleted, so that exporters can emit `unset` lines for them. Any
    MutableMapping (os.environ included) can be used in its place.
    """

    def __init__(self, initial: Optional[Mapping[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})
        self._unset: List[str] = []

    def __getitem__(self, name: str) -> str:
        return self._data[name]

    def __setitem__(self, name: str, value: str) -> None:
        if name in self._unset:
            self._unset.remove(name)
        self._data[name] = value

    def __delitem__(self, name: str) -> None:
        del self._data[name]
        if name not in self._unset:
            self._unset.append(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Namespace({self._data!r})"

    @property
    def unset_names(self) -> List[str]:
        """Names removed from the store, in removal order."""
        return list(self._unset)

    def discard(self, name: str) -> None:
        """Remove `name` if present; it is recorded as unset either way."""
        self._data.pop(name, None)
        if name not in self._unset:
            self._unset.append(name)

    def reset(self, prefix: str) -> List[str]:
        return reset_namespace(self, prefix)

    def require(self, names: Iterable[str]) -> None:
        assert_variables_exist(names, self)


def discard(store: MutableMapping[str, str], name: str) -> None:
    # Unsetting a name that was never set is not an error.
    if isinstance(store, Namespace):
        store.discard(name)
    else:
        store.pop(name, None)


def clear_metadata(store: MutableMapping[str, str], prefix: str) -> None:
    for name in metadata_names(prefix):
        discard(store, name)


def reset_namespace(store: MutableMapping[str, str], prefix: str) -> List[str]:
    """
    Remove every variable a previous parse recorded in `<prefix>__ALL_VARS`,
    then the metadata names themselves. Returns the removed variable names.
    """
    listed = (store.get(all_vars_name(prefix)) or "").split()

    removed: List[str] = []
    for name in listed:
        if name in store:
            del store[name]
            removed.append(name)

    clear_metadata(store, prefix)
    log.debug("reset prefix %s: removed %d variable(s)", prefix, len(removed))
    return removed


def assert_variables_exist(names: Iterable[str], store: Mapping[str, str]) -> None:
    """
    Raise MissingVariable for the first name that is absent or empty.
    """
    for name in names:
        if not store.get(name):
            raise MissingVariable(name)
