from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Section:
    """A `[name]` marker line."""
    name: str
    line: int


@dataclass(frozen=True)
class Entry:
    """ A key/value line, resolved to its qualified name and normalized value."""
    name: str
    value: str
    section: str
    key: str
    line: int

    def as_tuple(self) -> Tuple[str, str]:
        return (self.name, self.value)
