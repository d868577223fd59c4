from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from inivars.parsers.common import all_sections_name, all_vars_name, num_sections_name
from inivars.parsers.types import Entry


DEFAULT_PREFIX = "INI"
DEFAULT_ENCODING = "utf-8"


# ================================
# Enums
# ================================


class OutputFormat(str, Enum):
    TABLE = "table"
    SHELL = "shell"
    JSON = "json"
    YAML = "yaml"


# ================================
# Parse options
# ================================


def _booleans_flag(v: Any) -> bool:
    # Only an explicit "0" (or False) switches normalization off.
    if v is False:
        return False
    return str(v).strip() != "0"


class ParseOptions(BaseModel):
    """
    Options for a single parse pass.

    The prefix is checked by the engine (raising InvalidPrefix), not here,
    so that a bad prefix surfaces as a parse failure rather than a
    validation error.
    """

    model_config = ConfigDict(frozen=True)

    boolean_normalization: bool = True
    prefix: str = DEFAULT_PREFIX
    reset: bool = False
    section: Optional[str] = None

    @field_validator("boolean_normalization", mode="before")
    @classmethod
    def _normalize_booleans(cls, v: Any) -> bool:
        return _booleans_flag(v)

    @field_validator("section", mode="before")
    @classmethod
    def _empty_section_means_all(cls, v: Any) -> Optional[str]:
        return v or None


# ================================
# Parse result
# ================================


@dataclass(frozen=True)
class ParseResult:
    prefix: str = DEFAULT_PREFIX
    entries: Tuple[Entry, ...] = ()
    section_names: Tuple[str, ...] = ()
    variable_names: Tuple[str, ...] = ()
    section_count: int = 0
    reset: bool = False

    def items(self) -> List[Tuple[str, str]]:
        return [e.as_tuple() for e in self.entries]

    def as_dict(self) -> Dict[str, str]:
        """Qualified names mapped to values; repeated names keep the last value."""
        out: Dict[str, str] = {}
        for name, value in self.items():
            out[name] = value
        return out

    def metadata(self) -> Dict[str, str]:
        return {
            all_vars_name(self.prefix): " ".join(self.variable_names),
            all_sections_name(self.prefix): " ".join(self.section_names),
            num_sections_name(self.prefix): str(self.section_count),
        }


# ================================
# CLI config (defaults only)
# ================================


class ParseConfig(BaseModel):
    """
    Defaults for `inivars parse`/`check`.
    Global/repo/CLI overrides are merged by core/config.py.
    """

    prefix: str = DEFAULT_PREFIX
    booleans: bool = True
    encoding: str = Field(default=DEFAULT_ENCODING, min_length=1)

    @field_validator("booleans", mode="before")
    @classmethod
    def _normalize_booleans(cls, v: Any) -> bool:
        return _booleans_flag(v)


class OutputConfig(BaseModel):
    format: OutputFormat = OutputFormat.TABLE
