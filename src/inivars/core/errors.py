from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    ERROR = 1
    USAGE = 2


USAGE = (
    "Usage: inivars parse [-c] [-b 0|1] [-p PREFIX] FILE [SECTION]\n"
    "  or   inivars parse -c [-p PREFIX]"
)


class IniError(Exception):
    """Base class for every failure surfaced by inivars."""

    exit_code: ExitCode = ExitCode.ERROR


class UsageError(IniError):
    exit_code = ExitCode.USAGE

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


class ConfigError(IniError):
    pass


class InvalidPrefix(IniError):
    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(f"invalid prefix '{prefix}'")


class FileUnreadable(IniError):
    def __init__(self, path: object, detail: str = "") -> None:
        self.path = str(path)
        self.detail = detail
        msg = f"'{self.path}' doesn't exist or not readable"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class InvalidLine(IniError):
    """A line that is neither blank, comment, section marker nor key/value."""

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"Invalid line:\n {line_number}: {line}")


class MissingVariable(IniError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing variable in INI file: {name}")
