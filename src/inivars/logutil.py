from __future__ import annotations

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LevelLike = Union[int, str]


def _normalize_level(value: LevelLike) -> int:
    if isinstance(value, int):
        return value

    resolved = logging.getLevelName(value.upper())
    if isinstance(resolved, int):
        return resolved

    raise ValueError(f"Unknown logging level name: {value}")


def configure_logging(
    *,
    name: str = "inivars",
    level: LevelLike = "DEBUG",
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Attach a RichHandler to the package logger (once) and set its level.

    :param name: Logger name.
    :param level: Level for logger and handler (int or level name).
    :param console: Console to log to; defaults to a stderr console.
    :return: The configured logger.
    """
    level_value = _normalize_level(level)

    log = logging.getLogger(name)
    handler = next((h for h in log.handlers if isinstance(h, RichHandler)), None)
    if handler is None:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            markup=False,
        )
        log.addHandler(handler)

    handler.setLevel(level_value)
    log.setLevel(level_value)
    log.propagate = False
    return log
