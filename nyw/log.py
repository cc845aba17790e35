"""Console logging with a level taken from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

_TAG_WIDTH = 8


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment."""

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(log_level=os.environ.get("LOG", "INFO"))


class LogType(Enum):
    INFO = "INFO"
    DEBUG = "DEBUG"

    def text(self) -> tuple[int, str]:
        """Return the visible width of the tag and the tag itself."""
        if self is LogType.INFO:
            return _TAG_WIDTH, "[ \x1b[32mINFO\x1b[0m ]"
        return _TAG_WIDTH, "[ DEBG ]"


def is_allowed(level: LogType, log_level: str) -> bool:
    """Tell whether *level* is shown under the configured *log_level*."""
    if log_level == "ALL":
        return True
    if log_level == "DEBUG":
        return level in (LogType.INFO, LogType.DEBUG)
    if log_level == "NONE":
        return False
    return level is LogType.INFO


def format_line(level: LogType, message: str) -> str:
    width, tag = level.text()
    spaces = " " * (_TAG_WIDTH - width)
    return f"{tag}:{spaces}: {message}"


def log(level: LogType, message: str) -> None:
    """Print *message* if the current log level allows it."""
    if is_allowed(level, Settings.from_env().log_level):
        print(format_line(level, message))