"""
Logging for monument_safezones.

Every module logs through a child of the `monument_safezones` logger, picked
from `LogComponent`. Console output goes to stderr so the preview CLI can keep
stdout for the zone's JSON data. Records are tagged with the component, e.g.

    [safezone:trigger] Replacing SphereCollider with BoxCollider
    [safezone:addon E] Error registering addon with Monument Addons.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Optional, Union

ROOT_LOGGER_NAME = "monument_safezones"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class LogLevel(Enum):
    """Levels accepted from config files and the command line."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def from_string(cls, level: str) -> "LogLevel":
        name = level.strip().upper()
        return cls["WARNING" if name == "WARN" else name]


class LogComponent(Enum):
    """One logger per addon module."""

    ROOT = ROOT_LOGGER_NAME
    ADDON = ROOT_LOGGER_NAME + ".addon"
    ARGUMENTS = ROOT_LOGGER_NAME + ".arguments"
    ZONE = ROOT_LOGGER_NAME + ".zone"
    TRIGGER = ROOT_LOGGER_NAME + ".trigger"
    SCENE = ROOT_LOGGER_NAME + ".scene"
    DDRAW = ROOT_LOGGER_NAME + ".ddraw"
    CONFIG = ROOT_LOGGER_NAME + ".config"
    CLI = ROOT_LOGGER_NAME + ".cli"

    @staticmethod
    def tag_for(logger_name: str) -> str:
        """`monument_safezones.trigger` -> `safezone:trigger`."""
        if logger_name == ROOT_LOGGER_NAME:
            return "safezone"
        if logger_name.startswith(ROOT_LOGGER_NAME + "."):
            return "safezone:" + logger_name[len(ROOT_LOGGER_NAME) + 1:]
        return logger_name


class ColoredFormatter(logging.Formatter):
    """Console formatter writing `[safezone:<component>] message`."""

    COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True, stream=None):
        super().__init__()
        stream = stream if stream is not None else sys.stderr
        self.use_colors = use_colors and hasattr(stream, "isatty") and stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        tag = LogComponent.tag_for(record.name)
        if record.levelno >= logging.WARNING:
            tag = f"{tag} {record.levelname[0]}"
        prefix = f"[{tag}]"
        if self.use_colors:
            prefix = f"{self.COLORS.get(record.levelno, '')}{prefix}{self.RESET}"

        message = f"{prefix} {record.getMessage()}"
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


def _level_value(level: Union[LogLevel, str, int]) -> int:
    if isinstance(level, LogLevel):
        return level.value
    if isinstance(level, str):
        return LogLevel.from_string(level).value
    return level


def configure_logging(
    level: Union[LogLevel, str, int] = LogLevel.INFO,
    use_colors: bool = True,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Attach handlers to the package logger and stop propagation to the root.

    Args:
        level: Level for the package logger and its handlers.
        use_colors: Color the console tags when stderr is a terminal.
        log_file: Also append plain, timestamped records to this file.

    Returns:
        The package logger.
    """
    level_value = _level_value(level)

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(level_value)
    package_logger.propagate = False

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(ColoredFormatter(use_colors=use_colors))
    package_logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        package_logger.addHandler(file_handler)

    return package_logger


def get_logger(component: Union[LogComponent, str] = LogComponent.ROOT) -> logging.Logger:
    name = component.value if isinstance(component, LogComponent) else component
    return logging.getLogger(name)


__all__ = [
    "LogLevel",
    "LogComponent",
    "ColoredFormatter",
    "configure_logging",
    "get_logger",
]
