"""Configuration types for stream diagnostics."""

import logging
from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Log levels mirroring Python's logging module."""

    NOTSET = logging.NOTSET
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


@dataclass(frozen=True)
class DebugConfig:
    """Where the debug operator writes when no sink is injected.

    Attributes:
        logger_name: Name passed to logging.getLogger
        level: Level every signal line is logged at
    """

    logger_name: str = "rxlite.debug"
    level: LogLevel = LogLevel.DEBUG

