"""
Logging Constants Module

This module defines constants and enumerations related to logging
to ensure consistent log levels and formats across the engine.
"""

from enum import Enum


class LogLevel(str, Enum):
    """
    Standard log levels for engine logging.

    These levels align with standard Python logging levels
    but are provided as an enum for type safety and consistency.
    """

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def names(cls) -> list[str]:
        return [level.value for level in cls]


STANDARD_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s"
DETAILED_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
