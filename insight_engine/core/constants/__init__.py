"""
Core Constants Package

This package contains constants used throughout the engine core.
"""

from insight_engine.core.constants.logging import (
    DETAILED_LOG_FORMAT,
    LOG_DATE_FORMAT,
    STANDARD_LOG_FORMAT,
    LogLevel,
)

__all__ = [
    "DETAILED_LOG_FORMAT",
    "LOG_DATE_FORMAT",
    "STANDARD_LOG_FORMAT",
    "LogLevel",
]
