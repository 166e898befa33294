"""
Datetime utilities for consistent timezone handling.

Every timestamp the engine produces is timezone-aware UTC.
"""

import datetime
from collections.abc import Callable
from zoneinfo import ZoneInfo

UTC = ZoneInfo("UTC")

Clock = Callable[[], datetime.datetime]


def now_utc() -> datetime.datetime:
    """
    Get current datetime in UTC.

    Returns:
        datetime.datetime: Current time in UTC timezone
    """
    return datetime.datetime.now(UTC)
