"""
Data-related exceptions.
"""

from insight_engine.domain.exceptions.base_exceptions import BaseApplicationError


class DataNotFoundError(BaseApplicationError):
    """Error raised when requested data does not exist."""

    def __init__(self, message: str = "Requested data not found") -> None:
        super().__init__(message)
