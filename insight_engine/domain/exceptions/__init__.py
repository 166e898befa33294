"""
Domain exceptions package.

All engine errors derive from BaseApplicationError.
"""

from insight_engine.domain.exceptions.base_exceptions import (
    BaseApplicationError,
    ConfigurationError,
    ValidationError,
)
from insight_engine.domain.exceptions.data_exceptions import DataNotFoundError

__all__ = [
    "BaseApplicationError",
    "ConfigurationError",
    "DataNotFoundError",
    "ValidationError",
]
