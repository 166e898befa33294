"""
Engine settings module.

This module provides configuration settings for the insight engine:
logging, the threshold catalog location and scoring defaults.
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from insight_engine.core.constants import LogLevel
from insight_engine.domain.value_objects.assessment_method import AssessmentMethod

logger = logging.getLogger(__name__)

BUNDLED_CATALOG_PATH = Path(__file__).resolve().parents[2] / "resources" / "threshold_catalog.json"


class Settings(BaseSettings):
    """Engine settings using Pydantic for validation and environment variable loading."""

    # Environment
    PROJECT_NAME: str = "Child Insight Engine"
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"  # development, test, production
    TESTING: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = False

    # Scoring configuration
    THRESHOLD_CATALOG_PATH: Path | None = None
    DEFAULT_ASSESSMENT_METHOD: str = "weighted_average"
    WEIGHTAGE_WARNING_LIMIT: float = 100.0

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log level is one of the valid levels."""
        valid_levels = LogLevel.names()
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator("DEFAULT_ASSESSMENT_METHOD")
    @classmethod
    def validate_assessment_method(cls, v: str) -> str:
        try:
            return AssessmentMethod(v.strip().lower()).value
        except ValueError:
            valid = [m.value for m in AssessmentMethod]
            raise ValueError(f"Assessment method must be one of {valid}")

    @property
    def catalog_path(self) -> Path:
        """Path of the threshold catalog JSON, falling back to the bundled file."""
        return self.THRESHOLD_CATALOG_PATH or BUNDLED_CATALOG_PATH

    @property
    def is_testing(self) -> bool:
        return self.TESTING or self.ENVIRONMENT == "test"


@lru_cache
def get_settings() -> Settings:
    """
    Get the engine settings.

    The instance is cached; call ``get_settings.cache_clear()`` after
    changing the environment in tests.

    Returns:
        The engine settings instance
    """
    settings = Settings()
    logger.debug(f"Loaded settings for environment {settings.ENVIRONMENT}")
    return settings
