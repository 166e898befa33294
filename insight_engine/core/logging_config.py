"""
Logging Configuration Module.

This module builds the logging configuration dictionary for the engine
and applies it with ``logging.config.dictConfig``. Every handler carries
the PII redacting filter so referral contact details never reach the
logs in plain text.
"""

import copy
import logging
import logging.config
from pathlib import Path
from typing import Any

from insight_engine.core.config.settings import Settings, get_settings
from insight_engine.core.constants import DETAILED_LOG_FORMAT, LOG_DATE_FORMAT, STANDARD_LOG_FORMAT

LOGGING_CONFIG_BASE: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": STANDARD_LOG_FORMAT,
            "datefmt": LOG_DATE_FORMAT,
        },
        "detailed": {
            "format": DETAILED_LOG_FORMAT,
            "datefmt": LOG_DATE_FORMAT,
        },
    },
    "filters": {
        "pii_redactor": {
            "()": "insight_engine.core.utils.logging.PIIRedactingFilter",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "standard",
            "filters": ["pii_redactor"],
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "insight_engine": {
            "level": "INFO",
            "handlers": ["console"],
            "propagate": False,
        },
    },
}


def build_logging_config(settings: Settings) -> dict[str, Any]:
    """
    Build a dictConfig mapping for the given settings.

    Args:
        settings: Engine settings supplying level and file options

    Returns:
        A fresh configuration dictionary
    """
    config = copy.deepcopy(LOGGING_CONFIG_BASE)
    level = settings.LOG_LEVEL

    config["handlers"]["console"]["level"] = level
    engine_logger = config["loggers"]["insight_engine"]
    engine_logger["level"] = level

    if settings.LOG_TO_FILE:
        config["handlers"]["file_handler"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "detailed",
            "filters": ["pii_redactor"],
            "filename": str(Path(settings.LOG_DIR) / "insight_engine.log"),
            "maxBytes": 10485760,  # 10MB
            "backupCount": 10,
            "encoding": "utf8",
        }
        engine_logger["handlers"].append("file_handler")

    return config


def setup_logging(settings: Settings | None = None, config: dict[str, Any] | None = None) -> None:
    """
    Configure the logging system with the provided configuration or one built from settings.

    Args:
        settings: Optional settings to build the configuration from
        config: Optional logging configuration dictionary to use as is
    """
    if config is None:
        settings = settings or get_settings()
        config = build_logging_config(settings)

    file_handler = config["handlers"].get("file_handler")
    if file_handler:
        Path(file_handler["filename"]).parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(config)

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured successfully")
