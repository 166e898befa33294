"""
Logging Utility Module.

This module provides logging helpers for the engine. Referral contact
blocks carry e-mail addresses and phone numbers, so every handler the
engine configures runs records through PIIRedactingFilter.
"""

import logging
import os
import re
import sys

from insight_engine.core.constants import LOG_DATE_FORMAT, STANDARD_LOG_FORMAT

EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b")
PHONE_PATTERN = re.compile(
    r"\+?\d{1,3}[-\s]\d{3}[-\s]\d{4}|\(\d{3}\)\s*\d{3}-\d{4}|\b\d{3}-\d{3}-\d{4}\b"
)

REDACTED_EMAIL = "[REDACTED EMAIL]"
REDACTED_PHONE = "[REDACTED PHONE]"


def redact_text(text: str) -> str:
    """Mask e-mail addresses and phone numbers in free text."""
    text = EMAIL_PATTERN.sub(REDACTED_EMAIL, text)
    return PHONE_PATTERN.sub(REDACTED_PHONE, text)


class PIIRedactingFilter(logging.Filter):
    """Custom logging filter that masks contact details in log records."""

    def __init__(self, name: str = "PIIRedactor"):
        super().__init__(name)

    def filter(self, record: logging.LogRecord) -> bool:
        # Format first so values passed through args are covered too
        original_message = record.getMessage()
        sanitized_message = redact_text(original_message)

        if sanitized_message != original_message:
            record.msg = sanitized_message
            record.args = ()

        return True


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance for the specified name.

    When the logger has no handlers yet, a stdout handler with the
    standard format and the PII filter is attached.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
        log_level = getattr(logging, log_level_str, logging.INFO)
        logger.setLevel(log_level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(STANDARD_LOG_FORMAT, LOG_DATE_FORMAT))
        handler.addFilter(PIIRedactingFilter())
        logger.addHandler(handler)
        logger.propagate = False

    return logger
