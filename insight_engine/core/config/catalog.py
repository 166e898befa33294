"""
Threshold catalog loading.

The catalog is static configuration: it is read once per process and
handed to the analyzers as an injected collaborator.
"""

import logging
from functools import lru_cache
from pathlib import Path

from insight_engine.core.config.settings import get_settings
from insight_engine.domain.value_objects.threshold_catalog import ThresholdCatalog

logger = logging.getLogger(__name__)


def load_threshold_catalog(path: str | Path) -> ThresholdCatalog:
    """
    Load a threshold catalog from a JSON file.

    Args:
        path: Location of the catalog JSON

    Returns:
        The validated catalog

    Raises:
        ConfigurationError: If the file is missing or malformed
    """
    catalog = ThresholdCatalog.from_json_file(path)
    logger.info(f"Loaded threshold catalog with {len(catalog)} issues from {path}")
    return catalog


@lru_cache
def get_threshold_catalog() -> ThresholdCatalog:
    """Return the process-wide catalog at the configured path, loading it on first use."""
    return load_threshold_catalog(get_settings().catalog_path)
