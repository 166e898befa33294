"""
Configuration package.

Settings are loaded from the environment (and an optional ``.env`` file)
through pydantic-settings.
"""

from insight_engine.core.config.catalog import get_threshold_catalog, load_threshold_catalog
from insight_engine.core.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "get_threshold_catalog", "load_threshold_catalog"]
