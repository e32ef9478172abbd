"""Configuration module."""

from callstats.config.constants import QUALITY, QualityConstants
from callstats.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "QualityConstants", "QUALITY"]
