"""Configuration module."""

from .constants import (
    COLUMN_NAMES,
    CURRENT_W3C_FIELDS,
    HEADER_PREFIXES,
    LEGACY_W3C_FIELDS,
    SENTINEL,
)
from .loader import load_config_file, load_deserializer_section
from .settings import DeserializerSettings, clear_settings_cache, get_settings

__all__ = [
    # Log format constants
    "HEADER_PREFIXES",
    "SENTINEL",
    "CURRENT_W3C_FIELDS",
    "LEGACY_W3C_FIELDS",
    "COLUMN_NAMES",
    # Settings
    "DeserializerSettings",
    "get_settings",
    "clear_settings_cache",
    # Config loading
    "load_config_file",
    "load_deserializer_section",
]
