"""
Deserializer settings and configuration management.

Supports loading from:
1. YAML config files (deserializer: section)
2. Environment variables (fallback)
3. Host table properties (via from_dict)
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from ..deserializer.exceptions import SerDeConfigError
from .constants import (
    ENV_CLEAR_UNMATCHED_FIELDS,
    ENV_LOG_LEGACY_FALLBACK,
    ENV_MAX_LINE_LENGTH,
)

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset(["true", "1", "yes", "on"])
_FALSE_VALUES = frozenset(["false", "0", "no", "off"])


def _coerce_bool(key: str, value: Any) -> bool:
    """Coerce a bool or its string spelling (table properties are strings)."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise SerDeConfigError("Expected a boolean", key=key, value=value)


def _coerce_int(key: str, value: Any) -> int:
    """Coerce an int or a decimal string."""
    if isinstance(value, bool):
        raise SerDeConfigError("Expected an integer", key=key, value=value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise SerDeConfigError("Expected an integer", key=key, value=value)


@dataclass
class DeserializerSettings:
    """
    Configuration for CloudFront line deserialization.

    clear_unmatched_fields resets a reused record before every parse, so a
    legacy line never inherits host_header/protocol/bytes from an earlier
    current-format line. Turning it off restores the original SerDe
    behavior of leaving those fields as they were.
    """

    clear_unmatched_fields: bool = True
    log_legacy_fallback: bool = True

    # 0 disables the limit
    max_line_length: int = 0

    def validate(self) -> list[str]:
        """Validate settings values. Returns list of errors."""
        errors = []

        if self.max_line_length < 0:
            errors.append(
                f"max_line_length must be >= 0, got {self.max_line_length}"
            )

        return errors

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "clear_unmatched_fields": self.clear_unmatched_fields,
            "log_legacy_fallback": self.log_legacy_fallback,
            "max_line_length": self.max_line_length,
        }

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "DeserializerSettings":
        """
        Create from configuration dictionary.

        Values may be native YAML types or strings, as host table
        properties are.

        Raises:
            SerDeConfigError: If a value cannot be coerced or fails validation
        """
        settings = cls(
            clear_unmatched_fields=_coerce_bool(
                "clear_unmatched_fields", config.get("clear_unmatched_fields", True)
            ),
            log_legacy_fallback=_coerce_bool(
                "log_legacy_fallback", config.get("log_legacy_fallback", True)
            ),
            max_line_length=_coerce_int(
                "max_line_length", config.get("max_line_length", 0)
            ),
        )
        errors = settings.validate()
        if errors:
            raise SerDeConfigError(f"Invalid deserializer settings: {'; '.join(errors)}")
        return settings

    @classmethod
    def from_env(cls) -> "DeserializerSettings":
        """Create from environment variables."""

        def safe_int(key: str, default: int) -> int:
            """Safely parse int from env var, using default on error."""
            try:
                value = int(os.environ.get(key, str(default)))
            except ValueError:
                logger.warning(f"Ignoring non-integer {key}, using {default}")
                return default
            if value < 0:
                logger.warning(f"Ignoring negative {key}, using {default}")
                return default
            return value

        def safe_bool(key: str, default: bool) -> bool:
            """Safely parse bool from env var, using default on error."""
            value = os.environ.get(key)
            if value is None:
                return default
            try:
                return _coerce_bool(key, value)
            except SerDeConfigError:
                logger.warning(f"Ignoring non-boolean {key}, using {default}")
                return default

        return cls(
            clear_unmatched_fields=safe_bool(ENV_CLEAR_UNMATCHED_FIELDS, True),
            log_legacy_fallback=safe_bool(ENV_LOG_LEGACY_FALLBACK, True),
            max_line_length=safe_int(ENV_MAX_LINE_LENGTH, 0),
        )


# Default config file path
DEFAULT_CONFIG_PATH = Path("cf_log_serde.yaml")


@lru_cache
def get_settings(config_path: Optional[str] = None) -> DeserializerSettings:
    """
    Get cached settings instance.

    Loads from the YAML config file if available, otherwise from env vars.

    Args:
        config_path: Optional path to a YAML config file

    Returns:
        DeserializerSettings instance
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if path.exists():
        from .loader import load_deserializer_section

        return DeserializerSettings.from_dict(load_deserializer_section(path))

    return DeserializerSettings.from_env()


def clear_settings_cache() -> None:
    """Clear the cached settings (useful for testing)."""
    get_settings.cache_clear()
