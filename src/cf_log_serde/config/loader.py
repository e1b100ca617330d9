"""
YAML configuration loader.

Reads deserializer settings from a plain YAML file.
"""

import logging
from pathlib import Path
from typing import Any, Union

import yaml

from ..deserializer.exceptions import SerDeConfigError
from .constants import CONFIG_SECTION

logger = logging.getLogger(__name__)


def load_config_file(file_path: Union[str, Path]) -> dict[str, Any]:
    """
    Load a YAML config file and return its parsed contents.

    Args:
        file_path: Path to the YAML file

    Returns:
        Parsed configuration as dictionary (empty for an empty file)

    Raises:
        FileNotFoundError: If file doesn't exist
        SerDeConfigError: If the file is not valid YAML or not a mapping
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SerDeConfigError(f"Invalid YAML in config file {path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise SerDeConfigError(
            f"Config file {path} must contain a mapping",
            value=type(config).__name__,
        )
    return config


def load_deserializer_section(file_path: Union[str, Path]) -> dict[str, Any]:
    """
    Load the `deserializer:` section of a YAML config file.

    Args:
        file_path: Path to the YAML file

    Returns:
        The section as a dictionary, or {} if the file has no such section
    """
    config = load_config_file(file_path)
    section = config.get(CONFIG_SECTION) or {}
    if not isinstance(section, dict):
        raise SerDeConfigError(
            f"'{CONFIG_SECTION}' section must be a mapping",
            key=CONFIG_SECTION,
            value=section,
        )
    logger.debug(f"Loaded {len(section)} deserializer settings from {file_path}")
    return section
