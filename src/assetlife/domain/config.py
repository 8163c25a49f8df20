from __future__ import annotations

"""
Configuration Domain Management.

Builds the generation configuration from defaults and an optional JSON
file. The resulting dictionary drives the generation engine after it has
been merged with CLI overrides and validated.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from assetlife.domain.constants import CURRENT_CONFIG_VERSION

logger = logging.getLogger(__name__)

CONFIG_KEYS = ("input_path", "output_path", "package_name", "log_level", "log_file")


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default generation configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": "",
        "output_path": "",

        # Generated artifact
        "package_name": "",

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration, layering a JSON file over the defaults.

    Unknown keys in the file are ignored. A missing or unreadable file is
    reported and the defaults are returned.

    Args:
        config_file: Optional path to a JSON configuration file.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    if not config_file:
        return config

    if not os.path.exists(config_file):
        logger.warning(f"Config file not found at '{config_file}'. Using defaults.")
        return config

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{config_file}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    version = data.get("version")
    if version and version != CURRENT_CONFIG_VERSION:
        logger.debug(f"Config schema {version} differs from {CURRENT_CONFIG_VERSION}.")

    for key in CONFIG_KEYS:
        if key in data:
            config[key] = data[key]

    logger.debug(f"Configuration loaded from {config_file}")
    return config
