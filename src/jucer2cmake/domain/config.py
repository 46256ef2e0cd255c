from __future__ import annotations

"""
Configuration Domain Management.

Provides the default translation settings and loads user overrides from a
JSON file. Values are normalized afterwards by the pipeline validator.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from jucer2cmake.domain.constants import (
    DEFAULT_CMAKE_MINIMUM_VERSION,
    DEFAULT_OUTPUT_FILENAME,
)
from jucer2cmake.domain.errors import ConfigError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
MODE_REPROJUCER = "reprojucer"
MODE_JUCE6 = "juce6"
SUPPORTED_MODES = (MODE_REPROJUCER, MODE_JUCE6)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default translation settings.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Output flavour
        "mode": MODE_REPROJUCER,
        "output_filename": DEFAULT_OUTPUT_FILENAME,
        "cmake_minimum_version": DEFAULT_CMAKE_MINIMUM_VERSION,

        # File groups
        "include_root_group": True,
        "compiled_extensions": [".cpp"],

        # Modules
        "header_extension": ".h",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load settings from a JSON file merged over the defaults.

    Unknown keys are ignored with a warning.

    Args:
        path: JSON file to read. None returns the defaults.

    Returns:
        Dict[str, Any]: The merged (not yet validated) configuration.

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object.
    """
    config = get_default_config()
    if not path:
        return config

    if not os.path.isfile(path):
        raise ConfigError(f"configuration file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"cannot read configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"configuration file {path} must contain a JSON object")

    for key, value in data.items():
        if key not in config:
            logger.warning(f"Ignoring unknown configuration key '{key}' in {path}")
            continue
        config[key] = value

    logger.debug(f"Configuration loaded from {path}")
    return config
