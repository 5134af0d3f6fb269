"""YAML configuration loading for the CLI.

Values from the config file override ``Constants`` defaults; CLI flags
override both. Loading never raises so a broken file cannot break the CLI.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)

CONFIG_KEYS = ("log_level", "output_format")


def find_config_path(explicit: Optional[str] = None) -> Optional[str]:
    """Return the config path to load, in priority order.

    Priority:
    1. Explicit path (``--config``)
    2. Environment variable PLUGINKIT_CONFIG
    3. ``pluginkit.yml`` in the working directory, if present
    """
    if explicit:
        return explicit
    env_path = os.environ.get(Constants.ENV_CONFIG)
    if env_path and env_path.strip():
        return env_path.strip()
    if os.path.isfile(Constants.CONFIG_FILE):
        return Constants.CONFIG_FILE
    return None


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load known settings from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Mapping of recognized keys; empty when the file is absent or invalid.
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to load config: %s", e)
        return {}

    if not isinstance(data, dict):
        logger.error("Config file %s must contain a mapping", config_path)
        return {}

    unknown = sorted(set(data) - set(CONFIG_KEYS))
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(str(k) for k in unknown))

    config: Dict[str, Any] = {}
    level = data.get("log_level")
    if level is not None:
        if str(level).upper() in Constants.LOG_LEVELS:
            config["log_level"] = str(level).upper()
        else:
            logger.warning("Ignoring invalid log_level: %s", level)
    output_format = data.get("output_format")
    if output_format is not None:
        if str(output_format).lower() in Constants.OUTPUT_FORMATS:
            config["output_format"] = str(output_format).lower()
        else:
            logger.warning("Ignoring invalid output_format: %s", output_format)
    return config
