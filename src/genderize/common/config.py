"""YAML config loading for the client."""
from __future__ import annotations
import logging
from typing import Any

import yaml

from genderize.client import Config
from genderize.common.errors import ConfigurationError

LOGGER = logging.getLogger("genderize.config")

CONFIG_KEYS = ("user_agent", "api_key", "server")

def load_cfg(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def load_config(path: str) -> Config:
    """
    Build a client Config from a YAML file.

    Args:
        path: Path to a YAML mapping with optional keys user_agent, api_key
            and server. Missing or empty values fall back to the defaults.

    Raises:
        ConfigurationError: The document is not a mapping or has unknown keys.
    """
    cfg = load_cfg(path)
    if not isinstance(cfg, dict):
        raise ConfigurationError(f"Config at {path} must be a mapping, got {type(cfg).__name__}")

    unknown = sorted(set(cfg) - set(CONFIG_KEYS))
    if unknown:
        raise ConfigurationError(f"Unknown config keys in {path}: {', '.join(map(str, unknown))}")

    LOGGER.debug("Loaded client config from %s (keys: %s)", path, sorted(cfg))
    return Config(**{key: str(cfg[key] or "") for key in CONFIG_KEYS if key in cfg})
