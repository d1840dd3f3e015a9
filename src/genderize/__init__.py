"""
Genderize client package.

Provides:
- A batching client for the Genderize.io name-to-gender API
- A module-level ``get`` helper backed by a default client
- YAML config loading and logging setup helpers
"""
from __future__ import annotations

from genderize.client import BATCH_SIZE, DEFAULT_SERVER, VERSION as __version__, Client, Config, get
from genderize.common.config import load_config
from genderize.common.errors import ConfigurationError, ServerError
from genderize.common.logging_setup import setup_logging
from genderize.common.schema import FEMALE, MALE, UNKNOWN, Query, RateLimit, Response

__all__ = [
    "BATCH_SIZE",
    "DEFAULT_SERVER",
    "FEMALE",
    "MALE",
    "UNKNOWN",
    "Client",
    "Config",
    "ConfigurationError",
    "Query",
    "RateLimit",
    "Response",
    "ServerError",
    "__version__",
    "get",
    "load_config",
    "setup_logging",
]
