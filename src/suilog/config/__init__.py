"""Application configuration helpers."""

from __future__ import annotations

from .catalog import DEFAULT_CATALOG_URL, CatalogConfig, get_catalog_config
from .check_in import CheckInConfig, get_check_in_config
from .env import env_bool, env_float, optional_env_var
from .errors import ConfigurationError
from .http_client import HttpClientConfig
from .logging import configure_logging
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "DEFAULT_CATALOG_URL",
    "CatalogConfig",
    "CheckInConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "HttpClientConfig",
    "StorageConfig",
    "configure_logging",
    "env_bool",
    "env_float",
    "get_catalog_config",
    "get_check_in_config",
    "get_database_config",
    "get_storage_config",
    "optional_env_var",
]
