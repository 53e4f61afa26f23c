"""Application configuration helpers."""

from __future__ import annotations

from .catalogs import DEFAULT_CATALOGS, CatalogSource, catalog_names, get_catalogs, select_catalogs
from .env import get_env, get_env_choice, get_env_list
from .errors import ConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .publishers import get_publisher_resilience
from .storage import StorageConfig, get_storage_config

__all__ = [
    "DEFAULT_CATALOGS",
    "CacheConfig",
    "CatalogSource",
    "ConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "catalog_names",
    "configure_logging",
    "get_catalogs",
    "get_env",
    "get_env_choice",
    "get_env_list",
    "get_publisher_resilience",
    "get_storage_config",
    "select_catalogs",
]
