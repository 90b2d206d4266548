"""Application configuration helpers."""

from __future__ import annotations

from .env import env_with_defaults
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig
from .logging import configure_logging
from .remote import RemoteConfig, get_remote_config
from .storage import DEFAULT_DATA_ROOTS, StorageConfig, get_storage_config

__all__ = [
    "DEFAULT_DATA_ROOTS",
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "RemoteConfig",
    "ResilienceConfig",
    "StorageConfig",
    "configure_logging",
    "env_with_defaults",
    "get_remote_config",
    "get_storage_config",
]
