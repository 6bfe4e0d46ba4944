"""Application configuration helpers."""

from __future__ import annotations

from .app import AppConfig, get_app_config
from .dokploy import DokployConfig, get_dokploy_config, validate_dokploy_config
from .env import parse_duration
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import NO_RETRY, RateLimit, ResilienceConfig, RetryPolicy, validate_base_url
from .logging import configure_logging
from .pangolin import PangolinConfig, get_pangolin_config, validate_pangolin_config
from .sync import SyncConfig, get_sync_config, validate_sync_config

__all__ = [
    "NO_RETRY",
    "AppConfig",
    "ConfigurationError",
    "DokployConfig",
    "MissingConfigurationError",
    "PangolinConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SyncConfig",
    "configure_logging",
    "get_app_config",
    "get_dokploy_config",
    "get_pangolin_config",
    "get_sync_config",
    "parse_duration",
    "validate_base_url",
    "validate_dokploy_config",
    "validate_pangolin_config",
    "validate_sync_config",
]
