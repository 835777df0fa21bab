"""Application configuration helpers."""

from __future__ import annotations

from .anthropic import AnthropicConfig, get_anthropic_config
from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .storage import StorageConfig, get_storage_config
from .sweep import SweepConfig, get_sweep_config

__all__ = [
    "AnthropicConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "SweepConfig",
    "configure_logging",
    "get_anthropic_config",
    "get_storage_config",
    "get_sweep_config",
    "optional_env_var",
    "require_env_vars",
]
