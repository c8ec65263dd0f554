"""Application configuration helpers."""

from __future__ import annotations

from .env import env_flag, optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .reconciler import DEFAULT_EXTENDLV, ReconcilerConfig, get_reconciler_config
from .webhook import WebhookConfig, build_webhook_config, get_webhook_config

__all__ = [
    "DEFAULT_EXTENDLV",
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ReconcilerConfig",
    "ResilienceConfig",
    "RetryPolicy",
    "WebhookConfig",
    "build_webhook_config",
    "configure_logging",
    "env_flag",
    "get_reconciler_config",
    "get_webhook_config",
    "optional_env_var",
    "require_env_vars",
]
