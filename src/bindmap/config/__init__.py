"""Application configuration helpers."""

from __future__ import annotations

from bindmap.common.logging import configure_logging

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RetryPolicy, build_retry
from .kubernetes import KubernetesConfig, get_kubernetes_config

__all__ = [
    "ConfigurationError",
    "KubernetesConfig",
    "MissingConfigurationError",
    "RetryPolicy",
    "build_retry",
    "configure_logging",
    "get_kubernetes_config",
    "optional_env_var",
    "require_env_vars",
]
