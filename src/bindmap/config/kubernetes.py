"""Kubernetes API server configuration values."""

from __future__ import annotations

import ssl
from dataclasses import dataclass

from kubernetes import client as kube_client
from kubernetes import config as kube_config
from kubernetes.config.config_exception import ConfigException

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RetryPolicy, build_retry

DEFAULT_PAGE_SIZE = 500
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class KubernetesConfig:
    api: kube_client.Configuration
    # None lists ServiceBindings across all namespaces.
    namespace: str | None = None
    page_size: int = DEFAULT_PAGE_SIZE
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def get_kubernetes_config(*, retry: RetryPolicy | None = None) -> KubernetesConfig:
    """Load API server settings.

    ``KUBERNETES_API_URL``/``KUBERNETES_TOKEN`` take precedence. Otherwise the
    kubeconfig (``KUBECONFIG``, ``KUBERNETES_CONTEXT``) is tried, then the
    in-cluster service account.
    """

    if optional_env_var("KUBERNETES_API_URL") is not None:
        api = _explicit_api_server()
    else:
        api = _load_cluster_credentials()

    _check_ca_bundle(api.ssl_ca_cert)
    api.retries = build_retry(retry or RetryPolicy())

    namespace = optional_env_var("BINDMAP_WATCH_NAMESPACE") or optional_env_var(
        "KUBERNETES_NAMESPACE"
    )
    return KubernetesConfig(api=api, namespace=namespace, page_size=_page_size())


def _explicit_api_server() -> kube_client.Configuration:
    values = require_env_vars(("KUBERNETES_API_URL", "KUBERNETES_TOKEN"))
    api = kube_client.Configuration(
        host=values["KUBERNETES_API_URL"].rstrip("/"),
        api_key={"authorization": values["KUBERNETES_TOKEN"]},
        api_key_prefix={"authorization": "Bearer"},
    )
    api.ssl_ca_cert = optional_env_var("KUBERNETES_CA_FILE")
    return api


def _load_cluster_credentials() -> kube_client.Configuration:
    api = kube_client.Configuration()
    try:
        kube_config.load_kube_config(
            config_file=optional_env_var("KUBECONFIG"),
            context=optional_env_var("KUBERNETES_CONTEXT"),
            client_configuration=api,
        )
    except ConfigException as kubeconfig_error:
        try:
            kube_config.load_incluster_config(client_configuration=api)
        except ConfigException as exc:
            raise MissingConfigurationError(
                "Missing configuration for: KUBERNETES_API_URL, KUBERNETES_TOKEN "
                f"(no usable kubeconfig: {kubeconfig_error}; not in a cluster: {exc})"
            ) from exc
    return api


def _check_ca_bundle(path: str | None) -> None:
    if path is None:
        return
    try:
        ssl.create_default_context(cafile=path)
    except OSError as exc:
        raise ConfigurationError(f"Cannot load CA bundle {path}: {exc}") from exc


def _page_size() -> int:
    raw = optional_env_var("BINDMAP_LIST_PAGE_SIZE")
    if raw is None:
        return DEFAULT_PAGE_SIZE
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"BINDMAP_LIST_PAGE_SIZE must be an integer: {raw!r}") from exc
    if value <= 0:
        raise ConfigurationError("BINDMAP_LIST_PAGE_SIZE must be positive")
    return value
