"""Shared fixtures for Kubernetes adapter tests."""

from __future__ import annotations

import pytest
from kubernetes.client import Configuration

from bindmap.config.kubernetes import KubernetesConfig


@pytest.fixture
def kubernetes_config() -> KubernetesConfig:
    return KubernetesConfig(
        api=Configuration(
            host="https://cluster.example:6443",
            api_key={"authorization": "token"},
            api_key_prefix={"authorization": "Bearer"},
        ),
        page_size=2,
    )
