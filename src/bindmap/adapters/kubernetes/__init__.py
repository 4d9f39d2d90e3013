"""Kubernetes API server adapter."""

from __future__ import annotations

from .client import API_ERRORS, KubernetesAPIError, KubernetesClient
from .lister import KubernetesBindingLister
from .restmapper import DiscoveryRESTMapper
from .schema import ServiceBindingManifest
from .translator import decode_service_binding, translate_service_binding

__all__ = [
    "API_ERRORS",
    "DiscoveryRESTMapper",
    "KubernetesAPIError",
    "KubernetesBindingLister",
    "KubernetesClient",
    "ServiceBindingManifest",
    "decode_service_binding",
    "translate_service_binding",
]
