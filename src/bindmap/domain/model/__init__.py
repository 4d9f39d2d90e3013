"""Value objects shared by the correlation core and its adapters."""

from __future__ import annotations

from .binding import ServiceBinding
from .identity import NamespacedName, ReconcileRequest
from .objects import ChangedObject
from .references import BindingApplication, BindingService, ObjectReference
from .types import (
    SECRET_GVK,
    SERVICE_BINDING_GROUP,
    SERVICE_BINDING_GVK,
    SERVICE_BINDING_GVR,
    SERVICE_BINDING_VERSION,
    GroupVersionKind,
    GroupVersionResource,
)

__all__ = [
    "SECRET_GVK",
    "SERVICE_BINDING_GROUP",
    "SERVICE_BINDING_GVK",
    "SERVICE_BINDING_GVR",
    "SERVICE_BINDING_VERSION",
    "BindingApplication",
    "BindingService",
    "ChangedObject",
    "GroupVersionKind",
    "GroupVersionResource",
    "NamespacedName",
    "ObjectReference",
    "ReconcileRequest",
    "ServiceBinding",
]
