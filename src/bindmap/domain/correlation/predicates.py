"""Relationship predicates between a changed object and a ServiceBinding."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from bindmap.common.logging import trace
from bindmap.domain.errors import TypeResolutionError
from bindmap.domain.model import SECRET_GVK, SERVICE_BINDING_GVK

if TYPE_CHECKING:
    from bindmap.domain.model import (
        BindingApplication,
        ChangedObject,
        GroupVersionKind,
        ServiceBinding,
    )

    from .resolver import TypeResolver

log = getLogger(__name__)


def is_service_binding(obj: ChangedObject) -> bool:
    return obj.gvk == SERVICE_BINDING_GVK


def is_secret(obj: ChangedObject) -> bool:
    return obj.gvk == SECRET_GVK


def is_secret_owned_by(secret: ChangedObject, binding: ServiceBinding) -> bool:
    """Whether ``secret`` is the one recorded in the status of ``binding``."""

    return secret.namespace == binding.namespace and secret.name == binding.secret


def is_declared_service(
    resolver: TypeResolver,
    binding: ServiceBinding,
    obj: ChangedObject,
) -> bool:
    """Whether the type of ``obj`` matches one of the services declared by ``binding``.

    A service whose type cannot be resolved does not match; the remaining services
    are still checked.
    """

    for service in binding.services:
        try:
            gvk = resolver.kind_for_referable(service)
        except TypeResolutionError as exc:
            trace(log, "skipping unresolvable service %s: %s", service.describe(), exc)
            continue
        if obj.gvk == gvk:
            return True
    return False


def is_declared_application(
    resolver: TypeResolver,
    application: BindingApplication | None,
    gvk: GroupVersionKind,
    name: str,
) -> bool:
    """Whether ``gvk``/``name`` identifies the application declared by a binding.

    An application reference with an explicit name matches on the name alone.
    Raises ``TypeResolutionError`` when the application type cannot be resolved.
    """

    if application is None:
        return False
    application_gvk = resolver.kind_for_referable(application)
    if application.name:
        return application.name == name
    return gvk == application_gvk
