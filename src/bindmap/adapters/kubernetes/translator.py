"""Translate ServiceBinding manifests into domain objects."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, cast

from pydantic import ValidationError

from bindmap.domain.errors import BindingDecodeError
from bindmap.domain.model import (
    BindingApplication,
    BindingService,
    NamespacedName,
    ServiceBinding,
)

from .schema import ApplicationPayload, ServiceBindingManifest, ServicePayload

if TYPE_CHECKING:
    from bindmap.domain.ports import RawBinding


def decode_service_binding(raw: RawBinding) -> ServiceBinding:
    """Decode one stored ServiceBinding; raises ``BindingDecodeError`` on malformed input."""

    try:
        manifest = ServiceBindingManifest.model_validate(raw)
    except ValidationError as exc:
        identity = _identity_hint(raw)
        label = str(identity) if identity is not None else "<unnamed>"
        raise BindingDecodeError(
            f"ServiceBinding {label} is malformed: {exc.error_count()} validation error(s)",
            identity=identity,
        ) from exc
    return translate_service_binding(manifest)


def translate_service_binding(manifest: ServiceBindingManifest) -> ServiceBinding:
    application = manifest.spec.application
    return ServiceBinding(
        namespace=manifest.metadata.namespace,
        name=manifest.metadata.name,
        services=tuple(_translate_service(service) for service in manifest.spec.services),
        application=_translate_application(application) if application is not None else None,
        secret=manifest.status.secret,
    )


def _translate_service(payload: ServicePayload) -> BindingService:
    return BindingService(
        group=payload.group,
        version=payload.version,
        kind=payload.kind,
        resource=payload.resource,
        name=payload.name,
        namespace=payload.namespace,
        env_var_prefix=payload.env_var_prefix,
        id=payload.id,
    )


def _translate_application(payload: ApplicationPayload) -> BindingApplication:
    labels = payload.label_selector.match_labels if payload.label_selector is not None else {}
    return BindingApplication(
        group=payload.group,
        version=payload.version,
        kind=payload.kind,
        resource=payload.resource,
        name=payload.name,
        label_selector=MappingProxyType(dict(labels)),
    )


def _identity_hint(raw: RawBinding) -> NamespacedName | None:
    if not isinstance(raw, Mapping):
        return None
    metadata = raw.get("metadata")
    if not isinstance(metadata, Mapping):
        return None
    metadata = cast(Mapping[str, object], metadata)
    name = metadata.get("name")
    namespace = metadata.get("namespace")
    if not isinstance(name, str):
        return None
    return NamespacedName(namespace=namespace if isinstance(namespace, str) else "", name=name)
