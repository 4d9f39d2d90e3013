"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from bindmap.adapters.kubernetes import (
    DiscoveryRESTMapper,
    KubernetesBindingLister,
    KubernetesClient,
    decode_service_binding,
)
from bindmap.config import get_kubernetes_config
from bindmap.domain.correlation import BindingDecodeError, BindingRequestMapper, TypeResolver

if TYPE_CHECKING:
    from bindmap.config import KubernetesConfig
    from bindmap.domain.model import (
        ChangedObject,
        GroupVersionKind,
        ReconcileRequest,
        ServiceBinding,
    )

log = getLogger(__name__)


def build_request_mapper(
    *,
    config: KubernetesConfig | None = None,
    client: KubernetesClient | None = None,
) -> BindingRequestMapper:
    """Wire the API server adapters into a ``BindingRequestMapper``."""

    effective_config = config or get_kubernetes_config()
    effective_client = client or KubernetesClient(config=effective_config)
    log.info(
        "Building request mapper: api=%s, namespace=%s",
        effective_config.api.host,
        effective_config.namespace or "<all>",
    )
    return BindingRequestMapper(
        lister=KubernetesBindingLister(
            client=effective_client,
            namespace=effective_config.namespace,
        ),
        resolver=TypeResolver(rest_mapper=DiscoveryRESTMapper(effective_client)),
        decode=decode_service_binding,
    )


def map_changed_object(
    obj: ChangedObject,
    *,
    mapper: BindingRequestMapper | None = None,
) -> list[ReconcileRequest]:
    """Return the ServiceBindings to reconcile after ``obj`` changed."""

    effective_mapper = mapper or build_request_mapper()
    requests = effective_mapper.map(obj)
    log.info("Object %s %s maps to %d ServiceBinding(s)", obj.gvk, obj.identity, len(requests))
    return requests


def list_watched_kinds(*, mapper: BindingRequestMapper | None = None) -> set[GroupVersionKind]:
    """Return the types a watch layer must observe for the currently stored bindings.

    Raises ``BindingListError`` when the bindings cannot be listed. Malformed
    bindings are skipped.
    """

    effective_mapper = mapper or build_request_mapper()
    bindings: list[ServiceBinding] = []
    for raw in effective_mapper.lister.list_bindings():
        try:
            bindings.append(effective_mapper.decode(raw))
        except BindingDecodeError as exc:
            log.warning("Skipping malformed ServiceBinding: %s", exc)
    return effective_mapper.watched_kinds(bindings)
