"""Translate one changed cluster object into ServiceBinding reconcile requests.

The mapper inspects an arbitrary object (a Secret, a Deployment, a custom
resource...) and works out which ServiceBindings reference it, either as the
secret they generated, as a declared backing service or as their application.
There is no secondary index: every change triggers a scan over the stored
bindings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from bindmap.common.logging import trace
from bindmap.domain.errors import BindingDecodeError, BindingListError, TypeResolutionError
from bindmap.domain.model import SECRET_GVK, SERVICE_BINDING_GVK, ReconcileRequest

from .predicates import (
    is_declared_application,
    is_declared_service,
    is_secret,
    is_secret_owned_by,
    is_service_binding,
)
from .request_set import RequestSet

if TYPE_CHECKING:
    from collections.abc import Iterable, MutableMapping

    from bindmap.domain.model import ChangedObject, GroupVersionKind, ServiceBinding
    from bindmap.domain.ports import BindingDecoder, BindingLister

    from .resolver import TypeResolver

log = logging.getLogger(__name__)


class _ObjectLogAdapter(logging.LoggerAdapter):  # type: ignore[type-arg]
    """Prefix every record with the changed object it concerns."""

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = self.extra or {}
        return f"[{extra['object_namespace']}/{extra['object_name']}] {msg}", kwargs


@dataclass(slots=True)
class BindingRequestMapper:
    """Map changed objects to the ServiceBindings that must be reconciled.

    ``map`` is synchronous and blocks while the lister and the REST mapper talk
    to the API server. An asyncio watch loop should call it through
    ``asyncio.to_thread`` rather than directly from a coroutine.
    """

    lister: BindingLister
    resolver: TypeResolver
    decode: BindingDecoder
    logger: logging.Logger = field(default=log)

    def __call__(self, obj: ChangedObject) -> list[ReconcileRequest]:
        return self.map(obj)

    def map(self, obj: ChangedObject) -> list[ReconcileRequest]:
        """Return one request per ServiceBinding affected by the change to ``obj``.

        Never raises: a listing failure yields an empty list and relies on the
        event being delivered again.
        """

        obj_log = _ObjectLogAdapter(
            self.logger,
            {"object_namespace": obj.namespace, "object_name": obj.name},
        )

        if is_service_binding(obj):
            requests = [ReconcileRequest(target=obj.identity)]
            obj_log.debug("object is a ServiceBinding, requests=%s", requests)
            return requests

        try:
            items = self.lister.list_bindings()
        except BindingListError as exc:
            obj_log.error("listing ServiceBindings failed: %s", exc)
            return []

        matched = RequestSet()
        for item in items:
            try:
                binding = self.decode(item)
            except BindingDecodeError as exc:
                obj_log.error("decoding ServiceBinding failed: %s", exc)
                continue
            self._collect(obj, binding, matched, obj_log)

        requests = matched.to_requests()
        if requests:
            obj_log.debug("found %d ServiceBindings for object: %s", len(requests), requests)
        else:
            obj_log.debug("no ServiceBindings found for object")
        return requests

    def _collect(
        self,
        obj: ChangedObject,
        binding: ServiceBinding,
        matched: RequestSet,
        obj_log: _ObjectLogAdapter,
    ) -> None:
        identity = binding.identity

        if is_secret(obj) and is_secret_owned_by(obj, binding):
            obj_log.debug("object is the secret owned by ServiceBinding %s", identity)
            matched.add(identity)
        else:
            trace(obj_log, "object is not a secret owned by ServiceBinding %s", identity)

        if is_declared_service(self.resolver, binding, obj):
            obj_log.debug("object is a service declared by ServiceBinding %s", identity)
            matched.add(identity)
        else:
            trace(obj_log, "object is not a service declared by ServiceBinding %s", identity)

        try:
            is_application = is_declared_application(
                self.resolver,
                binding.application,
                obj.gvk,
                obj.name,
            )
        except TypeResolutionError as exc:
            obj_log.error(
                "resolving application of ServiceBinding %s failed: %s",
                identity,
                exc,
            )
            return

        if is_application:
            obj_log.debug("object is the application of ServiceBinding %s", identity)
            matched.add(identity)
        else:
            trace(obj_log, "object is not the application of ServiceBinding %s", identity)

    def watched_kinds(self, bindings: Iterable[ServiceBinding]) -> set[GroupVersionKind]:
        """Return the types whose changes can affect ``bindings``.

        Always includes ServiceBinding and Secret. Service and application references
        that cannot be resolved are skipped.
        """

        kinds: set[GroupVersionKind] = {SERVICE_BINDING_GVK, SECRET_GVK}
        for binding in bindings:
            references = [*binding.services]
            if binding.application is not None:
                references.append(binding.application)
            for reference in references:
                try:
                    kinds.add(self.resolver.kind_for_referable(reference))
                except TypeResolutionError as exc:
                    self.logger.warning(
                        "cannot watch %s declared by ServiceBinding %s: %s",
                        reference.describe(),
                        binding.identity,
                        exc,
                    )
        return kinds
