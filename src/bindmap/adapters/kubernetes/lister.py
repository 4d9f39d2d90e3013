"""ServiceBinding listing backed by the API server."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from bindmap.domain.errors import BindingListError
from bindmap.domain.model import SERVICE_BINDING_GVR

from .client import API_ERRORS

if TYPE_CHECKING:
    from bindmap.domain.model import GroupVersionResource
    from bindmap.domain.ports import RawBinding

log = getLogger(__name__)


class CustomObjectListingClient(Protocol):
    def list_custom_objects(
        self,
        gvr: GroupVersionResource,
        *,
        namespace: str | None = None,
        page_size: int | None = None,
    ) -> list[dict[str, object]]: ...


@dataclass(slots=True)
class KubernetesBindingLister:
    """List ServiceBindings in one namespace, or in all of them when ``namespace`` is None."""

    client: CustomObjectListingClient
    namespace: str | None = None

    def list_bindings(self) -> list[RawBinding]:
        scope = self.namespace or "all namespaces"
        try:
            items = self.client.list_custom_objects(SERVICE_BINDING_GVR, namespace=self.namespace)
        except API_ERRORS as exc:
            raise BindingListError(f"Cannot list ServiceBindings in {scope}: {exc}") from exc
        log.debug("Listed %d ServiceBindings in %s", len(items), scope)
        return list(items)
