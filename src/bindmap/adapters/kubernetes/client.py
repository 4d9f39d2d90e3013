"""Read-only access to the Kubernetes API server."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from kubernetes import client as kube_client
from kubernetes.client.exceptions import ApiException
from pydantic import ValidationError
from urllib3.exceptions import HTTPError as TransportError

from .schema import ObjectList

if TYPE_CHECKING:
    from kubernetes.client import V1APIGroupList, V1APIResourceList

    from bindmap.config.kubernetes import KubernetesConfig
    from bindmap.domain.model import GroupVersionResource

log = getLogger(__name__)

NOT_FOUND = 404
CORE_VERSION = "v1"


class KubernetesAPIError(RuntimeError):
    """Raised when the API server returns an unexpected response."""


# What a call to the API server raises besides programming errors. OSError
# covers TLS setup and socket failures that urllib3 does not wrap.
API_ERRORS: tuple[type[Exception], ...] = (
    ApiException,
    TransportError,
    OSError,
    KubernetesAPIError,
)


class KubernetesClient:
    """The few read-only endpoints the mapper needs.

    Calls block the calling thread. From a coroutine, run them through
    ``asyncio.to_thread``.
    """

    def __init__(
        self,
        *,
        config: KubernetesConfig,
        custom_objects: kube_client.CustomObjectsApi | None = None,
        core: kube_client.CoreV1Api | None = None,
        apis: kube_client.ApisApi | None = None,
    ) -> None:
        self._config = config
        api_client = kube_client.ApiClient(configuration=config.api)
        self._custom_objects = custom_objects or kube_client.CustomObjectsApi(api_client)
        self._core = core or kube_client.CoreV1Api(api_client)
        self._apis = apis or kube_client.ApisApi(api_client)

    def list_custom_objects(
        self,
        gvr: GroupVersionResource,
        *,
        namespace: str | None = None,
        page_size: int | None = None,
    ) -> list[dict[str, object]]:
        """Return every custom object of ``gvr``, following ``continue`` tokens."""

        limit = page_size or self._config.page_size
        items: list[dict[str, object]] = []
        continue_token: str | None = None
        while True:
            page = self._list_page(gvr, namespace=namespace, limit=limit, token=continue_token)
            items.extend(page.items)
            continue_token = page.metadata.continue_token
            if not continue_token:
                break

        log.debug("Listed %d %s in %s", len(items), gvr.resource, namespace or "all namespaces")
        return items

    def get_api_groups(self) -> V1APIGroupList:
        return self._apis.get_api_versions(_request_timeout=self._config.timeout_seconds)

    def get_resource_list(self, group: str, version: str) -> V1APIResourceList | None:
        """Return the discovery document of ``group/version``, or None if it is not served."""

        timeout = self._config.timeout_seconds
        if not group and version != CORE_VERSION:
            return None
        try:
            if not group:
                return self._core.get_api_resources(_request_timeout=timeout)
            return self._custom_objects.get_api_resources(group, version, _request_timeout=timeout)
        except ApiException as exc:
            if exc.status == NOT_FOUND:
                return None
            raise

    def _list_page(
        self,
        gvr: GroupVersionResource,
        *,
        namespace: str | None,
        limit: int,
        token: str | None,
    ) -> ObjectList:
        options: dict[str, object] = {
            "limit": limit,
            "_request_timeout": self._config.timeout_seconds,
        }
        if token:
            options["_continue"] = token

        if namespace:
            payload = self._custom_objects.list_namespaced_custom_object(
                gvr.group, gvr.version, namespace, gvr.resource, **options
            )
        else:
            payload = self._custom_objects.list_cluster_custom_object(
                gvr.group, gvr.version, gvr.resource, **options
            )

        if not isinstance(payload, dict):
            raise KubernetesAPIError(f"Unexpected list payload for {gvr}")
        try:
            return ObjectList.model_validate(payload)
        except ValidationError as exc:
            raise KubernetesAPIError(f"Malformed list payload for {gvr}: {exc}") from exc
