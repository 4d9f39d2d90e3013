from __future__ import annotations

import ssl

import pytest
from kubernetes.client.exceptions import ApiException
from urllib3.exceptions import MaxRetryError, ReadTimeoutError

from bindmap.adapters.kubernetes import KubernetesAPIError, KubernetesBindingLister
from bindmap.domain.correlation import BindingRequestMapper, TypeResolver
from bindmap.domain.errors import BindingListError
from bindmap.domain.model import SERVICE_BINDING_GVR, GroupVersionResource
from tests.support.kubernetes import FakeRESTMapper, secret


class _ListingClient:
    def __init__(self, result: list[dict[str, object]] | Exception) -> None:
        self._result = result
        self.calls: list[tuple[GroupVersionResource, str | None]] = []

    def list_custom_objects(
        self,
        gvr: GroupVersionResource,
        *,
        namespace: str | None = None,
        page_size: int | None = None,
    ) -> list[dict[str, object]]:
        del page_size
        self.calls.append((gvr, namespace))
        if isinstance(self._result, Exception):
            raise self._result
        return self._result


def test_lists_service_bindings_in_scope() -> None:
    client = _ListingClient([{"metadata": {"name": "b1"}}])
    lister = KubernetesBindingLister(client=client, namespace="ns1")

    assert lister.list_bindings() == [{"metadata": {"name": "b1"}}]
    assert client.calls == [(SERVICE_BINDING_GVR, "ns1")]


@pytest.mark.parametrize(
    "error",
    [
        ApiException(status=403, reason="Forbidden"),
        MaxRetryError(pool=None, url="/apis", reason=None),  # type: ignore[arg-type]
        ReadTimeoutError(pool=None, url="/apis", message="timed out"),  # type: ignore[arg-type]
        FileNotFoundError(2, "No such file or directory", "/etc/ca/missing.crt"),
        ssl.SSLError("certificate verify failed"),
        KubernetesAPIError("unexpected payload"),
    ],
)
def test_listing_failures_become_binding_list_errors(error: Exception) -> None:
    lister = KubernetesBindingLister(client=_ListingClient(error))

    with pytest.raises(BindingListError, match="all namespaces"):
        lister.list_bindings()


def test_unreadable_ca_bundle_yields_no_requests() -> None:
    missing_ca = FileNotFoundError(2, "No such file or directory", "/nonexistent/ca.crt")
    mapper = BindingRequestMapper(
        lister=KubernetesBindingLister(client=_ListingClient(missing_ca)),
        resolver=TypeResolver(rest_mapper=FakeRESTMapper()),
        decode=lambda raw: pytest.fail("nothing should be decoded"),
    )

    assert mapper.map(secret("ns1", "db-secret")) == []
