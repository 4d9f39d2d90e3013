from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, cast

import pytest
from kubernetes.client.exceptions import ApiException

from bindmap.adapters.kubernetes import KubernetesAPIError, KubernetesClient
from bindmap.domain.model import SERVICE_BINDING_GVR
from tests.support.kube_api import (
    FakeApisApi,
    FakeCoreV1Api,
    FakeCustomObjectsApi,
    api_group,
    api_resource,
    resource_list,
)

if TYPE_CHECKING:
    from kubernetes.client import ApisApi, CoreV1Api, CustomObjectsApi

    from bindmap.config.kubernetes import KubernetesConfig


def _client(
    config: KubernetesConfig,
    custom_objects: FakeCustomObjectsApi,
    apis: FakeApisApi | None = None,
) -> KubernetesClient:
    return KubernetesClient(
        config=config,
        custom_objects=cast("CustomObjectsApi", custom_objects),
        core=cast("CoreV1Api", FakeCoreV1Api()),
        apis=cast("ApisApi", apis or FakeApisApi()),
    )


def test_list_follows_continue_tokens(kubernetes_config: KubernetesConfig) -> None:
    custom_objects = FakeCustomObjectsApi(
        pages={
            None: {"metadata": {"continue": "page-2"}, "items": [{"n": 1}, {"n": 2}]},
            "page-2": {"metadata": {"continue": ""}, "items": [{"n": 3}]},
        }
    )
    client = _client(kubernetes_config, custom_objects)

    items = client.list_custom_objects(SERVICE_BINDING_GVR, namespace="ns1")

    assert items == [{"n": 1}, {"n": 2}, {"n": 3}]
    assert [call.get("_continue") for call in custom_objects.list_calls] == [None, "page-2"]
    first = custom_objects.list_calls[0]
    assert first["group"] == "binding.operators.coreos.com"
    assert first["plural"] == "servicebindings"
    assert first["namespace"] == "ns1"
    assert first["limit"] == 2


def test_list_without_namespace_is_cluster_wide(kubernetes_config: KubernetesConfig) -> None:
    custom_objects = FakeCustomObjectsApi(pages={None: {"items": [{"n": 1}]}})
    client = _client(kubernetes_config, custom_objects)

    assert client.list_custom_objects(SERVICE_BINDING_GVR) == [{"n": 1}]
    assert "namespace" not in custom_objects.list_calls[0]


def test_api_errors_are_raised(kubernetes_config: KubernetesConfig) -> None:
    custom_objects = FakeCustomObjectsApi(error=ApiException(status=403, reason="Forbidden"))
    client = _client(kubernetes_config, custom_objects)

    with pytest.raises(ApiException):
        client.list_custom_objects(SERVICE_BINDING_GVR)


def test_malformed_page_raises_api_error(kubernetes_config: KubernetesConfig) -> None:
    custom_objects = FakeCustomObjectsApi(pages={None: {"items": "not-a-list"}})
    client = _client(kubernetes_config, custom_objects)

    with pytest.raises(KubernetesAPIError, match="Malformed list payload"):
        client.list_custom_objects(SERVICE_BINDING_GVR)


def test_missing_group_version_returns_none(kubernetes_config: KubernetesConfig) -> None:
    client = _client(kubernetes_config, FakeCustomObjectsApi())

    assert client.get_resource_list("gone.example.com", "v1") is None


def test_core_group_serves_only_v1(kubernetes_config: KubernetesConfig) -> None:
    client = _client(kubernetes_config, FakeCustomObjectsApi())

    core = client.get_resource_list("", "v1")

    assert core is not None
    assert [resource.name for resource in core.resources] == ["secrets"]
    assert client.get_resource_list("", "v2") is None


def test_named_group_resources_and_group_list(kubernetes_config: KubernetesConfig) -> None:
    apps = resource_list("apps/v1", api_resource("deployments", "Deployment", "deployment"))
    client = _client(
        kubernetes_config,
        FakeCustomObjectsApi(resource_lists={("apps", "v1"): apps}),
        FakeApisApi(groups=[api_group("apps", "v1")]),
    )

    assert client.get_resource_list("apps", "v1") is apps
    assert [group.name for group in client.get_api_groups().groups] == ["apps"]


def test_calls_work_from_inside_a_running_event_loop(kubernetes_config: KubernetesConfig) -> None:
    custom_objects = FakeCustomObjectsApi(pages={None: {"items": [{"n": 1}]}})
    client = _client(kubernetes_config, custom_objects)

    async def list_from_coroutine() -> list[dict[str, object]]:
        return client.list_custom_objects(SERVICE_BINDING_GVR)

    assert asyncio.run(list_from_coroutine()) == [{"n": 1}]
