from __future__ import annotations

from bindmap.domain.correlation import RequestSet
from bindmap.domain.model import NamespacedName, ReconcileRequest


def test_add_is_idempotent() -> None:
    requests = RequestSet()
    identity = NamespacedName(namespace="ns1", name="b1")

    requests.add(identity)
    requests.add(NamespacedName(namespace="ns1", name="b1"))

    assert len(requests) == 1
    assert identity in requests
    assert requests.to_requests() == [ReconcileRequest(target=identity)]


def test_one_request_per_distinct_identity() -> None:
    requests = RequestSet()
    for namespace, name in [("ns1", "b1"), ("ns2", "b1"), ("ns1", "b2"), ("ns1", "b1")]:
        requests.add(NamespacedName(namespace=namespace, name=name))

    targets = {request.target for request in requests.to_requests()}

    assert targets == {
        NamespacedName("ns1", "b1"),
        NamespacedName("ns2", "b1"),
        NamespacedName("ns1", "b2"),
    }


def test_empty_set_yields_no_requests() -> None:
    assert RequestSet().to_requests() == []
