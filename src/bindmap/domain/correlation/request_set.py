"""Deduplicated collection of ServiceBinding identities to reconcile."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bindmap.domain.model import ReconcileRequest

if TYPE_CHECKING:
    from collections.abc import Iterator

    from bindmap.domain.model import NamespacedName


class RequestSet:
    def __init__(self) -> None:
        self._identities: set[NamespacedName] = set()

    def add(self, identity: NamespacedName) -> None:
        self._identities.add(identity)

    def to_requests(self) -> list[ReconcileRequest]:
        return [ReconcileRequest(target=identity) for identity in self._identities]

    def __contains__(self, identity: object) -> bool:
        return identity in self._identities

    def __iter__(self) -> Iterator[NamespacedName]:
        return iter(self._identities)

    def __len__(self) -> int:
        return len(self._identities)
