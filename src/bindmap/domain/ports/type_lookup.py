"""Ports for cluster type metadata."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from bindmap.domain.model import GroupVersionKind, GroupVersionResource


@runtime_checkable
class Referable(Protocol):
    """Anything that can yield a Kind or a Resource type identifier.

    Each method raises ``TypeResolutionError`` when the form is not carried directly.
    """

    def group_version_kind(self) -> GroupVersionKind: ...

    def group_version_resource(self) -> GroupVersionResource: ...


@runtime_checkable
class RESTMapper(Protocol):
    """Cluster metadata lookup between the Kind and Resource forms of a type."""

    def resource_for_kind(self, gvk: GroupVersionKind) -> GroupVersionResource: ...

    def kind_for_resource(self, gvr: GroupVersionResource) -> GroupVersionKind: ...
