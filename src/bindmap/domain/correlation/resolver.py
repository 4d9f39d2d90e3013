"""Bidirectional mapping between the Kind and Resource forms of a type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bindmap.domain.errors import TypeResolutionError

if TYPE_CHECKING:
    from bindmap.domain.model import GroupVersionKind, GroupVersionResource
    from bindmap.domain.ports import Referable, RESTMapper


@dataclass(slots=True, frozen=True)
class TypeResolver:
    """Resolve references to either type form.

    The form a reference carries directly always wins; cluster metadata is only
    consulted for the missing one. Caching, if any, belongs to ``rest_mapper``.
    """

    rest_mapper: RESTMapper

    def resource_for_referable(self, ref: Referable) -> GroupVersionResource:
        try:
            return ref.group_version_resource()
        except TypeResolutionError:
            gvk = ref.group_version_kind()
        return self.resource_for_kind(gvk)

    def kind_for_referable(self, ref: Referable) -> GroupVersionKind:
        try:
            return ref.group_version_kind()
        except TypeResolutionError:
            gvr = ref.group_version_resource()
        return self.kind_for_resource(gvr)

    def resource_for_kind(self, gvk: GroupVersionKind) -> GroupVersionResource:
        return self.rest_mapper.resource_for_kind(gvk)

    def kind_for_resource(self, gvr: GroupVersionResource) -> GroupVersionKind:
        return self.rest_mapper.kind_for_resource(gvr)
