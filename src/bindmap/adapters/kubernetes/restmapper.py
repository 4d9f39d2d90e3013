"""REST mapping backed by the API server discovery endpoints.

Discovery documents are cached per group/version. A lookup that finds nothing
drops the cached documents of that API group and tries once more, so custom
resource definitions registered after the first lookup are picked up without a
restart. Documents younger than ``refresh_interval`` are trusted as they are;
a type that is simply not installed does not refetch discovery on every event.
"""

from __future__ import annotations

import threading
import time
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from bindmap.domain.errors import AmbiguousTypeError, TypeNotFoundError, TypeResolutionError
from bindmap.domain.model import GroupVersionKind, GroupVersionResource

from .client import API_ERRORS, CORE_VERSION

if TYPE_CHECKING:
    from collections.abc import Callable

    from kubernetes.client import V1APIGroup, V1APIGroupList, V1APIResource, V1APIResourceList

log = getLogger(__name__)

DEFAULT_REFRESH_INTERVAL = 30.0


class DiscoveryClient(Protocol):
    def get_api_groups(self) -> V1APIGroupList: ...

    def get_resource_list(self, group: str, version: str) -> V1APIResourceList | None: ...


def ordered_versions(group: V1APIGroup) -> tuple[str, ...]:
    """Served versions of ``group``, preferred version first."""

    versions = [entry.version for entry in group.versions or ()]
    preferred = group.preferred_version.version if group.preferred_version else None
    if preferred is not None and preferred in versions:
        versions.remove(preferred)
        versions.insert(0, preferred)
    return tuple(versions)


def is_subresource(resource: V1APIResource) -> bool:
    return "/" in resource.name


class DiscoveryRESTMapper:
    def __init__(
        self,
        client: DiscoveryClient,
        *,
        refresh_interval: float = DEFAULT_REFRESH_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._client = client
        self._refresh_interval = refresh_interval
        self._clock = clock
        self._lock = threading.Lock()
        self._group_versions: dict[str, tuple[str, ...]] | None = None
        self._group_versions_fetched_at = 0.0
        self._resources: dict[tuple[str, str], tuple[V1APIResource, ...]] = {}
        self._resources_fetched_at: dict[tuple[str, str], float] = {}

    def invalidate(self, group: str | None = None) -> None:
        """Forget cached discovery documents, of one API group or of all of them."""

        with self._lock:
            for key in list(self._resources):
                if group is None or key[0] == group:
                    del self._resources[key]
                    del self._resources_fetched_at[key]
            # The core group is not part of the group list.
            if group != "":
                self._group_versions = None
        log.debug("Discovery cache invalidated for %s", _group_label(group))

    def resource_for_kind(self, gvk: GroupVersionKind) -> GroupVersionResource:
        return self._with_refresh(gvk.group, lambda: self._resource_for_kind(gvk))

    def kind_for_resource(self, gvr: GroupVersionResource) -> GroupVersionKind:
        return self._with_refresh(gvr.group, lambda: self._kind_for_resource(gvr))

    def _with_refresh[T](self, group: str, lookup: Callable[[], T]) -> T:
        try:
            return lookup()
        except TypeNotFoundError:
            if not self._is_stale(group):
                raise
        self.invalidate(group)
        return lookup()

    def _is_stale(self, group: str) -> bool:
        with self._lock:
            fetched_at = [
                at for key, at in self._resources_fetched_at.items() if key[0] == group
            ]
            if group and self._group_versions is not None:
                fetched_at.append(self._group_versions_fetched_at)
        if not fetched_at:
            return True
        return self._clock() - min(fetched_at) >= self._refresh_interval

    def _resource_for_kind(self, gvk: GroupVersionKind) -> GroupVersionResource:
        for version in self._candidate_versions(gvk.group, gvk.version):
            matches = [
                GroupVersionResource(group=gvk.group, version=version, resource=resource.name)
                for resource in self._resources_for(gvk.group, version)
                if resource.kind == gvk.kind and not is_subresource(resource)
            ]
            if len(matches) > 1:
                raise AmbiguousTypeError(
                    f"{gvk} matches several resources: "
                    + ", ".join(match.resource for match in matches),
                    candidates=tuple(matches),
                )
            if matches:
                return matches[0]
        raise TypeNotFoundError(f"no resource found for {gvk}")

    def _kind_for_resource(self, gvr: GroupVersionResource) -> GroupVersionKind:
        for version in self._candidate_versions(gvr.group, gvr.version):
            kinds = {
                GroupVersionKind(group=gvr.group, version=version, kind=resource.kind)
                for resource in self._resources_for(gvr.group, version)
                if not is_subresource(resource)
                and gvr.resource in (resource.name, resource.singular_name)
            }
            if len(kinds) > 1:
                raise AmbiguousTypeError(
                    f"{gvr} matches several kinds: "
                    + ", ".join(sorted(kind.kind for kind in kinds)),
                    candidates=tuple(kinds),
                )
            if kinds:
                return kinds.pop()
        raise TypeNotFoundError(f"no kind found for {gvr}")

    def _candidate_versions(self, group: str, version: str) -> tuple[str, ...]:
        if version:
            return (version,)
        if not group:
            return (CORE_VERSION,)
        return self._group_versions_map().get(group, ())

    def _group_versions_map(self) -> dict[str, tuple[str, ...]]:
        with self._lock:
            if self._group_versions is None:
                groups = self._discover(self._client.get_api_groups, "API groups")
                self._group_versions = {
                    group.name: ordered_versions(group) for group in groups.groups or ()
                }
                self._group_versions_fetched_at = self._clock()
            return self._group_versions

    def _resources_for(self, group: str, version: str) -> tuple[V1APIResource, ...]:
        key = (group, version)
        with self._lock:
            cached = self._resources.get(key)
            if cached is None:
                resource_list = self._discover(
                    lambda: self._client.get_resource_list(group, version),
                    f"resources of {_group_label(group)}/{version}",
                )
                cached = () if resource_list is None else tuple(resource_list.resources or ())
                self._resources[key] = cached
                self._resources_fetched_at[key] = self._clock()
            return cached

    @staticmethod
    def _discover[T](fetch: Callable[[], T], what: str) -> T:
        try:
            return fetch()
        except API_ERRORS as exc:
            raise TypeResolutionError(f"discovery of {what} failed: {exc}") from exc


def _group_label(group: str | None) -> str:
    if group is None:
        return "all groups"
    return group or "core"
