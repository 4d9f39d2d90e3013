"""Type identifiers for cluster objects.

An object type can be addressed by its Kind (``apps/v1, Kind=Deployment``) or
by its Resource (``apps/v1, Resource=deployments``). Both forms denote the same
type; converting between them requires cluster metadata.
"""

from __future__ import annotations

from dataclasses import dataclass


def _split_api_version(api_version: str) -> tuple[str, str]:
    group, sep, version = api_version.strip().rpartition("/")
    if not sep:
        return "", version
    return group, version


def _join_api_version(group: str, version: str) -> str:
    return f"{group}/{version}" if group else version


@dataclass(frozen=True, slots=True)
class GroupVersionKind:
    """Kind form of a type identifier."""

    group: str
    version: str
    kind: str

    @classmethod
    def from_api_version(cls, api_version: str, kind: str) -> GroupVersionKind:
        group, version = _split_api_version(api_version)
        return cls(group=group, version=version, kind=kind)

    @property
    def api_version(self) -> str:
        return _join_api_version(self.group, self.version)

    def __str__(self) -> str:
        return f"{self.api_version}, Kind={self.kind}"


@dataclass(frozen=True, slots=True)
class GroupVersionResource:
    """Resource form of a type identifier."""

    group: str
    version: str
    resource: str

    @property
    def api_version(self) -> str:
        return _join_api_version(self.group, self.version)

    def __str__(self) -> str:
        return f"{self.api_version}, Resource={self.resource}"


SERVICE_BINDING_GROUP = "binding.operators.coreos.com"
SERVICE_BINDING_VERSION = "v1alpha1"

SERVICE_BINDING_GVK = GroupVersionKind(
    group=SERVICE_BINDING_GROUP,
    version=SERVICE_BINDING_VERSION,
    kind="ServiceBinding",
)
SERVICE_BINDING_GVR = GroupVersionResource(
    group=SERVICE_BINDING_GROUP,
    version=SERVICE_BINDING_VERSION,
    resource="servicebindings",
)

SECRET_GVK = GroupVersionKind(group="", version="v1", kind="Secret")
