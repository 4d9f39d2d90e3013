"""Changed cluster objects delivered to the mapper."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import cast

from .identity import NamespacedName
from .types import GroupVersionKind


def _empty_attributes() -> Mapping[str, object]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True, kw_only=True)
class ChangedObject:
    """Cluster object that was created, updated or deleted."""

    gvk: GroupVersionKind
    namespace: str
    name: str
    attributes: Mapping[str, object] = field(default_factory=_empty_attributes)

    @property
    def identity(self) -> NamespacedName:
        return NamespacedName(namespace=self.namespace, name=self.name)

    @classmethod
    def from_manifest(cls, manifest: Mapping[str, object]) -> ChangedObject:
        """Build a changed object from a raw manifest (``apiVersion``/``kind``/``metadata``)."""

        api_version = manifest.get("apiVersion")
        kind = manifest.get("kind")
        if not isinstance(api_version, str) or not api_version:
            raise ValueError("Manifest is missing apiVersion")
        if not isinstance(kind, str) or not kind:
            raise ValueError("Manifest is missing kind")

        raw_metadata = manifest.get("metadata")
        metadata = (
            cast(Mapping[str, object], raw_metadata) if isinstance(raw_metadata, Mapping) else {}
        )
        name = metadata.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError("Manifest is missing metadata.name")
        namespace = metadata.get("namespace")

        return cls(
            gvk=GroupVersionKind.from_api_version(api_version, kind),
            namespace=namespace if isinstance(namespace, str) else "",
            name=name,
            attributes=MappingProxyType(dict(manifest)),
        )
