"""References to cluster objects declared inside a ServiceBinding."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from bindmap.domain.errors import TypeResolutionError

from .types import GroupVersionKind, GroupVersionResource

if TYPE_CHECKING:
    from collections.abc import Mapping


def _empty_labels() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectReference:
    """Reference that carries a Kind, a Resource, or both.

    Only the form that was declared is returned directly; the other one has to be
    resolved through cluster metadata by a ``TypeResolver``.
    """

    group: str = ""
    version: str = ""
    kind: str = ""
    resource: str = ""
    name: str = ""

    def group_version_kind(self) -> GroupVersionKind:
        if not self.kind:
            raise TypeResolutionError(f"kind not specified on reference {self.describe()}")
        return GroupVersionKind(group=self.group, version=self.version, kind=self.kind)

    def group_version_resource(self) -> GroupVersionResource:
        if not self.resource:
            raise TypeResolutionError(f"resource not specified on reference {self.describe()}")
        return GroupVersionResource(
            group=self.group,
            version=self.version,
            resource=self.resource,
        )

    def describe(self) -> str:
        type_name = self.kind or self.resource or "<unknown>"
        prefix = f"{self.group}/{self.version}" if self.group else self.version
        suffix = f" {self.name}" if self.name else ""
        return f"{prefix} {type_name}{suffix}".strip()


@dataclass(frozen=True, slots=True, kw_only=True)
class BindingService(ObjectReference):
    """Backing service declared by a ServiceBinding."""

    namespace: str | None = None
    env_var_prefix: str | None = None
    id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class BindingApplication(ObjectReference):
    """Workload the binding injects into, addressed by name or label selector."""

    label_selector: Mapping[str, str] = field(default_factory=_empty_labels)
