"""ServiceBinding as seen by the correlation core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .identity import NamespacedName

if TYPE_CHECKING:
    from .references import BindingApplication, BindingService


@dataclass(frozen=True, slots=True, kw_only=True)
class ServiceBinding:
    """Read-only view of a stored ServiceBinding.

    ``secret`` is the name recorded in the binding status once the binding secret
    has been generated; it is empty until then.
    """

    namespace: str
    name: str
    services: tuple[BindingService, ...] = ()
    application: BindingApplication | None = None
    secret: str = ""

    @property
    def identity(self) -> NamespacedName:
        return NamespacedName(namespace=self.namespace, name=self.name)
