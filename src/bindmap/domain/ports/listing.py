"""Ports for reading stored ServiceBindings."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from bindmap.domain.model import ServiceBinding

type RawBinding = Mapping[str, object]


@runtime_checkable
class BindingLister(Protocol):
    """Lists every ServiceBinding visible in the configured scope.

    Implementations raise ``BindingListError`` when the collection cannot be read.
    """

    def list_bindings(self) -> list[RawBinding]: ...


# Raises ``BindingDecodeError`` for payloads that do not describe a ServiceBinding.
type BindingDecoder = Callable[[RawBinding], ServiceBinding]
