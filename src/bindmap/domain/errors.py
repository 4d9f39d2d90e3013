"""Errors raised while correlating a changed object with ServiceBindings."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import NamespacedName


class CorrelationError(RuntimeError):
    """Base class for correlation failures."""


class BindingListError(CorrelationError):
    """Raised when the ServiceBinding collection cannot be listed."""


class BindingDecodeError(CorrelationError):
    """Raised when a stored ServiceBinding does not have the expected shape."""

    def __init__(self, message: str, *, identity: NamespacedName | None = None) -> None:
        super().__init__(message)
        self.identity = identity


class TypeResolutionError(CorrelationError):
    """Raised when a type identifier cannot be mapped to its other form."""


class TypeNotFoundError(TypeResolutionError):
    """Raised when cluster metadata has no entry for the requested type."""


class AmbiguousTypeError(TypeResolutionError):
    """Raised when cluster metadata maps the requested type to several candidates."""

    def __init__(self, message: str, *, candidates: tuple[object, ...] = ()) -> None:
        super().__init__(message)
        self.candidates = candidates
