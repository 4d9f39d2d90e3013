"""Correlation of changed cluster objects with ServiceBindings.

Flow for one change event:
1) fast path: a changed ServiceBinding reconciles itself
2) list and decode every stored ServiceBinding
3) evaluate secret, service and application predicates per binding
4) collect matching identities into a deduplicated request set
"""

from __future__ import annotations

from bindmap.domain.errors import (
    AmbiguousTypeError,
    BindingDecodeError,
    BindingListError,
    CorrelationError,
    TypeNotFoundError,
    TypeResolutionError,
)

from .mapper import BindingRequestMapper
from .predicates import (
    is_declared_application,
    is_declared_service,
    is_secret,
    is_secret_owned_by,
    is_service_binding,
)
from .request_set import RequestSet
from .resolver import TypeResolver

__all__ = [
    "AmbiguousTypeError",
    "BindingDecodeError",
    "BindingListError",
    "BindingRequestMapper",
    "CorrelationError",
    "RequestSet",
    "TypeNotFoundError",
    "TypeResolutionError",
    "TypeResolver",
    "is_declared_application",
    "is_declared_service",
    "is_secret",
    "is_secret_owned_by",
    "is_service_binding",
]
