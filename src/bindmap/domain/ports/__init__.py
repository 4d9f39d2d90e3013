"""Domain port definitions for adapters."""

from __future__ import annotations

from .listing import BindingDecoder, BindingLister, RawBinding
from .type_lookup import Referable, RESTMapper

__all__ = [
    "BindingDecoder",
    "BindingLister",
    "RESTMapper",
    "RawBinding",
    "Referable",
]
