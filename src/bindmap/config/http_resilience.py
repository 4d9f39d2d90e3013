"""Retry settings applied to the API server connection pool."""

from __future__ import annotations

from dataclasses import dataclass, field

from urllib3.util.retry import Retry


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    total: int = 3
    backoff_factor: float = 0.5
    backoff_max: float = 30.0
    respect_retry_after_header: bool = True
    allowed_methods: frozenset[str] = field(default_factory=lambda: frozenset({"GET", "HEAD"}))
    status_forcelist: frozenset[int] = field(
        default_factory=lambda: frozenset({429, 500, 502, 503, 504})
    )


def build_retry(policy: RetryPolicy) -> Retry:
    # Exhausted status retries return the last response; the client raises it as ApiException.
    return Retry(
        total=policy.total,
        backoff_factor=policy.backoff_factor,
        backoff_max=policy.backoff_max,
        respect_retry_after_header=policy.respect_retry_after_header,
        allowed_methods=policy.allowed_methods,
        status_forcelist=policy.status_forcelist,
        raise_on_status=False,
    )
