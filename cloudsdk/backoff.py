"""Retry policy for transient HTTP failures."""

from __future__ import annotations

import random
from dataclasses import dataclass

RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})
RETRYABLE_METHODS = frozenset({"GET", "HEAD"})


@dataclass(frozen=True)
class RetryStrategy:
    """Exponential backoff with optional jitter.

    Durations are in seconds. ``max_retries`` counts retries, not attempts:
    a request is sent at most ``max_retries + 1`` times.
    """

    initial_interval: float = 0.1
    max_interval: float = 5.0
    multiplier: float = 2.0
    max_retries: int = 3
    jitter: bool = True

    def duration(self, attempt: int) -> float:
        """Seconds to wait before retry number ``attempt`` (0-based)."""
        attempt = max(attempt, 0)
        delay = min(self.initial_interval * self.multiplier**attempt, self.max_interval)
        if self.jitter:
            # +/-25%
            delay *= 0.75 + random.random() * 0.5
        return delay

    def should_retry(self, attempt: int) -> bool:
        return attempt < self.max_retries


NO_RETRY = RetryStrategy(max_retries=0)


def is_retryable_status_code(status_code: int) -> bool:
    return status_code in RETRYABLE_STATUS_CODES


def is_retryable_method(method: str) -> bool:
    return method.upper() in RETRYABLE_METHODS
