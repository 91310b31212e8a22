"""
Polling helper behind the ``wait_for_*`` functions.

Usage:
    from cloudsdk.waiter import wait

    wait(lambda: vps.servers.get(sid).status == "ACTIVE", interval=5, max_wait=600)
"""

from __future__ import annotations

import dataclasses
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from cloudsdk.errors import ResourceStateError, SDKError, WaitTimeoutError
from cloudsdk.resource import require_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WaitOptions:
    """Polling schedule. Durations are in seconds."""

    interval: float = 2.0
    max_wait: float = 300.0
    backoff_multiplier: float = 1.0
    max_interval: float = 30.0

    def override(self, **changes: float) -> WaitOptions:
        """Return a copy with caller-supplied values replacing the defaults."""
        return dataclasses.replace(self, **changes)


def wait(
    check_state: Callable[[], bool],
    *,
    interval: float = 2.0,
    max_wait: float = 300.0,
    backoff_multiplier: float = 1.0,
    max_interval: float = 30.0,
) -> None:
    """Call ``check_state`` until it returns True.

    The first check happens immediately. Exceptions raised by ``check_state``
    propagate unchanged. Raises WaitTimeoutError once the next check would fall
    after ``max_wait`` seconds.
    """
    if interval <= 0:
        raise ValueError("interval must be positive")
    if max_wait <= 0:
        raise ValueError("max_wait must be positive")

    deadline = time.monotonic() + max_wait
    current = interval
    checks = 0
    while True:
        checks += 1
        if check_state():
            logger.debug("Wait condition met after %d check(s)", checks)
            return
        if time.monotonic() + current > deadline:
            raise WaitTimeoutError()
        time.sleep(current)
        if backoff_multiplier > 1:
            current = min(current * backoff_multiplier, max_interval)


def wait_with(check_state: Callable[[], bool], options: WaitOptions) -> None:
    wait(check_state, **dataclasses.asdict(options))


def wait_for_status(
    kind: str,
    fetch_status: Callable[[str], str],
    resource_id: str,
    target: str,
    failure: str | None,
    options: WaitOptions,
) -> None:
    """Poll ``fetch_status(resource_id)`` until it equals ``target``.

    Reaching ``failure`` (unless it is the target) raises ResourceStateError
    without waiting for the timeout.
    """
    require_id(resource_id, f"{kind} ID")
    if not target:
        raise ValueError("target status is required")

    def check() -> bool:
        status = fetch_status(resource_id)
        logger.debug("%s %s status: %s (waiting for %s)", kind, resource_id, status, target)
        if status == target:
            return True
        if failure is not None and status == failure and target != failure:
            raise ResourceStateError(
                f"{kind} entered {failure} state while waiting for {target}", status
            )
        return False

    wait_with(check, options)


def wait_for_deleted(
    kind: str, fetch: Callable[[str], object], resource_id: str, options: WaitOptions
) -> None:
    """Poll ``fetch(resource_id)`` until the service answers 404."""
    require_id(resource_id, f"{kind} ID")

    def check() -> bool:
        try:
            fetch(resource_id)
        except SDKError as e:
            if e.is_not_found:
                return True
            raise
        return False

    wait_with(check, options)
