"""Rate Limiter — sliding-window request log keyed by caller identity.

Invariants:
    - Caller key priority: "ip:<addr>", else "ua:<user agent>", else "anonymous"
    - After pruning, every stored instant lies in (now - window, now]
    - A denied call is never recorded; an allowed call is recorded exactly once
    - check_limit and sweep run under the same lock: a caller's log is never
      observed half-pruned

Design Decisions:
    - All callers without IP or user agent share the "anonymous" bucket: a
      known limitation of keying by client hints, not a fail-open path
    - Monotonic clock injected (seconds): tests drive time without sleeping
    - Background sweep is a coroutine started from the app lifespan, so memory
      stays bounded by active callers, not request volume
"""

import asyncio
import logging
import math
import threading
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)

ANONYMOUS_KEY = "anonymous"


@dataclass(frozen=True)
class CallerInfo:
    """Identity hints for the caller of a tool. Both fields optional."""
    ip: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    remaining: int
    reset_time_seconds: int
    total_requests: int


def caller_key(caller: CallerInfo | None) -> str:
    """Derive the rate-limit bucket for a caller."""
    if caller is not None and caller.ip:
        return f"ip:{caller.ip}"
    if caller is not None and caller.user_agent:
        return f"ua:{caller.user_agent}"
    return ANONYMOUS_KEY


class RateLimiter:
    """Classic sliding-window log: at most `max_requests` per trailing `window_ms`."""

    def __init__(
        self,
        window_ms: int = 15 * 60 * 1000,
        max_requests: int = 100,
        clock: Callable[[], float] = time.monotonic,
    ):
        if window_ms <= 0:
            raise ValueError("window_ms must be positive")
        if max_requests <= 0:
            raise ValueError("max_requests must be positive")
        self.window_ms = window_ms
        self.max_requests = max_requests
        self._window = window_ms / 1000
        self._clock = clock
        self._requests: dict[str, deque[float]] = {}
        self._lock = threading.Lock()

    def check_limit(self, caller: CallerInfo | None) -> RateLimitResult:
        """Admit or deny one call for `caller`, recording it when admitted."""
        key = caller_key(caller)
        with self._lock:
            now = self._clock()
            log = self._requests.get(key)
            if log is None:
                log = deque()
                self._requests[key] = log
            self._prune(log, now)

            allowed = len(log) < self.max_requests
            if allowed:
                log.append(now)

            # log is non-empty here: either just appended, or full
            reset = max(0, math.ceil(log[0] + self._window - now))

            return RateLimitResult(
                allowed=allowed,
                remaining=max(0, self.max_requests - len(log)),
                reset_time_seconds=reset,
                total_requests=len(log),
            )

    def sweep(self) -> int:
        """Prune every caller's log and drop empty ones. Returns callers removed."""
        with self._lock:
            now = self._clock()
            removed = 0
            for key in list(self._requests):
                log = self._requests[key]
                self._prune(log, now)
                if not log:
                    del self._requests[key]
                    removed += 1
            return removed

    async def run_sweeper(self, interval_seconds: float = 60.0) -> None:
        """Sweep forever at a fixed interval. Cancel the task to stop."""
        while True:
            await asyncio.sleep(interval_seconds)
            removed = self.sweep()
            if removed:
                logger.debug(f"Rate limiter sweep dropped {removed} idle caller(s)")

    def reset(self, caller: CallerInfo | None) -> None:
        """Administrative: forget one caller's history."""
        with self._lock:
            self._requests.pop(caller_key(caller), None)

    def reset_all(self) -> None:
        """Administrative: forget every caller's history."""
        with self._lock:
            self._requests.clear()

    def stats(self) -> dict:
        """Snapshot of active callers and requests inside the current window."""
        with self._lock:
            now = self._clock()
            active_callers = 0
            active_requests = 0
            for log in self._requests.values():
                live = sum(1 for ts in log if ts > now - self._window)
                if live:
                    active_callers += 1
                    active_requests += live
            return {
                "activeCallers": active_callers,
                "totalActiveRequests": active_requests,
                "windowMs": self.window_ms,
                "maxRequests": self.max_requests,
                "averageRequestsPerCaller": (
                    round(active_requests / active_callers) if active_callers else 0
                ),
            }

    def _prune(self, log: deque[float], now: float) -> None:
        cutoff = now - self._window
        while log and log[0] <= cutoff:
            log.popleft()
