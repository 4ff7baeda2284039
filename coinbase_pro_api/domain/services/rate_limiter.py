"""Token bucket rate limiter shared by all calls of one client."""

import asyncio
import threading
import time
from collections.abc import Awaitable, Callable
from typing import Protocol

from ..values.rate_limit_config import RateLimitConfig

# Tolerance for float drift when refilled tokens land just below a whole token
_EPSILON = 1e-9


class Clock(Protocol):
    """Source of monotonic time in seconds."""

    def now(self) -> float: ...


class MonotonicClock:
    """Clock implementation backed by time.monotonic()."""

    def now(self) -> float:
        return time.monotonic()


Sleeper = Callable[[float], Awaitable[None]]


class TokenBucketRateLimiter:
    """Token bucket with refill rate = config.rate and capacity = config.burst.

    The bucket starts full. Callers are admitted only through until_ready(),
    which consumes one token or suspends until one is available. Refill and
    consumption happen together under a lock, so concurrent callers can
    never be granted more tokens than the bucket holds.
    """

    def __init__(
        self,
        config: RateLimitConfig,
        clock: Clock | None = None,
        sleep: Sleeper | None = None,
    ) -> None:
        self._config = config
        self._clock = clock or MonotonicClock()
        self._sleep = sleep or asyncio.sleep
        self._tokens = float(config.burst)
        self._last_refill = self._clock.now()
        self._lock = threading.Lock()

    @property
    def config(self) -> RateLimitConfig:
        return self._config

    @property
    def rate(self) -> float:
        return self._config.rate

    @property
    def burst(self) -> int:
        return self._config.burst

    def _refill(self) -> None:
        now = self._clock.now()
        elapsed = now - self._last_refill
        if elapsed > 0:
            self._tokens = min(float(self.burst), self._tokens + elapsed * self.rate)
            self._last_refill = now

    def _take(self) -> float:
        """Consume one token if available. Returns 0 on success, else seconds to wait."""
        with self._lock:
            self._refill()
            if self._tokens + _EPSILON >= 1:
                self._tokens -= 1
                return 0.0
            return (1 - self._tokens) / self.rate

    async def until_ready(self) -> float:
        """Suspend until a token is granted, then consume it.

        Returns:
            Total seconds spent waiting.
        """
        waited = 0.0
        while True:
            delay = self._take()
            if delay == 0.0:
                return waited
            await self._sleep(delay)
            waited += delay
