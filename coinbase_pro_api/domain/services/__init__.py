"""Domain services - pure business logic operations."""

from . import endpoints
from .rate_limiter import Clock, MonotonicClock, Sleeper, TokenBucketRateLimiter

__all__ = [
    "TokenBucketRateLimiter",
    "Clock",
    "MonotonicClock",
    "Sleeper",
    "endpoints",
]
