"""Pure domain layer - no infrastructure dependencies."""

# Errors
from .errors import (
    CoinbaseApiError,
    DecodeError,
    ParseError,
    RequestTimeoutError,
    TransportError,
    UrlError,
)

# Services
from .services import (
    Clock,
    MonotonicClock,
    Sleeper,
    TokenBucketRateLimiter,
    endpoints,
)

# Value Objects
from .values import (
    COINBASE_API_URL,
    DEFAULT_BURST_SIZE,
    DEFAULT_RATE_LIMIT,
    DEFAULT_REQUEST_TIMEOUT,
    ClientConfig,
    EndpointRequest,
    Granularity,
    OrderBookLevel,
    RateLimitConfig,
)

__all__ = [
    # Values
    "ClientConfig",
    "COINBASE_API_URL",
    "DEFAULT_REQUEST_TIMEOUT",
    "DEFAULT_RATE_LIMIT",
    "DEFAULT_BURST_SIZE",
    "RateLimitConfig",
    "EndpointRequest",
    "OrderBookLevel",
    "Granularity",
    # Services
    "TokenBucketRateLimiter",
    "Clock",
    "MonotonicClock",
    "Sleeper",
    "endpoints",
    # Errors
    "CoinbaseApiError",
    "UrlError",
    "TransportError",
    "RequestTimeoutError",
    "DecodeError",
    "ParseError",
]
