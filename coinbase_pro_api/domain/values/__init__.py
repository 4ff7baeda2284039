"""Domain value objects - immutable data structures."""

from .client_config import (
    COINBASE_API_URL,
    DEFAULT_BURST_SIZE,
    DEFAULT_RATE_LIMIT,
    DEFAULT_REQUEST_TIMEOUT,
    ClientConfig,
)
from .endpoint_request import EndpointRequest
from .market_options import Granularity, OrderBookLevel
from .rate_limit_config import RateLimitConfig

__all__ = [
    "ClientConfig",
    "COINBASE_API_URL",
    "DEFAULT_REQUEST_TIMEOUT",
    "DEFAULT_RATE_LIMIT",
    "DEFAULT_BURST_SIZE",
    "RateLimitConfig",
    "EndpointRequest",
    "OrderBookLevel",
    "Granularity",
]
