"""Rate-limited client for the Coinbase Pro public market data API."""

from ._version import __version__
from .builder import ClientBuilder
from .client import CoinbasePublicClient
from .domain import (
    ClientConfig,
    CoinbaseApiError,
    DecodeError,
    Granularity,
    OrderBookLevel,
    ParseError,
    RequestTimeoutError,
    TransportError,
    UrlError,
)

__all__ = [
    "__version__",
    "CoinbasePublicClient",
    "ClientBuilder",
    "ClientConfig",
    "OrderBookLevel",
    "Granularity",
    "CoinbaseApiError",
    "UrlError",
    "TransportError",
    "RequestTimeoutError",
    "DecodeError",
    "ParseError",
]
