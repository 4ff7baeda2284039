"""Fluent builder for CoinbasePublicClient."""

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

import httpx

from coinbase_pro_api.domain import (
    COINBASE_API_URL,
    DEFAULT_BURST_SIZE,
    DEFAULT_RATE_LIMIT,
    DEFAULT_REQUEST_TIMEOUT,
    ClientConfig,
)

if TYPE_CHECKING:
    from coinbase_pro_api.client import CoinbasePublicClient


@dataclass(frozen=True)
class ClientBuilder:
    """Accumulates optional overrides; build() resolves defaults.

    Each setter returns a new builder, so a partially configured builder
    can be reused. Unset fields default to:

    * api_url: https://api.pro.coinbase.com
    * request_timeout: 30 seconds
    * rate_limit: 3 requests per second (0 disables rate limiting)
    * burst_size: 6
    """

    _api_url: str | None = field(default=None)
    _request_timeout: int | None = field(default=None)
    _rate_limit: int | None = field(default=None)
    _burst_size: int | None = field(default=None)
    _transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False)

    def api_url(self, value: str) -> "ClientBuilder":
        return replace(self, _api_url=value)

    def request_timeout(self, value: int) -> "ClientBuilder":
        return replace(self, _request_timeout=value)

    def rate_limit(self, value: int) -> "ClientBuilder":
        return replace(self, _rate_limit=value)

    def burst_size(self, value: int) -> "ClientBuilder":
        return replace(self, _burst_size=value)

    def transport(self, value: httpx.AsyncBaseTransport) -> "ClientBuilder":
        """Use a custom httpx transport (e.g. httpx.MockTransport)."""
        return replace(self, _transport=value)

    def resolve(self) -> ClientConfig:
        """Apply defaults to unset fields."""
        return ClientConfig(
            base_url=COINBASE_API_URL if self._api_url is None else self._api_url,
            request_timeout=(
                DEFAULT_REQUEST_TIMEOUT
                if self._request_timeout is None
                else self._request_timeout
            ),
            rate_limit=DEFAULT_RATE_LIMIT if self._rate_limit is None else self._rate_limit,
            burst_size=DEFAULT_BURST_SIZE if self._burst_size is None else self._burst_size,
        )

    def build(self) -> "CoinbasePublicClient":
        """Build the client. Never fails; values are accepted as given."""
        from coinbase_pro_api.client import CoinbasePublicClient
        from coinbase_pro_api.composition import create_dispatcher

        dispatcher = create_dispatcher(self.resolve(), self._transport)
        return CoinbasePublicClient(dispatcher)
