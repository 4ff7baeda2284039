"""Coinbase Pro public market data client."""

from datetime import datetime
from typing import Any

from coinbase_pro_api.application.services import RequestDispatcher
from coinbase_pro_api.builder import ClientBuilder
from coinbase_pro_api.domain import (
    ClientConfig,
    EndpointRequest,
    Granularity,
    OrderBookLevel,
    RateLimitConfig,
    endpoints,
)


class CoinbasePublicClient:
    """Read-only client for the public REST API.

    Use builder() or new() to instantiate. One instance can be shared by
    any number of concurrent tasks; all of them draw from the same rate
    limit. Every endpoint method returns parsed JSON, or the raw body text
    when called with raw=True.

    Example:
        async with CoinbasePublicClient.builder().rate_limit(3).build() as client:
            book = await client.get_product_orderbook("ETH-USD", OrderBookLevel.LEVEL_2)
    """

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    @staticmethod
    def builder() -> ClientBuilder:
        """Start configuring a client. Unset options use the defaults."""
        return ClientBuilder()

    @classmethod
    def new(cls) -> "CoinbasePublicClient":
        """Build a client using default parameters."""
        return cls.builder().build()

    @property
    def config(self) -> ClientConfig:
        return self._dispatcher.config

    @property
    def rate_limit_config(self) -> RateLimitConfig | None:
        return self._dispatcher.rate_limit_config

    @property
    def is_closed(self) -> bool:
        return self._dispatcher.is_closed

    async def aclose(self) -> None:
        """Release the HTTP transport."""
        await self._dispatcher.aclose()

    async def __aenter__(self) -> "CoinbasePublicClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def _get(self, request: EndpointRequest, raw: bool) -> Any:
        if raw:
            return await self._dispatcher.fetch_text(request)
        return await self._dispatcher.fetch_json(request)

    async def get_products(self, *, raw: bool = False) -> Any:
        """Get list of available markets to trade."""
        return await self._get(endpoints.products(), raw)

    async def get_product(self, product_id: str, *, raw: bool = False) -> Any:
        """Get information about a single market.

        Args:
            product_id: Market identifier formatted as 'BASE-QUOTE', such as
                'ETH-USD'. Case-insensitive.
        """
        return await self._get(endpoints.product(product_id), raw)

    async def get_product_orderbook(
        self,
        product_id: str,
        level: OrderBookLevel | int = OrderBookLevel.LEVEL_1,
        *,
        raw: bool = False,
    ) -> Any:
        """Get an order book snapshot, up to the full level 3 book.

        Args:
            product_id: Market identifier such as 'ETH-USD'.
            level: 1 for best bid/ask, 2 for top 50 aggregated levels,
                3 for the full unaggregated book.
        """
        return await self._get(endpoints.product_orderbook(product_id, level), raw)

    async def get_product_ticker(self, product_id: str, *, raw: bool = False) -> Any:
        """Get the last trade, best bid/ask and 24h volume."""
        return await self._get(endpoints.product_ticker(product_id), raw)

    async def get_product_trades(
        self,
        product_id: str,
        after: int | None = None,
        *,
        raw: bool = False,
    ) -> Any:
        """Get a market's latest trades.

        Args:
            product_id: Market identifier such as 'ETH-USD'.
            after: Trade sequence lower bound. Trades at or below it are
                excluded from the response.
        """
        return await self._get(endpoints.product_trades(product_id, after), raw)

    async def get_product_historic_rates(
        self,
        product_id: str,
        start: datetime | None = None,
        end: datetime | None = None,
        granularity: Granularity | int | None = None,
        *,
        raw: bool = False,
    ) -> Any:
        """Get historic OHLCV candles.

        Args:
            product_id: Market identifier such as 'ETH-USD'.
            start: Start time. Naive datetimes are treated as UTC.
            end: End time.
            granularity: Candle size in seconds, one of Granularity.

        Without arguments the exchange returns 300 one-minute candles. No
        data is published for periods without trades.
        """
        request = endpoints.product_historic_rates(product_id, start, end, granularity)
        return await self._get(request, raw)

    async def get_product_24h_stats(self, product_id: str, *, raw: bool = False) -> Any:
        """Get a market's 24h stats."""
        return await self._get(endpoints.product_24h_stats(product_id), raw)

    async def get_currencies(self, *, raw: bool = False) -> Any:
        """Get currencies supported by the exchange."""
        return await self._get(endpoints.currencies(), raw)

    async def get_time(self, *, raw: bool = False) -> Any:
        """Get server time in both epoch and ISO format."""
        return await self._get(endpoints.server_time(), raw)
