"""Request factories for the public market data endpoints.

Each factory maps typed arguments to an EndpointRequest. None of them
perform I/O.
"""

from datetime import UTC, datetime

from ..values.endpoint_request import EndpointRequest
from ..values.market_options import Granularity, OrderBookLevel


def _format_timestamp(value: datetime) -> str:
    """Format as RFC 3339. Naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.isoformat()


def products() -> EndpointRequest:
    """List of available markets."""
    return EndpointRequest.create("/products")


def product(product_id: str) -> EndpointRequest:
    """Single market detail. product_id is 'BASE-QUOTE', e.g. 'ETH-USD'."""
    return EndpointRequest.create(f"/products/{product_id}")


def product_orderbook(product_id: str, level: OrderBookLevel | int) -> EndpointRequest:
    """Order book snapshot at the given level."""
    level = OrderBookLevel(level)
    return EndpointRequest.create(f"/products/{product_id}/book", [level.param_tuple()])


def product_ticker(product_id: str) -> EndpointRequest:
    return EndpointRequest.create(f"/products/{product_id}/ticker")


def product_trades(product_id: str, after: int | None = None) -> EndpointRequest:
    """Latest trades.

    The cursor is advanced by one so the boundary trade itself is excluded.
    """
    params = None
    if after is not None:
        params = [("after", str(after + 1))]
    return EndpointRequest.create(f"/products/{product_id}/trades", params)


def product_historic_rates(
    product_id: str,
    start: datetime | None = None,
    end: datetime | None = None,
    granularity: Granularity | int | None = None,
) -> EndpointRequest:
    """Historic OHLCV candles.

    Candle schema is [timestamp, low, high, open, close, volume]. With no
    arguments the exchange returns 300 one-minute candles; it rejects
    requests spanning more than 300 candles.
    """
    params: list[tuple[str, str]] = []
    if start is not None:
        params.append(("start", _format_timestamp(start)))
    if end is not None:
        params.append(("end", _format_timestamp(end)))
    if granularity is not None:
        params.append(Granularity(granularity).param_tuple())
    return EndpointRequest.create(f"/products/{product_id}/candles", params)


def product_24h_stats(product_id: str) -> EndpointRequest:
    return EndpointRequest.create(f"/products/{product_id}/stats")


def currencies() -> EndpointRequest:
    """Currencies supported by the exchange."""
    return EndpointRequest.create("/currencies")


def server_time() -> EndpointRequest:
    """Server time in epoch and ISO formats."""
    return EndpointRequest.create("/time")
