"""Command line front end for the public market data client."""

import argparse
import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import ValidationError
from rich.console import Console

from coinbase_pro_api.builder import ClientBuilder
from coinbase_pro_api.client import CoinbasePublicClient
from coinbase_pro_api.domain import CoinbaseApiError
from coinbase_pro_api.logging_setup import setup_logging_from_env

from .args import parse_args
from .display import print_error, print_validation_error, render
from .options import CandleQuery, ClientOptions, OrderBookQuery, TradesQuery

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_API_ERROR = 1
EXIT_USAGE = 2

Call = Callable[[CoinbasePublicClient, bool], Awaitable[Any]]


def build_call(args: argparse.Namespace) -> Call:
    """Map parsed arguments to a client call.

    Raises:
        ValidationError: If command arguments are invalid.
    """
    command = args.command

    if command == "products":
        return lambda client, raw: client.get_products(raw=raw)
    if command == "currencies":
        return lambda client, raw: client.get_currencies(raw=raw)
    if command == "time":
        return lambda client, raw: client.get_time(raw=raw)
    if command == "product":
        return lambda client, raw: client.get_product(args.product_id, raw=raw)
    if command == "ticker":
        return lambda client, raw: client.get_product_ticker(args.product_id, raw=raw)
    if command == "stats":
        return lambda client, raw: client.get_product_24h_stats(args.product_id, raw=raw)
    if command == "book":
        book = OrderBookQuery(level=args.level)
        return lambda client, raw: client.get_product_orderbook(
            args.product_id, book.level, raw=raw
        )
    if command == "trades":
        trades = TradesQuery(after=args.after)
        return lambda client, raw: client.get_product_trades(
            args.product_id, trades.after, raw=raw
        )
    if command == "candles":
        query = CandleQuery(start=args.start, end=args.end, granularity=args.granularity)
        return lambda client, raw: client.get_product_historic_rates(
            args.product_id, query.start, query.end, query.granularity, raw=raw
        )
    raise ValueError(f"Unknown command: {command}")


async def execute(builder: ClientBuilder, call: Call, raw: bool) -> Any:
    """Build a client, run one call and release the transport."""
    async with builder.build() as client:
        return await call(client, raw)


def run(
    args: argparse.Namespace,
    builder: ClientBuilder | None = None,
    out: Console | None = None,
    err: Console | None = None,
) -> int:
    """Run a parsed command.

    Args:
        args: Parsed command line arguments.
        builder: Preconfigured builder; built from args when omitted.
        out: Console for results.
        err: Console for errors.

    Returns:
        Process exit code.
    """
    try:
        if builder is None:
            options = ClientOptions(
                api_url=args.api_url,
                request_timeout=args.request_timeout,
                rate_limit=args.rate_limit,
                burst_size=args.burst_size,
            )
            builder = options.to_builder()
        call = build_call(args)
    except ValidationError as e:
        print_validation_error(e, err)
        return EXIT_USAGE

    raw = args.format == "raw"
    try:
        result = asyncio.run(execute(builder, call, raw))
    except CoinbaseApiError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print_error(e, err)
        return EXIT_API_ERROR

    render(result, args.format, out)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Console script entry point."""
    args = parse_args(argv)
    setup_logging_from_env(verbose=args.verbose)
    return run(args)


__all__ = ["main", "run", "build_call", "execute"]
