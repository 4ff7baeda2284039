"""Command line argument parsing."""

import argparse

from coinbase_pro_api import __version__
from coinbase_pro_api.domain import (
    COINBASE_API_URL,
    DEFAULT_BURST_SIZE,
    DEFAULT_RATE_LIMIT,
    DEFAULT_REQUEST_TIMEOUT,
)

from .display import OUTPUT_FORMATS

# Commands taking a single product id and nothing else
PRODUCT_COMMANDS = {
    "product": "Show details of a single market",
    "ticker": "Show last trade, best bid/ask and 24h volume",
    "stats": "Show 24h stats of a market",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per endpoint."""
    parser = argparse.ArgumentParser(
        prog="coinbase-pro",
        description="Coinbase Pro public market data client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--api-url",
        default=COINBASE_API_URL,
        help=f"API base url (default: {COINBASE_API_URL})",
    )
    parser.add_argument(
        "--timeout",
        dest="request_timeout",
        type=int,
        default=DEFAULT_REQUEST_TIMEOUT,
        help=f"Request timeout in seconds (default: {DEFAULT_REQUEST_TIMEOUT})",
    )
    parser.add_argument(
        "--rate-limit",
        type=int,
        default=DEFAULT_RATE_LIMIT,
        help=f"Requests per second, 0 disables limiting (default: {DEFAULT_RATE_LIMIT})",
    )
    parser.add_argument(
        "--burst-size",
        type=int,
        default=DEFAULT_BURST_SIZE,
        help=f"Requests allowed in a burst (default: {DEFAULT_BURST_SIZE})",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logs",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    commands.add_parser("products", help="List available markets")
    commands.add_parser("currencies", help="List supported currencies")
    commands.add_parser("time", help="Show server time")

    for name, help_text in PRODUCT_COMMANDS.items():
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("product_id", help="Market identifier, e.g. ETH-USD")

    book = commands.add_parser("book", help="Show order book snapshot")
    book.add_argument("product_id", help="Market identifier, e.g. ETH-USD")
    book.add_argument(
        "-l",
        "--level",
        type=int,
        default=1,
        help="1: best bid/ask, 2: top 50 aggregated, 3: full book (default: 1)",
    )

    trades = commands.add_parser("trades", help="Show latest trades")
    trades.add_argument("product_id", help="Market identifier, e.g. ETH-USD")
    trades.add_argument(
        "--after",
        type=int,
        default=None,
        help="Only trades with a sequence above this value",
    )

    candles = commands.add_parser("candles", help="Show historic OHLCV candles")
    candles.add_argument("product_id", help="Market identifier, e.g. ETH-USD")
    candles.add_argument("--start", default=None, help="Start time, ISO 8601")
    candles.add_argument("--end", default=None, help="End time, ISO 8601")
    candles.add_argument(
        "-g",
        "--granularity",
        type=int,
        default=None,
        help="Candle size in seconds: 60, 300, 900, 3600, 21600 or 86400",
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace with the global client options,
        the output format and the selected command with its arguments.
    """
    return build_parser().parse_args(argv)
