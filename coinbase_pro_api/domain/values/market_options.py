"""Enumerated query options accepted by market data endpoints."""

from enum import IntEnum


class OrderBookLevel(IntEnum):
    """Order book detail level.

    Level 1 returns the best bid and ask, level 2 the top 50 aggregated
    levels, level 3 the full unaggregated book.
    """

    LEVEL_1 = 1
    LEVEL_2 = 2
    LEVEL_3 = 3

    def param_tuple(self) -> tuple[str, str]:
        """Query parameter pair for this level."""
        return ("level", str(self.value))


class Granularity(IntEnum):
    """Candle width in seconds."""

    MINUTE_1 = 60
    MINUTE_5 = 300
    MINUTE_15 = 900
    HOUR_1 = 3600
    HOUR_6 = 21600
    HOUR_24 = 86400

    def param_tuple(self) -> tuple[str, str]:
        """Query parameter pair for this granularity."""
        return ("granularity", str(self.value))
