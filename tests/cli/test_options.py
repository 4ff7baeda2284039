"""Tests for command line input validation."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from coinbase_pro_api.cli.options import CandleQuery, ClientOptions, OrderBookQuery, TradesQuery
from coinbase_pro_api.domain import ClientConfig, Granularity, OrderBookLevel


class TestClientOptions:
    """Tests for ClientOptions."""

    def test_defaults_match_client_config(self):
        options = ClientOptions()
        assert options.to_builder().resolve() == ClientConfig()

    def test_to_builder_carries_values(self):
        options = ClientOptions(
            api_url="http://localhost:8080/",
            request_timeout=5,
            rate_limit=0,
            burst_size=0,
        )

        assert options.to_builder().resolve() == ClientConfig(
            base_url="http://localhost:8080",
            request_timeout=5,
            rate_limit=0,
            burst_size=0,
        )

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValidationError):
            ClientOptions(request_timeout=0)

    def test_negative_rate_rejected(self):
        with pytest.raises(ValidationError):
            ClientOptions(rate_limit=-1)

    def test_negative_burst_rejected(self):
        with pytest.raises(ValidationError):
            ClientOptions(burst_size=-1)

    def test_non_http_url_rejected(self):
        with pytest.raises(ValidationError, match="http"):
            ClientOptions(api_url="api.pro.coinbase.com")


class TestQueries:
    """Tests for command argument models."""

    def test_order_book_level_coerced(self):
        assert OrderBookQuery(level=2).level is OrderBookLevel.LEVEL_2

    def test_order_book_level_out_of_range(self):
        with pytest.raises(ValidationError):
            OrderBookQuery(level=4)

    def test_trades_negative_cursor_rejected(self):
        with pytest.raises(ValidationError):
            TradesQuery(after=-1)

    def test_candle_query_parses_timestamps(self):
        query = CandleQuery(start="2022-10-01T00:00:00Z", end="2022-10-02T00:00:00+00:00")

        assert query.start == datetime(2022, 10, 1, tzinfo=UTC)
        assert query.end == datetime(2022, 10, 2, tzinfo=UTC)

    def test_candle_query_naive_timestamp_is_utc(self):
        query = CandleQuery(start="2022-10-01T08:00:00")
        assert query.start == datetime(2022, 10, 1, 8, tzinfo=UTC)

    def test_candle_query_granularity(self):
        assert CandleQuery(granularity=900).granularity is Granularity.MINUTE_15

    def test_candle_query_bad_granularity(self):
        with pytest.raises(ValidationError):
            CandleQuery(granularity=120)

    def test_candle_query_start_after_end(self):
        with pytest.raises(ValidationError, match="start must not be after end"):
            CandleQuery(start="2022-10-02T00:00:00Z", end="2022-10-01T00:00:00Z")

    def test_candle_query_empty(self):
        query = CandleQuery()
        assert (query.start, query.end, query.granularity) == (None, None, None)
