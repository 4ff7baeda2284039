"""Validation of command line input using Pydantic."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from coinbase_pro_api.builder import ClientBuilder
from coinbase_pro_api.domain import (
    COINBASE_API_URL,
    DEFAULT_BURST_SIZE,
    DEFAULT_RATE_LIMIT,
    DEFAULT_REQUEST_TIMEOUT,
    Granularity,
    OrderBookLevel,
)


class ClientOptions(BaseModel):
    """Client settings given on the command line."""

    api_url: str = COINBASE_API_URL
    request_timeout: int = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)
    rate_limit: int = Field(default=DEFAULT_RATE_LIMIT, ge=0)
    burst_size: int = Field(default=DEFAULT_BURST_SIZE, ge=0)

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"API url must start with http:// or https://: {v}")
        return v.rstrip("/")

    def to_builder(self) -> ClientBuilder:
        return (
            ClientBuilder()
            .api_url(self.api_url)
            .request_timeout(self.request_timeout)
            .rate_limit(self.rate_limit)
            .burst_size(self.burst_size)
        )


class OrderBookQuery(BaseModel):
    """Arguments of the book command."""

    level: OrderBookLevel = OrderBookLevel.LEVEL_1


class TradesQuery(BaseModel):
    """Arguments of the trades command."""

    after: int | None = Field(default=None, ge=0)


class CandleQuery(BaseModel):
    """Arguments of the candles command."""

    start: datetime | None = None
    end: datetime | None = None
    granularity: Granularity | None = None

    @field_validator("start", "end")
    @classmethod
    def assume_utc(cls, v: datetime | None) -> datetime | None:
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    @model_validator(mode="after")
    def check_range(self) -> "CandleQuery":
        if self.start and self.end and self.start > self.end:
            raise ValueError("start must not be after end")
        return self
