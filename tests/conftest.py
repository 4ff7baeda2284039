"""Shared test fixtures and configuration."""

import asyncio
import json

import httpx
import pytest

from coinbase_pro_api import ClientBuilder
from coinbase_pro_api.domain import ClientConfig, RateLimitConfig

# ============= Domain Fixtures =============


@pytest.fixture
def client_config():
    """Default client config."""
    return ClientConfig()


@pytest.fixture
def rate_limit_config():
    """Default rate limit config (3 req/s, burst 6)."""
    return RateLimitConfig()


@pytest.fixture
def strict_rate_limit_config():
    """Strict rate limit config for testing."""
    return RateLimitConfig(rate=10.0, burst=20)


# ============= Mock Fixtures =============


class FakeClock:
    """Fake clock for testing rate limiter."""

    def __init__(self, start_time: float = 0.0):
        self._time = start_time

    def now(self) -> float:
        return self._time

    def advance(self, seconds: float) -> None:
        self._time += seconds


@pytest.fixture
def fake_clock():
    """Fake clock starting at 0."""
    return FakeClock()


class FakeSleeper:
    """Async sleep replacement that advances a FakeClock instead of waiting."""

    def __init__(self, clock: FakeClock):
        self._clock = clock
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        self._clock.advance(seconds)
        await asyncio.sleep(0)

    @property
    def total(self) -> float:
        return sum(self.calls)


@pytest.fixture
def fake_sleeper(fake_clock):
    """Sleeper bound to the fake clock."""
    return FakeSleeper(fake_clock)


class RecordingHandler:
    """MockTransport handler that records requests and replies with a fixed body."""

    def __init__(self, body: str | bytes = "{}", status_code: int = 200, headers=None):
        self._body = body.encode() if isinstance(body, str) else body
        self._status_code = status_code
        self._headers = headers or {"content-type": "application/json"}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self._status_code, content=self._body, headers=self._headers)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def json_handler(payload, status_code: int = 200) -> RecordingHandler:
    """Handler replying with a JSON payload."""
    return RecordingHandler(json.dumps(payload), status_code=status_code)


@pytest.fixture
def recording_handler():
    """Handler replying with an empty JSON object."""
    return RecordingHandler()


def mock_builder(handler, rate_limit: int = 0) -> ClientBuilder:
    """Builder wired to an httpx.MockTransport, unlimited by default."""
    return ClientBuilder().transport(httpx.MockTransport(handler)).rate_limit(rate_limit)
