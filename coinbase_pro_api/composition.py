"""Composition root - one-time construction of client resources."""

import logging

import httpx

from coinbase_pro_api._version import __version__
from coinbase_pro_api.application.services import RequestDispatcher
from coinbase_pro_api.domain import ClientConfig, RateLimitConfig, TokenBucketRateLimiter

logger = logging.getLogger(__name__)

APP_USER_AGENT = f"coinbase-pro-api/{__version__}"


def create_http_client(
    config: ClientConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the shared HTTP transport handle.

    Falls back to an unconfigured client if construction fails.
    """
    try:
        return httpx.AsyncClient(
            headers={"User-Agent": APP_USER_AGENT},
            timeout=config.request_timeout,
            transport=transport,
        )
    except Exception:
        logger.warning("Failed to configure HTTP client, using defaults", exc_info=True)
        return httpx.AsyncClient(transport=transport)


def create_rate_limiter(config: ClientConfig) -> TokenBucketRateLimiter | None:
    """Create the per-client token bucket, or None when pacing is disabled."""
    limit_config = RateLimitConfig.from_client_config(config)
    if limit_config is None:
        return None
    return TokenBucketRateLimiter(limit_config)


def create_dispatcher(
    config: ClientConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RequestDispatcher:
    """Wire transport, limiter and config into a dispatcher.

    This is the single place where client resources are created.
    """
    return RequestDispatcher(
        http_client=create_http_client(config, transport),
        config=config,
        rate_limiter=create_rate_limiter(config),
    )
