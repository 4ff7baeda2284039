"""Request dispatcher - the single choke-point for network I/O."""

import asyncio
import logging
from collections.abc import Iterable
from typing import Any

import httpx

from coinbase_pro_api.domain import (
    ClientConfig,
    DecodeError,
    EndpointRequest,
    ParseError,
    RateLimitConfig,
    RequestTimeoutError,
    TokenBucketRateLimiter,
    TransportError,
    UrlError,
)

from .decoders import ResponseDecoder, as_json, as_text

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = ("http", "https")


class RequestDispatcher:
    """Turns an endpoint path plus query parameters into a decoded result.

    Every request goes through fetch(): URL assembly, limiter admission,
    GET under a hard deadline, strict text decoding and finally the
    caller-selected decoder. A failure aborts that call only.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        config: ClientConfig,
        rate_limiter: TokenBucketRateLimiter | None = None,
    ) -> None:
        self._http = http_client
        self._config = config
        self._rate_limiter = rate_limiter

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def rate_limit_config(self) -> RateLimitConfig | None:
        """Limiter settings, or None when pacing is disabled."""
        if self._rate_limiter is None:
            return None
        return self._rate_limiter.config

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    def build_url(self, path: str, params: Iterable[tuple[str, str]] | None = None) -> httpx.URL:
        """Assemble the absolute request URL.

        Raises:
            UrlError: If the result is not a valid absolute http(s) URL.
        """
        raw = self._config.base_url + path
        try:
            url = httpx.URL(raw)
            if params:
                url = url.copy_merge_params(list(params))
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise UrlError(f"Failed to parse url: {e}", url=raw) from e

        if url.scheme not in ALLOWED_SCHEMES or not url.host:
            raise UrlError("Url must be absolute with an http(s) scheme", url=raw)
        return url

    async def fetch(
        self,
        path: str,
        params: Iterable[tuple[str, str]] | None = None,
        decoder: ResponseDecoder = as_text,
    ) -> Any:
        """Fetch an endpoint and run the body through decoder.

        Args:
            path: API-relative path such as '/products'.
            params: Ordered query parameter pairs.
            decoder: Final-stage transformation of the body text.

        Raises:
            UrlError, TransportError, RequestTimeoutError, DecodeError,
            ParseError (from the JSON decoder only).
        """
        url = self.build_url(path, params)
        await self._admit(url)
        text = await self._get_text(url)

        try:
            return decoder(text)
        except ParseError as e:
            if e.url is None:
                e.url = str(url)
            raise

    async def fetch_text(self, request: EndpointRequest) -> str:
        return await self.fetch(request.path, request.params, as_text)

    async def fetch_json(self, request: EndpointRequest) -> Any:
        return await self.fetch(request.path, request.params, as_json)

    async def aclose(self) -> None:
        """Release the HTTP transport."""
        await self._http.aclose()

    async def _admit(self, url: httpx.URL) -> None:
        """Wait for a limiter token, if a limiter is configured."""
        if self._rate_limiter is None:
            return
        waited = await self._rate_limiter.until_ready()
        if waited:
            logger.debug("Rate limiter delayed request wait=%.3fs url=%s", waited, url)

    async def _get_text(self, url: httpx.URL) -> str:
        timeout = self._config.request_timeout
        logger.debug("GET %s", url)

        try:
            async with asyncio.timeout(timeout):
                response = await self._http.get(url)
        except (httpx.TimeoutException, TimeoutError) as e:
            raise RequestTimeoutError(f"Request exceeded {timeout}s deadline", url=str(url)) from e
        except httpx.DecodingError as e:
            raise DecodeError(f"Failed to decode response content: {e}", url=str(url)) from e
        except httpx.InvalidURL as e:
            raise UrlError(f"Transport rejected url: {e}", url=str(url)) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Failure while sending request: {e}", url=str(url)) from e

        if response.is_error:
            # Error payloads are returned to the caller unchanged
            logger.warning("Non-success status=%d url=%s", response.status_code, url)

        encoding = response.charset_encoding or "utf-8"
        try:
            return response.content.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise DecodeError(
                f"Failed to decode response body as {encoding}", url=str(url)
            ) from e
