"""Error taxonomy for request dispatch.

Each error names the pipeline stage that failed. The original exception is
always attached as ``__cause__``.
"""


class CoinbaseApiError(Exception):
    """Base class for all client errors."""

    stage = "unknown"

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url

    def __str__(self) -> str:
        message = super().__str__()
        if self.url:
            return f"{message} ({self.url})"
        return message


class UrlError(CoinbaseApiError):
    """Endpoint path or parameters do not form a valid URL."""

    stage = "url"


class TransportError(CoinbaseApiError):
    """Connection, DNS, TLS or protocol level failure."""

    stage = "transport"


class RequestTimeoutError(CoinbaseApiError):
    """Request deadline elapsed before a full response arrived."""

    stage = "timeout"


class DecodeError(CoinbaseApiError):
    """Response bytes could not be decoded as text."""

    stage = "decode"


class ParseError(CoinbaseApiError):
    """Response text is not well-formed JSON."""

    stage = "parse"
