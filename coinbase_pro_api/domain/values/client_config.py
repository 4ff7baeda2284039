"""Client configuration value object."""

from dataclasses import dataclass

# Defaults applied by the builder for unset fields
COINBASE_API_URL = "https://api.pro.coinbase.com"
DEFAULT_REQUEST_TIMEOUT = 30  # seconds
DEFAULT_RATE_LIMIT = 3  # requests per second
DEFAULT_BURST_SIZE = 6


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Resolved client configuration (value object).

    Values are taken as given. A rate limit of zero disables request pacing
    regardless of the burst size.
    """

    base_url: str = COINBASE_API_URL
    request_timeout: int = DEFAULT_REQUEST_TIMEOUT
    rate_limit: int = DEFAULT_RATE_LIMIT
    burst_size: int = DEFAULT_BURST_SIZE

    @property
    def rate_limiting_enabled(self) -> bool:
        """Check if a rate limiter should be constructed."""
        return self.rate_limit > 0
