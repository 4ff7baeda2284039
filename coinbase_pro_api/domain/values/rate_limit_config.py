"""Rate limit configuration value object."""

from dataclasses import dataclass

from .client_config import DEFAULT_BURST_SIZE, DEFAULT_RATE_LIMIT, ClientConfig

# Smallest bucket a limiter may have
MIN_BURST = 1


@dataclass(frozen=True, slots=True)
class RateLimitConfig:
    """Token bucket configuration (value object)."""

    rate: float = float(DEFAULT_RATE_LIMIT)
    burst: int = DEFAULT_BURST_SIZE

    def __post_init__(self) -> None:
        if self.rate <= 0:
            raise ValueError("Rate must be positive")
        if self.burst < MIN_BURST:
            raise ValueError("Burst must be positive")

    @classmethod
    def from_client_config(cls, config: ClientConfig) -> "RateLimitConfig | None":
        """Derive limiter settings from a client config.

        Returns None when rate limiting is disabled. A burst size of zero
        still yields a bucket holding one token.
        """
        if not config.rate_limiting_enabled:
            return None
        return cls(rate=float(config.rate_limit), burst=max(config.burst_size, MIN_BURST))
