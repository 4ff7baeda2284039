"""Endpoint request value object."""

from collections.abc import Iterable
from dataclasses import dataclass

Params = tuple[tuple[str, str], ...]


@dataclass(frozen=True, slots=True)
class EndpointRequest:
    """A single API call: relative path plus ordered query parameters."""

    path: str
    params: Params = ()

    @classmethod
    def create(cls, path: str, params: Iterable[tuple[str, str]] | None = None) -> "EndpointRequest":
        """Create request, normalizing parameters to string pairs."""
        if params is None:
            return cls(path=path)
        return cls(path=path, params=tuple((str(k), str(v)) for k, v in params))
