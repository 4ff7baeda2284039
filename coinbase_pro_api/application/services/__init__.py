"""Application services - use case implementations."""

from .decoders import ResponseDecoder, as_json, as_text
from .dispatcher import RequestDispatcher

__all__ = [
    "RequestDispatcher",
    "ResponseDecoder",
    "as_text",
    "as_json",
]
