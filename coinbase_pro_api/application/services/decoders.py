"""Final-stage response decoders for the dispatch pipeline."""

import json
from collections.abc import Callable
from typing import Any

from coinbase_pro_api.domain import ParseError

ResponseDecoder = Callable[[str], Any]


def as_text(body: str) -> str:
    """Return the body unchanged."""
    return body


def as_json(body: str) -> Any:
    """Parse the body into plain JSON values.

    Raises:
        ParseError: If the body is not well-formed JSON.
    """
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise ParseError(f"Response body is not valid JSON: {e.msg}") from e
