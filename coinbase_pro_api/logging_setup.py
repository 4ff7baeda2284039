"""Logging configuration for the command line front end.

The library itself only creates module loggers and never installs handlers.
COINBASE_PRO_API_LOG_LEVEL is read here for the CLI only; the client never
consults environment variables.
"""

import logging
import os

LOG_LEVEL_ENV = "COINBASE_PRO_API_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Chatty third-party loggers kept at WARNING unless verbose
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(verbose: bool = False, level: str | None = None) -> None:
    """Configure root logging.

    Args:
        verbose: Log at DEBUG and let httpx/httpcore through.
        level: Explicit level name, overrides verbose.
    """
    if level:
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO
    else:
        resolved = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)


def setup_logging_from_env(verbose: bool = False) -> None:
    """Configure logging, honoring COINBASE_PRO_API_LOG_LEVEL if set."""
    setup_logging(verbose=verbose, level=os.environ.get(LOG_LEVEL_ENV))
