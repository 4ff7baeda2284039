"""Tests for logging configuration."""

import logging

import pytest

from coinbase_pro_api import ClientBuilder, ClientConfig
from coinbase_pro_api.logging_setup import LOG_LEVEL_ENV, setup_logging, setup_logging_from_env


@pytest.fixture(autouse=True)
def restore_logging():
    """Restore root and httpx logger levels after each test."""
    root = logging.getLogger()
    httpx_logger = logging.getLogger("httpx")
    saved = (root.level, httpx_logger.level)
    yield
    root.setLevel(saved[0])
    httpx_logger.setLevel(saved[1])


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_default_level_warning(self):
        setup_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_verbose_level_debug(self):
        setup_logging(verbose=True)

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.DEBUG

    def test_noisy_loggers_quieted(self):
        setup_logging(level="debug")
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_explicit_level(self):
        setup_logging(level="info")
        assert logging.getLogger().level == logging.INFO

    def test_unknown_level_falls_back_to_info(self):
        setup_logging(level="chatty")
        assert logging.getLogger().level == logging.INFO

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
        setup_logging_from_env()
        assert logging.getLogger().level == logging.ERROR

    def test_client_ignores_level_env(self, monkeypatch):
        """Test that only the CLI setup reads the level variable."""
        root = logging.getLogger()
        before = root.level
        monkeypatch.setenv(LOG_LEVEL_ENV, "CRITICAL")

        client = ClientBuilder().build()

        assert root.level == before
        assert client.config == ClientConfig()
