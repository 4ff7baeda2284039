"""Tests for running CLI commands end to end against a mock transport."""

import io

import httpx
import pytest
from rich.console import Console

from coinbase_pro_api.cli import EXIT_API_ERROR, EXIT_OK, EXIT_USAGE, run
from coinbase_pro_api.cli.args import parse_args

from ..conftest import RecordingHandler, json_handler, mock_builder


@pytest.fixture
def consoles():
    """Stdout and stderr consoles writing to buffers."""
    return (
        Console(file=io.StringIO(), width=200, color_system=None),
        Console(file=io.StringIO(), width=200, color_system=None),
    )


class TestRun:
    """Tests for run()."""

    def test_success_renders_result(self, consoles):
        out, err = consoles
        handler = json_handler({"iso": "2022-10-01T00:00:00Z"})

        code = run(parse_args(["time"]), mock_builder(handler), out, err)

        assert code == EXIT_OK
        assert "2022-10-01T00:00:00Z" in out.file.getvalue()
        assert handler.last.url.path == "/time"

    def test_raw_format_passes_body_through(self, consoles):
        out, err = consoles
        handler = RecordingHandler("plain body")

        code = run(parse_args(["-f", "raw", "time"]), mock_builder(handler), out, err)

        assert code == EXIT_OK
        assert out.file.getvalue().strip() == "plain body"

    def test_candles_arguments_forwarded(self, consoles):
        out, err = consoles
        handler = json_handler([])
        args = parse_args(["candles", "ETH-USD", "-g", "3600"])

        code = run(args, mock_builder(handler), out, err)

        assert code == EXIT_OK
        assert list(handler.last.url.params.multi_items()) == [("granularity", "3600")]

    def test_trades_cursor_forwarded(self, consoles):
        out, err = consoles
        handler = json_handler([])

        run(parse_args(["trades", "ETH-USD", "--after", "42"]), mock_builder(handler), out, err)

        assert handler.last.url.params["after"] == "43"

    def test_invalid_granularity_is_usage_error(self, consoles):
        out, err = consoles
        handler = RecordingHandler()

        code = run(parse_args(["candles", "ETH-USD", "-g", "120"]), mock_builder(handler), out, err)

        assert code == EXIT_USAGE
        assert handler.requests == []
        assert "granularity" in err.file.getvalue()

    def test_invalid_client_option_is_usage_error(self, consoles):
        out, err = consoles

        code = run(parse_args(["--timeout", "0", "time"]), None, out, err)

        assert code == EXIT_USAGE
        assert "request_timeout" in err.file.getvalue()

    def test_api_error_exit_code(self, consoles):
        out, err = consoles

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        code = run(parse_args(["products"]), mock_builder(handler), out, err)

        assert code == EXIT_API_ERROR
        assert "(transport)" in err.file.getvalue()
        assert out.file.getvalue() == ""

    def test_parse_error_exit_code(self, consoles):
        out, err = consoles

        code = run(parse_args(["time"]), mock_builder(RecordingHandler("nope")), out, err)

        assert code == EXIT_API_ERROR
        assert "(parse)" in err.file.getvalue()
