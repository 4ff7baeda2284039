"""Rendering of API responses and errors for the terminal."""

from typing import Any

import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from coinbase_pro_api.domain import CoinbaseApiError

OUTPUT_FORMATS = ("json", "yaml", "table", "raw")

console = Console()
err_console = Console(stderr=True)


def _cell(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return yaml.safe_dump(value, default_flow_style=True).strip()
    return "" if value is None else str(value)


def build_table(data: Any) -> Table | None:
    """Build a table for a list of objects or a single object.

    Returns:
        Table, or None if the data has no tabular shape.
    """
    if isinstance(data, list) and data and all(isinstance(row, dict) for row in data):
        columns: list[str] = []
        for row in data:
            columns.extend(key for key in row if key not in columns)

        table = Table(show_header=True, header_style="bold cyan")
        for column in columns:
            table.add_column(column)
        for row in data:
            table.add_row(*(_cell(row.get(column)) for column in columns))
        return table

    if isinstance(data, dict):
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("field")
        table.add_column("value")
        for key, value in data.items():
            table.add_row(str(key), _cell(value))
        return table

    return None


def render(data: Any, fmt: str = "json", out: Console | None = None) -> None:
    """Print a response in the requested format.

    Args:
        data: Parsed JSON, or the body text when fmt is 'raw'.
        fmt: One of OUTPUT_FORMATS.
        out: Console to print to (defaults to stdout).
    """
    out = out or console

    if fmt == "raw":
        out.print(data, markup=False, highlight=False, soft_wrap=True)
        return

    if fmt == "yaml":
        text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
        out.print(Syntax(text, "yaml", background_color="default"))
        return

    if fmt == "table":
        table = build_table(data)
        if table is not None:
            out.print(table)
            return

    out.print_json(data=data)


def print_error(error: CoinbaseApiError, out: Console | None = None) -> None:
    """Print a dispatch failure with its stage and root cause."""
    out = out or err_console
    out.print(f"[bold red]Error[/bold red] [yellow]({error.stage})[/yellow]: ", end="")
    out.print(str(error), markup=False, highlight=False)
    if error.__cause__ is not None:
        out.print(f"  caused by: {error.__cause__!r}", markup=False, highlight=False)


def print_validation_error(error: ValidationError, out: Console | None = None) -> None:
    """Print invalid command line input."""
    out = out or err_console
    out.print("[bold red]Invalid arguments[/bold red]")
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "input"
        out.print(f"  {location}: {item['msg']}", markup=False, highlight=False)
