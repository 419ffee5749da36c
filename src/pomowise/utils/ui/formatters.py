"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.table import Table

from pomowise.utils.ui.console import get_console


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    else:
        format_table(data)


def format_table(data: Any) -> None:
    """Format data as a table."""
    console = get_console()
    if not data:
        console.print("[yellow]No data to display[/yellow]")
        return

    if isinstance(data, list):
        if isinstance(data[0], dict):
            format_dict_table(data)
        else:
            for item in data:
                console.print(item)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if value is None:
        return "-"
    return str(value)


def format_dict_table(items: list[dict], title: str | None = None) -> None:
    """Format a list of dictionaries as a table."""
    console = get_console()
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    columns = list(items[0].keys())
    table = Table(show_header=True, header_style="bold magenta", title=title)
    for col in columns:
        table.add_column(col.replace("_", " ").title())

    for item in items:
        table.add_row(*(_format_value(item.get(col, "")) for col in columns))

    console.print(table)


def format_single_item(item: dict, prefix: str = "") -> None:
    """Format a (possibly nested) mapping as dotted key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in _flatten(item, prefix):
        table.add_row(key, _format_value(value))

    get_console().print(table)


def _flatten(item: dict, prefix: str = ""):
    for key, value in item.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict):
            yield from _flatten(value, f"{dotted}.")
        else:
            yield dotted, value


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    get_console().print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    get_console().print(f"[bold blue]Info:[/bold blue] {message}")
