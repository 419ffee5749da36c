"""Configuration management commands."""

from __future__ import annotations

import json
from typing import Any

import typer

from pomowise.services.config_service import get_config_service
from pomowise.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from pomowise.utils.typer_helpers import SuggestingGroup
from pomowise.utils.ui.console import get_console
from pomowise.utils.ui.formatters import format_error, format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")


def parse_value(value: str) -> Any:
    """Turn a command-line string into a bool, number, null or string."""
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if lowered in ("null", "none"):
        return None
    try:
        return json.loads(value)
    except ValueError:
        return value


@app.command("view")
@command_wrapper
def view_config(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    format_output(get_config_service().config.model_dump(), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.work_minutes)"),
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from None
    if hasattr(value, "model_dump"):
        format_output(value.model_dump(), "table")
    else:
        get_console(highlight=False).print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., display.theme)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    parsed_value = parse_value(value)
    try:
        get_config_service().set(key, parsed_value)
    except KeyError:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from None
    except ValueError as e:
        raise AppError(str(e), ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: str | None = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            format_error("Cancelled")
            raise typer.Exit(0)

    try:
        get_config_service().reset(key)
    except KeyError:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from None

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
