"""Status command - show the state of a running timer."""

from __future__ import annotations

import time

import typer
from rich.live import Live
from rich.text import Text

from pomowise.models.timer.snapshot import StatusSnapshot
from pomowise.services.config_service import get_config_service
from pomowise.services.status_service import StatusService
from pomowise.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from pomowise.utils.ui.console import get_console
from pomowise.utils.ui.formatters import format_output

from .decorators import AppError, command_wrapper

app = typer.Typer()


def status_line(snapshot: StatusSnapshot | None) -> Text:
    """One-line summary, as a tray icon would show it."""
    if snapshot is None:
        return Text("No timer running", style="dim")
    style = "yellow" if snapshot.is_paused else "bold cyan"
    text = Text(f"🍅 {snapshot.clock_text}  ", style=style)
    text.append(snapshot.session_name)
    text.append(f"  {int(snapshot.session_progress * 100)}%", style="dim")
    return text


@app.command("status")
@command_wrapper
def status(
    watch: bool = typer.Option(False, "--watch", "-w", help="Keep polling"),
    interval: float = typer.Option(0.1, "--interval", help="Poll interval in seconds"),
    json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the running timer's status."""
    if interval <= 0:
        raise AppError("--interval must be positive", ERROR_INVALID_ARGS)
    service = StatusService(get_config_service().status_path)

    if not watch:
        snapshot = service.poll()
        if snapshot is None:
            raise AppError("No timer is running", ERROR_NOT_FOUND)
        if json:
            format_output(snapshot.model_dump(), "json")
        else:
            get_console().print(status_line(snapshot))
        return

    # A torn or missing file keeps the last good reading until the next poll.
    last: StatusSnapshot | None = None
    try:
        with Live(status_line(None), console=get_console(), auto_refresh=False) as live:
            while True:
                snapshot = service.poll()
                if snapshot is not None or not service.path.exists():
                    last = snapshot
                live.update(status_line(last), refresh=True)
                time.sleep(interval)
    except KeyboardInterrupt:
        pass
