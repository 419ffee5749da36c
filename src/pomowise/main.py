"""Main entry point for pomowise."""

import typer

from pomowise.commands import (
    config,
    start_command,
    status_command,
    themes_command,
    version_command,
)
from pomowise.utils.logger import get_logger
from pomowise.utils.typer_helpers import SuggestingGroup

# Create main app with custom group class
app = typer.Typer(
    name="pomowise",
    cls=SuggestingGroup,
    help="A terminal Pomodoro timer with animated full-screen themes",
    no_args_is_help=True,
)

# Top-level commands live in their own modules
for module in (start_command, status_command, themes_command, version_command):
    app.registered_commands.extend(module.app.registered_commands)

app.add_typer(config.app, name="config", help="Configuration management")


@app.callback()
def main_callback() -> None:
    """A terminal Pomodoro timer with animated full-screen themes."""
    get_logger()


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
