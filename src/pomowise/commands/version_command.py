"""Command 'version' of pomowise"""

import typer

from pomowise import __version__
from pomowise.utils.ui.console import get_console

app = typer.Typer()


@app.command()
def version() -> None:
    """Show version information"""
    get_console(highlight=False).print(__version__)
