"""Commands 'themes' and 'fonts' - list the bundled registries."""

import typer

from pomowise.models.animation.fonts import load_fonts
from pomowise.models.animation.themes import load_themes
from pomowise.models.scaling import select_font_for_size
from pomowise.services.config_service import get_config_service
from pomowise.utils.ui.console import get_console
from pomowise.utils.ui.formatters import format_dict_table, format_output

from .decorators import command_wrapper

app = typer.Typer()


def _rgb(color: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color)


@app.command("themes")
@command_wrapper
def themes(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """List available themes."""
    configured = get_config_service().config.display.theme
    rows = [
        {
            "id": theme.id,
            "name": theme.name,
            "primary": _rgb(theme.primary),
            "secondary": _rgb(theme.secondary),
            "font": theme.preferred_font,
            "default": theme.id == configured,
        }
        for theme in load_themes().all()
    ]
    if output == "table":
        format_dict_table(rows, title="Themes")
    else:
        format_output(rows, output)


@app.command("fonts")
@command_wrapper
def fonts(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """List digit fonts and the best fit for this terminal."""
    catalogue = load_fonts()
    width, height = get_console().size
    best = select_font_for_size(width, height, catalogue)
    rows = [
        {
            "id": font.id,
            "name": font.name,
            "size": f"{font.width}x{font.height}",
            "best_fit": font.id == best.id,
        }
        for font in catalogue.all()
    ]
    if output == "table":
        format_dict_table(rows, title=f"Fonts ({width}x{height} terminal)")
    else:
        format_output(rows, output)
