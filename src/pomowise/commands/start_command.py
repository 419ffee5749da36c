"""Start command - run the full-screen Pomodoro timer."""

from __future__ import annotations

import typer

from pomowise.models.animation.clock import AnimationClock
from pomowise.models.animation.fonts import load_fonts
from pomowise.models.animation.themes import load_themes
from pomowise.models.app import PomodoroApp
from pomowise.models.keyboard import TerminalError
from pomowise.models.ui import TimerDisplay
from pomowise.services.config_service import get_config_service
from pomowise.services.notification_service import notify_session_end
from pomowise.services.status_service import StatusPublisher, StatusService
from pomowise.utils.exit_codes import ERROR_NOT_FOUND, ERROR_TERMINAL
from pomowise.utils.ui.console import get_console

from .decorators import AppError, command_wrapper

app = typer.Typer()


def build_app(
    theme: str | None = None,
    font: str | None = None,
    no_rotate: bool = False,
    seed: int | None = None,
) -> PomodoroApp:
    """Assemble the controller from config and command-line overrides."""
    config = get_config_service()
    settings = config.config
    display = settings.display
    themes = load_themes()
    fonts = load_fonts()

    theme_id = theme or display.theme
    if theme_id is not None and theme_id not in themes:
        raise AppError(
            f"Unknown theme '{theme_id}'. Run 'pomowise themes' to list themes.",
            ERROR_NOT_FOUND,
        )
    font_id = font or display.font
    if font_id not in fonts:
        raise AppError(
            f"Unknown font '{font_id}'. Run 'pomowise fonts' to list fonts.",
            ERROR_NOT_FOUND,
        )

    animation = AnimationClock(
        themes,
        fonts,
        seed=seed if seed is not None else settings.seed,
        rotation_seconds=display.rotation_seconds,
        initial_theme=theme_id,
        initial_font=font_id,
    )

    publisher = None
    if settings.status.enabled:
        publisher = StatusPublisher(StatusService(config.status_path))

    width, height = get_console().size
    return PomodoroApp(
        animation,
        policy=settings.to_policy(),
        width=width,
        height=height,
        auto_rotate=display.auto_rotate and not no_rotate,
        # An explicit font on the command line wins over adaptive sizing.
        adaptive_font=display.adaptive_font and font is None,
        font_strategy=display.font_strategy,
        show_hints=display.show_hints,
        notifier=notify_session_end if settings.notifications.enabled else None,
        publisher=publisher,
    )


@app.command("start")
@command_wrapper
def start(
    theme: str | None = typer.Option(None, "--theme", "-t", help="Theme id"),
    font: str | None = typer.Option(
        None, "--font", "-f", help="Digit font id (turns off adaptive font)"
    ),
    no_rotate: bool = typer.Option(
        False, "--no-rotate", help="Keep the theme instead of rotating it"
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Seed for random theme selection"
    ),
) -> None:
    """Start the full-screen Pomodoro timer."""
    pomodoro = build_app(theme=theme, font=font, no_rotate=no_rotate, seed=seed)
    try:
        TimerDisplay(get_console()).run(pomodoro)
    except TerminalError as e:
        raise AppError(str(e), ERROR_TERMINAL) from e
