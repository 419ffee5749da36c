"""Full-screen timer UI.

Every pass builds a fresh :class:`Canvas` from the controller state and
hands it to a rich ``Live`` display. The drawing functions are pure view
code; all decisions live in :class:`PomodoroApp`.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.live import Live

from pomowise.models.animation.canvas import RGB, Canvas
from pomowise.models.animation.fonts import render_time
from pomowise.models.app import AppScreen, MenuItem, PomodoroApp
from pomowise.models.keyboard import KeyboardHandler
from pomowise.models.scaling import MIN_HEIGHT, MIN_WIDTH

logger = logging.getLogger(__name__)

TICK_INTERVAL = 0.1  # seconds; input wait doubles as the animation tick

PANEL_BG: RGB = (15, 15, 25)
OVERLAY_BG: RGB = (10, 10, 20)
WHITE: RGB = (255, 255, 255)
DIM: RGB = (80, 80, 100)
GRAY: RGB = (128, 128, 128)
WARNING: RGB = (255, 200, 0)

HINTS_LONG = "Space: Pause  r: Reset  Tab: Skip  t: Themes  f: Font  h: Zen  q: Menu"
HINTS_SHORT = "Spc Pause  r Reset  Tab Skip  q Menu"
ZEN_FLASH = "Zen mode - press h to show controls"


def _box(
    canvas: Canvas,
    x: int,
    y: int,
    width: int,
    height: int,
    border: RGB,
    bg: RGB,
    title: str | None = None,
) -> None:
    if width < 2 or height < 2:
        return
    canvas.fill(x, y, width, height, bg)
    canvas.text(x, y, "┌" + "─" * (width - 2) + "┐", border, bg)
    for row in range(y + 1, y + height - 1):
        canvas.put(x, row, "│", border, bg)
        canvas.put(x + width - 1, row, "│", border, bg)
    canvas.text(x, y + height - 1, "└" + "─" * (width - 2) + "┘", border, bg)
    if title:
        canvas.text(x + 2, y, f" {title} "[: max(0, width - 4)], border, bg, bold=True)


def _centered(canvas: Canvas, y: int, text: str, fg: RGB, bg: RGB | None = None, bold: bool = False) -> None:
    canvas.text(max(0, (canvas.width - len(text)) // 2), y, text, fg, bg, bold)


def _clock_text(app: PomodoroApp) -> str:
    return app.timer.snapshot().clock_text


def draw(app: PomodoroApp) -> Canvas:
    """Render the current screen."""
    scaling = app.scaling
    canvas = Canvas(scaling.width, scaling.height, app.animation.current_theme.background)
    if scaling.is_too_small:
        draw_too_small(canvas, app)
    elif app.screen is AppScreen.MENU:
        draw_menu(canvas, app)
    else:
        draw_timer(canvas, app)
    return canvas


def _background(canvas: Canvas, app: PomodoroApp) -> None:
    region = canvas.region(detail=app.scaling.background_detail_level)
    app.animation.current_theme.render_background(region, app.animation.frame_index)


def draw_too_small(canvas: Canvas, app: PomodoroApp) -> None:
    """Degraded screen shown until the terminal is resized."""
    theme = app.animation.current_theme
    mid = canvas.height // 2
    _centered(canvas, mid - 2, "Terminal too small", WARNING, bold=True)
    _centered(canvas, mid - 1, f"Current: {canvas.width}x{canvas.height}", GRAY)
    _centered(canvas, mid, f"Minimum: {MIN_WIDTH}x{MIN_HEIGHT}", GRAY)
    if app.screen is AppScreen.TIMER:
        _centered(canvas, mid + 2, f"{app.timer.session_name()} {_clock_text(app)}", theme.primary, bold=True)


def draw_menu(canvas: Canvas, app: PomodoroApp) -> None:
    _background(canvas, app)
    theme = app.animation.current_theme
    width = min(30, canvas.width - 4)
    height = min(12, canvas.height - 4)
    x = (canvas.width - width) // 2
    y = (canvas.height - height) // 2
    _box(canvas, x, y, width, height, theme.primary, PANEL_BG)

    def line(offset: int, text: str, fg: RGB, bold: bool = False) -> None:
        if offset < height - 1:
            canvas.text(x + max(0, (width - len(text)) // 2), y + offset, text, fg, PANEL_BG, bold)

    line(2, "pomowise", theme.primary, bold=True)
    line(4, f"Theme: {theme.name}", GRAY)
    for idx, item in enumerate(MenuItem):
        selected = item is app.menu_selection
        text = ("> " if selected else "  ") + item.label
        line(6 + idx, text, theme.primary if selected else WHITE, bold=selected)
    line(height - 2, "↑↓ Navigate  Enter Select", GRAY)


def draw_timer(canvas: Canvas, app: PomodoroApp) -> None:
    _background(canvas, app)
    scaling = app.scaling
    theme = app.animation.current_theme
    font = app.animation.current_font

    minutes, seconds = divmod(app.timer.remaining_seconds, 60)
    area_width = font.timer_width + 4
    area_height = font.height + 4
    area = canvas.region(
        scaling.center_x(area_width), scaling.center_y(area_height), area_width, area_height
    )
    render_time(area, font, minutes, seconds, theme.primary, theme.secondary)

    if not app.hints_visible:
        if app.hint_flash_frames > 0:
            _centered(canvas, scaling.progress_bar_y(), ZEN_FLASH, DIM)
        if app.theme_picker_open:
            draw_theme_picker(canvas, app)
        return

    if scaling.show_session_info:
        _draw_session_info(canvas, app)
    if scaling.show_progress_bar:
        _draw_progress(canvas, app)
    if scaling.show_hints:
        hint = HINTS_LONG if len(HINTS_LONG) + 2 <= canvas.width else HINTS_SHORT
        if scaling.hints_y() > 3:
            _centered(canvas, scaling.hints_y(), hint, DIM)
    if app.theme_picker_open:
        draw_theme_picker(canvas, app)


def _draw_session_info(canvas: Canvas, app: PomodoroApp) -> None:
    timer = app.timer
    theme = app.animation.current_theme

    session = timer.session_name()
    if timer.total_laps() > 0:
        session += f" (Lap {timer.current_lap()}/{timer.total_laps()})"
    info_width = min(len(session) + 4, canvas.width)
    _box(canvas, 0, 0, info_width, 3, theme.primary, OVERLAY_BG)
    canvas.text(2, 1, session[: max(0, info_width - 4)], theme.primary, OVERLAY_BG)

    clock_x = canvas.width - 11
    _box(canvas, clock_x, 0, 10, 3, theme.primary, OVERLAY_BG)
    canvas.text(clock_x + 2, 1, _clock_text(app), theme.primary, OVERLAY_BG, bold=True)

    label = f" {theme.name} "
    if not app.auto_rotate:
        label = f" {theme.name} (fixed) "
    label_x = (canvas.width - len(label)) // 2
    if label_x > info_width and label_x + len(label) < clock_x:
        canvas.text(label_x, 0, label, GRAY, OVERLAY_BG)
        cycle = f" {timer.cycle_position}/{app.policy.sessions_before_long_break} "
        canvas.text((canvas.width - len(cycle)) // 2, 1, cycle, DIM, OVERLAY_BG)


def _draw_progress(canvas: Canvas, app: PomodoroApp) -> None:
    theme = app.animation.current_theme
    y = app.scaling.progress_bar_y()
    _box(canvas, 0, y, canvas.width, 3, theme.primary, OVERLAY_BG)
    inner = max(0, canvas.width - 2)
    progress = app.timer.session_progress()
    filled = int(inner * progress)
    canvas.fill(1, y + 1, filled, 1, theme.primary)
    canvas.fill(1 + filled, y + 1, inner - filled, 1, theme.secondary)
    pct = f" {int(progress * 100)}% "
    canvas.text((canvas.width - len(pct)) // 2, y + 1, pct, WHITE, bold=True)


def draw_theme_picker(canvas: Canvas, app: PomodoroApp) -> None:
    themes = app.animation.themes.all()
    primary = app.animation.current_theme.primary
    width = min(24, canvas.width - 4)
    height = min(len(themes) + 4, canvas.height - 4)
    x = canvas.width - width - 2
    y = (canvas.height - height) // 2
    _box(canvas, x, y, width, height, primary, PANEL_BG, title="Themes")
    for idx, theme in enumerate(themes):
        row = y + 2 + idx
        if row >= y + height - 1:
            break
        selected = idx == app.theme_picker_index
        text = ("▶ " if selected else "  ") + theme.name
        canvas.text(x + 2, row, text[: max(0, width - 4)], primary if selected else WHITE, PANEL_BG, bold=selected)
    footer = " ↑↓ Enter Esc "
    canvas.text(x + max(1, (width - len(footer)) // 2), y + height - 1, footer, primary, PANEL_BG)


class TimerDisplay:
    """Runs the input/tick/redraw loop on the full screen."""

    def __init__(self, console: Console | None = None, tick_interval: float = TICK_INTERVAL):
        self.console = console or Console()
        self.tick_interval = tick_interval

    def _sync_size(self, app: PomodoroApp) -> None:
        width, height = self.console.size
        if (width, height) != (app.scaling.width, app.scaling.height):
            app.update_dimensions(width, height)

    def run(self, app: PomodoroApp, keyboard: KeyboardHandler | None = None) -> None:
        """Run until the user quits.

        Raises:
            TerminalError: If the terminal cannot be set up or restored
        """
        keyboard = keyboard or KeyboardHandler()
        self._sync_size(app)
        try:
            with keyboard:
                with Live(
                    draw(app),
                    console=self.console,
                    screen=True,
                    auto_refresh=False,
                ) as live:
                    while not app.should_quit:
                        self._sync_size(app)
                        live.update(draw(app), refresh=True)
                        key = keyboard.read_key(self.tick_interval)
                        if key is not None:
                            app.handle_key(key)
                        app.tick()
        except KeyboardInterrupt:
            logger.info("interrupted")
        finally:
            app.shutdown()
