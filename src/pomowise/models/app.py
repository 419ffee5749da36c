"""Application controller: screens, key dispatch and the per-pass tick."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from enum import Enum

from pomowise.models.animation.clock import AnimationClock
from pomowise.models.animation.fonts import DigitFont
from pomowise.models.scaling import ScalingContext, select_font_for_size
from pomowise.models.timer.policy import DEFAULT_POLICY, DurationPolicy, PhaseKind
from pomowise.models.timer.state import SessionStateMachine
from pomowise.services.status_service import StatusPublisher

logger = logging.getLogger(__name__)

HINT_FLASH_FRAMES = 20

SESSION_END_MESSAGES = {
    PhaseKind.WORK: "Work session",
    PhaseKind.SHORT_BREAK: "Short break",
    PhaseKind.LONG_BREAK: "Long break",
}


class AppScreen(str, Enum):
    MENU = "menu"
    TIMER = "timer"


class MenuItem(str, Enum):
    START = "start"
    QUIT = "quit"

    @property
    def label(self) -> str:
        return "Start Pomodoro" if self is MenuItem.START else "Quit"


class PomodoroApp:
    """Everything the view needs, and every action a key can trigger.

    The controller never touches the terminal; :class:`TimerDisplay` feeds
    it keys and sizes and draws whatever state it ends up in.
    """

    def __init__(
        self,
        animation: AnimationClock,
        policy: DurationPolicy = DEFAULT_POLICY,
        clock: Callable[[], float] = time.monotonic,
        width: int = 80,
        height: int = 24,
        auto_rotate: bool = True,
        adaptive_font: bool = True,
        font_strategy: str = "category",
        show_hints: bool = True,
        notifier: Callable[[str], object] | None = None,
        publisher: StatusPublisher | None = None,
    ):
        self.animation = animation
        self.policy = policy
        self._clock = clock
        self.timer = SessionStateMachine(policy, clock)
        self.screen = AppScreen.MENU
        self.menu_selection = MenuItem.START
        self.should_quit = False

        self.theme_picker_open = False
        self.theme_picker_index = 0
        self._theme_before_picker = animation.current_theme

        self.auto_rotate = auto_rotate
        self.hints_visible = show_hints
        self.hint_flash_frames = 0
        self.adaptive_font = adaptive_font
        self.font_strategy = font_strategy

        self.notifier = notifier
        self.publisher = publisher

        self.scaling = ScalingContext.from_dimensions(width, height, animation.fonts)
        self.update_dimensions(width, height)

    # -- layout ------------------------------------------------------------

    def adaptive_font_choice(self) -> DigitFont:
        if self.font_strategy == "best_fit":
            return select_font_for_size(
                self.scaling.width, self.scaling.height, self.animation.fonts
            )
        return self.scaling.recommended_font

    def update_dimensions(self, width: int, height: int) -> None:
        """Rebuild the scaling context for a new terminal size."""
        self.scaling = ScalingContext.from_dimensions(width, height, self.animation.fonts)
        if self.adaptive_font:
            self.animation.set_font(self.adaptive_font_choice())
        logger.debug(
            "resized to %dx%d (%s)", width, height, self.scaling.size_category.label
        )

    def toggle_adaptive_font(self) -> None:
        self.adaptive_font = not self.adaptive_font
        if self.adaptive_font:
            self.animation.set_font(self.adaptive_font_choice())

    def next_font(self) -> None:
        """Cycle to the next font; picking a font by hand turns adaptive off."""
        self.adaptive_font = False
        self.animation.next_font()

    # -- menu --------------------------------------------------------------

    def menu_up(self) -> None:
        self.menu_selection = MenuItem.START

    def menu_down(self) -> None:
        self.menu_selection = MenuItem.QUIT

    def menu_select(self) -> bool:
        """Act on the menu selection. Returns False if the app should quit."""
        if self.menu_selection is MenuItem.QUIT:
            self.should_quit = True
            return False
        self.screen = AppScreen.TIMER
        self.timer.start()
        self.animation.reset()
        logger.info("session started with theme %s", self.animation.current_theme.id)
        return True

    # -- timer actions -----------------------------------------------------

    def toggle_pause(self) -> None:
        self.timer.toggle_pause()

    def reset_session(self) -> None:
        self.timer.reset_current_session()
        self.animation.reset()

    def skip_to_next(self) -> None:
        """Advance to the next interval and force a theme change."""
        self.timer.advance_state()
        self.animation.rotate_theme()

    def quit_to_menu(self) -> None:
        self.screen = AppScreen.MENU
        self.theme_picker_open = False
        self.timer = SessionStateMachine(self.policy, self._clock)
        self.animation.reset()
        self._publish()

    def toggle_auto_rotate(self) -> None:
        self.auto_rotate = not self.auto_rotate

    def toggle_hints(self) -> None:
        self.hints_visible = not self.hints_visible
        if not self.hints_visible:
            self.hint_flash_frames = HINT_FLASH_FRAMES

    # -- theme picker ------------------------------------------------------

    def open_theme_picker(self) -> None:
        self.theme_picker_open = True
        self._theme_before_picker = self.animation.current_theme
        self.theme_picker_index = self.animation.themes.index_of(
            self.animation.current_theme
        )

    def _preview(self) -> None:
        themes = self.animation.themes.all()
        self.animation.set_theme(themes[self.theme_picker_index])

    def theme_picker_up(self) -> None:
        count = len(self.animation.themes)
        self.theme_picker_index = (self.theme_picker_index - 1) % count
        self._preview()

    def theme_picker_down(self) -> None:
        count = len(self.animation.themes)
        self.theme_picker_index = (self.theme_picker_index + 1) % count
        self._preview()

    def theme_picker_confirm(self) -> None:
        theme = self.animation.themes.all()[self.theme_picker_index]
        self.animation.set_theme(theme)
        if not self.adaptive_font:
            self.animation.set_font(self.animation.fonts.get(theme.preferred_font))
        self.theme_picker_open = False
        logger.info("theme selected: %s", theme.id)

    def theme_picker_cancel(self) -> None:
        self.animation.set_theme(self._theme_before_picker)
        self.theme_picker_open = False

    # -- input -------------------------------------------------------------

    def handle_key(self, key: str) -> None:
        """Dispatch one decoded key for the current screen."""
        if self.screen is AppScreen.MENU:
            self._handle_menu_key(key)
        elif self.theme_picker_open:
            self._handle_picker_key(key)
        else:
            self._handle_timer_key(key)

    def _handle_menu_key(self, key: str) -> None:
        if key in ("up", "k"):
            self.menu_up()
        elif key in ("down", "j"):
            self.menu_down()
        elif key in ("enter", "space"):
            self.menu_select()
        elif key in ("q", "esc"):
            self.should_quit = True

    def _handle_picker_key(self, key: str) -> None:
        if key in ("up", "k"):
            self.theme_picker_up()
        elif key in ("down", "j"):
            self.theme_picker_down()
        elif key == "enter":
            self.theme_picker_confirm()
        elif key in ("esc", "T"):
            self.theme_picker_cancel()

    def _handle_timer_key(self, key: str) -> None:
        actions = {
            "space": self.toggle_pause,
            "r": self.reset_session,
            "tab": self.skip_to_next,
            "t": self.open_theme_picker,
            "T": self.open_theme_picker,
            "f": self.next_font,
            "F": self.toggle_adaptive_font,
            "a": self.toggle_auto_rotate,
            "h": self.toggle_hints,
            "z": self.toggle_hints,
            "q": self.quit_to_menu,
        }
        action = actions.get(key)
        if action is not None:
            action()

    # -- per-pass update ---------------------------------------------------

    def tick(self) -> None:
        """Advance animation and, on the timer screen, the session."""
        advanced = self.animation.tick(self.timer.phase.kind, self.auto_rotate)
        if advanced and self.hint_flash_frames > 0:
            self.hint_flash_frames -= 1

        if self.screen is not AppScreen.TIMER:
            return

        previous = self.timer.phase.kind
        self.timer.tick()
        current = self.timer.phase.kind
        if current is not previous and not self.timer.is_paused:
            logger.info("%s finished, now %s", previous.label, current.label)
            message = SESSION_END_MESSAGES.get(previous)
            if message and self.notifier is not None:
                self.notifier(message)
        self._publish()

    def _publish(self) -> None:
        if self.publisher is not None:
            self.publisher.publish(self.timer.snapshot())

    def shutdown(self) -> None:
        """Remove the status file; called once the loop exits."""
        if self.publisher is not None:
            self.publisher.close()
