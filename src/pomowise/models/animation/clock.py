"""Frame counter, active theme/font and theme rotation."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable

from ..timer.policy import PhaseKind
from .fonts import DigitFont, FontCatalogue
from .themes import Theme, ThemeRegistry

logger = logging.getLogger(__name__)

DEFAULT_FPS = 10
SHORT_BREAK_FPS = 5
ROTATION_SECONDS = 150.0
FRAME_WRAP = 2**32
DEFAULT_FONT = "block3d"


def fps_for(kind: PhaseKind) -> int:
    """Target frame rate for a session phase kind; calmer during short breaks."""
    return SHORT_BREAK_FPS if kind is PhaseKind.SHORT_BREAK else DEFAULT_FPS


class AnimationClock:
    """Drives the background animation.

    ``frame_index`` is the only time input renderers see. It advances by at
    most one frame per :meth:`tick`, however long the caller was away.
    Theme and font survive :meth:`reset`.
    """

    def __init__(
        self,
        themes: ThemeRegistry,
        fonts: FontCatalogue,
        clock: Callable[[], float] = time.monotonic,
        rng: random.Random | None = None,
        seed: int | None = None,
        rotation_seconds: float = ROTATION_SECONDS,
        initial_theme: str | None = None,
        initial_font: str = DEFAULT_FONT,
    ):
        self.themes = themes
        self.fonts = fonts
        self._clock = clock
        self.rng = rng if rng is not None else random.Random(seed)
        self.rotation_seconds = rotation_seconds

        now = clock()
        self.frame_index = 0
        self.current_theme: Theme = (
            themes.get(initial_theme) if initial_theme else themes.random(self.rng)
        )
        self.current_font: DigitFont = fonts.get(initial_font)
        self.last_frame_time = now
        self.last_theme_change = now
        self.target_fps = DEFAULT_FPS

    @property
    def frame_interval(self) -> float:
        return 1.0 / self.target_fps

    def tick(self, session_phase: PhaseKind, auto_rotate: bool) -> bool:
        """Advance one frame if a frame interval has passed.

        Returns True when the frame index moved.
        """
        self.target_fps = fps_for(session_phase)
        now = self._clock()

        advanced = False
        if now - self.last_frame_time >= self.frame_interval:
            self.frame_index = (self.frame_index + 1) % FRAME_WRAP
            self.last_frame_time = now
            advanced = True

        if auto_rotate and now - self.last_theme_change >= self.rotation_seconds:
            self.rotate_theme()
        return advanced

    def rotate_theme(self) -> Theme:
        """Switch to a random theme other than the current one."""
        previous = self.current_theme
        self.current_theme = self.themes.random_except(previous, self.rng)
        self.last_theme_change = self._clock()
        logger.debug("theme rotated %s -> %s", previous.id, self.current_theme.id)
        return self.current_theme

    def set_theme(self, theme: Theme) -> None:
        self.current_theme = theme
        self.last_theme_change = self._clock()

    def reset(self) -> None:
        """Restart the frame counter; theme and font are kept."""
        self.frame_index = 0
        self.last_frame_time = self._clock()

    def next_font(self) -> DigitFont:
        self.current_font = self.fonts.next(self.current_font)
        return self.current_font

    def set_font(self, font: DigitFont) -> None:
        self.current_font = font
