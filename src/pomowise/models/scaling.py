"""Adaptive layout for the live terminal size.

Everything here is a pure function of ``(width, height)``. A resize builds a
new :class:`ScalingContext`; contexts are never patched in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple

from .animation.fonts import DigitFont, FontCatalogue, load_fonts

MIN_WIDTH = 40
MIN_HEIGHT = 15

TIMER_PADDING = 4

# Share of the terminal the big clock may occupy when picking a best-fit font.
FIT_WIDTH_RATIO = (6, 10)
FIT_HEIGHT_RATIO = (4, 10)


class SizeCategory(IntEnum):
    TOO_SMALL = 0
    COMPACT = 1
    MEDIUM = 2
    LARGE = 3
    EXTRA_LARGE = 4

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()

    @classmethod
    def from_dimensions(cls, width: int, height: int) -> "SizeCategory":
        """Classify a terminal. A size exactly on a threshold belongs to the
        larger category."""
        if width < MIN_WIDTH or height < MIN_HEIGHT:
            return cls.TOO_SMALL
        if width < 60 or height < 20:
            return cls.COMPACT
        if width < 100 or height < 30:
            return cls.MEDIUM
        if width < 150 or height < 45:
            return cls.LARGE
        return cls.EXTRA_LARGE


class LayoutProfile(NamedTuple):
    font: str
    detail: int
    show_progress_bar: bool
    show_hints: bool
    show_session_info: bool


PROFILES: dict[SizeCategory, LayoutProfile] = {
    SizeCategory.TOO_SMALL: LayoutProfile("classic", 0, False, False, False),
    SizeCategory.COMPACT: LayoutProfile("classic", 1, True, False, False),
    SizeCategory.MEDIUM: LayoutProfile("terminal", 2, True, True, True),
    SizeCategory.LARGE: LayoutProfile("block3d", 3, True, True, True),
    SizeCategory.EXTRA_LARGE: LayoutProfile("outlined", 3, True, True, True),
}


@dataclass(frozen=True)
class ScalingContext:
    width: int
    height: int
    size_category: SizeCategory
    recommended_font: DigitFont
    background_detail_level: int
    show_progress_bar: bool
    show_hints: bool
    show_session_info: bool

    @classmethod
    def from_dimensions(
        cls, width: int, height: int, fonts: FontCatalogue | None = None
    ) -> "ScalingContext":
        fonts = fonts or load_fonts()
        width, height = max(0, width), max(0, height)
        category = SizeCategory.from_dimensions(width, height)
        profile = PROFILES[category]
        return cls(
            width=width,
            height=height,
            size_category=category,
            recommended_font=fonts.get(profile.font),
            background_detail_level=profile.detail,
            show_progress_bar=profile.show_progress_bar,
            show_hints=profile.show_hints,
            show_session_info=profile.show_session_info,
        )

    @property
    def is_too_small(self) -> bool:
        return self.size_category is SizeCategory.TOO_SMALL

    @property
    def timer_height(self) -> int:
        return self.recommended_font.height + TIMER_PADDING

    @property
    def timer_width(self) -> int:
        """Room for "MM:SS" in the recommended font, padded."""
        return self.recommended_font.timer_width + TIMER_PADDING

    def center_x(self, element_width: int) -> int:
        if element_width >= self.width:
            return 0
        return (self.width - element_width) // 2

    def center_y(self, element_height: int) -> int:
        if element_height >= self.height:
            return 0
        return (self.height - element_height) // 2

    def timer_y(self, font: DigitFont | None = None) -> int:
        """Top row of the timer area, a little above centre."""
        font = font or self.recommended_font
        if font.height + TIMER_PADDING >= self.height:
            return 0
        return self.height * 35 // 100

    def progress_bar_y(self) -> int:
        return max(0, self.height - 3)

    def hints_y(self) -> int:
        return max(0, self.height - 5)


def select_font_for_size(
    width: int, height: int, fonts: FontCatalogue | None = None
) -> DigitFont:
    """Largest font whose "MM:SS" fits a fixed share of the terminal.

    Falls back to the smallest font when nothing fits.
    """
    fonts = fonts or load_fonts()
    available_width = width * FIT_WIDTH_RATIO[0] // FIT_WIDTH_RATIO[1]
    available_height = height * FIT_HEIGHT_RATIO[0] // FIT_HEIGHT_RATIO[1]
    ordered = fonts.by_size()
    for font in reversed(ordered):
        if font.timer_width <= available_width and font.height <= available_height:
            return font
    return ordered[0]
