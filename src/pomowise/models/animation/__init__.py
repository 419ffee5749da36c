"""Animated background: canvas, fonts, themes and the frame clock."""

from .canvas import Canvas, Region
from .clock import AnimationClock
from .fonts import DigitFont, FontCatalogue, load_fonts, render_time
from .themes import Theme, ThemeRegistry, load_themes

__all__ = [
    "AnimationClock",
    "Canvas",
    "DigitFont",
    "FontCatalogue",
    "Region",
    "Theme",
    "ThemeRegistry",
    "load_fonts",
    "load_themes",
    "render_time",
]
