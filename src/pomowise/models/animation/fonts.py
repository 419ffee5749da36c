"""Digit fonts for the big countdown display.

Fonts are data: ``data/fonts.json`` is loaded once and validated into a
catalogue. Adding a font needs no code changes.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .canvas import RGB, Region

COLON = ":"


class DigitFont(BaseModel):
    """One digit font: ten digit glyphs, a colon and two-tone char sets."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    colon_width: int = Field(gt=0)
    digits: tuple[tuple[str, ...], ...]
    colon: tuple[str, ...]
    primary_chars: frozenset[str] = frozenset()
    secondary_chars: frozenset[str] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def _split_char_sets(cls, data):
        if isinstance(data, dict):
            for key in ("primary_chars", "secondary_chars"):
                if isinstance(data.get(key), str):
                    data = {**data, key: frozenset(data[key])}
        return data

    @model_validator(mode="after")
    def _check_dimensions(self) -> "DigitFont":
        if len(self.digits) != 10:
            raise ValueError(f"font {self.id!r} must define 10 digits")
        for digit, glyph in enumerate(self.digits):
            self._check_glyph(glyph, self.width, f"digit {digit}")
        self._check_glyph(self.colon, self.colon_width, "colon")
        overlap = self.primary_chars & self.secondary_chars
        if overlap:
            raise ValueError(
                f"font {self.id!r} primary and secondary chars overlap: "
                f"{''.join(sorted(overlap))}"
            )
        return self

    def _check_glyph(self, glyph: tuple[str, ...], width: int, label: str) -> None:
        if len(glyph) != self.height:
            raise ValueError(
                f"font {self.id!r} {label} has {len(glyph)} rows, expected {self.height}"
            )
        for row in glyph:
            if len(row) != width:
                raise ValueError(
                    f"font {self.id!r} {label} row {row!r} is not {width} wide"
                )

    def glyph(self, ch: str | int) -> tuple[str, ...]:
        """Rows for a digit (0-9) or the colon."""
        if ch == COLON:
            return self.colon
        digit = int(ch)
        if not 0 <= digit <= 9:
            raise ValueError(f"not a digit: {ch!r}")
        return self.digits[digit]

    @property
    def timer_width(self) -> int:
        """Columns needed for "MM:SS" without padding."""
        return self.width * 4 + self.colon_width


class FontCatalogue:
    """Ordered lookup of digit fonts."""

    def __init__(self, fonts: list[DigitFont]):
        if not fonts:
            raise ValueError("font catalogue is empty")
        self._fonts = list(fonts)
        self._by_id: dict[str, DigitFont] = {}
        for font in self._fonts:
            if font.id in self._by_id:
                raise ValueError(f"duplicate font id {font.id!r}")
            self._by_id[font.id] = font

    @classmethod
    def from_json(cls, text: str) -> "FontCatalogue":
        return cls([DigitFont.model_validate(entry) for entry in json.loads(text)])

    def __len__(self) -> int:
        return len(self._fonts)

    def __contains__(self, font_id: str) -> bool:
        return font_id in self._by_id

    def all(self) -> list[DigitFont]:
        return list(self._fonts)

    def ids(self) -> list[str]:
        return [font.id for font in self._fonts]

    def get(self, font_id: str) -> DigitFont:
        try:
            return self._by_id[font_id]
        except KeyError:
            raise KeyError(f"unknown font {font_id!r}") from None

    def next(self, font: DigitFont) -> DigitFont:
        """The font after *font* in catalogue order, wrapping around."""
        ids = self.ids()
        idx = ids.index(font.id) if font.id in self._by_id else -1
        return self._fonts[(idx + 1) % len(self._fonts)]

    def by_size(self) -> list[DigitFont]:
        """Fonts from smallest to largest (height, then timer width)."""
        return sorted(self._fonts, key=lambda f: (f.height, f.timer_width))

    def smallest(self) -> DigitFont:
        return self.by_size()[0]

    def glyph(self, font_id: str, ch: str | int) -> tuple[str, ...]:
        return self.get(font_id).glyph(ch)


@lru_cache(maxsize=1)
def load_fonts() -> FontCatalogue:
    """Load the bundled font catalogue."""
    text = resources.files("pomowise.data").joinpath("fonts.json").read_text(
        encoding="utf-8"
    )
    return FontCatalogue.from_json(text)


def render_time(
    region: Region,
    font: DigitFont,
    minutes: int,
    seconds: int,
    primary: RGB,
    secondary: RGB,
) -> None:
    """Draw "MM:SS" centred in *region* with two-tone styling.

    Blank cells are left untouched so the background shows through.
    """
    minutes = max(0, min(99, minutes))
    seconds = max(0, min(59, seconds))
    text = f"{minutes:02d}:{seconds:02d}"

    x = max(0, (region.width - font.timer_width) // 2)
    y = max(0, (region.height - font.height) // 2)
    for ch in text:
        glyph = font.glyph(ch)
        for row, line in enumerate(glyph):
            for col, cell in enumerate(line):
                if cell == " ":
                    continue
                color = secondary if cell in font.secondary_chars else primary
                region.put(x + col, y + row, cell, color, bold=cell in font.primary_chars)
        x += len(glyph[0])
