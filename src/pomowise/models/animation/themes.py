"""Theme registry.

A theme bundles a background renderer, a colour palette and a preferred
digit font. Themes are loaded from ``data/themes.json`` and looked up by id.
"""

from __future__ import annotations

import json
import random
from functools import lru_cache
from importlib import resources

from pydantic import BaseModel, ConfigDict, field_validator

from .canvas import RGB, Region
from .fonts import FontCatalogue, load_fonts
from .renderers import RENDERERS, Palette


class ThemeSpec(BaseModel):
    """Raw theme entry as stored on disk."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    renderer: str
    primary: tuple[int, int, int]
    secondary: tuple[int, int, int]
    background: tuple[int, int, int]
    preferred_font: str

    @field_validator("primary", "secondary", "background")
    @classmethod
    def _check_rgb(cls, value: tuple[int, int, int]) -> tuple[int, int, int]:
        if any(not 0 <= channel <= 255 for channel in value):
            raise ValueError(f"colour channels must be 0-255, got {value}")
        return value

    @field_validator("renderer")
    @classmethod
    def _check_renderer(cls, value: str) -> str:
        if value not in RENDERERS:
            raise ValueError(f"unknown renderer {value!r}")
        return value


class Theme:
    """Value object every view talks to; hides which renderer is behind it."""

    def __init__(self, spec: ThemeSpec):
        self.spec = spec
        self._renderer = RENDERERS[spec.renderer]
        self._palette = Palette(spec.primary, spec.secondary, spec.background)

    def __repr__(self) -> str:
        return f"Theme({self.id!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Theme) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def id(self) -> str:
        return self.spec.id

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def primary(self) -> RGB:
        return self.spec.primary

    @property
    def secondary(self) -> RGB:
        return self.spec.secondary

    @property
    def background(self) -> RGB:
        return self.spec.background

    @property
    def preferred_font(self) -> str:
        return self.spec.preferred_font

    def render_background(self, region: Region, frame_index: int) -> None:
        self._renderer(region, frame_index, self._palette)


class ThemeRegistry:
    """Ordered table of themes, looked up by id."""

    def __init__(self, themes: list[Theme]):
        if not themes:
            raise ValueError("theme registry is empty")
        self._themes = list(themes)
        self._by_id: dict[str, Theme] = {}
        for theme in self._themes:
            if theme.id in self._by_id:
                raise ValueError(f"duplicate theme id {theme.id!r}")
            self._by_id[theme.id] = theme

    @classmethod
    def from_json(cls, text: str, fonts: FontCatalogue) -> "ThemeRegistry":
        themes = []
        for entry in json.loads(text):
            spec = ThemeSpec.model_validate(entry)
            if spec.preferred_font not in fonts:
                raise ValueError(
                    f"theme {spec.id!r} prefers unknown font {spec.preferred_font!r}"
                )
            themes.append(Theme(spec))
        return cls(themes)

    def __len__(self) -> int:
        return len(self._themes)

    def __contains__(self, theme_id: str) -> bool:
        return theme_id in self._by_id

    def all(self) -> list[Theme]:
        return list(self._themes)

    def ids(self) -> list[str]:
        return [theme.id for theme in self._themes]

    def get(self, theme_id: str) -> Theme:
        try:
            return self._by_id[theme_id]
        except KeyError:
            raise KeyError(f"unknown theme {theme_id!r}") from None

    def index_of(self, theme: Theme) -> int:
        return self.ids().index(theme.id)

    def random(self, rng: random.Random) -> Theme:
        return rng.choice(self._themes)

    def random_except(self, current: Theme, rng: random.Random) -> Theme:
        """Pick uniformly among the other themes by reject-and-resample."""
        if len(self._themes) < 2:
            return current
        while True:
            candidate = rng.choice(self._themes)
            if candidate != current:
                return candidate


@lru_cache(maxsize=1)
def load_themes() -> ThemeRegistry:
    """Load the bundled theme registry."""
    text = resources.files("pomowise.data").joinpath("themes.json").read_text(
        encoding="utf-8"
    )
    return ThemeRegistry.from_json(text, load_fonts())
