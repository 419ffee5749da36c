"""Cell grid that background renderers and views draw into."""

from __future__ import annotations

from functools import lru_cache

from rich.color import Color
from rich.console import Console, ConsoleOptions, RenderResult
from rich.segment import Segment
from rich.style import Style

RGB = tuple[int, int, int]


def clamp_rgb(r: float, g: float, b: float) -> RGB:
    """Clamp float channels into a valid 0-255 RGB triple."""
    return (
        max(0, min(255, int(r))),
        max(0, min(255, int(g))),
        max(0, min(255, int(b))),
    )


@lru_cache(maxsize=4096)
def _style(fg: RGB | None, bg: RGB | None, bold: bool) -> Style:
    return Style(
        color=Color.from_rgb(*fg) if fg else None,
        bgcolor=Color.from_rgb(*bg) if bg else None,
        bold=bold or None,
    )


class Canvas:
    """A width x height grid of styled cells.

    A fresh canvas is built for every frame. It renders itself as a rich
    renderable, one line per row.
    """

    def __init__(self, width: int, height: int, background: RGB | None = None):
        self.width = max(0, width)
        self.height = max(0, height)
        self._chars = [[" "] * self.width for _ in range(self.height)]
        self._fg: list[list[RGB | None]] = [
            [None] * self.width for _ in range(self.height)
        ]
        self._bg: list[list[RGB | None]] = [
            [background] * self.width for _ in range(self.height)
        ]
        self._bold = [[False] * self.width for _ in range(self.height)]

    def region(
        self,
        x: int = 0,
        y: int = 0,
        width: int | None = None,
        height: int | None = None,
        detail: int = 3,
    ) -> "Region":
        """Return a clipped rectangular view of this canvas."""
        if width is None:
            width = self.width - x
        if height is None:
            height = self.height - y
        return Region(self, x, y, width, height, detail)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put(
        self,
        x: int,
        y: int,
        ch: str,
        fg: RGB | None = None,
        bg: RGB | None = None,
        bold: bool = False,
    ) -> None:
        if not self.contains(x, y):
            return
        self._chars[y][x] = ch
        self._fg[y][x] = fg
        if bg is not None:
            self._bg[y][x] = bg
        self._bold[y][x] = bold

    def text(
        self,
        x: int,
        y: int,
        text: str,
        fg: RGB | None = None,
        bg: RGB | None = None,
        bold: bool = False,
    ) -> None:
        for i, ch in enumerate(text):
            self.put(x + i, y, ch, fg, bg, bold)

    def fill(
        self, x: int, y: int, width: int, height: int, bg: RGB, ch: str = " "
    ) -> None:
        for row in range(y, y + height):
            for col in range(x, x + width):
                self.put(col, row, ch, None, bg)

    def cell(self, x: int, y: int) -> tuple[str, RGB | None, RGB | None]:
        return self._chars[y][x], self._fg[y][x], self._bg[y][x]

    def rows(self) -> list[str]:
        """Plain text of every row."""
        return ["".join(row) for row in self._chars]

    def __rich_console__(
        self, console: Console, options: ConsoleOptions
    ) -> RenderResult:
        for y in range(self.height):
            chars, fgs, bgs, bolds = (
                self._chars[y],
                self._fg[y],
                self._bg[y],
                self._bold[y],
            )
            run_start = 0
            for x in range(1, self.width + 1):
                if (
                    x == self.width
                    or fgs[x] != fgs[run_start]
                    or bgs[x] != bgs[run_start]
                    or bolds[x] != bolds[run_start]
                ):
                    yield Segment(
                        "".join(chars[run_start:x]),
                        _style(fgs[run_start], bgs[run_start], bolds[run_start]),
                    )
                    run_start = x
            if y < self.height - 1:
                yield Segment.line()


class Region:
    """Rectangular, clipped view of a canvas in local coordinates.

    Writes that fall outside the region are dropped. ``detail`` (0-3) is a
    hint renderers may use to thin out decoration on small terminals.
    """

    def __init__(
        self, canvas: Canvas, x: int, y: int, width: int, height: int, detail: int = 3
    ):
        self.canvas = canvas
        self.x = max(0, x)
        self.y = max(0, y)
        self.width = max(0, min(width, canvas.width - self.x))
        self.height = max(0, min(height, canvas.height - self.y))
        self.detail = detail

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put(
        self,
        x: int,
        y: int,
        ch: str,
        fg: RGB | None = None,
        bg: RGB | None = None,
        bold: bool = False,
    ) -> None:
        if self.contains(x, y):
            self.canvas.put(self.x + x, self.y + y, ch, fg, bg, bold)

    def text(
        self,
        x: int,
        y: int,
        text: str,
        fg: RGB | None = None,
        bg: RGB | None = None,
        bold: bool = False,
    ) -> None:
        for i, ch in enumerate(text):
            self.put(x + i, y, ch, fg, bg, bold)

    def fill(self, bg: RGB, ch: str = " ") -> None:
        for y in range(self.height):
            for x in range(self.width):
                self.canvas.put(self.x + x, self.y + y, ch, None, bg)
