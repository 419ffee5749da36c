"""Decorative background renderers.

Every renderer is a pure function of ``(region, frame_index, palette)``: it
fills the region and draws one frame. Nothing is kept between calls, so any
frame can be drawn on its own. ``region.detail`` (0-3) thins out decoration
on small terminals.
"""

from __future__ import annotations

import math
from typing import Callable, NamedTuple

from .canvas import RGB, Region, clamp_rgb

MASK64 = (1 << 64) - 1
GOLDEN = 2654435761


class Palette(NamedTuple):
    primary: RGB
    secondary: RGB
    background: RGB


Renderer = Callable[[Region, int, Palette], None]


def simple_hash(x: int, seed: int) -> int:
    """Cheap deterministic 64-bit integer hash."""
    h = (x * GOLDEN) & MASK64
    h ^= seed & MASK64
    h = (h * GOLDEN) & MASK64
    return h ^ (h >> 16)


def mix(a: RGB, b: RGB, t: float) -> RGB:
    """Linear blend from *a* (t=0) to *b* (t=1)."""
    t = max(0.0, min(1.0, t))
    return clamp_rgb(
        a[0] + (b[0] - a[0]) * t,
        a[1] + (b[1] - a[1]) * t,
        a[2] + (b[2] - a[2]) * t,
    )


def _column_step(region: Region) -> int:
    return 1 if region.detail >= 2 else 2


# Half-width katakana keep every glyph one cell wide.
MATRIX_CHARS = "ｱｲｳｴｵｶｷｸｹｺ0123456789@#$%&*+=<>"


def render_matrix(region: Region, frame_index: int, palette: Palette) -> None:
    """Falling code columns."""
    region.fill(palette.background)
    height = region.height
    for x in range(0, region.width, _column_step(region)):
        h = simple_hash(x, 42)
        speed = (h >> 4) % 3 + 1
        length = (h >> 8) % 10 + 5
        offset = (h >> 12) & 0xFF
        period = height + length + 20
        head = (-(h % 20) + frame_index // speed) % period
        for dist in range(length):
            y = head - dist
            if not 0 <= y < height:
                continue
            ch = MATRIX_CHARS[(y + offset + frame_index // 7) % len(MATRIX_CHARS)]
            if dist == 0:
                region.put(x, y, ch, (220, 255, 220), bold=True)
            else:
                fade = max(0.12, 1.0 - dist / length)
                region.put(x, y, ch, mix(palette.background, palette.primary, fade))


FIRE_CHARS = " .:*sS#$"


def render_fire(region: Region, frame_index: int, palette: Palette) -> None:
    """Flames licking up from the bottom edge."""
    region.fill(palette.background)
    height = region.height
    if height == 0:
        return
    flame_height = max(1, height * (2 + region.detail) // 8)
    for x in range(region.width):
        column_boost = (simple_hash(x + frame_index // 3, 7) % 100) / 100.0
        for depth in range(flame_height):
            y = height - 1 - depth
            flicker = (simple_hash(x * 131 + y, frame_index) % 100) / 100.0
            heat = 1.0 - depth / flame_height
            heat = heat * (0.6 + 0.4 * column_boost) + (flicker - 0.5) * 0.3
            if heat <= 0.05:
                continue
            idx = min(len(FIRE_CHARS) - 1, int(heat * len(FIRE_CHARS)))
            color = mix(palette.secondary, palette.primary, heat)
            region.put(x, y, FIRE_CHARS[idx], color)


def render_starfield(region: Region, frame_index: int, palette: Palette) -> None:
    """Stars streaming outwards from the centre."""
    region.fill(palette.background)
    if region.width == 0 or region.height == 0:
        return
    cx, cy = region.width / 2, region.height / 2
    depth = 64
    count = (region.width * region.height) // (60 - region.detail * 10) + 8
    for star in range(count):
        h = simple_hash(star, 1337)
        sx = ((h & 0xFFFF) / 0xFFFF - 0.5) * 2
        sy = (((h >> 16) & 0xFFFF) / 0xFFFF - 0.5) * 2
        speed = (h >> 32) % 2 + 1
        z = depth - ((h >> 40) % depth + frame_index * speed) % depth
        scale = depth / z
        x = int(cx + sx * cx * scale / 4)
        y = int(cy + sy * cy * scale / 4)
        if not region.contains(x, y):
            continue
        nearness = 1.0 - z / depth
        if nearness > 0.75:
            ch = "*"
        elif nearness > 0.4:
            ch = "+"
        else:
            ch = "."
        region.put(x, y, ch, mix(palette.secondary, palette.primary, nearness))


PLASMA_CHARS = " .:-=+*#%@"


def render_plasma(region: Region, frame_index: int, palette: Palette) -> None:
    """Interfering sine fields."""
    t = frame_index * 0.08
    step = _column_step(region)
    for y in range(region.height):
        for x in range(0, region.width, step):
            v = (
                math.sin(x / 8.0 + t)
                + math.sin(y / 4.0 + t * 1.3)
                + math.sin((x + y) / 10.0 + t * 0.7)
                + math.sin(math.hypot(x - region.width / 2, (y - region.height / 2) * 2) / 6.0 - t)
            )
            level = (v + 4.0) / 8.0
            ch = PLASMA_CHARS[min(len(PLASMA_CHARS) - 1, int(level * len(PLASMA_CHARS)))]
            bg = mix(palette.background, palette.secondary, level * 0.5)
            region.put(x, y, ch, mix(palette.secondary, palette.primary, level), bg)
            if step == 2:
                region.put(x + 1, y, " ", None, bg)


def render_rain(region: Region, frame_index: int, palette: Palette) -> None:
    """Rain streaks with splashes on the ground line."""
    region.fill(palette.background)
    height = region.height
    if height == 0:
        return
    for x in range(0, region.width, _column_step(region)):
        h = simple_hash(x, 99)
        if h % 3 == 0:
            continue
        speed = (h >> 8) % 2 + 1
        length = (h >> 12) % 3 + 2
        period = height + length + (h >> 16) % 15
        head = ((h >> 20) % period + frame_index * speed) % period
        for dist in range(length):
            y = head - dist
            if 0 <= y < height - 1:
                fade = 1.0 - dist / (length + 1)
                region.put(x, y, "|", mix(palette.secondary, palette.primary, fade))
        if head >= height - 1 and head - height < 2:
            region.put(x - 1, height - 1, ".", palette.secondary)
            region.put(x, height - 1, "o", palette.primary)
            region.put(x + 1, height - 1, ".", palette.secondary)


WAVE_CHARS = "~-."


def render_waves(region: Region, frame_index: int, palette: Palette) -> None:
    """Concentric radio waves pulsing out of the centre."""
    region.fill(palette.background)
    cx, cy = region.width / 2, region.height / 2
    spacing = 6.0
    t = frame_index * 0.5
    max_radius = math.hypot(cx, cy * 2) or 1.0
    for y in range(region.height):
        for x in range(region.width):
            d = math.hypot(x - cx, (y - cy) * 2)
            band = (d - t) % spacing
            if band >= 1.0 + region.detail * 0.3:
                continue
            intensity = 1.0 - d / max_radius
            ch = WAVE_CHARS[min(len(WAVE_CHARS) - 1, int(band * 2))]
            region.put(x, y, ch, mix(palette.secondary, palette.primary, intensity))


def _polygon_points(cx: float, cy: float, radius: float, sides: int, angle: float):
    for i in range(sides):
        a = angle + 2 * math.pi * i / sides
        yield cx + math.cos(a) * radius * 2, cy + math.sin(a) * radius


def render_shapes(region: Region, frame_index: int, palette: Palette) -> None:
    """Slowly spinning polygons."""
    region.fill(palette.background)
    if region.width == 0 or region.height == 0:
        return
    shapes = 2 + region.detail
    for idx in range(shapes):
        h = simple_hash(idx, 2024)
        sides = 3 + h % 4
        radius = 2 + (h >> 8) % max(1, min(region.height // 3, 8))
        cx = (h >> 16) % max(1, region.width)
        cy = (h >> 32) % max(1, region.height)
        direction = 1 if (h >> 40) & 1 else -1
        angle = direction * frame_index * 0.05 * (1 + idx % 3)
        color = palette.primary if idx % 2 == 0 else palette.secondary
        corners = list(_polygon_points(cx, cy, radius, sides, angle))
        for i, (x0, y0) in enumerate(corners):
            x1, y1 = corners[(i + 1) % sides]
            steps = int(max(abs(x1 - x0), abs(y1 - y0))) + 1
            for s in range(steps + 1):
                px = x0 + (x1 - x0) * s / steps
                py = y0 + (y1 - y0) * s / steps
                region.put(int(round(px)), int(round(py)), "*", color)


def render_fireworks(region: Region, frame_index: int, palette: Palette) -> None:
    """Bursts that rise, explode and fade."""
    region.fill(palette.background)
    if region.width == 0 or region.height == 0:
        return
    period = 40
    bursts = 2 + region.detail
    for slot in range(bursts):
        local = frame_index + slot * (period // bursts)
        generation = local // period
        age = local % period
        h = simple_hash(generation * 31 + slot, 4242)
        bx = 2 + h % max(1, region.width - 4)
        by = 2 + (h >> 16) % max(1, region.height // 2)
        rise = 10
        if age < rise:
            y = region.height - 1 - (region.height - 1 - by) * age // rise
            region.put(bx, y, "|", palette.secondary)
            continue
        radius = (age - rise) * 0.6
        fade = 1.0 - (age - rise) / (period - rise)
        color = mix(palette.background, palette.primary, fade)
        particles = 12
        for p in range(particles):
            a = 2 * math.pi * p / particles
            x = int(round(bx + math.cos(a) * radius * 2))
            y = int(round(by + math.sin(a) * radius))
            region.put(x, y, "*" if fade > 0.5 else ".", color)


RENDERERS: dict[str, Renderer] = {
    "matrix": render_matrix,
    "fire": render_fire,
    "starfield": render_starfield,
    "plasma": render_plasma,
    "rain": render_rain,
    "waves": render_waves,
    "shapes": render_shapes,
    "fireworks": render_fireworks,
}
