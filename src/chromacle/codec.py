"""HSL to display-hex conversion."""

from __future__ import annotations

import math

from chromacle.models import Color


def hsl_to_rgb(color: Color) -> tuple[int, int, int]:
    """Standard sextant-based HSL -> RGB, each channel in 0-255."""
    h = color.h % 360
    s = color.s / 100.0
    l = color.l / 100.0

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return _channel(r + m), _channel(g + m), _channel(b + m)


def _channel(value: float) -> int:
    # Round half up, then clamp
    return min(255, max(0, math.floor(value * 255 + 0.5)))


def to_hex(color: Color) -> str:
    """Render a color as ``#rrggbb``."""
    r, g, b = hsl_to_rgb(color)
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_str: str) -> tuple[int, int, int]:
    """Parse ``#rrggbb`` back into an RGB tuple (used for drawing swatches)."""
    value = hex_str.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Not a 6-digit hex color: {hex_str!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
