"""Colour conversions: HSL -> RGB, RGB <-> hex, relative luminance.

Hex strings are always emitted as lowercase `#rrggbb`. No alpha channel.
"""

import math
import re

RGB = tuple[int, int, int]

_HEX_RE = re.compile(r'^[0-9a-fA-F]{6}$')


class InvalidColourFormat(ValueError):
    """Raised by parse_hex when a string is not a `#rrggbb` colour."""


def clamp(v: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return min(hi, max(lo, v))


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:  # noqa: E741
    """Convert HSL to an 8-bit RGB triple.

    h is in degrees and wrapped mod 360. s and l are expected in [0, 1];
    callers clamp them, nothing is validated here. A NaN or infinite hue
    is treated as 0.
    """
    if not math.isfinite(h):
        h = 0
    h = h % 360
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

    return (
        _round_half_up((r + m) * 255),
        _round_half_up((g + m) * 255),
        _round_half_up((b + m) * 255),
    )


def rgb_to_hex(rgb: RGB) -> str:
    r, g, b = rgb
    return f'#{r:02x}{g:02x}{b:02x}'


def hex_to_rgb(hex_str: str) -> RGB:
    """Parse `#rrggbb` (hash optional, any case) into an RGB triple.

    Anything that is not exactly six hex digits returns black (0, 0, 0).
    Use parse_hex() when bad input should be reported instead.
    """
    h = hex_str.strip().lstrip('#')
    if not _HEX_RE.match(h):
        return (0, 0, 0)
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def parse_hex(hex_str: str) -> str:
    """Validate a user-supplied colour and return it as canonical `#rrggbb`."""
    h = hex_str.strip()
    if h.startswith('#'):
        h = h[1:]
    if not _HEX_RE.match(h):
        raise InvalidColourFormat(f'Invalid colour {hex_str!r}: expected #rrggbb')
    return f'#{h.lower()}'


def _linearize(v: float) -> float:
    if v <= 0.03928:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGB) -> float:
    """sRGB relative luminance in [0, 1], as defined by WCAG 2.x."""
    r, g, b = (_linearize(c / 255) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b
