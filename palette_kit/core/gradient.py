"""Linear gradient preview of a palette.

The gradient axis passes through the image centre at `angle` degrees
(0 = left to right, 90 = top to bottom) and extends max(width, height)
either side of it. Colour stops are evenly spaced along the axis in palette
order; pixels beyond either end take the end colour.
"""

import math
from pathlib import Path

import numpy as np
from PIL import Image

from palette_kit.core.colour import hex_to_rgb

PREVIEW_SIZE = (1200, 675)


def render_gradient(
    palette: list[str],
    angle: float = 45,
    width: int = PREVIEW_SIZE[0],
    height: int = PREVIEW_SIZE[1],
) -> Image.Image:
    colours = np.array([hex_to_rgb(c) for c in palette], dtype=float)
    if len(colours) == 1:
        return Image.new('RGB', (width, height), tuple(int(c) for c in colours[0]))

    rad = math.radians(angle)
    dx, dy = math.cos(rad), math.sin(rad)
    length = max(width, height)
    cx, cy = width / 2, height / 2
    x0, y0 = cx - dx * length, cy - dy * length
    # Axis vector (x1 - x0, y1 - y0) is 2 * length * (dx, dy)
    ax, ay = 2 * dx * length, 2 * dy * length

    # Sample at pixel centres
    xs = np.arange(width) + 0.5
    ys = np.arange(height) + 0.5
    gx, gy = np.meshgrid(xs, ys)
    t = ((gx - x0) * ax + (gy - y0) * ay) / (ax * ax + ay * ay)
    t = np.clip(t, 0.0, 1.0)

    stops = np.linspace(0.0, 1.0, len(colours))
    out = np.empty((height, width, 3), dtype=np.uint8)
    for ch in range(3):
        out[..., ch] = np.rint(np.interp(t, stops, colours[:, ch])).astype(np.uint8)
    return Image.fromarray(out)


def save_gradient(
    palette: list[str],
    path: str | Path,
    angle: float = 45,
    width: int = PREVIEW_SIZE[0],
    height: int = PREVIEW_SIZE[1],
) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    render_gradient(palette, angle, width, height).save(path)
    return path
