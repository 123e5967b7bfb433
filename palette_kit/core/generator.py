"""Five-colour palette generation from a base hue and a hue scheme.

Schemes place five hues around the base hue; saturation and lightness come
either from a fixed ladder (monochrome) or from one random draw spread over
a small lightness ladder (everything else).

Randomness comes from a numpy Generator passed in by the caller, so tests
can substitute a deterministic source.
"""

import numpy as np

from palette_kit.core.colour import clamp, hsl_to_rgb, rgb_to_hex

PALETTE_SIZE = 5

SCHEMES = ('random', 'complementary', 'triadic', 'analogous', 'monochrome')
DEFAULT_SCHEME = 'random'

# Hue offsets in degrees from the base hue, one per slot
_HUE_OFFSETS: dict[str, list[int]] = {
    'complementary': [0, 180, 30, 210, 350],
    'triadic': [0, 120, 240, 60, 300],
    'analogous': [-30, -10, 0, 10, 30],
    'monochrome': [0, 0, 0, 0, 0],
}

MONO_SATURATION = [0.15, 0.30, 0.45, 0.60, 0.75]
MONO_LIGHTNESS = [0.25, 0.40, 0.55, 0.70, 0.85]

SATURATION_RANGE = (0.5, 0.9)
LIGHTNESS_RANGE = (0.45, 0.65)
LIGHTNESS_SPREAD = [-0.15, -0.05, 0.0, 0.08, 0.16]
LIGHTNESS_BOUNDS = (0.15, 0.9)


def make_rng(seed: int | None = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def random_hue(rng: np.random.Generator) -> int:
    return int(rng.integers(0, 360))


def scheme_hues(base_hue: float, scheme: str, rng: np.random.Generator) -> list[float]:
    """Return the five hues for `scheme`, each wrapped into [0, 360).

    Unknown schemes are treated as 'random'.
    """
    offsets = _HUE_OFFSETS.get(scheme)
    if offsets is None:
        return [float(h) for h in rng.integers(0, 360, size=PALETTE_SIZE)]
    return [(base_hue + off) % 360 for off in offsets]


def scheme_ladders(scheme: str, rng: np.random.Generator) -> tuple[list[float], list[float]]:
    """Return (saturations, lightnesses) for the five slots."""
    if scheme == 'monochrome':
        return list(MONO_SATURATION), list(MONO_LIGHTNESS)

    s = float(rng.uniform(*SATURATION_RANGE))
    l = float(rng.uniform(*LIGHTNESS_RANGE))  # noqa: E741
    lo, hi = LIGHTNESS_BOUNDS
    lightness = [clamp(l + d, lo, hi) for d in LIGHTNESS_SPREAD]
    return [s] * PALETTE_SIZE, lightness


def generate_palette(
    base_hue: float | None = None,
    scheme: str = DEFAULT_SCHEME,
    rng: np.random.Generator | None = None,
) -> list[str]:
    """Generate a palette of five `#rrggbb` colours. Never raises."""
    if rng is None:
        rng = make_rng()
    if base_hue is None:
        base_hue = random_hue(rng)

    hues = scheme_hues(base_hue, scheme, rng)
    saturations, lightnesses = scheme_ladders(scheme, rng)

    palette = []
    for h, s, l in zip(hues, saturations, lightnesses):  # noqa: E741
        rgb = hsl_to_rgb(h, clamp(s), clamp(l))
        palette.append(rgb_to_hex(rgb))
    return palette


def regenerate(palette: list[str], locks: list[bool], fresh: list[str]) -> list[str]:
    """Merge a fresh palette into an existing one, keeping locked slots."""
    if not (len(palette) == len(locks) == len(fresh)):
        raise ValueError(
            f'Palette, lock mask and fresh palette differ in size: {len(palette)}, {len(locks)}, {len(fresh)}'
        )
    return [old if locked else new for old, locked, new in zip(palette, locks, fresh)]
