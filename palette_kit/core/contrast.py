"""WCAG 2.x contrast ratio between palette colours, with AA/AAA classification."""

from itertools import permutations

from palette_kit.core.colour import hex_to_rgb, relative_luminance
from palette_kit.core.types import ContrastResult

# Evaluated high to low; the first threshold met wins.
LEVELS: list[tuple[float, str]] = [
    (7.0, 'AAA'),
    (4.5, 'AA'),
    (3.0, 'AA Large'),
]
FAIL = 'Fail'


def contrast_ratio(hex_a: str, hex_b: str) -> float:
    """Return the contrast ratio of two colours, in [1, 21]. Symmetric."""
    l1 = relative_luminance(hex_to_rgb(hex_a))
    l2 = relative_luminance(hex_to_rgb(hex_b))
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def wcag_level(ratio: float) -> str:
    for threshold, level in LEVELS:
        if ratio >= threshold:
            return level
    return FAIL


def _level_rank(level: str) -> int:
    names = [name for _t, name in LEVELS]
    if level == FAIL:
        return len(names)
    if level not in names:
        raise ValueError(f'Unknown WCAG level: {level}. Available: {", ".join(names)}, {FAIL}')
    return names.index(level)


def resolve_selection(palette: list[str], fg_index: int, bg_index: int) -> tuple[int, int]:
    """Map a 1-based (fg, bg) selection onto valid slots.

    An out-of-range foreground falls back to the first slot and an
    out-of-range background to the last one. Never raises.
    """
    size = len(palette)
    fg = fg_index if 1 <= fg_index <= size else 1
    bg = bg_index if 1 <= bg_index <= size else size
    return fg, bg


def evaluate(palette: list[str], fg_index: int, bg_index: int) -> ContrastResult:
    fg, bg = resolve_selection(palette, fg_index, bg_index)
    fg_hex = palette[fg - 1]
    bg_hex = palette[bg - 1]
    ratio = contrast_ratio(fg_hex, bg_hex)
    return ContrastResult(
        fg_index=fg,
        bg_index=bg,
        fg=fg_hex,
        bg=bg_hex,
        ratio=ratio,
        level=wcag_level(ratio),
    )


def accessible_pairs(palette: list[str], minimum: str = 'AA') -> list[ContrastResult]:
    """All ordered (fg, bg) slot pairs that reach at least `minimum`, best first."""
    floor = _level_rank(minimum)
    results = []
    for fg, bg in permutations(range(1, len(palette) + 1), 2):
        result = evaluate(palette, fg, bg)
        if _level_rank(result.level) <= floor:
            results.append(result)
    results.sort(key=lambda r: (-r.ratio, r.fg_index, r.bg_index))
    return results
