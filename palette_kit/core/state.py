"""State transitions for the palette editor.

Every function takes the current PaletteState plus one event and returns a
new PaletteState; nothing is mutated in place. Slot indices are 1-based.
"""

from dataclasses import replace
from typing import Any

import numpy as np

from palette_kit.core.colour import parse_hex
from palette_kit.core.generator import (
    DEFAULT_SCHEME,
    PALETTE_SIZE,
    SCHEMES,
    generate_palette,
    random_hue,
    regenerate,
)
from palette_kit.core.types import PaletteState

DEFAULT_ANGLE = 45


def initial_state(rng: np.random.Generator) -> PaletteState:
    base_hue = random_hue(rng)
    return PaletteState(
        scheme=DEFAULT_SCHEME,
        base_hue=base_hue,
        palette=generate_palette(base_hue, DEFAULT_SCHEME, rng),
        locks=[False] * PALETTE_SIZE,
        angle=DEFAULT_ANGLE,
        fg_index=1,
        bg_index=PALETTE_SIZE,
    )


def resize_locks(locks: list[bool], size: int) -> list[bool]:
    """Grow (unlocked) or truncate a lock mask to match a palette of `size`."""
    return list(locks[:size]) + [False] * max(0, size - len(locks))


def _check_slot(state: PaletteState, index: int) -> None:
    if not 1 <= index <= len(state.palette):
        raise IndexError(f'Slot {index} out of range 1..{len(state.palette)}')


def regenerate_state(state: PaletteState, rng: np.random.Generator) -> PaletteState:
    """Replace every unlocked slot with a freshly generated colour."""
    fresh = generate_palette(state.base_hue, state.scheme, rng)
    locks = resize_locks(state.locks, len(state.palette))
    return replace(state, palette=regenerate(state.palette, locks, fresh), locks=locks)


def set_scheme(state: PaletteState, scheme: str, rng: np.random.Generator) -> PaletteState:
    """Switch scheme; unlocked slots are regenerated under the new scheme."""
    if scheme not in SCHEMES:
        raise ValueError(f'Unknown scheme: {scheme}. Available: {", ".join(SCHEMES)}')
    return regenerate_state(replace(state, scheme=scheme), rng)


def set_base_hue(state: PaletteState, hue: float) -> PaletteState:
    return replace(state, base_hue=int(hue) % 360)


def randomize_base_hue(state: PaletteState, rng: np.random.Generator) -> PaletteState:
    return replace(state, base_hue=random_hue(rng))


def set_lock(state: PaletteState, index: int, locked: bool) -> PaletteState:
    _check_slot(state, index)
    locks = resize_locks(state.locks, len(state.palette))
    locks[index - 1] = locked
    return replace(state, locks=locks)


def toggle_lock(state: PaletteState, index: int) -> PaletteState:
    _check_slot(state, index)
    locks = resize_locks(state.locks, len(state.palette))
    return set_lock(state, index, not locks[index - 1])


def update_colour(state: PaletteState, index: int, hex_str: str) -> PaletteState:
    """Set one slot to a user-supplied colour. The leading '#' is optional."""
    _check_slot(state, index)
    palette = list(state.palette)
    palette[index - 1] = parse_hex(hex_str)
    return replace(state, palette=palette)


def set_angle(state: PaletteState, angle: float) -> PaletteState:
    return replace(state, angle=int(angle) % 361)


def select_contrast(state: PaletteState, fg_index: int, bg_index: int) -> PaletteState:
    """Record the contrast selection. Range is resolved when evaluated."""
    return replace(state, fg_index=int(fg_index), bg_index=int(bg_index))


def _is_palette(value: Any) -> bool:
    if not isinstance(value, list) or len(value) != PALETTE_SIZE:
        return False
    try:
        return all(isinstance(v, str) and parse_hex(v) == v for v in value)
    except ValueError:
        return False


def _is_locks(value: Any) -> bool:
    return isinstance(value, list) and len(value) == PALETTE_SIZE and all(isinstance(v, bool) for v in value)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def from_snapshot(snapshot: dict[str, Any], rng: np.random.Generator) -> PaletteState:
    """Rebuild state from a persisted snapshot.

    Each key falls back to its default on its own when missing or malformed,
    so one bad value never discards the rest.
    """
    scheme = snapshot.get('scheme')
    if scheme not in SCHEMES:
        scheme = DEFAULT_SCHEME

    base_hue = snapshot.get('baseHue')
    base_hue = base_hue % 360 if _is_int(base_hue) else random_hue(rng)

    palette = snapshot.get('palette')
    if not _is_palette(palette):
        palette = generate_palette(base_hue, scheme, rng)

    locks = snapshot.get('locks')
    if not _is_locks(locks):
        locks = [False] * PALETTE_SIZE

    angle = snapshot.get('angle')
    fg = snapshot.get('fg')
    bg = snapshot.get('bg')
    return PaletteState(
        scheme=scheme,
        base_hue=base_hue,
        palette=list(palette),
        locks=list(locks),
        angle=angle % 361 if _is_int(angle) else DEFAULT_ANGLE,
        fg_index=fg if _is_int(fg) else 1,
        bg_index=bg if _is_int(bg) else PALETTE_SIZE,
    )
