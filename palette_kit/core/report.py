"""Report builder, text and JSON output for palette-tool state."""

import json
from typing import Any

from palette_kit.core.colour import hex_to_rgb
from palette_kit.core.contrast import evaluate
from palette_kit.core.types import ContrastResult, PaletteState


def format_contrast(result: ContrastResult) -> str:
    return (
        f'contrast: {result.fg_index} on {result.bg_index}  '
        f'{result.fg} / {result.bg}  {result.ratio:.2f}  {result.level}'
    )


def format_text(state: PaletteState) -> str:
    """Format state as human-readable text."""
    lines = [f'palette-tool: {state.scheme} (base hue {state.base_hue}°)', '']

    for i, hex_str in enumerate(state.palette, start=1):
        r, g, b = hex_to_rgb(hex_str)
        locked = i <= len(state.locks) and state.locks[i - 1]
        mark = '  [locked]' if locked else ''
        lines.append(f'  {i}  {hex_str}  rgb({r}, {g}, {b}){mark}')

    lines.append('')
    lines.append(f'── gradient angle {state.angle}°')
    lines.append(format_contrast(evaluate(state.palette, state.fg_index, state.bg_index)))
    return '\n'.join(lines)


def format_json(state: PaletteState) -> str:
    """Format state as JSON."""
    obj: dict[str, Any] = {
        'scheme': state.scheme,
        'base_hue': state.base_hue,
        'colors': [
            {'slot': i, 'hex': hex_str, 'rgb': list(hex_to_rgb(hex_str)), 'locked': bool(locked)}
            for i, (hex_str, locked) in enumerate(zip(state.palette, state.locks), start=1)
        ],
        'angle': state.angle,
        'contrast': evaluate(state.palette, state.fg_index, state.bg_index).to_dict(),
    }
    return json.dumps(obj, indent=2)
