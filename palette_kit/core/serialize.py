"""Text serializations of a palette: CSS custom properties, JSON, HEX list."""

import json
from collections.abc import Callable

from palette_kit.core.colour import hex_to_rgb


def to_css_vars(palette: list[str]) -> str:
    """Render `:root{ --color-1: ...; }` with 1-based names in palette order."""
    body = '\n'.join(f'  --color-{i}: {hex_str};' for i, hex_str in enumerate(palette, start=1))
    return f':root{{\n{body}\n}}'


def to_json(palette: list[str]) -> str:
    return json.dumps({'colors': list(palette)}, indent=2)


def to_hex_list(palette: list[str]) -> str:
    return ', '.join(palette)


def to_rgb_text(hex_str: str) -> str:
    return ', '.join(str(c) for c in hex_to_rgb(hex_str))


FORMATS: dict[str, Callable[[list[str]], str]] = {
    'css': to_css_vars,
    'json': to_json,
    'hex': to_hex_list,
}

EXTENSIONS = {'css': 'css', 'json': 'json', 'hex': 'txt'}


def serialize(palette: list[str], fmt: str) -> str:
    if fmt not in FORMATS:
        raise ValueError(f'Unknown export format: {fmt}. Available: {", ".join(sorted(FORMATS))}')
    return FORMATS[fmt](palette)
