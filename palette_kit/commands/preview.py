"""Render the palette as a linear gradient PNG.

Colour stops are evenly spaced in palette order along an axis through the
image centre at the saved angle (see `palette-tool angle`). --angle
overrides it for this render only.

Saves to -o/--output, or palette-gradient.png in PALETTE_TOOL_OUT_DIR.

Example:
    palette-tool preview
    palette-tool preview -o tmp/grad.png --angle 90 --size 800x450
"""

import json
import os

from palette_kit.core.gradient import PREVIEW_SIZE, save_gradient
from palette_kit.core.types import Command, Context, PaletteState

command = Command(
    name='preview',
    help='Render the palette as a gradient PNG.',
)


def _size(text: str) -> tuple[int, int]:
    w, sep, h = text.lower().partition('x')
    if not sep or not w.isdigit() or not h.isdigit() or int(w) == 0 or int(h) == 0:
        raise ValueError(f'Invalid size {text!r}: expected WIDTHxHEIGHT')
    return int(w), int(h)


@command.options
def options(parser) -> None:
    parser.add_argument('-o', '--output', metavar='PATH', help='PNG path')
    parser.add_argument('-a', '--angle', type=int, default=None, help='Angle for this render only')
    parser.add_argument(
        '--size',
        type=_size,
        default=PREVIEW_SIZE,
        metavar='WxH',
        help=f'Image size (default {PREVIEW_SIZE[0]}x{PREVIEW_SIZE[1]})',
    )


@command.run
def run(state: PaletteState, args, ctx: Context) -> PaletteState:
    output = args.output or os.path.join(ctx.out_dir, 'palette-gradient.png')
    angle = state.angle if args.angle is None else args.angle
    width, height = args.size
    path = save_gradient(state.palette, output, angle=angle, width=width, height=height)
    ctx.note(f'saved {path}')
    if args.json:
        print(json.dumps({'file': str(path), 'width': width, 'height': height, 'angle': angle}, indent=2))
        ctx.printed = True
    return state
