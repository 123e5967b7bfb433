"""Export the palette as CSS custom properties, JSON, or a HEX list.

Formats:
  css   :root{ --color-1: #...; ... --color-5: #...; }
  json  {"colors": ["#...", ...]}
  hex   #..., #..., ... (one line)
  rgb   "r, g, b" for a single slot (--slot, default 1)

Prints to stdout unless -o/--output is given. --save writes
palette.<ext> into PALETTE_TOOL_OUT_DIR (default: cwd).

Example:
    palette-tool export css
    palette-tool export json -o build/palette.json
    palette-tool export css --save
    palette-tool export rgb --slot 3
"""

import os
import sys

from palette_kit.core.deliver import deliver
from palette_kit.core.serialize import EXTENSIONS, FORMATS, serialize, to_rgb_text
from palette_kit.core.types import Command, Context, PaletteState

command = Command(
    name='export',
    help='Export the palette as CSS variables, JSON, or HEX list.',
)


@command.options
def options(parser) -> None:
    parser.add_argument('format', choices=sorted(FORMATS) + ['rgb'], help='Output format')
    parser.add_argument('-o', '--output', metavar='PATH', help='Save to this file instead of stdout')
    parser.add_argument('-S', '--save', action='store_true', help='Save as palette.<ext> in the output dir')
    parser.add_argument('--slot', type=int, default=1, help='Slot for the rgb format (default 1)')


@command.run
def run(state: PaletteState, args, ctx: Context) -> PaletteState:
    if args.format == 'rgb':
        if not 1 <= args.slot <= len(state.palette):
            raise IndexError(f'Slot {args.slot} out of range 1..{len(state.palette)}')
        text = to_rgb_text(state.palette[args.slot - 1])
        ext = 'txt'
    else:
        text = serialize(state.palette, args.format)
        ext = EXTENSIONS[args.format]

    output = args.output
    if output is None and args.save:
        output = os.path.join(ctx.out_dir, f'palette.{ext}')

    path = deliver(text, output)
    if path is not None:
        print(f'palette-tool: saved {path}', file=sys.stderr)
    ctx.printed = True
    return state
