"""WCAG contrast between two palette slots.

Selects foreground (text) and background slots, 1-based, and prints the
contrast ratio with its WCAG 2.x level:

  >= 7.0  AAA
  >= 4.5  AA
  >= 3.0  AA Large
  else    Fail

The selection is remembered. An out-of-range foreground falls back to slot
1, an out-of-range background to the last slot. With no slots given, the
remembered selection is evaluated.

Example:
    palette-tool contrast 1 5
    palette-tool contrast --json
"""

import json

from palette_kit.core.contrast import evaluate
from palette_kit.core.report import format_contrast
from palette_kit.core.state import select_contrast
from palette_kit.core.types import Command, Context, PaletteState

command = Command(
    name='contrast',
    help='WCAG contrast ratio between two slots (AAA / AA / AA Large / Fail).',
)


@command.options
def options(parser) -> None:
    parser.add_argument('fg', type=int, nargs='?', help='Foreground (text) slot')
    parser.add_argument('bg', type=int, nargs='?', help='Background slot')


@command.run
def run(state: PaletteState, args, ctx: Context) -> PaletteState:
    if args.fg is not None:
        bg = args.bg if args.bg is not None else state.bg_index
        state = select_contrast(state, args.fg, bg)

    result = evaluate(state.palette, state.fg_index, state.bg_index)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_contrast(result))
    ctx.printed = True
    return state
