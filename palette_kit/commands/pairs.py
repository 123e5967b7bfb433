"""List every foreground/background slot pair that passes a WCAG level.

Pairs are ordered, since text-on-background is what gets checked, and
sorted by contrast ratio, best first.

Example:
    palette-tool pairs
    palette-tool pairs --min AAA
"""

import json

from palette_kit.core.contrast import FAIL, LEVELS, accessible_pairs
from palette_kit.core.report import format_contrast
from palette_kit.core.types import Command, Context, PaletteState

command = Command(
    name='pairs',
    help='List slot pairs meeting a WCAG level (default AA).',
)


@command.options
def options(parser) -> None:
    levels = [name for _t, name in LEVELS] + [FAIL]
    parser.add_argument('-m', '--min', default='AA', choices=levels, help='Minimum level (default AA)')


@command.run
def run(state: PaletteState, args, ctx: Context) -> PaletteState:
    results = accessible_pairs(state.palette, args.min)
    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
    elif not results:
        print(f'No slot pairs reach {args.min}.')
    else:
        for result in results:
            print(format_contrast(result))
    ctx.printed = True
    return state
