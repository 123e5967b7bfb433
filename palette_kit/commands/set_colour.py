"""Replace one slot with a colour of your own.

The colour must be six hex digits; the leading '#' is optional.

Example:
    palette-tool set 2 '#1e3a8a'
    palette-tool set 5 ffffff
"""

from palette_kit.core.state import update_colour
from palette_kit.core.types import Command, Context, PaletteState

command = Command(
    name='set',
    help='Set one slot (1-based) to a hex colour.',
)


@command.options
def options(parser) -> None:
    parser.add_argument('slot', type=int, help='Slot number, 1-5')
    parser.add_argument('colour', help='Hex colour, e.g. #1e3a8a')


@command.run
def run(state: PaletteState, args, ctx: Context) -> PaletteState:
    return update_colour(state, args.slot, args.colour)
