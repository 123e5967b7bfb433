"""Lock palette slots so `generate` keeps their colours.

Slots are 1-based. --toggle flips each listed slot instead.

Example:
    palette-tool lock 1 3
    palette-tool lock --toggle 2
"""

from palette_kit.core.state import set_lock, toggle_lock
from palette_kit.core.types import Command, Context, PaletteState

command = Command(
    name='lock',
    help='Lock slots (1-based) so regeneration keeps them.',
)


@command.options
def options(parser) -> None:
    parser.add_argument('slots', type=int, nargs='+', help='Slot numbers, 1-5')
    parser.add_argument('-t', '--toggle', action='store_true', help='Flip the lock instead of setting it')


@command.run
def run(state: PaletteState, args, ctx: Context) -> PaletteState:
    for slot in args.slots:
        state = toggle_lock(state, slot) if args.toggle else set_lock(state, slot, True)
    return state
