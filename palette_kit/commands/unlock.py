"""Unlock palette slots. With no slots given, unlocks all of them.

Example:
    palette-tool unlock 3
    palette-tool unlock
"""

from palette_kit.core.state import set_lock
from palette_kit.core.types import Command, Context, PaletteState

command = Command(
    name='unlock',
    help='Unlock slots (all when none given).',
)


@command.options
def options(parser) -> None:
    parser.add_argument('slots', type=int, nargs='*', help='Slot numbers, 1-5')


@command.run
def run(state: PaletteState, args, ctx: Context) -> PaletteState:
    slots = args.slots or range(1, len(state.palette) + 1)
    for slot in slots:
        state = set_lock(state, slot, False)
    return state
