"""Set the base hue used by the next `generate`.

The palette itself is not touched. Values wrap modulo 360.

Example:
    palette-tool hue 210
    palette-tool hue --random
"""

from palette_kit.core.state import randomize_base_hue, set_base_hue
from palette_kit.core.types import Command, Context, PaletteState

command = Command(
    name='hue',
    help='Set the base hue (degrees) or draw a random one.',
)


@command.options
def options(parser) -> None:
    parser.add_argument('degrees', type=int, nargs='?', help='Base hue in degrees')
    parser.add_argument('-r', '--random', action='store_true', help='Draw a random base hue')


@command.run
def run(state: PaletteState, args, ctx: Context) -> PaletteState:
    if args.random:
        return randomize_base_hue(state, ctx.rng)
    if args.degrees is None:
        raise ValueError('hue: give a value in degrees or --random')
    return set_base_hue(state, args.degrees)
