"""Set the gradient preview angle in degrees (0-360).

Example:
    palette-tool angle 90
"""

from palette_kit.core.state import set_angle
from palette_kit.core.types import Command, Context, PaletteState

command = Command(
    name='angle',
    help='Set the gradient preview angle (degrees).',
)


@command.options
def options(parser) -> None:
    parser.add_argument('degrees', type=int, help='Angle, 0 = left to right, 90 = top to bottom')


@command.run
def run(state: PaletteState, args, ctx: Context) -> PaletteState:
    return set_angle(state, args.degrees)
