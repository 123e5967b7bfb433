"""Switch the hue scheme and regenerate unlocked slots with it.

Example:
    palette-tool scheme analogous
"""

from palette_kit.core.generator import SCHEMES
from palette_kit.core.state import set_scheme
from palette_kit.core.types import Command, Context, PaletteState

command = Command(
    name='scheme',
    help='Switch the hue scheme (regenerates unlocked slots).',
)


@command.options
def options(parser) -> None:
    parser.add_argument('name', choices=SCHEMES, help='Scheme name')


@command.run
def run(state: PaletteState, args, ctx: Context) -> PaletteState:
    return set_scheme(state, args.name, ctx.rng)
