"""Regenerate every unlocked slot from the base hue and scheme.

Locked slots keep their colour. --scheme and --hue change the inputs first;
--random-hue draws a new base hue before generating.

Schemes:
  random         five unrelated hues
  complementary  base, opposite, and three near neighbours of both
  triadic        base, +120, +240 and the two midpoints
  analogous      a narrow fan from -30 to +30 around the base
  monochrome     one hue, a light-to-dark saturation/lightness ramp

Example:
    palette-tool generate
    palette-tool generate --scheme triadic --hue 200
    palette-tool generate --random-hue
"""

from dataclasses import replace

from palette_kit.core.generator import SCHEMES
from palette_kit.core.state import randomize_base_hue, regenerate_state, set_base_hue
from palette_kit.core.types import Command, Context, PaletteState

command = Command(
    name='generate',
    help='Regenerate unlocked slots from the base hue and scheme.',
)


@command.options
def options(parser) -> None:
    parser.add_argument('-s', '--scheme', choices=SCHEMES, help='Hue scheme to use (persisted)')
    parser.add_argument('-H', '--hue', type=int, metavar='DEG', help='Base hue in degrees, 0-359 (persisted)')
    parser.add_argument('-r', '--random-hue', action='store_true', help='Draw a random base hue first')


@command.run
def run(state: PaletteState, args, ctx: Context) -> PaletteState:
    if args.scheme:
        state = replace(state, scheme=args.scheme)
    if args.random_hue:
        state = randomize_base_hue(state, ctx.rng)
    elif args.hue is not None:
        state = set_base_hue(state, args.hue)
    return regenerate_state(state, ctx.rng)
