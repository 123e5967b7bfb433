"""Forget everything: new random base hue, fresh palette, no locks.

Example:
    palette-tool reset
"""

from palette_kit.core.state import initial_state
from palette_kit.core.types import Command, Context, PaletteState

command = Command(
    name='reset',
    help='Start over with a fresh random palette and default settings.',
)


@command.run
def run(state: PaletteState, args, ctx: Context) -> PaletteState:
    return initial_state(ctx.rng)
