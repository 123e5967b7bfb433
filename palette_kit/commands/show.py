"""Print the current palette, locks, gradient angle and contrast selection.

Example:
    palette-tool show
    palette-tool show --json
"""

from palette_kit.core.types import Command, Context, PaletteState

command = Command(
    name='show',
    help='Print the current palette state.',
)


@command.run
def run(state: PaletteState, args, ctx: Context) -> PaletteState:
    return state
