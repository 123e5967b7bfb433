"""palette-tool: generate, preview and export 5-colour design palettes.

Usage: palette-tool [--state PATH] [--seed N] <command> [options]

Commands are auto-discovered from palette_kit/commands/.
Each command module's docstring is its documentation.
Run `palette-tool help <command>` for full module docs.

State (scheme, base hue, palette, locks, angle, contrast selection) is kept
in a JSON file between runs, ~/.palette-tool/state.json by default.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, palette-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import sys
from typing import NoReturn

from palette_kit import registry
from palette_kit.core.env import load_env, load_settings
from palette_kit.core.generator import make_rng
from palette_kit.core.report import format_json, format_text
from palette_kit.core.store import JsonFileStore, load_state, save_state
from palette_kit.core.types import Context


def _short_doc(name: str) -> str:
    doc = (registry.module_for(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  palette-tool generate --scheme complementary --hue 120\n'
        '  palette-tool lock 1 2 && palette-tool generate\n'
        '  palette-tool set 3 #1e3a8a\n'
        '  palette-tool contrast 1 5\n'
        '  palette-tool pairs --min AAA\n'
        '  palette-tool export css -o palette.css\n'
        '  palette-tool preview --angle 90\n'
        '  palette-tool help generate\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  PALETTE_TOOL_STATE    state file (default ~/.palette-tool/state.json)\n'
        '  PALETTE_TOOL_SEED     integer seed for reproducible palettes\n'
        '  PALETTE_TOOL_OUT_DIR  directory for export --save and preview files\n'
    )
    parser = argparse.ArgumentParser(
        prog='palette-tool',
        description='Generate, preview and export 5-colour design palettes.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global options go before the subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('--state', metavar='PATH', default=None, help='State file (overrides PALETTE_TOOL_STATE)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed (overrides PALETTE_TOOL_SEED)')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_doc(name))
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        cmd.add_arguments(p)

    # `help` subcommand prints the full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name in sorted(commands):
            print(f'  {name:<10} {_short_doc(name)}')
        print('\nRun: palette-tool help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (registry.module_for(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _fail(message: str) -> NoReturn:
    print(f'palette-tool: error: {message}', file=sys.stderr)
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'palette-tool: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    try:
        settings = load_settings(state_path=args.state, seed=args.seed)
    except ValueError as e:
        _fail(str(e))

    rng = make_rng(settings.seed)
    store = JsonFileStore(settings.state_path)
    ctx = Context(rng=rng, out_dir=str(settings.out_dir))
    state = load_state(store, rng)

    cmd = registry.get(args.command)
    try:
        new_state = cmd.execute(state, args, ctx)
    except (ValueError, IndexError, OSError) as e:
        # InvalidColourFormat is a ValueError
        _fail(str(e))

    try:
        save_state(store, new_state)
    except OSError as e:
        _fail(f'cannot save state to {settings.state_path}: {e}')

    for message in ctx.messages:
        print(f'palette-tool: {message}', file=sys.stderr)

    if ctx.printed:
        return
    if args.json:
        print(format_json(new_state))
    else:
        print(format_text(new_state))


if __name__ == '__main__':
    main()
