"""Environment and settings for palette-tool.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file found walking up from cwd, stopping at .git (file or dir).

Settings read from the environment afterwards:
  PALETTE_TOOL_STATE    state file (default ~/.palette-tool/state.json)
  PALETTE_TOOL_SEED     integer seed for the random source (default: none)
  PALETTE_TOOL_OUT_DIR  directory for export/preview files (default: cwd)
"""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_STATE_PATH = Path.home() / '.palette-tool' / 'state.json'


@dataclass
class Settings:
    state_path: Path = DEFAULT_STATE_PATH
    seed: int | None = None
    out_dir: Path = Path('.')


def _find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, without crossing a repo root."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines; quotes around values are dropped, # lines skipped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def load_settings(state_path: str | None = None, seed: int | None = None) -> Settings:
    """Resolve settings from the environment; explicit arguments win."""
    env_seed = os.environ.get('PALETTE_TOOL_SEED', '').strip()
    if seed is None and env_seed:
        try:
            seed = int(env_seed)
        except ValueError:
            raise ValueError(f'PALETTE_TOOL_SEED must be an integer, got {env_seed!r}') from None

    env_state = os.environ.get('PALETTE_TOOL_STATE', '').strip()
    env_out = os.environ.get('PALETTE_TOOL_OUT_DIR', '').strip()
    return Settings(
        state_path=Path(state_path or env_state or DEFAULT_STATE_PATH).expanduser(),
        seed=seed,
        out_dir=Path(env_out or '.').expanduser(),
    )
