"""Hand serialized text to the user: print it, or save it as a file."""

import sys
from pathlib import Path


def deliver(text: str, output: str | None = None) -> Path | None:
    """Write `text` to stdout, or to `output` when given. Returns the saved path."""
    if output is None:
        sys.stdout.write(text if text.endswith('\n') else text + '\n')
        return None
    path = Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text if text.endswith('\n') else text + '\n', encoding='utf-8')
    return path
