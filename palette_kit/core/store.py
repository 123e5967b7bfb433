"""Key-value persistence for palette-tool state.

The store is a flat mapping of JSON-serializable values. JsonFileStore keeps
it as one JSON object on disk; a missing, unreadable or corrupt file reads
as an empty store.
"""

import json
from pathlib import Path
from typing import Any, Protocol

import numpy as np

from palette_kit.core.state import from_snapshot
from palette_kit.core.types import PaletteState


class KeyValueStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def update(self, values: dict[str, Any]) -> None: ...

    def clear(self) -> None: ...


class MemoryStore:
    def __init__(self, data: dict[str, Any] | None = None):
        self.data: dict[str, Any] = dict(data or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value

    def update(self, values: dict[str, Any]) -> None:
        self.data.update(values)

    def clear(self) -> None:
        self.data.clear()


class JsonFileStore:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> dict[str, Any]:
        if not self.path.is_file():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # an interrupted write leaves the previous file intact
        tmp = self.path.with_name(self.path.name + '.tmp')
        tmp.write_text(json.dumps(data, indent=2) + '\n', encoding='utf-8')
        tmp.replace(self.path)

    def get(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def update(self, values: dict[str, Any]) -> None:
        """Write several keys with a single file rewrite."""
        data = self._read()
        data.update(values)
        self._write(data)

    def clear(self) -> None:
        if self.path.is_file():
            self.path.unlink()


_SNAPSHOT_KEYS = ('scheme', 'baseHue', 'palette', 'locks', 'angle', 'fg', 'bg')


def load_state(store: KeyValueStore, rng: np.random.Generator) -> PaletteState:
    snapshot = {}
    for key in _SNAPSHOT_KEYS:
        value = store.get(key)
        if value is not None:
            snapshot[key] = value
    return from_snapshot(snapshot, rng)


def save_state(store: KeyValueStore, state: PaletteState) -> None:
    store.update(state.to_snapshot())
