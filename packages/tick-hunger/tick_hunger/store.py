"""Key-value persistence stores for the hunger record."""
from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Protocol, runtime_checkable

from tick_hunger.types import PersistenceReadError, PersistenceWriteError

logger = logging.getLogger(__name__)

APP_NAME = "TickHunger"
APP_DIR_NAME = "tick-hunger"


@runtime_checkable
class PersistenceStore(Protocol):
    """String key-value store. Writes may be buffered until flush()."""

    def has(self, key: str) -> bool:
        ...

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def flush(self) -> None:
        ...


class MemoryStore:
    """In-memory store. `flush_count` records how often flush() ran."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})
        self.flush_count = 0

    def has(self, key: str) -> bool:
        return key in self.data

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def flush(self) -> None:
        self.flush_count += 1


class JsonFileStore:
    """JSON-file-backed store. set() buffers, flush() writes atomically.

    The file is read lazily on first access. A file that exists but cannot be
    parsed raises PersistenceReadError on every read until it is overwritten
    by a successful flush().
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._data: dict[str, str] | None = None
        self._dirty = False

    def _load(self) -> dict[str, str]:
        if self._data is not None:
            return self._data
        if not self.path.exists():
            self._data = {}
            return self._data
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise PersistenceReadError(f"cannot read {self.path}: {exc}") from exc
        if not isinstance(raw, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in raw.items()
        ):
            raise PersistenceReadError(
                f"{self.path} does not hold a string-to-string mapping"
            )
        self._data = raw
        return self._data

    def has(self, key: str) -> bool:
        return key in self._load()

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        try:
            data = self._load()
        except PersistenceReadError:
            # The corrupt file gets replaced on the next flush.
            logger.warning("Discarding unreadable store %s", self.path)
            data = self._data = {}
        data[key] = value
        self._dirty = True

    def flush(self) -> None:
        if not self._dirty or self._data is None:
            return
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, sort_keys=True, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise PersistenceWriteError(f"cannot write {self.path}: {exc}") from exc
        self._dirty = False
        logger.debug("Flushed store to %s", self.path)


def default_store_path() -> Path:
    """Platform-specific default location of the hunger save file.

    Linux: ~/.local/share/tick-hunger/hunger.json
    macOS: ~/Library/Application Support/TickHunger/hunger.json
    Windows: %APPDATA%\\TickHunger\\hunger.json
    """
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        root = base / APP_NAME
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support" / APP_NAME
    else:
        root = Path.home() / ".local" / "share" / APP_DIR_NAME
    return root / "hunger.json"
