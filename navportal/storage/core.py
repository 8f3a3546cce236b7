"""Key-value store backends and storage initialization.

The store is an opaque async map from string key to JSON value. Two keys are
used: `site_config` and `categories`. Each is read and rewritten wholesale on
every mutation; there is no locking and no versioning, so concurrent writers
race and the last put wins.
"""

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Protocol

from navportal.errors import UpstreamError

logger = logging.getLogger(__name__)

CONFIG_KEY = "site_config"
CATEGORIES_KEY = "categories"


class KVStore(Protocol):
    async def get(self, key: str) -> Any | None: ...

    async def put(self, key: str, value: Any) -> None: ...


class FileStore:
    """One pretty-printed JSON file per key under a base directory."""

    def __init__(self, base_path: Path) -> None:
        self._base = base_path
        self._base.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self._base / f"{key}.json"

    def _read(self, key: str) -> Any | None:
        path = self._path(key)
        if not path.is_file():
            return None
        return json.loads(path.read_text())

    def _write(self, key: str, value: Any) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(json.dumps(value, indent=2, ensure_ascii=False))
        os.replace(tmp, path)

    async def get(self, key: str) -> Any | None:
        logger.debug("store get %s", key)
        try:
            return await asyncio.to_thread(self._read, key)
        except (OSError, ValueError) as e:
            raise UpstreamError(f"Failed to read {key}: {e}") from e

    async def put(self, key: str, value: Any) -> None:
        logger.debug("store put %s", key)
        try:
            await asyncio.to_thread(self._write, key, value)
        except (OSError, TypeError, ValueError) as e:
            raise UpstreamError(f"Failed to write {key}: {e}") from e


class MemoryStore:
    """In-process store. Values are copied through JSON on the way in and out."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    async def get(self, key: str) -> Any | None:
        raw = self._data.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    async def put(self, key: str, value: Any) -> None:
        try:
            self._data[key] = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise UpstreamError(f"Failed to write {key}: {e}") from e


_store: KVStore | None = None


def init_storage(data_dir: Path | None = None, store: KVStore | None = None) -> KVStore:
    """Select the active store: an explicit one, or a FileStore on data_dir."""
    global _store
    if store is None:
        assert data_dir is not None, "init_storage() needs a data_dir or a store"
        store = FileStore(data_dir)
    _store = store
    return store


def get_store() -> KVStore:
    assert _store is not None, "Call init_storage() before using storage"
    return _store
