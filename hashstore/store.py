from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from .errors import DecodeError, NotFoundError
from .json_store import atomic_write_json, content_hash, read_json, remove_path
from .locks import GLOBAL_PATH_LOCKS
from .paths import as_path, default_store_path
from .records import StoreRecord
from .settings import Settings, get_settings
from .subscriptions import Subscription, SubscriptionRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")

PathArg = str | os.PathLike[str] | None


class Store(Generic[T]):
    """
    A small key-value store persisted as a single JSON file.

    Keys are strings. Values live in an in-memory cache; ``write`` only hits
    the disk when the cache hash differs from the hash last read from or
    written to the file.

    Parameters:
        store_path: File to persist to. Defaults to
                    ``settings.base_dir / settings.store_filename``.
        settings:   Explicit settings; read from the environment when omitted.
    """

    def __init__(self, store_path: PathArg = None, *, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._store_path = as_path(store_path) if store_path else default_store_path(self._settings)
        self._cache: dict[str, T] = {}
        self._cache_hash = ""
        self._last_known_store_hash = ""
        self._subscriptions = SubscriptionRegistry()
        self.load()

    # ── persistence ──────────────────────────────────────────

    def load(self, store_path: PathArg = None, force: bool = False) -> None:
        """
        Load the store file into the cache.

        A missing file leaves the store untouched. The cache is kept when the
        file's hash equals the current cache hash, unless ``force`` is set.

        This is blocking I/O and waits on the per-path lock a running ``write``
        may hold. From async code call it via ``asyncio.to_thread(store.load)``.
        """
        path = self._resolve(store_path)
        with GLOBAL_PATH_LOCKS.locked(path):
            if not path.exists():
                logger.debug("STORE LOAD: %s does not exist, starting empty", path)
                return

            raw = read_json(path)
            if not isinstance(raw, dict):
                raise DecodeError(path, f"expected a JSON object, got {type(raw).__name__}")
            try:
                record = StoreRecord.from_disk_doc(raw)
            except ValidationError as e:
                raise DecodeError(path, str(e)) from e

            if not force and record.store_hash == self._cache_hash:
                logger.debug("STORE LOAD: %s unchanged (hash=%s), keeping cache", path, record.store_hash)
                return

            self._cache = record.data
            self._last_known_store_hash = record.store_hash
            self._cache_hash = content_hash(self._cache)
            logger.debug("STORE LOAD: %s loaded %d keys (hash=%s)", path, len(self._cache), record.store_hash)

    async def write(self, store_path: PathArg = None, force: bool = False) -> None:
        """
        Persist the cache, replacing the whole file.

        Skipped when nothing changed since the last load or write, unless
        ``force`` is set.
        """
        if not force and self._last_known_store_hash == self._cache_hash:
            logger.debug("STORE WRITE: skipped, hash unchanged (%s)", self._cache_hash)
            return
        path = self._resolve(store_path)

        # Snapshot on the caller's thread; the worker must not see later sets.
        record = StoreRecord(store_hash=self._cache_hash, data=self._cache)
        await asyncio.to_thread(self._write_record, path, record.to_disk_doc(), record.store_hash, force)

    def _write_record(self, path: Path, doc: dict[str, Any], doc_hash: str, force: bool) -> None:
        with GLOBAL_PATH_LOCKS.locked(path):
            # Another write may have persisted this exact state while we waited.
            if not force and self._last_known_store_hash == doc_hash:
                logger.debug("STORE WRITE: skipped, %s already at hash %s", path, doc_hash)
                return
            atomic_write_json(path, doc, indent=self._settings.json_indent)
            self._last_known_store_hash = doc_hash
        logger.info("STORE WRITE: wrote %d keys to %s (hash=%s)", len(doc["data"]), path, doc_hash)

    async def delete_store(self, store_path: PathArg = None) -> None:
        """
        Delete the store file (or empty directory).

        The in-memory cache and hash state are left as they are, so a later
        forced write, or any write after a ``set``, recreates the file.
        """
        path = self._resolve(store_path)
        await asyncio.to_thread(self._remove, path)

    def _remove(self, path: Path) -> None:
        with GLOBAL_PATH_LOCKS.locked(path):
            if not path.exists():
                raise NotFoundError(path, f"{path} does not exist")
            try:
                remove_path(path)
            except FileNotFoundError as e:
                raise NotFoundError(path, f"{path} does not exist") from e
        logger.info("STORE DELETE: removed %s", path)

    # ── data access ──────────────────────────────────────────

    def get(self, key: str) -> T | None:
        return self._cache.get(key)

    def set(self, key: str, value: T, override: bool = True) -> None:
        """
        Store ``value`` under ``key`` and notify the key's subscribers.

        With ``override=False`` an existing value is kept. A value that cannot
        be serialized raises ``TypeError`` and leaves the store unchanged. A
        subscriber that raises stops the remaining notifications; the cache
        hash is still brought up to date before the exception propagates.
        """
        if key in self._cache and not override:
            return

        new_hash = content_hash({**self._cache, key: value})
        self._cache[key] = value
        if self._settings.debug_log_values:
            logger.debug("STORE SET: %s=%r", key, value)

        notified = False
        try:
            if self._subscriptions.has_subscribers(key):
                notified = True
                self._subscriptions.notify(key, value)
        finally:
            # Subscribers may have set other keys meanwhile.
            self._cache_hash = content_hash(self._cache) if notified else new_hash

    def contains(self, key: str) -> bool:
        return key in self._cache

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    # ── subscriptions ────────────────────────────────────────

    def on(self, key: str, callback: Subscription) -> T | None:
        """Subscribe to ``key``; the callback fires once right away with the current value."""
        self._subscriptions.add(key, callback)
        value = self.get(key)
        callback(value)
        return value

    def off(self, key: str, callback: Subscription) -> None:
        self._subscriptions.remove(key, callback)

    # ── path ─────────────────────────────────────────────────

    @property
    def store_path(self) -> Path:
        return self._store_path

    @store_path.setter
    def store_path(self, store_path: str | os.PathLike[str]) -> None:
        self._store_path = as_path(store_path)

    def _resolve(self, store_path: PathArg) -> Path:
        return as_path(store_path) if store_path else self._store_path
