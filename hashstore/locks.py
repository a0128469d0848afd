from __future__ import annotations

import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


class _PathLock:
    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


class PathLockRegistry:
    """
    Serializes file access per resolved path.

    An entry only lives while some caller is waiting on or holding it, so
    touching many distinct store paths does not grow the registry.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, _PathLock] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    @contextmanager
    def locked(self, path: Path) -> Iterator[None]:
        key = str(path.resolve())
        with self._guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = _PathLock()
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._locks[key]

    def is_locked(self, path: Path) -> bool:
        with self._guard:
            entry = self._locks.get(str(path.resolve()))
            return entry is not None and entry.lock.locked()


GLOBAL_PATH_LOCKS = PathLockRegistry()
