from __future__ import annotations

import os
import threading
from pathlib import Path


class PathLockRegistry:
    """
    Hands out one re-entrant lock per backing file, keyed by resolved path, so
    documents in the same process that share a file never interleave a read
    with a replace. Nothing here coordinates separate processes.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.RLock] = {}

    def lock_for(self, path: str | os.PathLike[str]) -> threading.RLock:
        key = str(Path(path).resolve())
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.RLock()
                self._locks[key] = lock
            return lock


GLOBAL_PATH_LOCKS = PathLockRegistry()
