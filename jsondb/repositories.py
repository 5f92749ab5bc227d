from __future__ import annotations

import asyncio
import threading
from typing import Any, Callable, TypeVar

from .navigator import Predicate
from .paths import Locator
from .typed_store import TypedJsonDB

T = TypeVar("T")


class AsyncTypedJsonDB:
    """
    Async wrapper around a TypedJsonDB.

    Each call runs in a worker thread via asyncio.to_thread so file I/O never
    blocks the event loop, and all calls go through one lock: the wrapped
    store is single-writer and not reentrant.
    """

    def __init__(self, store: TypedJsonDB) -> None:
        self._store = store
        self._lock = threading.Lock()

    @property
    def store(self) -> TypedJsonDB:
        return self._store

    async def _call(self, fn: Callable[..., T], *args: Any) -> T:
        def _locked() -> T:
            with self._lock:
                return fn(*args)

        return await asyncio.to_thread(_locked)

    async def load(self) -> None:
        await self._call(self._store.load)

    async def save(self, force: bool = False) -> None:
        await self._call(self._store.save, force)

    async def reload(self) -> None:
        await self._call(self._store.reload)

    async def get(self, path: str, locator: Locator | None = None) -> Any:
        return await self._call(self._store.get, path, locator)

    async def get_at(self, path: str, locator: Locator | None = None) -> Any:
        return await self._call(self._store.get_at, path, locator)

    async def exists(self, path: str, locator: Locator | None = None) -> bool:
        return await self._call(self._store.exists, path, locator)

    async def set(self, path: str, data: Any, locator: Locator | None = None) -> None:
        await self._call(self._store.set, path, data, locator)

    async def push(self, path: str, data: Any, locator: Locator | None = None) -> None:
        await self._call(self._store.push, path, data, locator)

    async def merge(self, path: str, data: Any, locator: Locator | None = None) -> None:
        await self._call(self._store.merge, path, data, locator)

    async def delete(self, path: str, locator: Locator | None = None) -> None:
        await self._call(self._store.delete, path, locator)

    async def push_if_not_exists(self, path: str, initial_value: Any) -> None:
        await self._call(self._store.push_if_not_exists, path, initial_value)

    async def filter(self, path: str, predicate: Predicate) -> list[Any] | None:
        return await self._call(self._store.filter, path, predicate)

    async def find(self, path: str, predicate: Predicate) -> Any | None:
        return await self._call(self._store.find, path, predicate)
