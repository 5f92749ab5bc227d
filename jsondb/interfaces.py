from __future__ import annotations

from typing import Any, Protocol

from .navigator import Predicate
from .paths import Locator


class JsonDocumentStore(Protocol):
    """
    A single JSON tree persisted under one file, addressed by raw path strings.
    """

    def load(self) -> None:
        """Load the tree from disk if it is not loaded yet."""
        ...

    def reload(self) -> None:
        """Discard the in-memory tree and load it again."""
        ...

    def save(self, force: bool = False) -> None:
        """Persist the full tree atomically."""
        ...

    def get_data(self, path: str) -> Any: ...
    def exists(self, path: str) -> bool: ...
    def push(self, path: str, data: Any, overwrite: bool = True) -> None: ...
    def delete(self, path: str) -> None: ...


class TypedDocumentStore(Protocol):
    """Shape-aware operations over declared top-level entries."""

    def get(self, path: str, locator: Locator | None = None) -> Any: ...
    def set(self, path: str, data: Any, locator: Locator | None = None) -> None: ...
    def push(self, path: str, data: Any, locator: Locator | None = None) -> None: ...
    def merge(self, path: str, data: Any, locator: Locator | None = None) -> None: ...
    def exists(self, path: str, locator: Locator | None = None) -> bool: ...
    def delete(self, path: str, locator: Locator | None = None) -> None: ...
    def push_if_not_exists(self, path: str, initial_value: Any) -> None: ...
    def filter(self, path: str, predicate: Predicate) -> list[Any] | None: ...
    def find(self, path: str, predicate: Predicate) -> Any | None: ...
