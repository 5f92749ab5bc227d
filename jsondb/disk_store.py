from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any

from json_store import atomic_write_json, read_json

from . import navigator
from .errors import NotFoundError, StoreIOError
from .interfaces import JsonDocumentStore
from .locks import GLOBAL_PATH_LOCKS, PathLockRegistry
from .navigator import Predicate
from .paths import ensure_separator, parse_path

logger = logging.getLogger(__name__)

HUMAN_READABLE_INDENT = 4


class JsonDocument(JsonDocumentStore):
    """
    Owns one JSON tree and its backing file.

    - Loads lazily on first access; a missing or empty file is an empty object.
    - With ``save_on_push`` every mutation is flushed, otherwise mutations stay
      in memory until ``save()``.
    - Writes atomically. A failed save leaves the file untouched and the
      in-memory tree dirty, so the next save retries the same content.
    """

    def __init__(
        self,
        filename: str | os.PathLike[str],
        *,
        save_on_push: bool = True,
        human_readable: bool = False,
        separator: str = "/",
        locks: PathLockRegistry = GLOBAL_PATH_LOCKS,
    ):
        self._path = Path(filename)
        if not self._path.suffix:
            self._path = self._path.with_suffix(".json")
        self.save_on_push = save_on_push
        self.human_readable = human_readable
        self.separator = ensure_separator(separator)
        self._locks = locks
        self._data: Any = None
        self._loaded = False
        self._dirty = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def data(self) -> Any:
        self.load()
        return self._data

    def load(self) -> None:
        if self._loaded:
            return
        with self._locks.lock_for(self._path):
            try:
                raw = read_json(self._path)
            except json.JSONDecodeError as e:
                raise StoreIOError(f"Invalid JSON in {self._path}: {e}") from e
            except UnicodeDecodeError as e:
                raise StoreIOError(f"{self._path} is not valid UTF-8: {e}") from e
            except OSError as e:
                raise StoreIOError(f"Can't read {self._path}: {e}") from e
        self._data = {} if raw is None else raw
        self._loaded = True
        self._dirty = False
        logger.info("STORE LOAD: %s", self._path)

    def reload(self) -> None:
        self._loaded = False
        self._data = None
        self._dirty = False
        self.load()

    def save(self, force: bool = False) -> None:
        if not self._loaded:
            if not force:
                return
            self.load()
        if not (self._dirty or force):
            return
        indent = HUMAN_READABLE_INDENT if self.human_readable else None
        with self._locks.lock_for(self._path):
            try:
                atomic_write_json(self._path, self._data, indent=indent)
            except (OSError, TypeError, ValueError) as e:
                logger.warning("STORE SAVE: failed to write %s: %r", self._path, e)
                raise StoreIOError(f"Can't save {self._path}: {e}") from e
        self._dirty = False
        logger.info("STORE SAVE: %s", self._path)

    def get_data(self, path: str) -> Any:
        value, found = navigator.get_node(self.data, self._segments(path))
        if not found:
            raise NotFoundError(path)
        return value

    def lookup(self, path: str) -> tuple[Any, bool]:
        return navigator.get_node(self.data, self._segments(path))

    def exists(self, path: str) -> bool:
        return navigator.node_exists(self.data, self._segments(path))

    def push(self, path: str, data: Any, overwrite: bool = True) -> None:
        logger.debug("STORE PUSH: path=%s overwrite=%s", path, overwrite)
        # The tree owns its values; later merges must not reach back into the caller's objects.
        value = copy.deepcopy(data)
        self._data = navigator.set_node(self.data, self._segments(path), value, overwrite=overwrite)
        self._mutated()

    def delete(self, path: str) -> None:
        logger.debug("STORE DELETE: path=%s", path)
        segments = self._segments(path)
        if segments and not navigator.node_exists(self.data, segments):
            return
        self._data = navigator.delete_node(self.data, segments)
        self._mutated()

    def filter(self, path: str, predicate: Predicate) -> list[Any] | None:
        return navigator.filter_nodes(self.data, self._segments(path), predicate)

    def find(self, path: str, predicate: Predicate) -> Any | None:
        return navigator.find_node(self.data, self._segments(path), predicate)

    def _segments(self, path: str):
        return parse_path(path, self.separator)

    def _mutated(self) -> None:
        self._dirty = True
        if self.save_on_push:
            self.save()
