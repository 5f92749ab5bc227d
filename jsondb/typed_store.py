from __future__ import annotations

import logging
import os
from typing import Any, Mapping

from settings import Settings, get_settings

from .disk_store import JsonDocument
from .entries import ContentLayout
from .errors import MergeTargetMissingError, MissingIndexError, MissingKeyError, NotFoundError
from .interfaces import TypedDocumentStore
from .navigator import Predicate
from .paths import Locator, canonical_path, ensure_separator, resolve
from .shapes import Shape

logger = logging.getLogger(__name__)


class TypedJsonDB(TypedDocumentStore):
    """
    Shape-aware front of a JsonDocument.

    Every top-level path is declared up front as single, array or dictionary;
    operations take an optional locator (array index or dictionary key) and
    dispatch on the declared shape, never on the stored content. Use
    ``document`` for untyped access to the same tree.

    ``locator=None`` always means "not supplied": index 0 and key "0" are
    ordinary locators.
    """

    def __init__(
        self,
        filename: str | os.PathLike[str],
        layout: ContentLayout | Mapping[str, Shape | str],
        *,
        save_on_push: bool = True,
        human_readable: bool = False,
        separator: str = "/",
        throw_on_missing: bool = False,
    ):
        separator = ensure_separator(separator)
        if not isinstance(layout, ContentLayout):
            layout = ContentLayout.from_mapping(layout, separator)
        elif layout.separator != separator:
            raise ValueError(
                f"layout separator {layout.separator!r} does not match store separator {separator!r}"
            )
        self._layout = layout
        self._separator = separator
        self.throw_on_missing = throw_on_missing
        self._doc = JsonDocument(
            filename,
            save_on_push=save_on_push,
            human_readable=human_readable,
            separator=separator,
        )

    @classmethod
    def from_settings(
        cls,
        layout: ContentLayout | Mapping[str, Shape | str],
        settings: Settings | None = None,
    ) -> "TypedJsonDB":
        s = settings or get_settings()
        return cls(
            s.filename,
            layout,
            save_on_push=s.save_on_push,
            human_readable=s.human_readable,
            separator=s.separator,
            throw_on_missing=s.throw_on_missing,
        )

    @property
    def document(self) -> JsonDocument:
        return self._doc

    @property
    def layout(self) -> ContentLayout:
        return self._layout

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def load(self) -> None:
        self._doc.load()

    def save(self, force: bool = False) -> None:
        self._doc.save(force)

    def reload(self) -> None:
        self._doc.reload()

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    def get(self, path: str, locator: Locator | None = None) -> Any:
        """
        Whole entry when no locator is given (the full list or map for arrays
        and dictionaries), one element or value otherwise. Single entries
        ignore the locator.
        """
        if locator is None:
            return self._read(self._entry_path(path))
        return self._read(self._resolve(path, locator))

    def get_at(self, path: str, locator: Locator | None = None) -> Any:
        """
        One element of an array or dictionary. Without a locator an array
        yields its last element; a dictionary needs a key. A single entry
        has no elements and yields the whole entry, as with get().
        """
        shape = self._layout.shape_of(path)
        if shape is Shape.DICTIONARY and locator is None:
            raise MissingKeyError(f"A key is required to read one value of {path!r}")
        return self._read(self._resolve(path, locator))

    def exists(self, path: str, locator: Locator | None = None) -> bool:
        if locator is None:
            return self._doc.exists(self._entry_path(path))
        return self._doc.exists(self._resolve(path, locator))

    def filter(self, path: str, predicate: Predicate) -> list[Any] | None:
        return self._doc.filter(self._entry_path(path), predicate)

    def find(self, path: str, predicate: Predicate) -> Any | None:
        return self._doc.find(self._entry_path(path), predicate)

    # -------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------
    def set(self, path: str, data: Any, locator: Locator | None = None) -> None:
        if locator is None:
            target = self._entry_path(path)
        else:
            target = self._resolve(path, locator, for_write=True)
        logger.debug("TYPED SET: %s", target)
        self._doc.push(target, data, overwrite=True)

    def push(self, path: str, data: Any, locator: Locator | None = None) -> None:
        shape = self._layout.shape_of(path)
        if shape is Shape.DICTIONARY and locator is None:
            raise MissingKeyError(f"A key is required to push into dictionary {path!r}")
        target = self._resolve(path, locator, for_write=True)
        logger.debug("TYPED PUSH: %s", target)
        self._doc.push(target, data, overwrite=True)

    def merge(self, path: str, data: Any, locator: Locator | None = None) -> None:
        shape = self._layout.shape_of(path)
        if shape is Shape.ARRAY and locator is None:
            raise MissingIndexError(f"An index is required to merge into array {path!r}")
        if locator is None:
            target = self._entry_path(path)
        else:
            # Read resolution: -1 is the current last element, not an append.
            target = self._resolve(path, locator)
        if not self._doc.exists(target):
            raise MergeTargetMissingError(target)
        logger.debug("TYPED MERGE: %s", target)
        self._doc.push(target, data, overwrite=False)

    def delete(self, path: str, locator: Locator | None = None) -> None:
        if locator is None:
            target = self._entry_path(path)
        else:
            target = self._resolve(path, locator)
        logger.debug("TYPED DELETE: %s", target)
        self._doc.delete(target)

    def push_if_not_exists(self, path: str, initial_value: Any) -> None:
        target = self._entry_path(path)
        if not self._doc.exists(target):
            self._doc.push(target, initial_value, overwrite=True)

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    def _entry_path(self, path: str) -> str:
        self._layout.shape_of(path)
        return canonical_path(path, self._separator)

    def _resolve(self, path: str, locator: Locator | None, *, for_write: bool = False) -> str:
        shape = self._layout.shape_of(path)
        return resolve(path, shape, locator, for_write=for_write, separator=self._separator)

    def _read(self, target: str) -> Any:
        value, found = self._doc.lookup(target)
        if found:
            return value
        if self.throw_on_missing:
            raise NotFoundError(target)
        return None
