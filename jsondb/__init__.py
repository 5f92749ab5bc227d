from __future__ import annotations

from .disk_store import JsonDocument
from .entries import ContentLayout
from .errors import (
    IndexOutOfRangeError,
    InvalidIndexError,
    InvalidKeyError,
    InvalidPathError,
    JsonDBError,
    MergeTargetMissingError,
    MissingIndexError,
    MissingKeyError,
    NotFoundError,
    StoreIOError,
    TypeMismatchError,
    UnknownEntryError,
)
from .paths import APPEND, resolve
from .repositories import AsyncTypedJsonDB
from .shapes import Shape
from .typed_store import TypedJsonDB

__all__ = [
    "APPEND",
    "AsyncTypedJsonDB",
    "ContentLayout",
    "IndexOutOfRangeError",
    "InvalidIndexError",
    "InvalidKeyError",
    "InvalidPathError",
    "JsonDBError",
    "JsonDocument",
    "MergeTargetMissingError",
    "MissingIndexError",
    "MissingKeyError",
    "NotFoundError",
    "Shape",
    "StoreIOError",
    "TypeMismatchError",
    "TypedJsonDB",
    "UnknownEntryError",
    "resolve",
]
