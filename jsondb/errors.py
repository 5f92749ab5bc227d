from __future__ import annotations


class JsonDBError(Exception):
    """Base class for every error raised by the store."""


class NotFoundError(JsonDBError, KeyError):
    def __init__(self, path: str):
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"no data at path {self.path!r}"


class InvalidPathError(JsonDBError, ValueError):
    pass


class InvalidKeyError(JsonDBError, ValueError):
    pass


class InvalidIndexError(JsonDBError, TypeError):
    pass


class MissingKeyError(JsonDBError, ValueError):
    pass


class MissingIndexError(JsonDBError, ValueError):
    pass


class MergeTargetMissingError(JsonDBError):
    def __init__(self, path: str):
        super().__init__(f"nothing to merge into at path {path!r}")
        self.path = path


class IndexOutOfRangeError(JsonDBError, IndexError):
    pass


class TypeMismatchError(JsonDBError, TypeError):
    pass


class UnknownEntryError(JsonDBError, KeyError):
    def __init__(self, path: str):
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"path {self.path!r} is not declared in the content layout"


class StoreIOError(JsonDBError, OSError):
    pass
