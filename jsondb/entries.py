from __future__ import annotations

from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .errors import UnknownEntryError
from .paths import canonical_path, ensure_separator
from .shapes import Shape


class ContentLayout(BaseModel):
    """
    Declared shape of every top-level entry, e.g.::

        ContentLayout.from_mapping({
            "/login": "single",
            "/restaurants": "array",
            "/teams": "dictionary",
        })

    Paths are stored in canonical form, so "login" and "/login/" declare the
    same entry. The layout is frozen once built.
    """

    model_config = ConfigDict(frozen=True)

    separator: str = "/"
    entries: dict[str, Shape] = Field(default_factory=dict)

    @field_validator("separator")
    @classmethod
    def _valid_separator(cls, v: str) -> str:
        return ensure_separator(v)

    @field_validator("entries", mode="after")
    @classmethod
    def _canonical_keys(cls, v: dict[str, Shape], info: ValidationInfo) -> dict[str, Shape]:
        sep = info.data.get("separator", "/")
        out: dict[str, Shape] = {}
        for path, shape in v.items():
            key = canonical_path(path, sep)
            if key in out and out[key] is not shape:
                raise ValueError(f"path {key!r} declared twice with different shapes")
            out[key] = shape
        return out

    @classmethod
    def from_mapping(cls, entries: Mapping[str, Shape | str], separator: str = "/") -> "ContentLayout":
        return cls.model_validate({"separator": separator, "entries": dict(entries)})

    def shape_of(self, path: str) -> Shape:
        key = canonical_path(path, self.separator)
        shape = self.entries.get(key)
        if shape is None:
            raise UnknownEntryError(path)
        return shape

    def declares(self, path: str) -> bool:
        return canonical_path(path, self.separator) in self.entries
