from __future__ import annotations

from enum import Enum


class Shape(str, Enum):
    """Declared shape of a top-level entry."""

    SINGLE = "single"
    ARRAY = "array"
    DICTIONARY = "dictionary"
