"""
Canonical paths and the path resolver.

A path string looks like ``/restaurants[2]/name`` or ``/teams/alice``: object
keys joined by the separator, each optionally followed by ``[n]`` (array index,
negative counts from the end) or ``[]`` (append). Empty segments are dropped,
so ``/a/b/``, ``a/b`` and ``/a//b`` parse to the same segments.
"""
from __future__ import annotations

import re
from typing import Union

from .errors import InvalidIndexError, InvalidKeyError, InvalidPathError
from .shapes import Shape


class _Append:
    __slots__ = ()

    def __repr__(self) -> str:
        return "APPEND"


APPEND = _Append()

Segment = Union[str, int, _Append]
Locator = Union[str, int]

_INDEX_RE = re.compile(r"\[([^\[\]]*)\]")


def parse_path(path: str, separator: str = "/") -> tuple[Segment, ...]:
    segments: list[Segment] = []
    for part in path.split(separator):
        if not part:
            continue
        bracket = part.find("[")
        if bracket < 0:
            segments.append(part)
            continue
        if bracket > 0:
            segments.append(part[:bracket])
        pos = bracket
        while pos < len(part):
            m = _INDEX_RE.match(part, pos)
            if m is None:
                raise InvalidPathError(f"Malformed index in path {path!r} near {part[pos:]!r}")
            raw = m.group(1).strip()
            if raw == "":
                segments.append(APPEND)
            else:
                try:
                    segments.append(int(raw))
                except ValueError:
                    raise InvalidPathError(f"Non-integer index {m.group(0)!r} in path {path!r}") from None
            pos = m.end()
    return tuple(segments)


def format_path(segments: tuple[Segment, ...], separator: str = "/") -> str:
    out: list[str] = []
    for seg in segments:
        if seg is APPEND:
            out.append("[]")
        elif isinstance(seg, int):
            out.append(f"[{seg}]")
        else:
            out.append(separator + seg)
    text = "".join(out)
    return text if text.startswith(separator) else separator + text


def canonical_path(path: str, separator: str = "/") -> str:
    return format_path(parse_path(path, separator), separator)


def ensure_separator(separator: str) -> str:
    if not separator:
        raise ValueError("separator must not be empty")
    if "[" in separator or "]" in separator:
        raise ValueError("separator must not contain brackets")
    return separator


def is_simple_key(key: str, separator: str = "/") -> bool:
    # One trailing separator is tolerated: "alice/" addresses the same key as "alice".
    key = key.removesuffix(separator)
    return bool(key) and separator not in key and "[" not in key


def ensure_simple_key(key: Locator, separator: str = "/") -> str:
    text = str(key)
    if not is_simple_key(text, separator):
        raise InvalidKeyError(
            f"Dictionary key {text!r} must not be empty or contain {separator!r} or '['"
        )
    return text.removesuffix(separator)


def ensure_index(locator: Locator) -> int:
    if isinstance(locator, bool) or not isinstance(locator, int):
        raise InvalidIndexError(f"Array locator must be an integer, got {locator!r}")
    return locator


def resolve(
    base_path: str,
    shape: Shape | str,
    locator: Locator | None = None,
    *,
    for_write: bool = False,
    separator: str = "/",
) -> str:
    """
    Map (base path, declared shape, optional locator) to a canonical path.

    ``locator=None`` means "not supplied"; index 0 and key "0" are real locators.
    On arrays, an omitted locator or -1 reads the last element and writes
    append.
    """
    shape = Shape(shape)
    base = canonical_path(base_path, separator)

    if shape is Shape.SINGLE:
        return base

    if shape is Shape.ARRAY:
        if locator is None:
            return base + ("[]" if for_write else "[-1]")
        index = ensure_index(locator)
        if index == -1 and for_write:
            return base + "[]"
        return f"{base}[{index}]"

    if locator is None:
        return base
    key = ensure_simple_key(locator, separator)
    return base.removesuffix(separator) + separator + key
