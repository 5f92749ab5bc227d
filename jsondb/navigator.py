"""
Walks canonical path segments against an in-memory JSON tree.

All functions operate in place on plain dict/list/scalar values and return the
(possibly replaced) root, since writing to the empty path replaces the root.
"""
from __future__ import annotations

from typing import Any, Callable, Iterator

from .errors import IndexOutOfRangeError, TypeMismatchError
from .paths import APPEND, Segment, format_path

Predicate = Callable[[Any, Any], bool]


def get_node(doc: Any, segments: tuple[Segment, ...]) -> tuple[Any, bool]:
    """
    Return ``(value, found)``. Never raises for missing data: an absent key, an
    index outside the array, an append marker or a scalar in the way all give
    ``(None, False)``.
    """
    node = doc
    for seg in segments:
        if seg is APPEND:
            return None, False
        if isinstance(seg, str):
            if not isinstance(node, dict) or seg not in node:
                return None, False
            node = node[seg]
        else:
            if not isinstance(node, list) or not (-len(node) <= seg < len(node)):
                return None, False
            node = node[seg]
    return node, True


def node_exists(doc: Any, segments: tuple[Segment, ...]) -> bool:
    return get_node(doc, segments)[1]


def merge_values(existing: Any, value: Any) -> Any:
    """Shallow merge: dicts update key by key, lists extend, anything else is replaced."""
    if isinstance(existing, dict) and isinstance(value, dict):
        existing.update(value)
        return existing
    if isinstance(existing, list) and isinstance(value, list):
        existing.extend(value)
        return existing
    return value


def set_node(doc: Any, segments: tuple[Segment, ...], value: Any, *, overwrite: bool = True) -> Any:
    """
    Write ``value`` at ``segments``. A write that fails leaves the tree as it
    was: containers created on the way down are removed again.
    """
    if not segments:
        return value if overwrite else merge_values(doc, value)

    # (parent, key) of the first container created by this call; dropping it
    # drops everything created below it.
    created: tuple[Any, Any] | None = None
    try:
        container = doc
        for depth in range(len(segments) - 1):
            container, fresh = _child_for_write(container, segments, depth)
            if fresh is not None and created is None:
                created = fresh
        _assign(container, segments, value, overwrite)
    except (IndexOutOfRangeError, TypeMismatchError):
        if created is not None:
            parent, key = created
            if isinstance(parent, dict):
                del parent[key]
            else:
                parent.pop()
        raise
    return doc


def _assign(container: Any, segments: tuple[Segment, ...], value: Any, overwrite: bool) -> None:
    seg = segments[-1]
    if isinstance(seg, str):
        _require(container, dict, segments, len(segments) - 1)
        if overwrite or seg not in container:
            container[seg] = value
        else:
            container[seg] = merge_values(container[seg], value)
        return

    _require(container, list, segments, len(segments) - 1)
    idx = _insertion_index(container, segments, len(segments) - 1)
    if idx == len(container):
        container.append(value)
    elif overwrite:
        container[idx] = value
    else:
        container[idx] = merge_values(container[idx], value)


def delete_node(doc: Any, segments: tuple[Segment, ...]) -> Any:
    if not segments:
        return {}
    parent, found = get_node(doc, segments[:-1])
    if not found:
        return doc
    seg = segments[-1]
    if isinstance(seg, str):
        if isinstance(parent, dict):
            parent.pop(seg, None)
    elif seg is not APPEND and isinstance(parent, list) and -len(parent) <= seg < len(parent):
        del parent[seg]
    return doc


def filter_nodes(doc: Any, segments: tuple[Segment, ...], predicate: Predicate) -> list[Any] | None:
    """
    Return every child of the node at ``segments`` for which
    ``predicate(value, index_or_key)`` is true, or None when the node is missing.
    """
    node, found = get_node(doc, segments)
    if not found:
        return None
    return [value for value, where in _children(node, segments) if predicate(value, where)]


def find_node(doc: Any, segments: tuple[Segment, ...], predicate: Predicate) -> Any | None:
    node, found = get_node(doc, segments)
    if not found:
        return None
    for value, where in _children(node, segments):
        if predicate(value, where):
            return value
    return None


def _children(node: Any, segments: tuple[Segment, ...]) -> Iterator[tuple[Any, Any]]:
    if isinstance(node, list):
        return ((v, i) for i, v in enumerate(node))
    if isinstance(node, dict):
        return ((v, k) for k, v in node.items())
    raise TypeMismatchError(
        f"Cannot iterate {type(node).__name__} at {format_path(segments)!r}; expected array or object"
    )


def _child_for_write(
    container: Any, segments: tuple[Segment, ...], depth: int
) -> tuple[Any, tuple[Any, Any] | None]:
    """Return the child at ``depth`` and, when it was just created, its (parent, key)."""
    seg = segments[depth]
    nxt = segments[depth + 1]
    if isinstance(seg, str):
        _require(container, dict, segments, depth)
        if seg not in container:
            container[seg] = _new_container(nxt)
            return container[seg], (container, seg)
        return container[seg], None

    _require(container, list, segments, depth)
    idx = _insertion_index(container, segments, depth)
    if idx == len(container):
        container.append(_new_container(nxt))
        return container[idx], (container, idx)
    return container[idx], None


def _new_container(next_segment: Segment) -> Any:
    return {} if isinstance(next_segment, str) else []


def _insertion_index(container: list[Any], segments: tuple[Segment, ...], depth: int) -> int:
    seg = segments[depth]
    if seg is APPEND:
        return len(container)
    idx = seg + len(container) if seg < 0 else seg
    # len(container) is the one valid position past the end: it appends.
    if idx < 0 or idx > len(container):
        raise IndexOutOfRangeError(
            f"Index {seg} is not a valid position in array of length {len(container)} "
            f"at {format_path(segments[: depth + 1])!r}"
        )
    return idx


def _require(container: Any, kind: type, segments: tuple[Segment, ...], depth: int) -> None:
    if not isinstance(container, kind):
        expected = "object" if kind is dict else "array"
        raise TypeMismatchError(
            f"Expected {expected} at {format_path(segments[:depth])!r} to address "
            f"{format_path(segments[: depth + 1])!r}, got {type(container).__name__}"
        )
