"""Dot-path addressing into nested state.

A path such as ``"nest.items.0"`` is split on ``.``; every segment that
looks like an integer (``"3"``, ``"-1"``) becomes an ``int``. Mappings are
indexed by key, sequences by (zero-based) position.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any

from pystate.exceptions import StatePathError

PathKey = str | int

_INT_SEGMENT = re.compile(r"-?\d+")
_MISSING = object()


def split_path(path: str | int) -> list[PathKey]:
    """Split *path* into segments, converting numeric-looking ones to ``int``."""
    segments: list[PathKey] = []
    for raw in str(path).split("."):
        segments.append(int(raw) if _INT_SEGMENT.fullmatch(raw) else raw)
    return segments


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _child(container: Any, key: PathKey) -> Any:
    if isinstance(container, Mapping):
        return container.get(key, _MISSING)
    if _is_sequence(container) and isinstance(key, int):
        if -len(container) <= key < len(container):
            return container[key]
    return _MISSING


def resolve(root: Mapping[Any, Any], segments: list[PathKey]) -> Any:
    """Return the value addressed by *segments*, or ``None`` when any segment is missing."""
    current: Any = root
    for key in segments:
        current = _child(current, key)
        if current is _MISSING:
            return None
    return current


def _describe(segments: list[PathKey]) -> str:
    return ".".join(str(s) for s in segments)


def assign(root: MutableMapping[Any, Any], segments: list[PathKey], value: Any) -> None:
    """Write *value* at *segments*, creating missing intermediate mappings.

    Raises:
        StatePathError: A segment walks through a value that cannot hold
            children, or indexes a sequence out of range.
    """
    path = _describe(segments)
    parent: Any = root
    for depth, key in enumerate(segments[:-1]):
        child = _child(parent, key)
        if child is _MISSING:
            if not isinstance(parent, MutableMapping):
                raise StatePathError(
                    f"Cannot create {_describe(segments[: depth + 1])!r}: parent is not a mapping",
                    path=path,
                )
            child = {}
            parent[key] = child
        elif not isinstance(child, (MutableMapping, MutableSequence)) or isinstance(child, (str, bytes, bytearray)):
            raise StatePathError(
                f"Cannot descend into {_describe(segments[: depth + 1])!r}: {type(child).__name__} has no children",
                path=path,
            )
        parent = child

    last = segments[-1]
    if isinstance(parent, MutableMapping):
        parent[last] = value
        return
    if isinstance(parent, MutableSequence) and isinstance(last, int) and -len(parent) <= last < len(parent):
        parent[last] = value
        return
    raise StatePathError(f"Cannot assign {path!r}: index out of range or parent not writable", path=path)


def delete(root: MutableMapping[Any, Any], segments: list[PathKey]) -> bool:
    """Delete the value at *segments*. Returns ``True`` if something was removed."""
    parent = resolve(root, segments[:-1]) if len(segments) > 1 else root
    last = segments[-1]
    if isinstance(parent, MutableMapping):
        if last in parent:
            del parent[last]
            return True
        return False
    if isinstance(parent, MutableSequence) and isinstance(last, int) and -len(parent) <= last < len(parent):
        del parent[last]
        return True
    return False
