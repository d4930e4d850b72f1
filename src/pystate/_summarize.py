"""Helpers for bounded debug logging.

State payloads can be arbitrarily large and nested. This module turns a
value into a small, printable summary before it is emitted in DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_MAX_DEPTH = 6


def summarize_for_log(
    value: Any,
    *,
    max_string: int = 128,
    max_items: int = 20,
    _depth: int = 0,
) -> Any:
    """Return a size-bounded copy of *value* suitable for debug logs."""
    if _depth > _MAX_DEPTH:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, (bytes, bytearray)):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        summary: dict[Any, Any] = {}
        for index, (k, v) in enumerate(value.items()):
            if index >= max_items:
                summary["…"] = f"<{len(value) - max_items} more>"
                break
            key = k if isinstance(k, (str, int)) else repr(k)
            summary[key] = summarize_for_log(v, max_string=max_string, max_items=max_items, _depth=_depth + 1)
        return summary

    if isinstance(value, Sequence):
        items = [
            summarize_for_log(v, max_string=max_string, max_items=max_items, _depth=_depth + 1)
            for v in list(value)[:max_items]
        ]
        if len(value) > max_items:
            items.append(f"<{len(value) - max_items} more>")
        return items

    if callable(value):
        return f"<callable {getattr(value, '__qualname__', type(value).__name__)}>"

    # Fallback: represent unknown objects without dumping internals.
    return repr(value)
