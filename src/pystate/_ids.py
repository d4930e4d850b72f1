"""Subscription id generators.

``listen()`` takes its ids from a zero-argument callable so tests and
replays can swap the random default for a deterministic sequence.
"""

from __future__ import annotations

import itertools
import secrets
from collections.abc import Callable

IdGenerator = Callable[[], str]


def random_token(length: int = 8) -> str:
    """Return a random lowercase hex token of exactly *length* characters."""
    if length <= 0:
        raise ValueError("length must be positive")
    return secrets.token_hex((length + 1) // 2)[:length]


def token_generator(length: int = 8) -> IdGenerator:
    """Bind :func:`random_token` to a fixed length."""
    if length <= 0:
        raise ValueError("length must be positive")

    def _generate() -> str:
        return random_token(length)

    return _generate


def counter_generator(prefix: str = "sub") -> IdGenerator:
    """Deterministic ids: ``sub-1``, ``sub-2``, ..."""
    counter = itertools.count(1)

    def _generate() -> str:
        return f"{prefix}-{next(counter)}"

    return _generate
