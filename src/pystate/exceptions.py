"""Custom exception hierarchy for pystate."""

from __future__ import annotations


class StateError(Exception):
    """Base exception for all pystate errors."""


class StateConfigError(StateError):
    """Invalid configuration value."""


class StateInvalidArgumentError(StateError, TypeError):
    """Argument has the wrong type (non-mapping initial state, non-callable listener, ...)."""


class StateNotFoundError(StateError, KeyError):
    """No active listener is registered under the given subscription id."""

    def __init__(self, message: str, *, subscription_id: str = "") -> None:
        self.subscription_id = subscription_id
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class StatePathError(StateError, LookupError):
    """A path write could not be applied.

    Raised when a dot path walks through a value that is neither a mapping
    nor a sequence, or addresses a sequence index that is out of range.
    """

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)


class StateDestroyedError(StateError):
    """Mutating call on a container that has already been destroyed."""

    def __init__(self, message: str, *, operation: str = "") -> None:
        self.operation = operation
        super().__init__(message)
