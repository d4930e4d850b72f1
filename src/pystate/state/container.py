"""Reactive in-memory state container.

The container owns a mapping ("context") and a registry of listeners.
Every mutation takes a shallow snapshot of the top level first and then
notifies each listener with ``(prev_state, new_state)``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pystate._ids import IdGenerator, token_generator
from pystate._summarize import summarize_for_log
from pystate.config import StateConfig
from pystate.exceptions import (
    StateDestroyedError,
    StateError,
    StateInvalidArgumentError,
    StateNotFoundError,
)
from pystate.state import paths
from pystate.state.updates import (
    FunctionUpdate,
    MergeUpdate,
    PathUpdate,
    StateFunction,
    UpdateKind,
    is_state_update,
)

_logger = logging.getLogger(__name__)

Listener = Callable[[dict[Any, Any] | None, dict[Any, Any]], None]

class StateContainer:
    """Mutable key/value store with path access and change notification.

    Snapshots handed to listeners as ``prev_state`` are shallow copies:
    nested mappings are shared with the live context, so a listener that
    inspects ``prev_state["nest"]`` after a nested write sees the new value.
    ``get(True)`` and ``new_state`` are the live context, not copies.

    Args:
        initial_state: Optional mapping to start from (shallow-copied).
        config: Container configuration (defaults to ``StateConfig()``).
        id_generator: Zero-argument callable producing subscription ids.
            Defaults to random hex tokens of ``config.id_length`` characters.

    Raises:
        StateInvalidArgumentError: If ``initial_state`` is not a mapping.
    """

    def __init__(
        self,
        initial_state: Mapping[Any, Any] | None = None,
        *,
        config: StateConfig | None = None,
        id_generator: IdGenerator | None = None,
    ) -> None:
        if initial_state is not None and not isinstance(initial_state, Mapping):
            raise StateInvalidArgumentError(
                f"initial_state must be a mapping, got {type(initial_state).__name__}"
            )
        self._config = config or StateConfig()
        self._id_generator = id_generator or token_generator(self._config.id_length)
        self._context: dict[Any, Any] | None = dict(initial_state) if initial_state is not None else {}
        self._listeners: dict[str, Listener] = {}
        self._destroyed = False

    def __len__(self) -> int:
        return self.length()

    def __repr__(self) -> str:
        if self._destroyed:
            return f"{type(self).__name__}(<destroyed>)"
        return f"{type(self).__name__}(keys={len(self._context or {})}, listeners={len(self._listeners)})"

    @property
    def config(self) -> StateConfig:
        return self._config

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _ensure_alive(self, operation: str) -> bool:
        """Return True when the container may be mutated.

        On a destroyed container either raises or (lenient mode) logs and
        returns False so the caller becomes a no-op.
        """
        if not self._destroyed:
            return True
        if self._config.raise_on_destroyed:
            raise StateDestroyedError(f"Cannot {operation}: state container has been destroyed", operation=operation)
        _logger.debug("Ignoring %s on destroyed state container", operation)
        return False

    def _snapshot(self) -> dict[Any, Any]:
        return dict(self._context or {})

    def _log_mutation(self, operation: str, payload: Any) -> None:
        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug(
                "State %s: %s",
                operation,
                summarize_for_log(payload, max_string=self._config.log_max_string),
            )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def length(self) -> int:
        """Number of first-level keys (0 once destroyed)."""
        if self._context is None:
            return 0
        return len(self._context)

    def get(self, path: bool | int | str) -> Any:
        """Look up a value.

        ``True`` returns the whole live context, an ``int`` indexes the top
        level directly and a ``str`` is resolved as a dot path. Missing
        values resolve to ``None``, as does everything once destroyed.

        Raises:
            StateInvalidArgumentError: If ``path`` has any other type.
        """
        if path is True:
            return self._context
        if isinstance(path, bool) or not isinstance(path, (int, str)):
            raise StateInvalidArgumentError(f"path must be True, an int or a str, got {path!r}")
        if self._context is None:
            return None
        if isinstance(path, int):
            return self._context.get(path)
        return paths.resolve(self._context, paths.split_path(path))

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def listen(self, callback: Listener) -> str | None:
        """Subscribe ``callback(prev_state, new_state)`` and return its subscription id."""
        if not self._ensure_alive("listen"):
            return None
        if not callable(callback):
            raise StateInvalidArgumentError(f"callback must be callable, got {type(callback).__name__}")

        for _ in range(self._config.max_id_attempts):
            subscription_id = self._id_generator()
            if subscription_id not in self._listeners:
                break
        else:
            raise StateError(
                f"Could not generate a unique subscription id after {self._config.max_id_attempts} attempts"
            )

        self._listeners[subscription_id] = callback
        _logger.debug("Registered state listener %s", subscription_id)
        return subscription_id

    def unlisten(self, subscription_id: str) -> None:
        """Remove the listener registered under ``subscription_id``.

        Raises:
            StateNotFoundError: If no listener is registered under that id.
        """
        if not self._ensure_alive("unlisten"):
            return
        if subscription_id not in self._listeners:
            raise StateNotFoundError(
                f"No state listener registered under {subscription_id!r}",
                subscription_id=subscription_id,
            )
        del self._listeners[subscription_id]
        _logger.debug("Removed state listener %s", subscription_id)

    def _push_updates(self, prev_state: dict[Any, Any] | None, new_state: dict[Any, Any] | None = None) -> None:
        """Notify every listener; a failing listener never affects the others or the caller."""
        # Listeners may unsubscribe while being notified.
        for subscription_id, callback in list(self._listeners.items()):
            if subscription_id not in self._listeners:
                continue
            current = new_state if new_state is not None else self._context
            try:
                callback(prev_state, current)  # type: ignore[arg-type]
            except Exception:
                if self._config.log_listener_errors:
                    _logger.exception("State listener %s raised", subscription_id)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def push(self, key_or_value: Any, value: Any = None) -> Any:
        """Append a value or insert it under an explicit key.

        ``push(v)`` (or ``push(v, None)``) stores ``v`` under ``length() + 1``;
        ``push(k, v)`` with a non-``None`` ``v`` stores ``v`` under ``k``.
        Returns the key used.
        """
        if not self._ensure_alive("push"):
            return None
        assert self._context is not None  # noqa: S101

        if value is None:
            key, value = self.length() + 1, key_or_value
        else:
            key = key_or_value

        prev_state = self._snapshot()
        self._context[key] = value
        self._log_mutation("push", {key: value})
        self._push_updates(prev_state)
        return key

    def reset(self) -> None:
        """Start over with an empty context and notify with ``(old context, {})``."""
        if not self._ensure_alive("reset"):
            return
        # prev_state is the old live mapping, not a snapshot. Swap first so a
        # listener that destroys the container leaves it destroyed.
        previous = self._context
        self._context = {}
        self._log_mutation("reset", previous)
        self._push_updates(previous, self._context)

    def set(self, update: FunctionUpdate | MergeUpdate | PathUpdate) -> bool | None:
        """Apply one update variant.

        Returns ``True`` when the update was applied and listeners were
        notified, ``False`` when ``update`` is not a supported variant (a
        warning is logged and nothing changes). ``None`` when a
        :class:`FunctionUpdate` destroys the container; its result is dropped.

        Raises:
            StatePathError: A :class:`PathUpdate` cannot be written.
        """
        if not self._ensure_alive("set"):
            return None
        assert self._context is not None  # noqa: S101

        if not is_state_update(update):
            _logger.warning("Ignoring unsupported state update of type %s", type(update).__name__)
            return False

        prev_state = self._snapshot()

        if update.kind == UpdateKind.FUNCTION:
            result = update.fn(self._context)
            if self._destroyed:
                _logger.debug("State container destroyed during update; dropping result")
                return None
            if isinstance(result, Mapping):
                self._context = result if isinstance(result, dict) else dict(result)
            elif result is not None:
                _logger.warning(
                    "State function returned %s instead of a mapping; keeping current state",
                    type(result).__name__,
                )
            self._log_mutation("update", self._context)
        elif update.kind == UpdateKind.MERGE:
            self._context.update(update.values)
            self._log_mutation("merge", update.values)
        else:
            paths.assign(self._context, update.segments, update.value)
            self._log_mutation("set_path", {str(update.path): update.value})

        self._push_updates(prev_state)
        return True

    def update(self, fn: StateFunction) -> bool | None:
        """Shortcut for ``set(FunctionUpdate(fn=fn))``."""
        return self.set(FunctionUpdate(fn=fn))

    def merge(self, values: Mapping[Any, Any]) -> bool | None:
        """Shortcut for ``set(MergeUpdate(values=values))``."""
        return self.set(MergeUpdate(values=dict(values)))

    def set_path(self, path: str | int, value: Any) -> bool | None:
        """Shortcut for ``set(PathUpdate(path=path, value=value))``."""
        return self.set(PathUpdate(path=path, value=value))

    def remove(self, path: str | int) -> bool | None:
        """Delete the value at ``path``.

        Returns ``True`` (and notifies listeners) when a value was removed,
        ``False`` when nothing exists at ``path``.
        """
        if not self._ensure_alive("remove"):
            return None
        assert self._context is not None  # noqa: S101

        prev_state = self._snapshot()
        if not paths.delete(self._context, paths.split_path(path)):
            _logger.debug("Nothing to remove at %r", path)
            return False

        self._log_mutation("remove", str(path))
        self._push_updates(prev_state)
        return True

    def destroy(self) -> None:
        """Drop the context and all listeners. Safe to call more than once."""
        if self._destroyed:
            return
        self._listeners.clear()
        self._context = None
        self._destroyed = True
        _logger.debug("State container destroyed")
