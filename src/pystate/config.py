"""Container configuration for pystate."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pystate.exceptions import StateConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise StateConfigError(f"{name} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class StateConfig:
    """Container configuration.

    Parameters
    ----------
    id_length : int
        Length of the random subscription ids handed out by ``listen()``
        when no explicit id generator is injected.
    raise_on_destroyed : bool
        When true, mutating calls on a destroyed container raise
        :class:`~pystate.exceptions.StateDestroyedError`. When false they
        are logged at DEBUG and ignored.
    log_listener_errors : bool
        Log listener exceptions (with traceback) before discarding them.
    max_id_attempts : int
        How many times ``listen()`` regenerates an id that collides with an
        active subscription before giving up.
    log_max_string : int
        Strings longer than this are truncated in DEBUG payload summaries.
    """

    id_length: int = 8
    raise_on_destroyed: bool = True
    log_listener_errors: bool = True
    max_id_attempts: int = 16
    log_max_string: int = 128

    def __post_init__(self) -> None:
        for name in ("id_length", "max_id_attempts", "log_max_string"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise StateConfigError(f"{name} must be a positive integer, got {value!r}")

    @classmethod
    def from_env(cls, **overrides: Any) -> StateConfig:
        """Create configuration from environment variables.

        Reads the optional ``PYSTATE_*`` variables. Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        StateConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        _ENV_INT_MAP = {
            "PYSTATE_ID_LENGTH": "id_length",
            "PYSTATE_MAX_ID_ATTEMPTS": "max_id_attempts",
            "PYSTATE_LOG_MAX_STRING": "log_max_string",
        }
        for env_key, field_name in _ENV_INT_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_int(env_key, val)

        if "raise_on_destroyed" not in overrides:
            config_kwargs["raise_on_destroyed"] = _env_bool(env.get("PYSTATE_RAISE_ON_DESTROYED"), True)

        if "log_listener_errors" not in overrides:
            config_kwargs["log_listener_errors"] = _env_bool(env.get("PYSTATE_LOG_LISTENER_ERRORS"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
