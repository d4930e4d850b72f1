"""pystate - Reactive in-memory state container for game scripting."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pystate")
except PackageNotFoundError:
    __version__ = "0+local"
from pystate._ids import counter_generator, random_token, token_generator
from pystate.config import StateConfig
from pystate.exceptions import (
    StateConfigError,
    StateDestroyedError,
    StateError,
    StateInvalidArgumentError,
    StateNotFoundError,
    StatePathError,
)
from pystate.state.container import Listener, StateContainer
from pystate.state.updates import (
    FunctionUpdate,
    MergeUpdate,
    PathUpdate,
    StateUpdate,
    UpdateKind,
    parse_update,
)

__all__ = [
    "__version__",
    "FunctionUpdate",
    "Listener",
    "MergeUpdate",
    "PathUpdate",
    "StateConfig",
    "StateConfigError",
    "StateContainer",
    "StateDestroyedError",
    "StateError",
    "StateInvalidArgumentError",
    "StateNotFoundError",
    "StatePathError",
    "StateUpdate",
    "UpdateKind",
    "counter_generator",
    "parse_update",
    "random_token",
    "token_generator",
]
