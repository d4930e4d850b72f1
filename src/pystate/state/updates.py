"""Update variants accepted by :meth:`StateContainer.set`.

Every write that goes through ``set()`` is one of three explicit
variants, selected by the ``kind`` discriminator rather than by
inspecting the runtime type of a bare argument.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from pystate.state.paths import PathKey, split_path

StateFunction = Callable[[dict[Any, Any]], Mapping[Any, Any] | None]


class UpdateKind(StrEnum):
    FUNCTION = "function"
    MERGE = "merge"
    PATH = "path"


class FunctionUpdate(BaseModel):
    """Compute the next state from the current one.

    ``fn`` receives the live context. Returning a mapping replaces the
    context; returning ``None`` keeps it (including any in-place edits).
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal[UpdateKind.FUNCTION] = UpdateKind.FUNCTION
    fn: StateFunction


class MergeUpdate(BaseModel):
    """Shallow-merge ``values`` into the top level of the context."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[UpdateKind.MERGE] = UpdateKind.MERGE
    values: dict[Any, Any] = Field(default_factory=dict)


class PathUpdate(BaseModel):
    """Write ``value`` at a dot-separated ``path``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[UpdateKind.PATH] = UpdateKind.PATH
    path: str | int
    value: Any = None

    @field_validator("path", mode="before")
    @classmethod
    def _reject_bool(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("path must be a str or int")
        return value

    @property
    def segments(self) -> list[PathKey]:
        return split_path(self.path)


StateUpdate = Annotated[FunctionUpdate | MergeUpdate | PathUpdate, Field(discriminator="kind")]

_UPDATE_TYPES = (FunctionUpdate, MergeUpdate, PathUpdate)
_update_adapter: TypeAdapter[FunctionUpdate | MergeUpdate | PathUpdate] = TypeAdapter(StateUpdate)


def is_state_update(value: Any) -> bool:
    return isinstance(value, _UPDATE_TYPES)


def parse_update(data: Mapping[str, Any]) -> FunctionUpdate | MergeUpdate | PathUpdate:
    """Build an update variant from a plain mapping such as ``{"kind": "merge", "values": {...}}``.

    Useful for collaborators that receive updates as decoded messages.
    Raises ``pydantic.ValidationError`` on unknown kinds or bad fields.
    """
    return _update_adapter.validate_python(dict(data))
