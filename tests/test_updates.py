from __future__ import annotations

import pytest
from pydantic import ValidationError

from pystate.state.updates import (
    FunctionUpdate,
    MergeUpdate,
    PathUpdate,
    UpdateKind,
    is_state_update,
    parse_update,
)


def test_variants_carry_their_kind() -> None:
    assert FunctionUpdate(fn=lambda ctx: None).kind == UpdateKind.FUNCTION
    assert MergeUpdate(values={"a": 1}).kind == UpdateKind.MERGE
    assert PathUpdate(path="a.b", value=1).kind == UpdateKind.PATH


def test_parse_update_dispatches_on_kind() -> None:
    update = parse_update({"kind": "merge", "values": {"a": 1}})
    assert isinstance(update, MergeUpdate)
    assert update.values == {"a": 1}

    update = parse_update({"kind": "path", "path": "nest.0", "value": "x"})
    assert isinstance(update, PathUpdate)
    assert update.segments == ["nest", 0]


def test_parse_update_rejects_unknown_kind() -> None:
    with pytest.raises(ValidationError):
        parse_update({"kind": "replace", "values": {}})


def test_function_update_requires_callable() -> None:
    with pytest.raises(ValidationError):
        FunctionUpdate(fn=5)  # type: ignore[arg-type]


def test_path_update_rejects_bool_path() -> None:
    with pytest.raises(ValidationError):
        PathUpdate(path=True, value=1)


def test_path_update_keeps_int_path() -> None:
    assert PathUpdate(path=3, value=1).segments == [3]


def test_updates_are_frozen() -> None:
    update = MergeUpdate(values={"a": 1})
    with pytest.raises(ValidationError):
        update.values = {}  # type: ignore[misc]


def test_is_state_update() -> None:
    assert is_state_update(PathUpdate(path="a"))
    assert not is_state_update({"kind": "merge"})
    assert not is_state_update("a.b")
