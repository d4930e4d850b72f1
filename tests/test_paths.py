from __future__ import annotations

import pytest

from pystate.exceptions import StatePathError
from pystate.state.paths import assign, delete, resolve, split_path


def test_split_path_converts_numeric_segments() -> None:
    assert split_path("a.1.-2.b") == ["a", 1, -2, "b"]
    assert split_path(3) == [3]
    assert split_path("1x.x1") == ["1x", "x1"]


def test_resolve_mixed_containers() -> None:
    root = {"a": [{"b": "deep"}], 2: "two"}
    assert resolve(root, split_path("a.0.b")) == "deep"
    assert resolve(root, [2]) == "two"
    assert resolve(root, split_path("a.1.b")) is None


def test_assign_creates_nested_mappings() -> None:
    root: dict = {}
    assign(root, split_path("a.b.c"), 1)
    assert root == {"a": {"b": {"c": 1}}}


def test_assign_rejects_immutable_sequences() -> None:
    root = {"t": (1, 2)}
    with pytest.raises(StatePathError):
        assign(root, split_path("t.0"), 5)


def test_assign_rejects_strings_as_parents() -> None:
    root = {"name": "abc"}
    with pytest.raises(StatePathError):
        assign(root, split_path("name.0"), "x")


def test_assign_missing_key_below_sequence() -> None:
    root = {"items": [1]}
    with pytest.raises(StatePathError):
        assign(root, split_path("items.3.x"), 1)


def test_delete() -> None:
    root = {"a": {"b": 1, "c": 2}, "items": [1, 2]}
    assert delete(root, split_path("a.b")) is True
    assert delete(root, split_path("items.1")) is True
    assert delete(root, split_path("a.missing")) is False
    assert delete(root, split_path("items.5")) is False
    assert root == {"a": {"c": 2}, "items": [1]}
