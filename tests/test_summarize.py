from __future__ import annotations

from pystate._summarize import summarize_for_log


def test_summarize_truncates_long_strings() -> None:
    summary = summarize_for_log({"value": "x" * 600}, max_string=10)
    assert summary["value"].startswith("x" * 10)
    assert "<truncated>" in summary["value"]


def test_summarize_caps_collection_sizes() -> None:
    summary = summarize_for_log({"items": list(range(50))}, max_items=5)
    assert summary["items"][:5] == [0, 1, 2, 3, 4]
    assert summary["items"][-1] == "<45 more>"


def test_summarize_keeps_int_keys_and_hides_objects() -> None:
    summary = summarize_for_log({1: b"\x00\x01", "fn": len, "obj": object})
    assert summary[1] == "<bytes:2b>"
    assert summary["fn"] == "<callable len>"
    assert summary["obj"].startswith("<callable")


def test_summarize_stops_at_max_depth() -> None:
    nested: dict = {}
    current = nested
    for _ in range(10):
        current["n"] = {}
        current = current["n"]
    summary = summarize_for_log(nested)
    assert "<max-depth>" in repr(summary)
