from __future__ import annotations

from pystoryurl._logsafe import summarize_for_log


def test_summarize_truncates_long_strings() -> None:
    summarized = summarize_for_log({"value": "x" * 600}, max_string=10)

    assert summarized["value"].startswith("x" * 10)
    assert "<truncated>" in summarized["value"]


def test_summarize_bounds_collections() -> None:
    summarized = summarize_for_log({"items": list(range(10))}, max_items=3)

    assert summarized["items"] == [0, 1, 2, "<7 more>"]


def test_summarize_reprs_unknown_objects() -> None:
    class _Widget:
        def __repr__(self) -> str:
            return "<Widget>"

    assert summarize_for_log({"w": _Widget(), "b": b"abc"}) == {"w": "<Widget>", "b": "<bytes:3b>"}
