from __future__ import annotations

import math

from dualgraph import metrics
from dualgraph.graph import Graph


def test_disabled_by_default_in_tests() -> None:
    with metrics.timed("noop"):
        pass
    assert metrics.summary() == {}


def test_enable_collects_timings() -> None:
    metrics.enable()
    assert metrics.is_enabled()
    with metrics.timed("block"):
        pass
    with metrics.timed("block"):
        pass

    summary = metrics.summary()
    assert summary["block"]["count"] == 2
    assert summary["block"]["min_ms"] <= summary["block"]["max_ms"]


def test_timed_records_on_exception() -> None:
    metrics.enable()
    try:
        with metrics.timed("failing"):
            raise ValueError("boom")
    except ValueError:
        pass
    assert "failing" in metrics.summary()


def test_invalid_durations_skipped() -> None:
    metrics._add("bad", math.nan)
    metrics._add("bad", math.inf)
    assert metrics.summary() == {}


def test_cap_trims_entries(monkeypatch) -> None:  # noqa: ANN001
    monkeypatch.setattr(metrics, "MAX_ENTRIES", 10)
    for i in range(10):
        metrics._add("x", float(i))
    metrics._add("x", 99.0)

    assert metrics.summary()["x"]["count"] == 6


def test_fill_is_timed() -> None:
    metrics.enable()
    Graph(4, oriented=True).fill()
    assert metrics.summary()["graph.fill"]["count"] == 1


def test_format_summary() -> None:
    lines = metrics.format_summary(
        {
            "a": {"count": 1, "total_ms": 2.0, "avg_ms": 2.0, "min_ms": 2.0, "max_ms": 2.0},
            "b": {"count": 2, "total_ms": 4.0, "avg_ms": 2.0, "min_ms": 1.0, "max_ms": 3.0},
        }
    )
    assert lines == ["  a: 2.0ms", "  b: 2x, total=4.0ms, avg=2.0ms"]
