from __future__ import annotations

import contextlib
import math
import os
import time
from typing import TYPE_CHECKING, TypedDict

if TYPE_CHECKING:
    from collections.abc import Generator

# Process-global and not thread-safe, like the Graph itself.

MAX_ENTRIES = 100_000

_enabled = os.environ.get("DUALGRAPH_METRICS", "").lower() in ("1", "true", "yes")
_durations: dict[str, list[float]] = {}


class MetricSummary(TypedDict):
    """Summary statistics for a single metric."""

    count: int
    total_ms: float
    avg_ms: float
    min_ms: float
    max_ms: float


def enable() -> None:
    """Enable metrics collection."""
    global _enabled
    _enabled = True


def is_enabled() -> bool:
    return _enabled


def clear() -> None:
    """Clear all collected metrics."""
    _durations.clear()


def _add(name: str, duration_ms: float) -> None:
    if math.isnan(duration_ms) or math.isinf(duration_ms):
        return

    # Halve every series once the cap is reached
    if sum(len(ds) for ds in _durations.values()) >= MAX_ENTRIES:
        for metric_name, ds in _durations.items():
            _durations[metric_name] = ds[len(ds) // 2 :]

    _durations.setdefault(name, []).append(duration_ms)


def summary() -> dict[str, MetricSummary]:
    """Summarize metrics by name: count, total_ms, avg_ms, min_ms, max_ms."""
    result = dict[str, MetricSummary]()
    for name, durations in sorted(_durations.items()):
        if not durations:
            continue
        total = sum(durations)
        result[name] = MetricSummary(
            count=len(durations),
            total_ms=total,
            avg_ms=total / len(durations),
            min_ms=min(durations),
            max_ms=max(durations),
        )
    return result


def format_summary(data: dict[str, MetricSummary]) -> list[str]:
    """Render a summary as one line per metric."""
    lines = list[str]()
    for name, entry in sorted(data.items()):
        if entry["count"] == 1:
            lines.append(f"  {name}: {entry['total_ms']:.1f}ms")
        else:
            lines.append(
                f"  {name}: {entry['count']}x, total={entry['total_ms']:.1f}ms, "
                + f"avg={entry['avg_ms']:.1f}ms"
            )
    return lines


@contextlib.contextmanager
def timed(name: str) -> Generator[None]:
    """Context manager to time a block of code.

    Usage:
        with metrics.timed("graph.fill"):
            ...

    Metrics are only collected when enabled via DUALGRAPH_METRICS=1 or enable().
    """
    if not _enabled:
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        _add(name, duration_ms)
