"""Timing summaries for coverage benchmarks."""

from __future__ import annotations

from typing import Sequence

import numpy as np

__all__ = [
    "TIME_UNITS",
    "timing_summary",
    "throughput",
]

# Multipliers from seconds (what time.perf_counter differences yield).
TIME_UNITS: dict[str, float] = {
    "s": 1.0,
    "ms": 1e3,
    "us": 1e6,
}


def timing_summary(samples: Sequence[float], unit: str = "s") -> dict[str, float]:
    """Summarise per-call durations given in seconds, reported in ``unit``."""
    if unit not in TIME_UNITS:
        raise ValueError(f"unknown time unit {unit!r}; expected one of {sorted(TIME_UNITS)}")
    if not samples:
        return {"count": 0}
    arr = np.asarray(samples, dtype=float)
    if np.any(arr < 0.0) or not np.all(np.isfinite(arr)):
        raise ValueError("durations must be finite and non-negative")
    arr = arr * TIME_UNITS[unit]
    return {
        "count": float(arr.size),
        "total": float(arr.sum()),
        "min": float(arr.min()),
        "mean": float(arr.mean()),
        "p50": float(np.median(arr)),
        "p95": float(np.percentile(arr, 95)),
        "max": float(arr.max()),
    }


def throughput(rectangles: int, seconds: float) -> float:
    """Rectangles processed per second; 0.0 for a non-positive duration."""
    if seconds <= 0.0:
        return 0.0
    return rectangles / seconds
