from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Mapping, Tuple

from envelope_coverage.geometry import Rectangle, TargetRegion, as_rectangle

_TARGET_KEYS = (
    ("distanceMin", "distanceMax", "lightMin", "lightMax"),
    ("distance_min", "distance_max", "light_min", "light_max"),
)


def parse_target(payload: Mapping[str, Any]) -> TargetRegion:
    if not isinstance(payload, Mapping):
        raise ValueError("target must be a JSON object")
    for keys in _TARGET_KEYS:
        if all(key in payload for key in keys):
            return TargetRegion(*(payload[key] for key in keys))
    raise ValueError(
        f"target must define distanceMin, distanceMax, lightMin, lightMax; got {sorted(payload)!r}"
    )


def parse_query(payload: Any) -> Tuple[TargetRegion, List[Rectangle]]:
    """Split ``{"target": {...}, "rectangles": [...]}`` into typed parts."""
    if not isinstance(payload, Mapping):
        raise ValueError("query must be a JSON object")
    if "target" not in payload:
        raise ValueError("query is missing 'target'")
    raw_rects = payload.get("rectangles", [])
    if not isinstance(raw_rects, list):
        raise ValueError("'rectangles' must be a list")
    target = parse_target(payload["target"])
    rects = [as_rectangle(obj, index=idx) for idx, obj in enumerate(raw_rects)]
    return target, rects


def load_query(path: str | Path) -> Tuple[TargetRegion, List[Rectangle]]:
    with Path(path).open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    return parse_query(payload)


def parse_bounds(value: str) -> Tuple[float, float, float, float]:
    """Parse ``"d0,d1,l0,l1"``; integers stay integers."""
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 4 or not all(parts):
        raise ValueError(f"expected 4 non-empty comma-separated values, got {value!r}")
    out = []
    for part in parts:
        try:
            out.append(int(part))
        except ValueError:
            out.append(float(part))
    return tuple(out)  # type: ignore[return-value]


__all__ = ["parse_target", "parse_query", "load_query", "parse_bounds"]
