"""Sweep-line coverage decision over the distance axis."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Tuple

from envelope_coverage.common.constants import EVENT_RANK
from envelope_coverage.compress import CoordinateIndex
from envelope_coverage.geometry import Rectangle, TargetRegion, as_rectangle, filter_and_clip
from envelope_coverage.segment_tree import CoverageSegmentTree
from envelope_coverage.utils import log

__all__ = [
    "EventKind",
    "Event",
    "build_events",
    "event_order",
    "sort_events",
    "check_region",
    "coverage_check",
]


class EventKind(IntEnum):
    ADD = 1
    BOUNDARY = 0
    REMOVE = -1


class Event(NamedTuple):
    distance: float
    kind: EventKind
    light_lo: Optional[float] = None
    light_hi: Optional[float] = None


_RANK = {
    EventKind.ADD: EVENT_RANK["add"],
    EventKind.BOUNDARY: EVENT_RANK["boundary"],
    EventKind.REMOVE: EVENT_RANK["remove"],
}


# ---------------------------------------------------------------------------
#  Events
# ---------------------------------------------------------------------------
def build_events(target: TargetRegion, clipped: Iterable[Rectangle]) -> List[Event]:
    """Two boundary events plus one add/remove pair per clipped rectangle."""
    events = [
        Event(target.distance_min, EventKind.BOUNDARY),
        Event(target.distance_max, EventKind.BOUNDARY),
    ]
    for rect in clipped:
        events.append(Event(rect.d_min, EventKind.ADD, rect.l_min, rect.l_max))
        events.append(Event(rect.d_max, EventKind.REMOVE, rect.l_min, rect.l_max))
    return events


def event_order(event: Event) -> Tuple[float, int]:
    return event.distance, _RANK[event.kind]


def sort_events(events: Iterable[Event]) -> List[Event]:
    """Ascending distance; at equal distance adds, then boundaries, then removes."""
    return sorted(events, key=event_order)


# ---------------------------------------------------------------------------
#  Entry points
# ---------------------------------------------------------------------------
def _finish(debug: Optional[Dict[str, Any]], payload: Dict[str, Any], result: bool) -> bool:
    if debug is not None:
        debug.clear()
        debug.update(payload)
    log(f"[coverage] {payload['reason']} -> {result}")
    return result


def check_region(
    target: TargetRegion,
    rectangles: Iterable[Any],
    *,
    debug: Optional[Dict[str, Any]] = None,
) -> bool:
    """Return True iff the union of ``rectangles`` covers ``target``.

    Every rectangle is validated up front, even when the answer is already
    known from the target alone.
    """
    rects = [as_rectangle(obj, index=idx) for idx, obj in enumerate(rectangles)]

    payload: Dict[str, Any] = {
        "clipped": 0,
        "events": 0,
        "light_coords": 0,
        "slabs_checked": 0,
        "uncovered_slab": None,
        "reason": "",
    }

    if target.is_degenerate:
        payload["reason"] = "degenerate"
        return _finish(debug, payload, True)
    if not rects:
        payload["reason"] = "no_rectangles"
        return _finish(debug, payload, False)

    clipped = filter_and_clip(target, rects)
    payload["clipped"] = len(clipped)
    if not clipped:
        payload["reason"] = "no_overlap"
        return _finish(debug, payload, False)

    events = sort_events(build_events(target, clipped))
    index = CoordinateIndex.from_bounds(target.light_min, target.light_max, clipped)
    tree = CoverageSegmentTree(index.coords)
    total = target.light_length
    payload["events"] = len(events)
    payload["light_coords"] = len(index)
    log(
        f"[coverage] {len(rects)} rectangles, {len(clipped)} clipped, "
        f"{len(events)} events, {index.n_intervals} light intervals"
    )

    prev = events[0].distance
    for event in events:
        if event.distance > prev:
            left = max(prev, target.distance_min)
            right = min(event.distance, target.distance_max)
            if right > left:
                payload["slabs_checked"] += 1
                covered = tree.get_covered_length()
                if covered < total:
                    log(f"[coverage] gap in [{left}, {right}): covered {covered} of {total}")
                    payload["uncovered_slab"] = (left, right)
                    payload["reason"] = "gap"
                    return _finish(debug, payload, False)

        if event.kind is not EventKind.BOUNDARY:
            tree.update(
                index.index_of(event.light_lo),
                index.index_of(event.light_hi),
                1 if event.kind is EventKind.ADD else -1,
            )
        prev = event.distance

    payload["reason"] = "covered"
    return _finish(debug, payload, True)


def coverage_check(
    distance_min: float,
    distance_max: float,
    light_min: float,
    light_max: float,
    rectangles: Iterable[Any],
    *,
    debug: Optional[Dict[str, Any]] = None,
) -> bool:
    """Decide whether ``rectangles`` cover ``[distance_min, distance_max] x [light_min, light_max]``.

    ``rectangles`` may hold :class:`Rectangle` objects, ``{dMin, dMax, lMin, lMax}``
    mappings or 4-sequences; their order does not matter. Raises
    :class:`InvalidRange` for a malformed target and :class:`InvalidRectangle`
    for a malformed rectangle.

    Coverage is decided by area. A point target is always covered. A target of
    zero width on one axis only (a segment) is covered as soon as one rectangle
    overlaps it, even if that rectangle spans only part of the segment:
    ``coverage_check(0, 10, 4, 4, [Rectangle(0, 5, 0, 10)])`` is True.
    """
    target = TargetRegion(distance_min, distance_max, light_min, light_max)
    return check_region(target, rectangles, debug=debug)
