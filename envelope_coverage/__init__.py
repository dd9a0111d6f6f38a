# Coverage decision – default export
from .sweep import (
    Event,
    EventKind,
    build_events,
    check_region,
    coverage_check,
    sort_events,
)

# Building blocks (tracing is toggled via envelope_coverage.utils.VERBOSE)
from .geometry import Rectangle, TargetRegion, as_rectangle, filter_and_clip
from .compress import CoordinateIndex
from .segment_tree import CoverageSegmentTree
from .errors import CoverageInputError, InvalidRange, InvalidRectangle
from .common.constants import DEFAULT_SEED, RNG_SEEDS, seed_everywhere

__all__ = [
    # entry points
    "coverage_check",
    "check_region",
    # sweep
    "Event",
    "EventKind",
    "build_events",
    "sort_events",
    # geometry
    "Rectangle",
    "TargetRegion",
    "as_rectangle",
    "filter_and_clip",
    "CoordinateIndex",
    "CoverageSegmentTree",
    # errors
    "CoverageInputError",
    "InvalidRange",
    "InvalidRectangle",
    # config
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "seed_everywhere",
]
