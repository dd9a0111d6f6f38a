"""Rectangle types plus the filter-and-clip step that feeds the sweep."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from envelope_coverage.errors import InvalidRange, InvalidRectangle

__all__ = [
    "Rectangle",
    "TargetRegion",
    "as_rectangle",
    "filter_and_clip",
]

# Accepted spellings for rectangle bounds, in (d_min, d_max, l_min, l_max) order.
_RECT_KEYS = (
    ("dMin", "dMax", "lMin", "lMax"),
    ("d_min", "d_max", "l_min", "l_max"),
)


def _is_finite_real(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def _label(index: Optional[int]) -> str:
    return "rectangle" if index is None else f"rectangle #{index}"


# ---------------------------------------------------------------------------
#  Data types
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class Rectangle:
    """Closed box ``[d_min, d_max] x [l_min, l_max]`` in distance/light space."""

    d_min: float
    d_max: float
    l_min: float
    l_max: float

    def __post_init__(self) -> None:
        _validate_rectangle(self.d_min, self.d_max, self.l_min, self.l_max, None)


@dataclass(frozen=True, slots=True)
class TargetRegion:
    """Region that must be covered; bounds are inclusive on both axes."""

    distance_min: float
    distance_max: float
    light_min: float
    light_max: float

    def __post_init__(self) -> None:
        names = ("distance_min", "distance_max", "light_min", "light_max")
        for name in names:
            value = getattr(self, name)
            if not _is_finite_real(value):
                raise InvalidRange(f"{name} must be a finite real number, got {value!r}")
        if self.distance_min > self.distance_max:
            raise InvalidRange(
                f"distance_min {self.distance_min!r} exceeds distance_max {self.distance_max!r}"
            )
        if self.light_min > self.light_max:
            raise InvalidRange(
                f"light_min {self.light_min!r} exceeds light_max {self.light_max!r}"
            )

    @property
    def is_degenerate(self) -> bool:
        """True when the region collapses to a single point."""
        return self.distance_min == self.distance_max and self.light_min == self.light_max

    @property
    def distance_length(self) -> float:
        return self.distance_max - self.distance_min

    @property
    def light_length(self) -> float:
        return self.light_max - self.light_min

    def overlaps(self, rect: Rectangle) -> bool:
        """Closed overlap test; rectangles touching an edge still count."""
        return (
            rect.d_max >= self.distance_min
            and rect.d_min <= self.distance_max
            and rect.l_max >= self.light_min
            and rect.l_min <= self.light_max
        )

    def clip(self, rect: Rectangle) -> Rectangle:
        """Clamp ``rect`` to the region. Caller must check :meth:`overlaps` first."""
        return Rectangle(
            d_min=max(rect.d_min, self.distance_min),
            d_max=min(rect.d_max, self.distance_max),
            l_min=max(rect.l_min, self.light_min),
            l_max=min(rect.l_max, self.light_max),
        )


# ---------------------------------------------------------------------------
#  Validation and coercion
# ---------------------------------------------------------------------------
def _validate_rectangle(
    d_min: Any, d_max: Any, l_min: Any, l_max: Any, index: Optional[int]
) -> None:
    label = _label(index)
    for name, value in (("d_min", d_min), ("d_max", d_max), ("l_min", l_min), ("l_max", l_max)):
        if not _is_finite_real(value):
            raise InvalidRectangle(f"{label}: {name} must be a finite real number, got {value!r}")
    if d_min > d_max:
        raise InvalidRectangle(f"{label}: d_min {d_min!r} exceeds d_max {d_max!r}")
    if l_min > l_max:
        raise InvalidRectangle(f"{label}: l_min {l_min!r} exceeds l_max {l_max!r}")


def as_rectangle(obj: Any, index: Optional[int] = None) -> Rectangle:
    """Coerce a Rectangle, a bounds mapping, or a 4-sequence into a Rectangle.

    Mappings may use either ``dMin/dMax/lMin/lMax`` or ``d_min/d_max/l_min/l_max``.
    Errors name the rectangle's position when ``index`` is given.
    """
    if isinstance(obj, Rectangle):
        return obj

    if isinstance(obj, Mapping):
        for keys in _RECT_KEYS:
            if all(key in obj for key in keys):
                bounds = [obj[key] for key in keys]
                break
        else:
            raise InvalidRectangle(
                f"{_label(index)}: expected keys dMin, dMax, lMin, lMax; got {sorted(obj)!r}"
            )
    elif isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
        if len(obj) != 4:
            raise InvalidRectangle(f"{_label(index)}: expected 4 bounds, got {len(obj)}")
        bounds = list(obj)
    else:
        raise InvalidRectangle(f"{_label(index)}: unsupported type {type(obj).__name__}")

    _validate_rectangle(*bounds, index)
    return Rectangle(*bounds)


# ---------------------------------------------------------------------------
#  Filter & clip
# ---------------------------------------------------------------------------
def filter_and_clip(target: TargetRegion, rectangles: Iterable[Rectangle]) -> List[Rectangle]:
    """Drop rectangles that miss ``target`` and clamp the rest to its bounds.

    Input order is preserved.
    """
    return [target.clip(rect) for rect in rectangles if target.overlaps(rect)]
