# envelope_coverage/compress.py
"""
Coordinate compression of the light axis.

Light bounds are compared by exact equality, so inputs are expected to be
integers, exactly representable floats, or ``fractions.Fraction`` values.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from envelope_coverage.geometry import Rectangle

__all__ = ["CoordinateIndex"]


class CoordinateIndex:
    """
    Sorted, duplicate-free light coordinates with a value -> index lookup.

    ``coords[i]`` and ``coords[i + 1]`` delimit elementary interval ``i``.
    """

    def __init__(self, values: Iterable[float]):
        self.coords: Tuple[float, ...] = tuple(sorted(set(values)))
        if not self.coords:
            raise ValueError("CoordinateIndex needs at least one coordinate")
        self._index: Dict[float, int] = {v: i for i, v in enumerate(self.coords)}

    @classmethod
    def from_bounds(
        cls,
        light_min: float,
        light_max: float,
        rectangles: Iterable[Rectangle],
    ) -> "CoordinateIndex":
        """Collect the target light bounds plus every rectangle's light bounds."""
        values: List[float] = [light_min, light_max]
        for rect in rectangles:
            values.append(rect.l_min)
            values.append(rect.l_max)
        return cls(values)

    def __len__(self) -> int:
        return len(self.coords)

    def __contains__(self, value: object) -> bool:
        return value in self._index

    @property
    def n_intervals(self) -> int:
        return len(self.coords) - 1

    def index_of(self, value: float) -> int:
        """Position of ``value`` in :attr:`coords`; ``KeyError`` if absent."""
        try:
            return self._index[value]
        except KeyError:
            raise KeyError(f"light coordinate {value!r} was not registered") from None

    def interval_length(self, i: int) -> float:
        if not 0 <= i < self.n_intervals:
            raise IndexError(f"elementary interval {i} out of range [0, {self.n_intervals})")
        return self.coords[i + 1] - self.coords[i]

    def span(self) -> float:
        return self.coords[-1] - self.coords[0]
