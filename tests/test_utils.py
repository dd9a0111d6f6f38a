from __future__ import annotations

from fractions import Fraction
from typing import List, Sequence, Tuple

from hypothesis import strategies as st

__all__ = [
    "Bounds",
    "oracle_covered",
    "brute_covered_length",
    "bounds_strategy",
    "target_strategy",
    "rects_strategy",
    "as_dicts",
]

Bounds = Tuple[int, int, int, int]


# ---------------------------------------------------------------------------
#  Brute-force oracles
# ---------------------------------------------------------------------------
def oracle_covered(target: Bounds, rects: Sequence[Bounds]) -> bool:
    """Cell-by-cell coverage check over every distinct boundary.

    Mirrors the entry-point rules for empty or zero-area inputs: a point target
    is covered, a target with no overlapping rectangle is not, and otherwise
    every positive-area cell of the grid must sit inside some rectangle.
    """
    d0, d1, l0, l1 = target
    if d0 == d1 and l0 == l1:
        return True
    clipped = [
        (max(a, d0), min(b, d1), max(c, l0), min(d, l1))
        for a, b, c, d in rects
        if b >= d0 and a <= d1 and d >= l0 and c <= l1
    ]
    if not clipped:
        return False
    d_cuts = sorted({d0, d1, *(r[0] for r in clipped), *(r[1] for r in clipped)})
    l_cuts = sorted({l0, l1, *(r[2] for r in clipped), *(r[3] for r in clipped)})
    for da, db in zip(d_cuts, d_cuts[1:]):
        dm = Fraction(da + db, 2)
        for la, lb in zip(l_cuts, l_cuts[1:]):
            lm = Fraction(la + lb, 2)
            if not any(a <= dm <= b and c <= lm <= d for a, b, c, d in clipped):
                return False
    return True


def brute_covered_length(coords: Sequence[int], active: Sequence[Tuple[int, int]]) -> int:
    """Length of ``[coords[0], coords[-1]]`` covered by index ranges ``[lo, hi)``."""
    total = 0
    for i in range(len(coords) - 1):
        if any(lo <= i < hi for lo, hi in active):
            total += coords[i + 1] - coords[i]
    return total


# ---------------------------------------------------------------------------
#  Hypothesis strategies
# ---------------------------------------------------------------------------
@st.composite
def bounds_strategy(draw, lo: int = -3, hi: int = 14) -> Bounds:
    a, b = sorted((draw(st.integers(lo, hi)), draw(st.integers(lo, hi))))
    c, d = sorted((draw(st.integers(lo, hi)), draw(st.integers(lo, hi))))
    return a, b, c, d


def target_strategy():
    return bounds_strategy(0, 10)


def rects_strategy(max_size: int = 8):
    return st.lists(bounds_strategy(), max_size=max_size)


def as_dicts(rects: Sequence[Bounds]) -> List[dict]:
    return [{"dMin": a, "dMax": b, "lMin": c, "lMax": d} for a, b, c, d in rects]
