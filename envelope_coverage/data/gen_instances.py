"""Synthetic envelope sets for tests and benchmarks.

Three families are provided:

``gen_tiling``           – a grid partition of the target, always covered.
``gen_tiling_with_hole`` – the same partition with one cell dropped, never covered.
``gen_random_rectangles`` – independent random boxes around the target.

All helpers take a ``numpy.random.Generator`` and produce integer bounds so the
exact-equality assumptions of the light-axis compression hold.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from envelope_coverage.geometry import Rectangle, TargetRegion

Rectangles = List[Rectangle]


def _rng_int(rng, lo: int, hi: int) -> int:
    return int(rng.integers(lo, hi))


def _cuts(rng, lo: int, hi: int, pieces: int) -> List[int]:
    """Return ``pieces + 1`` strictly increasing integers from ``lo`` to ``hi``."""
    if pieces < 1:
        raise ValueError("pieces must be positive")
    if hi - lo < pieces:
        raise ValueError(f"cannot split [{lo}, {hi}] into {pieces} integer pieces")
    inner = rng.choice(np.arange(lo + 1, hi), size=pieces - 1, replace=False)
    return [lo] + sorted(int(v) for v in inner) + [hi]


def _integer_target(target: TargetRegion) -> Tuple[int, int, int, int]:
    bounds = (target.distance_min, target.distance_max, target.light_min, target.light_max)
    if any(int(b) != b for b in bounds):
        raise ValueError("generators require integer target bounds")
    return tuple(int(b) for b in bounds)  # type: ignore[return-value]


def gen_tiling(
    rng,
    target: TargetRegion,
    rows: int,
    cols: int,
    *,
    overlap: int = 0,
) -> Rectangles:
    """Partition ``target`` into ``rows x cols`` cells (distance x light).

    With ``overlap > 0`` every cell is grown by that amount on each side, which
    keeps the union covering while exercising multiplicity in the tree.
    """
    d0, d1, l0, l1 = _integer_target(target)
    d_cuts = _cuts(rng, d0, d1, rows)
    l_cuts = _cuts(rng, l0, l1, cols)
    rects: Rectangles = []
    for i in range(rows):
        for j in range(cols):
            rects.append(
                Rectangle(
                    d_cuts[i] - overlap,
                    d_cuts[i + 1] + overlap,
                    l_cuts[j] - overlap,
                    l_cuts[j + 1] + overlap,
                )
            )
    return rects


def gen_tiling_with_hole(
    rng,
    target: TargetRegion,
    rows: int,
    cols: int,
) -> Tuple[Rectangles, Rectangle]:
    """Tiling of ``target`` with one cell removed; returns ``(rects, hole)``."""
    rects = gen_tiling(rng, target, rows, cols)
    hole = rects.pop(_rng_int(rng, 0, len(rects)))
    return rects, hole


def gen_random_rectangles(
    rng,
    count: int,
    target: TargetRegion,
    *,
    margin: int = 2,
    max_extent: int = 6,
) -> Rectangles:
    """Random integer boxes within ``margin`` of ``target`` on every side."""
    if count < 0:
        raise ValueError("count must be non-negative")
    if max_extent < 0:
        raise ValueError("max_extent must be non-negative")
    d0, d1, l0, l1 = _integer_target(target)
    rects: Rectangles = []
    for _ in range(count):
        d_lo = _rng_int(rng, d0 - margin, d1 + margin + 1)
        l_lo = _rng_int(rng, l0 - margin, l1 + margin + 1)
        rects.append(
            Rectangle(
                d_lo,
                d_lo + _rng_int(rng, 0, max_extent + 1),
                l_lo,
                l_lo + _rng_int(rng, 0, max_extent + 1),
            )
        )
    return rects


def shuffled(rng, rects: Rectangles) -> Rectangles:
    order = rng.permutation(len(rects))
    return [rects[int(i)] for i in order]


__all__ = [
    "gen_tiling",
    "gen_tiling_with_hole",
    "gen_random_rectangles",
    "shuffled",
]
