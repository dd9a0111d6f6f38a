# envelope_coverage/segment_tree.py

from __future__ import annotations

from typing import List, Sequence

__all__ = ["CoverageSegmentTree"]


class CoverageSegmentTree:
    """
    Segment tree over the elementary intervals ``[coords[i], coords[i+1])``
    answering "how much length is covered by at least one active interval".

    Nodes live in two flat arrays addressed by a 1-based heap id:
    ``cover_count[node]`` counts intervals whose update range contains the
    node's whole span, ``covered_len[node]`` is the covered length inside it.
    Updates must come in matched +1/-1 pairs over identical ranges; the
    count-dominates rule below is only exact under that discipline.
    """

    def __init__(self, coords: Sequence[float]):
        if len(coords) < 1:
            raise ValueError("coords must contain at least one value")
        self.coords = list(coords)
        self.n = len(self.coords) - 1  # number of elementary intervals
        size = 4 * max(self.n, 1)
        self.cover_count: List[int] = [0] * size
        self.covered_len: List[float] = [0] * size

    def __len__(self) -> int:
        return self.n

    def update(self, lo: int, hi: int, delta: int) -> None:
        """
        Add ``delta`` to every elementary interval with index in ``[lo, hi)``.
        """
        if delta not in (1, -1):
            raise ValueError(f"delta must be +1 or -1, got {delta!r}")
        if lo >= hi:
            return
        if lo < 0 or hi > self.n:
            raise ValueError(f"range [{lo}, {hi}) outside [0, {self.n})")
        self._update(1, 0, self.n - 1, lo, hi - 1, delta)

    def _update(self, node: int, left: int, right: int, ql: int, qr: int, delta: int) -> None:
        if qr < left or right < ql:
            return
        if ql <= left and right <= qr:
            self.cover_count[node] += delta
        else:
            mid = (left + right) // 2
            self._update(2 * node, left, mid, ql, qr, delta)
            self._update(2 * node + 1, mid + 1, right, ql, qr, delta)
        self._pull(node, left, right)

    def _pull(self, node: int, left: int, right: int) -> None:
        if self.cover_count[node] > 0:
            self.covered_len[node] = self.coords[right + 1] - self.coords[left]
        elif left == right:
            self.covered_len[node] = 0
        else:
            self.covered_len[node] = self.covered_len[2 * node] + self.covered_len[2 * node + 1]

    def get_covered_length(self) -> float:
        """Return the covered length over the whole coordinate range."""
        if self.n == 0:
            return 0
        return self.covered_len[1]

    @property
    def covered_length(self) -> float:
        return self.get_covered_length()
