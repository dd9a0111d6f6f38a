#!/usr/bin/env python3
"""examples/run_scenarios.py – smoke-test for the coverage check.

Run this file directly, or execute `python -m examples.run_scenarios` from the
project root. It replays the four reference scenarios with tracing enabled:

  A. full coverage by three envelopes
  B. degenerate (single point) target
  C. no envelopes at all
  D. target reaching past every envelope
"""

from __future__ import annotations

import time
from typing import Dict, List

import envelope_coverage.utils as utils
from envelope_coverage import coverage_check

# Activate verbose internal logging so the user can see the sweep traces.
utils.VERBOSE = True

SEP = "=" * 80

CAMERAS: List[Dict[str, int]] = [
    {"dMin": 0, "dMax": 10, "lMin": 0, "lMax": 5},
    {"dMin": 0, "dMax": 10, "lMin": 5, "lMax": 10},
    {"dMin": 10, "dMax": 20, "lMin": 0, "lMax": 10},
]

SCENARIOS = [
    ("A – full coverage", (0, 20, 0, 10), CAMERAS, True),
    ("B – nothing to cover", (0, 0, 0, 0), CAMERAS, True),
    ("C – no cameras", (0, 10, 0, 10), [], False),
    ("D – cameras out of range", (8, 50, 0, 10), CAMERAS, False),
]


def _hdr(title: str) -> None:
    print(f"\n{SEP}\n{title}\n{SEP}\n")


def main() -> None:
    for title, bounds, rects, expected in SCENARIOS:
        _hdr(title)
        debug: Dict[str, object] = {}
        t0 = time.perf_counter()
        result = coverage_check(*bounds, rects, debug=debug)
        elapsed = time.perf_counter() - t0
        print(f"result={result} expected={expected} ({elapsed * 1e6:.1f} µs)")
        print(f"debug={debug}")


if __name__ == "__main__":
    main()
