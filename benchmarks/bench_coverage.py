from __future__ import annotations

import argparse
import time
from typing import List

import numpy as np

try:
    from envelope_coverage import TargetRegion, coverage_check
    from envelope_coverage.common.constants import RNG_SEEDS
    from envelope_coverage.data.gen_instances import gen_tiling, gen_tiling_with_hole, shuffled
    from envelope_coverage.eval.metrics import throughput, timing_summary
except ImportError:  # pragma: no cover - layout fallback
    import sys
    from pathlib import Path

    REPO_ROOT = Path(__file__).resolve().parents[1]
    if str(REPO_ROOT) not in sys.path:
        sys.path.append(str(REPO_ROOT))
    from envelope_coverage import TargetRegion, coverage_check
    from envelope_coverage.common.constants import RNG_SEEDS
    from envelope_coverage.data.gen_instances import gen_tiling, gen_tiling_with_hole, shuffled
    from envelope_coverage.eval.metrics import throughput, timing_summary


def run_benchmark(args: argparse.Namespace) -> None:
    rng = np.random.default_rng(args.seed)
    target = TargetRegion(0, args.extent, 0, args.extent)

    durations: List[float] = []
    mismatches = 0
    rect_total = 0

    total_runs = args.warmup + args.n
    for iteration in range(total_runs):
        with_hole = bool(rng.integers(0, 2))
        if with_hole:
            rects, _ = gen_tiling_with_hole(rng, target, args.rows, args.cols)
        else:
            rects = gen_tiling(rng, target, args.rows, args.cols, overlap=args.overlap)
        rects = shuffled(rng, rects)

        start = time.perf_counter()
        covered = coverage_check(0, args.extent, 0, args.extent, rects)
        elapsed = time.perf_counter() - start

        if covered == with_hole:
            mismatches += 1

        if iteration >= args.warmup:
            durations.append(elapsed)
            rect_total += len(rects)

    summary = timing_summary(durations, unit="us")
    print(
        ",".join(f"{key}={value:.3f}" for key, value in summary.items())
        + f",unit=us,mismatches={mismatches}"
    )
    print(f"rects_per_sec={throughput(rect_total, sum(durations)):.1f}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark the sweep-line coverage check.")
    parser.add_argument("--n", type=int, default=200, help="Number of timed iterations.")
    parser.add_argument("--warmup", type=int, default=10, help="Number of warmup iterations.")
    parser.add_argument(
        "--seed", type=int, default=RNG_SEEDS["bench"], help="Deterministic RNG seed."
    )
    parser.add_argument("--rows", type=int, default=30, help="Tiling rows (distance axis).")
    parser.add_argument("--cols", type=int, default=30, help="Tiling columns (light axis).")
    parser.add_argument("--extent", type=int, default=1000, help="Target side length.")
    parser.add_argument("--overlap", type=int, default=1, help="Cell growth for covered tilings.")
    args = parser.parse_args()
    run_benchmark(args)


if __name__ == "__main__":
    main()
