#!/usr/bin/env python3
"""Decide whether a set of sensor envelopes covers a target region.

Either load a query file::

    python scripts/check_coverage.py --query query.json

or pass bounds inline as ``d0,d1,l0,l1``::

    python scripts/check_coverage.py --target 0,20,0,10 \
        --rect 0,10,0,5 --rect 0,10,5,10 --rect 10,20,0,10
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

import envelope_coverage.utils as utils
from envelope_coverage import Rectangle, TargetRegion, check_region
from envelope_coverage.data.io_utils import load_query, parse_bounds


def _bounds(value: str):
    try:
        return parse_bounds(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--query", type=Path, help="JSON file with 'target' and 'rectangles'.")
    source.add_argument("--target", type=_bounds, help="Target bounds d0,d1,l0,l1.")
    parser.add_argument(
        "--rect",
        type=_bounds,
        action="append",
        default=[],
        help="Envelope bounds d0,d1,l0,l1 (repeatable, only with --target).",
    )
    parser.add_argument("--verbose", action="store_true", help="Trace the sweep.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    utils.VERBOSE = args.verbose

    try:
        if args.query is not None:
            if args.rect:
                parser.error("--rect cannot be combined with --query")
            target, rects = load_query(args.query)
        else:
            target = TargetRegion(*args.target)
            rects = [Rectangle(*bounds) for bounds in args.rect]
        covered = check_region(target, rects)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print("covered" if covered else "not covered")
    return 0 if covered else 1


if __name__ == "__main__":
    sys.exit(main())
