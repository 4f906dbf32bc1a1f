#!/usr/bin/env python3
"""Print the selection schedule and counts of each weighted algorithm.

Usage:
    # Compare all three algorithms on the default weights:
    python distribution_demo.py

    # Custom weights, more calls, reproducible random draws:
    python distribution_demo.py --weight server1=5 --weight server2=1 \
        --weight server3=1 --calls 14 --seed 7

    # Log every selection through the library logger:
    python distribution_demo.py --log-level summary
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter

from weighted_select import ConfigValidationError, WeightedSelectConfig, build_selector

_DEFAULT_WEIGHTS = {"server1": 5, "server2": 2, "server3": 3}


def _parse_weight(text: str) -> tuple[str, int]:
    value, sep, weight = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected VALUE=WEIGHT, got {text!r}")
    try:
        parsed = int(weight)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"weight must be an integer: {weight!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"weight must be >= 0: {weight!r}")
    return value, parsed


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.split("\n")[0])
    parser.add_argument(
        "--weight",
        action="append",
        type=_parse_weight,
        metavar="VALUE=WEIGHT",
        help="Item and weight (repeatable, default: server1=5 server2=2 server3=3)",
    )
    parser.add_argument("--calls", type=int, default=20, help="Selections per algorithm")
    parser.add_argument(
        "--selector",
        action="append",
        choices=["random", "roundrobin", "smooth"],
        help="Algorithm to run (repeatable, default: all)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for random selection")
    parser.add_argument(
        "--log-level",
        default="none",
        choices=["none", "summary", "full"],
        help="Per-selection logging",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    weights = dict(args.weight) if args.weight else dict(_DEFAULT_WEIGHTS)

    for selector_type in args.selector or ["random", "roundrobin", "smooth"]:
        config = WeightedSelectConfig(
            _env_file=None,
            selector_type=selector_type,
            weights=weights,
            entropy_source_type="seeded" if args.seed is not None else "system",
            entropy_seed=args.seed,
            log_level=args.log_level,
        )
        try:
            selector = build_selector(config)
        except ConfigValidationError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

        schedule = [selector.next() for _ in range(args.calls)]
        counts = Counter(schedule)
        print(f"{selector_type:>10}: {' '.join(str(v) for v in schedule)}")
        print(f"{'':>10}  counts: {dict(counts)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
