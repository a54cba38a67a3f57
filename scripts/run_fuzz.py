#!/usr/bin/env python3
"""Fuzz the decimal arithmetic with randomly generated operands.

Checks, for every drawn pair of values:
- format/parse roundtrip
- multiplicative identity (a * 1 == a)
- additive commutativity (a + b == b + a)
- self-subtraction (a - a is zero)
- negative values order below non-negative ones

Usage:
    python scripts/run_fuzz.py --iterations 10000 --seed 42

Exit codes:
    0 - All properties held
    1 - At least one property failed (details printed)
"""

import argparse
import logging
import sys
from pathlib import Path

import structlog

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bigdecimal.fuzzing import DEFAULT_MAX_LEN, run_fuzz  # noqa: E402

logger = structlog.get_logger()


def main() -> int:
    parser = argparse.ArgumentParser(description="Fuzz decimal arithmetic properties")
    parser.add_argument(
        "--iterations",
        "-n",
        type=int,
        default=10_000,
        help="Number of operand pairs to draw (default: 10000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible run (default: random)",
    )
    parser.add_argument(
        "--max-len",
        type=int,
        default=DEFAULT_MAX_LEN,
        help=f"Maximum length of generated text (default: {DEFAULT_MAX_LEN})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )

    if args.iterations <= 0 or args.max_len <= 0:
        logger.error("invalid_arguments", iterations=args.iterations, max_len=args.max_len)
        print("Error: --iterations and --max-len must be positive")
        return 1

    report = run_fuzz(args.iterations, seed=args.seed, max_len=args.max_len)

    print("=" * 60)
    print(f"Iterations: {report.iterations}")
    print(f"Seed:       {report.seed}")
    print(f"Failures:   {len(report.failures)}")
    print("=" * 60)
    for failure in report.failures[:50]:
        print(f"  {failure}")
    if len(report.failures) > 50:
        print(f"  ... and {len(report.failures) - 50} more")

    return 0 if report.passed else 1


if __name__ == "__main__":
    sys.exit(main())
