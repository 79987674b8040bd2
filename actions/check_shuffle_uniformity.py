#!/usr/bin/env python3
"""
Check that shuffle_in_place produces uniformly distributed permutations.

**Purpose**: Shuffles range(size) many times, prints how often each element
landed in each position, and reports a chi-square p-value against the
uniform expectation (trials / size per cell).

**Usage**:
    python actions/check_shuffle_uniformity.py
    python actions/check_shuffle_uniformity.py --size 5 --trials 20000 --seed 42

**Reading the output**: every cell should be close to trials / size. A
p-value below the --alpha threshold (default 0.01) flags a likely bias and
the script exits with status 1.
"""

import argparse
import sys
from pathlib import Path

import numpy as np

# Ensure project root is on path for imports
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from numlib.analytics.uniformity import chi_square_uniformity, tally_shuffle_positions
from numlib.config.settings import get_settings
from numlib.utils.logging import configure_logging


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Empirically check the Fisher–Yates shuffle for uniformity",
        epilog="""
Examples:
  # Default run (4 elements, 10000 shuffles, unseeded)
  python actions/check_shuffle_uniformity.py

  # Reproducible run
  python actions/check_shuffle_uniformity.py --size 5 --trials 20000 --seed 42
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--size",
        type=int,
        default=4,
        help="Number of elements to shuffle (default: 4)",
    )
    parser.add_argument(
        "--trials",
        type=int,
        default=10000,
        help="Number of shuffles (default: 10000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: NUMLIB_RANDOM_SEED, or unseeded)",
    )
    parser.add_argument(
        "--alpha",
        type=float,
        default=0.01,
        help="Significance threshold for flagging bias (default: 0.01)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Main entry point for the script.

    Steps:
      1. Build the random source from --seed (or settings).
      2. Tally element positions over all trials.
      3. Print the table and the chi-square p-value.
    """
    args = parse_args(argv)
    configure_logging()

    seed = args.seed if args.seed is not None else get_settings().random_seed
    rng = np.random.default_rng(seed)

    print("=" * 80)
    print("Shuffle Uniformity Check")
    print("=" * 80)
    print(f"  size={args.size}  trials={args.trials}  seed={seed}")
    print()

    counts = tally_shuffle_positions(args.size, args.trials, rng=rng)
    expected = args.trials / args.size

    print(f"Position counts (expected {expected:.1f} per cell):")
    print(counts.to_string())
    print()

    p_value = chi_square_uniformity(counts)
    print(f"Chi-square p-value: {p_value:.4f}")

    if p_value < args.alpha:
        print(f"  ✗ p < {args.alpha}: shuffle looks biased")
        return 1

    print(f"  ✓ p >= {args.alpha}: consistent with a uniform shuffle")
    return 0


if __name__ == "__main__":
    sys.exit(main())
