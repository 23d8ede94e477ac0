from __future__ import annotations

import argparse
import time
from typing import List

from freegrowth.calculate import parse_words
from freegrowth.levels.generator import generate_levels

# Generating sets of F2 whose growth differs from the standard basis.
DEFAULT_SETS: List[List[str]] = [
    ["x", "y"],
    ["x", "y", "xy"],
    ["x", "y", "xy", "yx"],
    ["x2", "y"],
    ["x", "xyx-1"],
]


def main():
    ap = argparse.ArgumentParser(description="Compare spherical growth of several generating sets.")
    ap.add_argument("--levels", type=int, default=5)
    ap.add_argument("--no-inverses", action="store_true")
    args = ap.parse_args()

    for gens in DEFAULT_SETS:
        t0 = time.time()
        words = parse_words(gens, include_inverses=not args.no_inverses)
        levels = generate_levels(words, args.levels)
        dt = time.time() - t0
        ratios = ", ".join(f"{r:.4f}" for r in levels.level_ratios())
        print(f"{{{', '.join(gens)}}}  ({dt:.2f}s)")
        print("  sizes: ", levels.level_sizes())
        print("  ratios:", ratios)


if __name__ == "__main__":
    main()
