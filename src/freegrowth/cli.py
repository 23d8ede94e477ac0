"""
Spherical growth statistics for a single generating set.

Example: 'freegrowth 5 x y xy' generates 5 levels using the generating set
{x, y, xy} together with the inverses X, Y, YX.
"""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from freegrowth.calculate import cayley_table, parse_words
from freegrowth.config import FREEGROWTH_LOG_LEVEL, GrowthOptions
from freegrowth.io.html import write_html_table
from freegrowth.levels.generator import generate_levels

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="freegrowth",
        description="Level sizes, growth ratios and Cayley table of a free group "
        "with respect to a generating set.",
    )
    ap.add_argument("num_levels", type=int, help="Last level to generate (>= 0).")
    ap.add_argument("generators", nargs="+", help='Generators such as "x", "Y", "x2y-1".')
    ap.add_argument(
        "--no-inverses",
        action="store_true",
        help="Do not add inverses of the generators automatically.",
    )
    ap.add_argument("--no-table", action="store_true", help="Skip printing the Cayley table.")
    ap.add_argument("--table-format", default="html", help="Cayley table format (only html).")
    ap.add_argument("--html-out", default=None, help="Also write an HTML page to this path.")
    ap.add_argument(
        "--log-level",
        default=FREEGROWTH_LOG_LEVEL,
        help="Logging level (default from FREEGROWTH_LOG_LEVEL, else WARNING).",
    )
    return ap


def run(opts: GrowthOptions, generators: Sequence[str]) -> List[str]:
    """Compute the report for *generators*; returns the printed lines."""
    words = parse_words(generators, opts.include_inverses)
    levels = generate_levels(words, opts.num_levels)
    out = [
        f"Level sizes: {levels.level_sizes()}",
        f"Level ratios: {levels.level_ratios()}",
    ]
    if opts.show_table:
        out.append("Cayley table:")
        out.append(cayley_table(generators, opts.table_format, opts.include_inverses))
    if opts.html_out:
        write_html_table(generators, opts.html_out)
        out.append(f"Successfully wrote to {opts.html_out}.")
    return out


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    log_level = args.log_level.upper()
    if log_level not in LOG_LEVELS:
        ap.error(f"invalid log level: {args.log_level} (choose from {', '.join(LOG_LEVELS)})")
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if args.num_levels < 0:
        ap.error("num_levels must be >= 0")

    opts = GrowthOptions(
        num_levels=args.num_levels,
        include_inverses=not args.no_inverses,
        table_format=args.table_format,
        html_out=args.html_out,
        show_table=not args.no_table,
    )
    try:
        lines = run(opts, args.generators)
    except (TypeError, ValueError, OSError) as exc:
        ap.error(str(exc))
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
