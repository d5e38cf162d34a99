# -*- coding: utf-8 -*-
"""
CLI entry point for the median filter benchmark.

Run with::

    python -m medianbench dataset/                      # defaults
    python -m medianbench dataset/ --chunk-size 64      # bigger chunks
    python -m medianbench dataset/ --executor process   # multi-core
    python -m medianbench dataset/ --pattern 'kodim*.png'

License
-------
MIT License
See LICENSE file for full text.

Created
-------
2026-10-16

Modified
--------
2026-10-16
"""

# Standard library
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from medianbench.benchmarking.suite import (
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PATTERN,
    run_dataset,
)
from medianbench.errors import MedianFilterError
from medianbench.filtering.config import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_EXECUTOR,
    DEFAULT_RADIUS,
    EXECUTORS,
    FilterConfig,
)


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="python -m medianbench",
        description="Sequential vs. parallel median filter benchmark",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m medianbench dataset/                       # defaults
  python -m medianbench dataset/ --chunk-size 64       # bigger chunks
  python -m medianbench dataset/ --executor process    # multi-core
  python -m medianbench dataset/ --store-dir ./results # custom store
""",
    )
    parser.add_argument(
        "dataset", type=Path,
        help="Directory of input images",
    )
    parser.add_argument(
        "--chunk-size", type=int, default=DEFAULT_CHUNK_SIZE,
        help=f"Chunk edge length in pixels (default: {DEFAULT_CHUNK_SIZE})",
    )
    parser.add_argument(
        "--radius", type=int, default=DEFAULT_RADIUS,
        help=f"Neighborhood radius (default: {DEFAULT_RADIUS})",
    )
    parser.add_argument(
        "--workers", type=int, default=None,
        help="Maximum concurrent workers (default: CPU count)",
    )
    parser.add_argument(
        "--executor", choices=EXECUTORS, default=DEFAULT_EXECUTOR,
        help=(f"Parallel executor (default: {DEFAULT_EXECUTOR}). Threads "
              "share the GIL, so expect ~1x speedup; use 'process' to "
              "measure multi-core scaling"),
    )
    parser.add_argument(
        "--pattern", default=DEFAULT_PATTERN,
        help=f"Glob for images inside DATASET (default: {DEFAULT_PATTERN!r})",
    )
    parser.add_argument(
        "--warmup", type=int, default=0,
        help="Untimed runs before each measurement (default: 0)",
    )
    parser.add_argument(
        "--output-dir", type=Path, default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR}/)",
    )
    parser.add_argument(
        "--store-dir", type=Path, default=None,
        help="Benchmark store directory (default: .benchmarks/)",
    )
    parser.add_argument(
        "--chart", type=Path, default=None,
        help="Chart path (default: OUTPUT_DIR/performance_comparison.png)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the dataset benchmark.

    Returns
    -------
    int
        0 if at least one image completed, 1 otherwise.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = FilterConfig(
        radius=args.radius,
        chunk_size=args.chunk_size,
        max_workers=args.workers,
        executor=args.executor,
    )
    if args.warmup < 0:
        parser.error(f"--warmup must be >= 0, got {args.warmup}")
    try:
        config.validate()
    except (MedianFilterError, ValueError) as exc:
        parser.error(str(exc))

    try:
        records = run_dataset(
            args.dataset,
            output_dir=args.output_dir,
            config=config,
            pattern=args.pattern,
            store_dir=args.store_dir,
            chart_path=args.chart,
            warmup=args.warmup,
        )
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0 if records else 1


if __name__ == "__main__":
    sys.exit(main())
