# -*- coding: utf-8 -*-
"""
Dataset Benchmark Suite — filter and time every image in a directory.

For each image: decode, convert to grayscale, save the grayscale copy,
time the sequential and parallel engines through ``BenchmarkHarness``,
and save both filtered outputs.  Afterwards print the execution-time
table, draw the comparison chart and persist the run.

Output layout::

    <output_dir>/
        grayscale/<name>.png
        filtered/sequential-<name>.png
        filtered/parallel-<name>.png
        performance_comparison.png

Dependencies
------------
numpy
Pillow
matplotlib

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
import gc
from pathlib import Path
from typing import Dict, List, Optional

# Third-party
from PIL import UnidentifiedImageError

# Internal
from medianbench.benchmarking.harness import BenchmarkHarness
from medianbench.benchmarking.models import PerformanceRecord
from medianbench.benchmarking.report import plot_performance, print_performance_table
from medianbench.benchmarking.store import JSONBenchmarkStore
from medianbench.errors import MedianFilterError
from medianbench.filtering.config import FilterConfig
from medianbench.imaging import list_images, load_image, save_image, to_grayscale

# ---------------------------------------------------------------------------
# Configuration defaults
# ---------------------------------------------------------------------------
DEFAULT_PATTERN = "*"
DEFAULT_OUTPUT_DIR = Path("output")
CHART_NAME = "performance_comparison.png"


def _section(title: str) -> None:
    """Print a section header."""
    print(f"\n{'=' * 72}")
    print(f"  {title}")
    print(f"{'=' * 72}")


def _output_name(path: Path) -> str:
    return f"{path.stem}.png"


def run_dataset(
    dataset_dir: Path,
    *,
    output_dir: Path = DEFAULT_OUTPUT_DIR,
    config: Optional[FilterConfig] = None,
    pattern: str = DEFAULT_PATTERN,
    store_dir: Optional[Path] = None,
    chart_path: Optional[Path] = None,
    warmup: int = 0,
    tags: Optional[Dict[str, str]] = None,
) -> List[PerformanceRecord]:
    """Benchmark both filter engines on every image in *dataset_dir*.

    Parameters
    ----------
    dataset_dir : Path
        Directory holding the input images.
    output_dir : Path
        Root for grayscale copies, filtered outputs and the chart.
    config : FilterConfig, optional
        Engine settings.  Defaults to ``FilterConfig()``.
    pattern : str
        Glob applied inside *dataset_dir*.  Default ``"*"``.
    store_dir : Path, optional
        Directory for ``JSONBenchmarkStore``.  Defaults to
        ``<cwd>/.benchmarks/``.
    chart_path : Path, optional
        Chart location.  Defaults to
        ``<output_dir>/performance_comparison.png``.
    warmup : int
        Untimed engine runs before each measurement.
    tags : Dict[str, str], optional
        Labels stored with the run.

    Returns
    -------
    List[PerformanceRecord]
        One record per image that completed, in file-name order.

    Raises
    ------
    FileNotFoundError
        If *dataset_dir* does not exist.
    """
    dataset_dir = Path(dataset_dir)
    if not dataset_dir.is_dir():
        raise FileNotFoundError(f"Dataset directory not found: {dataset_dir}")

    config = (config or FilterConfig()).validate()
    output_dir = Path(output_dir)
    gray_dir = output_dir / "grayscale"
    filtered_dir = output_dir / "filtered"
    chart_path = Path(chart_path) if chart_path else output_dir / CHART_NAME

    store = JSONBenchmarkStore(base_dir=store_dir)
    harness = BenchmarkHarness(config, warmup=warmup, store=store)
    images = list_images(dataset_dir, pattern)

    print("Median Filter Benchmark")
    print(f"  Dataset:     {dataset_dir} ({len(images)} images)")
    print(f"  Radius:      {config.radius}")
    print(f"  Chunk size:  {config.chunk_size}")
    print(f"  Executor:    {config.executor} "
          f"(max_workers={config.max_workers or 'auto'})")
    print(f"  Output:      {output_dir}")
    print(f"  Store:       {store.base_dir}")
    if config.executor == "thread":
        print("  Note:        thread workers share the GIL; speedup stays "
              "near 1x (use executor 'process' for multi-core timings)")

    _section("Filtering")
    for path in images:
        name = _output_name(path)
        try:
            gray = to_grayscale(load_image(path))
        except (OSError, UnidentifiedImageError, ValueError) as exc:
            print(f"  SKIP  {path.name:<40s}  {exc}")
            continue

        save_image(gray, gray_dir, name)

        try:
            result = harness.compare(gray, path.name)
        except MedianFilterError as exc:
            print(f"  FAIL  {path.name:<40s}  {exc}")
            continue

        save_image(result.sequential_output, filtered_dir,
                   f"sequential-{name}")
        save_image(result.parallel_output, filtered_dir, f"parallel-{name}")

        record = result.record
        print(
            f"  OK    {path.name:<40s}  "
            f"seq={record.sequential_s:.4f}s  par={record.parallel_s:.4f}s  "
            f"x{record.speedup:.2f}"
        )
        gc.collect()

    records = list(harness.records)

    _section("SUMMARY")
    print_performance_table(records)

    if records:
        written = plot_performance(records, chart_path)
        print(f"\n  Chart:  {written}")
        run = harness.save(tags={
            "dataset": str(dataset_dir),
            **(tags or {}),
        })
        print(f"  Run:    {run.run_id}")
    elif not images:
        print(f"\n  No images matching {pattern!r} in {dataset_dir}")

    return records
