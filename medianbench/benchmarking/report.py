# -*- coding: utf-8 -*-
"""
Benchmark Reporting — console table and line chart of performance records.

``format_performance_table`` renders one row per image with the
sequential and parallel durations; ``plot_performance`` draws both
series against the image number and saves a PNG.

Dependencies
------------
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
from pathlib import Path
from typing import List, Optional, Sequence, Union

# Internal
from medianbench.benchmarking.models import PerformanceRecord

NO_RESULTS = "No benchmarks completed."


def format_performance_table(records: Sequence[PerformanceRecord]) -> str:
    """Render *records* as a fixed-width text table.

    Parameters
    ----------
    records : Sequence[PerformanceRecord]
        Rows, in display order.

    Returns
    -------
    str
        The table, or ``NO_RESULTS`` when *records* is empty.
    """
    if not records:
        return NO_RESULTS

    width = max(len("Image"), max(len(r.image_id) for r in records))
    lines: List[str] = [
        f"{'Image':<{width}s}  {'Sequential (s)':>14s}  "
        f"{'Parallel (s)':>14s}  {'Speedup':>8s}",
        f"{'-' * width}  {'-' * 14}  {'-' * 14}  {'-' * 8}",
    ]
    for r in records:
        lines.append(
            f"{r.image_id:<{width}s}  {r.sequential_s:>14.6f}  "
            f"{r.parallel_s:>14.6f}  {r.speedup:>7.2f}x"
        )

    total_seq = sum(r.sequential_s for r in records)
    total_par = sum(r.parallel_s for r in records)
    lines.append(f"{'-' * width}  {'-' * 14}  {'-' * 14}  {'-' * 8}")
    lines.append(
        f"{'Total':<{width}s}  {total_seq:>14.6f}  {total_par:>14.6f}  "
        f"{(total_seq / total_par if total_par else float('inf')):>7.2f}x"
    )
    return "\n".join(lines)


def print_performance_table(records: Sequence[PerformanceRecord]) -> None:
    """Print ``format_performance_table(records)``."""
    print(format_performance_table(records))


def plot_performance(
    records: Sequence[PerformanceRecord],
    path: Union[str, Path],
    title: str = "Performance Comparison",
) -> Optional[Path]:
    """Save a line chart of sequential vs. parallel durations.

    The x axis is the 1-based image number in record order, the y axis
    the duration in seconds.

    Parameters
    ----------
    records : Sequence[PerformanceRecord]
        Data points, in order.
    path : str or Path
        Output PNG path.  Parent directories are created.
    title : str
        Chart title.

    Returns
    -------
    Path or None
        The written path, or ``None`` when *records* is empty.
    """
    if not records:
        return None

    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    numbers = list(range(1, len(records) + 1))
    fig, ax = plt.subplots(figsize=(8, 4))
    try:
        ax.plot(numbers, [r.sequential_s for r in records],
                marker='o', color='red', label='Sequential')
        ax.plot(numbers, [r.parallel_s for r in records],
                marker='o', color='blue', label='Parallel')
        ax.set_title(title)
        ax.set_xlabel('Image Number')
        ax.set_ylabel('Time (s)')
        ax.legend(loc='lower right')
        ax.grid(True)
        fig.tight_layout()
        fig.savefig(path, dpi=150)
    finally:
        plt.close(fig)
    return path
