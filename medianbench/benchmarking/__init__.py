# -*- coding: utf-8 -*-
"""
Benchmarking subpackage — timing infrastructure for the filter engines.

Provides data models for performance records, the harness that times
the sequential and parallel engines, a JSON run store, console and
chart reporting, and the dataset suite behind the CLI.

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

from medianbench.benchmarking.models import (
    AggregatedMetrics,
    BenchmarkRun,
    HardwareSnapshot,
    PerformanceRecord,
)
from medianbench.benchmarking.base import BenchmarkStore
from medianbench.benchmarking.store import JSONBenchmarkStore
from medianbench.benchmarking.harness import (
    BenchmarkHarness,
    HarnessResult,
    benchmark,
)
from medianbench.benchmarking.report import (
    format_performance_table,
    plot_performance,
    print_performance_table,
)

__all__ = [
    "AggregatedMetrics",
    "BenchmarkHarness",
    "BenchmarkRun",
    "BenchmarkStore",
    "HardwareSnapshot",
    "HarnessResult",
    "JSONBenchmarkStore",
    "PerformanceRecord",
    "benchmark",
    "format_performance_table",
    "plot_performance",
    "print_performance_table",
    "run_dataset",
]


def __getattr__(name: str):
    """Lazy import for run_dataset (pulls in Pillow)."""
    if name == "run_dataset":
        from medianbench.benchmarking.suite import run_dataset
        return run_dataset
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
