# -*- coding: utf-8 -*-
"""
medianbench — sequential vs. chunk-parallel median filter benchmarking.

Denoises grayscale images with a spatial median filter, either on the
calling thread or split into square chunks processed by parallel
worker tasks, and times the two strategies side by side.

Dependencies
------------
numpy

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

from medianbench.errors import (
    InvalidChunkSize,
    InvalidDimensions,
    InvalidRadius,
    MedianFilterError,
    WorkerFailure,
)
from medianbench.filtering import (
    Chunk,
    FilterConfig,
    IntensityBuffer,
    ParallelFilterEngine,
    SequentialFilterEngine,
    filter_parallel,
    filter_sequential,
    plan_chunks,
    sample_neighborhood,
    select_median,
)
from medianbench.benchmarking import (
    AggregatedMetrics,
    BenchmarkHarness,
    BenchmarkRun,
    JSONBenchmarkStore,
    PerformanceRecord,
    benchmark,
)

__version__ = "0.1.0"

__all__ = [
    "AggregatedMetrics",
    "BenchmarkHarness",
    "BenchmarkRun",
    "Chunk",
    "FilterConfig",
    "IntensityBuffer",
    "InvalidChunkSize",
    "InvalidDimensions",
    "InvalidRadius",
    "JSONBenchmarkStore",
    "MedianFilterError",
    "ParallelFilterEngine",
    "PerformanceRecord",
    "SequentialFilterEngine",
    "WorkerFailure",
    "benchmark",
    "filter_parallel",
    "filter_sequential",
    "plan_chunks",
    "run_dataset",
    "sample_neighborhood",
    "select_median",
]


def __getattr__(name: str):
    """Lazy import for run_dataset (requires Pillow and matplotlib)."""
    if name == "run_dataset":
        from medianbench.benchmarking.suite import run_dataset
        return run_dataset
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
