# -*- coding: utf-8 -*-
"""
Filtering subpackage — median filter engines and their building blocks.

Provides the read-only ``IntensityBuffer``, the explicit
``FilterConfig``, the per-pixel neighborhood kernel, the chunk
scheduler, and the sequential and chunk-parallel engines.

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

from medianbench.filtering.buffer import IntensityBuffer
from medianbench.filtering.config import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_EXECUTOR,
    DEFAULT_RADIUS,
    FilterConfig,
)
from medianbench.filtering.neighborhood import (
    filter_region,
    sample_neighborhood,
    select_median,
)
from medianbench.filtering.base import FilterEngine
from medianbench.filtering.chunks import Chunk, chunk_count, plan_chunks
from medianbench.filtering.sequential import (
    SequentialFilterEngine,
    filter_sequential,
)
from medianbench.filtering.parallel import (
    ParallelFilterEngine,
    filter_chunk,
    filter_parallel,
)

__all__ = [
    "Chunk",
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_EXECUTOR",
    "DEFAULT_RADIUS",
    "FilterConfig",
    "FilterEngine",
    "IntensityBuffer",
    "ParallelFilterEngine",
    "SequentialFilterEngine",
    "chunk_count",
    "filter_chunk",
    "filter_parallel",
    "filter_region",
    "filter_sequential",
    "plan_chunks",
    "sample_neighborhood",
    "select_median",
]
