# -*- coding: utf-8 -*-
"""
Parallel Filter Engine — chunk-partitioned fan-out / join median sweep.

The image is split by ``plan_chunks`` and one task per chunk is
submitted to an executor created for this call only.  Every task reads
the shared read-only input and produces the pixels of its own chunk;
chunks are disjoint, so no lock guards the output.  The caller blocks
on ``concurrent.futures.wait`` until every task has reached a terminal
state.

Two executors are available:

- ``"thread"``: tasks write straight into their slice of the shared
  output array.
- ``"process"``: each worker process receives the input once through
  the pool initializer, filters its chunk into a private block and
  returns it; the calling thread copies each block into the chunk's
  region after the join.  This is the mode that scales the pure-Python
  kernel across cores.

If any task fails the call still waits for the rest, then raises
``WorkerFailure`` for the failed chunk with the lowest index.  No
partial output is returned.

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
import os
from concurrent.futures import (
    ALL_COMPLETED,
    Future,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    wait,
)
from typing import Callable, List, Optional, Tuple

# Third-party
import numpy as np

# Internal
from medianbench.errors import WorkerFailure
from medianbench.filtering.base import FilterEngine
from medianbench.filtering.buffer import BufferLike, IntensityBuffer
from medianbench.filtering.chunks import Chunk, plan_chunks
from medianbench.filtering.config import FilterConfig, validate_chunk_size
from medianbench.filtering.neighborhood import filter_region

#: ``worker(source, out, chunk, radius)`` fills *out* (shape of *chunk*).
ChunkWorker = Callable[[np.ndarray, np.ndarray, Chunk, int], None]


def filter_chunk(
    source: np.ndarray,
    out: np.ndarray,
    chunk: Chunk,
    radius: int,
) -> None:
    """Default chunk worker: median-filter *chunk* of *source* into *out*."""
    filter_region(source, out, chunk.x0, chunk.y0, radius)


# ---------------------------------------------------------------------------
# Process-mode task plumbing (module level so it pickles)
# ---------------------------------------------------------------------------
_process_state: dict = {}


def _init_process_worker(
    source: np.ndarray,
    radius: int,
    worker: ChunkWorker,
) -> None:
    """Pool initializer: hold the read-only input for this process."""
    source.flags.writeable = False
    _process_state["source"] = source
    _process_state["radius"] = radius
    _process_state["worker"] = worker


def _run_chunk_in_process(chunk: Chunk) -> np.ndarray:
    block = np.empty((chunk.height, chunk.width), dtype=np.uint8)
    _process_state["worker"](
        _process_state["source"], block, chunk, _process_state["radius"]
    )
    return block


class ParallelFilterEngine(FilterEngine):
    """Filter each chunk of the image in its own worker task.

    Parameters
    ----------
    config : FilterConfig, optional
        ``radius``, ``chunk_size``, ``max_workers`` and ``executor`` are
        all honoured.  Defaults to ``FilterConfig()``.
    chunk_worker : callable, optional
        Replaces the per-chunk kernel.  Must be picklable when
        ``executor="process"``.

    Examples
    --------
    >>> engine = ParallelFilterEngine(FilterConfig(chunk_size=64))
    >>> denoised = engine.apply(noisy)
    """

    def __init__(
        self,
        config: Optional[FilterConfig] = None,
        chunk_worker: Optional[ChunkWorker] = None,
    ) -> None:
        super().__init__(config)
        self._chunk_worker = chunk_worker or filter_chunk

    @property
    def strategy(self) -> str:
        """Return ``"parallel"``."""
        return "parallel"

    def plan(self, source: IntensityBuffer) -> List[Chunk]:
        """Chunks this engine would fan out for *source*."""
        return plan_chunks(source.width, source.height,
                           self._config.chunk_size)

    def worker_count(self, n_chunks: int) -> int:
        """Executor size for a call that fans out *n_chunks* tasks."""
        limit = self._config.max_workers or os.cpu_count() or 1
        return max(1, min(limit, n_chunks))

    def _run(self, source: IntensityBuffer) -> IntensityBuffer:
        chunks = self.plan(source)
        output = np.empty(source.shape, dtype=np.uint8)

        if self._config.executor == "process":
            futures = self._fan_out_processes(source.array, chunks)
        else:
            futures = self._fan_out_threads(source.array, output, chunks)

        self._raise_first_failure(chunks, futures)

        if self._config.executor == "process":
            for chunk, future in zip(chunks, futures):
                output[chunk.slices] = future.result()

        return IntensityBuffer(output)

    def _fan_out_threads(
        self,
        source: np.ndarray,
        output: np.ndarray,
        chunks: List[Chunk],
    ) -> List[Future]:
        radius = self._config.radius
        worker = self._chunk_worker
        with ThreadPoolExecutor(
            max_workers=self.worker_count(len(chunks)),
            thread_name_prefix="median-chunk",
        ) as pool:
            futures = [
                pool.submit(worker, source, output[chunk.slices], chunk, radius)
                for chunk in chunks
            ]
            wait(futures, return_when=ALL_COMPLETED)
        return futures

    def _fan_out_processes(
        self,
        source: np.ndarray,
        chunks: List[Chunk],
    ) -> List[Future]:
        with ProcessPoolExecutor(
            max_workers=self.worker_count(len(chunks)),
            initializer=_init_process_worker,
            initargs=(source, self._config.radius, self._chunk_worker),
        ) as pool:
            futures = [
                pool.submit(_run_chunk_in_process, chunk) for chunk in chunks
            ]
            wait(futures, return_when=ALL_COMPLETED)
        return futures

    @staticmethod
    def _raise_first_failure(
        chunks: List[Chunk],
        futures: List[Future],
    ) -> None:
        """Raise ``WorkerFailure`` for the lowest-index failed chunk."""
        failures: List[Tuple[Chunk, BaseException]] = [
            (chunk, future.exception())
            for chunk, future in zip(chunks, futures)
            if future.exception() is not None
        ]
        if failures:
            chunk, exc = failures[0]
            raise WorkerFailure(chunk, len(failures), exc) from exc


def filter_parallel(
    buffer: BufferLike,
    chunk_size: int,
    config: Optional[FilterConfig] = None,
) -> IntensityBuffer:
    """Median-filter *buffer* with one worker task per chunk.

    Parameters
    ----------
    buffer : IntensityBuffer or np.ndarray
        Input pixels.
    chunk_size : int
        Chunk edge length; overrides ``config.chunk_size``.
    config : FilterConfig, optional
        Radius, worker limit and executor.  Defaults to
        ``FilterConfig()``.

    Returns
    -------
    IntensityBuffer
        Identical to ``filter_sequential(buffer, config)``.

    Raises
    ------
    InvalidDimensions
        If *buffer* has zero area.
    InvalidChunkSize
        If *chunk_size* is not a positive integer.
    InvalidRadius
        If the configured radius is negative.
    WorkerFailure
        If any chunk task raised; reported after all tasks finished.
    """
    validate_chunk_size(chunk_size)
    config = (config or FilterConfig()).replace(chunk_size=chunk_size)
    return ParallelFilterEngine(config).apply(buffer)
