# -*- coding: utf-8 -*-
"""
Benchmark Harness — time the sequential and parallel engines per image.

For every image the harness runs the sequential engine, then the
parallel engine, back to back so the two measurements never contend
for the same cores, and appends one ``PerformanceRecord``.  It does not
compare the two outputs; equivalence is covered by the test suite.

Timing uses ``time.perf_counter`` (wall clock), the same clock as the
rest of the benchmarking code.  The clock is injectable for tests.

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
import time
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

# Internal
from medianbench.benchmarking.base import BenchmarkStore
from medianbench.benchmarking.models import (
    AggregatedMetrics,
    BenchmarkRun,
    HardwareSnapshot,
    PerformanceRecord,
)
from medianbench.filtering.base import FilterEngine
from medianbench.filtering.buffer import BufferLike, IntensityBuffer, as_buffer
from medianbench.filtering.config import FilterConfig
from medianbench.filtering.parallel import ParallelFilterEngine
from medianbench.filtering.sequential import SequentialFilterEngine


class HarnessResult(NamedTuple):
    """Outputs and timing of one ``BenchmarkHarness.compare`` call."""

    record: PerformanceRecord
    sequential_output: IntensityBuffer
    parallel_output: IntensityBuffer


class BenchmarkHarness:
    """Time both filter engines per image and keep the records in order.

    Parameters
    ----------
    config : FilterConfig, optional
        Shared by both engines.  Defaults to ``FilterConfig()``.
    sequential, parallel : FilterEngine, optional
        Engines to time.  Built from *config* when omitted.
    warmup : int
        Untimed runs of each engine before every measurement.
        Default 0.
    store : BenchmarkStore, optional
        Where ``save()`` persists the accumulated run.
    clock : callable
        Returns seconds as a float.  Default ``time.perf_counter``.

    Raises
    ------
    ValueError
        If *warmup* < 0.

    Examples
    --------
    >>> harness = BenchmarkHarness(FilterConfig(chunk_size=45))
    >>> for name, image in images:
    ...     harness.run(image, name)
    >>> print_performance_table(harness.records)
    """

    def __init__(
        self,
        config: Optional[FilterConfig] = None,
        *,
        sequential: Optional[FilterEngine] = None,
        parallel: Optional[FilterEngine] = None,
        warmup: int = 0,
        store: Optional[BenchmarkStore] = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        if warmup < 0:
            raise ValueError(f"warmup must be >= 0, got {warmup}")

        self._config = (config or FilterConfig()).validate()
        self._sequential = sequential or SequentialFilterEngine(self._config)
        self._parallel = parallel or ParallelFilterEngine(self._config)
        self._warmup = warmup
        self._store = store
        self._clock = clock
        self._records: List[PerformanceRecord] = []

    @property
    def config(self) -> FilterConfig:
        return self._config

    @property
    def records(self) -> Tuple[PerformanceRecord, ...]:
        """Records in the order their images were run."""
        return tuple(self._records)

    def measure(
        self,
        engine: FilterEngine,
        buffer: IntensityBuffer,
    ) -> Tuple[IntensityBuffer, float]:
        """Run *engine* once and return ``(output, elapsed_seconds)``."""
        start = self._clock()
        output = engine.apply(buffer)
        return output, self._clock() - start

    def compare(self, buffer: BufferLike, image_id: str) -> HarnessResult:
        """Time both engines on *buffer* and append a record.

        The sequential engine always runs first; the parallel engine
        starts only after it has returned.

        Raises
        ------
        MedianFilterError
            Whatever either engine raised.  No record is appended.
        """
        source = as_buffer(buffer)
        for _ in range(self._warmup):
            self._sequential.apply(source)
            self._parallel.apply(source)

        seq_out, seq_s = self.measure(self._sequential, source)
        par_out, par_s = self.measure(self._parallel, source)

        record = PerformanceRecord(
            image_id=str(image_id),
            sequential_s=seq_s,
            parallel_s=par_s,
        )
        self._records.append(record)
        return HarnessResult(record, seq_out, par_out)

    def run(self, buffer: BufferLike, image_id: str) -> PerformanceRecord:
        """Time both engines on *buffer*; return the appended record."""
        return self.compare(buffer, image_id).record

    def run_trials(
        self,
        buffer: BufferLike,
        trials: int = 5,
    ) -> Tuple[AggregatedMetrics, AggregatedMetrics]:
        """Time both engines *trials* times without recording.

        Each trial runs sequential then parallel.  Useful for relative
        scalability comparisons, which a single sample cannot support.

        Returns
        -------
        Tuple[AggregatedMetrics, AggregatedMetrics]
            ``(sequential, parallel)`` duration statistics.

        Raises
        ------
        ValueError
            If *trials* < 1.
        """
        if trials < 1:
            raise ValueError(f"trials must be >= 1, got {trials}")

        source = as_buffer(buffer)
        seq_times: List[float] = []
        par_times: List[float] = []
        for _ in range(trials):
            seq_times.append(self.measure(self._sequential, source)[1])
            par_times.append(self.measure(self._parallel, source)[1])

        return (AggregatedMetrics.from_values(seq_times),
                AggregatedMetrics.from_values(par_times))

    def to_run(self, tags: Optional[Dict[str, str]] = None) -> BenchmarkRun:
        """Snapshot the records collected so far."""
        return BenchmarkRun.create(
            config=self._config.to_dict(),
            records=self._records,
            hardware=HardwareSnapshot.capture(),
            tags=tags,
        )

    def save(self, tags: Optional[Dict[str, str]] = None) -> BenchmarkRun:
        """Persist the records to the configured store.

        Raises
        ------
        ValueError
            If the harness was built without a store.
        """
        if self._store is None:
            raise ValueError("BenchmarkHarness has no store to save to.")
        run = self.to_run(tags)
        self._store.save(run)
        return run

    def reset(self) -> None:
        """Forget all collected records."""
        self._records.clear()


def benchmark(
    buffer: BufferLike,
    config: Optional[FilterConfig] = None,
    image_id: str = "image",
) -> PerformanceRecord:
    """Time ``filter_sequential`` and ``filter_parallel`` on *buffer*.

    Parameters
    ----------
    buffer : IntensityBuffer or np.ndarray
        Input pixels.
    config : FilterConfig, optional
        Radius, chunk size and executor.  Defaults to ``FilterConfig()``.
    image_id : str
        Label stored in the record.

    Returns
    -------
    PerformanceRecord
        ``sequential_s`` and ``parallel_s`` in wall-clock seconds.
    """
    return BenchmarkHarness(config).run(buffer, image_id)
