# -*- coding: utf-8 -*-
"""
Tests for ParallelFilterEngine.

Validates equivalence with the sequential engine for every chunk size
and both executors, input validation, and the failure semantics: all
tasks finish before the lowest-index failure is reported.

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
import threading

# Third-party
import numpy as np
import pytest

# Internal
from medianbench.benchmarking.harness import BenchmarkHarness
from medianbench.errors import (
    InvalidChunkSize,
    InvalidDimensions,
    InvalidRadius,
    WorkerFailure,
)
from medianbench.filtering.config import FilterConfig
from medianbench.filtering.parallel import (
    ParallelFilterEngine,
    filter_chunk,
    filter_parallel,
)
from medianbench.filtering.sequential import filter_sequential

from conftest import make_noisy


def _fail_chunks_1_and_3(source, out, chunk, radius):
    """Module-level so process workers can unpickle it."""
    if chunk.index in (1, 3):
        raise RuntimeError(f"chunk {chunk.index} exploded")
    filter_chunk(source, out, chunk, radius)


class TestEquivalence:
    """Parallel output equals sequential output."""

    def test_every_chunk_size_threads(self, noisy_image):
        expected = filter_sequential(noisy_image)
        for size in range(1, max(noisy_image.width, noisy_image.height) + 1):
            assert filter_parallel(noisy_image, size) == expected, size

    def test_every_chunk_size_processes(self, random_image):
        config = FilterConfig(executor="process", max_workers=2)
        expected = filter_sequential(random_image)
        for size in range(1, max(random_image.width, random_image.height) + 1):
            assert filter_parallel(random_image, size, config) == expected, size

    @pytest.mark.parametrize("size", [4, 23])
    def test_noisy_image_processes(self, noisy_image, size):
        config = FilterConfig(executor="process", max_workers=2)
        expected = filter_sequential(noisy_image)
        assert filter_parallel(noisy_image, size, config) == expected

    @pytest.mark.parametrize("radius", [0, 2, 3])
    def test_other_radii(self, random_image, radius):
        config = FilterConfig(radius=radius)
        expected = filter_sequential(random_image, config)
        for size in (1, 3, 5, 11):
            assert filter_parallel(random_image, size, config) == expected

    def test_single_chunk(self, noisy_image):
        """chunk_size >= max(W, H) gives one chunk and the same result."""
        size = max(noisy_image.width, noisy_image.height)
        engine = ParallelFilterEngine(FilterConfig(chunk_size=size))
        assert len(engine.plan(noisy_image)) == 1
        assert engine.apply(noisy_image) == filter_sequential(noisy_image)

    def test_chunk_exceeds_one_dimension(self):
        image = make_noisy(5, 30, seed=1)
        assert filter_parallel(image, 8) == filter_sequential(image)

    def test_single_worker(self, noisy_image):
        config = FilterConfig(max_workers=1)
        assert filter_parallel(noisy_image, 4, config) == \
            filter_sequential(noisy_image)

    def test_center_of_3x3_is_50(self, gradient_3x3):
        assert filter_parallel(gradient_3x3, 1).get(1, 1) == 50


class TestParallelFilterEngine:
    """Contract tests for the parallel engine."""

    def test_shape_preserved(self, noisy_image):
        assert filter_parallel(noisy_image, 5).shape == noisy_image.shape

    def test_input_untouched(self, noisy_image):
        before = noisy_image.array.copy()
        filter_parallel(noisy_image, 3)
        np.testing.assert_array_equal(noisy_image.array, before)

    def test_strategy(self):
        assert ParallelFilterEngine().strategy == "parallel"

    def test_one_task_per_chunk(self, noisy_image):
        """The worker runs once for every chunk, covering each once."""
        seen = []
        lock = threading.Lock()

        def recording_worker(source, out, chunk, radius):
            with lock:
                seen.append(chunk.index)
            filter_chunk(source, out, chunk, radius)

        engine = ParallelFilterEngine(FilterConfig(chunk_size=5),
                                      chunk_worker=recording_worker)
        engine.apply(noisy_image)
        assert sorted(seen) == list(range(len(engine.plan(noisy_image))))

    def test_worker_count_capped_by_chunks(self):
        engine = ParallelFilterEngine(FilterConfig(max_workers=64))
        assert engine.worker_count(3) == 3
        assert engine.worker_count(100) == 64

    def test_worker_count_defaults_to_cpus(self):
        engine = ParallelFilterEngine()
        assert engine.worker_count(10_000) == min(10_000, os.cpu_count() or 1)

    @pytest.mark.parametrize("shape", [(0, 0), (0, 4), (4, 0)])
    def test_zero_area_raises(self, shape):
        with pytest.raises(InvalidDimensions):
            filter_parallel(np.zeros(shape, dtype=np.uint8), 2)

    @pytest.mark.parametrize("chunk_size", [0, -5])
    def test_invalid_chunk_size(self, gradient_3x3, chunk_size):
        with pytest.raises(InvalidChunkSize):
            filter_parallel(gradient_3x3, chunk_size)

    def test_invalid_radius(self, gradient_3x3):
        with pytest.raises(InvalidRadius):
            filter_parallel(gradient_3x3, 2, FilterConfig(radius=-2))


class TestWorkerFailure:
    """A faulting worker is reported only after every task finished."""

    def test_lowest_index_failure_reported(self, noisy_image):
        def faulty(source, out, chunk, radius):
            if chunk.index in (2, 5):
                raise RuntimeError(f"boom {chunk.index}")
            filter_chunk(source, out, chunk, radius)

        engine = ParallelFilterEngine(FilterConfig(chunk_size=4),
                                      chunk_worker=faulty)
        with pytest.raises(WorkerFailure) as info:
            engine.apply(noisy_image)

        assert info.value.chunk.index == 2
        assert info.value.failed_count == 2
        assert isinstance(info.value.__cause__, RuntimeError)
        assert "boom 2" in str(info.value.__cause__)

    def test_waits_for_all_tasks(self, noisy_image):
        """Chunk 0 fails immediately; the rest still run to completion."""
        finished = []
        lock = threading.Lock()
        release = threading.Event()

        def worker(source, out, chunk, radius):
            if chunk.index == 0:
                release.set()
                raise ValueError("first chunk fails")
            release.wait(timeout=5)
            filter_chunk(source, out, chunk, radius)
            with lock:
                finished.append(chunk.index)

        engine = ParallelFilterEngine(
            FilterConfig(chunk_size=6, max_workers=4), chunk_worker=worker,
        )
        n_chunks = len(engine.plan(noisy_image))
        with pytest.raises(WorkerFailure):
            engine.apply(noisy_image)

        assert sorted(finished) == list(range(1, n_chunks))

    def test_lowest_index_failure_reported_processes(self):
        """The process executor reports failures the same way."""
        engine = ParallelFilterEngine(
            FilterConfig(chunk_size=4, executor="process", max_workers=2),
            chunk_worker=_fail_chunks_1_and_3,
        )
        with pytest.raises(WorkerFailure) as info:
            engine.apply(make_noisy(12, 12, seed=5))

        assert info.value.chunk.index == 1
        assert info.value.failed_count == 2
        assert isinstance(info.value.__cause__, RuntimeError)
        assert "chunk 1" in str(info.value.__cause__)

    def test_failure_is_not_a_value_error(self, gradient_3x3):
        def always_fail(source, out, chunk, radius):
            raise ValueError("bad")

        engine = ParallelFilterEngine(chunk_worker=always_fail)
        with pytest.raises(WorkerFailure) as info:
            engine.apply(gradient_3x3)
        assert not isinstance(info.value, ValueError)


@pytest.mark.slow
class TestScalability:
    """Soft, relative timing check over repeated trials."""

    def test_process_parallel_beats_sequential(self):
        cpus = os.cpu_count() or 1
        if cpus < 2:
            pytest.skip("needs at least two CPUs")

        image = make_noisy(320, 320, seed=11)
        harness = BenchmarkHarness(
            FilterConfig(chunk_size=64, executor="process",
                         max_workers=min(cpus, 16)),
        )
        seq, par = harness.run_trials(image, trials=3)

        assert par.median < seq.median
