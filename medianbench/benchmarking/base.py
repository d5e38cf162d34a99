# -*- coding: utf-8 -*-
"""
Benchmark Store ABC — contract for persisting benchmark runs.

Concrete backends inherit from ``BenchmarkStore``; the shipped one is
``JSONBenchmarkStore``.

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
from abc import ABC, abstractmethod
from typing import List

# Internal
from medianbench.benchmarking.models import BenchmarkRun


class BenchmarkStore(ABC):
    """Abstract base class for benchmark run persistence.

    All runs are identified by their ``run_id``.
    """

    @abstractmethod
    def save(self, run: BenchmarkRun) -> str:
        """Persist a run.

        Parameters
        ----------
        run : BenchmarkRun
            The run to persist.

        Returns
        -------
        str
            The ``run_id`` of the saved run.
        """
        ...

    @abstractmethod
    def load(self, run_id: str) -> BenchmarkRun:
        """Load a run by ID.

        Raises
        ------
        KeyError
            If no run exists with the given ID.
        """
        ...

    @abstractmethod
    def list_runs(self, limit: int = 50) -> List[BenchmarkRun]:
        """List stored runs, newest first, at most *limit* of them."""
        ...

    @abstractmethod
    def delete(self, run_id: str) -> None:
        """Remove a run.

        Raises
        ------
        KeyError
            If no run exists with the given ID.
        """
        ...
