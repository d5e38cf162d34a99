# -*- coding: utf-8 -*-
"""
Benchmark Data Models — structured result types for filter timing.

``PerformanceRecord`` is the per-image pair of sequential and parallel
wall-clock durations.  ``AggregatedMetrics`` summarises repeated
trials, ``HardwareSnapshot`` freezes the machine the numbers came from,
and ``BenchmarkRun`` wraps an ordered list of records for persistence.

All models support JSON round-tripping via ``to_dict()`` / ``from_dict()``.

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

# Standard library
import json
import math
import os
import platform
import socket
import sys
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

# Third-party
import numpy as np


@dataclass(frozen=True)
class PerformanceRecord:
    """Timing of one image through both engines.

    Attributes
    ----------
    image_id : str
        Identifier of the image (file name or caller label).
    sequential_s : float
        Wall-clock seconds spent in the sequential engine.
    parallel_s : float
        Wall-clock seconds spent in the parallel engine.
    """

    image_id: str
    sequential_s: float
    parallel_s: float

    @property
    def speedup(self) -> float:
        """``sequential_s / parallel_s``; ``inf`` if the latter is 0."""
        if self.parallel_s == 0:
            return math.inf
        return self.sequential_s / self.parallel_s

    def to_dict(self) -> Dict[str, Any]:
        return {
            "image_id": self.image_id,
            "sequential_s": self.sequential_s,
            "parallel_s": self.parallel_s,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PerformanceRecord':
        return cls(
            image_id=str(data["image_id"]),
            sequential_s=float(data["sequential_s"]),
            parallel_s=float(data["parallel_s"]),
        )


@dataclass(frozen=True)
class HardwareSnapshot:
    """Frozen machine description captured at benchmark time.

    Attributes
    ----------
    cpu_count : int
        Number of logical CPUs.
    platform_info : str
        Platform string (e.g. ``'Linux-6.8.0-x86_64'``).
    python_version : str
        Python version string.
    hostname : str
        Machine hostname.
    captured_at : str
        ISO 8601 UTC timestamp of capture.
    """

    cpu_count: int
    platform_info: str
    python_version: str
    hostname: str
    captured_at: str

    @classmethod
    def capture(cls) -> 'HardwareSnapshot':
        """Describe the current machine."""
        return cls(
            cpu_count=os.cpu_count() or 1,
            platform_info=platform.platform(),
            python_version=sys.version,
            hostname=socket.gethostname(),
            captured_at=datetime.now(timezone.utc).isoformat(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cpu_count": self.cpu_count,
            "platform_info": self.platform_info,
            "python_version": self.python_version,
            "hostname": self.hostname,
            "captured_at": self.captured_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HardwareSnapshot':
        return cls(
            cpu_count=data["cpu_count"],
            platform_info=data["platform_info"],
            python_version=data["python_version"],
            hostname=data["hostname"],
            captured_at=data["captured_at"],
        )


@dataclass(frozen=True)
class AggregatedMetrics:
    """Statistics of one duration across N trials.

    Attributes
    ----------
    count : int
        Number of measurements.
    min, max, mean, median : float
        Summary statistics in seconds.
    stddev : float
        Sample standard deviation (ddof=1 when N > 1, else 0).
    values : tuple
        Raw measurements, in trial order.
    """

    count: int
    min: float
    max: float
    mean: float
    median: float
    stddev: float
    values: tuple

    @classmethod
    def from_values(cls, values: Sequence[float]) -> 'AggregatedMetrics':
        """Compute statistics from raw values.

        Raises
        ------
        ValueError
            If *values* is empty.
        """
        if len(values) == 0:
            raise ValueError("Cannot aggregate empty values list.")

        arr = np.asarray(values, dtype=np.float64)
        ddof = 1 if len(arr) > 1 else 0

        return cls(
            count=len(arr),
            min=float(np.min(arr)),
            max=float(np.max(arr)),
            mean=float(np.mean(arr)),
            median=float(np.median(arr)),
            stddev=float(np.std(arr, ddof=ddof)),
            values=tuple(float(v) for v in arr),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "min": self.min,
            "max": self.max,
            "mean": self.mean,
            "median": self.median,
            "stddev": self.stddev,
            "values": list(self.values),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AggregatedMetrics':
        return cls(
            count=data["count"],
            min=data["min"],
            max=data["max"],
            mean=data["mean"],
            median=data["median"],
            stddev=data["stddev"],
            values=tuple(data["values"]),
        )


@dataclass
class BenchmarkRun:
    """Ordered performance records of one harness session.

    The atomic unit of persistence.

    Attributes
    ----------
    run_id : str
        Unique identifier (UUID4).
    config : Dict[str, Any]
        ``FilterConfig.to_dict()`` the engines ran with.
    hardware : HardwareSnapshot
        Machine state at benchmark time.
    records : List[PerformanceRecord]
        One record per image, in the order the images were processed.
    tags : Dict[str, str]
        User-defined labels.
    created_at : str
        ISO 8601 UTC timestamp.
    """

    run_id: str
    config: Dict[str, Any]
    hardware: HardwareSnapshot
    records: List[PerformanceRecord] = field(default_factory=list)
    tags: Dict[str, str] = field(default_factory=dict)
    created_at: str = ""

    @classmethod
    def create(
        cls,
        config: Dict[str, Any],
        records: Sequence[PerformanceRecord],
        hardware: Optional[HardwareSnapshot] = None,
        tags: Optional[Dict[str, str]] = None,
    ) -> 'BenchmarkRun':
        """Create a new run with auto-generated ID and timestamp."""
        return cls(
            run_id=str(uuid.uuid4()),
            config=dict(config),
            hardware=hardware or HardwareSnapshot.capture(),
            records=list(records),
            tags=tags or {},
            created_at=datetime.now(timezone.utc).isoformat(),
        )

    @property
    def total_sequential_s(self) -> float:
        return sum(r.sequential_s for r in self.records)

    @property
    def total_parallel_s(self) -> float:
        return sum(r.parallel_s for r in self.records)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "run_id": self.run_id,
            "config": self.config,
            "hardware": self.hardware.to_dict(),
            "records": [r.to_dict() for r in self.records],
            "tags": self.tags,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BenchmarkRun':
        return cls(
            run_id=data["run_id"],
            config=data.get("config", {}),
            hardware=HardwareSnapshot.from_dict(data["hardware"]),
            records=[
                PerformanceRecord.from_dict(r)
                for r in data.get("records", [])
            ],
            tags=data.get("tags", {}),
            created_at=data.get("created_at", ""),
        )

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, json_str: str) -> 'BenchmarkRun':
        return cls.from_dict(json.loads(json_str))
