# -*- coding: utf-8 -*-
"""
Filter Configuration — explicit per-call settings for the filter engines.

Every engine call receives a ``FilterConfig`` rather than reading
module state.  The ``DEFAULT_*`` constants below are only used to fill
in fields the caller leaves out.

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
import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Optional

# Internal
from medianbench.errors import InvalidChunkSize, InvalidRadius

# ---------------------------------------------------------------------------
# Configuration defaults
# ---------------------------------------------------------------------------
DEFAULT_RADIUS = 1
DEFAULT_CHUNK_SIZE = 45
DEFAULT_EXECUTOR = "thread"

EXECUTORS = ("thread", "process")


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a meaningful size
    return isinstance(value, int) and not isinstance(value, bool)


def validate_radius(radius: Any) -> int:
    """Return *radius* if it is a non-negative int, else raise."""
    if not _is_int(radius) or radius < 0:
        raise InvalidRadius(radius)
    return radius


def validate_chunk_size(chunk_size: Any) -> int:
    """Return *chunk_size* if it is a positive int, else raise."""
    if not _is_int(chunk_size) or chunk_size <= 0:
        raise InvalidChunkSize(chunk_size)
    return chunk_size


@dataclass(frozen=True)
class FilterConfig:
    """Settings shared by the sequential and parallel engines.

    Attributes
    ----------
    radius : int
        Chebyshev radius of the neighborhood.  Default 1 (3x3 window).
    chunk_size : int
        Edge length of the square chunks used by the parallel engine.
        Default 45.
    max_workers : int, optional
        Upper bound on concurrent worker tasks.  ``None`` uses
        ``os.cpu_count()``.
    executor : str
        ``"thread"`` or ``"process"``.  Default ``"thread"``.
    """

    radius: int = DEFAULT_RADIUS
    chunk_size: int = DEFAULT_CHUNK_SIZE
    max_workers: Optional[int] = None
    executor: str = DEFAULT_EXECUTOR

    def validate(self) -> 'FilterConfig':
        """Check every field and return ``self``.

        Raises
        ------
        InvalidRadius
            If ``radius`` is negative or not an int.
        InvalidChunkSize
            If ``chunk_size`` is not a positive int.
        ValueError
            If ``max_workers`` < 1 or ``executor`` is unknown.
        """
        validate_radius(self.radius)
        validate_chunk_size(self.chunk_size)
        if self.max_workers is not None and (
            not _is_int(self.max_workers) or self.max_workers < 1
        ):
            raise ValueError(
                f"max_workers must be >= 1, got {self.max_workers!r}"
            )
        if self.executor not in EXECUTORS:
            raise ValueError(
                f"executor must be one of {EXECUTORS}, got {self.executor!r}"
            )
        return self

    def replace(self, **changes: Any) -> 'FilterConfig':
        """Copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FilterConfig':
        return cls(
            radius=data.get("radius", DEFAULT_RADIUS),
            chunk_size=data.get("chunk_size", DEFAULT_CHUNK_SIZE),
            max_workers=data.get("max_workers"),
            executor=data.get("executor", DEFAULT_EXECUTOR),
        )
