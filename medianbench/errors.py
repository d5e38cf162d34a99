# -*- coding: utf-8 -*-
"""
Filter Errors — exception taxonomy for the median filter engines.

Validation errors (``InvalidDimensions``, ``InvalidChunkSize``,
``InvalidRadius``) are also ``ValueError`` subclasses so callers that
already catch bad-argument errors keep working.  ``WorkerFailure`` is
raised by the parallel engine once every chunk task has finished and at
least one of them faulted.

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
from typing import Any, Optional


class MedianFilterError(Exception):
    """Base class for all errors raised by the filter engines."""


class InvalidDimensions(MedianFilterError, ValueError):
    """Raised when a buffer has zero width or zero height."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"buffer must have non-zero area, got {width} x {height}"
        )


class InvalidChunkSize(MedianFilterError, ValueError):
    """Raised when the chunk edge length is not a positive integer."""

    def __init__(self, chunk_size: Any) -> None:
        self.chunk_size = chunk_size
        super().__init__(
            f"chunk_size must be a positive integer, got {chunk_size!r}"
        )


class InvalidRadius(MedianFilterError, ValueError):
    """Raised when the filter radius is not a non-negative integer."""

    def __init__(self, radius: Any) -> None:
        self.radius = radius
        super().__init__(
            f"radius must be a non-negative integer, got {radius!r}"
        )


class WorkerFailure(MedianFilterError):
    """A parallel chunk task faulted.

    The original exception is chained as ``__cause__``.

    Attributes
    ----------
    chunk : Chunk
        The failed chunk with the lowest index.
    failed_count : int
        How many chunk tasks failed in the same call.
    """

    def __init__(self, chunk: Any, failed_count: int = 1,
                 cause: Optional[BaseException] = None) -> None:
        self.chunk = chunk
        self.failed_count = failed_count
        detail = f": {cause!r}" if cause is not None else ""
        super().__init__(
            f"worker for chunk {chunk.index} "
            f"[{chunk.x0}:{chunk.x1}, {chunk.y0}:{chunk.y1}] failed "
            f"({failed_count} failed in total){detail}"
        )
