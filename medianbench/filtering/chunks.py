# -*- coding: utf-8 -*-
"""
Chunk Scheduler — partition an image into disjoint square tiles.

Chunks are produced by striding a fixed edge length from the origin,
rows outer and columns inner.  The last row and column of chunks are
clipped to the image boundary, so the tiles always cover the image
exactly once.

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
from dataclasses import dataclass
from typing import Dict, List, Tuple

# Internal
from medianbench.filtering.config import validate_chunk_size


@dataclass(frozen=True)
class Chunk:
    """Axis-aligned rectangle ``[x0, x1) x [y0, y1)`` owned by one task.

    Attributes
    ----------
    index : int
        Row-major position in the chunk grid.
    x0, x1 : int
        Column range, half-open.
    y0, y1 : int
        Row range, half-open.
    """

    index: int
    x0: int
    x1: int
    y0: int
    y1: int

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def slices(self) -> Tuple[slice, slice]:
        """``(rows, cols)`` slices for indexing a ``(H, W)`` array."""
        return (slice(self.y0, self.y1), slice(self.x0, self.x1))

    def contains(self, x: int, y: int) -> bool:
        return self.x0 <= x < self.x1 and self.y0 <= y < self.y1

    def to_dict(self) -> Dict[str, int]:
        return {
            "index": self.index,
            "x0": self.x0,
            "x1": self.x1,
            "y0": self.y0,
            "y1": self.y1,
        }


def _ceil_div(n: int, d: int) -> int:
    return -(-n // d)


def chunk_count(width: int, height: int, chunk_size: int) -> int:
    """Number of chunks ``ceil(W / C) * ceil(H / C)``."""
    validate_chunk_size(chunk_size)
    return _ceil_div(width, chunk_size) * _ceil_div(height, chunk_size)


def plan_chunks(width: int, height: int, chunk_size: int) -> List[Chunk]:
    """Tile a ``width`` x ``height`` image with chunks of edge *chunk_size*.

    Parameters
    ----------
    width, height : int
        Image dimensions.  A zero dimension yields no chunks.
    chunk_size : int
        Chunk edge length in pixels.  A size larger than one or both
        dimensions yields chunks clipped to the image.

    Returns
    -------
    List[Chunk]
        Pairwise disjoint chunks whose union is the whole image, in
        row-major order with ``index`` matching list position.

    Raises
    ------
    InvalidChunkSize
        If *chunk_size* is not a positive integer.
    """
    validate_chunk_size(chunk_size)

    chunks: List[Chunk] = []
    for y0 in range(0, height, chunk_size):
        y1 = min(y0 + chunk_size, height)
        for x0 in range(0, width, chunk_size):
            x1 = min(x0 + chunk_size, width)
            chunks.append(Chunk(len(chunks), x0, x1, y0, y1))
    return chunks
