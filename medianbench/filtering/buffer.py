# -*- coding: utf-8 -*-
"""
Intensity Buffer — read-only single-channel 8-bit image container.

Wraps a 2-D ``numpy.uint8`` array of shape ``(height, width)`` behind
the ``width`` / ``height`` / ``get(x, y)`` accessors the filter engines
consume.  The wrapped array is flagged non-writeable so that an input
buffer cannot be modified while a filter call reads from it.

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
from typing import Any, Sequence, Tuple, Union

# Third-party
import numpy as np


class IntensityBuffer:
    """Row-major grid of brightness values in ``[0, 255]``.

    Parameters
    ----------
    array : np.ndarray
        2-D array of shape ``(height, width)``.  Converted to ``uint8``
        after a range check; the buffer keeps a read-only view.

    Raises
    ------
    ValueError
        If *array* is not 2-D or holds values outside ``[0, 255]``.

    Examples
    --------
    >>> buf = IntensityBuffer.from_rows([[10, 20], [30, 40]])
    >>> buf.width, buf.height
    (2, 2)
    >>> buf.get(1, 0)
    20
    """

    __slots__ = ("_array",)

    def __init__(self, array: np.ndarray) -> None:
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise ValueError(
                f"intensity buffer must be 2-D, got {arr.ndim}-D array"
            )
        if arr.dtype != np.uint8:
            if arr.size and (arr.min() < 0 or arr.max() > 255):
                raise ValueError(
                    "intensity values must lie in [0, 255], got range "
                    f"[{arr.min()}, {arr.max()}]"
                )
            arr = arr.astype(np.uint8)
        else:
            # Never hold a writeable alias of the caller's array
            arr = arr.view()
        arr.flags.writeable = False
        self._array = arr

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'IntensityBuffer':
        """Build a buffer from a 2-D array."""
        return cls(array)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'IntensityBuffer':
        """Build a buffer from nested row lists (``rows[y][x]``)."""
        arr = np.array(rows, dtype=np.int64)
        if arr.size == 0:
            arr = arr.reshape(len(rows), 0)
        return cls(arr)

    @classmethod
    def blank(cls, width: int, height: int) -> 'IntensityBuffer':
        """All-black buffer of the given size."""
        return cls(np.zeros((height, width), dtype=np.uint8))

    @property
    def width(self) -> int:
        return int(self._array.shape[1])

    @property
    def height(self) -> int:
        return int(self._array.shape[0])

    @property
    def shape(self) -> Tuple[int, int]:
        """``(height, width)``, numpy order."""
        return (self.height, self.width)

    @property
    def array(self) -> np.ndarray:
        """Read-only ``uint8`` view of the pixels."""
        return self._array

    def get(self, x: int, y: int) -> int:
        """Intensity at column *x*, row *y*."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"({x}, {y}) outside {self.width} x {self.height} buffer"
            )
        return int(self._array[y, x])

    def is_empty(self) -> bool:
        """True when the buffer has zero area."""
        return self._array.size == 0

    def to_list(self) -> list:
        """Pixels as nested row lists."""
        return self._array.tolist()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, IntensityBuffer):
            return NotImplemented
        return (self.shape == other.shape
                and bool(np.array_equal(self._array, other._array)))

    __hash__ = None

    def __repr__(self) -> str:
        return f"IntensityBuffer(width={self.width}, height={self.height})"


BufferLike = Union[IntensityBuffer, np.ndarray]


def as_array(buffer: BufferLike) -> np.ndarray:
    """Return the 2-D pixel array behind *buffer*.

    Accepts either an ``IntensityBuffer`` or a raw 2-D array.
    """
    if isinstance(buffer, IntensityBuffer):
        return buffer.array
    return np.asarray(buffer)


def as_buffer(buffer: BufferLike) -> IntensityBuffer:
    """Coerce *buffer* to an ``IntensityBuffer``."""
    if isinstance(buffer, IntensityBuffer):
        return buffer
    return IntensityBuffer(buffer)
