# -*- coding: utf-8 -*-
"""
Neighborhood Kernel — per-pixel sampling and median selection.

``sample_neighborhood`` collects the in-bounds intensities inside the
Chebyshev window of radius ``r`` around a pixel.  Offsets falling
outside the image are dropped, not padded or mirrored, so border pixels
see fewer samples than interior ones: ``(2r+1)**2`` in the interior,
4 at a corner when ``r=1``.

``select_median`` sorts the samples and takes index ``len // 2``.  For
the even-sized windows that only occur on the border this is the upper
of the two middle values, not their mean.

``filter_region`` is the loop both engines share: it fills a
rectangular output view from the read-only source.

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

# Third-party
import numpy as np

# Internal
from medianbench.filtering.buffer import BufferLike, as_array


def sample_neighborhood(
    buffer: BufferLike,
    x: int,
    y: int,
    radius: int,
) -> np.ndarray:
    """Intensities within *radius* of ``(x, y)`` that lie inside the image.

    Parameters
    ----------
    buffer : IntensityBuffer or np.ndarray
        Source pixels, shape ``(height, width)``.
    x, y : int
        Column and row of the center pixel.  Must be in bounds.
    radius : int
        Chebyshev radius, ``>= 0``.

    Returns
    -------
    np.ndarray
        1-D array of samples in row-major window order.  Never empty,
        the center pixel is always included.
    """
    source = as_array(buffer)
    height, width = source.shape
    window = source[
        max(0, y - radius):min(height, y + radius + 1),
        max(0, x - radius):min(width, x + radius + 1),
    ]
    return window.ravel()


def select_median(samples) -> int:
    """Middle-ranked value of *samples* (index ``len // 2`` after sorting).

    Raises
    ------
    ValueError
        If *samples* is empty.
    """
    values = np.sort(np.asarray(samples), axis=None)
    if values.size == 0:
        raise ValueError("Cannot select the median of an empty sample set.")
    return int(values[values.size // 2])


def filter_region(
    source: np.ndarray,
    out: np.ndarray,
    x0: int,
    y0: int,
    radius: int,
) -> np.ndarray:
    """Median-filter the rectangle starting at ``(x0, y0)`` into *out*.

    *out* may be a view into a larger output array; its shape sets the
    extent of the region.  Each ``out[j, i]`` is written exactly once
    with the median around source pixel ``(x0 + i, y0 + j)``.

    Parameters
    ----------
    source : np.ndarray
        Full read-only input, shape ``(height, width)``.
    out : np.ndarray
        Writable destination, shape ``(rows, cols)`` of the region.
    x0, y0 : int
        Image coordinates of ``out[0, 0]``.
    radius : int
        Chebyshev radius.

    Returns
    -------
    np.ndarray
        *out*, for chaining.
    """
    rows, cols = out.shape
    for j in range(rows):
        y = y0 + j
        for i in range(cols):
            samples = sample_neighborhood(source, x0 + i, y, radius)
            out[j, i] = select_median(samples)
    return out
