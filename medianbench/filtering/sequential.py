# -*- coding: utf-8 -*-
"""
Sequential Filter Engine — single-threaded full-image median sweep.

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
from typing import Optional

# Third-party
import numpy as np

# Internal
from medianbench.filtering.base import FilterEngine
from medianbench.filtering.buffer import BufferLike, IntensityBuffer
from medianbench.filtering.config import FilterConfig
from medianbench.filtering.neighborhood import filter_region


class SequentialFilterEngine(FilterEngine):
    """Filter every pixel on the calling thread.

    Examples
    --------
    >>> engine = SequentialFilterEngine(FilterConfig(radius=1))
    >>> denoised = engine.apply(noisy)
    """

    @property
    def strategy(self) -> str:
        """Return ``"sequential"``."""
        return "sequential"

    def _run(self, source: IntensityBuffer) -> IntensityBuffer:
        output = np.empty(source.shape, dtype=np.uint8)
        filter_region(source.array, output, 0, 0, self._config.radius)
        return IntensityBuffer(output)


def filter_sequential(
    buffer: BufferLike,
    config: Optional[FilterConfig] = None,
) -> IntensityBuffer:
    """Median-filter *buffer* on the calling thread.

    Parameters
    ----------
    buffer : IntensityBuffer or np.ndarray
        Input pixels.
    config : FilterConfig, optional
        Only ``radius`` is used.  Defaults to radius 1.

    Returns
    -------
    IntensityBuffer
        Freshly allocated output of the same shape.

    Raises
    ------
    InvalidDimensions
        If *buffer* has zero area.
    InvalidRadius
        If the configured radius is negative.
    """
    return SequentialFilterEngine(config).apply(buffer)
