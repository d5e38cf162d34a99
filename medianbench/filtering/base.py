# -*- coding: utf-8 -*-
"""
Filter Engine ABC — contract shared by the execution strategies.

Defines ``FilterEngine``, the abstract executor the benchmark harness
drives.  ``SequentialFilterEngine`` and ``ParallelFilterEngine``
inherit from it and differ only in how they sweep the image.

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
from typing import Optional

# Internal
from medianbench.errors import InvalidDimensions
from medianbench.filtering.buffer import BufferLike, IntensityBuffer, as_buffer
from medianbench.filtering.config import FilterConfig


class FilterEngine(ABC):
    """Abstract base class for median filter execution strategies.

    Parameters
    ----------
    config : FilterConfig, optional
        Engine settings.  Validated on construction.  Defaults to
        ``FilterConfig()``.
    """

    def __init__(self, config: Optional[FilterConfig] = None) -> None:
        self._config = (config or FilterConfig()).validate()

    @property
    def config(self) -> FilterConfig:
        return self._config

    @property
    @abstractmethod
    def strategy(self) -> str:
        """Return the strategy identifier.

        Returns
        -------
        str
            One of ``"sequential"``, ``"parallel"``.
        """
        ...

    def apply(self, buffer: BufferLike) -> IntensityBuffer:
        """Filter *buffer* and return a new buffer of the same shape.

        Parameters
        ----------
        buffer : IntensityBuffer or np.ndarray
            Input pixels.  Never modified.

        Returns
        -------
        IntensityBuffer

        Raises
        ------
        InvalidDimensions
            If *buffer* has zero width or height.
        """
        source = as_buffer(buffer)
        if source.is_empty():
            raise InvalidDimensions(source.width, source.height)
        return self._run(source)

    @abstractmethod
    def _run(self, source: IntensityBuffer) -> IntensityBuffer:
        """Filter a validated, non-empty buffer."""
        ...

    def __call__(self, buffer: BufferLike) -> IntensityBuffer:
        return self.apply(buffer)
