# -*- coding: utf-8 -*-
"""
Tests for IntensityBuffer and FilterConfig.

Validates construction, accessors, read-only guarantees, equality and
configuration validation.

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
import pytest

# Internal
from medianbench.errors import InvalidChunkSize, InvalidRadius
from medianbench.filtering.buffer import IntensityBuffer, as_buffer
from medianbench.filtering.config import FilterConfig


class TestIntensityBuffer:
    """Tests for IntensityBuffer."""

    def test_accessors(self, gradient_3x3):
        """width, height and get(x, y) follow row-major layout."""
        assert gradient_3x3.width == 3
        assert gradient_3x3.height == 3
        assert gradient_3x3.get(0, 0) == 10
        assert gradient_3x3.get(2, 0) == 30
        assert gradient_3x3.get(0, 2) == 70

    def test_non_square_shape(self):
        """shape is (height, width)."""
        buf = IntensityBuffer(np.zeros((2, 5), dtype=np.uint8))
        assert buf.width == 5
        assert buf.height == 2
        assert buf.shape == (2, 5)

    def test_get_out_of_bounds_raises(self, gradient_3x3):
        with pytest.raises(IndexError):
            gradient_3x3.get(3, 0)

    def test_array_is_read_only(self, gradient_3x3):
        """The exposed array cannot be written."""
        with pytest.raises(ValueError):
            gradient_3x3.array[0, 0] = 1

    def test_caller_array_stays_writeable(self):
        """Wrapping does not freeze the caller's own array."""
        arr = np.zeros((2, 2), dtype=np.uint8)
        IntensityBuffer(arr)
        arr[0, 0] = 5
        assert arr.flags.writeable

    def test_int_array_is_converted(self):
        buf = IntensityBuffer(np.array([[0, 255]], dtype=np.int64))
        assert buf.array.dtype == np.uint8
        assert buf.to_list() == [[0, 255]]

    def test_out_of_range_raises(self):
        with pytest.raises(ValueError, match=r"\[0, 255\]"):
            IntensityBuffer(np.array([[0, 256]]))

    def test_not_2d_raises(self):
        with pytest.raises(ValueError, match="2-D"):
            IntensityBuffer(np.zeros((2, 2, 3), dtype=np.uint8))

    def test_zero_area_allowed(self):
        """An empty buffer can be built; filters reject it later."""
        buf = IntensityBuffer(np.zeros((0, 4), dtype=np.uint8))
        assert buf.is_empty()
        assert buf.width == 4
        assert buf.height == 0

    def test_from_array(self):
        arr = np.array([[0, 128], [255, 7]], dtype=np.int32)
        buf = IntensityBuffer.from_array(arr)
        assert buf.to_list() == [[0, 128], [255, 7]]
        assert buf.array.dtype == np.uint8

    def test_from_array_validates_range(self):
        with pytest.raises(ValueError, match=r"\[0, 255\]"):
            IntensityBuffer.from_array(np.array([[-1, 3]]))

    def test_from_rows_empty(self):
        assert IntensityBuffer.from_rows([]).is_empty()

    def test_equality(self, gradient_3x3):
        same = IntensityBuffer.from_rows([[10, 20, 30],
                                          [40, 50, 60],
                                          [70, 80, 90]])
        assert gradient_3x3 == same
        assert gradient_3x3 != IntensityBuffer.blank(3, 3)
        assert gradient_3x3 != IntensityBuffer.blank(3, 2)

    def test_as_buffer_passthrough(self, gradient_3x3):
        assert as_buffer(gradient_3x3) is gradient_3x3
        assert isinstance(as_buffer(np.zeros((1, 1))), IntensityBuffer)


class TestFilterConfig:
    """Tests for FilterConfig."""

    def test_defaults(self):
        config = FilterConfig()
        assert config.radius == 1
        assert config.chunk_size == 45
        assert config.max_workers is None
        assert config.executor == "thread"

    def test_validate_returns_self(self):
        config = FilterConfig()
        assert config.validate() is config

    @pytest.mark.parametrize("radius", [-1, 1.5, "1", True])
    def test_invalid_radius(self, radius):
        with pytest.raises(InvalidRadius):
            FilterConfig(radius=radius).validate()

    @pytest.mark.parametrize("chunk_size", [0, -3, 2.0, None])
    def test_invalid_chunk_size(self, chunk_size):
        with pytest.raises(InvalidChunkSize):
            FilterConfig(chunk_size=chunk_size).validate()

    def test_invalid_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            FilterConfig(radius=-1).validate()

    def test_invalid_max_workers(self):
        with pytest.raises(ValueError, match="max_workers"):
            FilterConfig(max_workers=0).validate()

    def test_invalid_executor(self):
        with pytest.raises(ValueError, match="executor"):
            FilterConfig(executor="gpu").validate()

    def test_replace_and_dict_roundtrip(self):
        config = FilterConfig().replace(chunk_size=8, executor="process")
        assert config.chunk_size == 8
        assert FilterConfig.from_dict(config.to_dict()) == config

    def test_frozen(self):
        with pytest.raises(AttributeError):
            FilterConfig().radius = 2
