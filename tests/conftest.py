# -*- coding: utf-8 -*-
"""
Shared pytest fixtures for the medianbench test suite.

Provides small deterministic intensity buffers (the 3x3 gradient, a
seeded salt-and-pepper image, odd-shaped images) and an on-disk image
dataset for suite and CLI tests.

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
from pathlib import Path

# Third-party
import numpy as np
import pytest
from PIL import Image

# Internal
from medianbench.filtering.buffer import IntensityBuffer


def make_noisy(width: int, height: int, seed: int = 0,
               density: float = 0.1) -> IntensityBuffer:
    """Smooth gradient with salt-and-pepper noise."""
    rng = np.random.default_rng(seed)
    yy, xx = np.mgrid[0:height, 0:width]
    base = ((xx * 7 + yy * 3) % 256).astype(np.uint8)
    mask = rng.random((height, width))
    base[mask < density / 2] = 0
    base[mask > 1 - density / 2] = 255
    return IntensityBuffer(base)


@pytest.fixture
def gradient_3x3():
    """The 3x3 image ``[[10,20,30],[40,50,60],[70,80,90]]``."""
    return IntensityBuffer.from_rows([[10, 20, 30],
                                      [40, 50, 60],
                                      [70, 80, 90]])


@pytest.fixture
def noisy_image():
    """Seeded 23 x 17 noisy buffer; odd sizes exercise clipped chunks."""
    return make_noisy(23, 17, seed=42)


@pytest.fixture
def random_image():
    """Seeded uniformly random 11 x 7 buffer."""
    rng = np.random.default_rng(7)
    return IntensityBuffer(rng.integers(0, 256, size=(7, 11), dtype=np.uint8))


@pytest.fixture
def dataset_dir(tmp_path) -> Path:
    """Directory with two small RGB PNGs and one non-image file."""
    root = tmp_path / "dataset"
    root.mkdir()
    rng = np.random.default_rng(3)
    for i in (1, 2):
        rgb = rng.integers(0, 256, size=(12, 16, 3), dtype=np.uint8)
        Image.fromarray(rgb).save(root / f"kodim{i:02d}.png")
    (root / "notes.txt").write_text("not an image", encoding="utf-8")
    return root
