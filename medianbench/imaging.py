# -*- coding: utf-8 -*-
"""
Imaging — decode, grayscale conversion, and PNG output.

Thin Pillow wrappers around the filter engines.  Errors from Pillow and
the file system propagate unchanged; nothing here exits the process.

Dependencies
------------
numpy
Pillow

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
from typing import List, Union

# Third-party
import numpy as np
from PIL import Image

# Internal
from medianbench.filtering.buffer import BufferLike, IntensityBuffer, as_array

IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg", ".bmp", ".tif", ".tiff")


def load_image(path: Union[str, Path]) -> np.ndarray:
    """Decode an image file into an array.

    Returns
    -------
    np.ndarray
        ``(H, W)`` for single-channel files, ``(H, W, C)`` otherwise.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    PIL.UnidentifiedImageError
        If the file is not a readable image.
    """
    with Image.open(path) as img:
        if img.mode not in ("L", "RGB", "RGBA"):
            img = img.convert("RGB")
        return np.array(img)


def to_grayscale(image: np.ndarray) -> IntensityBuffer:
    """Average the R, G and B channels into an ``IntensityBuffer``.

    Channels are widened to 16 bits (``c * 257``), averaged with integer
    division and shifted back down, i.e.
    ``((r + g + b) * 257 // 3) >> 8``.  This rounds up slightly more
    often than ``(r + g + b) // 3``: ``(255, 255, 254)`` maps to 255.
    An alpha channel is ignored; a 2-D input is taken as already
    grayscale.

    Raises
    ------
    ValueError
        If *image* is neither 2-D nor ``(H, W, >=3)``.
    """
    arr = np.asarray(image)
    if arr.ndim == 2:
        return IntensityBuffer(arr)
    if arr.ndim != 3 or arr.shape[2] < 3:
        raise ValueError(
            f"expected (H, W) or (H, W, 3+) image, got shape {arr.shape}"
        )
    rgb = arr[..., :3].astype(np.uint32) * 257
    gray = ((rgb[..., 0] + rgb[..., 1] + rgb[..., 2]) // 3) >> 8
    return IntensityBuffer(gray.astype(np.uint8))


def save_image(
    buffer: BufferLike,
    folder: Union[str, Path],
    filename: str,
) -> Path:
    """Write *buffer* as an 8-bit grayscale image, creating *folder*."""
    folder = Path(folder)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / filename
    pixels = np.ascontiguousarray(as_array(buffer), dtype=np.uint8)
    Image.fromarray(pixels).save(path)
    return path


def list_images(directory: Union[str, Path], pattern: str = "*") -> List[Path]:
    """Image files in *directory* matching *pattern*, sorted by name."""
    directory = Path(directory)
    return sorted(
        p for p in directory.glob(pattern)
        if p.is_file() and p.suffix.lower() in IMAGE_SUFFIXES
    )
