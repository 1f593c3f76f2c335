#!/usr/bin/env python3
"""
Pixel sampling: turn an image into a {RGB: population} mapping.

Images are decoded with Pillow, validated against size limits, downscaled so
the longest side is at most max_dimension, and identical pixels are counted.
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from color_model import RGB

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

MAX_IMAGE_PIXELS = 50_000_000  # 50 megapixels
MAX_IMAGE_DIMENSION = 10_000  # 10k pixels per side
DEFAULT_MAX_SAMPLE_DIMENSION = 192

ImageSource = Union[str, Path, Image.Image]


# =============================================================================
# Loading
# =============================================================================

def _open(source: ImageSource) -> Image.Image:
    if isinstance(source, Image.Image):
        return source
    try:
        return Image.open(source)
    except FileNotFoundError:
        raise FileNotFoundError(f"Image not found: {source}")
    except Exception as e:
        raise ValueError(f"Could not open image: {e}")


def _validate_size(img: Image.Image) -> None:
    """Reject images large enough to be decompression bombs."""
    width, height = img.size
    if max(width, height) > MAX_IMAGE_DIMENSION:
        raise ValueError(
            f"Image {width}x{height} is larger than {MAX_IMAGE_DIMENSION} pixels per side"
        )
    if width * height > MAX_IMAGE_PIXELS:
        raise ValueError(
            f"Image has {width * height:,} pixels, more than {MAX_IMAGE_PIXELS:,}"
        )


def flatten_on_black(img: Image.Image) -> Image.Image:
    """
    Drop alpha by compositing onto opaque black.

    Equivalent to premultiplying: a fully transparent pixel becomes black
    whatever color it hides, so the default filter discards it.
    """
    if img.mode == 'RGB':
        return img
    if 'A' not in img.getbands() and 'transparency' not in img.info:
        return img.convert('RGB')

    black = Image.new('RGBA', img.size, (0, 0, 0, 255))
    return Image.alpha_composite(black, img.convert('RGBA')).convert('RGB')


def load_image(source: ImageSource) -> Image.Image:
    """
    Open an image (or accept an already open one) as RGB.

    Translucent pixels are flattened onto black.

    Raises:
        FileNotFoundError: If image file doesn't exist
        ValueError: If file is not a valid image or exceeds size limits
    """
    img = _open(source)
    _validate_size(img)
    return flatten_on_black(img)


def resize_to_max_dimension(img: Image.Image,
                            max_dimension: int = DEFAULT_MAX_SAMPLE_DIMENSION) -> Image.Image:
    """
    Downscale so the longest side is at most max_dimension, keeping aspect ratio.

    Images already within bounds are returned unchanged (never upscaled).
    """
    if max_dimension < 1:
        raise ValueError(f"max_dimension must be positive, got {max_dimension}")

    width, height = img.size
    longest = max(width, height)
    if longest <= max_dimension:
        return img

    scale = max_dimension / longest
    new_size = (max(1, round(width * scale)), max(1, round(height * scale)))
    logger.debug("Resizing %dx%d -> %dx%d", width, height, *new_size)
    return img.resize(new_size, Image.Resampling.BILINEAR)


# =============================================================================
# Counting
# =============================================================================

def count_pixel_colors(img: Image.Image) -> dict[RGB, int]:
    """
    Count identical pixels.

    Returns:
        {RGB: population} ordered by ascending (red, green, blue)
    """
    pixels = np.asarray(flatten_on_black(img), dtype=np.uint8).reshape(-1, 3)
    if pixels.size == 0:
        return {}

    unique_colors, counts = np.unique(pixels, axis=0, return_counts=True)
    logger.debug("Counted %d distinct colors in %d pixels", len(unique_colors), len(pixels))

    return {
        RGB.from_bytes(int(r), int(g), int(b)): int(count)
        for (r, g, b), count in zip(unique_colors, counts)
    }


def sample_image(source: ImageSource,
                 max_dimension: int = DEFAULT_MAX_SAMPLE_DIMENSION) -> dict[RGB, int]:
    """Load, downscale and count the colors of an image in one step."""
    img = load_image(source)
    return count_pixel_colors(resize_to_max_dimension(img, max_dimension))
