"""
Image Input (Pillow)
Decodes an image file into a fixed-size grid of 8-bit luminance samples.
"""
import logging
import os

import numpy as np
from PIL import Image, UnidentifiedImageError

from asciispin.config import WIDTH, HEIGHT
from asciispin.model.errors import ImageLoadError
from asciispin.model.quantizer import build_grid

# Get module logger
logger = logging.getLogger(__name__)

# Area averaging; smooth for downscaling, flat for upscaling.
RESAMPLE_FILTER = Image.Resampling.BOX


def load_luminance(path: str, width: int = WIDTH, height: int = HEIGHT) -> np.ndarray:
    """
    Open an image, convert it to grayscale and resize it to width x height.

    Args:
        path: Filesystem path of the image.
        width: Number of output columns.
        height: Number of output rows.

    Returns:
        ``uint8`` array of shape (height, width).

    Raises:
        ImageLoadError: The file is missing or is not a decodable image.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}.")

    if not os.path.isfile(path):
        raise ImageLoadError(path, "file not found")

    logger.info(f"Loading image from: {path}")
    try:
        with Image.open(path) as img:
            gray = img.convert("L")
            resized = gray.resize((width, height), RESAMPLE_FILTER)
    except UnidentifiedImageError as e:
        raise ImageLoadError(path, "unrecognised image format") from e
    except Image.DecompressionBombError as e:
        raise ImageLoadError(path, "image too large") from e
    except OSError as e:
        raise ImageLoadError(path, str(e)) from e

    logger.debug(f"Source size {gray.size}, resized to {resized.size}")
    return np.asarray(resized, dtype=np.uint8)


def load_grid(path: str, width: int = WIDTH, height: int = HEIGHT) -> np.ndarray:
    """Load an image and quantise it into the base character grid."""
    return build_grid(load_luminance(path, width, height))
