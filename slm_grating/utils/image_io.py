"""Image file decode/encode adapters built on Pillow."""

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from ..core.config import CHANNELS, config
from ..core.pixel import ImageData

logger = logging.getLogger(__name__)


def read_image_data(path: Union[str, Path]) -> ImageData:
    """Decode an image file into an RGBA buffer.

    Args:
        path: Any image file Pillow can read

    Returns:
        ImageData with the image's own width/height and row-major RGBA bytes
    """
    with Image.open(path) as img:
        # Draw the image onto an RGBA canvas and get the bitmap
        rgba = img.convert('RGBA')
        width, height = rgba.size
        data = np.asarray(rgba, dtype=np.uint8).reshape(-1).copy()

    logger.debug("Decoded %s (%dx%d)", path, width, height)
    return ImageData(width, height, data)


def write_image_data(path: Union[str, Path], image_data: ImageData) -> Path:
    """Encode an RGBA buffer to an image file.

    The parent directory is created if needed. The format follows the file
    extension; formats without alpha support (eg: JPEG) are flattened to RGB.

    Args:
        path: Output file path
        image_data: RGBA buffer with its width/height

    Returns:
        Path of the written file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    pixels = np.asarray(image_data.data, dtype=np.uint8).reshape(
        image_data.height, image_data.width, CHANNELS
    )
    img = Image.fromarray(pixels)

    # use png to support transparency and reduce artifacts
    extension = path.suffix.lower()
    fmt = Image.registered_extensions().get(extension, 'PNG')
    if fmt not in config.alpha_formats:
        logger.warning("%s does not keep transparency, alpha channel dropped", fmt)
        img = img.convert('RGB')

    img.save(path, format=fmt)
    logger.debug("Encoded %s (%dx%d, %s)", path, image_data.width, image_data.height, fmt)
    return path
