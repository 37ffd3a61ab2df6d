"""Merge layers into a single output grating."""

import logging
from typing import Optional, Sequence

from .layers import ImageReader, build_layers
from ..api.request import CompositionRequest
from ..core.grating import Grating
from ..utils.image_io import read_image_data, write_image_data

logger = logging.getLogger(__name__)


def compose_layers(width: int, height: int, layers: Sequence[Grating]) -> Grating:
    """Fold layers with `add` onto a blank grating, in order.

    Raises:
        InvalidDimensionError: If width or height is invalid
        SizeMismatchError: If a layer does not have the requested size
    """
    return Grating(width, height).add(*layers)


def run_composition(
    request: CompositionRequest,
    reader: ImageReader = read_image_data,
    writer=write_image_data,
    max_workers: Optional[int] = None
) -> Grating:
    """Build all layers of a request, merge them and write the result.

    Args:
        request: Output size, path and layer descriptors
        reader: Image decoder (path -> ImageData)
        writer: Image encoder (path, ImageData) -> Any
        max_workers: Thread pool size for image decoding

    Returns:
        The composed grating
    """
    # Define source grating first so bad dimensions fail before any decoding
    base = Grating(request.width, request.height)

    layers = build_layers(request, reader=reader, max_workers=max_workers)
    result = base.add(*layers)
    logger.info("Composed %d layer(s) into %dx%d grating", len(layers), result.width, result.height)

    if request.output:
        writer(request.output, result.to_image_data())
        logger.info("Wrote %s", request.output)

    return result
