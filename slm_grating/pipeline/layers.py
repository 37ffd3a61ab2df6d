"""
Layer builders.

Each builder turns one kind of layer descriptor into gratings of the requested
size. Image and DOE layers are decoded on a thread pool since they are
independent of each other; results always keep the input order.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Callable, List, Optional, Sequence, Union

from ..api.errors import InvalidParameterError
from ..api.request import BlazeSpec, CompositionRequest, PatternSpec
from ..core.blaze import BlazeConfig, blaze_grating
from ..core.config import config
from ..core.grating import Grating
from ..core.pixel import ImageData, Pattern
from ..patterns.factory import parse_pattern_expression
from ..utils.image_io import read_image_data

logger = logging.getLogger(__name__)

ImageReader = Callable[[str], ImageData]


class LayerKind(Enum):
    """Supported layer kinds, in composition order."""
    IMAGE = "image"
    DOE = "doe"
    PATTERN = "pattern"
    BLAZE = "blaze"


def _decode_layers(
    width: int,
    height: int,
    paths: Sequence[str],
    reader: ImageReader,
    max_workers: Optional[int],
    kind: LayerKind
) -> List[Grating]:
    """Decode image files into gratings, in parallel, preserving order."""
    if not paths:
        return []

    def load(path: str) -> Grating:
        return Grating.from_image_data(width, height, reader(path))

    workers = max(1, min(max_workers or config.max_workers, len(paths)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        gratings = list(executor.map(load, paths))

    logger.info("Built %d %s layer(s)", len(gratings), kind.value)
    return gratings


def build_image_layers(
    width: int,
    height: int,
    images: Sequence[str],
    reader: ImageReader = read_image_data,
    max_workers: Optional[int] = None
) -> List[Grating]:
    """Build one grating per image file.

    Images are used as decoded; no Fourier transform is applied.
    """
    return _decode_layers(width, height, images, reader, max_workers, LayerKind.IMAGE)


def build_doe_layers(
    width: int,
    height: int,
    does: Sequence[str],
    reader: ImageReader = read_image_data,
    max_workers: Optional[int] = None
) -> List[Grating]:
    """Build one grating per DOE reference image."""
    return _decode_layers(width, height, does, reader, max_workers, LayerKind.DOE)


def build_pattern_layers(
    width: int,
    height: int,
    patterns: Sequence[Union[PatternSpec, str, Pattern]]
) -> List[Grating]:
    """Build one grating per pattern descriptor.

    Args:
        width: Grating width
        height: Grating height
        patterns: Built-in pattern descriptors, pattern callables, or text
            expressions

    Raises:
        PatternNotImplementedError: For text expressions
        InvalidParameterError: For unknown patterns or bad parameters
    """
    gratings = []
    for index, spec in enumerate(patterns):
        if isinstance(spec, str):
            pattern = parse_pattern_expression(spec)
        elif isinstance(spec, PatternSpec):
            try:
                pattern = spec.build()
                # Sample once so wrongly typed params fail here, not mid-fill
                pattern(0, 0)
            except (TypeError, ValueError) as exc:
                raise InvalidParameterError(str(exc), field=f'patterns[{index}]') from exc
        elif callable(spec):
            pattern = spec
        else:
            raise TypeError(f"patterns[{index}] is {type(spec).__name__}, expected a pattern")

        gratings.append(Grating.from_pattern(width, height, pattern))

    if gratings:
        logger.info("Built %d %s layer(s)", len(gratings), LayerKind.PATTERN.value)
    return gratings


def build_blaze_layers(
    width: int,
    height: int,
    blazes: Sequence[Union[BlazeSpec, BlazeConfig, str]]
) -> List[Grating]:
    """Build one blaze grating per descriptor ("count,max[,tilt]" strings accepted)."""
    gratings = []
    for spec in blazes:
        if isinstance(spec, str):
            spec = BlazeSpec.from_string(spec)
        if isinstance(spec, BlazeSpec):
            spec = spec.to_config()
        gratings.append(blaze_grating(width, height, spec))

    if gratings:
        logger.info("Built %d %s layer(s)", len(gratings), LayerKind.BLAZE.value)
    return gratings


def build_layers(
    request: CompositionRequest,
    reader: ImageReader = read_image_data,
    max_workers: Optional[int] = None
) -> List[Grating]:
    """Build every layer of a request: images, DOEs, patterns, then blazes."""
    width, height = request.width, request.height
    layers = request.layers

    return [
        *build_image_layers(width, height, layers.images, reader, max_workers),
        *build_doe_layers(width, height, layers.does, reader, max_workers),
        *build_pattern_layers(width, height, layers.patterns),
        *build_blaze_layers(width, height, layers.blazes),
    ]
