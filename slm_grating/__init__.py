"""
SLM Grating - generate and compose pixel gratings for spatial light modulators.

The package is organized into layers:
- api/: Error types and request schemas
- core/: Grating raster, pixel model, blaze generator, configuration
- patterns/: Pattern functions and coordinate transforms
- pipeline/: Layer builders and compositor
- utils/: Image I/O adapters and logging setup

## Main Entry Points

Using the Grating algebra directly:
    from slm_grating import Grating, BlazeConfig, blaze_grating, circle
    mask = Grating.from_pattern(512, 512, circle(100, 256, 256))
    result = mask.add(blaze_grating(512, 512, BlazeConfig(max=255, count=25)))

Using a composition request:
    from slm_grating import CompositionRequest, run_composition
    run_composition(CompositionRequest.from_yaml("job.yaml"))
"""

__version__ = "1.0.0"

# =============================================================================
# API Layer
# =============================================================================
from .api.errors import (
    ErrorCode,
    GratingError,
    InvalidDimensionError,
    OutOfBoundsError,
    DimensionMismatchError,
    SizeMismatchError,
    BlazeTooWideError,
    NotMonochromeError,
    InvalidParameterError,
    PatternNotImplementedError,
)
from .api.request import BlazeSpec, PatternSpec, TransformSpec, LayerSet, CompositionRequest

# =============================================================================
# Core Layer
# =============================================================================
from .core.config import AppConfig, config
from .core.pixel import Pixel, PixelEntry, ImageData, Pattern
from .core.grating import Grating, GratingSize
from .core.blaze import BlazeConfig, blaze_grating

# =============================================================================
# Patterns Layer
# =============================================================================
from .patterns import (
    circle,
    rect,
    random,
    hermite_gauss_kinoform,
    PatternTransformer,
    create_pattern,
    parse_pattern_expression,
)

# =============================================================================
# Pipeline Layer
# =============================================================================
from .pipeline import (
    LayerKind,
    build_image_layers,
    build_doe_layers,
    build_pattern_layers,
    build_blaze_layers,
    build_layers,
    compose_layers,
    run_composition,
)

# =============================================================================
# Utils Layer
# =============================================================================
from .utils.image_io import read_image_data, write_image_data

# =============================================================================
# All Exports
# =============================================================================

__all__ = [
    # Version
    "__version__",

    # API Layer
    "ErrorCode",
    "GratingError",
    "InvalidDimensionError",
    "OutOfBoundsError",
    "DimensionMismatchError",
    "SizeMismatchError",
    "BlazeTooWideError",
    "NotMonochromeError",
    "InvalidParameterError",
    "PatternNotImplementedError",
    "BlazeSpec",
    "PatternSpec",
    "TransformSpec",
    "LayerSet",
    "CompositionRequest",

    # Core Layer
    "AppConfig",
    "config",
    "Pixel",
    "PixelEntry",
    "ImageData",
    "Pattern",
    "Grating",
    "GratingSize",
    "BlazeConfig",
    "blaze_grating",

    # Patterns Layer
    "circle",
    "rect",
    "random",
    "hermite_gauss_kinoform",
    "PatternTransformer",
    "create_pattern",
    "parse_pattern_expression",

    # Pipeline Layer
    "LayerKind",
    "build_image_layers",
    "build_doe_layers",
    "build_pattern_layers",
    "build_blaze_layers",
    "build_layers",
    "compose_layers",
    "run_composition",

    # Utils Layer
    "read_image_data",
    "write_image_data",
]
