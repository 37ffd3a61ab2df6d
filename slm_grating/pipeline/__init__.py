"""Layer building and composition."""

from .layers import (
    LayerKind,
    build_image_layers,
    build_doe_layers,
    build_pattern_layers,
    build_blaze_layers,
    build_layers,
)
from .compositor import compose_layers, run_composition

__all__ = [
    "LayerKind",
    "build_image_layers",
    "build_doe_layers",
    "build_pattern_layers",
    "build_blaze_layers",
    "build_layers",
    "compose_layers",
    "run_composition",
]
