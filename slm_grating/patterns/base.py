"""Pattern and coordinate-transform types."""

from typing import Callable, Tuple

from ..core.pixel import Pattern, PatternValue, Pixel

# A coordinate remap (x, y) -> (x', y'). Remaps only use elementwise
# arithmetic so they also accept numpy coordinate grids.
PatternTransform = Callable[[float, float], Tuple[float, float]]

__all__ = ["Pattern", "PatternValue", "PatternTransform", "Pixel"]
