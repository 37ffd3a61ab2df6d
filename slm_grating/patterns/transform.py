"""Coordinate transforms applied to patterns before sampling."""

import math
from typing import Tuple

from .base import Pattern, PatternTransform


class PatternTransformer:
    """Immutable chain of coordinate remaps.

    Each builder method returns a new transformer with one more remap, so a
    transformer can be shared and extended freely. Remaps run in the order
    they were added, each receiving the previous one's output.

    Example:
        centered = (
            PatternTransformer()
            .translate(-512, -512)
            .rotate(0.2)
            .scale(30, 30)
            .transform(hermite_gauss_kinoform(4, 4, 41))
        )
    """

    def __init__(self, transforms: Tuple[PatternTransform, ...] = ()):
        self._transforms = tuple(transforms)

    @property
    def transforms(self) -> Tuple[PatternTransform, ...]:
        return self._transforms

    def __len__(self) -> int:
        return len(self._transforms)

    def custom(self, transform_fn: PatternTransform) -> 'PatternTransformer':
        """Append an arbitrary (x, y) -> (x', y') remap."""
        return PatternTransformer(self._transforms + (transform_fn,))

    def translate(self, dx: float, dy: float) -> 'PatternTransformer':
        return self.custom(lambda x, y: (x + dx, y + dy))

    def rotate(self, angle: float) -> 'PatternTransformer':
        """Append a rotation by `angle` radians (standard 2D rotation matrix)."""
        cos = math.cos(angle)
        sin = math.sin(angle)
        return self.custom(lambda x, y: (x * cos - y * sin, x * sin + y * cos))

    def scale(self, scale_x: float, scale_y: float) -> 'PatternTransformer':
        """Append a zoom of the sampling grid: coordinates are divided."""
        return self.custom(lambda x, y: (x / scale_x, y / scale_y))

    def remap(self, x, y):
        """Apply all remaps in order to (x, y)."""
        for transform in self._transforms:
            x, y = transform(x, y)
        return x, y

    def transform(self, pattern: Pattern) -> Pattern:
        """Wrap a pattern so it is sampled in the transformed coordinates."""
        remap = self.remap

        def transformed(x, y):
            return pattern(*remap(x, y))

        return transformed
