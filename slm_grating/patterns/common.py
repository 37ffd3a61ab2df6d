"""Common black & white and noise patterns."""

import math
from typing import Optional

import numpy as np

from .base import Pattern


def circle(radius: float, offset_x: float, offset_y: float) -> Pattern:
    """Pattern that draws a b&w circle: dark inside, bright outside.

    Args:
        radius: Radius of the circle
        offset_x: Horizontal center
        offset_y: Vertical center

    Returns:
        Pattern returning 0 within `radius` of the center and 255 beyond it

    Example:
        small_ball = circle(25, 255, 255)
    """
    def pattern(x, y):
        return 255 * int(math.hypot(x - offset_x, y - offset_y) > radius)

    return pattern


def rect(
    x_min: float,
    x_max: float,
    y_min: float,
    y_max: float,
    invert: bool = False
) -> Pattern:
    """Pattern that draws a b&w rectangle.

    The interior test is strict on all four edges.

    Args:
        x_min: Rectangle left edge
        x_max: Rectangle right edge
        y_min: Rectangle top edge
        y_max: Rectangle bottom edge
        invert: Swap inside and outside (bright inside)

    Returns:
        Pattern returning 0 inside and 255 outside (or the reverse)

    Example:
        small_box = rect(230, 280, 230, 280)
    """
    def inside(x, y) -> bool:
        return x_min < x < x_max and y_min < y < y_max

    if invert:
        return lambda x, y: 255 * int(inside(x, y))

    return lambda x, y: 255 * int(not inside(x, y))


def random(
    min: float = 0,
    max: float = 255,
    rng: Optional[np.random.Generator] = None
) -> Pattern:
    """Pattern of uniformly distributed random pixels.

    Every call draws a fresh sample in [min, max), independently of (x, y).

    Args:
        min: Minimum random value
        max: Maximum random value (exclusive)
        rng: Random generator, a fresh unseeded one by default

    Returns:
        Non-deterministic pattern
    """
    generator = rng if rng is not None else np.random.default_rng()

    def pattern(x, y):
        return (max - min) * generator.random() + min

    return pattern
