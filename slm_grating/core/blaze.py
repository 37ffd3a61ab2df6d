"""Blazed (sawtooth) grating generator used to steer diffraction orders."""

import math
import numbers
from dataclasses import dataclass

import numpy as np

from .config import CHANNEL_MAX
from .grating import Grating, _as_dimension
from ..api.errors import BlazeTooWideError, InvalidDimensionError, InvalidParameterError
from ..patterns.transform import PatternTransformer


@dataclass(frozen=True)
class BlazeConfig:
    """Blaze parameters.

    Attributes:
        max: Brightness scale of the ramp, in [0, 255]
        count: Number of periods across the width, 1 <= count <= width
        tilt: Rotation of the ramp in radians
    """
    max: int
    count: int
    tilt: float = 0.0


def blaze_ramp(period: float, gain: float):
    """Pattern summing two sawtooth ramps along x and y."""
    def pattern(x, y):
        return gain * np.mod(x, period) + gain * np.mod(y, period)

    return pattern


def blaze_grating(width: int, height: int, blaze: BlazeConfig) -> Grating:
    """Build a grating pre-filled with a tilted blaze ramp.

    Sampling coordinates are rotated by pi/4 - tilt. Two sawtooth ramps of
    period 2 * width / count and gain 0.5 * count * max / 255 run along the
    rotated axes; their sum is written as a mono brightness (clamped).

    Args:
        width: Screen/grating width
        height: Screen/grating height
        blaze: Blaze parameters

    Returns:
        Grating holding the blaze pattern

    Raises:
        InvalidDimensionError: If count is not a positive integer
        InvalidParameterError: If max is outside [0, 255]
        BlazeTooWideError: If count > width
    """
    width = _as_dimension(width, 'grating_width')
    height = _as_dimension(height, 'grating_height')
    count = _as_dimension(blaze.count, 'blaze_count')
    if count == 0:
        raise InvalidDimensionError("0 is not a positive integer", field='blaze_count')

    if (isinstance(blaze.max, bool) or not isinstance(blaze.max, numbers.Real)
            or not 0 <= blaze.max <= CHANNEL_MAX):
        raise InvalidParameterError(
            f"{blaze.max!r} must be >= 0 and <= {CHANNEL_MAX}", field='blaze_max'
        )

    if count > width:
        raise BlazeTooWideError(
            f"blaze count of {count} can't fit in {width} pixels width",
            field='blaze_count',
            details={'count': count, 'width': width}
        )

    period = 2 * width / count
    gain = 0.5 * count * (blaze.max / CHANNEL_MAX)

    pattern = (
        PatternTransformer()
        .rotate(math.pi / 4 - blaze.tilt)
        .transform(blaze_ramp(period, gain))
    )

    y, x = np.mgrid[0:height, 0:width].astype(np.float64)
    return Grating.from_array(pattern(x, y))
