"""Pixel value types and channel arithmetic helpers."""

import math
from dataclasses import dataclass
from typing import Callable, NamedTuple, Union

import numpy as np

from .config import CHANNEL_MAX, OPAQUE


@dataclass(frozen=True)
class Pixel:
    """RGBA value of a single screen pixel.

    Example:
        red = Pixel(255, 0, 0, 255)
        semi_cyan = Pixel(0, 255, 255, 127)
    """
    r: int
    g: int
    b: int
    alpha: int = OPAQUE

    @classmethod
    def mono(cls, brightness: float) -> 'Pixel':
        """Gray opaque pixel with r = g = b = brightness."""
        value = clamp_channel(brightness)
        return cls(value, value, value, OPAQUE)

    @property
    def is_mono(self) -> bool:
        """Whether the pixel is an opaque gray pixel."""
        return self.r == self.g == self.b and self.alpha == OPAQUE

    def as_tuple(self) -> tuple:
        return (self.r, self.g, self.b, self.alpha)


class PixelEntry(NamedTuple):
    """Pixel together with its coordinates."""
    x: int
    y: int
    pixel: Pixel


class ImageData(NamedTuple):
    """RGBA buffer exchanged with the image decode/encode adapters.

    Attributes:
        width: Declared image width
        height: Declared image height
        data: Row-major RGBA bytes, length width * height * 4
    """
    width: int
    height: int
    data: np.ndarray


PatternValue = Union[int, float, Pixel]

# A pattern maps pixel coordinates to a luminance or an RGBA pixel.
Pattern = Callable[[int, int], PatternValue]


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves away from -inf."""
    return int(math.floor(value + 0.5))


def clamp_channel(value: float) -> int:
    """Clamp a channel value to [0, 255] and round it; NaN maps to 0."""
    value = float(value)
    if math.isnan(value) or value <= 0:
        return 0
    if value >= CHANNEL_MAX:
        return CHANNEL_MAX
    return round_half_up(value)


def clamp_array(values: np.ndarray) -> np.ndarray:
    """Vectorized `clamp_channel` returning a uint8 array."""
    values = np.nan_to_num(np.asarray(values, dtype=np.float64),
                           nan=0.0, posinf=CHANNEL_MAX, neginf=0.0)
    return np.clip(np.floor(values + 0.5), 0, CHANNEL_MAX).astype(np.uint8)
