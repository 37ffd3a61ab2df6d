"""
Grating data type and its pixel-wise composition algebra.

A grating is a fixed-size RGBA raster stored as a row-major uint8 buffer of
length width * height * 4. Pixel (x, y) channel c lives at flat index
4 * (x + y * width) + c, origin top-left, y growing downward.

Example:
    linear = Grating.from_pattern(256, 256, lambda x, y: x + y)
    blank = Grating(256, 256)

    assert blank.size.width == 256
    assert linear.get_pixel_mono(20, 50) == 70

    composed = linear.add(blank)
"""

import math
import numbers
from typing import Callable, List, NamedTuple, Optional, Union

import numpy as np

from .config import CHANNELS, CHANNEL_MAX, OPAQUE, LUMA_WEIGHTS, config
from .pixel import (
    Pixel, PixelEntry, ImageData, Pattern,
    clamp_channel, clamp_array, round_half_up,
)
from ..api.errors import (
    InvalidDimensionError,
    OutOfBoundsError,
    DimensionMismatchError,
    SizeMismatchError,
    NotMonochromeError,
)


class GratingSize(NamedTuple):
    """Width and height of a grating."""
    width: int
    height: int


def _as_dimension(value, name: str) -> int:
    """Validate a width/height and return it as int.

    Raises:
        InvalidDimensionError: If value is not a finite non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidDimensionError(f"{value!r} is not a non-negative integer", field=name)
    if not math.isfinite(value) or value < 0 or value != int(value):
        raise InvalidDimensionError(f"{value!r} is not a non-negative integer", field=name)
    return int(value)


def _as_coordinate(value, limit: int, name: str) -> int:
    """Validate a pixel coordinate against [0, limit).

    Raises:
        OutOfBoundsError: If value is not an integer inside the extent
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise OutOfBoundsError(f"{value!r} is not an integer coordinate", field=name)
    if not 0 <= value < limit:
        raise OutOfBoundsError(
            f"{value} must be >= 0 and < {limit}",
            field=name,
            details={'value': int(value), 'bounds': [0, limit]}
        )
    return int(value)


class Grating:
    """Fixed-size RGBA raster used as a diffraction/phase pattern.

    Instances own their buffer exclusively. Every operation that produces a
    different raster returns a new Grating; only `set_pixel` and
    `set_pixel_mono` mutate the receiver.
    """

    # =========================================================================
    # Constructors
    # =========================================================================

    def __init__(self, width: int, height: int):
        """Construct a blank (all-zero) grating.

        Args:
            width: Screen/grating width
            height: Screen/grating height

        Raises:
            InvalidDimensionError: If width or height is not a finite
                non-negative integer
        """
        self._width = _as_dimension(width, 'grating_width')
        self._height = _as_dimension(height, 'grating_height')
        self._pixels = np.zeros((self._height, self._width, CHANNELS), dtype=np.uint8)

    @classmethod
    def _wrap(cls, pixels: np.ndarray) -> 'Grating':
        """Build a grating around an owned (H, W, 4) uint8 array without copying."""
        grating = cls.__new__(cls)
        grating._height, grating._width = int(pixels.shape[0]), int(pixels.shape[1])
        grating._pixels = pixels
        return grating

    @classmethod
    def from_pattern(cls, width: int, height: int, pattern: Pattern) -> 'Grating':
        """Construct a grating filled with a pattern.

        The pattern is sampled once per pixel in row-major order. Numbers are
        written as mono pixels, `Pixel` values are written as-is.

        Args:
            width: Screen/grating width
            height: Screen/grating height
            pattern: Callable (x, y) -> number | Pixel

        Returns:
            Newly constructed grating corresponding to the pattern
        """
        grating = cls(width, height)
        pixels = grating._pixels

        for y in range(grating._height):
            for x in range(grating._width):
                value = pattern(x, y)
                # numpy scalars (np.float32, np.bool_, 0-d arrays) become Python numbers
                if isinstance(value, (np.ndarray, np.generic)) and np.ndim(value) == 0:
                    value = value.item()

                if isinstance(value, Pixel):
                    pixels[y, x] = [clamp_channel(c) for c in value.as_tuple()]
                elif isinstance(value, numbers.Real):
                    level = clamp_channel(value)
                    pixels[y, x] = (level, level, level, OPAQUE)
                else:
                    raise TypeError(
                        f"pattern returned {type(value).__name__} at ({x}, {y}), "
                        f"expected a number or Pixel"
                    )

        return grating

    @classmethod
    def from_image_data(cls, width: int, height: int, image_data: ImageData) -> 'Grating':
        """Construct a grating from an external RGBA buffer (eg: a decoded image).

        The bytes are copied verbatim.

        Args:
            width: Screen/grating width
            height: Screen/grating height
            image_data: Decoded image with declared width/height

        Returns:
            Newly constructed grating corresponding to the input image

        Raises:
            DimensionMismatchError: If the declared or actual buffer size does
                not match the requested size
        """
        grating = cls(width, height)

        if image_data.width != grating._width:
            raise DimensionMismatchError(
                f"{image_data.width} must be equal to {grating._width}", field='img.width'
            )
        if image_data.height != grating._height:
            raise DimensionMismatchError(
                f"{image_data.height} must be equal to {grating._height}", field='img.height'
            )

        data = image_data.data
        if isinstance(data, (bytes, bytearray, memoryview)):
            data = np.frombuffer(data, dtype=np.uint8)
        data = np.array(data, dtype=np.uint8).reshape(-1)

        expected = grating._width * grating._height * CHANNELS
        if data.size != expected:
            raise DimensionMismatchError(
                f"buffer holds {data.size} bytes, expected {expected}",
                field='img.data',
                details={'actual': int(data.size), 'expected': expected}
            )

        grating._pixels = data.reshape(grating._height, grating._width, CHANNELS)
        return grating

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'Grating':
        """Construct a grating from a numpy array.

        Args:
            array: (H, W) luminance array or (H, W, 4) RGBA array. Values are
                clamped to [0, 255] and rounded.

        Returns:
            Newly constructed grating

        Raises:
            DimensionMismatchError: If the array shape is not supported
        """
        array = np.asarray(array)

        if array.ndim == 2:
            pixels = np.empty(array.shape + (CHANNELS,), dtype=np.uint8)
            pixels[..., :3] = clamp_array(array)[..., None]
            pixels[..., 3] = OPAQUE
        elif array.ndim == 3 and array.shape[-1] == CHANNELS:
            pixels = clamp_array(array)
        else:
            raise DimensionMismatchError(
                f"shape {array.shape} is neither (H, W) nor (H, W, {CHANNELS})",
                field='array.shape'
            )

        return cls._wrap(np.ascontiguousarray(pixels))

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> GratingSize:
        """Get the size of the grating."""
        return GratingSize(self._width, self._height)

    @property
    def raw_pixels(self) -> np.ndarray:
        """Read-only flat RGBA view of length width * height * 4."""
        view = self._pixels.reshape(-1)
        view.flags.writeable = False
        return view

    @property
    def pixels(self) -> List[PixelEntry]:
        """RGBA pixels with their coordinates, in row-major order."""
        return [
            PixelEntry(x, y, Pixel(*(int(c) for c in self._pixels[y, x])))
            for y in range(self._height)
            for x in range(self._width)
        ]

    def to_array(self) -> np.ndarray:
        """Copy of the raster as an (H, W, 4) uint8 array."""
        return self._pixels.copy()

    def to_image_data(self) -> ImageData:
        """Copy of the raster as an `ImageData` for the image encoder."""
        return ImageData(self._width, self._height, self._pixels.reshape(-1).copy())

    # =========================================================================
    # Pixel Access
    # =========================================================================

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Get the RGBA pixel at (x, y).

        Raises:
            OutOfBoundsError: If (x, y) is outside the grating
        """
        x = _as_coordinate(x, self._width, 'pixel_x')
        y = _as_coordinate(y, self._height, 'pixel_y')
        return Pixel(*(int(c) for c in self._pixels[y, x]))

    def set_pixel(self, x: int, y: int, pixel: Union[Pixel, tuple]) -> None:
        """Set the RGBA pixel at (x, y). Channels are clamped to [0, 255].

        Raises:
            OutOfBoundsError: If (x, y) is outside the grating
        """
        x = _as_coordinate(x, self._width, 'pixel_x')
        y = _as_coordinate(y, self._height, 'pixel_y')
        if not isinstance(pixel, Pixel):
            pixel = Pixel(*pixel)
        self._pixels[y, x] = [clamp_channel(c) for c in pixel.as_tuple()]

    def get_pixel_mono(self, x: int, y: int, corrected: Optional[bool] = None) -> int:
        """Get the pixel at (x, y) as a monochromatic (luminance) value.

        Gray pixels return their common channel value. Colored pixels are
        reduced with the historical weights 0.2126 r + 0.7152 g + 0.0722 g,
        or with 0.2126 r + 0.7152 g + 0.0722 b when `corrected` is set.

        Args:
            x: Pixel column
            y: Pixel row
            corrected: Use the blue channel for the last weight. Defaults to
                `config.corrected_luminance`.

        Raises:
            OutOfBoundsError: If (x, y) is outside the grating
            NotMonochromeError: If the pixel alpha is not 255
        """
        r, g, b, alpha = self.get_pixel(x, y).as_tuple()
        if alpha != OPAQUE:
            raise NotMonochromeError(
                f"mono only available if pixel_alpha is {OPAQUE}, got {alpha}",
                field='pixel_alpha',
                details={'x': x, 'y': y}
            )
        if r == g == b:
            return r

        if corrected is None:
            corrected = config.corrected_luminance
        wr, wg, wb = LUMA_WEIGHTS
        last = b if corrected else g
        return round_half_up(wr * r + wg * g + wb * last)

    def set_pixel_mono(self, x: int, y: int, brightness: float) -> None:
        """Set the pixel at (x, y) to an opaque gray of the given brightness."""
        self.set_pixel(x, y, Pixel.mono(brightness))

    # =========================================================================
    # Algebra
    # =========================================================================

    def _check_operands(self, gratings) -> List['Grating']:
        operands = list(gratings)
        for index, other in enumerate(operands):
            if not isinstance(other, Grating):
                raise TypeError(f"operand {index} is {type(other).__name__}, expected Grating")
            if other.size != self.size:
                raise SizeMismatchError(
                    f"{other.width}x{other.height} must be equal to {self._width}x{self._height}",
                    field=f'gratings[{index}]',
                    details={'expected': list(self.size), 'actual': list(other.size)}
                )
        return operands

    def _fold(self, gratings, operation: Callable[[np.ndarray, np.ndarray], np.ndarray]) -> 'Grating':
        operands = self._check_operands(gratings)
        result = self._pixels.astype(np.int64)
        for other in operands:
            result = operation(result, other._pixels.astype(np.int64))
        return Grating._wrap(result.astype(np.uint8))

    def add(self, *gratings: 'Grating') -> 'Grating':
        """Pixel per pixel addition modulo 256. Source gratings are left intact."""
        return self._fold(gratings, lambda a, b: (a + b) % (CHANNEL_MAX + 1))

    def subtract(self, *gratings: 'Grating') -> 'Grating':
        """Pixel per pixel subtraction modulo 256. Source gratings are left intact."""
        return self._fold(gratings, lambda a, b: (a - b) % (CHANNEL_MAX + 1))

    def multiply(self, *gratings: 'Grating') -> 'Grating':
        """Pixel per pixel multiplication scaled to [0, 255] (a * b / 255).

        Source gratings are left intact.
        """
        return self._fold(gratings, _scaled_multiply)

    def divide(self, *gratings: 'Grating') -> 'Grating':
        """Pixel per pixel division scaled to [0, 255] (255 * a / b).

        Results saturate at 255, including division by zero.
        Source gratings are left intact.
        """
        return self._fold(gratings, _scaled_divide)

    def invert(self) -> 'Grating':
        """New grating where each channel is 255 - value."""
        return Grating._wrap((CHANNEL_MAX - self._pixels).astype(np.uint8))

    def oppose(self) -> 'Grating':
        """New grating where each channel is 255 / value (255 where value is 0)."""
        values = self._pixels.astype(np.int64)
        return Grating._wrap(_scaled_divide(np.full_like(values, 1), values).astype(np.uint8))

    # =========================================================================
    # Copy and Mapping
    # =========================================================================

    def clone(self) -> 'Grating':
        """New grating with the same size and a copy of the pixels."""
        return Grating._wrap(self._pixels.copy())

    def map_raw_pixels(self, map_fn: Callable[[int], float]) -> 'Grating':
        """Clone the grating, replacing each channel byte with `map_fn(value)`.

        Results are clamped to [0, 255].
        """
        flat = self._pixels.reshape(-1)
        mapped = np.fromiter(
            (clamp_channel(map_fn(int(value))) for value in flat),
            dtype=np.uint8,
            count=flat.size
        )
        return Grating._wrap(mapped.reshape(self._pixels.shape))

    def map_pixels(
        self,
        map_fn: Callable[[PixelEntry], Union[PixelEntry, Pixel]]
    ) -> 'Grating':
        """Build a new grating by mapping every pixel entry.

        `map_fn` receives a `PixelEntry(x, y, pixel)` and returns either a
        `PixelEntry` (written at its own coordinates) or a `Pixel` (written in
        place). Pixels that nothing maps onto stay blank.

        Raises:
            OutOfBoundsError: If a mapped coordinate is outside the grating
        """
        result = Grating(self._width, self._height)
        for entry in self.pixels:
            mapped = map_fn(entry)
            if isinstance(mapped, Pixel):
                result.set_pixel(entry.x, entry.y, mapped)
            else:
                result.set_pixel(mapped.x, mapped.y, mapped.pixel)
        return result

    # =========================================================================
    # Dunder
    # =========================================================================

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grating):
            return NotImplemented
        return self.size == other.size and np.array_equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Grating(width={self._width}, height={self._height})"


def _scaled_multiply(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.floor(a * b / CHANNEL_MAX + 0.5).astype(np.int64)


def _scaled_divide(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    with np.errstate(divide='ignore', invalid='ignore'):
        quotient = np.floor(CHANNEL_MAX * a / b + 0.5)
    quotient = np.where(b == 0, CHANNEL_MAX, np.minimum(quotient, CHANNEL_MAX))
    return quotient.astype(np.int64)
