"""
Test the blaze grating generator.

Tests:
1. Parameter validation (count, max, width)
2. Ramp values for an axis-aligned blaze
3. Output shape and opacity
"""

import math

import numpy as np
import pytest

from slm_grating import (
    BlazeConfig,
    GratingSize,
    blaze_grating,
    BlazeTooWideError,
    InvalidDimensionError,
    InvalidParameterError,
)


# tilt of pi/4 cancels the built-in rotation, so ramps follow x and y
AXIS_ALIGNED = math.pi / 4


def test_count_larger_than_width():
    with pytest.raises(BlazeTooWideError) as excinfo:
        blaze_grating(10, 10, BlazeConfig(max=255, count=11))
    assert excinfo.value.field == 'blaze_count'


def test_count_equal_to_width_is_allowed():
    grating = blaze_grating(10, 4, BlazeConfig(max=255, count=10))
    assert grating.size == GratingSize(10, 4)


@pytest.mark.parametrize("count", [0, -1, 2.5])
def test_invalid_count(count):
    with pytest.raises(InvalidDimensionError):
        blaze_grating(10, 10, BlazeConfig(max=255, count=count))


@pytest.mark.parametrize("max_value", [-1, 256, float('nan')])
def test_invalid_max(max_value):
    with pytest.raises(InvalidParameterError):
        blaze_grating(10, 10, BlazeConfig(max=max_value, count=2))


def test_blaze_is_opaque_gray():
    grating = blaze_grating(20, 10, BlazeConfig(max=200, count=4, tilt=0.3))
    pixels = grating.to_array()

    assert grating.size == GratingSize(20, 10)
    assert (pixels[..., 3] == 255).all()
    assert (pixels[..., 0] == pixels[..., 1]).all()
    assert (pixels[..., 1] == pixels[..., 2]).all()


def test_axis_aligned_ramp_values():
    # period = 2 * 10 / 2 = 10, gain = 0.5 * 2 * 255 / 255 = 1
    grating = blaze_grating(10, 12, BlazeConfig(max=255, count=2, tilt=AXIS_ALIGNED))

    assert grating.get_pixel_mono(0, 0) == 0
    assert grating.get_pixel_mono(3, 4) == 7
    assert grating.get_pixel_mono(9, 0) == 9
    assert grating.get_pixel_mono(2, 11) == 3


def test_default_tilt_rotates_by_quarter_pi():
    # rotation pi/4: x' = (x - y) / sqrt(2), y' = (x + y) / sqrt(2); period 10, gain 1
    grating = blaze_grating(10, 10, BlazeConfig(max=255, count=2))

    # (5, 0): 3.54 + 3.54
    assert grating.get_pixel_mono(5, 0) == 7
    # (0, 5): (-3.54 mod 10) + 3.54
    assert grating.get_pixel_mono(0, 5) == 10


def test_tilt_is_subtracted_from_quarter_pi():
    # tilt pi/2 gives rotation -pi/4: x' = (x + y) / sqrt(2), y' = (y - x) / sqrt(2)
    grating = blaze_grating(10, 10, BlazeConfig(max=255, count=2, tilt=math.pi / 2))

    assert grating.get_pixel_mono(5, 0) == 10
    assert grating.get_pixel_mono(0, 5) == 7


def test_ramp_gain_follows_max():
    # period = 2 * 8 / 4 = 4, gain = 0.5 * 4 * 51 / 255 = 0.4
    grating = blaze_grating(8, 8, BlazeConfig(max=51, count=4, tilt=AXIS_ALIGNED))
    assert grating.get_pixel_mono(3, 3) == 2  # 0.4 * 3 + 0.4 * 3 = 2.4
    assert grating.get_pixel_mono(4, 0) == 0


def test_zero_max_is_blank_ramp():
    grating = blaze_grating(16, 16, BlazeConfig(max=0, count=8, tilt=0.2))
    assert not grating.to_array()[..., :3].any()


def test_origin_is_dark_for_any_tilt():
    for tilt in (0.0, 0.5, -1.2):
        grating = blaze_grating(32, 32, BlazeConfig(max=255, count=4, tilt=tilt))
        assert grating.get_pixel_mono(0, 0) == 0


def test_blaze_is_deterministic():
    config = BlazeConfig(max=180, count=7, tilt=0.1)
    first = blaze_grating(64, 48, config)
    second = blaze_grating(64, 48, config)
    assert first == second
    assert np.unique(first.to_array()[..., 0]).size > 1
