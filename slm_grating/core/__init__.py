"""Core grating model: pixels, gratings and blaze generation."""

from .config import AppConfig, config, CHANNELS, CHANNEL_MAX, OPAQUE, LUMA_WEIGHTS
from .pixel import Pixel, PixelEntry, ImageData, Pattern, PatternValue, clamp_channel
from .grating import Grating, GratingSize
from .blaze import BlazeConfig, blaze_grating

__all__ = [
    "AppConfig",
    "config",
    "CHANNELS",
    "CHANNEL_MAX",
    "OPAQUE",
    "LUMA_WEIGHTS",
    "Pixel",
    "PixelEntry",
    "ImageData",
    "Pattern",
    "PatternValue",
    "clamp_channel",
    "Grating",
    "GratingSize",
    "BlazeConfig",
    "blaze_grating",
]
