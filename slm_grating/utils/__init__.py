"""Image I/O adapters and logging setup."""

from .image_io import read_image_data, write_image_data
from .logging_config import setup_logging

__all__ = [
    "read_image_data",
    "write_image_data",
    "setup_logging",
]
