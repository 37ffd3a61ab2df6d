"""
Configuration for grating generation and composition.

Module constants describe the RGBA buffer layout; `AppConfig` holds the
runtime settings shared by the pipeline and the CLI.
"""

import os
from dataclasses import dataclass, field
from typing import Tuple


# ============================================================================
# Buffer Layout
# ============================================================================

CHANNELS: int = 4           # r, g, b, alpha
CHANNEL_MAX: int = 255      # unsigned 8-bit channels
OPAQUE: int = CHANNEL_MAX

# Rec. 709 luminance weights for (r, g, b).
LUMA_WEIGHTS: Tuple[float, float, float] = (0.2126, 0.7152, 0.0722)


@dataclass
class AppConfig:
    """Application configuration.

    Attributes:
        max_workers: Thread pool size used to decode image/DOE layers
        default_log_level: Log level used by the CLI when none is given
        corrected_luminance: Use (r, g, b) weights for mono reads by default
        alpha_formats: Pillow formats that keep the alpha channel on save
    """
    max_workers: int = 4
    default_log_level: str = "INFO"
    corrected_luminance: bool = False
    alpha_formats: Tuple[str, ...] = field(
        default_factory=lambda: ("PNG", "BMP", "TIFF", "WEBP", "GIF")
    )

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Build configuration from `SLM_GRATING_*` environment variables."""
        cfg = cls()
        workers = os.environ.get('SLM_GRATING_WORKERS', '')
        if workers:
            cfg.max_workers = max(1, int(workers))
        level = os.environ.get('SLM_GRATING_LOG_LEVEL', '')
        if level:
            cfg.default_log_level = level.upper()
        return cfg


# Global config instance
config = AppConfig.from_env()
