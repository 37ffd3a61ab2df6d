"""Hermite-Gauss kinoform pattern.

Reference: https://doi.org/10.1117/12.2187325
"""

import numpy as np
from scipy.special import eval_hermite

from .base import Pattern


def hermite_gauss_kinoform(p: int, q: int, waist: float) -> Pattern:
    """Generate a pattern from the Hermite-Gauss kinoform.

    Computes H_p(s x) * H_q(s y) * exp(-(x^2 + y^2) / waist^2) with
    s = sqrt(2) / waist and H the physicists' Hermite polynomials.
    Coordinates are used as given, so translate the pattern to center it.

    Args:
        p: Hermite polynomial degree for the x coordinate
        q: Hermite polynomial degree for the y coordinate
        waist: Beam waist on the camera, in pixels

    Returns:
        Deterministic pattern, also usable on numpy coordinate grids

    Example:
        waist = 41  # beam size of 41px on the camera
        hg = PatternTransformer().translate(-128, -128).transform(
            hermite_gauss_kinoform(4, 4, waist))
        grating = Grating.from_pattern(256, 256, hg)
    """
    if waist == 0:
        raise ValueError("waist must be non-zero")

    prefactor = np.sqrt(2) / waist
    waist2 = waist ** 2

    def pattern(x, y):
        return (
            eval_hermite(p, prefactor * x)
            * eval_hermite(q, prefactor * y)
            * np.exp(-(x ** 2 + y ** 2) / waist2)
        )

    return pattern
