"""Pattern functions and coordinate transforms."""

from .base import Pattern, PatternTransform
from .common import circle, rect, random
from .kinoform import hermite_gauss_kinoform
from .transform import PatternTransformer
from .factory import PATTERNS, create_pattern, parse_pattern_expression

__all__ = [
    "Pattern",
    "PatternTransform",
    "circle",
    "rect",
    "random",
    "hermite_gauss_kinoform",
    "PatternTransformer",
    "PATTERNS",
    "create_pattern",
    "parse_pattern_expression",
]
