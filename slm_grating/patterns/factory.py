"""Factory functions for creating patterns by name."""

from typing import Any, Callable, Dict

from .base import Pattern
from .common import circle, rect, random
from .kinoform import hermite_gauss_kinoform
from ..api.errors import PatternNotImplementedError


PATTERNS: Dict[str, Callable[..., Pattern]] = {
    'circle': circle,
    'rect': rect,
    'random': random,
    'hermite_gauss': hermite_gauss_kinoform,
}


def create_pattern(name: str, **params: Any) -> Pattern:
    """Create a built-in pattern from its name and keyword parameters.

    Args:
        name: Pattern name, one of:
            - 'circle' (radius, offset_x, offset_y)
            - 'rect' (x_min, x_max, y_min, y_max, invert)
            - 'random' (min, max)
            - 'hermite_gauss' (p, q, waist)
        **params: Parameters forwarded to the pattern function

    Returns:
        Pattern instance

    Raises:
        ValueError: If the name is unknown or the parameters do not fit
    """
    factory = PATTERNS.get(name.lower())

    if factory is None:
        raise ValueError(f"Unknown pattern: {name}. "
                         f"Supported patterns: {', '.join(sorted(PATTERNS))}")

    try:
        return factory(**params)
    except TypeError as exc:
        raise ValueError(f"Invalid parameters for pattern '{name}': {exc}") from exc


def parse_pattern_expression(expression: str) -> Pattern:
    """Parse a pattern given as text (eg: "(x, y) => x + y" or "$common:rect(...)").

    Raises:
        PatternNotImplementedError: Always, text expressions are not supported
    """
    raise PatternNotImplementedError(
        f"pattern expressions are not supported: {expression!r}",
        field='pattern',
        details={'expression': expression}
    )
