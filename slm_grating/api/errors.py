"""
Structured error types for grating construction and composition.

Every error carries a machine-readable code plus the offending field so it
can be reported by the CLI or serialized to JSON.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(Enum):
    """Error codes for validation failures."""
    # Dimension errors
    INVALID_DIMENSION = "INVALID_DIMENSION"
    DIMENSION_MISMATCH = "DIMENSION_MISMATCH"
    SIZE_MISMATCH = "SIZE_MISMATCH"

    # Pixel access errors
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    NOT_MONOCHROME = "NOT_MONOCHROME"

    # Layer errors
    BLAZE_TOO_WIDE = "BLAZE_TOO_WIDE"
    INVALID_PARAMETER = "INVALID_PARAMETER"
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"

    # File errors
    FILE_ERROR = "FILE_ERROR"


class GratingError(Exception):
    """Base class for all grating errors.

    Attributes:
        code: Error code enum value
        message: Human-readable error message
        field: Parameter field that caused the error (if applicable)
        details: Additional error details
    """
    code: ErrorCode = ErrorCode.INVALID_PARAMETER

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.field = field
        self.details = details

    def __str__(self) -> str:
        if self.field:
            return f'"{self.field}": {self.message}'
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            'code': self.code.value,
            'message': self.message,
            'severity': 'error',
        }
        if self.field:
            result['field'] = self.field
        if self.details:
            result['details'] = self.details
        return result


class InvalidDimensionError(GratingError, ValueError):
    """Width, height or count is not a finite non-negative integer."""
    code = ErrorCode.INVALID_DIMENSION


class OutOfBoundsError(GratingError, IndexError):
    """Pixel coordinate outside the grating extent."""
    code = ErrorCode.OUT_OF_BOUNDS


class DimensionMismatchError(GratingError, ValueError):
    """External buffer size disagrees with the requested width/height."""
    code = ErrorCode.DIMENSION_MISMATCH


class SizeMismatchError(GratingError, ValueError):
    """Operands of a binary grating operation differ in size."""
    code = ErrorCode.SIZE_MISMATCH


class BlazeTooWideError(GratingError, ValueError):
    """Blaze period count exceeds the grating width."""
    code = ErrorCode.BLAZE_TOO_WIDE


class NotMonochromeError(GratingError, ValueError):
    """Mono read on a pixel that is not fully opaque."""
    code = ErrorCode.NOT_MONOCHROME


class InvalidParameterError(GratingError, ValueError):
    """Layer parameter outside its allowed range."""
    code = ErrorCode.INVALID_PARAMETER


class PatternNotImplementedError(GratingError, NotImplementedError):
    """Pattern expressions given as strings are not supported."""
    code = ErrorCode.NOT_IMPLEMENTED
