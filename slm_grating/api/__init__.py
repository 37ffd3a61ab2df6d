"""Error types and request schemas."""

from .errors import (
    ErrorCode,
    GratingError,
    InvalidDimensionError,
    OutOfBoundsError,
    DimensionMismatchError,
    SizeMismatchError,
    BlazeTooWideError,
    NotMonochromeError,
    InvalidParameterError,
    PatternNotImplementedError,
)
from .request import BlazeSpec, TransformSpec, PatternSpec, LayerSet, CompositionRequest, load_job_file

__all__ = [
    "ErrorCode",
    "GratingError",
    "InvalidDimensionError",
    "OutOfBoundsError",
    "DimensionMismatchError",
    "SizeMismatchError",
    "BlazeTooWideError",
    "NotMonochromeError",
    "InvalidParameterError",
    "PatternNotImplementedError",
    "BlazeSpec",
    "TransformSpec",
    "PatternSpec",
    "LayerSet",
    "CompositionRequest",
    "load_job_file",
]
