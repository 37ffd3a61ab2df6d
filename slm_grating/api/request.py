"""
Composition request data structures.

A request describes the output raster and the ordered layers to merge. It can
be built from CLI arguments or loaded from a YAML job file:

    width: 512
    height: 512
    output: out/grating.png
    layers:
      images: [signal.png]
      does: [doe.bmp]
      patterns:
        - name: circle
          params: {radius: 40, offset_x: 256, offset_y: 256}
      blazes:
        - {count: 25, max: 255, tilt: 0.0}
        - "10,128"
"""

from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from .errors import InvalidParameterError
from ..core.blaze import BlazeConfig
from ..patterns.base import Pattern
from ..patterns.factory import create_pattern
from ..patterns.transform import PatternTransformer


class BlazeSpec(BaseModel):
    """Blaze layer descriptor."""
    count: int = Field(..., description="Number of periods across the width")
    max: int = Field(255, description="Ramp brightness scale (0-255)")
    tilt: float = Field(0.0, description="Ramp rotation in radians")

    @classmethod
    def from_string(cls, text: str) -> 'BlazeSpec':
        """Parse a "count,max[,tilt]" CLI argument.

        Raises:
            InvalidParameterError: If the text does not hold 2 or 3 numbers
        """
        parts = [part.strip() for part in text.split(',')]
        if len(parts) not in (2, 3):
            raise InvalidParameterError(
                f"expected 'count,max[,tilt]', got {text!r}", field='blaze'
            )
        try:
            count, max_value = int(parts[0]), int(parts[1])
            tilt = float(parts[2]) if len(parts) == 3 else 0.0
        except ValueError as exc:
            raise InvalidParameterError(f"{text!r}: {exc}", field='blaze') from exc
        return cls(count=count, max=max_value, tilt=tilt)

    def to_config(self) -> BlazeConfig:
        return BlazeConfig(max=self.max, count=self.count, tilt=self.tilt)


class TransformSpec(BaseModel):
    """Single coordinate remap applied to a pattern."""
    kind: Literal["translate", "rotate", "scale"]
    args: List[float] = Field(..., description="[dx, dy], [angle] or [sx, sy]")

    @field_validator('args')
    @classmethod
    def validate_args(cls, v: List[float], info: ValidationInfo) -> List[float]:
        expected = 1 if info.data.get('kind') == 'rotate' else 2
        if len(v) != expected:
            raise ValueError(f"{info.data.get('kind')} takes {expected} argument(s), got {len(v)}")
        return v

    def apply(self, transformer: PatternTransformer) -> PatternTransformer:
        return getattr(transformer, self.kind)(*self.args)


class PatternSpec(BaseModel):
    """Built-in pattern layer descriptor."""
    name: str = Field(..., description="Pattern name (circle, rect, random, hermite_gauss)")
    params: Dict[str, Any] = Field(default_factory=dict)
    transforms: List[TransformSpec] = Field(default_factory=list)

    def build(self) -> Pattern:
        """Create the pattern and wrap it in its coordinate transforms."""
        pattern = create_pattern(self.name, **self.params)
        if not self.transforms:
            return pattern
        transformer = PatternTransformer()
        for spec in self.transforms:
            transformer = spec.apply(transformer)
        return transformer.transform(pattern)


class LayerSet(BaseModel):
    """Ordered layer descriptors, grouped by kind.

    Patterns given as strings are kept as text expressions; blazes given as
    strings are parsed as "count,max[,tilt]".
    """
    images: List[str] = Field(default_factory=list)
    does: List[str] = Field(default_factory=list)
    patterns: List[Union[PatternSpec, str]] = Field(default_factory=list)
    blazes: List[BlazeSpec] = Field(default_factory=list)

    @field_validator('blazes', mode='before')
    @classmethod
    def parse_blaze_strings(cls, v: Any) -> Any:
        if v is None:
            return []
        return [BlazeSpec.from_string(item) if isinstance(item, str) else item for item in v]

    @property
    def count(self) -> int:
        return len(self.images) + len(self.does) + len(self.patterns) + len(self.blazes)


class CompositionRequest(BaseModel):
    """Complete composition request.

    Attributes:
        width: Output raster width
        height: Output raster height
        output: Output image path (None to skip writing)
        layers: Layer descriptors
    """
    width: int
    height: int
    output: Optional[str] = None
    layers: LayerSet = Field(default_factory=LayerSet)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'CompositionRequest':
        """Load and validate a YAML job file."""
        return cls.model_validate(load_job_file(path))

    def to_dict(self) -> Dict[str, Any]:
        """Convert request to dictionary for logging/serialization."""
        return self.model_dump()


def load_job_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a YAML job file into a plain dictionary."""
    with open(path, encoding='utf-8') as file:
        try:
            data = yaml.safe_load(file) or {}
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            raise InvalidParameterError(f"{path}: {exc}", field='config') from exc
    if not isinstance(data, dict):
        raise InvalidParameterError(
            f"job file must contain a mapping, got {type(data).__name__}", field='config'
        )
    return data
