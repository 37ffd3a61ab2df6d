"""
Test composition request schemas and YAML job files.
"""

import pytest
from pydantic import ValidationError

from slm_grating import (
    BlazeConfig,
    BlazeSpec,
    CompositionRequest,
    LayerSet,
    PatternSpec,
    TransformSpec,
    InvalidParameterError,
)
from slm_grating.api.request import load_job_file


JOB_YAML = """
width: 16
height: 8
output: out/grating.png
layers:
  images: [signal.png]
  patterns:
    - name: circle
      params: {radius: 3, offset_x: 0, offset_y: 0}
      transforms:
        - {kind: translate, args: [-8, -4]}
    - "(x, y) => x"
  blazes:
    - {count: 4, max: 128}
    - "2,255,0.5"
"""


def test_blaze_spec_from_string():
    spec = BlazeSpec.from_string("25,255")
    assert (spec.count, spec.max, spec.tilt) == (25, 255, 0.0)

    spec = BlazeSpec.from_string(" 10, 128, -0.5 ")
    assert (spec.count, spec.max, spec.tilt) == (10, 128, -0.5)


@pytest.mark.parametrize("text", ["5", "1,2,3,4", "a,255", "1.5,255"])
def test_blaze_spec_from_bad_string(text):
    with pytest.raises(InvalidParameterError) as excinfo:
        BlazeSpec.from_string(text)
    assert excinfo.value.field == 'blaze'


def test_blaze_spec_to_config():
    assert BlazeSpec(count=3, max=9, tilt=0.25).to_config() == BlazeConfig(max=9, count=3, tilt=0.25)


def test_transform_spec_checks_argument_count():
    TransformSpec(kind='rotate', args=[0.5])
    with pytest.raises(ValidationError):
        TransformSpec(kind='rotate', args=[0.5, 1.0])
    with pytest.raises(ValidationError):
        TransformSpec(kind='scale', args=[2.0])
    with pytest.raises(ValidationError):
        TransformSpec(kind='shear', args=[1.0, 1.0])


def test_pattern_spec_build_applies_transforms():
    spec = PatternSpec(
        name='circle',
        params={'radius': 1, 'offset_x': 0, 'offset_y': 0},
        transforms=[TransformSpec(kind='translate', args=[-5, -5])],
    )
    pattern = spec.build()
    assert pattern(5, 5) == 0
    assert pattern(0, 0) == 255


def test_layer_set_parses_blaze_strings():
    layers = LayerSet(blazes=["3,100", {'count': 2}])
    assert layers.blazes == [BlazeSpec(count=3, max=100), BlazeSpec(count=2, max=255)]
    assert layers.count == 2


def test_layer_set_rejects_bad_blaze_string():
    with pytest.raises(ValidationError):
        LayerSet(blazes=["not a blaze"])


def test_request_from_yaml(tmp_path):
    job = tmp_path / "job.yaml"
    job.write_text(JOB_YAML, encoding='utf-8')

    request = CompositionRequest.from_yaml(job)

    assert (request.width, request.height) == (16, 8)
    assert request.output == "out/grating.png"
    assert request.layers.images == ["signal.png"]
    assert request.layers.does == []
    assert isinstance(request.layers.patterns[0], PatternSpec)
    assert request.layers.patterns[0].transforms[0].args == [-8, -4]
    assert request.layers.patterns[1] == "(x, y) => x"
    assert request.layers.blazes[1] == BlazeSpec(count=2, max=255, tilt=0.5)
    assert request.layers.count == 5


def test_request_defaults():
    request = CompositionRequest(width=4, height=4)
    assert request.output is None
    assert request.layers.count == 0
    assert request.to_dict()['layers']['images'] == []


def test_job_file_must_be_mapping(tmp_path):
    job = tmp_path / "job.yaml"
    job.write_text("- 1\n- 2\n", encoding='utf-8')

    with pytest.raises(InvalidParameterError) as excinfo:
        load_job_file(job)
    assert excinfo.value.field == 'config'


def test_empty_job_file(tmp_path):
    job = tmp_path / "job.yaml"
    job.write_text("", encoding='utf-8')
    assert load_job_file(job) == {}


def test_malformed_job_file(tmp_path):
    job = tmp_path / "job.yaml"
    job.write_text("width: [1, 2\n", encoding='utf-8')

    with pytest.raises(InvalidParameterError):
        load_job_file(job)


def test_job_file_with_bad_encoding(tmp_path):
    job = tmp_path / "job.yaml"
    job.write_bytes(b"\xff\xfe\x00width")

    with pytest.raises(InvalidParameterError) as excinfo:
        load_job_file(job)
    assert excinfo.value.field == 'config'
