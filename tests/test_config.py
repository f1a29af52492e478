import pytest
from pydantic import ValidationError

from centerlines import ConfigurationError, PipelineConfig, load_config, restore_defaults


def test_defaults():
    config = PipelineConfig()
    assert config.max_segment_length == 800.
    assert config.densify_spacing == 600.
    assert config.output_spacing == 25.
    assert config.spline_detail == 60
    assert config.curve_arc_length == 100.
    assert config.straight_line_threshold == 5000.
    assert config.find_curves is False

    assert restore_defaults() == config


def test_aliases():
    by_alias = PipelineConfig(maxSegmentLength=1000, outputSpacing=10, findCurves=True)
    by_name = PipelineConfig(max_segment_length=1000, output_spacing=10, find_curves=True)
    assert by_alias == by_name
    assert by_alias.max_segment_length == 1000.
    assert by_alias.model_dump(by_alias=True)['outputSpacing'] == 10.


def test_frozen():
    config = PipelineConfig()
    with pytest.raises(ValidationError):
        config.output_spacing = 10.


def test_load_config():
    config = load_config({'outputSpacing': 50, 'spline_detail': 10})
    assert config.output_spacing == 50.
    assert config.spline_detail == 10
    assert config.max_segment_length == 800.

    assert load_config({}) == PipelineConfig()


@pytest.mark.parametrize('options', [
    {'outputSpacing': 0},
    {'max_segment_length': -1},
    {'splineDetail': 0},
    {'curveArcLength': 'long'},
    {'maxSegmentLength': 100, 'densifySpacing': 250},
    {'colour': 'red'},
])
def test_load_config_invalid(options):
    with pytest.raises(ConfigurationError):
        load_config(options)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        load_config({'outputSpacing': -5})


def test_direct_construction_raises_configuration_error():
    with pytest.raises(ConfigurationError):
        PipelineConfig(output_spacing=0)

    with pytest.raises(ConfigurationError):
        PipelineConfig(maxSegmentLength=100, densifySpacing=250)

    with pytest.raises(ConfigurationError):
        PipelineConfig(colour='red')
