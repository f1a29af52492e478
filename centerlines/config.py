"""
Pipeline configuration
"""

__all__ = ['PipelineConfig', 'load_config', 'restore_defaults']

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from centerlines.exceptions import ConfigurationError


class PipelineConfig(BaseModel):
    """
    Options for converting raw section points into a smoothed, evenly spaced
    centerline. Defaults are the factory settings.

    Fields may be given either by name (max_segment_length) or by their
    camelCase alias (maxSegmentLength).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='forbid')

    max_segment_length: float = Field(800., gt=0, alias='maxSegmentLength')
    densify_spacing: float = Field(600., gt=0, alias='densifySpacing')
    output_spacing: float = Field(25., gt=0, alias='outputSpacing')
    spline_detail: int = Field(60, ge=1, alias='splineDetail')
    curve_arc_length: float = Field(100., gt=0, alias='curveArcLength')
    straight_line_threshold: float = Field(5000., gt=0, alias='straightLineThreshold')
    find_curves: bool = Field(False, alias='findCurves')

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise ConfigurationError(f'Invalid pipeline configuration: {exc}') from exc

    @model_validator(mode='after')
    def _densify_spacing_closes_gaps(self):
        if self.densify_spacing > 2 * self.max_segment_length:
            raise ValueError('densify_spacing must not exceed twice max_segment_length')
        return self


def load_config(options: Mapping[str, Any]) -> PipelineConfig:
    """
    Build a PipelineConfig from a mapping of options, e.g. parsed from JSON.

    Args:
        options:
            Option names (or camelCase aliases) mapped to values. Options
            that are missing take their defaults.

    Returns:
        PipelineConfig

    Raises:
        ConfigurationError: if any option is unknown or invalid
    """
    return PipelineConfig(**options)


def restore_defaults() -> PipelineConfig:
    """The factory settings"""
    return PipelineConfig()
