# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""
Schema definitions for season analysis.

All records in this module are immutable (frozen dataclasses) and all
keys are closed enumerations. Derived records are recomputed from their
inputs on every change; nothing is cached.
"""

from chromaseason.schema.season import (
    SEASON_VARIANTS,
    CalibrationWindow,
    ColorProperties,
    CompositeScores,
    Depth,
    DepthDetails,
    Dimension,
    DimensionValue,
    FieldId,
    FieldPosition,
    Intensity,
    IntensityDetails,
    LightnessExtremes,
    PigmentAnalysis,
    SampledColor,
    Season,
    SeasonResult,
    Side,
    SliderSeason,
    Temperature,
    TemperatureDetails,
    Variant,
    coerce_dimension,
    coerce_enum,
    coerce_field,
    coerce_season,
    coerce_variant,
    color_season_name,
)

__all__ = [
    # Enumerations
    "FieldId",
    "Dimension",
    "Side",
    "DimensionValue",
    "Temperature",
    "Intensity",
    "Depth",
    "Season",
    "Variant",
    "SEASON_VARIANTS",
    "color_season_name",
    # Coercion
    "coerce_field",
    "coerce_dimension",
    "coerce_enum",
    "coerce_season",
    "coerce_variant",
    # Inputs
    "SampledColor",
    # Measurements
    "ColorProperties",
    "CalibrationWindow",
    "TemperatureDetails",
    "IntensityDetails",
    "DepthDetails",
    "LightnessExtremes",
    "FieldPosition",
    "CompositeScores",
    "PigmentAnalysis",
    # Results
    "SeasonResult",
    "SliderSeason",
]
