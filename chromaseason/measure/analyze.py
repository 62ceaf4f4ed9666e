# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""
Main pigment analysis API.

This is the primary entry point of the measurement core: sampled colors
in, per-field positions and composite scores out.
"""

from __future__ import annotations

from typing import Mapping, Optional, Union

from loguru import logger

from chromaseason.measure.aggregate import (
    ColorInput,
    calculate_weighted_average,
    color_items,
    depth_details,
    simple_average,
)
from chromaseason.measure.calibration import PositionConfig
from chromaseason.measure.classify import get_label_category
from chromaseason.measure.numeric import clamp
from chromaseason.measure.position import (
    calculate_intensity_position,
    calculate_temperature_position,
)
from chromaseason.schema import (
    CompositeScores,
    Dimension,
    FieldPosition,
    PigmentAnalysis,
    coerce_dimension,
)


Overrides = Mapping[Union[Dimension, str], Optional[float]]


def analyze(
    colors: ColorInput,
    *,
    overrides: Optional[Overrides] = None,
    config: Optional[PositionConfig] = None,
) -> PigmentAnalysis:
    """
    Compute a complete pigment analysis from sampled colors.

    Produces:
    - Temperature and intensity positions for every sampled field
    - The depth composite (average lightness × lightness range)
    - Composite scores per dimension (extremity-weighted averages)
    - Plain averages of the positions, for comparison

    Args:
        colors: Mapping of FieldId (or its string value) to hex, or a
            sequence of SampledColor. Malformed hex reads as black; unknown
            fields use the default calibration windows.
        overrides: Optional direct 0-100 score per dimension. An override
            replaces the computed composite (values are clamped to 0-100).
        config: Position mapper settings (defaults if None)

    Returns:
        PigmentAnalysis. Scores are None for dimensions without inputs
        and without overrides.

    Example:
        >>> from chromaseason import analyze
        >>> a = analyze({"testa": "#E0B48C", "iris": "#6B4423"})
        >>> a.scores.temperatura      # extremity-weighted, 0-100
        >>> a.temperature[0].category  # e.g. "Extremo Quente"
    """
    items = color_items(colors)

    temperature = tuple(
        _field_position(key, hex_color, calculate_temperature_position(hex_color, key, config),
                        Dimension.TEMPERATURE)
        for key, hex_color in items
    )
    intensity = tuple(
        _field_position(key, hex_color, calculate_intensity_position(hex_color, key, config),
                        Dimension.INTENSITY)
        for key, hex_color in items
    )
    depth = depth_details(dict(items))
    depth_value = depth.value if depth else None

    computed = CompositeScores(
        temperatura=calculate_weighted_average(p.value for p in temperature),
        intensidade=calculate_weighted_average(p.value for p in intensity),
        profundidade=depth_value,
    )
    averages = CompositeScores(
        temperatura=simple_average(p.value for p in temperature),
        intensidade=simple_average(p.value for p in intensity),
        profundidade=depth_value,
    )

    return PigmentAnalysis(
        temperature=temperature,
        intensity=intensity,
        depth=depth,
        scores=apply_overrides(computed, overrides),
        averages=averages,
    )


def _field_position(key: str, hex_color: str, value: float, dimension: Dimension) -> FieldPosition:
    return FieldPosition(
        field=key,
        hex=hex_color,
        value=value,
        category=get_label_category(value, dimension),
    )


def apply_overrides(scores: CompositeScores, overrides: Optional[Overrides]) -> CompositeScores:
    """
    Replace computed scores with caller-provided ones.

    Unknown dimension keys and None values are ignored.
    """
    if not overrides:
        return scores

    values = scores.to_dict()
    for key, value in overrides.items():
        dimension = coerce_dimension(key)
        if dimension is None or value is None:
            continue
        logger.debug(f"Override {dimension.value}: {values[dimension.value]} -> {value}")
        values[dimension.value] = clamp(float(value))

    return CompositeScores(**values)
