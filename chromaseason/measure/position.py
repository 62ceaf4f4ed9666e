# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""
Measurement extraction and position mapping.

Each sampled color yields one raw measurement per dimension:

- Temperature: HSV hue (degrees)
- Intensity: HCL chroma
- Depth: HCL lightness (consumed directly by the depth composite)

Temperature and intensity measurements are remapped into the field's
calibration window, giving a 0-100 position. Temperature then loses up
to 40 points when the color is desaturated: less pigment reads cooler,
whatever the raw hue says.
"""

from __future__ import annotations

from typing import Optional

from chromaseason.measure.calibration import (
    DEFAULT_POSITION_CONFIG,
    PositionConfig,
    window_for,
)
from chromaseason.measure.colorspace import hex_to_hcl, hex_to_hsv
from chromaseason.measure.numeric import clamp, round2
from chromaseason.schema import (
    CalibrationWindow,
    Dimension,
    IntensityDetails,
    TemperatureDetails,
)


def extract_measurement(hex_color: str, dimension: Dimension) -> float:
    """
    Raw measurement of a color for one dimension.

    Returns HSV hue for temperature, HCL chroma for intensity and HCL
    lightness for depth, all at full precision.
    """
    if dimension is Dimension.TEMPERATURE:
        return hex_to_hsv(hex_color)[0]
    h, c, l = hex_to_hcl(hex_color)
    return c if dimension is Dimension.INTENSITY else l


def calculate_position(measurement: float, window: CalibrationWindow) -> float:
    """
    Remap a raw measurement into a calibration window as a 0-100 position.

    Linear windows clamp: below start → 0, above end → 100.

    Wrapping hue windows (start > end) are treated as a circular arc of
    length (360 - start) + end. A hue outside the arc clamps to whichever
    end of the arc is angularly closer.

    Returns:
        Position rounded to 2 decimals
    """
    start, end = window.start, window.end

    if not window.wraps:
        if measurement < start:
            return 0.0
        if measurement > end:
            return 100.0
        if end == start:
            return 100.0
        return round2((measurement - start) / (end - start) * 100)

    arc = (360 - start) + end
    if measurement >= start:
        offset = measurement - start
    elif measurement <= end:
        offset = (360 - start) + measurement
    else:
        past_end = measurement - end
        before_start = start - measurement
        offset = arc if past_end < before_start else 0.0

    return clamp(round2(offset / arc * 100))


def apply_saturation_influence(
    position: float,
    saturation: float,
    config: Optional[PositionConfig] = None,
) -> float:
    """
    Cool down a temperature position for desaturated colors.

    At or below the saturation threshold (30%), the position loses
    ((threshold - saturation) / threshold) * 40 points, floored at 0.
    Never applied to intensity or depth.
    """
    return max(0.0, position - _saturation_reduction(saturation, config))


def _saturation_reduction(saturation: float, config: Optional[PositionConfig]) -> float:
    cfg = config or DEFAULT_POSITION_CONFIG
    threshold = cfg.saturation_threshold
    if saturation > threshold:
        return 0.0
    return (threshold - saturation) / threshold * cfg.max_saturation_reduction


# =============================================================================
# Temperature
# =============================================================================


def temperature_details(
    hex_color: str,
    field,
    config: Optional[PositionConfig] = None,
) -> TemperatureDetails:
    """
    Step-by-step temperature position calculation for one field.

    Args:
        hex_color: Sampled color
        field: FieldId (or its string value); unknown fields use 0-360
        config: Position mapper settings (defaults if None)
    """
    hue, saturation, _ = hex_to_hsv(hex_color)
    window = window_for(field, Dimension.TEMPERATURE, config)

    remapped = calculate_position(hue, window)
    adjustment = round2(_saturation_reduction(saturation, config))
    final = round2(max(0.0, remapped - adjustment))

    return TemperatureDetails(
        actual_hue=round2(hue),
        hue_start=window.start,
        hue_end=window.end,
        remapped_value=remapped,
        saturation=round2(saturation),
        saturation_adjustment=adjustment,
        final_value=final,
    )


def calculate_temperature_position(
    hex_color: str,
    field,
    config: Optional[PositionConfig] = None,
) -> float:
    """Temperature position (0 = cool, 100 = warm) of a sampled color."""
    hue, saturation, _ = hex_to_hsv(hex_color)
    position = calculate_position(hue, window_for(field, Dimension.TEMPERATURE, config))
    return round2(apply_saturation_influence(position, saturation, config))


# =============================================================================
# Intensity
# =============================================================================


def intensity_details(
    hex_color: str,
    field,
    config: Optional[PositionConfig] = None,
) -> IntensityDetails:
    """Step-by-step intensity position calculation for one field."""
    chroma = hex_to_hcl(hex_color)[1]
    window = window_for(field, Dimension.INTENSITY, config)
    remapped = calculate_position(chroma, window)

    return IntensityDetails(
        actual_chroma=round2(chroma),
        chroma_start=window.start,
        chroma_end=window.end,
        remapped_value=remapped,
        final_value=remapped,
    )


def calculate_intensity_position(
    hex_color: str,
    field,
    config: Optional[PositionConfig] = None,
) -> float:
    """Intensity position (0 = soft, 100 = bright) of a sampled color."""
    chroma = hex_to_hcl(hex_color)[1]
    return calculate_position(chroma, window_for(field, Dimension.INTENSITY, config))
