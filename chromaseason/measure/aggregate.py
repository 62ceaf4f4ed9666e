# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""
Weighted aggregation of per-field positions into composite scores.

Temperature and intensity composites are extremity-weighted averages:
a strongly warm (or cool) feature is diagnostic, so positions near the
ends of the scale outweigh positions near the neutral midpoint.

    weight = 4   for v in [0, 12.5] ∪ [87.5, 100]
    weight = 2   for v in (12.5, 47] ∪ (53, 87.5)
    weight = 1   for v in (47, 53]

The depth composite is not an average of positions. Perceived depth
depends jointly on overall lightness and internal contrast, so the
average lightness is mapped through a contrast × luminosity table.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, Union

import numpy as np

from chromaseason.measure.calibration import (
    CONTRAST_HIGH_MIN,
    CONTRAST_MEDIUM_MIN,
    DEPTH_MAPPING,
    Contrast,
    RangeMapping,
)
from chromaseason.measure.colorspace import hex_to_hcl
from chromaseason.measure.numeric import round2, round_half_up
from chromaseason.schema import (
    DepthDetails,
    FieldId,
    LightnessExtremes,
    SampledColor,
    coerce_field,
)


ColorInput = Union[Mapping[Union[FieldId, str], str], Iterable[SampledColor]]


def color_items(colors: ColorInput) -> list[tuple[str, str]]:
    """
    Normalize a color map (or SampledColor sequence) to (field key, hex) pairs.

    Known fields come first in FieldId order; unrecognized keys follow in
    their original order and are kept (they fall back to default windows).
    """
    if isinstance(colors, Mapping):
        pairs = list(colors.items())
    else:
        pairs = [(c.field, c.hex) for c in colors]

    known: dict[FieldId, str] = {}
    unknown: list[tuple[str, str]] = []
    for key, hex_color in pairs:
        field_id = coerce_field(key)
        if field_id is not None:
            known[field_id] = hex_color
        else:
            unknown.append((str(key), hex_color))

    ordered = [(f.value, known[f]) for f in FieldId if f in known]
    return ordered + unknown


# =============================================================================
# Extremity weights
# =============================================================================


def get_weight(value: float) -> int:
    """Extremity weight of a 0-100 value (4 extreme, 2 leaning, 1 neutral)."""
    if value <= 12.5 or value >= 87.5:
        return 4
    if 47 < value <= 53:
        return 1
    return 2


def calculate_weighted_average(values: Iterable[Optional[float]]) -> Optional[int]:
    """
    Extremity-weighted average, rounded to an integer.

    None entries are skipped. Returns None when no values remain.
    """
    present = [v for v in values if v is not None]
    if not present:
        return None

    arr = np.asarray(present, dtype=np.float64)
    weights = np.array([get_weight(v) for v in present], dtype=np.float64)
    return round_half_up(float(np.sum(arr * weights) / np.sum(weights)))


def simple_average(values: Iterable[Optional[float]]) -> Optional[int]:
    """Unweighted average rounded to an integer (None if empty)."""
    present = [v for v in values if v is not None]
    if not present:
        return None
    return round_half_up(float(np.mean(present)))


# =============================================================================
# Depth composite
# =============================================================================


def classify_contrast(lightness_range: float) -> Contrast:
    """Contrast bracket of a lightness range: low < 30 <= medium < 65 <= high."""
    if lightness_range >= CONTRAST_HIGH_MIN:
        return Contrast.HIGH
    if lightness_range >= CONTRAST_MEDIUM_MIN:
        return Contrast.MEDIUM
    return Contrast.LOW


def map_range(value: float, mapping: RangeMapping) -> float:
    """Clamp value to the mapping's input range and interpolate linearly."""
    clamped = max(mapping.in_min, min(mapping.in_max, value))
    ratio = round2((clamped - mapping.in_min) / (mapping.in_max - mapping.in_min))
    return round2(mapping.out_min + ratio * (mapping.out_max - mapping.out_min))


def calculate_depth(lightness_range: float, average_lightness: float) -> float:
    """
    Depth position (0 = dark, 100 = light) from contrast and luminosity.

    High contrast pulls depth darker than the average lightness alone
    would suggest; low contrast pulls it lighter.
    """
    contrast = classify_contrast(lightness_range)
    bracket = next(
        (b for b in DEPTH_MAPPING if average_lightness <= b.max_luminosity),
        DEPTH_MAPPING[-1],
    )
    return map_range(average_lightness, bracket.mappings[contrast])


def _lightness_values(colors: ColorInput) -> list[tuple[str, float]]:
    return [(key, hex_to_hcl(hex_color)[2]) for key, hex_color in color_items(colors)]


def lightness_extremes(colors: ColorInput) -> LightnessExtremes:
    """
    Darkest and lightest sampled fields.

    With no colors the extremes default to 0 and 100 (full range).
    """
    values = _lightness_values(colors)
    if not values:
        return LightnessExtremes(min_lightness=0.0, max_lightness=100.0, difference=100.0)

    darkest = min(values, key=lambda kv: kv[1])
    lightest = max(values, key=lambda kv: kv[1])
    return LightnessExtremes(
        min_lightness=round2(darkest[1]),
        max_lightness=round2(lightest[1]),
        difference=round2(lightest[1] - darkest[1]),
        darkest=darkest[0],
        lightest=lightest[0],
    )


def depth_details(colors: ColorInput) -> Optional[DepthDetails]:
    """Depth composite with its inputs (None when no colors were sampled)."""
    values = _lightness_values(colors)
    if not values:
        return None

    lightness = np.array([v for _, v in values], dtype=np.float64)
    average = round2(float(np.mean(lightness)))
    spread = round2(float(np.max(lightness) - np.min(lightness)))

    return DepthDetails(
        average_lightness=average,
        lightness_range=spread,
        contrast=classify_contrast(spread).value,
        value=calculate_depth(spread, average),
    )


def calculate_depth_position(colors: ColorInput) -> Optional[float]:
    """Depth composite of the sampled colors (None when nothing was sampled)."""
    details = depth_details(colors)
    return details.value if details else None
