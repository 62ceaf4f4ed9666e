# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""
Calibration tables.

Static, empirically tuned constants for coloring analysis. They encode
what counts as "fully cool" or "fully warm" (and "soft" / "bright") for
each anatomical region; they are not derived from color theory.

All tables are read-only mappings keyed by closed enumerations.

Hue windows (HSV hue, degrees):
    start is the coolest hue (position 0), end the warmest (position 100).
    start > end means the window wraps through 0°/360°: skin reads cool
    towards pink/magenta and warm towards golden yellow.

Chroma windows (HCL chroma):
    start is the softest chroma (position 0), end the brightest (100).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from loguru import logger

from chromaseason.schema import CalibrationWindow, Dimension, FieldId, coerce_field


# =============================================================================
# Position mapper configuration
# =============================================================================


@dataclass(frozen=True)
class PositionConfig:
    """Configuration for field position mapping."""

    # HSV saturation (percent) at or below which temperature reads cooler
    saturation_threshold: float = 30.0

    # Temperature points removed at zero saturation (linear up to threshold)
    max_saturation_reduction: float = 40.0

    # Windows used for regions without calibration
    default_hue_window: CalibrationWindow = CalibrationWindow(0.0, 360.0)
    default_chroma_window: CalibrationWindow = CalibrationWindow(0.0, 60.0)


DEFAULT_POSITION_CONFIG = PositionConfig()


# =============================================================================
# Per-field windows
# =============================================================================

HUE_WINDOWS: Mapping[FieldId, CalibrationWindow] = MappingProxyType({
    FieldId.IRIS: CalibrationWindow(200.0, 40.0),        # blue/gray → amber
    FieldId.HAIR_ROOT: CalibrationWindow(340.0, 45.0),   # ash/violet → golden
    FieldId.EYEBROW: CalibrationWindow(340.0, 45.0),
    FieldId.FOREHEAD: CalibrationWindow(345.0, 35.0),    # rosy → golden
    FieldId.CHEEK: CalibrationWindow(345.0, 35.0),
    FieldId.UNDER_EYE: CalibrationWindow(330.0, 40.0),   # violet shadow → olive
    FieldId.CHIN: CalibrationWindow(345.0, 35.0),
    FieldId.LIP_CONTOUR: CalibrationWindow(330.0, 30.0),
    FieldId.LIP: CalibrationWindow(320.0, 25.0),         # berry → coral
})

CHROMA_WINDOWS: Mapping[FieldId, CalibrationWindow] = MappingProxyType({
    FieldId.IRIS: CalibrationWindow(0.0, 40.0),
    FieldId.HAIR_ROOT: CalibrationWindow(0.0, 35.0),
    FieldId.EYEBROW: CalibrationWindow(0.0, 30.0),
    FieldId.FOREHEAD: CalibrationWindow(5.0, 40.0),
    FieldId.CHEEK: CalibrationWindow(5.0, 45.0),
    FieldId.UNDER_EYE: CalibrationWindow(5.0, 35.0),
    FieldId.CHIN: CalibrationWindow(5.0, 40.0),
    FieldId.LIP_CONTOUR: CalibrationWindow(10.0, 45.0),
    FieldId.LIP: CalibrationWindow(10.0, 60.0),
})

_WINDOWS = MappingProxyType({
    Dimension.TEMPERATURE: HUE_WINDOWS,
    Dimension.INTENSITY: CHROMA_WINDOWS,
})


def window_for(
    field,
    dimension: Dimension,
    config: Optional[PositionConfig] = None,
) -> CalibrationWindow:
    """
    Calibration window of a field for temperature or intensity.

    Unknown fields get the default window instead of failing.
    Depth has no windows (lightness is consumed directly).
    """
    cfg = config or DEFAULT_POSITION_CONFIG
    default = (
        cfg.default_hue_window
        if dimension is Dimension.TEMPERATURE
        else cfg.default_chroma_window
    )

    field_id = coerce_field(field)
    window = _WINDOWS.get(dimension, {}).get(field_id) if field_id else None
    if window is None:
        logger.debug(f"No {dimension.value} window for field {field!r}, using default")
        return default
    return window


# =============================================================================
# Classification bands
# =============================================================================


@dataclass(frozen=True, slots=True)
class Band:
    """
    One labeled range of a dimension's 0-100 scale.

    Bounds are inclusive; a value on a shared boundary belongs to the
    first band listed (so 12.5 is extreme, 47 is neutral-low).
    """
    low: float
    high: float
    label: str
    color: str

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high


# Shared boundaries of the 5-band scale
BAND_EDGES = (0.0, 12.5, 47.0, 53.0, 87.5, 100.0)

NEUTRAL_LABEL = "Neutro Puro"

_BAND_COLORS = ("#8b5cf6", "#3b82f6", "#33d221", "#f97316", "#dc2626")

_BAND_WORDS = {
    Dimension.TEMPERATURE: ("Frio", "Quente"),
    Dimension.INTENSITY: ("Suave", "Brilhante"),
    Dimension.DEPTH: ("Escuro", "Claro"),
}


def _build_bands(low_word: str, high_word: str) -> tuple[Band, ...]:
    labels = (
        f"Extremo {low_word}",
        f"Neutro {low_word}",
        NEUTRAL_LABEL,
        f"Neutro {high_word}",
        f"Extremo {high_word}",
    )
    return tuple(
        Band(BAND_EDGES[i], BAND_EDGES[i + 1], labels[i], _BAND_COLORS[i])
        for i in range(5)
    )


BAND_TABLES: Mapping[Dimension, tuple[Band, ...]] = MappingProxyType({
    dimension: _build_bands(*words) for dimension, words in _BAND_WORDS.items()
})


# =============================================================================
# Depth: contrast × luminosity mapping
# =============================================================================


class Contrast(Enum):
    """Internal contrast of the sampled colors (lightness range)."""
    LOW = "baixo"
    MEDIUM = "medio"
    HIGH = "alto"


# Lower bounds; anything below MEDIUM is LOW
CONTRAST_MEDIUM_MIN = 30.0
CONTRAST_HIGH_MIN = 65.0


@dataclass(frozen=True, slots=True)
class RangeMapping:
    """Linear map from an input luminosity range to an output depth range."""
    in_min: float
    in_max: float
    out_min: float
    out_max: float


@dataclass(frozen=True, slots=True)
class LuminosityBracket:
    """Depth mappings for average lightness up to max_luminosity."""
    max_luminosity: float
    mappings: Mapping[Contrast, RangeMapping]


def _bracket(max_lum: float, high: tuple, medium: tuple, low: tuple) -> LuminosityBracket:
    return LuminosityBracket(
        max_luminosity=max_lum,
        mappings=MappingProxyType({
            Contrast.HIGH: RangeMapping(*high),
            Contrast.MEDIUM: RangeMapping(*medium),
            Contrast.LOW: RangeMapping(*low),
        }),
    )


# | Contrast | Luminosity | Depth     |
# |   65-100 |     0-12.5 |    0-12.5 |
# |   65-100 |    12.5-47 |    0-12.5 |
# |   65-100 |    53-87.5 |   12.5-47 |
# |   65-100 |   87.5-100 |   12.5-47 |
# |    30-65 |     0-12.5 |    0-12.5 |
# |    30-65 |    12.5-47 |   12.5-47 |
# |    30-65 |    53-87.5 |   53-87.5 |
# |    30-65 |   87.5-100 |  87.5-100 |
# |     0-30 |     0-12.5 |   53-87.5 |
# |     0-30 |    12.5-47 |   53-87.5 |
# |     0-30 |    53-87.5 |  87.5-100 |
# |     0-30 |   87.5-100 |  87.5-100 |
#
# Tuples are (in_min, in_max, out_min, out_max).
DEPTH_MAPPING: tuple[LuminosityBracket, ...] = (
    _bracket(
        12.5,
        high=(0, 12.5, 0, 12.5),
        medium=(0, 12.5, 0, 12.5),
        low=(0, 12.5, 53, 87.5),
    ),
    _bracket(
        47,
        high=(12.5, 47, 0, 12.5),
        medium=(12.5, 47, 12.5, 47),
        low=(12.5, 47, 53, 87.5),
    ),
    _bracket(
        87.5,
        high=(53, 87.5, 12.5, 47),
        medium=(53, 87.5, 53, 87.5),
        low=(53, 87.5, 87.5, 100),
    ),
    _bracket(
        100,
        high=(87.5, 100, 12.5, 47),
        medium=(87.5, 100, 87.5, 100),
        low=(87.5, 100, 87.5, 100),
    ),
)
