# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""
Season analysis schema -- canonical types for coloring classification.

Design principles:
- Immutable: All records are frozen dataclasses
- Closed: Fields, dimensions, sides and seasons are enumerations
- Deterministic: Every derived record is recomputed from its inputs
- Serializable: JSON-ready via to_dict / from_dict

Dimensions:
- Temperatura (hue warmth): frio ↔ quente
- Intensidade (chroma vividness): suave ↔ brilhante
- Profundidade (lightness and contrast): escuro ↔ claro

Each dimension is scored on a 0-100 scale where 0 is the "A" side
(frio / suave / escuro) and 100 the "B" side (quente / brilhante / claro).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


# =============================================================================
# Enumerations
# =============================================================================


class FieldId(Enum):
    """Anatomical regions a color can be sampled from."""
    IRIS = "iris"
    HAIR_ROOT = "raiz_cabelo"
    EYEBROW = "sobrancelha"
    FOREHEAD = "testa"
    CHEEK = "bochecha"
    UNDER_EYE = "cavidade_ocular"
    CHIN = "queixo"
    LIP_CONTOUR = "contorno_boca"
    LIP = "boca"

    @property
    def label(self) -> str:
        """Display label for the region."""
        return _FIELD_LABELS[self]


_FIELD_LABELS = {
    FieldId.IRIS: "Iris",
    FieldId.HAIR_ROOT: "Raiz Cabelo",
    FieldId.EYEBROW: "Sobrancelha",
    FieldId.FOREHEAD: "Testa",
    FieldId.CHEEK: "Bochecha",
    FieldId.UNDER_EYE: "Cavidade Ocular",
    FieldId.CHIN: "Queixo",
    FieldId.LIP_CONTOUR: "Contorno Boca",
    FieldId.LIP: "Boca",
}


class Dimension(Enum):
    """The three composite classification dimensions."""
    TEMPERATURE = "temperatura"
    INTENSITY = "intensidade"
    DEPTH = "profundidade"

    @property
    def title(self) -> str:
        return self.value.capitalize()


class Side(Enum):
    """Side of a paired comparison (A = low end, B = high end)."""
    A = "A"
    B = "B"


class DimensionValue(Enum):
    """Categorical outcome of vote aggregation for one dimension."""
    SIDE_A = "side_a"
    SIDE_B = "side_b"
    NEUTRAL = "neutral"
    UNSET = "unset"


class Temperature(Enum):
    COOL = "frio"
    WARM = "quente"
    NEUTRAL = "neutro"


class Intensity(Enum):
    SOFT = "suave"
    BRIGHT = "brilhante"
    NEUTRAL = "neutro"


class Depth(Enum):
    DARK = "escuro"
    LIGHT = "claro"
    NEUTRAL = "neutro"


class Season(Enum):
    SPRING = "Primavera"
    SUMMER = "Verão"
    AUTUMN = "Outono"
    WINTER = "Inverno"


class Variant(Enum):
    BRIGHT = "Brilhante"
    LIGHT = "Claro"
    WARM = "Quente"
    SOFT = "Suave"
    DARK = "Escuro"
    COOL = "Frio"


# Valid variants per season (12 color seasons in total)
SEASON_VARIANTS: dict[Season, tuple[Variant, ...]] = {
    Season.SPRING: (Variant.BRIGHT, Variant.LIGHT, Variant.WARM),
    Season.AUTUMN: (Variant.WARM, Variant.SOFT, Variant.DARK),
    Season.SUMMER: (Variant.COOL, Variant.SOFT, Variant.LIGHT),
    Season.WINTER: (Variant.COOL, Variant.BRIGHT, Variant.DARK),
}

# Primavera takes the feminine form of "Claro"
_VARIANT_SPELLING = {
    (Season.SPRING, Variant.LIGHT): "Clara",
}


def color_season_name(season: Season, variant: Variant) -> Optional[str]:
    """
    Full color season name, e.g. "Verão Suave".

    Returns None when the variant does not belong to the season.
    """
    if variant not in SEASON_VARIANTS.get(season, ()):
        return None
    spelled = _VARIANT_SPELLING.get((season, variant), variant.value)
    return f"{season.value} {spelled}"


# =============================================================================
# Coercion helpers (strings → enums, never raising)
# =============================================================================

EnumInput = Union[Enum, str, None]


def coerce_enum(enum_cls, value):
    """Resolve a member of enum_cls from a member, its value or its name; None if unknown."""
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        key = value.strip()
        for member in enum_cls:
            if key == member.value or key.lower() == member.value.lower() or key.upper() == member.name:
                return member
    return None


def coerce_field(value: EnumInput) -> Optional[FieldId]:
    """Resolve a FieldId from an enum or its string value (None if unknown)."""
    return coerce_enum(FieldId, value)


def coerce_dimension(value: EnumInput) -> Optional[Dimension]:
    """Resolve a Dimension from an enum or its string value (None if unknown)."""
    return coerce_enum(Dimension, value)


def coerce_season(value: EnumInput) -> Optional[Season]:
    return coerce_enum(Season, value)


def coerce_variant(value: EnumInput) -> Optional[Variant]:
    return coerce_enum(Variant, value)


# =============================================================================
# Input records
# =============================================================================


@dataclass(frozen=True, slots=True)
class SampledColor:
    """
    A color sampled from one anatomical region.

    Produced outside the engine (image capture / polygon painting) and
    never altered afterwards.

    Attributes:
        field: The region the color was sampled from
        hex: Hex color string like "#C68E6F"
    """
    field: FieldId
    hex: str

    def to_dict(self) -> dict:
        return {"field": self.field.value, "hex": self.hex}

    @classmethod
    def from_dict(cls, data: dict) -> SampledColor:
        return cls(field=FieldId(data["field"]), hex=data["hex"])


# =============================================================================
# Measurement records
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorProperties:
    """
    Display-rounded perceptual properties of a single hex color.

    Attributes:
        hue: HCL hue in degrees (0-360)
        saturation: HSV saturation (0-100)
        value: HSV value (0-100)
        chroma: HCL chroma (0-~130)
        lightness: HCL lightness (0-100)
    """
    hue: int
    saturation: int
    value: int
    chroma: int
    lightness: int

    def to_dict(self) -> dict:
        return {
            "hue": self.hue,
            "saturation": self.saturation,
            "value": self.value,
            "chroma": self.chroma,
            "lightness": self.lightness,
        }


@dataclass(frozen=True, slots=True)
class CalibrationWindow:
    """
    Range of a raw measurement treated as the full 0-100 scale.

    For hue windows, start > end means the window wraps through 360°.
    """
    start: float
    end: float

    @property
    def wraps(self) -> bool:
        return self.start > self.end


@dataclass(frozen=True, slots=True)
class TemperatureDetails:
    """Breakdown of a temperature position calculation."""
    actual_hue: float
    hue_start: float
    hue_end: float
    remapped_value: float
    saturation: float
    saturation_adjustment: float
    final_value: float

    def to_dict(self) -> dict:
        return {
            "actual_hue": self.actual_hue,
            "hue_start": self.hue_start,
            "hue_end": self.hue_end,
            "remapped_value": self.remapped_value,
            "saturation": self.saturation,
            "saturation_adjustment": self.saturation_adjustment,
            "final_value": self.final_value,
        }


@dataclass(frozen=True, slots=True)
class IntensityDetails:
    """Breakdown of an intensity position calculation."""
    actual_chroma: float
    chroma_start: float
    chroma_end: float
    remapped_value: float
    final_value: float

    def to_dict(self) -> dict:
        return {
            "actual_chroma": self.actual_chroma,
            "chroma_start": self.chroma_start,
            "chroma_end": self.chroma_end,
            "remapped_value": self.remapped_value,
            "final_value": self.final_value,
        }


@dataclass(frozen=True, slots=True)
class LightnessExtremes:
    """
    Darkest and lightest sampled regions.

    Attributes:
        min_lightness: Lowest HCL lightness (0 when nothing was sampled)
        max_lightness: Highest HCL lightness (100 when nothing was sampled)
        difference: max - min, the contrast signal for depth
        darkest: Field holding the darkest color, if any
        lightest: Field holding the lightest color, if any
    """
    min_lightness: float
    max_lightness: float
    difference: float
    darkest: Optional[str] = None
    lightest: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DepthDetails:
    """Inputs and output of the depth composite."""
    average_lightness: float
    lightness_range: float
    contrast: str
    value: float

    def to_dict(self) -> dict:
        return {
            "average_lightness": self.average_lightness,
            "lightness_range": self.lightness_range,
            "contrast": self.contrast,
            "value": self.value,
        }


@dataclass(frozen=True, slots=True)
class FieldPosition:
    """
    A field's normalized position for one dimension.

    Attributes:
        field: Region key (FieldId value, or the raw key for unknown regions)
        hex: The sampled color
        value: Normalized position (0-100)
        category: Band label for the value
    """
    field: str
    hex: str
    value: float
    category: str

    def to_dict(self) -> dict:
        return {"hex": self.hex, "value": self.value, "category": self.category}


@dataclass(frozen=True, slots=True)
class CompositeScores:
    """One score per dimension; None until at least one input exists."""
    temperatura: Optional[float] = None
    intensidade: Optional[float] = None
    profundidade: Optional[float] = None

    def get(self, dimension: Dimension) -> Optional[float]:
        return getattr(self, dimension.value)

    def to_dict(self) -> dict:
        return {
            "temperatura": self.temperatura,
            "intensidade": self.intensidade,
            "profundidade": self.profundidade,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> CompositeScores:
        data = data or {}
        return cls(
            temperatura=data.get("temperatura"),
            intensidade=data.get("intensidade"),
            profundidade=data.get("profundidade"),
        )


@dataclass(frozen=True, slots=True)
class PigmentAnalysis:
    """
    Complete pigment analysis of one subject.

    Attributes:
        temperature: Per-field temperature positions
        intensity: Per-field intensity positions
        depth: Depth composite breakdown (None when no colors were sampled)
        scores: Composite scores used for classification (overrides applied)
        averages: Plain averages of the per-field positions, for reference
    """
    temperature: tuple[FieldPosition, ...] = ()
    intensity: tuple[FieldPosition, ...] = ()
    depth: Optional[DepthDetails] = None
    scores: CompositeScores = field(default_factory=CompositeScores)
    averages: CompositeScores = field(default_factory=CompositeScores)

    def to_dict(self) -> dict:
        return {
            "temperatura": {p.field: p.to_dict() for p in self.temperature},
            "intensidade": {p.field: p.to_dict() for p in self.intensity},
            "profundidade": self.depth.to_dict() if self.depth else None,
            "geral": self.scores.to_dict(),
            "geralAvg": self.averages.to_dict(),
        }


# =============================================================================
# Season results
# =============================================================================


@dataclass(frozen=True, slots=True)
class SeasonResult:
    """
    Outcome of exact 3-dimension season matching.

    An invalid combination is a regular outcome, not an error: valid=False
    carries suggestions explaining how to reach a valid season.

    Attributes:
        valid: True iff a season and variant were found
        season: Matched season (valid results only)
        variant: Matched variant (valid results only)
        suggestions: Explanation lines (invalid results only)
        has_neutral: True when one or more dimensions are neutral/unset
    """
    valid: bool
    season: Optional[Season] = None
    variant: Optional[Variant] = None
    suggestions: Optional[tuple[str, ...]] = None
    has_neutral: bool = False

    def __post_init__(self) -> None:
        """Validate that validity and content agree."""
        if self.valid:
            if self.season is None or self.variant is None:
                raise ValueError("Valid result requires season and variant")
            if self.suggestions is not None:
                raise ValueError("Valid result cannot carry suggestions")
        elif self.season is not None or self.variant is not None:
            raise ValueError("Invalid result cannot carry a season")

    @property
    def full_name(self) -> Optional[str]:
        if self.season is None or self.variant is None:
            return None
        return color_season_name(self.season, self.variant)

    def to_dict(self) -> dict:
        d: dict = {"valid": self.valid}
        if self.season is not None:
            d["season"] = self.season.value
            d["variant"] = self.variant.value
            d["fullName"] = self.full_name
        if self.suggestions is not None:
            d["suggestions"] = list(self.suggestions)
        if self.has_neutral:
            d["hasNeutral"] = True
        return d

    @classmethod
    def from_dict(cls, data: dict) -> SeasonResult:
        suggestions = data.get("suggestions")
        return cls(
            valid=data["valid"],
            season=Season(data["season"]) if data.get("season") else None,
            variant=Variant(data["variant"]) if data.get("variant") else None,
            suggestions=tuple(suggestions) if suggestions is not None else None,
            has_neutral=data.get("hasNeutral", False),
        )


@dataclass(frozen=True, slots=True)
class SliderSeason:
    """Season picked from continuous 0-100 dimension values."""
    season: Season
    variant: Variant

    def __post_init__(self) -> None:
        if color_season_name(self.season, self.variant) is None:
            raise ValueError(
                f"{self.variant.value} is not a variant of {self.season.value}"
            )

    @property
    def full_name(self) -> str:
        return color_season_name(self.season, self.variant)

    def to_dict(self) -> dict:
        return {
            "season": self.season.value,
            "variant": self.variant.value,
            "colorSeason": self.full_name,
        }
