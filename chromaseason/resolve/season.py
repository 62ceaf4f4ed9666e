# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""
Season resolution.

Two independent ways of reaching one of the 12 color seasons:

1. Exact match (categorical): temperature, intensity and depth each are
   low, high or neutral. Only four triples name a season; every other
   input yields an invalid result with suggestions on how to fix it.

2. Continuous (0-100 sliders):
   - 3-signal: the two dimensions furthest from 50 pick their sides, the
     third side is whichever completes a valid triple, and the variant is
     named after the single most extreme dimension.
   - 2-rule: temperature and depth only, looked up in a fixed band table
     after normalizing away double extremes.

Nothing here raises: invalid combinations are results, not errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from loguru import logger

from chromaseason.resolve.votes import MaskCategory, MaskVote, category_value_name
from chromaseason.schema import (
    SEASON_VARIANTS,
    Depth,
    Dimension,
    Intensity,
    Season,
    SeasonResult,
    SliderSeason,
    Temperature,
    Variant,
    coerce_enum,
)


# =============================================================================
# Valid triples
# =============================================================================


@dataclass(frozen=True, slots=True)
class SeasonCombination:
    """A categorical triple that names a season (with its exact-match variant)."""
    season: Season
    temperature: Temperature
    intensity: Intensity
    depth: Depth
    variant: Variant

    @property
    def values(self) -> tuple:
        return self.temperature, self.intensity, self.depth

    @property
    def high_sides(self) -> dict[Dimension, bool]:
        """Whether each dimension sits on its high side (quente/brilhante/claro)."""
        return {
            Dimension.TEMPERATURE: self.temperature is Temperature.WARM,
            Dimension.INTENSITY: self.intensity is Intensity.BRIGHT,
            Dimension.DEPTH: self.depth is Depth.LIGHT,
        }


VALID_COMBINATIONS: tuple[SeasonCombination, ...] = (
    SeasonCombination(Season.SPRING, Temperature.WARM, Intensity.BRIGHT, Depth.LIGHT, Variant.BRIGHT),
    SeasonCombination(Season.AUTUMN, Temperature.WARM, Intensity.SOFT, Depth.DARK, Variant.WARM),
    SeasonCombination(Season.SUMMER, Temperature.COOL, Intensity.SOFT, Depth.LIGHT, Variant.COOL),
    SeasonCombination(Season.WINTER, Temperature.COOL, Intensity.BRIGHT, Depth.DARK, Variant.COOL),
)

_DIMENSIONS = (Dimension.TEMPERATURE, Dimension.INTENSITY, Dimension.DEPTH)

# Variant named after a dimension's side: (low side, high side)
_SIDE_VARIANTS = {
    Dimension.TEMPERATURE: (Variant.COOL, Variant.WARM),
    Dimension.INTENSITY: (Variant.SOFT, Variant.BRIGHT),
    Dimension.DEPTH: (Variant.DARK, Variant.LIGHT),
}

# Alternatives listed after the fewest-change options
MAX_ALTERNATIVES = 2


def season_variants(season) -> tuple[Variant, ...]:
    """The three variants of a season (empty for an unknown season)."""
    return SEASON_VARIANTS.get(coerce_enum(Season, season), ())


# =============================================================================
# Exact 3-dimension match
# =============================================================================


def detect_season(temperatura, intensidade, profundidade) -> SeasonResult:
    """
    Match a categorical triple against the four valid seasons.

    Args:
        temperatura: Temperature or "frio" / "quente" / "neutro" (None = unset)
        intensidade: Intensity or "suave" / "brilhante" / "neutro"
        profundidade: Depth or "escuro" / "claro" / "neutro"

    Returns:
        SeasonResult. Invalid when any dimension is neutral or unset
        (has_neutral=True, suggestions explain how to break the tie) or
        when the triple matches no season (suggestions ranked by the
        number of dimensions to change).

    Example:
        >>> detect_season("quente", "brilhante", "claro")
        SeasonResult(valid=True, season=<Season.SPRING: 'Primavera'>, ...)
    """
    values = (
        coerce_enum(Temperature, temperatura),
        coerce_enum(Intensity, intensidade),
        coerce_enum(Depth, profundidade),
    )

    if any(_is_undecided(v) for v in values):
        return SeasonResult(
            valid=False,
            suggestions=tuple(_neutral_suggestions(values)),
            has_neutral=True,
        )

    for combo in VALID_COMBINATIONS:
        if combo.values == values:
            return SeasonResult(valid=True, season=combo.season, variant=combo.variant)

    logger.debug(f"No season for {'-'.join(v.value for v in values)}, building suggestions")
    return SeasonResult(valid=False, suggestions=tuple(_change_suggestions(values)))


def detect_season_from_votes(votes: Iterable[MaskVote]) -> SeasonResult:
    """Exact season match on the values aggregated from mask votes."""
    votes = tuple(votes)
    return detect_season(
        category_value_name(votes, MaskCategory.TEMPERATURE),
        category_value_name(votes, MaskCategory.INTENSITY),
        category_value_name(votes, MaskCategory.DEPTH),
    )


def _is_undecided(value) -> bool:
    return value is None or value.name == "NEUTRAL"


def _value_label(value) -> str:
    return value.value.capitalize()


# Hints for breaking a tie: (long form lines, short form)
_TIE_HINTS = {
    Dimension.TEMPERATURE: (
        ("  • Selecione mais máscaras **Quentes** para obter Quente",
         "  • Ou selecione mais máscaras **Frias** para obter Frio"),
        "selecione mais Quentes ou Frias",
    ),
    Dimension.INTENSITY: (
        ("  • Selecione mais máscaras **Brilhantes** para obter Brilhante",
         "  • Ou selecione mais máscaras **Suaves** para obter Suave"),
        "selecione mais Brilhantes ou Suaves",
    ),
    Dimension.DEPTH: (
        ("  • Selecione mais máscaras **Claras** para obter Claro",
         "  • Ou selecione mais máscaras **Escuras** para obter Escuro"),
        "selecione mais Claras ou Escuras",
    ),
}


def _state_text(value) -> str:
    if value is None:
        return "não definida"
    if value.name == "NEUTRAL":
        return "neutro (canceladas)"
    return value.value


def _neutral_suggestions(values: tuple) -> list[str]:
    """Explain which dimensions are neutral or unset and how to decide them."""
    lines = ["**Parâmetros Atuais:**"]
    lines.extend(
        f"{dimension.title}: **{_state_text(value)}**"
        for dimension, value in zip(_DIMENSIONS, values)
    )
    lines.append("")

    undecided = [(d, v) for d, v in zip(_DIMENSIONS, values) if _is_undecided(v)]

    if len(undecided) == 1:
        dimension, value = undecided[0]
        reason = (
            "não foi definida (nenhuma seleção)"
            if value is None
            else "está neutra (suas seleções se cancelam)"
        )
        lines.append(f"❌ **{dimension.title}** {reason}")
        lines.append("")
        lines.append(f"Para corrigir, você precisa mudar **{dimension.title}** para um dos lados:")
        lines.extend(_TIE_HINTS[dimension][0])
    else:
        names = ", ".join(d.title for d, _ in undecided)
        lines.append(f"❌ Múltiplos parâmetros estão neutros: **{names}**")
        lines.append("")
        lines.append("Para corrigir, ajuste as seguintes categorias para um dos lados:")
        lines.extend(
            f"  • **{d.title}**: {_TIE_HINTS[d][1]}" for d, _ in undecided
        )

    return lines


def _required_changes(combo: SeasonCombination, values: tuple) -> list[tuple[str, str]]:
    """(dimension title, target label) for each dimension that must flip."""
    return [
        (dimension.title, _value_label(target))
        for dimension, current, target in zip(_DIMENSIONS, values, combo.values)
        if current is not target
    ]


def _describe_option(season: Season, changes: list[tuple[str, str]]) -> str:
    if not changes:
        return f"✓ **{season.value}** - Seleção válida!"
    steps = [f"**{label}** para **{target}**" for label, target in changes]
    if len(steps) == 1:
        return f"**{season.value}**: mude {steps[0]}"
    if len(steps) == 2:
        return f"**{season.value}**: mude {steps[0]} e {steps[1]}"
    return f"**{season.value}**: mude {', '.join(steps)}"


def _change_suggestions(values: tuple) -> list[str]:
    """
    Seasons reachable from an invalid triple, fewest flips first.

    Every season needing the minimal number of flips is listed, followed
    by up to two alternatives needing more.
    """
    ranked = sorted(
        ((combo.season, _required_changes(combo, values)) for combo in VALID_COMBINATIONS),
        key=lambda option: len(option[1]),
    )
    fewest = len(ranked[0][1])

    lines = [_describe_option(s, changes) for s, changes in ranked if len(changes) == fewest]
    alternatives = [
        _describe_option(s, changes) for s, changes in ranked if len(changes) > fewest
    ][:MAX_ALTERNATIVES]

    if alternatives:
        lines.append("")
        lines.append("**Outras opções:**")
        lines.extend(alternatives)
    return lines


# =============================================================================
# Continuous: 3-signal
# =============================================================================


def _distance(value: float) -> float:
    return abs(value - 50)


def detect_season_from_sliders(
    temperatura: Optional[float],
    intensidade: Optional[float],
    profundidade: Optional[float],
) -> Optional[SliderSeason]:
    """
    Season from three 0-100 scores using the two most extreme signals.

    Sides are decided by value > 50. The two dimensions furthest from 50
    fix their sides; the third takes its own side if that completes a
    valid triple, otherwise the opposite side. The variant is named after
    the most extreme dimension (ties keep temperatura, intensidade,
    profundidade order).

    Returns None if any score is missing or no triple matches.
    """
    scores = {
        Dimension.TEMPERATURE: temperatura,
        Dimension.INTENSITY: intensidade,
        Dimension.DEPTH: profundidade,
    }
    if any(v is None for v in scores.values()):
        return None

    first, second, third = sorted(_DIMENSIONS, key=lambda d: -_distance(scores[d]))
    high = {d: scores[d] > 50 for d in _DIMENSIONS}

    for third_high in (high[third], not high[third]):
        wanted = {first: high[first], second: high[second], third: third_high}
        combo = next((c for c in VALID_COMBINATIONS if c.high_sides == wanted), None)
        if combo is not None:
            variant = _SIDE_VARIANTS[first][high[first]]
            return SliderSeason(season=combo.season, variant=variant)

    return None


# =============================================================================
# Continuous: 2-rule (temperature × depth)
# =============================================================================

EXTREME_LOW = 12.5
EXTREME_HIGH = 87.5

# Midpoints of the non-extreme bands adjacent to each extreme
PULLED_LOW = 25.0
PULLED_HIGH = 75.0


def is_extreme(value: float) -> bool:
    return value < EXTREME_LOW or value > EXTREME_HIGH


def normalize_extremes(temperatura: float, profundidade: float) -> tuple[float, float]:
    """
    Keep at most one dimension in an extreme band.

    Two independent measurements being maximal at once is treated as noise
    in the weaker one: the value closer to 50 is moved to the midpoint of
    its adjacent non-extreme band (25 or 75). On equal distances depth is
    moved and temperature keeps its extreme.
    """
    if not (is_extreme(temperatura) and is_extreme(profundidade)):
        return temperatura, profundidade

    if _distance(temperatura) < _distance(profundidade):
        adjusted = (_pull_in(temperatura), profundidade)
    else:
        adjusted = (temperatura, _pull_in(profundidade))

    logger.debug(f"Both extreme ({temperatura}, {profundidade}), normalized to {adjusted}")
    return adjusted


def _pull_in(value: float) -> float:
    return PULLED_LOW if value < 50 else PULLED_HIGH


def two_rule_band(value: float) -> int:
    """
    Band index on the 4-band scale.

    0: < 12.5, 1: 12.5-50, 2: above 50 up to 87.5, 3: > 87.5
    """
    if value < EXTREME_LOW:
        return 0
    if value <= 50:
        return 1
    if value <= EXTREME_HIGH:
        return 2
    return 3


# (temperature band, depth band) → season and variant.
# Double-extreme cells are unreachable after normalization. The two
# "Brilhante" cells are left empty: brightness is invisible to temperature
# and depth alone.
TWO_RULE_TABLE: Mapping[tuple[int, int], tuple[Season, Variant]] = MappingProxyType({
    (3, 1): (Season.AUTUMN, Variant.WARM),
    (3, 2): (Season.SPRING, Variant.WARM),
    (0, 1): (Season.WINTER, Variant.COOL),
    (0, 2): (Season.SUMMER, Variant.COOL),
    (1, 3): (Season.SUMMER, Variant.LIGHT),
    (2, 3): (Season.SPRING, Variant.LIGHT),
    (1, 0): (Season.WINTER, Variant.DARK),
    (2, 0): (Season.AUTUMN, Variant.DARK),
    (1, 2): (Season.SUMMER, Variant.SOFT),
    (2, 1): (Season.AUTUMN, Variant.SOFT),
})


def detect_season_from_sliders_two_rule(
    temperatura: Optional[float],
    profundidade: Optional[float],
) -> Optional[SliderSeason]:
    """
    Season from temperature and depth scores via the 2-rule band table.

    Returns None if a score is missing or the band pair has no season.
    """
    if temperatura is None or profundidade is None:
        return None

    temperatura, profundidade = normalize_extremes(temperatura, profundidade)
    cell = (two_rule_band(temperatura), two_rule_band(profundidade))
    entry = TWO_RULE_TABLE.get(cell)
    if entry is None:
        return None
    return SliderSeason(season=entry[0], variant=entry[1])
