# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""
Summary serializer.

Formats the composite scores of an analysis, with their band labels, and
optionally the resolved season. Serialization never changes a value.
"""

from __future__ import annotations

from typing import Optional, Union

from chromaseason.measure.classify import get_label_category, get_label_color
from chromaseason.runtime.serializers.base import SerializerFormat, dump_json
from chromaseason.schema import Dimension, PigmentAnalysis, SeasonResult, SliderSeason

Resolution = Union[SeasonResult, SliderSeason, None]

_DIMENSIONS = (Dimension.TEMPERATURE, Dimension.INTENSITY, Dimension.DEPTH)


def to_summary(
    analysis: PigmentAnalysis,
    result: Resolution = None,
    *,
    format: SerializerFormat = SerializerFormat.NATURAL,
    preamble: bool = True,
) -> str:
    """Serialize composite scores and an optional season.

    Args:
        analysis: The analysis to summarize.
        result: Exact-match SeasonResult or SliderSeason, if resolved.
        format: NATURAL (Markdown text), JSON or JSON_PRETTY.
        preamble: Include the heading (NATURAL only).

    Returns:
        Summary string.

    Example (NATURAL)::

        ## Análise de Coloração

        **Temperatura:** 72 (Neutro Quente)
        **Intensidade:** 30 (Neutro Suave)
        **Profundidade:** 44.3 (Neutro Escuro)

        **Estação:** Primavera Brilhante
    """
    if format == SerializerFormat.NATURAL:
        return _to_natural(analysis, result, preamble)
    return dump_json(_build_data(analysis, result), format)


def _build_data(analysis: PigmentAnalysis, result: Resolution) -> dict:
    data: dict = {
        "scores": {
            dimension.value: {
                "value": analysis.scores.get(dimension),
                "category": get_label_category(analysis.scores.get(dimension), dimension),
                "color": get_label_color(analysis.scores.get(dimension), dimension),
            }
            for dimension in _DIMENSIONS
        },
    }
    if result is not None:
        data["season"] = result.to_dict()
    return data


def _format_score(value: Optional[float], dimension: Dimension) -> str:
    if value is None:
        return "não definido"
    shown = int(value) if float(value).is_integer() else value
    return f"{shown} ({get_label_category(value, dimension)})"


def _to_natural(analysis: PigmentAnalysis, result: Resolution, preamble: bool) -> str:
    lines: list[str] = []

    if preamble:
        lines.extend(["## Análise de Coloração", ""])

    for dimension in _DIMENSIONS:
        value = analysis.scores.get(dimension)
        lines.append(f"**{dimension.title}:** {_format_score(value, dimension)}")

    if result is None:
        return "\n".join(lines)

    lines.append("")
    if isinstance(result, SliderSeason):
        lines.append(f"**Estação:** {result.full_name}")
    elif result.valid:
        lines.append(f"**Estação:** {result.full_name}")
    else:
        lines.append("**Estação:** combinação inválida")
        if result.suggestions:
            lines.append("")
            lines.extend(result.suggestions)

    return "\n".join(lines)
