# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""
Storage record conversion.

A record keeps only the numbers of an analysis: per-field positions,
the depth value and the composite scores. Labels, hex colors and the
depth breakdown are derived data and are rebuilt on load.

Record shape::

    {
      "temperatura": {"testa": 72.5, "iris": 40.0},
      "intensidade": {"testa": 31.2, "iris": 12.0},
      "profundidade": 44.3,
      "geral": {"temperatura": 61, "intensidade": 24, "profundidade": 44.3},
      "geralAvg": {"temperatura": 56, "intensidade": 22, "profundidade": 44.3}
    }

Missing values are dropped rather than stored as null.
"""

from __future__ import annotations

from typing import Optional

from chromaseason.measure.aggregate import ColorInput, color_items, depth_details
from chromaseason.measure.classify import get_label_category
from chromaseason.schema import (
    CompositeScores,
    Dimension,
    FieldPosition,
    PigmentAnalysis,
)


def to_record(analysis: PigmentAnalysis) -> dict:
    """Reduce an analysis to its numeric record."""
    record: dict = {
        "temperatura": {p.field: p.value for p in analysis.temperature},
        "intensidade": {p.field: p.value for p in analysis.intensity},
    }
    if analysis.depth is not None:
        record["profundidade"] = analysis.depth.value
    record["geral"] = _scores_record(analysis.scores)
    record["geralAvg"] = _scores_record(analysis.averages)
    return record


def _scores_record(scores: CompositeScores) -> dict:
    return {key: value for key, value in scores.to_dict().items() if value is not None}


def from_record(record: dict, colors: Optional[ColorInput] = None) -> PigmentAnalysis:
    """
    Rebuild an analysis from a stored record.

    Band labels are recomputed from the stored values. Hex colors and the
    depth breakdown come from `colors` when given; fields without a color
    get an empty hex and the depth breakdown stays None without colors.
    """
    hexes = dict(color_items(colors)) if colors else {}

    return PigmentAnalysis(
        temperature=_positions(record.get("temperatura"), hexes, Dimension.TEMPERATURE),
        intensity=_positions(record.get("intensidade"), hexes, Dimension.INTENSITY),
        depth=depth_details(hexes) if hexes else None,
        scores=CompositeScores.from_dict(record.get("geral")),
        averages=CompositeScores.from_dict(record.get("geralAvg")),
    )


def _positions(values: Optional[dict], hexes: dict, dimension: Dimension) -> tuple[FieldPosition, ...]:
    return tuple(
        FieldPosition(
            field=key,
            hex=hexes.get(key, ""),
            value=value,
            category=get_label_category(value, dimension),
        )
        for key, value in (values or {}).items()
        if value is not None
    )
