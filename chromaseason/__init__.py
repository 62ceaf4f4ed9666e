# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""
Chromaseason -- Color season classification engine.

Turns colors sampled from facial regions into three 0-100 composite
scores (temperatura, intensidade, profundidade) and resolves them, or
categorical mask votes, into one of the 12 color seasons.

Quick start::

    from chromaseason import analyze, detect_season_from_sliders

    a = analyze({"testa": "#E0B48C", "iris": "#6B4423", "raiz_cabelo": "#3B2A20"})
    a.scores                  # CompositeScores(temperatura=..., ...)
    s = detect_season_from_sliders(
        a.scores.temperatura, a.scores.intensidade, a.scores.profundidade
    )
    s.full_name if s else None   # e.g. "Outono Escuro"
"""

from __future__ import annotations

__version__ = "1.0.0"

from chromaseason.measure import analyze
from chromaseason.measure.classify import get_label_category, get_label_color
from chromaseason.resolve import (
    MaskVote,
    detect_season,
    detect_season_from_sliders,
    detect_season_from_sliders_two_rule,
    detect_season_from_votes,
    toggle_vote,
)
from chromaseason.schema import (
    CompositeScores,
    Dimension,
    FieldId,
    PigmentAnalysis,
    SampledColor,
    Season,
    SeasonResult,
    Side,
    SliderSeason,
    Variant,
)

__all__ = [
    # Core API
    "analyze",
    "detect_season",
    "detect_season_from_votes",
    "detect_season_from_sliders",
    "detect_season_from_sliders_two_rule",
    "get_label_category",
    "get_label_color",
    "toggle_vote",
    # Types (commonly needed)
    "FieldId",
    "Dimension",
    "Side",
    "Season",
    "Variant",
    "SampledColor",
    "MaskVote",
    "CompositeScores",
    "PigmentAnalysis",
    "SeasonResult",
    "SliderSeason",
    # Version
    "__version__",
]
