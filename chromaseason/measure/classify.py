# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""
Band classification of composite scores.

Maps a 0-100 score to one of five labeled bands per dimension, e.g. for
temperature: Extremo Frio, Neutro Frio, Neutro Puro, Neutro Quente,
Extremo Quente.
"""

from __future__ import annotations

from typing import Optional

from chromaseason.measure.calibration import BAND_TABLES, NEUTRAL_LABEL, Band
from chromaseason.schema import Dimension, coerce_dimension

# Display color for a missing score, and for out-of-range scores
UNSET_COLOR = "#d3d3d3"
FALLBACK_COLOR = "#8b5cf6"


def _bands(dimension) -> tuple[Band, ...]:
    # Temperature bands are the default, as for unlabeled steps
    return BAND_TABLES[coerce_dimension(dimension) or Dimension.TEMPERATURE]


def classify_band(score: Optional[float], dimension=Dimension.TEMPERATURE) -> Optional[Band]:
    """Band containing the score, or None for a missing or out-of-range score."""
    if score is None:
        return None
    return next((band for band in _bands(dimension) if band.contains(score)), None)


def get_label_category(score: Optional[float], dimension=Dimension.TEMPERATURE) -> str:
    """
    Band label of a score.

    Returns '' for a missing score and "Neutro Puro" if no band matches.
    """
    if score is None:
        return ""
    band = classify_band(score, dimension)
    return band.label if band else NEUTRAL_LABEL


def get_label_color(score: Optional[float], dimension=Dimension.TEMPERATURE) -> str:
    """Display color of a score's band."""
    if score is None:
        return UNSET_COLOR
    band = classify_band(score, dimension)
    return band.color if band else FALLBACK_COLOR
