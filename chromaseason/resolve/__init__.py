# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""
Season resolution: mask vote aggregation and season detection.
"""

from chromaseason.resolve.season import (
    TWO_RULE_TABLE,
    VALID_COMBINATIONS,
    SeasonCombination,
    detect_season,
    detect_season_from_sliders,
    detect_season_from_sliders_two_rule,
    detect_season_from_votes,
    is_extreme,
    normalize_extremes,
    season_variants,
    two_rule_band,
)
from chromaseason.resolve.votes import (
    MASK_ROWS,
    SIDE_VALUES,
    MaskCategory,
    MaskVote,
    SelectionExplanation,
    calculate_category_value,
    category_for_mask,
    category_value_name,
    count_votes,
    explain_selection,
    is_selected,
    toggle_vote,
)

__all__ = [
    # Votes
    "MaskCategory",
    "MaskVote",
    "MASK_ROWS",
    "SIDE_VALUES",
    "SelectionExplanation",
    "category_for_mask",
    "toggle_vote",
    "is_selected",
    "count_votes",
    "calculate_category_value",
    "category_value_name",
    "explain_selection",
    # Exact match
    "SeasonCombination",
    "VALID_COMBINATIONS",
    "detect_season",
    "detect_season_from_votes",
    "season_variants",
    # Sliders
    "detect_season_from_sliders",
    "detect_season_from_sliders_two_rule",
    "normalize_extremes",
    "is_extreme",
    "two_rule_band",
    "TWO_RULE_TABLE",
]
