# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""
Vote aggregation over paired mask comparisons.

Each mask row compares two sides of one category (e.g. a "frio" drape
against a "quente" drape). Selecting a side casts a vote; selecting the
identical (row, side) pair again withdraws it. Both sides of the same row
may be selected at once.

A category's value is always recomputed from the full vote list:

- no votes            → UNSET
- only one side voted → that side
- tie at the maximum  → NEUTRAL
- otherwise           → the side with strictly more votes
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence

from chromaseason.schema import DimensionValue, Side


class MaskCategory(Enum):
    """Categories decided by mask comparisons."""
    TEMPERATURE = "temperatura"
    INTENSITY = "intensidade"
    DEPTH = "profundidade"
    UNDERTONE = "subtom"


# Mask rows voting for each category
MASK_ROWS: Mapping[MaskCategory, tuple[str, ...]] = MappingProxyType({
    MaskCategory.TEMPERATURE: ("temperatura", "temperatura2"),
    MaskCategory.INTENSITY: ("intensidade", "intensidade2", "intensidade3"),
    MaskCategory.DEPTH: ("profundidade", "profundidade2", "profundidade3", "profundidade4"),
    MaskCategory.UNDERTONE: ("subtom",),
})

# Categorical value of (side A, side B) per category
SIDE_VALUES: Mapping[MaskCategory, tuple[str, str]] = MappingProxyType({
    MaskCategory.TEMPERATURE: ("frio", "quente"),
    MaskCategory.INTENSITY: ("suave", "brilhante"),
    MaskCategory.DEPTH: ("escuro", "claro"),
    MaskCategory.UNDERTONE: ("ouro", "prata"),
})

NEUTRAL_VALUE = "neutro"


@dataclass(frozen=True, slots=True)
class MaskVote:
    """
    A single selection of one side of a mask row.

    Attributes:
        mask_id: Mask row, e.g. "temperatura2"
        side: Selected side
    """
    mask_id: str
    side: Side

    @property
    def category(self) -> Optional[MaskCategory]:
        return category_for_mask(self.mask_id)

    def to_dict(self) -> dict:
        value = side_value(self.category, self.side) if self.category else self.side.value
        return {"id": self.mask_id, "value": value}

    @classmethod
    def from_dict(cls, data: dict) -> Optional[MaskVote]:
        """Parse {"id": ..., "value": "quente"}; None for unknown rows/values."""
        category = category_for_mask(data.get("id", ""))
        if category is None:
            return None
        side = side_for_value(category, data.get("value"))
        if side is None:
            return None
        return cls(mask_id=data["id"], side=side)


def category_for_mask(mask_id: str) -> Optional[MaskCategory]:
    """Category a mask row votes for (None for unknown rows)."""
    for category, rows in MASK_ROWS.items():
        if mask_id in rows:
            return category
    return None


def side_value(category: MaskCategory, side: Side) -> str:
    """Categorical value of a side, e.g. (TEMPERATURE, B) → "quente"."""
    low, high = SIDE_VALUES[category]
    return low if side is Side.A else high


def side_for_value(category: MaskCategory, value: Optional[str]) -> Optional[Side]:
    low, high = SIDE_VALUES[category]
    if value == low:
        return Side.A
    if value == high:
        return Side.B
    return None


# =============================================================================
# Vote list operations (return new tuples, never mutate)
# =============================================================================


def toggle_vote(votes: Sequence[MaskVote], mask_id: str, side: Side) -> tuple[MaskVote, ...]:
    """
    Add a vote, or remove it if the identical (row, side) pair is present.

    The other side of the same row is left untouched.
    """
    vote = MaskVote(mask_id=mask_id, side=side)
    remaining = list(votes)
    if vote in remaining:
        remaining.remove(vote)
        return tuple(remaining)
    return tuple(remaining) + (vote,)


def is_selected(votes: Iterable[MaskVote], mask_id: str, side: Optional[Side] = None) -> bool:
    """True if the row is selected (on the given side, or on any side)."""
    return any(
        v.mask_id == mask_id and (side is None or v.side is side)
        for v in votes
    )


# =============================================================================
# Aggregation
# =============================================================================


def count_votes(votes: Iterable[MaskVote], category: MaskCategory) -> dict[Side, int]:
    """Votes per side for one category."""
    rows = MASK_ROWS[category]
    tally = Counter(v.side for v in votes if v.mask_id in rows)
    return {Side.A: tally[Side.A], Side.B: tally[Side.B]}


def calculate_category_value(votes: Iterable[MaskVote], category: MaskCategory) -> DimensionValue:
    """
    Categorical value of a category from the current vote list.
    """
    counts = count_votes(votes, category)
    a, b = counts[Side.A], counts[Side.B]

    if a == 0 and b == 0:
        return DimensionValue.UNSET
    if a == b:
        return DimensionValue.NEUTRAL
    return DimensionValue.SIDE_A if a > b else DimensionValue.SIDE_B


def category_value_name(votes: Iterable[MaskVote], category: MaskCategory) -> Optional[str]:
    """
    Category value as its categorical string ("quente", "neutro", ...).

    None when the category has no votes.
    """
    value = calculate_category_value(votes, category)
    if value is DimensionValue.UNSET:
        return None
    if value is DimensionValue.NEUTRAL:
        return NEUTRAL_VALUE
    side = Side.A if value is DimensionValue.SIDE_A else Side.B
    return side_value(category, side)


@dataclass(frozen=True, slots=True)
class SelectionExplanation:
    """Why a category has its current value."""
    value: DimensionValue
    votes: dict[str, int]
    is_neutral: bool
    explanation: str


def explain_selection(votes: Sequence[MaskVote], category: MaskCategory) -> SelectionExplanation:
    """
    Describe the tally behind a category's value.

    Examples: "1x quente", "quente vence com: 1 frio + 2 quente",
    "As seleções se cancelam: 2 frio + 2 quente = neutro".
    """
    counts = count_votes(votes, category)
    named = {side_value(category, side): n for side, n in counts.items()}
    value = calculate_category_value(votes, category)
    name = category_value_name(votes, category)
    tally = " + ".join(f"{n} {label}" for label, n in named.items() if n > 0)

    if value is DimensionValue.NEUTRAL:
        text = f"As seleções se cancelam: {tally} = {NEUTRAL_VALUE}"
    elif value is DimensionValue.UNSET:
        text = "Nenhuma seleção foi feita para esta categoria"
    elif all(n > 0 for n in named.values()):
        text = f"{name} vence com: {tally}"
    else:
        text = f"{named[name]}x {name}"

    return SelectionExplanation(
        value=value,
        votes=named,
        is_neutral=value is DimensionValue.NEUTRAL,
        explanation=text,
    )
