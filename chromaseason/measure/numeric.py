# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""Rounding helpers (half away from zero for positives, like display sliders)."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 rounding up (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def round2(value: float) -> float:
    """Round to 2 decimal places, .005 rounding up."""
    return math.floor(value * 100 + 0.5) / 100


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))
