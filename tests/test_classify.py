# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""Tests for band classification of composite scores."""

import pytest

from chromaseason.measure.calibration import BAND_EDGES, BAND_TABLES
from chromaseason.measure.classify import (
    FALLBACK_COLOR,
    UNSET_COLOR,
    classify_band,
    get_label_category,
    get_label_color,
)
from chromaseason.schema import Dimension


class TestBandTables:

    def test_five_bands_per_dimension(self):
        for dimension in Dimension:
            assert len(BAND_TABLES[dimension]) == 5

    def test_bands_cover_scale(self):
        for bands in BAND_TABLES.values():
            assert bands[0].low == 0.0
            assert bands[-1].high == 100.0
            for left, right in zip(bands, bands[1:]):
                assert left.high == right.low

    def test_edges(self):
        assert BAND_EDGES == (0.0, 12.5, 47.0, 53.0, 87.5, 100.0)


class TestLabelCategory:

    def test_none_is_empty(self):
        assert get_label_category(None) == ""

    @pytest.mark.parametrize("score,label", [
        (0, "Extremo Frio"),
        (12.5, "Extremo Frio"),
        (12.51, "Neutro Frio"),
        (47, "Neutro Frio"),
        (50, "Neutro Puro"),
        (53, "Neutro Puro"),
        (60, "Neutro Quente"),
        (87.5, "Neutro Quente"),
        (100, "Extremo Quente"),
    ])
    def test_temperature(self, score, label):
        assert get_label_category(score, Dimension.TEMPERATURE) == label

    def test_intensity(self):
        assert get_label_category(90, Dimension.INTENSITY) == "Extremo Brilhante"
        assert get_label_category(20, Dimension.INTENSITY) == "Neutro Suave"

    def test_depth_by_name(self):
        assert get_label_category(30, "profundidade") == "Neutro Escuro"
        assert get_label_category(95, "profundidade") == "Extremo Claro"

    def test_out_of_range_is_neutral(self):
        assert get_label_category(150) == "Neutro Puro"
        assert classify_band(150) is None


class TestLabelColor:

    def test_none(self):
        assert get_label_color(None) == UNSET_COLOR == "#d3d3d3"

    def test_band_colors(self):
        assert get_label_color(0) == "#8b5cf6"
        assert get_label_color(30) == "#3b82f6"
        assert get_label_color(50) == "#33d221"
        assert get_label_color(70) == "#f97316"
        assert get_label_color(95) == "#dc2626"

    def test_out_of_range(self):
        assert get_label_color(-5) == FALLBACK_COLOR
