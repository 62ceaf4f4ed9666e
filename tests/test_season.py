# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""Tests for season resolution (exact match, 3-signal and 2-rule sliders)."""

import pytest

from chromaseason.resolve import (
    TWO_RULE_TABLE,
    VALID_COMBINATIONS,
    detect_season,
    detect_season_from_sliders,
    detect_season_from_sliders_two_rule,
    detect_season_from_votes,
    is_extreme,
    normalize_extremes,
    season_variants,
    toggle_vote,
    two_rule_band,
)
from chromaseason.schema import (
    Depth,
    Intensity,
    Season,
    Side,
    Temperature,
    Variant,
)


class TestExactMatch:

    @pytest.mark.parametrize("triple,season,variant", [
        (("quente", "brilhante", "claro"), Season.SPRING, Variant.BRIGHT),
        (("quente", "suave", "escuro"), Season.AUTUMN, Variant.WARM),
        (("frio", "suave", "claro"), Season.SUMMER, Variant.COOL),
        (("frio", "brilhante", "escuro"), Season.WINTER, Variant.COOL),
    ])
    def test_valid_triples(self, triple, season, variant):
        result = detect_season(*triple)
        assert result.valid
        assert result.season is season
        assert result.variant is variant
        assert result.suggestions is None

    def test_spring_bright_dict(self):
        assert detect_season("quente", "brilhante", "claro").to_dict() == {
            "valid": True,
            "season": "Primavera",
            "variant": "Brilhante",
            "fullName": "Primavera Brilhante",
        }

    def test_accepts_enums(self):
        result = detect_season(Temperature.COOL, Intensity.SOFT, Depth.LIGHT)
        assert result.full_name == "Verão Frio"

    def test_exactly_four_combinations(self):
        assert len(VALID_COMBINATIONS) == 4


class TestNeutralSuggestions:

    def test_neutral_depth_is_named(self):
        result = detect_season("quente", "brilhante", "neutro")
        assert not result.valid
        assert result.has_neutral
        assert any("Profundidade" in line for line in result.suggestions)

    def test_single_neutral_hints(self):
        suggestions = detect_season("neutro", "suave", "claro").suggestions
        assert "Temperatura: **neutro (canceladas)**" in suggestions
        assert "❌ **Temperatura** está neutra (suas seleções se cancelam)" in suggestions
        assert any("**Quentes**" in line for line in suggestions)
        assert any("**Frias**" in line for line in suggestions)

    def test_unset_dimension(self):
        result = detect_season("quente", None, "claro")
        assert result.has_neutral
        assert "Intensidade: **não definida**" in result.suggestions

    def test_multiple_neutral(self):
        suggestions = detect_season("neutro", "neutro", "claro").suggestions
        assert "❌ Múltiplos parâmetros estão neutros: **Temperatura, Intensidade**" in suggestions
        assert "  • **Intensidade**: selecione mais Brilhantes ou Suaves" in suggestions

    def test_unknown_string_is_unset(self):
        assert detect_season("morno", "suave", "claro").has_neutral


class TestMismatchSuggestions:

    def test_one_flip_options_first(self):
        suggestions = detect_season("quente", "brilhante", "escuro").suggestions
        assert suggestions[:3] == (
            "**Primavera**: mude **Profundidade** para **Claro**",
            "**Outono**: mude **Intensidade** para **Suave**",
            "**Inverno**: mude **Temperatura** para **Frio**",
        )

    def test_alternatives_section(self):
        suggestions = detect_season("quente", "brilhante", "escuro").suggestions
        assert suggestions[3:5] == ("", "**Outras opções:**")
        assert suggestions[5] == (
            "**Verão**: mude **Temperatura** para **Frio**, "
            "**Intensidade** para **Suave**, **Profundidade** para **Claro**"
        )

    def test_not_neutral(self):
        result = detect_season("frio", "suave", "escuro")
        assert not result.valid
        assert not result.has_neutral


class TestFromVotes:

    def test_votes_resolve_season(self):
        votes = ()
        for mask_id, side in [("temperatura", Side.A), ("intensidade", Side.A), ("profundidade", Side.B)]:
            votes = toggle_vote(votes, mask_id, side)
        assert detect_season_from_votes(votes).full_name == "Verão Frio"

    def test_cancelled_votes_are_neutral(self):
        votes = ()
        for mask_id, side in [("temperatura", Side.A), ("temperatura2", Side.B)]:
            votes = toggle_vote(votes, mask_id, side)
        result = detect_season_from_votes(votes)
        assert result.has_neutral
        assert "Temperatura: **neutro (canceladas)**" in result.suggestions


class TestThreeSignalSliders:

    def test_all_high_is_spring(self):
        result = detect_season_from_sliders(90, 90, 90)
        assert result.season is Season.SPRING
        # equal distances keep temperature as the most extreme
        assert result.variant is Variant.WARM
        assert result.full_name == "Primavera Quente"

    def test_variant_from_most_extreme(self):
        # intensity and depth pick (bright, dark), so temperature flips to cool
        result = detect_season_from_sliders(60, 95, 30)
        assert result.season is Season.WINTER
        assert result.variant is Variant.BRIGHT

    def test_third_side_is_derived(self):
        # intensity and depth decide (bright, dark); temperature must be cool
        result = detect_season_from_sliders(50, 80, 20)
        assert result.full_name == "Inverno Brilhante"

    def test_cool_soft(self):
        result = detect_season_from_sliders(5, 30, 55)
        assert result.full_name == "Verão Frio"

    def test_depth_extreme_light(self):
        result = detect_season_from_sliders(70, 40, 98)
        assert result.full_name == "Primavera Clara"

    def test_missing_value(self):
        assert detect_season_from_sliders(None, 50, 50) is None

    @pytest.mark.parametrize("values", [(0, 0, 0), (100, 0, 100), (50, 50, 50), (25, 75, 40)])
    def test_always_resolves(self, values):
        assert detect_season_from_sliders(*values) is not None


class TestTwoRule:

    def test_bands(self):
        assert two_rule_band(0) == 0
        assert two_rule_band(12.49) == 0
        assert two_rule_band(12.5) == 1
        assert two_rule_band(50) == 1
        assert two_rule_band(50.01) == 2
        assert two_rule_band(87.5) == 2
        assert two_rule_band(87.51) == 3

    def test_is_extreme(self):
        assert is_extreme(5)
        assert is_extreme(95)
        assert not is_extreme(12.5)
        assert not is_extreme(87.5)

    def test_normalize_keeps_single_extreme(self):
        assert normalize_extremes(95, 40) == (95, 40)

    def test_normalize_moves_weaker(self):
        assert normalize_extremes(95, 10) == (95, 25.0)
        assert normalize_extremes(8, 2) == (25.0, 2)

    def test_normalize_tie_moves_depth(self):
        assert normalize_extremes(5, 95) == (5, 75.0)

    def test_double_extreme_resolves(self):
        result = detect_season_from_sliders_two_rule(5, 95)
        assert result is not None
        assert result.full_name == "Verão Frio"

    def test_warm_light(self):
        assert detect_season_from_sliders_two_rule(95, 60).full_name == "Primavera Quente"

    def test_dark(self):
        assert detect_season_from_sliders_two_rule(70, 5).full_name == "Outono Escuro"

    def test_light_spring_spelling(self):
        assert detect_season_from_sliders_two_rule(60, 95).full_name == "Primavera Clara"

    def test_unpopulated_cell(self):
        assert detect_season_from_sliders_two_rule(30, 30) is None
        assert detect_season_from_sliders_two_rule(70, 70) is None

    def test_missing_value(self):
        assert detect_season_from_sliders_two_rule(None, 50) is None

    def test_table_has_ten_cells(self):
        assert len(TWO_RULE_TABLE) == 10

    def test_double_extreme_cells_unreachable(self):
        for cell in [(0, 0), (0, 3), (3, 0), (3, 3)]:
            assert cell not in TWO_RULE_TABLE


class TestSeasonVariants:

    def test_variants(self):
        assert season_variants("Verão") == (Variant.COOL, Variant.SOFT, Variant.LIGHT)
        assert season_variants(Season.WINTER) == (Variant.COOL, Variant.BRIGHT, Variant.DARK)

    def test_unknown(self):
        assert season_variants("Monção") == ()


class TestDeterminism:

    def test_repeated_calls_identical(self):
        for _ in range(3):
            assert detect_season("quente", "neutro", "claro") == detect_season("quente", "neutro", "claro")
            assert detect_season_from_sliders(33, 71, 12) == detect_season_from_sliders(33, 71, 12)
            assert detect_season_from_sliders_two_rule(5, 95) == detect_season_from_sliders_two_rule(5, 95)
