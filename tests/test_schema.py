# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""Tests for schema types: enums, records and result invariants."""

import pytest

from chromaseason.schema import (
    CompositeScores,
    Depth,
    Dimension,
    FieldId,
    Intensity,
    PigmentAnalysis,
    SampledColor,
    Season,
    SeasonResult,
    SliderSeason,
    Temperature,
    Variant,
    coerce_dimension,
    coerce_enum,
    coerce_field,
    color_season_name,
)


class TestEnums:

    def test_nine_fields(self):
        assert len(FieldId) == 9

    def test_field_labels(self):
        assert FieldId.UNDER_EYE.label == "Cavidade Ocular"
        assert FieldId.HAIR_ROOT.value == "raiz_cabelo"

    def test_dimension_title(self):
        assert Dimension.DEPTH.title == "Profundidade"

    def test_color_season_names(self):
        assert color_season_name(Season.SUMMER, Variant.SOFT) == "Verão Suave"
        assert color_season_name(Season.SPRING, Variant.LIGHT) == "Primavera Clara"
        assert color_season_name(Season.SUMMER, Variant.LIGHT) == "Verão Claro"

    def test_invalid_pair_has_no_name(self):
        assert color_season_name(Season.SPRING, Variant.DARK) is None


class TestCoercion:

    def test_by_value(self):
        assert coerce_field("testa") is FieldId.FOREHEAD
        assert coerce_dimension("intensidade") is Dimension.INTENSITY

    def test_case_insensitive_and_by_name(self):
        assert coerce_enum(Temperature, "QUENTE") is Temperature.WARM
        assert coerce_enum(Temperature, "WARM") is Temperature.WARM

    def test_across_enums(self):
        assert coerce_enum(Intensity, Temperature.NEUTRAL) is Intensity.NEUTRAL

    def test_unknown_is_none(self):
        assert coerce_enum(Depth, "médio") is None
        assert coerce_enum(Depth, 5) is None
        assert coerce_field(None) is None


class TestSampledColor:

    def test_dict_roundtrip(self):
        color = SampledColor(FieldId.IRIS, "#6B4423")
        assert color.to_dict() == {"field": "iris", "hex": "#6B4423"}
        assert SampledColor.from_dict(color.to_dict()) == color

    def test_immutable(self):
        color = SampledColor(FieldId.IRIS, "#6B4423")
        with pytest.raises(AttributeError):
            color.hex = "#000000"


class TestCompositeScores:

    def test_defaults_are_none(self):
        scores = CompositeScores()
        assert all(v is None for v in scores.to_dict().values())

    def test_get(self):
        scores = CompositeScores(temperatura=72)
        assert scores.get(Dimension.TEMPERATURE) == 72
        assert scores.get(Dimension.DEPTH) is None

    def test_from_dict_tolerates_none(self):
        assert CompositeScores.from_dict(None) == CompositeScores()

    def test_empty_analysis_dict(self):
        data = PigmentAnalysis().to_dict()
        assert data["profundidade"] is None
        assert data["temperatura"] == {}
        assert set(data) == {"temperatura", "intensidade", "profundidade", "geral", "geralAvg"}


class TestSeasonResult:

    def test_valid_requires_season(self):
        with pytest.raises(ValueError, match="requires season"):
            SeasonResult(valid=True)

    def test_valid_rejects_suggestions(self):
        with pytest.raises(ValueError, match="suggestions"):
            SeasonResult(valid=True, season=Season.AUTUMN, variant=Variant.WARM, suggestions=("x",))

    def test_invalid_rejects_season(self):
        with pytest.raises(ValueError, match="cannot carry a season"):
            SeasonResult(valid=False, season=Season.AUTUMN)

    def test_dict_roundtrip(self):
        result = SeasonResult(valid=False, suggestions=("a", "b"), has_neutral=True)
        assert result.to_dict() == {"valid": False, "suggestions": ["a", "b"], "hasNeutral": True}
        assert SeasonResult.from_dict(result.to_dict()) == result

    def test_full_name(self):
        result = SeasonResult(valid=True, season=Season.WINTER, variant=Variant.DARK)
        assert result.full_name == "Inverno Escuro"
        assert SeasonResult(valid=False).full_name is None


class TestSliderSeason:

    def test_rejects_foreign_variant(self):
        with pytest.raises(ValueError, match="not a variant"):
            SliderSeason(Season.SUMMER, Variant.WARM)

    def test_to_dict(self):
        assert SliderSeason(Season.AUTUMN, Variant.SOFT).to_dict() == {
            "season": "Outono",
            "variant": "Suave",
            "colorSeason": "Outono Suave",
        }
