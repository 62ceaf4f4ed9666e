# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""Tests for the runtime serializers (record, summary)."""

import json

import pytest

from chromaseason import analyze, detect_season, detect_season_from_sliders
from chromaseason.runtime import (
    SerializerFormat,
    from_record,
    to_record,
    to_summary,
)

COLORS = {"iris": "#FF0000", "testa": "#E0B48C"}


@pytest.fixture
def analysis():
    return analyze(COLORS)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

class TestRecord:

    def test_numbers_only(self, analysis):
        record = to_record(analysis)
        assert set(record) == {"temperatura", "intensidade", "profundidade", "geral", "geralAvg"}
        assert record["temperatura"]["iris"] == 80.0
        assert all(isinstance(v, float) for v in record["intensidade"].values())

    def test_nulls_dropped(self):
        record = to_record(analyze({}))
        assert record == {"temperatura": {}, "intensidade": {}, "geral": {}, "geralAvg": {}}

    def test_json_safe(self, analysis):
        assert json.loads(json.dumps(to_record(analysis))) == to_record(analysis)

    def test_rebuild_with_colors(self, analysis):
        assert from_record(to_record(analysis), COLORS) == analysis

    def test_rebuild_recomputes_labels(self):
        record = {"temperatura": {"iris": 95.0}, "geral": {"temperatura": 95}}
        rebuilt = from_record(record)
        assert rebuilt.temperature[0].category == "Extremo Quente"
        assert rebuilt.temperature[0].hex == ""
        assert rebuilt.depth is None
        assert rebuilt.scores.temperatura == 95


# ---------------------------------------------------------------------------
# Summaries
# ---------------------------------------------------------------------------

class TestSummaryNatural:

    def test_scores_with_labels(self):
        result = analyze({"iris": "#FF0000"}, overrides={"profundidade": 40})
        text = to_summary(result)
        assert "## Análise de Coloração" in text
        assert "**Temperatura:** 80 (Neutro Quente)" in text
        assert "**Intensidade:** 100 (Extremo Brilhante)" in text
        assert "**Profundidade:** 40 (Neutro Escuro)" in text

    def test_missing_scores(self):
        text = to_summary(analyze({}), preamble=False)
        assert text.startswith("**Temperatura:** não definido")

    def test_valid_season(self, analysis):
        text = to_summary(analysis, detect_season("quente", "brilhante", "claro"))
        assert text.endswith("**Estação:** Primavera Brilhante")

    def test_slider_season(self, analysis):
        text = to_summary(analysis, detect_season_from_sliders(90, 90, 90))
        assert "**Estação:** Primavera Quente" in text

    def test_invalid_season_lists_suggestions(self, analysis):
        text = to_summary(analysis, detect_season("quente", "brilhante", "neutro"))
        assert "**Estação:** combinação inválida" in text
        assert "Profundidade" in text


class TestSummaryJSON:

    def test_parses(self, analysis):
        data = json.loads(to_summary(analysis, format=SerializerFormat.JSON))
        assert data["scores"]["temperatura"]["category"]
        assert "season" not in data

    def test_includes_season(self, analysis):
        result = detect_season("frio", "suave", "claro")
        data = json.loads(to_summary(analysis, result, format=SerializerFormat.JSON))
        assert data["season"]["fullName"] == "Verão Frio"

    def test_compact_vs_pretty(self, analysis):
        compact = to_summary(analysis, format=SerializerFormat.JSON)
        pretty = to_summary(analysis, format=SerializerFormat.JSON_PRETTY)
        assert "\n" not in compact
        assert "\n" in pretty
        assert json.loads(compact) == json.loads(pretty)

    def test_non_ascii_kept(self, analysis):
        result = detect_season("frio", "suave", "claro")
        assert "Verão" in to_summary(analysis, result, format=SerializerFormat.JSON)
