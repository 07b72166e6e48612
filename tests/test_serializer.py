# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Tests for PageAnalysis JSON and text rendering."""

from __future__ import annotations

import json

from edsgen.component_classifier import classify
from edsgen.serializer import analysis_to_dict, to_json, to_text


class TestAnalysisToDict:
    def test_keys(self, page_html: str):
        d = analysis_to_dict(classify(page_html, "https://acme.test/"))
        assert set(d) == {
            "source_url",
            "title",
            "description",
            "detected_components",
            "structure_flags",
            "color_guess",
            "typography_guess",
            "layout_patterns",
            "sections",
        }

    def test_occurrence_count_only_when_counted(self, page_html: str):
        comps = analysis_to_dict(classify(page_html, ""))["detected_components"]
        header = next(c for c in comps if c["type"] == "header")
        cards = next(c for c in comps if c["type"] == "cards")
        assert "occurrence_count" not in header
        assert cards["occurrence_count"] == 3
        assert cards["confidence"] == "medium"


class TestToJson:
    def test_round_trips_through_json(self, page_html: str):
        data = json.loads(to_json(classify(page_html, "https://acme.test/")))
        assert data["title"] == "Acme & Co"
        assert data["structure_flags"]["has_hero"] is True
        assert data["layout_patterns"] == ["grid-layout", "responsive-design"]
        assert data["sections"] == ["section-1"]

    def test_non_ascii_preserved(self):
        out = to_json(classify("<title>Café</title>", ""))
        assert "Café" in out


class TestToText:
    def test_table(self, page_html: str):
        text = to_text(classify(page_html, "https://acme.test/"))
        assert "URL: https://acme.test/" in text
        assert "Type" in text and "Confidence" in text
        assert "Card Grid" in text
        assert "Colors: primary=#112233" in text
        assert "Layout: grid-layout, responsive-design" in text

    def test_empty(self):
        text = to_text(classify("", ""))
        assert "No components detected." in text
        assert "URL: -" in text
        assert "Layout: -" in text
