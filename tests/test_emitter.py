# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Tests for edsgen.emitter: library blocks, palette substitution, fallback."""

from __future__ import annotations

import pytest

from edsgen import ColorGuess
from edsgen.block_library import BLOCK_LIBRARY
from edsgen.component_classifier import classify
from edsgen.emitter import apply_colors, emit, emit_analysis
from edsgen.errors import InvalidNameError

SITE_COLORS = ColorGuess(primary="#112233", secondary="#445566", background="#000000", text="#eeeeee")


class TestLibraryBlocks:
    def test_file_names(self):
        files = emit("hero")
        assert [f.file_name for f in files] == ["hero.js", "hero.css"]

    def test_content_is_library_content(self):
        js, css = emit("carousel")
        assert js.content == BLOCK_LIBRARY["carousel"].js
        assert css.content == BLOCK_LIBRARY["carousel"].css

    def test_case_insensitive_lookup(self):
        assert emit("Cards")[0].file_name == "cards.js"

    def test_colors_substituted(self):
        css = emit("hero", SITE_COLORS)[1].content
        for default in ("#0066cc", "#6c757d", "#ffffff", "#333333"):
            assert default not in css.lower()
        assert "#112233" in css

    def test_js_untouched_by_colors(self):
        assert emit("tabs", SITE_COLORS)[0].content == emit("tabs")[0].content


class TestApplyColors:
    def test_case_insensitive(self):
        out = apply_colors("a{color:#0066CC}", ColorGuess(primary="#abcdef"))
        assert out == "a{color:#abcdef}"

    def test_single_pass_swap(self):
        swapped = ColorGuess(primary="#333333", text="#0066cc")
        out = apply_colors("a{color:#0066cc;background:#333333}", swapped)
        assert out == "a{color:#333333;background:#0066cc}"

    def test_defaults_are_identity(self):
        css = BLOCK_LIBRARY["footer"].css
        assert apply_colors(css, ColorGuess()) == css


class TestFallback:
    def test_unknown_type_uses_generic_template(self):
        js, css = emit("Pricing Table")
        assert js.file_name == "pricing-table.js"
        assert css.file_name == "pricing-table.css"
        assert "TODO" in js.content
        assert ".pricing-table > div" in css.content
        assert "@media (max-width: 768px)" in css.content

    def test_button_hint(self):
        css = emit("hero-banner")[1].content
        assert "a.button" in css

    @pytest.mark.parametrize("name", ["image-strip", "photo-gallery-wall"])
    def test_lazy_hint(self, name: str):
        js = emit(name)[0].content
        assert "IntersectionObserver" in js

    def test_plain_unknown_has_no_extras(self):
        js, css = emit("team")
        assert "IntersectionObserver" not in js.content
        assert "a.button" not in css.content

    def test_fallback_colors_substituted(self):
        css = emit("cta-strip", SITE_COLORS)[1].content
        assert "#112233" in css
        assert "#445566" in css

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name(self, name: str):
        with pytest.raises(InvalidNameError):
            emit(name)


class TestEmitAnalysis:
    def test_detection_order(self, page_html: str):
        analysis = classify(page_html, "")
        emitted = emit_analysis(analysis)
        assert list(emitted) == list(analysis.component_types)

    def test_uses_detected_palette(self, page_html: str):
        analysis = classify(page_html, "")
        css = emit_analysis(analysis)["cards"][1].content
        assert "#112233" in css
        assert "#0066cc" not in css

    def test_empty_analysis(self):
        assert emit_analysis(classify("", "")) == {}
