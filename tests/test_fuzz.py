# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Property-based fuzz tests using Hypothesis.

Verifies invariants hold for arbitrary inputs across the classifier,
the palette substitution and the detail sanitizer.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from edsgen import ColorGuess, PageAnalysis, StructureFlags
from edsgen.component_classifier import COMPONENT_TYPES, classify
from edsgen.emitter import apply_colors
from edsgen.problem_details import MAX_DETAIL_LENGTH, sanitize_detail

# ---------------------------------------------------------------------------
# Module-level strategies
# ---------------------------------------------------------------------------

HTML_LIKE = st.text(
    alphabet=st.characters(
        whitelist_categories=("L", "N", "P", "Z"),
        whitelist_characters="<>/=\"'&;#!.-{}: \n\t",
    ),
    min_size=0,
    max_size=3000,
)

FRAGMENTS = st.lists(
    st.sampled_from(
        [
            "<header>",
            "<nav>",
            '<div class="hero">',
            '<div class="card">',
            '<div class="gallery">',
            '<img src="a.png">',
            "<form>",
            '<div class="col-4">',
            "<footer>",
            "<style>body{color:#abcdef;font-family:Arial}</style>",
            "<title>T</title>",
            "</div>",
        ]
    ),
    max_size=40,
).map("".join)

HEX = st.from_regex(r"#[0-9a-f]{6}", fullmatch=True)


@pytest.mark.fuzz
class TestClassifierProperties:
    @given(html=HTML_LIKE)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_always_well_formed(self, html: str):
        analysis = classify(html, "https://example.com")
        assert isinstance(analysis, PageAnalysis)
        assert analysis.structure_flags == StructureFlags.from_components(analysis.detected_components)

    @given(html=FRAGMENTS)
    @settings(max_examples=200)
    def test_at_most_one_per_type(self, html: str):
        types = classify(html, "").component_types
        assert len(types) == len(set(types))
        assert set(types) <= set(COMPONENT_TYPES)

    @given(html=FRAGMENTS)
    @settings(max_examples=100)
    def test_deterministic(self, html: str):
        assert classify(html, "u") == classify(html, "u")

    @given(html=FRAGMENTS)
    @settings(max_examples=100)
    def test_counted_components_meet_threshold(self, html: str):
        for c in classify(html, "").detected_components:
            if c.type in ("cards", "columns"):
                assert c.occurrence_count is not None and c.occurrence_count >= 2
            if c.type == "gallery":
                assert c.occurrence_count is not None and c.occurrence_count >= 6


@pytest.mark.fuzz
class TestPaletteProperties:
    @given(primary=HEX, secondary=HEX, background=HEX, text=HEX)
    @settings(max_examples=100)
    def test_no_default_literals_remain(self, primary, secondary, background, text):
        css = "a{color:#0066cc} b{color:#6C757D} c{background:#ffffff} d{color:#333333}"
        colors = ColorGuess(primary=primary, secondary=secondary, background=background, text=text)
        assert apply_colors(css, colors) == (
            f"a{{color:{primary}}} b{{color:{secondary}}} c{{background:{background}}} d{{color:{text}}}"
        )


@pytest.mark.fuzz
class TestSanitizerProperties:
    @given(text=st.text(max_size=2000))
    @settings(max_examples=200)
    def test_length_capped(self, text: str):
        assert len(sanitize_detail(text)) <= MAX_DETAIL_LENGTH + 3

    @given(token=st.from_regex(r"[A-Za-z0-9]{8,40}", fullmatch=True))
    @settings(max_examples=100)
    def test_bearer_tokens_redacted(self, token: str):
        assert sanitize_detail(f"Bearer {token}") == "Bearer <redacted>"
