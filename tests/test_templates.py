# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Tests for the fixed-format block, component and page templates."""

from __future__ import annotations

import pytest

from edsgen.errors import InvalidInputError, InvalidNameError
from edsgen.templates import block_template, component_template, page_template, to_class_name


class TestToClassName:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Hero", "hero"),
            ("Product  Card", "product-card"),
            ("  Side\tBar ", "side-bar"),
        ],
    )
    def test_normalizes(self, name: str, expected: str):
        assert to_class_name(name) == expected

    @pytest.mark.parametrize("name", ["", "  "])
    def test_empty(self, name: str):
        with pytest.raises(InvalidNameError):
            to_class_name(name)

    @pytest.mark.parametrize("name", ["../x", "a/b", "a\\b", "..", " . "])
    def test_rejects_path_like_names(self, name: str):
        with pytest.raises(InvalidNameError, match="path separators"):
            to_class_name(name)

    def test_dots_inside_name_allowed(self):
        assert to_class_name("v1.2 Promo") == "v1.2-promo"


class TestBlockTemplate:
    def test_defaults(self):
        files = block_template("Feature List")
        assert files.class_name == "feature-list"
        assert "export default function decorate(block)" in files.js
        assert "feature-list-cell" in files.js
        assert "@media (max-width: 768px)" in files.css
        assert "a.button" not in files.css

    def test_buttons(self):
        files = block_template("promo", has_buttons=True)
        assert "a.button" in files.js
        assert ".promo a.button:hover" in files.css

    def test_lazy_load(self):
        assert "IntersectionObserver" in block_template("feed", lazy_load=True).js

    def test_not_responsive(self):
        assert "@media" not in block_template("feed", responsive=False).css


class TestComponentTemplate:
    def test_functional(self):
        js = component_template("slider")
        assert js.startswith("export default function Slider(element, options = {})")
        assert "element.dataset.component = 'slider'" in js

    def test_class(self):
        js = component_template("modal", "class")
        assert js.startswith("export default class Modal {")
        assert "destroy()" in js

    def test_unknown_kind(self):
        with pytest.raises(InvalidInputError, match="Unknown component type"):
            component_template("modal", "hook")

    def test_empty_name(self):
        with pytest.raises(InvalidNameError):
            component_template("")

    def test_path_like_name(self):
        with pytest.raises(InvalidNameError):
            component_template("a/b", "class")


class TestPageTemplate:
    def test_links_assets(self):
        page = page_template("Landing Page")
        assert page.startswith("<!DOCTYPE html>")
        assert '<link rel="stylesheet" href="/styles/styles.css">' in page
        assert '<script type="module" src="/scripts/scripts.js"></script>' in page
        assert '<div class="landing-page">' in page

    def test_title_escaped(self):
        assert "<title>Q&amp;A</title>" in page_template("Q&A")
