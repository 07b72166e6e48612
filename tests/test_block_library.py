# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Tests for the ready-made block library."""

from __future__ import annotations

import pytest

from edsgen.block_library import (
    BLOCK_LIBRARY,
    CATEGORIES,
    blocks_in_category,
    get_block,
    list_categories,
    search_blocks,
)
from edsgen.component_classifier import COMPONENT_TYPES
from edsgen.errors import InvalidInputError

PALETTE = ("#0066cc", "#6c757d", "#ffffff", "#333333")


class TestCoverage:
    def test_every_component_type_has_a_block(self):
        missing = [t for t in COMPONENT_TYPES if t not in BLOCK_LIBRARY]
        assert missing == []

    def test_extra_blocks(self):
        for name in ("breadcrumb", "search", "button"):
            assert name in BLOCK_LIBRARY

    @pytest.mark.parametrize("name", sorted(BLOCK_LIBRARY))
    def test_block_shape(self, name: str):
        block = BLOCK_LIBRARY[name]
        assert block.name == name
        assert block.category in CATEGORIES
        assert "export default function decorate(block)" in block.js
        assert f".{name}" in block.css
        assert any(color in block.css for color in PALETTE)


class TestLookup:
    def test_get_block(self):
        assert get_block("Hero").name == "hero"
        assert get_block(" tabs ").name == "tabs"

    def test_get_unknown(self):
        assert get_block("pricing") is None
        assert get_block("") is None

    def test_list_categories(self):
        counts = list_categories()
        assert list(counts) == list(CATEGORIES)
        assert sum(counts.values()) == len(BLOCK_LIBRARY)
        assert counts["form"] == 1

    def test_blocks_in_category(self):
        names = {b.name for b in blocks_in_category("container")}
        assert names == {"carousel", "tabs", "accordion", "columns"}

    def test_unknown_category(self):
        with pytest.raises(InvalidInputError, match="Unknown category"):
            blocks_in_category("widgets")

    def test_search_by_name(self):
        assert [b.name for b in search_blocks("CAROUSEL")] == ["carousel"]

    def test_search_by_description(self):
        names = {b.name for b in search_blocks("navigation")}
        assert {"navigation", "breadcrumb"} <= names

    def test_empty_search_returns_all(self):
        assert len(search_blocks("")) == len(BLOCK_LIBRARY)

    def test_search_no_match(self):
        assert search_blocks("zzz-nothing") == []
