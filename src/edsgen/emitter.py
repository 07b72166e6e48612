# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Turn detected component types into EDS block files.

Library blocks are emitted as-is, with the default palette literals in
their CSS swapped for the page's detected colors.  Types the library does
not know get the generic block template.
"""

from __future__ import annotations

import logging
import re

from . import (
    DEFAULT_BACKGROUND,
    DEFAULT_PRIMARY,
    DEFAULT_SECONDARY,
    DEFAULT_TEXT,
    ColorGuess,
    GeneratedFile,
    PageAnalysis,
)
from .block_library import get_block
from .errors import InvalidNameError
from .templates import block_template, to_class_name

logger = logging.getLogger(__name__)

# Name fragments that switch on optional features of the generic template
_BUTTON_HINTS = ("hero", "cta")
_LAZY_HINTS = ("carousel", "gallery", "image")

_PALETTE_RE = re.compile(
    "|".join(re.escape(c) for c in (DEFAULT_PRIMARY, DEFAULT_SECONDARY, DEFAULT_BACKGROUND, DEFAULT_TEXT)),
    re.IGNORECASE,
)


def apply_colors(css: str, colors: ColorGuess) -> str:
    """Replace each default palette literal with its slot in *colors*.

    Single pass: a substituted value is never itself re-substituted.
    """
    mapping = {
        DEFAULT_PRIMARY: colors.primary,
        DEFAULT_SECONDARY: colors.secondary,
        DEFAULT_BACKGROUND: colors.background,
        DEFAULT_TEXT: colors.text,
    }
    return _PALETTE_RE.sub(lambda m: mapping[m.group(0).lower()], css)


def emit(component_type: str, context_colors: ColorGuess | None = None) -> list[GeneratedFile]:
    """Block files for one component type: ``<type>.js`` and ``<type>.css``."""
    if not component_type or not component_type.strip():
        raise InvalidNameError("Component type is required.")

    block = get_block(component_type)
    if block is not None:
        name = block.name
        js, css = block.js, block.css
    else:
        name = to_class_name(component_type)
        logger.debug("No library block for %r; using generic template", component_type)
        files = block_template(
            component_type,
            has_buttons=any(h in name for h in _BUTTON_HINTS),
            lazy_load=any(h in name for h in _LAZY_HINTS),
            responsive=True,
        )
        js, css = files.js, files.css

    if context_colors is not None:
        css = apply_colors(css, context_colors)

    return [
        GeneratedFile(file_name=f"{name}.js", content=js),
        GeneratedFile(file_name=f"{name}.css", content=css),
    ]


def emit_analysis(analysis: PageAnalysis) -> dict[str, list[GeneratedFile]]:
    """Emit every detected component, keyed by block id, in detection order."""
    return {c.block_id: emit(c.type, analysis.color_guess) for c in analysis.detected_components}
