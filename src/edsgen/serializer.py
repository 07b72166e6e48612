# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""PageAnalysis serialization: JSON and plain-text report formats.

- JSON: snake_case dict for programmatic consumption
- Text: tabulated component inventory for terminals
"""

from __future__ import annotations

import json
from typing import Any

from tabulate import tabulate

from . import PageAnalysis


def analysis_to_dict(analysis: PageAnalysis) -> dict[str, Any]:
    """Convert a PageAnalysis into JSON-safe primitives."""
    return {
        "source_url": analysis.source_url,
        "title": analysis.title,
        "description": analysis.description,
        "detected_components": [
            {
                "type": c.type,
                "name": c.name,
                "confidence": str(c.confidence),
                "block_id": c.block_id,
                **({"occurrence_count": c.occurrence_count} if c.occurrence_count is not None else {}),
            }
            for c in analysis.detected_components
        ],
        "structure_flags": {
            "has_header": analysis.structure_flags.has_header,
            "has_navigation": analysis.structure_flags.has_navigation,
            "has_hero": analysis.structure_flags.has_hero,
            "has_footer": analysis.structure_flags.has_footer,
        },
        "color_guess": {
            "primary": analysis.color_guess.primary,
            "secondary": analysis.color_guess.secondary,
            "background": analysis.color_guess.background,
            "text": analysis.color_guess.text,
        },
        "typography_guess": {
            "font_family": analysis.typography_guess.font_family,
            "base_font_size": analysis.typography_guess.base_font_size,
            "line_height": analysis.typography_guess.line_height,
        },
        "layout_patterns": list(analysis.layout_patterns),
        "sections": list(analysis.sections),
    }


def to_json(analysis: PageAnalysis, indent: int = 2) -> str:
    """Serialize PageAnalysis to a JSON string."""
    return json.dumps(analysis_to_dict(analysis), ensure_ascii=False, indent=indent)


def to_text(analysis: PageAnalysis) -> str:
    """Human-readable report: metadata header plus a component table."""
    lines = [
        f"URL: {analysis.source_url or '-'}",
        f"Title: {analysis.title or '-'}",
        f"Description: {analysis.description or '-'}",
        "",
    ]
    if analysis.detected_components:
        rows = [
            [c.type, c.name, str(c.confidence), "" if c.occurrence_count is None else c.occurrence_count]
            for c in analysis.detected_components
        ]
        lines.append(tabulate(rows, headers=["Type", "Name", "Confidence", "Count"], tablefmt="simple"))
    else:
        lines.append("No components detected.")

    colors = analysis.color_guess
    typo = analysis.typography_guess
    lines += [
        "",
        f"Colors: primary={colors.primary} secondary={colors.secondary} "
        f"background={colors.background} text={colors.text}",
        f"Typography: {typo.font_family} / {typo.base_font_size} / {typo.line_height}",
        f"Layout: {', '.join(analysis.layout_patterns) or '-'}",
    ]
    return "\n".join(lines)
