# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""edsgen: AEM Edge Delivery Services block scaffolding from live pages.

Fetches a page, sniffs its markup for UI component archetypes and emits
block code (JS decorator + CSS) for each detected component:
- PageAnalysis: classifier output (components, palette, typography)
- GeneratedFile: one emitted file (name + text)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class Confidence(StrEnum):
    """Rule-intrinsic specificity label, not a statistical measure."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


DEFAULT_PRIMARY = "#0066cc"
DEFAULT_SECONDARY = "#6c757d"
DEFAULT_BACKGROUND = "#ffffff"
DEFAULT_TEXT = "#333333"

DEFAULT_FONT_FAMILY = "system-ui, -apple-system, sans-serif"
DEFAULT_FONT_SIZE = "16px"
DEFAULT_LINE_HEIGHT = "1.6"


@dataclass(frozen=True, slots=True)
class DetectedComponent:
    """A single UI component type found on a page."""

    type: str  # header, navigation, hero, cards, ...
    name: str  # human-readable display name
    confidence: Confidence
    block_id: str  # block folder / CSS class the emitter uses
    occurrence_count: int | None = None  # only for counted rules


@dataclass(frozen=True, slots=True)
class StructureFlags:
    has_header: bool = False
    has_navigation: bool = False
    has_hero: bool = False
    has_footer: bool = False

    @classmethod
    def from_components(cls, components: tuple[DetectedComponent, ...]) -> StructureFlags:
        """Derive flags from detected component types."""
        types = {c.type for c in components}
        return cls(
            has_header="header" in types,
            has_navigation="navigation" in types,
            has_hero="hero" in types,
            has_footer="footer" in types,
        )


@dataclass(frozen=True, slots=True)
class ColorGuess:
    primary: str = DEFAULT_PRIMARY
    secondary: str = DEFAULT_SECONDARY
    background: str = DEFAULT_BACKGROUND
    text: str = DEFAULT_TEXT


@dataclass(frozen=True, slots=True)
class TypographyGuess:
    font_family: str = DEFAULT_FONT_FAMILY
    base_font_size: str = DEFAULT_FONT_SIZE
    line_height: str = DEFAULT_LINE_HEIGHT


@dataclass(frozen=True, slots=True)
class PageAnalysis:
    """Structured, confidence-annotated component inventory of one page."""

    source_url: str
    title: str = ""
    description: str = ""
    detected_components: tuple[DetectedComponent, ...] = ()
    structure_flags: StructureFlags = field(default_factory=StructureFlags)
    color_guess: ColorGuess = field(default_factory=ColorGuess)
    typography_guess: TypographyGuess = field(default_factory=TypographyGuess)
    layout_patterns: tuple[str, ...] = ()  # grid-layout, flexbox-layout, responsive-design
    sections: tuple[str, ...] = ()  # section-1, section-2, ...

    @property
    def component_types(self) -> tuple[str, ...]:
        return tuple(c.type for c in self.detected_components)

    def has(self, component_type: str) -> bool:
        return any(c.type == component_type for c in self.detected_components)


@dataclass(frozen=True, slots=True)
class GeneratedFile:
    """One emitted file, not yet written to disk."""

    file_name: str
    content: str
