# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Ordered-rule component classifier: regex over raw HTML.

Scans page markup as text (no DOM parser) for structural and visual cues
and returns a deduplicated, confidence-annotated component inventory plus
page metadata and a coarse palette/typography guess.

Rules are evaluated once each, in table order.  The first qualifying rule
registers its component type; later rules of the same type are ignored,
so table order is the tie-break policy:
  1. page chrome   – header, navigation, hero, footer
  2. grids         – cards
  3. containers    – carousel, accordion, tabs
  4. the rest      – form, columns, gallery, testimonials, cta

Confidence is a static property of the rule (specificity), never derived
from match counts.
"""

from __future__ import annotations

import html as _html
import logging
import re
from dataclasses import dataclass

from . import (
    ColorGuess,
    Confidence,
    DetectedComponent,
    PageAnalysis,
    StructureFlags,
    TypographyGuess,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PatternRule:
    """A single detection rule for one component type."""

    name: str
    pattern: re.Pattern[str]
    component_type: str
    display_name: str
    confidence: Confidence
    min_count: int = 1
    # When set, the threshold applies to this pattern's matches instead
    # (``pattern`` must still match at least once).
    count_pattern: re.Pattern[str] | None = None
    record_count: bool = False


# ---------------------------------------------------------------------------
# Pattern helpers
# ---------------------------------------------------------------------------


def _class_re(fragment: str) -> re.Pattern[str]:
    """Match *fragment* anywhere inside a quoted ``class`` attribute value.

    The fragment is tested by lookahead and the value consumed possessively,
    so an unterminated value is scanned once rather than once per fragment hit.
    """
    return re.compile(rf"""class=["'](?=[^"']*{fragment})[^"']*+["']""", re.IGNORECASE)


def _tag_re(tag: str) -> re.Pattern[str]:
    """Match the opening of ``<tag`` (not ``<tagname``)."""
    return re.compile(rf"<{tag}[\s>]", re.IGNORECASE)


_IMG_RE = re.compile(r"<img\b", re.IGNORECASE)

# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------

_H = Confidence.HIGH
_M = Confidence.MEDIUM

RULES: tuple[PatternRule, ...] = (
    # ---- page chrome ----
    PatternRule("tag_header", _tag_re("header"), "header", "Header", _H),
    PatternRule("class_header", _class_re("header"), "header", "Header", _H),
    PatternRule("tag_nav", _tag_re("nav"), "navigation", "Navigation", _H),
    PatternRule("class_nav", _class_re("nav"), "navigation", "Navigation", _H),
    PatternRule("class_hero", _class_re("hero"), "hero", "Hero Section", _H),
    PatternRule("class_banner", _class_re("banner"), "hero", "Hero Section", _H),
    PatternRule("class_jumbotron", _class_re("jumbotron"), "hero", "Hero Section", _H),
    PatternRule("class_splash", _class_re("splash"), "hero", "Hero Section", _H),
    PatternRule("tag_footer", _tag_re("footer"), "footer", "Footer", _H),
    PatternRule("class_footer", _class_re("footer"), "footer", "Footer", _H),
    # ---- grids ----
    PatternRule("class_card", _class_re("cards?"), "cards", "Card Grid", _M, min_count=2, record_count=True),
    PatternRule("class_product", _class_re("products?"), "cards", "Card Grid", _M, min_count=2, record_count=True),
    PatternRule("class_item", _class_re("items?"), "cards", "Card Grid", _M, min_count=2, record_count=True),
    # ---- containers ----
    PatternRule("class_carousel", _class_re("carousel"), "carousel", "Carousel", _M),
    PatternRule("class_slider", _class_re("slider"), "carousel", "Carousel", _M),
    PatternRule("class_slideshow", _class_re("slideshow"), "carousel", "Carousel", _M),
    PatternRule("class_accordion", _class_re("accordion"), "accordion", "Accordion", _M),
    PatternRule("class_tab", _class_re("tabs?"), "tabs", "Tabs", _M),
    # ---- forms, layout, social proof ----
    PatternRule("tag_form", _tag_re("form"), "form", "Form", _H, record_count=True),
    PatternRule("class_col", _class_re("col-?"), "columns", "Columns Layout", _M, min_count=2, record_count=True),
    PatternRule(
        "class_column", _class_re("columns?"), "columns", "Columns Layout", _M, min_count=2, record_count=True
    ),
    PatternRule(
        "class_gallery",
        _class_re("gallery"),
        "gallery",
        "Image Gallery",
        _M,
        min_count=6,  # more than 5 <img> tags
        count_pattern=_IMG_RE,
        record_count=True,
    ),
    PatternRule("class_testimonial", _class_re("testimonials?"), "testimonials", "Testimonials", _M),
    PatternRule("class_cta", _class_re("cta"), "cta", "Call to Action", _M),
    PatternRule("class_call_to_action", _class_re("call-to-action"), "cta", "Call to Action", _M),
)

COMPONENT_TYPES: tuple[str, ...] = tuple(dict.fromkeys(r.component_type for r in RULES))

# ---------------------------------------------------------------------------
# Metadata / style regexes
# ---------------------------------------------------------------------------

# Attribute runs stop at the next "<" so a match attempt never scans past
# the tag it started in.
_TITLE_OPEN_RE = re.compile(r"<title", re.IGNORECASE)
_TITLE_CLOSE_RE = re.compile(r"</title>", re.IGNORECASE)
_DESC_RE = re.compile(
    r"""<meta[^<>]*name=["']description["'][^<>]*content=["']([^"']*)["']""",
    re.IGNORECASE,
)
_DESC_REVERSED_RE = re.compile(
    r"""<meta[^<>]*content=["']([^"']*)["'][^<>]*name=["']description["']""",
    re.IGNORECASE,
)
_STYLE_OPEN_RE = re.compile(r"<style", re.IGNORECASE)
_STYLE_CLOSE_RE = re.compile(r"</style>", re.IGNORECASE)
_COLOR_RE = re.compile(r"#[0-9a-fA-F]{6}|#[0-9a-fA-F]{3}|rgb\([^()]+\)|rgba\([^()]+\)")
_FONT_FAMILY_RE = re.compile(r"font-family\s*:\s*([^;}]+)", re.IGNORECASE)
_SECTION_RE = re.compile(
    r"""<(?:section|div)[^<>]*class=["'](?=[^"'<>]*section)[^"'<>]*+["'][^<>]*>""", re.IGNORECASE
)

# (flag, patterns): any pattern present sets the flag
_LAYOUT_FLAGS: tuple[tuple[str, tuple[re.Pattern[str], ...]], ...] = (
    ("grid-layout", (re.compile(r"display:\s*grid", re.IGNORECASE), re.compile(r"grid-template", re.IGNORECASE))),
    ("flexbox-layout", (re.compile(r"display:\s*flex", re.IGNORECASE),)),
    ("responsive-design", (re.compile(r"@media", re.IGNORECASE),)),
)

# ---------------------------------------------------------------------------
# Extraction helpers
# ---------------------------------------------------------------------------


def _first_element_body(raw_html: str, open_re: re.Pattern[str], close_re: re.Pattern[str]) -> str | None:
    """Text between the first opening tag and the next closing tag, or None.

    One forward scan: if the first opening tag is unclosed, every later
    one is too, so there is nothing to retry.
    """
    m = open_re.search(raw_html)
    if not m:
        return None
    gt = raw_html.find(">", m.end())
    if gt < 0:
        return None
    end = close_re.search(raw_html, gt + 1)
    if not end:
        return None
    return raw_html[gt + 1 : end.start()]


def extract_title(raw_html: str) -> str:
    """First ``<title>`` text, entity-unescaped and trimmed; "" if absent."""
    body = _first_element_body(raw_html, _TITLE_OPEN_RE, _TITLE_CLOSE_RE)
    if body is None:
        return ""
    return _html.unescape(body).strip()


def extract_description(raw_html: str) -> str:
    """``content`` of the first ``<meta name="description">``; "" if absent."""
    m = _DESC_RE.search(raw_html) or _DESC_REVERSED_RE.search(raw_html)
    if not m:
        return ""
    return _html.unescape(m.group(1)).strip()


def extract_colors(raw_html: str) -> ColorGuess:
    """First two color literals of the first inline ``<style>`` block."""
    css = _first_element_body(raw_html, _STYLE_OPEN_RE, _STYLE_CLOSE_RE)
    if css is None:
        return ColorGuess()
    colors = _COLOR_RE.findall(css)
    defaults = ColorGuess()
    return ColorGuess(
        primary=colors[0] if len(colors) > 0 else defaults.primary,
        secondary=colors[1] if len(colors) > 1 else defaults.secondary,
    )


def extract_typography(raw_html: str) -> TypographyGuess:
    """First ``font-family`` declaration of the first inline ``<style>`` block."""
    css = _first_element_body(raw_html, _STYLE_OPEN_RE, _STYLE_CLOSE_RE)
    if css is None:
        return TypographyGuess()
    fm = _FONT_FAMILY_RE.search(css)
    if not fm or not fm.group(1).strip():
        return TypographyGuess()
    return TypographyGuess(font_family=fm.group(1).strip())


def detect_layout_patterns(raw_html: str) -> tuple[str, ...]:
    """Informational layout flags; these are not component detections."""
    return tuple(flag for flag, patterns in _LAYOUT_FLAGS if any(p.search(raw_html) for p in patterns))


def detect_sections(raw_html: str) -> tuple[str, ...]:
    count = len(_SECTION_RE.findall(raw_html))
    return tuple(f"section-{i}" for i in range(1, count + 1))


def _evaluate(rule: PatternRule, raw_html: str) -> DetectedComponent | None:
    """Return a component if *rule* qualifies on *raw_html*, else None."""
    if rule.count_pattern is None:
        count = len(rule.pattern.findall(raw_html)) if rule.record_count or rule.min_count > 1 else None
        if count is None:
            if not rule.pattern.search(raw_html):
                return None
        elif count < rule.min_count:
            return None
    else:
        # Compound rule: class present AND enough counted elements
        count = len(rule.count_pattern.findall(raw_html))
        if count < rule.min_count or not rule.pattern.search(raw_html):
            return None

    return DetectedComponent(
        type=rule.component_type,
        name=rule.display_name,
        confidence=rule.confidence,
        block_id=rule.component_type,
        occurrence_count=count if rule.record_count else None,
    )


# ---------------------------------------------------------------------------
# Core classifier
# ---------------------------------------------------------------------------


def detect_components(raw_html: str) -> tuple[DetectedComponent, ...]:
    """Run the rule table once; first qualifying rule per type wins."""
    found: dict[str, DetectedComponent] = {}
    for rule in RULES:
        if rule.component_type in found:
            continue
        component = _evaluate(rule, raw_html)
        if component is not None:
            found[rule.component_type] = component
    return tuple(found.values())


def classify(raw_html: str, source_url: str) -> PageAnalysis:
    """Classify raw page HTML into a PageAnalysis.

    Never raises on malformed markup: fields absent from the page keep
    their documented defaults.

    Args:
        raw_html: full page HTML as text
        source_url: URL recorded on the result (not fetched)

    Returns:
        PageAnalysis with components in rule-table order
    """
    raw_html = raw_html or ""
    components = detect_components(raw_html)

    analysis = PageAnalysis(
        source_url=source_url,
        title=extract_title(raw_html),
        description=extract_description(raw_html),
        detected_components=components,
        structure_flags=StructureFlags.from_components(components),
        color_guess=extract_colors(raw_html),
        typography_guess=extract_typography(raw_html),
        layout_patterns=detect_layout_patterns(raw_html),
        sections=detect_sections(raw_html),
    )
    logger.debug(
        "Classified %s: %d components (%s), %d layout flags",
        source_url,
        len(components),
        ",".join(analysis.component_types) or "-",
        len(analysis.layout_patterns),
    )
    return analysis
