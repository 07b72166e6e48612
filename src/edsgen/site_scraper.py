# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Fetch-then-classify pipeline for a single page.

Usage:
    from edsgen.site_scraper import crawl_site
    result = await crawl_site("https://example.com")
    if result.success:
        print(result.analysis.component_types)

Fetch failures never escape ``crawl_site``: they come back as a
``CrawlResult`` with ``success=False`` and a ProblemDetail.  Only one page
is analysed per URL; links are not followed.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any
from urllib.parse import urlparse

import httpx

from . import PageAnalysis
from .component_classifier import classify
from .config import Settings
from .errors import EdsGenError, InvalidUrlError
from .fetcher import fetch_html, validate_url
from .problem_details import ProblemDetail, from_exception
from .serializer import analysis_to_dict

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CrawlResult:
    """Outcome of one crawl: an analysis or a structured failure."""

    success: bool
    url: str
    timestamp: str
    final_url: str = ""
    domain_name: str = ""
    analysis: PageAnalysis | None = None
    error: str = ""
    problem: ProblemDetail | None = None

    def to_dict(self) -> dict[str, Any]:
        if not self.success:
            d: dict[str, Any] = {"success": False, "error": self.error, "url": self.url}
            if self.problem is not None:
                d["problem"] = self.problem.to_dict()
            return d
        assert self.analysis is not None
        return {
            "success": True,
            "url": self.url,
            "final_url": self.final_url,
            "domain_name": self.domain_name,
            "timestamp": self.timestamp,
            "analysis": analysis_to_dict(self.analysis),
        }


def _now() -> str:
    return datetime.now(UTC).isoformat()


def extract_domain_name(url: str) -> str:
    """Folder-friendly site name: host without ``www.``, first label only.

    ``https://www.starbucksreserve.com/x`` → ``starbucksreserve``
    """
    try:
        hostname = urlparse(url).hostname or ""
    except ValueError as e:
        raise InvalidUrlError(f"Invalid URL: {e}") from e
    if not hostname:
        raise InvalidUrlError(f"Invalid URL: '{url}' has no hostname.")
    hostname = hostname.removeprefix("www.")
    return hostname.split(".")[0]


def analyze_html(raw_html: str, source_url: str = "") -> PageAnalysis:
    """Classify already-fetched HTML (offline entry point)."""
    return classify(raw_html, source_url)


async def crawl_site(
    url: str,
    *,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> CrawlResult:
    """Validate, fetch and classify one page.

    ``analysis.source_url`` is the requested URL; where redirects ended is
    kept on ``CrawlResult.final_url``.
    """
    settings = settings or Settings()
    try:
        url = validate_url(url)
        logger.info("Fetching %s", url)
        fetched = await fetch_html(url, settings=settings, client=client)
        analysis = classify(fetched.html, url)
        domain_name = extract_domain_name(url)
    except EdsGenError as e:
        problem = from_exception(e, instance=url or "")
        logger.warning("Crawl failed for %s: %s (%s)", url, problem.detail, e.kind)
        return CrawlResult(
            success=False,
            url=url or "",
            timestamp=_now(),
            error=problem.detail,
            problem=problem,
        )

    logger.info(
        "Analysis complete for %s: %s",
        url,
        ", ".join(analysis.component_types) or "no components detected",
    )
    return CrawlResult(
        success=True,
        url=url,
        final_url=fetched.final_url,
        domain_name=domain_name,
        analysis=analysis,
        timestamp=_now(),
    )


async def crawl_sites(
    urls: Iterable[str],
    *,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[CrawlResult]:
    """Crawl independent pages concurrently; results follow input order."""
    settings = settings or Settings()
    tasks = [crawl_site(u, settings=settings, client=client) for u in urls]
    return list(await asyncio.gather(*tasks))
