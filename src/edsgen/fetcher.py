# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""HTML fetcher with bounded redirect following and typed failures.

Redirects are followed manually (``follow_redirects=False``) so the hop
count and the final URL are under our control.  Every failure surfaces
as an EdsGenError subclass whose ``kind`` is one of invalid-url,
unsupported-protocol, network-error, timeout, bad-status.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from urllib.parse import urljoin, urlparse

import httpx

from .config import Settings
from .errors import (
    FetchTimeoutError,
    InvalidUrlError,
    NetworkFailureError,
    UnsupportedProtocolError,
    UpstreamStatusError,
)

logger = logging.getLogger(__name__)

ALLOWED_URL_SCHEMES = frozenset({"http", "https"})
REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})

_ACCEPT_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Successful fetch (immutable value object)."""

    requested_url: str
    final_url: str
    status_code: int
    html: str
    redirects: tuple[str, ...] = ()  # every Location hop, in order


def validate_url(url: str | None) -> str:
    """Validate an absolute http(s) URL and return it stripped.

    Raises:
        InvalidUrlError: empty, unparsable, or host-less URL.
        UnsupportedProtocolError: scheme other than http/https.
    """
    if not url or not url.strip():
        raise InvalidUrlError("URL is required.")
    url = url.strip()
    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise InvalidUrlError(f"Invalid URL: {e}") from e

    scheme = (parsed.scheme or "").lower()
    if not scheme:
        raise InvalidUrlError(f"Invalid URL: '{url}' is not absolute.")
    if scheme not in ALLOWED_URL_SCHEMES:
        raise UnsupportedProtocolError(f"URL scheme '{scheme}' is not supported. Use http or https.")
    if not parsed.hostname:
        raise InvalidUrlError(f"Invalid URL: '{url}' has no hostname.")
    return url


async def _follow(
    client: httpx.AsyncClient,
    url: str,
    settings: Settings,
    headers: dict[str, str],
) -> FetchResult:
    """GET *url*, re-issuing against each Location until a non-redirect."""
    current = url
    hops: list[str] = []

    while True:
        response = await client.get(
            current, headers=headers, follow_redirects=False, timeout=settings.fetch_timeout
        )
        status = response.status_code

        if status in REDIRECT_STATUSES:
            location = response.headers.get("location")
            if not location:
                raise UpstreamStatusError(
                    f"HTTP {status} redirect without Location header", status_code=status, url=current
                )
            if len(hops) >= settings.max_redirects:
                raise UpstreamStatusError(
                    f"Too many redirects (more than {settings.max_redirects})", status_code=status, url=current
                )
            target = validate_url(urljoin(current, location))
            logger.debug("Redirect %d: %s -> %s", status, current, target)
            hops.append(target)
            current = target
            continue

        if not 200 <= status < 300:
            reason = response.reason_phrase or ""
            raise UpstreamStatusError(
                f"Failed to fetch: HTTP {status} {reason}".rstrip(), status_code=status, url=current
            )

        return FetchResult(
            requested_url=url,
            final_url=current,
            status_code=status,
            html=response.text,
            redirects=tuple(hops),
        )


async def fetch_html(
    url: str,
    *,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> FetchResult:
    """Fetch raw HTML for *url*, following at most ``settings.max_redirects`` redirects.

    Args:
        url: absolute http/https URL
        settings: timeout / redirect / user-agent knobs (defaults if None)
        client: injected client (tests, connection reuse); one is created otherwise

    Returns:
        FetchResult with the final URL and decoded body

    Raises:
        InvalidUrlError, UnsupportedProtocolError, FetchTimeoutError,
        NetworkFailureError, UpstreamStatusError
    """
    settings = settings or Settings()
    url = validate_url(url)
    headers = {"User-Agent": settings.user_agent, **_ACCEPT_HEADERS}

    try:
        if client is None:
            async with httpx.AsyncClient() as own_client:
                result = await asyncio.wait_for(
                    _follow(own_client, url, settings, headers), timeout=settings.fetch_timeout
                )
        else:
            result = await asyncio.wait_for(_follow(client, url, settings, headers), timeout=settings.fetch_timeout)
    except (httpx.TimeoutException, asyncio.TimeoutError) as e:
        raise FetchTimeoutError(f"Request timed out after {settings.fetch_timeout:g}s: {url}") from e
    except httpx.HTTPError as e:
        # transport failures and undecodable bodies (bad Content-Encoding)
        raise NetworkFailureError(f"Failed to fetch HTML: {e}") from e

    logger.info(
        "Fetched %s (%d, %d bytes, %d redirects)",
        result.final_url,
        result.status_code,
        len(result.html),
        len(result.redirects),
    )
    return result
