# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Shared test configuration and fixtures."""

try:
    import edsgen  # noqa: F401
except ImportError:
    raise ImportError("edsgen is not installed. Run: pip install -e '.[dev]'") from None

import logging

import httpx
import pytest
import structlog

PAGE_HTML = """<!DOCTYPE html>
<html>
<head>
  <title>Acme &amp; Co</title>
  <meta name="description" content="Tools for everyone">
  <style>body{color:#112233;font-family:Georgia;} .grid{display: grid;} @media (max-width: 600px){}</style>
</head>
<body>
  <header><nav><a href="/">Home</a></nav></header>
  <div class="hero">Welcome</div>
  <section class="section"><div class="card">A</div><div class="card">B</div><div class="card">C</div></section>
  <footer>Bye</footer>
</body>
</html>
"""


@pytest.fixture
def page_html() -> str:
    return PAGE_HTML


@pytest.fixture
def mock_client_factory():
    """Build an AsyncClient backed by ``httpx.MockTransport``."""

    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def _reset_logging():
    """Restore root logging and structlog state after tests that configure logging."""
    root = logging.getLogger()
    old_handlers = root.handlers[:]
    old_level = root.level
    yield
    root.handlers = old_handlers
    root.setLevel(old_level)
    structlog.reset_defaults()
