# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Runtime settings with ``EDSGEN_*`` environment overrides.

Leaf module: no edsgen imports besides the package version lookup.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from contextlib import suppress
from dataclasses import dataclass, replace

try:
    from importlib.metadata import version as _pkg_version

    _EDSGEN_VERSION = _pkg_version("edsgen")
except Exception:
    _EDSGEN_VERSION = "unknown"

DEFAULT_FETCH_TIMEOUT = 15.0  # seconds, whole fetch including redirects
DEFAULT_MAX_REDIRECTS = 5
DEFAULT_USER_AGENT = f"Mozilla/5.0 (compatible; AEM-EDS-Generator/{_EDSGEN_VERSION})"

_TRUTHY = ("1", "true", "yes")


@dataclass(frozen=True, slots=True)
class Settings:
    """Fetch and logging knobs shared by the CLI and library callers."""

    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    user_agent: str = DEFAULT_USER_AGENT
    log_json: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.fetch_timeout <= 0:
            raise ValueError(f"fetch_timeout must be positive, got {self.fetch_timeout}")
        if self.max_redirects < 0:
            raise ValueError(f"max_redirects must be >= 0, got {self.max_redirects}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``EDSGEN_*`` variables; malformed values are ignored."""
        env = os.environ if environ is None else environ
        settings = cls()

        raw_timeout = env.get("EDSGEN_FETCH_TIMEOUT", "").strip()
        if raw_timeout:
            with suppress(ValueError):
                timeout = float(raw_timeout)
                if timeout > 0:
                    settings = replace(settings, fetch_timeout=timeout)

        raw_redirects = env.get("EDSGEN_MAX_REDIRECTS", "").strip()
        if raw_redirects:
            with suppress(ValueError):
                redirects = int(raw_redirects)
                if redirects >= 0:
                    settings = replace(settings, max_redirects=redirects)

        user_agent = env.get("EDSGEN_USER_AGENT", "").strip()
        if user_agent:
            settings = replace(settings, user_agent=user_agent)

        log_json = env.get("EDSGEN_LOG_JSON", "").strip().lower()
        if log_json in _TRUTHY:
            settings = replace(settings, log_json=True)

        log_level = env.get("EDSGEN_LOG_LEVEL", "").strip().upper()
        if log_level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            settings = replace(settings, log_level=log_level)

        return settings
