# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""edsgen exception hierarchy.

All edsgen-specific errors inherit from EdsGenError, allowing callers
to catch the base class for any failure or specific subclasses for
targeted handling.  Every error carries a ``kind`` used in structured
failure results.

Only the fetch boundary and name/URL validation raise; classification
itself never fails.
"""

from __future__ import annotations

from enum import StrEnum


class FetchErrorKind(StrEnum):
    """Typed failure kinds reported to callers."""

    INVALID_URL = "invalid-url"
    UNSUPPORTED_PROTOCOL = "unsupported-protocol"
    INVALID_NAME = "invalid-name"
    INVALID_INPUT = "invalid-input"
    NETWORK_ERROR = "network-error"
    TIMEOUT = "timeout"
    BAD_STATUS = "bad-status"


class EdsGenError(Exception):
    """Base exception for all edsgen errors."""

    kind: FetchErrorKind = FetchErrorKind.INVALID_INPUT


class InvalidInputError(EdsGenError):
    """Missing or malformed caller input (URL, name, category, ...)."""


class InvalidUrlError(InvalidInputError):
    """URL could not be parsed or has no hostname."""

    kind = FetchErrorKind.INVALID_URL


class UnsupportedProtocolError(InvalidInputError):
    """URL scheme is not http or https."""

    kind = FetchErrorKind.UNSUPPORTED_PROTOCOL


class InvalidNameError(InvalidInputError):
    """Block, component, template or project name is empty."""

    kind = FetchErrorKind.INVALID_NAME


class NetworkFailureError(EdsGenError):
    """DNS, connection or transport failure while fetching."""

    kind = FetchErrorKind.NETWORK_ERROR


class FetchTimeoutError(NetworkFailureError):
    """Fetch exceeded its time budget."""

    kind = FetchErrorKind.TIMEOUT


class UpstreamStatusError(EdsGenError):
    """Non-success HTTP status after following redirects."""

    kind = FetchErrorKind.BAD_STATUS

    def __init__(self, message: str, *, status_code: int = 0, url: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url
