# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""RFC 9457-style Problem Details for edsgen failures.

Maps edsgen exceptions to structured, serialisable problem objects used
by crawl results and the CLI.  Near-leaf dependency (stdlib + errors.py).

Key public API:

- ``ProblemType``: error taxonomy (mirrors ``FetchErrorKind``).
- ``ProblemDetail``: frozen dataclass (→ dict / JSON / CLI text).
- ``sanitize_detail()``: scrub secrets & paths from error messages.
- ``from_exception()``: build a ``ProblemDetail`` from any exception.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

# ── Constants ────────────────────────────────────────────────────────

_ERROR_BASE = "urn:edsgen:error"

MAX_DETAIL_LENGTH = 200

# ── ProblemType taxonomy ─────────────────────────────────────────────


class ProblemType(StrEnum):
    """Error taxonomy for edsgen."""

    # InvalidInput
    INVALID_URL = "invalid-url"
    UNSUPPORTED_PROTOCOL = "unsupported-protocol"
    INVALID_NAME = "invalid-name"
    INVALID_INPUT = "invalid-input"

    # NetworkFailure
    NETWORK_ERROR = "network-error"
    TIMEOUT = "timeout"

    # UpstreamStatus
    BAD_STATUS = "bad-status"

    # Anything else (programming errors, filesystem)
    INTERNAL_ERROR = "internal-error"

    @property
    def uri(self) -> str:
        """Type URI for the RFC 9457 ``type`` field."""
        return f"{_ERROR_BASE}:{self.value}"


# ── Per-type metadata: (status, title, cli_hint) ─────────────────────

_TYPE_METADATA: dict[ProblemType, tuple[int, str, str]] = {
    ProblemType.INVALID_URL: (422, "Invalid URL", "Check the URL and try again with a full https:// URL."),
    ProblemType.UNSUPPORTED_PROTOCOL: (422, "Unsupported Protocol", "Only http:// and https:// URLs are supported."),
    ProblemType.INVALID_NAME: (422, "Invalid Name", "Provide a non-empty name."),
    ProblemType.INVALID_INPUT: (422, "Invalid Input", ""),
    ProblemType.NETWORK_ERROR: (502, "Network Failure", "Check the URL spelling and your connection."),
    ProblemType.TIMEOUT: (504, "Fetch Timed Out", "The site took too long to respond. Try again later."),
    ProblemType.BAD_STATUS: (502, "Upstream Error Status", "Try a different URL or check that the site is accessible."),
    ProblemType.INTERNAL_ERROR: (500, "Internal Error", ""),
}

# ── Secret sanitization patterns ─────────────────────────────────────

_SECRET_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"Bearer\s+\S+"), "Bearer <redacted>"),
    (re.compile(r"Basic\s+[A-Za-z0-9+/=]{8,}"), "Basic <redacted>"),
    (
        re.compile(
            r"(?:API_KEY|SECRET|TOKEN|PASSWORD|CREDENTIAL)\s*[=:]\s*\S+",
            re.IGNORECASE,
        ),
        "<redacted>",
    ),
    (re.compile(r"://[^@\s/]+@"), "://<redacted>@"),
]

_PATH_PATTERN = re.compile(
    r"(/(?:Users|home|tmp|var|etc|opt|root|srv|usr|private|mnt|media)/[\w./-]+"
    r"|[A-Z]:\\[\w.\\-]+)"
)


def sanitize_detail(text: str) -> str:
    """Scrub secrets and filesystem paths from *text*.

    Applies ``_SECRET_PATTERNS`` and ``_PATH_PATTERN``, then truncates
    to ``MAX_DETAIL_LENGTH`` characters.
    """
    for pattern, replacement in _SECRET_PATTERNS:
        text = pattern.sub(replacement, text)
    text = _PATH_PATTERN.sub("<path>", text)
    if len(text) > MAX_DETAIL_LENGTH:
        text = text[:MAX_DETAIL_LENGTH] + "..."
    return text


# ── ProblemDetail dataclass ──────────────────────────────────────────

_STANDARD_FIELDS = frozenset({"type", "title", "status", "detail", "instance"})


@dataclass(frozen=True, slots=True)
class ProblemDetail:
    """Immutable structured error."""

    type: str = "about:blank"
    title: str = ""
    status: int = 500
    detail: str = ""
    instance: str = ""
    extensions: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> str:
        """Short slug (``timeout``, ``bad-status``, ...) or "" for about:blank."""
        if self.type.startswith(f"{_ERROR_BASE}:"):
            return self.type.rsplit(":", 1)[1]
        return ""

    def to_dict(self) -> dict[str, Any]:
        """JSON dict.  Empty optional fields omitted, extensions merged at top level."""
        d: dict[str, Any] = {"type": self.type, "status": self.status}
        if self.title:
            d["title"] = self.title
        if self.detail:
            d["detail"] = self.detail
        if self.instance:
            d["instance"] = self.instance
        for k, v in self.extensions.items():
            if k not in _STANDARD_FIELDS:
                d[k] = v
        return d

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def to_cli_text(self) -> str:
        """Human-friendly CLI error message.

        Format::

            Error: <detail>
            Hint: <hint>
        """
        hint = ""
        kind = self.kind
        if kind:
            _, _, hint = _TYPE_METADATA[ProblemType(kind)]
        lines = [f"Error: {self.detail}"]
        if hint:
            lines.append(f"Hint: {hint}")
        return "\n".join(lines)


# ── Factory functions ────────────────────────────────────────────────


def from_exception(
    exc: BaseException,
    *,
    instance: str = "",
    extensions: dict[str, Any] | None = None,
) -> ProblemDetail:
    """Build a ProblemDetail from an exception.

    EdsGenError subclasses map to their ``kind``; anything else becomes
    ``internal-error`` with a sanitized message.
    """
    from .errors import EdsGenError, UpstreamStatusError

    ext = dict(extensions) if extensions else {}

    if isinstance(exc, EdsGenError):
        problem_type = ProblemType(exc.kind.value)
        if isinstance(exc, UpstreamStatusError) and exc.status_code:
            ext.setdefault("upstream_status", exc.status_code)
    else:
        problem_type = ProblemType.INTERNAL_ERROR

    status, title, _ = _TYPE_METADATA[problem_type]
    return ProblemDetail(
        type=problem_type.uri,
        title=title,
        status=status,
        detail=sanitize_detail(str(exc)) or title,
        instance=instance,
        extensions={k: sanitize_detail(v) if isinstance(v, str) else v for k, v in ext.items()},
    )
