"""
URL normalization helpers.

Two default schemes coexist on purpose: the fetch path upgrades bare hosts to
``https://`` while hostname extraction for display falls back to ``http://``.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

_SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def normalize(raw: str, default_scheme: str = "https") -> str:
    """Return ``raw`` with surrounding whitespace removed and a scheme ensured.

    Anything beyond the scheme prefix is left untouched; a malformed URL is
    left for the fetch step to reject.
    """
    value = raw.strip()
    if not _SCHEME_PATTERN.match(value):
        value = f"{default_scheme}://{value}"
    return value


def hostname(raw: str) -> str:
    """Best-effort host of ``raw``, or an empty string when none can be parsed."""
    value = normalize(raw, default_scheme="http")
    try:
        return urlsplit(value).hostname or ""
    except ValueError:
        return ""


def origin(url: str) -> str:
    """``scheme://netloc`` of an absolute URL."""
    parts = urlsplit(url)
    return f"{parts.scheme.lower()}://{parts.netloc}"


def robots_url(url: str) -> str:
    return f"{origin(url)}/robots.txt"


def is_https(url: str) -> bool:
    try:
        return urlsplit(url).scheme.lower() == "https"
    except ValueError:
        return False
