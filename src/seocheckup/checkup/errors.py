"""
Exceptions raised by the checkup engine and its fetch collaborator.
"""

from __future__ import annotations


class SeoCheckupError(Exception):
    """Base class for checkup failures."""


class InvalidInputError(SeoCheckupError, ValueError):
    """Raised when the URL is empty or whitespace only."""


class NetworkError(SeoCheckupError):
    """Raised when the main page cannot be fetched.

    Covers refused connections, DNS and TLS failures, timeouts and any other
    transport-level error. A checkup that hits this produces no report.
    """

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Could not fetch {url}: {reason}")
        self.url = url
        self.reason = reason
