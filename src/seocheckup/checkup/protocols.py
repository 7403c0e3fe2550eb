"""
Protocol for the network collaborator the checkup engine depends on.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import FetchedPage, RobotsProbe


@runtime_checkable
class PageFetcher(Protocol):
    """Fetches the page under analysis and probes its robots.txt."""

    async def fetch_page(self, url: str) -> FetchedPage:
        """GET ``url``.

        Raises:
            NetworkError: on any transport failure. HTTP error statuses are
                returned, not raised.
        """
        ...

    async def probe_robots(self, origin: str) -> RobotsProbe:
        """HEAD ``{origin}/robots.txt``. Never raises."""
        ...
