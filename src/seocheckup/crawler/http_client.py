"""
aiohttp client implementing the page fetch and robots.txt probe for checkups.
"""

from __future__ import annotations

import asyncio
import time
from typing import Optional

import aiohttp
import structlog

from seocheckup.checkup.errors import NetworkError
from seocheckup.checkup.models import FetchedPage, RobotsProbe
from seocheckup.config.config import FetchConfig

logger = structlog.get_logger(__name__)


class HttpClient:
    """Single-page HTTP client.

    One GET per checkup, no retries: a page that cannot be fetched on the
    first attempt aborts the checkup.
    """

    def __init__(self, config: FetchConfig):
        self.config = config
        self.session: Optional[aiohttp.ClientSession] = None
        self._is_initialized = False

        logger.debug(
            "HTTP client created",
            timeout=self.config.timeout,
            robots_timeout=self.config.robots_timeout,
            user_agent=self.config.user_agent,
        )

    async def initialize(self) -> None:
        """Open the HTTP session."""
        if self.session is None:
            self.session = aiohttp.ClientSession(headers={"User-Agent": self.config.user_agent})
            self._is_initialized = True
            logger.debug("HTTP client session initialized")

    async def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            await self.session.close()
            self.session = None
        self._is_initialized = False
        logger.debug("HTTP client closed")

    async def __aenter__(self) -> "HttpClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _require_session(self) -> aiohttp.ClientSession:
        if not self._is_initialized or self.session is None:
            raise RuntimeError("HTTP client not initialized. Call initialize() first.")
        return self.session

    async def fetch_page(self, url: str) -> FetchedPage:
        """
        GET ``url`` and read its body as text.

        Redirects are followed; undecodable bytes are replaced rather than
        rejected. The elapsed time covers the request and the body read.

        Args:
            url: Absolute URL to fetch

        Returns:
            FetchedPage with status, body text, final URL and timing

        Raises:
            NetworkError: on connection, DNS, TLS, URL or timeout failures
        """
        session = self._require_session()
        timeout = self.config.timeout
        start = time.perf_counter()

        try:
            async with asyncio.timeout(timeout):
                async with session.get(url, allow_redirects=True) as response:
                    body = await response.text(errors="replace")
                    status = response.status
                    final_url = str(response.url)
        except asyncio.TimeoutError as e:
            logger.warning("Page request timed out", url=url, timeout=timeout)
            raise NetworkError(url, f"timed out after {timeout}s") from e
        except (aiohttp.ClientError, ValueError) as e:
            logger.warning("Page request failed", url=url, error=str(e), error_type=type(e).__name__)
            raise NetworkError(url, str(e) or type(e).__name__) from e

        elapsed_ms = round((time.perf_counter() - start) * 1000)
        logger.debug("Page fetched", url=url, final_url=final_url, status=status, elapsed_ms=elapsed_ms)
        return FetchedPage(
            status=status,
            body_text=body,
            url=url,
            final_url=final_url,
            elapsed_ms=elapsed_ms,
        )

    async def probe_robots(self, origin: str) -> RobotsProbe:
        """HEAD ``{origin}/robots.txt``. Transport failures yield a probe without status."""
        session = self._require_session()
        robots_url = f"{origin.rstrip('/')}/robots.txt"

        try:
            async with asyncio.timeout(self.config.robots_timeout):
                async with session.head(robots_url, allow_redirects=True) as response:
                    status = response.status
        except (asyncio.TimeoutError, aiohttp.ClientError, ValueError) as e:
            logger.debug("robots.txt probe failed", url=robots_url, error=str(e), error_type=type(e).__name__)
            return RobotsProbe(status=None)

        logger.debug("robots.txt probed", url=robots_url, status=status)
        return RobotsProbe(status=status)
