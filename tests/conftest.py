"""
Shared test configuration for SEO Checkup.

Provides sample pages, configuration objects and an in-memory page fetcher
so engine tests never touch the network.
"""

import os
from typing import List, Optional

import pytest

from seocheckup.checkup.errors import NetworkError
from seocheckup.checkup.models import FetchedPage, RobotsProbe
from seocheckup.config import Config, LazyConfig

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Tests that exercise several components together")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep environment variables and config files of the host out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("SEOCHECKUP_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    LazyConfig.reset()
    yield
    LazyConfig.reset()


# ============================================================================
# Sample Pages
# ============================================================================


@pytest.fixture
def sample_html():
    """A page that passes every HTML-derived check."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Test Article</title>
        <meta name="description" content="Sample article for testing">
        <meta name="keywords" content="seo, testing">
        <meta name="viewport" content="width=device-width, initial-scale=1">
        <link rel="canonical" href="https://example.com/article">
        <meta property="og:title" content="Test Article">
        <meta property="og:description" content="Sample article description">
        <meta name="twitter:card" content="summary">
        <script type="application/ld+json">{"@type": "Article"}</script>
    </head>
    <body>
        <h1>Test Article Title</h1>
        <h2>First section</h2>
        <h3>Detail</h3>
        <img src="/hero.png" alt="Hero image">
        <p>Read the <a href="/docs">docs</a> or visit
           <a href="https://other.example.org/page">another site</a>.</p>
    </body>
    </html>
    """


@pytest.fixture
def minimal_html():
    return "<html><head><title>T</title></head><body><h1>H</h1></body></html>"


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def test_config():
    """Default configuration with a known checking hostname."""
    config = Config()
    config.analysis.self_hostname = "localhost"
    return config


# ============================================================================
# Fetcher Fixtures
# ============================================================================


class FakeFetcher:
    """In-memory PageFetcher recording every call it receives."""

    def __init__(
        self,
        body: str = "",
        *,
        status: int = 200,
        final_url: Optional[str] = None,
        elapsed_ms: int = 500,
        robots: Optional[RobotsProbe] = None,
        error: Optional[str] = None,
    ) -> None:
        self.body = body
        self.status = status
        self.final_url = final_url
        self.elapsed_ms = elapsed_ms
        self.robots = robots if robots is not None else RobotsProbe(status=200)
        self.error = error
        self.fetched: List[str] = []
        self.probed: List[str] = []

    async def fetch_page(self, url: str) -> FetchedPage:
        self.fetched.append(url)
        if self.error is not None:
            raise NetworkError(url, self.error)
        return FetchedPage(
            status=self.status,
            body_text=self.body,
            url=url,
            final_url=self.final_url or url,
            elapsed_ms=self.elapsed_ms,
        )

    async def probe_robots(self, origin: str) -> RobotsProbe:
        self.probed.append(origin)
        return self.robots


@pytest.fixture
def fake_fetcher():
    """Factory fixture building FakeFetcher instances."""
    return FakeFetcher
