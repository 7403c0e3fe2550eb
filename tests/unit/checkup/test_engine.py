"""
Tests for checkup orchestration and request handling.

The fetcher is replaced by the in-memory FakeFetcher from conftest, so these
tests cover the engine's decisions without any network traffic.
"""

import pytest

from seocheckup.checkup.engine import handle_request, run_checkup
from seocheckup.checkup.errors import InvalidInputError, NetworkError
from seocheckup.checkup.models import CheckupRequest, RobotsProbe
from seocheckup.observability.metrics import METRICS
from tests.helpers import histogram_observes, metric_delta


@pytest.mark.unit
class TestRunCheckup:
    @pytest.mark.asyncio
    async def test_minimal_page_end_to_end(self, fake_fetcher, minimal_html, test_config):
        fetcher = fake_fetcher(minimal_html, elapsed_ms=500)

        report = await run_checkup("example.com", fetcher, settings=test_config)
        rows = {row.label: row for row in report.results}

        assert fetcher.fetched == ["https://example.com"]
        assert fetcher.probed == ["https://example.com"]
        assert rows["HTTPS Usage"].passed is True
        assert rows["Page Load Time"].value == "500ms (Good)"
        assert rows["Page Load Time"].passed is True
        assert rows["Title Tag Present"].passed is True
        assert rows["Page Title"].value == "T"
        assert rows["Meta Description Present"].passed is False
        assert rows["H1 Tags"].passed is True
        assert rows["H1 Tags"].value == "1 tag (Ideal)"
        assert (report.score.passed, report.score.total, report.score.percentage) == (7, 16, 44)
        assert report.load_time_ms == 500
        assert report.preview is False

    @pytest.mark.asyncio
    async def test_https_follows_final_url(self, fake_fetcher, minimal_html, test_config):
        fetcher = fake_fetcher(minimal_html, final_url="http://example.com/")

        report = await run_checkup("https://example.com", fetcher, settings=test_config)
        rows = {row.label: row for row in report.results}

        assert rows["HTTPS Usage"].passed is False
        assert report.url == "http://example.com/"

    @pytest.mark.asyncio
    async def test_robots_probe_uses_origin(self, fake_fetcher, test_config):
        fetcher = fake_fetcher("", robots=RobotsProbe(status=404))

        report = await run_checkup("https://example.com/blog/post?id=1", fetcher, settings=test_config)
        rows = {row.label: row for row in report.results}

        assert fetcher.probed == ["https://example.com"]
        assert rows["robots.txt Found"].passed is False

    @pytest.mark.asyncio
    async def test_opaque_robots_probe_passes(self, fake_fetcher, test_config):
        fetcher = fake_fetcher("", robots=RobotsProbe(status=None, opaque=True))

        report = await run_checkup("example.com", fetcher, settings=test_config)

        assert next(row for row in report.results if row.label == "robots.txt Found").passed is True

    @pytest.mark.asyncio
    async def test_error_status_is_still_analysed(self, fake_fetcher, test_config):
        fetcher = fake_fetcher("<title>Not Found</title>", status=404)

        report = await run_checkup("example.com", fetcher, settings=test_config)

        assert next(row for row in report.results if row.label == "Page Title").value == "Not Found"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    async def test_blank_input_never_fetches(self, fake_fetcher, test_config, raw):
        fetcher = fake_fetcher("")

        with pytest.raises(InvalidInputError):
            await run_checkup(raw, fetcher, settings=test_config)
        assert fetcher.fetched == []

    @pytest.mark.asyncio
    async def test_network_error_propagates_without_probe(self, fake_fetcher, test_config):
        fetcher = fake_fetcher(error="connection refused")

        with pytest.raises(NetworkError) as exc_info:
            await run_checkup("example.com", fetcher, settings=test_config)

        assert exc_info.value.url == "https://example.com"
        assert fetcher.probed == []

    @pytest.mark.asyncio
    async def test_links_use_configured_checking_host(self, fake_fetcher, test_config):
        test_config.analysis.self_hostname = "example.com"
        fetcher = fake_fetcher('<a href="https://example.com/about">About</a>')

        report = await run_checkup("example.com", fetcher, settings=test_config)
        rows = {row.label: row for row in report.results}

        assert rows["Internal Links"].value == "1 links"
        assert rows["External Links"].value == "0 links"

    @pytest.mark.asyncio
    async def test_records_metrics(self, fake_fetcher, sample_html, test_config):
        fetcher = fake_fetcher(sample_html)

        with histogram_observes(METRICS["fetch_latency_seconds"]), histogram_observes(METRICS["score_percentage"]):
            with metric_delta(METRICS["check_results_total"].labels(category="Links", outcome="pass"), 2):
                await run_checkup("example.com", fetcher, settings=test_config)


@pytest.mark.unit
class TestHandleRequest:
    @pytest.mark.asyncio
    async def test_success_notice_carries_score(self, fake_fetcher, minimal_html, test_config):
        with metric_delta(METRICS["checkups_total"].labels(outcome="success")):
            response = await handle_request(
                CheckupRequest(url="example.com"), fake_fetcher(minimal_html), settings=test_config
            )

        assert response.ok
        assert response.notice.level == "success"
        assert response.notice.description == "SEO score: 44% (7/16)"

    @pytest.mark.asyncio
    async def test_network_failure_gives_one_error_and_no_report(self, fake_fetcher, test_config):
        with metric_delta(METRICS["checkups_total"].labels(outcome="network_error")):
            response = await handle_request(
                CheckupRequest(url="unreachable.test"), fake_fetcher(error="DNS failure"), settings=test_config
            )

        assert response.report is None
        assert not response.ok
        assert response.notice.level == "error"
        assert response.notice.title == "Cannot access website"
        assert "CORS" in response.notice.description

    @pytest.mark.asyncio
    async def test_blank_url_notice(self, fake_fetcher, test_config):
        fetcher = fake_fetcher("")

        response = await handle_request(CheckupRequest(url="  "), fetcher, settings=test_config)

        assert response.report is None
        assert response.notice.description == "Please enter a website URL"
        assert fetcher.fetched == []

    @pytest.mark.asyncio
    async def test_blank_url_without_fetcher_gives_notice(self, test_config):
        with metric_delta(METRICS["checkups_total"].labels(outcome="invalid_input")):
            response = await handle_request(CheckupRequest(url=""), None, settings=test_config)

        assert response.report is None
        assert response.notice.level == "error"
        assert response.notice.description == "Please enter a website URL"

    @pytest.mark.asyncio
    async def test_preview_skips_fetcher(self, fake_fetcher, test_config):
        fetcher = fake_fetcher(error="must not be called")

        response = await handle_request(
            CheckupRequest(url="news.example.org/today", preview=True), fetcher, settings=test_config
        )

        assert fetcher.fetched == []
        assert response.notice.level == "info"
        assert response.report.preview is True
        assert response.report.score.percentage == 100
        assert response.report.url == "https://news.example.org"

    @pytest.mark.asyncio
    async def test_preview_without_url_uses_default_host(self, test_config):
        response = await handle_request(CheckupRequest(url="", preview=True), None, settings=test_config)

        assert response.report.url == "https://example.com"

    @pytest.mark.asyncio
    async def test_live_request_requires_fetcher(self, test_config):
        with pytest.raises(ValueError):
            await handle_request(CheckupRequest(url="example.com"), None, settings=test_config)

    @pytest.mark.asyncio
    async def test_indonesian_notices(self, fake_fetcher, test_config):
        test_config.analysis.locale = "id"

        response = await handle_request(
            CheckupRequest(url="example.com"), fake_fetcher(error="timeout"), settings=test_config
        )

        assert response.notice.title == "Tidak dapat mengakses website"
