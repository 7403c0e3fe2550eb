"""
Checkup orchestration: one request in, one report or one failure out.
"""

from __future__ import annotations

from typing import Optional

import structlog

from seocheckup.config.config import Config
from seocheckup.observability import histogram, increment

from . import urls
from .assembler import assemble
from .errors import InvalidInputError, NetworkError
from .extractors import extract_signals
from .messages import message
from .models import CheckupRequest, CheckupResponse, Notice, Report
from .preview import preview_report
from .protocols import PageFetcher
from .scoring import score

logger = structlog.get_logger(__name__)


async def run_checkup(raw_url: str, fetcher: PageFetcher, *, settings: Config) -> Report:
    """Fetch ``raw_url`` and build its scored report.

    The page is analysed whatever its HTTP status. Only a failure to fetch the
    page at all aborts the checkup.

    Raises:
        InvalidInputError: ``raw_url`` is blank. Nothing is fetched.
        NetworkError: the page could not be fetched.
    """
    if not raw_url or not raw_url.strip():
        raise InvalidInputError("URL must not be empty")

    url = urls.normalize(raw_url)
    locale = settings.analysis.locale

    with structlog.contextvars.bound_contextvars(checkup_url=url):
        logger.info("Starting checkup")
        page = await fetcher.fetch_page(url)
        if not page.status_ok:
            logger.warning("Page returned non-success status, analysing anyway", status=page.status)
        histogram("fetch_latency_seconds", page.elapsed_ms / 1000)

        robots = await fetcher.probe_robots(urls.origin(url))
        if not robots.reachable_or_opaque:
            logger.info("robots.txt not confirmed", robots_status=robots.status)

        signals = extract_signals(page.body_text, settings.analysis.self_hostname)
        results = assemble(
            signals,
            uses_https=urls.is_https(page.final_url),
            robots_found=robots.reachable_or_opaque,
            load_time_ms=page.elapsed_ms,
            locale=locale,
        )
        report = Report(
            url=page.final_url,
            results=results,
            score=score(results),
            load_time_ms=page.elapsed_ms,
        )

        for result in report.results:
            if result.category.scorable:
                increment(
                    "check_results_total",
                    labels={"category": result.category.value, "outcome": "pass" if result.passed else "fail"},
                )
        histogram("score_percentage", report.score.percentage)
        logger.info(
            "Checkup finished",
            passed=report.score.passed,
            total=report.score.total,
            percentage=report.score.percentage,
            load_time_ms=report.load_time_ms,
        )
        return report


def _invalid_input(locale: str) -> CheckupResponse:
    increment("checkups_total", labels={"outcome": "invalid_input"})
    return CheckupResponse(
        notice=Notice("error", message("notice_invalid_title", locale), message("notice_invalid", locale)),
    )


async def handle_request(
    request: CheckupRequest,
    fetcher: Optional[PageFetcher],
    *,
    settings: Config,
) -> CheckupResponse:
    """Serve one checkup request.

    Preview requests never touch ``fetcher``. Every response carries exactly
    one notice; a failed request carries no report.
    """
    locale = settings.analysis.locale

    if request.preview:
        host = urls.hostname(request.url) if request.url else ""
        report = preview_report(host or None, locale=locale)
        increment("checkups_total", labels={"outcome": "preview"})
        return CheckupResponse(
            notice=Notice(
                "info",
                message("notice_preview_title", locale),
                message("notice_preview", locale),
            ),
            report=report,
        )

    if not request.url or not request.url.strip():
        return _invalid_input(locale)
    if fetcher is None:
        raise ValueError("A fetcher is required for live checkups")

    try:
        report = await run_checkup(request.url, fetcher, settings=settings)
    except InvalidInputError:
        return _invalid_input(locale)
    except NetworkError as e:
        logger.warning("Checkup aborted, page unreachable", url=e.url, reason=e.reason)
        increment("checkups_total", labels={"outcome": "network_error"})
        return CheckupResponse(
            notice=Notice(
                "error",
                message("notice_unreachable_title", locale),
                message("notice_unreachable", locale),
            ),
        )

    increment("checkups_total", labels={"outcome": "success"})
    return CheckupResponse(
        notice=Notice(
            "success",
            message("notice_done_title", locale),
            message(
                "notice_done",
                locale,
                percentage=report.score.percentage,
                passed=report.score.passed,
                total=report.score.total,
            ),
        ),
        report=report,
    )
