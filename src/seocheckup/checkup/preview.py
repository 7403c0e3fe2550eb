"""
Canned, fully passing report for demonstrations.
"""

from __future__ import annotations

from .messages import DEFAULT_LOCALE, message
from .models import Category, CheckResult, Report
from .scoring import score

PREVIEW_LOAD_TIME_MS = 1200
DEFAULT_PREVIEW_HOSTNAME = "example.com"


def preview_report(hostname_hint: str | None = None, *, locale: str = DEFAULT_LOCALE) -> Report:
    """Build the demonstration report. Performs no network access.

    ``hostname_hint`` only appears in the Page Title detail row.
    """
    host = hostname_hint or DEFAULT_PREVIEW_HOSTNAME
    yes = message("yes", locale)

    results = (
        CheckResult("HTTPS Usage", yes, True, Category.BASIC),
        CheckResult("robots.txt Found", yes, True, Category.BASIC),
        CheckResult("Page Load Time", f"1.2s ({message('load_excellent', locale)})", True, Category.PERFORMANCE),
        CheckResult("Title Tag Present", yes, True, Category.META_TAGS),
        CheckResult("Meta Description Present", yes, True, Category.META_TAGS),
        CheckResult("Meta Keywords", yes, True, Category.META_TAGS),
        CheckResult("Viewport Meta Tag", yes, True, Category.META_TAGS),
        CheckResult("Canonical URL", yes, True, Category.META_TAGS),
        CheckResult("H1 Tags", f"1 tag ({message('h1_ideal', locale)})", True, Category.CONTENT),
        CheckResult("Heading Structure", "H1:1 H2:4 H3:8", True, Category.CONTENT),
        CheckResult("Images Alt Text", message("images_alt", locale, with_alt=12, total=12), True, Category.IMAGES),
        CheckResult("Open Graph Tags", message("tags", locale, count=8), True, Category.SOCIAL),
        CheckResult("Twitter Cards", message("tags", locale, count=5), True, Category.SOCIAL),
        CheckResult("Schema Markup", yes, True, Category.TECHNICAL),
        CheckResult("Internal Links", message("links", locale, count=23), True, Category.LINKS),
        CheckResult("External Links", message("links", locale, count=7), True, Category.LINKS),
        CheckResult("Page Title", message("preview_title", locale, hostname=host), True, Category.DETAILS),
        CheckResult("Meta Description", message("preview_description", locale), True, Category.DETAILS),
    )

    return Report(
        url=f"https://{host}",
        results=results,
        score=score(results),
        load_time_ms=PREVIEW_LOAD_TIME_MS,
        preview=True,
    )
