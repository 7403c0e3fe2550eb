"""
Turns extractor output and fetch metadata into the ordered checklist.
"""

from __future__ import annotations

from typing import List

from .messages import DEFAULT_LOCALE, message
from .models import Category, CheckResult, PageSignals

GOOD_LOAD_TIME_MS = 3000
MEDIUM_LOAD_TIME_MS = 5000


def load_time_rating(load_time_ms: int, locale: str = DEFAULT_LOCALE) -> str:
    if load_time_ms < GOOD_LOAD_TIME_MS:
        return message("load_good", locale)
    if load_time_ms < MEDIUM_LOAD_TIME_MS:
        return message("load_medium", locale)
    return message("load_slow", locale)


def _h1_value(count: int, locale: str) -> str:
    if count == 1:
        note = message("h1_ideal", locale)
    elif count == 0:
        note = message("h1_none", locale)
    else:
        note = message("h1_too_many", locale)
    noun = message("h1_tag_one" if count == 1 else "h1_tag_other", locale)
    return f"{count} {noun} ({note})"


def assemble(
    signals: PageSignals,
    *,
    uses_https: bool,
    robots_found: bool,
    load_time_ms: int,
    locale: str = DEFAULT_LOCALE,
) -> tuple[CheckResult, ...]:
    """Build the report rows in display order.

    Args:
        signals: Output of :func:`seocheckup.checkup.extractors.extract_signals`.
        uses_https: Whether the final page URL used the ``https`` scheme.
        robots_found: Whether the robots.txt probe succeeded or was opaque.
        load_time_ms: Wall-clock fetch time of the main page.
        locale: Language of the row values.

    Returns:
        Rows grouped Basic, Performance, Meta Tags, Content, Images, Social,
        Technical, Links and finally the informational Details rows.
    """

    def yes_no(flag: bool) -> str:
        return message("yes" if flag else "no", locale)

    def count_or_none(count: int) -> str:
        return message("tags", locale, count=count) if count > 0 else message("none", locale)

    meta = signals.meta
    headings = signals.headings
    images = signals.images
    social = signals.social
    links = signals.links

    results: List[CheckResult] = [
        # Basic
        CheckResult("HTTPS Usage", yes_no(uses_https), uses_https, Category.BASIC),
        CheckResult(
            "robots.txt Found",
            message("yes", locale) if robots_found else message("robots_unverified", locale),
            robots_found,
            Category.BASIC,
        ),
        # Performance
        CheckResult(
            "Page Load Time",
            f"{load_time_ms}ms ({load_time_rating(load_time_ms, locale)})",
            load_time_ms < GOOD_LOAD_TIME_MS,
            Category.PERFORMANCE,
        ),
        # Meta tags
        CheckResult("Title Tag Present", yes_no(meta.title is not None), meta.title is not None, Category.META_TAGS),
        CheckResult(
            "Meta Description Present",
            yes_no(meta.description is not None),
            meta.description is not None,
            Category.META_TAGS,
        ),
        CheckResult("Meta Keywords", yes_no(meta.keywords is not None), meta.keywords is not None, Category.META_TAGS),
        CheckResult("Viewport Meta Tag", yes_no(meta.has_viewport), meta.has_viewport, Category.META_TAGS),
        CheckResult("Canonical URL", yes_no(meta.has_canonical), meta.has_canonical, Category.META_TAGS),
        # Content structure
        CheckResult("H1 Tags", _h1_value(headings.h1, locale), headings.h1 == 1, Category.CONTENT),
        CheckResult(
            "Heading Structure",
            f"H1:{headings.h1} H2:{headings.h2} H3:{headings.h3}",
            headings.h1 > 0 and headings.h2 > 0,
            Category.CONTENT,
        ),
        # Images
        CheckResult(
            "Images Alt Text",
            (
                message("images_alt", locale, with_alt=images.with_alt, total=images.total)
                if images.total > 0
                else message("images_none", locale)
            ),
            images.total == 0 or images.without_alt == 0,
            Category.IMAGES,
        ),
        # Social
        CheckResult("Open Graph Tags", count_or_none(social.open_graph), social.open_graph > 0, Category.SOCIAL),
        CheckResult("Twitter Cards", count_or_none(social.twitter), social.twitter > 0, Category.SOCIAL),
        # Technical
        CheckResult("Schema Markup", yes_no(signals.has_schema_markup), signals.has_schema_markup, Category.TECHNICAL),
        # Links
        CheckResult(
            "Internal Links", message("links", locale, count=links.internal), links.internal > 0, Category.LINKS
        ),
        CheckResult("External Links", message("links", locale, count=links.external), True, Category.LINKS),
        # Details, never scored
        CheckResult(
            "Page Title",
            meta.title if meta.title is not None else message("missing", locale),
            True,
            Category.DETAILS,
        ),
        CheckResult(
            "Meta Description",
            meta.description if meta.description is not None else message("missing", locale),
            True,
            Category.DETAILS,
        ),
    ]
    return tuple(results)
