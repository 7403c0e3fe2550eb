"""
Pattern-based SEO signal extraction from raw HTML.

These functions deliberately scan text instead of building a DOM. Matching is
case-insensitive and tolerant: a missing or malformed tag yields zero or
False, never an exception.
"""

from __future__ import annotations

import re
from typing import Dict, Iterator

from .models import HeadingCounts, ImageStats, LinkStats, MetaSignals, PageSignals, SocialStats

# Headings are matched within a single line, shortest body first.
HEADING_PATTERN = re.compile(r"<h[1-6][^>]*>(.*?)</h[1-6]>", re.IGNORECASE)
HEADING_LEVEL_PATTERN = re.compile(r"<h([1-6])", re.IGNORECASE)

IMG_PATTERN = re.compile(r"<img\b[^>]*>", re.IGNORECASE)
ALT_ATTR_PATTERN = re.compile(r"(?<![\w-])alt\s*=", re.IGNORECASE)
EMPTY_ALT_PATTERN = re.compile(r"""(?<![\w-])alt\s*=\s*(?:""|'')""", re.IGNORECASE)

OPEN_GRAPH_PATTERN = re.compile(r"""<meta\b[^>]*(?<![\w-])property\s*=\s*["']og:[^"']*["'][^>]*>""", re.IGNORECASE)
TWITTER_CARD_PATTERN = re.compile(r"""<meta\b[^>]*(?<![\w-])name\s*=\s*["']twitter:[^"']*["'][^>]*>""", re.IGNORECASE)

ANCHOR_PATTERN = re.compile(r"""<a\b[^>]*(?<![\w-])href\s*=\s*["'][^"']*["'][^>]*>""", re.IGNORECASE)

TITLE_PATTERN = re.compile(r"<title\b[^>]*>(.*?)</title>", re.IGNORECASE | re.DOTALL)
# Quoted attribute values may contain ">".
META_TAG_PATTERN = re.compile(r"""<meta\b(?:[^>"']|"[^"]*"|'[^']*')*>""", re.IGNORECASE)
LINK_TAG_PATTERN = re.compile(r"""<link\b(?:[^>"']|"[^"]*"|'[^']*')*>""", re.IGNORECASE)
ATTRIBUTE_PATTERN = re.compile(
    r"""([\w:.-]+)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+))""",
    re.IGNORECASE,
)

SCHEMA_MARKERS = ("application/ld+json", "itemscope")


def analyze_headings(html: str) -> HeadingCounts:
    """Count ``<h1>``..``<h6>`` elements per level."""
    headings = tuple(match.group(0) for match in HEADING_PATTERN.finditer(html))
    counts: Dict[str, int] = {f"h{level}": 0 for level in range(1, 7)}
    for heading in headings:
        level = HEADING_LEVEL_PATTERN.match(heading)
        if level:
            counts[f"h{level.group(1)}"] += 1
    return HeadingCounts(headings=headings, **counts)


def _missing_alt(tag: str) -> bool:
    return not ALT_ATTR_PATTERN.search(tag) or bool(EMPTY_ALT_PATTERN.search(tag))


def analyze_images(html: str) -> ImageStats:
    images = IMG_PATTERN.findall(html)
    without_alt = sum(1 for tag in images if _missing_alt(tag))
    return ImageStats(total=len(images), without_alt=without_alt)


def analyze_social_tags(html: str) -> SocialStats:
    """Count Open Graph and Twitter Card meta tags. Repeated properties count every time."""
    return SocialStats(
        open_graph=len(OPEN_GRAPH_PATTERN.findall(html)),
        twitter=len(TWITTER_CARD_PATTERN.findall(html)),
    )


def analyze_links(html: str, self_hostname: str) -> LinkStats:
    """Split anchors into internal and external.

    An anchor is external when its tag text mentions ``http`` but not
    ``self_hostname``, the host of the environment running the checkup.
    The target site's own host plays no part in the decision.
    """
    host = self_hostname.lower()
    internal = external = 0
    for tag in ANCHOR_PATTERN.findall(html):
        text = tag.lower()
        if "http" in text and host not in text:
            external += 1
        else:
            internal += 1
    return LinkStats(total=internal + external, internal=internal, external=external)


def _attributes(tag: str) -> Dict[str, str]:
    attrs: Dict[str, str] = {}
    for match in ATTRIBUTE_PATTERN.finditer(tag):
        name = match.group(1).lower()
        if name in attrs:
            continue
        value = next((group for group in match.groups()[1:] if group is not None), "")
        attrs[name] = value
    return attrs


def _tags(pattern: re.Pattern[str], html: str) -> Iterator[Dict[str, str]]:
    for match in pattern.finditer(html):
        yield _attributes(match.group(0))


def analyze_meta(html: str) -> MetaSignals:
    """Detect title, description, keywords, viewport and canonical tags.

    Description and keywords only count when the tag carries a ``content``
    attribute; an empty one is still a match.
    """
    title_match = TITLE_PATTERN.search(html)
    title = title_match.group(1).strip() if title_match else None

    description = keywords = None
    has_viewport = False
    for attrs in _tags(META_TAG_PATTERN, html):
        name = attrs.get("name", "").strip().lower()
        if name == "description" and description is None and "content" in attrs:
            description = attrs["content"]
        elif name == "keywords" and keywords is None and "content" in attrs:
            keywords = attrs["content"]
        elif name == "viewport":
            has_viewport = True

    has_canonical = any(
        "canonical" in attrs.get("rel", "").lower().split() for attrs in _tags(LINK_TAG_PATTERN, html)
    )

    return MetaSignals(
        title=title,
        description=description,
        keywords=keywords,
        has_viewport=has_viewport,
        has_canonical=has_canonical,
    )


def has_schema_markup(html: str) -> bool:
    lowered = html.lower()
    return any(marker in lowered for marker in SCHEMA_MARKERS)


def extract_signals(html: str, self_hostname: str) -> PageSignals:
    """Run every extractor over ``html``."""
    return PageSignals(
        meta=analyze_meta(html),
        headings=analyze_headings(html),
        images=analyze_images(html),
        social=analyze_social_tags(html),
        links=analyze_links(html, self_hostname),
        has_schema_markup=has_schema_markup(html),
    )
