"""
SEO signal extraction and scoring engine.

Raw HTML goes in, a scored checklist comes out:
1. URL normalization
2. Pattern-based signal extraction (headings, images, social tags, links, meta tags, schema markup)
3. Report assembly in fixed category order
4. Aggregate scoring over the non-informational rows
"""

from .assembler import assemble
from .engine import handle_request, run_checkup
from .errors import InvalidInputError, NetworkError, SeoCheckupError
from .extractors import (
    analyze_headings,
    analyze_images,
    analyze_links,
    analyze_meta,
    analyze_social_tags,
    extract_signals,
    has_schema_markup,
)
from .models import (
    Category,
    CheckResult,
    CheckupRequest,
    CheckupResponse,
    FetchedPage,
    Notice,
    Report,
    RobotsProbe,
    Score,
)
from .preview import preview_report
from .protocols import PageFetcher
from .scoring import score
from .urls import hostname, normalize

__all__ = [
    "Category",
    "CheckResult",
    "CheckupRequest",
    "CheckupResponse",
    "FetchedPage",
    "InvalidInputError",
    "NetworkError",
    "Notice",
    "PageFetcher",
    "Report",
    "RobotsProbe",
    "Score",
    "SeoCheckupError",
    "analyze_headings",
    "analyze_images",
    "analyze_links",
    "analyze_meta",
    "analyze_social_tags",
    "assemble",
    "extract_signals",
    "handle_request",
    "has_schema_markup",
    "hostname",
    "normalize",
    "preview_report",
    "run_checkup",
    "score",
]
