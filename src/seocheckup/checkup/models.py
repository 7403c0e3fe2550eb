"""
Data models for checkup results.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Category(str, Enum):
    """Report sections, declared in display order."""

    BASIC = "Basic"
    PERFORMANCE = "Performance"
    META_TAGS = "Meta Tags"
    CONTENT = "Content"
    IMAGES = "Images"
    SOCIAL = "Social"
    TECHNICAL = "Technical"
    LINKS = "Links"
    DETAILS = "Details"

    @property
    def scorable(self) -> bool:
        return self is not Category.DETAILS


@dataclass(slots=True, frozen=True)
class CheckResult:
    """One evaluated or informational row of a report."""

    label: str
    value: str
    passed: bool
    category: Category


@dataclass(slots=True, frozen=True)
class Score:
    """Aggregate over the scorable rows of a report."""

    passed: int
    total: int
    percentage: int

    def __post_init__(self) -> None:
        if not (0 <= self.passed <= self.total):
            raise ValueError("passed must be between 0 and total")
        if not (0 <= self.percentage <= 100):
            raise ValueError("percentage must be between 0 and 100")


@dataclass(slots=True, frozen=True)
class Report:
    """Scored checklist for one analysed page."""

    url: str
    results: tuple[CheckResult, ...]
    score: Score
    load_time_ms: int | None = None
    preview: bool = False

    def by_category(self) -> dict[Category, list[CheckResult]]:
        """Group the scorable rows by category, keeping report order."""
        grouped: dict[Category, list[CheckResult]] = {}
        for result in self.results:
            if not result.category.scorable:
                continue
            grouped.setdefault(result.category, []).append(result)
        return grouped

    @property
    def details(self) -> list[CheckResult]:
        return [result for result in self.results if result.category is Category.DETAILS]

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "preview": self.preview,
            "load_time_ms": self.load_time_ms,
            "score": {
                "passed": self.score.passed,
                "total": self.score.total,
                "percentage": self.score.percentage,
            },
            "results": [
                {
                    "label": result.label,
                    "value": result.value,
                    "passed": result.passed,
                    "category": result.category.value,
                }
                for result in self.results
            ],
        }


# --- Extractor outputs ---


@dataclass(slots=True, frozen=True)
class HeadingCounts:
    headings: tuple[str, ...]
    h1: int = 0
    h2: int = 0
    h3: int = 0
    h4: int = 0
    h5: int = 0
    h6: int = 0


@dataclass(slots=True, frozen=True)
class ImageStats:
    total: int
    without_alt: int

    @property
    def with_alt(self) -> int:
        return self.total - self.without_alt


@dataclass(slots=True, frozen=True)
class SocialStats:
    open_graph: int
    twitter: int


@dataclass(slots=True, frozen=True)
class LinkStats:
    total: int
    internal: int
    external: int


@dataclass(slots=True, frozen=True)
class MetaSignals:
    """Presence of document-level tags. Text fields are None when the tag is absent."""

    title: str | None = None
    description: str | None = None
    keywords: str | None = None
    has_viewport: bool = False
    has_canonical: bool = False


@dataclass(slots=True, frozen=True)
class PageSignals:
    """Everything the extractors found in one HTML document."""

    meta: MetaSignals
    headings: HeadingCounts
    images: ImageStats
    social: SocialStats
    links: LinkStats
    has_schema_markup: bool


# --- Collaborator and request/response objects ---


@dataclass(slots=True, frozen=True)
class FetchedPage:
    """Main page as returned by the fetch collaborator."""

    status: int
    body_text: str
    url: str
    final_url: str
    elapsed_ms: int

    @property
    def status_ok(self) -> bool:
        return 200 <= self.status < 300


@dataclass(slots=True, frozen=True)
class RobotsProbe:
    """Outcome of the robots.txt HEAD probe.

    ``status`` is None when the probe failed at the transport level. ``opaque``
    marks a response whose status cannot be observed; it counts as found.
    """

    status: int | None = None
    opaque: bool = False

    @property
    def reachable_or_opaque(self) -> bool:
        if self.opaque:
            return True
        return self.status is not None and 200 <= self.status < 300


@dataclass(slots=True, frozen=True)
class CheckupRequest:
    url: str
    preview: bool = False


@dataclass(slots=True, frozen=True)
class Notice:
    """Single user-facing message accompanying a response."""

    level: str  # "success", "info" or "error"
    title: str
    description: str


@dataclass(slots=True, frozen=True)
class CheckupResponse:
    notice: Notice
    report: Report | None = None

    @property
    def ok(self) -> bool:
        return self.report is not None
