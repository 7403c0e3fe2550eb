"""
Defines Prometheus metrics for checkups.
"""

from __future__ import annotations

from typing import Any, Dict

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Histogram as _OrigHistogram

# ---------------------------------------------------------------------------
# Duplicate-safe Prometheus metric wrappers
# ---------------------------------------------------------------------------
# Importing the module twice (test reloads, embedding applications) must not
# raise a duplicate registration error.


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):  # type: ignore[override]
        existing = _PROM_REGISTRY._names_to_collectors.get(name)
        if existing is not None:
            return existing  # type: ignore[return-value]

        try:
            return metric_cls(name, documentation, *args, **kwargs)  # type: ignore[call-arg]
        except ValueError:
            # Registration lost the race, fall back to the now-existing collector.
            return _PROM_REGISTRY._names_to_collectors[name]  # type: ignore[return-value]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)  # type: ignore[assignment]
Histogram = _duplicate_safe_factory(_OrigHistogram)  # type: ignore[assignment]


def _create_metrics() -> Dict[str, Any]:
    return {
        "checkups_total": Counter(
            "seocheckup_checkups_total",
            "Number of checkup requests by outcome",
            ["outcome"],
        ),
        "fetch_latency_seconds": Histogram(
            "seocheckup_fetch_latency_seconds",
            "Wall-clock time from page request start to body availability",
            buckets=(0.1, 0.25, 0.5, 1.0, 2.0, 3.0, 5.0, 10.0, 30.0),
        ),
        "score_percentage": Histogram(
            "seocheckup_score_percentage",
            "Distribution of aggregate checkup scores",
            buckets=(10, 20, 30, 40, 50, 60, 70, 80, 90, 100),
        ),
        "check_results_total": Counter(
            "seocheckup_check_results_total",
            "Scorable check rows by category and outcome",
            ["category", "outcome"],
        ),
    }


METRICS: Dict[str, Any] = _create_metrics()
