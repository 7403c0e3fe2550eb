"""Logging and metrics for SEO Checkup."""

from __future__ import annotations

from typing import Any, Dict, Optional

from prometheus_client import REGISTRY, generate_latest, write_to_textfile

from .logging import configure_logging
from .metrics import METRICS

__all__ = ["configure_logging", "METRICS", "increment", "histogram", "export_prometheus", "write_metrics"]


def increment(name: str, value: float = 1.0, labels: Optional[Dict[str, Any]] = None) -> None:
    """Increment a counter metric."""
    if name in METRICS:
        metric = METRICS[name]
        if labels is not None:
            metric.labels(**labels).inc(value)
        else:
            metric.inc(value)


def histogram(name: str, value: float, labels: Optional[Dict[str, Any]] = None) -> None:
    """Observe a histogram metric."""
    if name in METRICS:
        metric = METRICS[name]
        if labels is not None:
            metric.labels(**labels).observe(value)
        else:
            metric.observe(value)


def export_prometheus() -> str:
    """Export metrics in Prometheus format."""
    return generate_latest(REGISTRY).decode("utf-8")


def write_metrics(path: str) -> None:
    """Write every metric to ``path`` in the node exporter textfile format. The file is replaced atomically."""
    write_to_textfile(path, REGISTRY)
