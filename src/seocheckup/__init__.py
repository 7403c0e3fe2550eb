"""
SEO Checkup - single-page SEO auditing from raw HTML.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .checkup import CheckupRequest, CheckupResponse, Report, handle_request, preview_report, run_checkup
from .config import Config

__all__ = [
    "__version__",
    "CheckupRequest",
    "CheckupResponse",
    "Config",
    "Report",
    "handle_request",
    "preview_report",
    "run_checkup",
]
