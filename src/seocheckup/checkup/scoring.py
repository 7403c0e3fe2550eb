"""
Aggregate scoring over report rows.
"""

from __future__ import annotations

from typing import Iterable

from .models import CheckResult, Score


def score(results: Iterable[CheckResult]) -> Score:
    """Count passing scorable rows.

    Details rows are skipped. The percentage rounds half up (12.5 -> 13) and
    is 0 when there is nothing to score.
    """
    scorable = [result for result in results if result.category.scorable]
    total = len(scorable)
    passed = sum(1 for result in scorable if result.passed)
    if total == 0:
        return Score(passed=0, total=0, percentage=0)
    percentage = (200 * passed + total) // (2 * total)
    return Score(passed=passed, total=total, percentage=percentage)
