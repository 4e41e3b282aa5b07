"""Grading-period selection for a course."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from gradecheck.engine.models import GradingPeriod

logger = logging.getLogger(__name__)

# Periods without a usable end date rank behind every dated period
_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def select_period(periods: Any, target_title: str) -> GradingPeriod | None:
    """Pick the most recently ending period titled exactly ``target_title``.

    Title matching is case-sensitive. Among periods with equal end dates the
    one listed first wins (``sorted`` is stable under ``reverse=True``).
    Raw Canvas dicts are accepted alongside GradingPeriod objects.
    Returns None when ``periods`` is not a list or nothing matches.
    """
    if not isinstance(periods, (list, tuple)):
        return None

    candidates = [
        GradingPeriod.from_api(p) if isinstance(p, dict) else p
        for p in periods
    ]
    matches = [
        p for p in candidates
        if isinstance(p, GradingPeriod) and p.title == target_title
    ]
    if not matches:
        return None

    ranked = sorted(matches, key=lambda p: p.end_at or _OLDEST, reverse=True)
    if len(ranked) > 1:
        logger.debug(
            "%d periods titled %r, using id=%s (ends %s)",
            len(ranked),
            target_title,
            ranked[0].id,
            ranked[0].end_date,
        )
    return ranked[0]
