"""Score-to-letter-grade conversion against the configured scale."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from gradecheck.config.defaults import NO_GRADE
from gradecheck.config.schema import ScaleTier


def score_to_float(score: Any) -> float | None:
    """Coerce a numeric or numeric-string score to float.

    Returns None for None, booleans, NaN, and anything non-numeric.
    """
    if score is None or isinstance(score, bool):
        return None
    if isinstance(score, (int, float)):
        value = float(score)
    elif isinstance(score, str):
        try:
            value = float(score.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(value):
        return None
    return value


def resolve_letter_grade(score: Any, scale: Sequence[ScaleTier]) -> str:
    """Map a score onto the scale. Highest qualifying tier wins.

    Tiers are consulted by ``min_percent`` descending, whatever order the
    caller passes them in; the caller's sequence is left untouched.
    Returns ``"N/A"`` for a missing or non-numeric score, or when the score is
    below every tier.
    """
    value = score_to_float(score)
    if value is None:
        return NO_GRADE

    for tier in sorted(scale, key=lambda t: t.min_percent, reverse=True):
        if value >= tier.min_percent:
            return tier.letter_grade
    return NO_GRADE
