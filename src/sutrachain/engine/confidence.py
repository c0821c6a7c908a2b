"""Aggregate confidence for accumulate-all families."""

from __future__ import annotations

from collections.abc import Sequence

from sutrachain.constants.families import CONFIDENCE_PRECISION, DEFAULT_CONFIDENCE_STEP


def accumulated_confidence(confidences: Sequence[float], *, step: float = DEFAULT_CONFIDENCE_STEP) -> float:
    """Return ``max(confidences) - step * (n - 1)``, never below zero.

    An empty sequence means nothing contributed and yields ``0.0``.
    """
    if not confidences:
        return 0.0
    value = max(confidences) - step * (len(confidences) - 1)
    return round(max(0.0, value), CONFIDENCE_PRECISION)


def decisive_confidence(confidence: float) -> float:
    """Round a single decisive confidence the same way aggregates are rounded."""
    return round(float(confidence), CONFIDENCE_PRECISION)
