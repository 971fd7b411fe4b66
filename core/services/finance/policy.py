from __future__ import annotations

import logging
import os

from core.models import MarginStatus, VarianceStatus

logger = logging.getLogger(__name__)

# Lower bounds (inclusive), evaluated top-down.
MARGIN_EXCELLENT_THRESHOLD = 30.0
MARGIN_GOOD_THRESHOLD = 20.0
MARGIN_ACCEPTABLE_THRESHOLD = 10.0
MARGIN_POOR_THRESHOLD = 0.0

VARIANCE_TOLERANCE_PERCENT = 10.0

DEFAULT_MARGIN_BATCH_SIZE = 10
MARGIN_BATCH_SIZE_ENV = "AF_MARGIN_BATCH_SIZE"


def classify_margin(margin_percentage: float) -> MarginStatus:
    if margin_percentage >= MARGIN_EXCELLENT_THRESHOLD:
        return MarginStatus.EXCELLENT
    if margin_percentage >= MARGIN_GOOD_THRESHOLD:
        return MarginStatus.GOOD
    if margin_percentage >= MARGIN_ACCEPTABLE_THRESHOLD:
        return MarginStatus.ACCEPTABLE
    if margin_percentage >= MARGIN_POOR_THRESHOLD:
        return MarginStatus.POOR
    return MarginStatus.NEGATIVE


def classify_variance(value_variance_percent: float) -> VarianceStatus:
    if value_variance_percent <= -VARIANCE_TOLERANCE_PERCENT:
        return VarianceStatus.UNDER_BUDGET
    if value_variance_percent >= VARIANCE_TOLERANCE_PERCENT:
        return VarianceStatus.OVER_BUDGET
    return VarianceStatus.ON_BUDGET


def percent_of(delta: float, base: float) -> float:
    """delta as a percentage of base; 0 when there is no positive base."""
    if base > 0:
        return delta / base * 100.0
    return 0.0


def resolve_margin_batch_size() -> int:
    raw = (os.getenv(MARGIN_BATCH_SIZE_ENV, "") or "").strip()
    if not raw:
        return DEFAULT_MARGIN_BATCH_SIZE
    try:
        size = int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", MARGIN_BATCH_SIZE_ENV, raw)
        return DEFAULT_MARGIN_BATCH_SIZE
    if size < 1:
        logger.warning("Ignoring non-positive %s=%r", MARGIN_BATCH_SIZE_ENV, raw)
        return DEFAULT_MARGIN_BATCH_SIZE
    return size


__all__ = [
    "MARGIN_EXCELLENT_THRESHOLD",
    "MARGIN_GOOD_THRESHOLD",
    "MARGIN_ACCEPTABLE_THRESHOLD",
    "MARGIN_POOR_THRESHOLD",
    "VARIANCE_TOLERANCE_PERCENT",
    "DEFAULT_MARGIN_BATCH_SIZE",
    "MARGIN_BATCH_SIZE_ENV",
    "classify_margin",
    "classify_variance",
    "percent_of",
    "resolve_margin_batch_size",
]
