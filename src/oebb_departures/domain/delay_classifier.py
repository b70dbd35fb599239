"""Delay computation and punctuality classification."""

import math
from dataclasses import dataclass
from datetime import datetime

from oebb_departures.domain.models.train_departure import DelayStatus

SLIGHT_DELAY_MAX_MINUTES = 5


@dataclass(frozen=True)
class DelayClassification:
    """Delay in whole minutes (never negative) and the matching status."""

    delay_minutes: int
    status: DelayStatus


def status_for(delay_minutes: int) -> DelayStatus:
    """Map a delay in minutes to its status: 0 on-time, 1-5 slightly delayed, >5 delayed."""
    if delay_minutes <= 0:
        return DelayStatus.ON_TIME
    if delay_minutes <= SLIGHT_DELAY_MAX_MINUTES:
        return DelayStatus.SLIGHTLY_DELAYED
    return DelayStatus.DELAYED


def classify(planned: datetime | None, actual: datetime | None) -> DelayClassification:
    """Classify the delay between a planned and an actual instant.

    The difference is rounded to the nearest minute (halves round up). Early
    departures are clamped to zero; a missing instant counts as no delay.
    """
    if planned is None or actual is None:
        return DelayClassification(0, DelayStatus.ON_TIME)

    minutes = math.floor((actual - planned).total_seconds() / 60 + 0.5)
    delay_minutes = max(0, minutes)
    return DelayClassification(delay_minutes, status_for(delay_minutes))


def classify_seconds(delay_seconds: int | float | None) -> DelayClassification:
    """Classify a delay reported directly in seconds (whole minutes, floored, clamped at zero)."""
    if delay_seconds is None:
        return DelayClassification(0, DelayStatus.ON_TIME)

    delay_minutes = max(0, math.floor(delay_seconds / 60))
    return DelayClassification(delay_minutes, status_for(delay_minutes))
