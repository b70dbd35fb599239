"""Upstream leg domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UpstreamLeg:
    """One ride segment as reported by an upstream source, reduced to common fields.

    Every field is optional: upstream records are sparse and a missing value
    means "unknown", never a parse failure.
    """

    planned_departure: datetime | None = None
    realtime_departure: datetime | None = None
    planned_arrival: datetime | None = None
    realtime_arrival: datetime | None = None
    delay_seconds: int | None = None  # Reported directly by some sources instead of two instants
    line_label: str | None = None  # e.g. "WB 8652"
    product_label: str | None = None  # e.g. "RJX 540"
    departure_platform: str | None = None
    arrival_platform: str | None = None
