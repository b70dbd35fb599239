"""Normalization of upstream legs into train departures."""

import logging

from oebb_departures.domain.delay_classifier import (
    DelayClassification,
    classify,
    classify_seconds,
)
from oebb_departures.domain.models import RankedDeparture, TrainDeparture, UpstreamLeg
from oebb_departures.domain.time_codec import EPOCH, format_clock

logger = logging.getLogger(__name__)

MAX_DEPARTURES = 3
FALLBACK_TRAIN_NUMBER = "RJ ???"
FALLBACK_TRAIN_TYPE = "RJ"
UNKNOWN_PLATFORM = "?"


class RecordNormalizer:
    """Maps source-agnostic upstream legs onto the canonical departure record."""

    @staticmethod
    def normalize(leg: UpstreamLeg) -> RankedDeparture | None:
        """Normalize one leg.

        Args:
            leg: Leg extracted from any supported source.

        Returns:
            The departure with its sort key, or None when the leg carries
            neither a time nor a line/product label.
        """
        if not RecordNormalizer._is_usable(leg):
            logger.debug(f"Dropping leg without line or time information: {leg}")
            return None

        actual_departure = leg.realtime_departure or leg.planned_departure
        actual_arrival = leg.realtime_arrival or leg.planned_arrival
        delay = RecordNormalizer._classify_delay(leg)
        train_number = leg.line_label or leg.product_label or FALLBACK_TRAIN_NUMBER

        departure = TrainDeparture(
            departure_clock=format_clock(actual_departure),
            arrival_clock=format_clock(actual_arrival),
            train_type=(
                _first_word(leg.product_label) or _first_word(train_number) or FALLBACK_TRAIN_TYPE
            ),
            train_number=train_number,
            delay_minutes=delay.delay_minutes,
            status=delay.status,
            platform=RecordNormalizer._combine_platforms(
                leg.departure_platform, leg.arrival_platform
            ),
        )
        return RankedDeparture(departure=departure, sort_key=actual_departure or EPOCH)

    @staticmethod
    def normalize_all(legs: list[UpstreamLeg]) -> list[RankedDeparture]:
        """Normalize legs, drop unusable ones, and keep the soonest three."""
        ranked = [r for r in (RecordNormalizer.normalize(leg) for leg in legs) if r is not None]
        return rank(ranked)

    @staticmethod
    def _is_usable(leg: UpstreamLeg) -> bool:
        has_time = any(
            (
                leg.planned_departure,
                leg.realtime_departure,
                leg.planned_arrival,
                leg.realtime_arrival,
            )
        )
        has_label = bool(leg.line_label or leg.product_label)
        return has_time or has_label

    @staticmethod
    def _classify_delay(leg: UpstreamLeg) -> DelayClassification:
        if leg.delay_seconds is not None:
            return classify_seconds(leg.delay_seconds)
        if leg.planned_departure and leg.realtime_departure:
            return classify(leg.planned_departure, leg.realtime_departure)
        # Departure realtime missing: arrival delay is the best remaining signal
        return classify(leg.planned_arrival, leg.realtime_arrival)

    @staticmethod
    def _combine_platforms(departure_platform: str | None, arrival_platform: str | None) -> str:
        if departure_platform and arrival_platform:
            return f"{departure_platform} → {arrival_platform}"
        return departure_platform or arrival_platform or UNKNOWN_PLATFORM


def rank(candidates: list[RankedDeparture]) -> list[RankedDeparture]:
    """Sort candidates ascending by actual departure and keep the first three."""
    return sorted(candidates, key=lambda r: r.sort_key)[:MAX_DEPARTURES]


def _first_word(value: str | None) -> str | None:
    if not value:
        return None
    words = value.split()
    return words[0] if words else None
