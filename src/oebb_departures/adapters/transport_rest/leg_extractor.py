"""Extractor for transport.rest style journey responses.

Also used for Scotty query.exe JSON output and the macistry mirror, which
expose the same ``journeys[].legs[]`` structure with ISO-8601 times.
"""

import logging
import math
from datetime import datetime
from typing import Any

from oebb_departures.adapters.transport_rest.constants import JOURNEY_LIST_KEYS
from oebb_departures.domain.models import UpstreamLeg
from oebb_departures.domain.time_codec import TimeFormat, parse_source_time

logger = logging.getLogger(__name__)


class JourneysResponseError(ValueError):
    """The payload has no recognizable journey list."""


class JourneysLegExtractor:
    """Turns ``journeys``/``routes`` payloads into upstream legs."""

    @staticmethod
    def extract_legs(payload: Any) -> list[UpstreamLeg]:
        """Extract the first leg of every journey.

        Journeys without legs and legs without a line are skipped.

        Raises:
            JourneysResponseError: If neither a journeys nor a routes list is present.
        """
        journeys = JourneysLegExtractor._journey_list(payload)

        legs = []
        for journey in journeys:
            leg = JourneysLegExtractor._first_leg(journey)
            if leg is None:
                continue
            line = leg.get("line")
            if not isinstance(line, dict):
                logger.debug(f"Skipping journey leg without line: {leg.get('tripId')}")
                continue
            try:
                legs.append(JourneysLegExtractor._extract_leg(leg, line))
            except (TypeError, ValueError, AttributeError) as e:
                logger.debug(f"Skipping malformed journey leg {leg.get('tripId')}: {e}")
        return legs

    @staticmethod
    def _journey_list(payload: Any) -> list[Any]:
        if not isinstance(payload, dict):
            raise JourneysResponseError("response is not a JSON object")
        for key in JOURNEY_LIST_KEYS:
            journeys = payload.get(key)
            if isinstance(journeys, list):
                return journeys
        raise JourneysResponseError(f"response has none of {', '.join(JOURNEY_LIST_KEYS)}")

    @staticmethod
    def _first_leg(journey: Any) -> dict[str, Any] | None:
        if not isinstance(journey, dict):
            return None
        legs = journey.get("legs")
        if not isinstance(legs, list) or not legs or not isinstance(legs[0], dict):
            return None
        return legs[0]

    @staticmethod
    def _extract_leg(leg: dict[str, Any], line: dict[str, Any]) -> UpstreamLeg:
        departure = leg.get("departure")
        arrival = leg.get("arrival")
        delay = leg.get("departureDelay")

        return UpstreamLeg(
            planned_departure=_parse_iso(leg.get("plannedDeparture") or departure),
            realtime_departure=_parse_iso(departure),
            planned_arrival=_parse_iso(leg.get("plannedArrival") or arrival),
            realtime_arrival=_parse_iso(arrival),
            delay_seconds=_delay_seconds(delay),
            line_label=_text(line.get("name")),
            product_label=_text(line.get("productName")),
            departure_platform=JourneysLegExtractor._platform(leg, "departure"),
            arrival_platform=JourneysLegExtractor._platform(leg, "arrival"),
        )

    @staticmethod
    def _platform(leg: dict[str, Any], side: str) -> str | None:
        """Realtime platform first, then planned; tolerates an object-valued stop field."""
        stop = leg.get(side)
        nested = stop if isinstance(stop, dict) else {}
        for value in (
            leg.get(f"{side}Platform"),
            leg.get(f"planned{side.capitalize()}Platform"),
            nested.get("platform"),
            nested.get("plannedPlatform"),
        ):
            platform = _text(value)
            if platform:
                return platform
        return None


def _delay_seconds(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int | float) or not math.isfinite(value):
        return None
    return int(value)


def _parse_iso(value: Any) -> datetime | None:
    if not isinstance(value, str):
        return None
    return parse_source_time(value, TimeFormat.ISO)


def _text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
