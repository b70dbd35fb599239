"""Tests for extracting legs from transport.rest style journey responses."""

from datetime import UTC, datetime
from typing import Any

import pytest

from oebb_departures.adapters.transport_rest import JourneysLegExtractor, JourneysResponseError


def _journey(**leg_overrides: Any) -> dict[str, Any]:
    leg = {
        "tripId": "1|123",
        "plannedDeparture": "2025-08-12T07:30:00+02:00",
        "departure": "2025-08-12T07:34:00+02:00",
        "departureDelay": 240,
        "plannedArrival": "2025-08-12T08:15:00+02:00",
        "arrival": "2025-08-12T08:19:00+02:00",
        "departurePlatform": "5",
        "plannedArrivalPlatform": "3",
        "line": {"name": "RJX 540", "productName": "RJX"},
    }
    leg.update(leg_overrides)
    return {"legs": [leg]}


class TestJourneysLegExtractor:
    """Tests for JourneysLegExtractor.extract_legs."""

    def test_when_full_leg_then_all_fields_extracted(self) -> None:
        """Given a complete first leg, when extracting, then times, delay and labels are read."""
        legs = JourneysLegExtractor.extract_legs({"journeys": [_journey()]})

        assert len(legs) == 1
        leg = legs[0]
        assert leg.planned_departure == datetime(2025, 8, 12, 5, 30, tzinfo=UTC)
        assert leg.realtime_departure == datetime(2025, 8, 12, 5, 34, tzinfo=UTC)
        assert leg.delay_seconds == 240
        assert leg.line_label == "RJX 540"
        assert leg.product_label == "RJX"
        assert leg.departure_platform == "5"
        assert leg.arrival_platform == "3"

    def test_when_routes_key_then_accepted(self) -> None:
        """Given a routes list instead of journeys, when extracting, then it is used."""
        legs = JourneysLegExtractor.extract_legs({"routes": [_journey()]})

        assert len(legs) == 1

    def test_when_planned_missing_then_falls_back_to_departure(self) -> None:
        """Given no plannedDeparture, when extracting, then departure is used as planned."""
        legs = JourneysLegExtractor.extract_legs(
            {"journeys": [_journey(plannedDeparture=None, departureDelay=None)]}
        )

        assert legs[0].planned_departure == legs[0].realtime_departure
        assert legs[0].delay_seconds is None

    @pytest.mark.parametrize("delay", [float("nan"), float("inf"), "240", True])
    def test_when_delay_not_a_finite_number_then_ignored(self, delay: Any) -> None:
        """Given a NaN, infinite or non-numeric delay, when extracting, then delay is None."""
        legs = JourneysLegExtractor.extract_legs({"journeys": [_journey(departureDelay=delay)]})

        assert len(legs) == 1
        assert legs[0].delay_seconds is None
        assert legs[0].line_label == "RJX 540"

    def test_when_leg_has_no_line_then_skipped(self) -> None:
        """Given a walking leg without line, when extracting, then it is skipped."""
        legs = JourneysLegExtractor.extract_legs(
            {"journeys": [_journey(line=None), _journey()]}
        )

        assert len(legs) == 1

    def test_when_journey_has_no_legs_then_skipped(self) -> None:
        """Given a journey without legs, when extracting, then it is skipped."""
        legs = JourneysLegExtractor.extract_legs({"journeys": [{"legs": []}, _journey()]})

        assert len(legs) == 1

    def test_when_platform_nested_in_stop_then_read(self) -> None:
        """Given platforms only on the nested stop objects, when extracting, then they are read."""
        journey = _journey(
            departurePlatform=None,
            plannedArrivalPlatform=None,
            arrival={"plannedPlatform": "2"},
        )

        legs = JourneysLegExtractor.extract_legs({"journeys": [journey]})

        assert legs[0].departure_platform is None
        assert legs[0].arrival_platform == "2"

    def test_when_empty_journey_list_then_no_legs(self) -> None:
        """Given an empty journeys list, when extracting, then an empty list."""
        assert JourneysLegExtractor.extract_legs({"journeys": []}) == []

    @pytest.mark.parametrize("payload", [None, "html", {"error": "x"}, {"journeys": "none"}])
    def test_when_no_journey_list_then_raises(self, payload: Any) -> None:
        """Given a payload without a journey list, when extracting, then raises."""
        with pytest.raises(JourneysResponseError):
            JourneysLegExtractor.extract_legs(payload)
