"""Tests for the departures HTTP handlers and app wiring."""

import json
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.middleware.cors import CORSMiddleware

from oebb_departures.adapters.config import AppConfig, RouteDirectionLoader
from oebb_departures.adapters.web import (
    DeparturesEnvelope,
    RateLimitMiddleware,
    StaticScheduleProvider,
    TrainsEndpoint,
    create_app,
)
from oebb_departures.adapters.web.trains_endpoint import healthz
from oebb_departures.domain.exceptions import (
    AllSourcesExhaustedError,
    BusyError,
    UnknownDirectionError,
)
from oebb_departures.domain.models import DelayStatus, FetchResult, TrainDeparture

DIRECTIONS = RouteDirectionLoader.load(AppConfig(_env_file=None))
DEPARTURE = TrainDeparture(
    departure_clock="07:33",
    arrival_clock="08:18",
    train_type="RJX",
    train_number="RJX 540",
    delay_minutes=3,
    status=DelayStatus.SLIGHTLY_DELAYED,
    platform="5 → 3",
)


def _service(fetch: AsyncMock | None = None) -> MagicMock:
    by_key = {direction.key: direction for direction in DIRECTIONS}

    def get_direction(key: str):
        if key not in by_key:
            raise UnknownDirectionError(key)
        return by_key[key]

    service = MagicMock()
    service.directions = DIRECTIONS
    service.get_direction.side_effect = get_direction
    service.fetch = fetch or AsyncMock(
        return_value=FetchResult(departures=[DEPARTURE], source="oebb-macistry")
    )
    return service


def _request(direction: str = "stpoelten-linz", method: str = "GET") -> MagicMock:
    request = MagicMock()
    request.method = method
    request.path_params = {"direction": direction}
    return request


def _body(response) -> dict:
    return json.loads(response.body)


class TestTrainsEndpoint:
    """Tests for TrainsEndpoint.trains."""

    @pytest.mark.asyncio
    async def test_when_fetch_succeeds_then_200_envelope(self) -> None:
        """Given departures, when requesting, then a realtime success envelope is returned."""
        response = await TrainsEndpoint(_service()).trains(_request())

        assert response.status_code == 200
        body = _body(response)
        assert body["route"] == "St. Pölten → Linz"
        assert body["source"] == "oebb-macistry"
        assert body["realTimeData"] is True
        assert body["success"] is True
        assert "error" not in body
        assert body["timestamp"].endswith("Z")
        assert body["trains"] == [
            {
                "departure": "07:33",
                "arrival": "08:18",
                "trainType": "RJX",
                "trainNumber": "RJX 540",
                "delay": 3,
                "status": "slightly-delayed",
                "platform": "5 → 3",
            }
        ]

    @pytest.mark.asyncio
    async def test_when_no_trains_then_empty_success(self) -> None:
        """Given an empty result, when requesting, then success with no trains."""
        service = _service(AsyncMock(return_value=FetchResult(departures=[])))

        response = await TrainsEndpoint(service).trains(_request("linz-stpoelten"))

        body = _body(response)
        assert response.status_code == 200
        assert body["trains"] == []
        assert body["source"] == "none"
        assert body["route"] == "Linz → St. Pölten"

    @pytest.mark.asyncio
    async def test_when_busy_then_503(self) -> None:
        """Given a fetch in flight, when requesting, then 503 with the busy source tag."""
        service = _service(AsyncMock(side_effect=BusyError("stpoelten-linz")))

        response = await TrainsEndpoint(service).trains(_request())

        body = _body(response)
        assert response.status_code == 503
        assert body["source"] == "none - request in progress"
        assert body["success"] is False
        assert body["realTimeData"] is False
        assert body["error"] == "API call in progress - please wait"

    @pytest.mark.asyncio
    async def test_when_exhausted_with_error_policy_then_500(self) -> None:
        """Given all sources failed and the error policy, when requesting, then 500."""
        service = _service(
            AsyncMock(side_effect=AllSourcesExhaustedError("stpoelten-linz", ["oebb-macistry"]))
        )

        response = await TrainsEndpoint(service, fallback_policy="error").trains(_request())

        body = _body(response)
        assert response.status_code == 500
        assert body["trains"] == []
        assert body["source"] == "none - all APIs failed"
        assert body["error"] == "All APIs failed"

    @pytest.mark.asyncio
    async def test_when_exhausted_with_static_policy_then_static_schedule(self) -> None:
        """Given all sources failed and the static policy, when requesting, then scheduled trains."""
        service = _service(
            AsyncMock(side_effect=AllSourcesExhaustedError("stpoelten-linz", ["oebb-macistry"]))
        )
        endpoint = TrainsEndpoint(service, "static", StaticScheduleProvider())

        response = await endpoint.trains(_request())

        body = _body(response)
        assert response.status_code == 200
        assert body["source"] == "static-schedule"
        assert body["realTimeData"] is False
        assert body["success"] is False
        assert len(body["trains"]) == 3
        assert all(train["status"] == "on-time" for train in body["trains"])

    @pytest.mark.asyncio
    async def test_when_unknown_direction_then_404(self) -> None:
        """Given an unknown direction, when requesting, then 404 without fetching."""
        service = _service()

        response = await TrainsEndpoint(service).trains(_request("wien-linz"))

        assert response.status_code == 404
        assert _body(response)["success"] is False
        service.fetch.assert_not_called()

    @pytest.mark.asyncio
    async def test_when_options_then_empty_200(self) -> None:
        """Given an OPTIONS request, when handling, then empty 200 without fetching."""
        service = _service()

        response = await TrainsEndpoint(service).trains(_request(method="OPTIONS"))

        assert response.status_code == 200
        assert response.body == b""
        service.fetch.assert_not_called()

    def test_when_static_policy_without_provider_then_raises(self) -> None:
        """Given the static policy without schedule, when constructing, then ValueError."""
        with pytest.raises(ValueError):
            TrainsEndpoint(_service(), "static")


class TestIndexAndHealth:
    """Tests for the service descriptor and health check."""

    @pytest.mark.asyncio
    async def test_when_index_then_lists_endpoints(self) -> None:
        """Given the service, when requesting /, then the descriptor lists both directions."""
        response = await TrainsEndpoint(_service()).index(_request())

        body = _body(response)
        assert body["message"] == "ÖBB Train Departures API"
        assert body["version"] == "1.0.0"
        assert body["endpoints"] == [
            "/api/trains/stpoelten-linz",
            "/api/trains/linz-stpoelten",
            "/healthz",
        ]
        assert body["features"]

    @pytest.mark.asyncio
    async def test_when_healthz_then_ok(self) -> None:
        """Given a running service, when probing health, then 'Ok'."""
        response = await healthz(_request())

        assert response.status_code == 200
        assert response.body == b"Ok"


class TestEnvelope:
    """Tests for envelope serialization."""

    def test_when_error_absent_then_omitted(self) -> None:
        """Given no error, when dumping, then the error key is omitted."""
        envelope = DeparturesEnvelope.build(
            route="St. Pölten → Linz",
            departures=[],
            source="none",
            real_time_data=True,
            success=True,
            now=datetime(2025, 8, 12, 5, 30, tzinfo=UTC),
        )

        assert envelope.to_json_dict() == {
            "route": "St. Pölten → Linz",
            "timestamp": "2025-08-12T05:30:00.000Z",
            "trains": [],
            "source": "none",
            "realTimeData": True,
            "success": True,
        }


class TestCreateApp:
    """Tests for app wiring."""

    def test_when_created_then_routes_registered(self) -> None:
        """Given config, when creating the app, then the three routes exist."""
        app = create_app(_service(), AppConfig(_env_file=None))

        paths = {route.path for route in app.routes}
        assert paths == {"/", "/api/trains/{direction}", "/healthz"}

    def test_when_rate_limit_enabled_then_middleware_installed(self) -> None:
        """Given a positive limit, when creating the app, then CORS and rate limiting apply."""
        app = create_app(_service(), AppConfig(_env_file=None, rate_limit_per_minute=10))

        classes = [m.cls for m in app.user_middleware]
        assert CORSMiddleware in classes
        assert RateLimitMiddleware in classes

    def test_when_rate_limit_zero_then_middleware_skipped(self) -> None:
        """Given a zero limit, when creating the app, then no rate limiting middleware."""
        app = create_app(_service(), AppConfig(_env_file=None, rate_limit_per_minute=0))

        assert RateLimitMiddleware not in [m.cls for m in app.user_middleware]
