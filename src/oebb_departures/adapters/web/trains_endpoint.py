"""HTTP handlers for the departures API."""

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response

from oebb_departures import __version__
from oebb_departures.adapters.web.envelope import (
    SOURCE_ALL_FAILED,
    SOURCE_BUSY,
    SOURCE_STATIC,
    DeparturesEnvelope,
    ServiceInfo,
)
from oebb_departures.domain.exceptions import (
    AllSourcesExhaustedError,
    BusyError,
    UnknownDirectionError,
)
from oebb_departures.domain.models import NO_SOURCE, TrainDeparture

if TYPE_CHECKING:
    from oebb_departures.adapters.web.static_schedule import StaticScheduleProvider
    from oebb_departures.domain.ports import DepartureService

logger = logging.getLogger(__name__)

TRAINS_PATH_PREFIX = "/api/trains/"
SERVICE_FEATURES = [
    "HAFAS mgate primary source (when HAFAS_AID is configured)",
    "REST fallback chain: Scotty, transport.rest, macistry",
    "Next 3 direct trains sorted by actual departure",
    "Delay classification: on-time, slightly-delayed, delayed",
    "One upstream fetch in flight per direction",
]


class TrainsEndpoint:
    """Serves the per-direction departure envelopes and the service descriptor."""

    def __init__(
        self,
        departure_service: "DepartureService",
        fallback_policy: str = "error",
        static_schedule: "StaticScheduleProvider | None" = None,
    ) -> None:
        """Initialize the endpoint.

        Args:
            departure_service: Fetches departures per direction.
            fallback_policy: ``error`` answers exhaustion with 500, ``static`` with
                the static schedule.
            static_schedule: Provider used when the policy is ``static``.
        """
        if fallback_policy == "static" and static_schedule is None:
            raise ValueError("fallback_policy 'static' requires a static schedule provider")
        self._departure_service = departure_service
        self._fallback_policy = fallback_policy
        self._static_schedule = static_schedule

    async def trains(self, request: Request) -> Response:
        """Handle ``/api/trains/{direction}``."""
        if request.method == "OPTIONS":
            return options_response(request)

        direction_key = request.path_params["direction"]
        try:
            route = self._departure_service.get_direction(direction_key).label
        except UnknownDirectionError as e:
            logger.info(f"Request for unknown direction '{direction_key}'")
            return self._envelope_response(direction_key, [], NO_SOURCE, 404, error=str(e))

        try:
            result = await self._departure_service.fetch(direction_key)
        except BusyError as e:
            logger.info(f"[{direction_key}] Rejected request, fetch already in progress")
            return self._envelope_response(route, [], SOURCE_BUSY, 503, error=str(e))
        except AllSourcesExhaustedError as e:
            return self._exhausted_response(direction_key, route, e)

        envelope = DeparturesEnvelope.build(
            route=route,
            departures=result.departures,
            source=result.source,
            real_time_data=True,
            success=True,
        )
        return JSONResponse(envelope.to_json_dict())

    async def index(self, request: Request) -> Response:
        """Handle ``/`` with a short description of the service."""
        if request.method == "OPTIONS":
            return options_response(request)

        endpoints = [
            f"{TRAINS_PATH_PREFIX}{direction.key}"
            for direction in self._departure_service.directions
        ]
        info = ServiceInfo(
            message="ÖBB Train Departures API",
            description="Next direct trains between St. Pölten Hbf and Linz Hbf",
            endpoints=[*endpoints, "/healthz"],
            version=__version__,
            features=SERVICE_FEATURES,
        )
        return JSONResponse(info.to_json_dict())

    def _exhausted_response(
        self, direction_key: str, route: str, error: AllSourcesExhaustedError
    ) -> Response:
        if self._fallback_policy == "static" and self._static_schedule is not None:
            departures = self._static_schedule.next_departures(direction_key, datetime.now(UTC))
            logger.warning(f"[{direction_key}] All sources failed, serving static schedule")
            return self._envelope_response(
                route, departures, SOURCE_STATIC, 200, error=str(error)
            )
        return self._envelope_response(route, [], SOURCE_ALL_FAILED, 500, error=str(error))

    @staticmethod
    def _envelope_response(
        route: str,
        departures: list[TrainDeparture],
        source: str,
        status_code: int,
        error: str,
    ) -> Response:
        envelope = DeparturesEnvelope.build(
            route=route,
            departures=departures,
            source=source,
            real_time_data=False,
            success=False,
            error=error,
        )
        return JSONResponse(envelope.to_json_dict(), status_code=status_code)


def options_response(_request: Request) -> Response:
    """Answer a non-preflight OPTIONS request with an empty 200."""
    return Response(status_code=200)


async def healthz(request: Request) -> Response:
    """Liveness probe."""
    if request.method == "OPTIONS":
        return options_response(request)
    return PlainTextResponse("Ok")
