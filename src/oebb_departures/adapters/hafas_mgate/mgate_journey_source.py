"""HAFAS mgate journey source using the ÖBB TripSearch method."""

import logging
from typing import Any

from oebb_departures.adapters.hafas_mgate.constants import (
    ALL_PRODUCTS_FILTER,
    MGATE_CLIENT,
    MGATE_EXT,
    MGATE_LANG,
    MGATE_VERSION,
    NUM_CONNECTIONS,
)
from oebb_departures.adapters.hafas_mgate.leg_extractor import (
    MgateLegExtractor,
    MgateResponseError,
)
from oebb_departures.adapters.http_json_client import JsonHttpClient
from oebb_departures.domain.exceptions import SourceUnavailableError
from oebb_departures.domain.models import (
    ErrorDetails,
    RouteDirection,
    SourceDescriptor,
    UpstreamLeg,
)
from oebb_departures.domain.ports import JourneySource

logger = logging.getLogger(__name__)


class MgateJourneySource(JourneySource):
    """Primary source: trip search against the ÖBB HAFAS mgate endpoint."""

    def __init__(self, descriptor: SourceDescriptor, http_client: JsonHttpClient, aid: str) -> None:
        """Initialize with the source descriptor, HTTP client and access id.

        Args:
            descriptor: Descriptor with the mgate URL and timeout.
            http_client: Client used to POST the trip search.
            aid: HAFAS access id.
        """
        self._descriptor = descriptor
        self._http_client = http_client
        self._aid = aid

    @property
    def name(self) -> str:
        """Source name."""
        return self._descriptor.name

    async def fetch_legs(self, direction: RouteDirection) -> list[UpstreamLeg]:
        """Search trips between the direction's stations by HAFAS name."""
        payload = self.build_request(direction.origin.name, direction.destination.name)
        data = await self._http_client.request_json(
            self.name,
            self._descriptor.method,
            self._descriptor.url_template,
            self._descriptor.timeout_seconds,
            payload=payload,
        )

        try:
            legs = MgateLegExtractor.extract_legs(data)
        except MgateResponseError as e:
            raise SourceUnavailableError(self.name, ErrorDetails(reason=str(e))) from e

        logger.debug(f"{self.name} returned {len(legs)} leg(s) for {direction.key}")
        return legs

    def build_request(self, from_name: str, to_name: str) -> dict[str, Any]:
        """Build the TripSearch request body."""
        return {
            "lang": MGATE_LANG,
            "ver": MGATE_VERSION,
            "auth": {"aid": self._aid},
            "client": dict(MGATE_CLIENT),
            "svcReqL": [
                {
                    "req": {
                        "depLocL": [{"name": from_name}],
                        "arrLocL": [{"name": to_name}],
                        "getIST": True,
                        "jnyFltrL": [{"type": "PROD", "mode": "INC", "value": ALL_PRODUCTS_FILTER}],
                        "outFrwd": True,
                        "numF": NUM_CONNECTIONS,
                    },
                    "meth": "TripSearch",
                }
            ],
            "ext": MGATE_EXT,
        }
