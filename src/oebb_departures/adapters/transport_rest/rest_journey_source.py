"""REST journey source for transport.rest style endpoints."""

import logging
from datetime import datetime
from urllib.parse import quote_plus

from oebb_departures.adapters.http_json_client import JsonHttpClient
from oebb_departures.adapters.transport_rest.leg_extractor import (
    JourneysLegExtractor,
    JourneysResponseError,
)
from oebb_departures.domain.exceptions import SourceUnavailableError
from oebb_departures.domain.models import (
    ErrorDetails,
    RouteDirection,
    SourceDescriptor,
    UpstreamLeg,
)
from oebb_departures.domain.ports import JourneySource
from oebb_departures.domain.time_codec import now_local

logger = logging.getLogger(__name__)


class RestJourneySource(JourneySource):
    """One entry of the REST chain, queried with a GET against its URL template."""

    def __init__(self, descriptor: SourceDescriptor, http_client: JsonHttpClient) -> None:
        """Initialize with the source descriptor and HTTP client.

        Args:
            descriptor: Descriptor with URL template and timeout.
            http_client: Client used for the request.
        """
        self._descriptor = descriptor
        self._http_client = http_client

    @property
    def name(self) -> str:
        """Source name."""
        return self._descriptor.name

    async def fetch_legs(self, direction: RouteDirection) -> list[UpstreamLeg]:
        """Query journeys between the direction's stations."""
        url = self.build_url(direction, now_local())
        data = await self._http_client.request_json(
            self.name,
            self._descriptor.method,
            url,
            self._descriptor.timeout_seconds,
        )

        try:
            legs = JourneysLegExtractor.extract_legs(data)
        except JourneysResponseError as e:
            raise SourceUnavailableError(self.name, ErrorDetails(reason=str(e))) from e

        logger.debug(f"{self.name} returned {len(legs)} leg(s) for {direction.key}")
        return legs

    def build_url(self, direction: RouteDirection, when: datetime) -> str:
        """Expand the URL template for a direction at a local departure time."""
        return self._descriptor.url_template.format(
            from_id=direction.origin.id,
            to_id=direction.destination.id,
            from_name=quote_plus(direction.origin.name),
            to_name=quote_plus(direction.destination.name),
            date=when.strftime("%Y%m%d"),
            time=when.strftime("%H%M"),
        )
