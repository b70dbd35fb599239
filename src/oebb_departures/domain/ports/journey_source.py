"""Journey source port."""

from typing import Protocol

from oebb_departures.domain.models.route_direction import RouteDirection
from oebb_departures.domain.models.upstream_leg import UpstreamLeg


class JourneySource(Protocol):
    """Port for one upstream source of direct journeys."""

    @property
    def name(self) -> str:
        """Name used for logging and as the envelope's source tag."""
        ...

    async def fetch_legs(self, direction: RouteDirection) -> list[UpstreamLeg]:
        """Fetch the first leg of each journey offered for the direction.

        Raises:
            SourceUnavailableError: If the source failed or its payload lacks
                a recognizable journey list.
        """
        ...


class JourneySourceProvider(Protocol):
    """Port for building the ordered source list of a direction."""

    def sources_for(self, direction: RouteDirection) -> list[JourneySource]:
        """Return the sources to try for the direction, highest priority first."""
        ...
