"""Departure service port."""

from typing import Protocol

from oebb_departures.domain.models.fetch_result import FetchResult
from oebb_departures.domain.models.route_direction import RouteDirection


class DepartureService(Protocol):
    """Port for fetching normalized departures per direction."""

    @property
    def directions(self) -> list[RouteDirection]:
        """Directions served, in registration order."""
        ...

    def get_direction(self, direction_key: str) -> RouteDirection:
        """Look up a direction by its key.

        Raises:
            UnknownDirectionError: If the key is not configured.
        """
        ...

    async def fetch(self, direction_key: str) -> FetchResult:
        """Fetch the next departures for a direction.

        Raises:
            UnknownDirectionError: If the key is not configured.
            BusyError: If a fetch for the direction is already running.
            AllSourcesExhaustedError: If every source failed.
        """
        ...
