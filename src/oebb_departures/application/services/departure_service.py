"""Departure service dispatching requests to per-direction coordinators."""

import logging
from typing import TYPE_CHECKING

from oebb_departures.application.services.fetch_coordinator import FetchCoordinator
from oebb_departures.application.services.source_chain import SourceChain
from oebb_departures.domain.exceptions import UnknownDirectionError
from oebb_departures.domain.models import FetchResult, RouteDirection

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from oebb_departures.domain.ports import JourneySourceProvider


class RouteDepartureService:
    """Owns one fetch coordinator per configured direction."""

    def __init__(
        self,
        directions: list[RouteDirection],
        source_provider: "JourneySourceProvider",
    ) -> None:
        """Initialize with the served directions and the provider of their sources.

        Args:
            directions: Directions to serve; keys must be unique.
            source_provider: Builds the ordered source list per direction.
        """
        keys = [direction.key for direction in directions]
        if len(keys) != len(set(keys)):
            raise ValueError(f"Direction keys must be unique, got {keys}")

        source_chain = SourceChain(source_provider)
        self._coordinators: dict[str, FetchCoordinator] = {
            direction.key: FetchCoordinator(direction, source_chain) for direction in directions
        }

    @property
    def directions(self) -> list[RouteDirection]:
        """Directions served, in registration order."""
        return [coordinator.direction for coordinator in self._coordinators.values()]

    def get_direction(self, direction_key: str) -> RouteDirection:
        """Look up a direction by its key."""
        return self._get_coordinator(direction_key).direction

    async def fetch(self, direction_key: str) -> FetchResult:
        """Fetch the next departures for a direction."""
        return await self._get_coordinator(direction_key).fetch()

    def _get_coordinator(self, direction_key: str) -> FetchCoordinator:
        coordinator = self._coordinators.get(direction_key)
        if coordinator is None:
            raise UnknownDirectionError(direction_key)
        return coordinator
