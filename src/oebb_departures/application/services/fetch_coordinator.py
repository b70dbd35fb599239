"""Single-flight coordination of departure fetches per direction."""

import logging
from enum import Enum

from oebb_departures.application.services.record_normalizer import rank
from oebb_departures.application.services.source_chain import SourceChain
from oebb_departures.domain.exceptions import BusyError
from oebb_departures.domain.models import FetchResult, RouteDirection

logger = logging.getLogger(__name__)


class FetchState(Enum):
    """State of a direction's fetch guard."""

    IDLE = "idle"
    IN_FLIGHT = "in_flight"


class FetchCoordinator:
    """Runs at most one fetch at a time for its direction.

    A second fetch while one is running fails immediately with BusyError
    instead of queuing. The guard is set before the first await and cleared
    in a ``finally`` block, so it is released on every exit path.
    """

    def __init__(self, direction: RouteDirection, source_chain: SourceChain) -> None:
        """Initialize with the direction served and the chain that resolves it."""
        self._direction = direction
        self._source_chain = source_chain
        self._state = FetchState.IDLE

    @property
    def direction(self) -> RouteDirection:
        """Direction served by this coordinator."""
        return self._direction

    @property
    def state(self) -> FetchState:
        """Current guard state."""
        return self._state

    async def fetch(self) -> FetchResult:
        """Fetch the next departures for the direction.

        Raises:
            BusyError: If a fetch is already in flight.
            AllSourcesExhaustedError: If every source failed.
        """
        if self._state is FetchState.IN_FLIGHT:
            logger.info(f"[{self._direction.key}] fetch rejected, another one is in flight")
            raise BusyError(self._direction.key)

        self._state = FetchState.IN_FLIGHT
        try:
            result = await self._source_chain.resolve(self._direction)
            departures = [ranked.departure for ranked in rank(result.candidates)]
            return FetchResult(departures=departures, source=result.source)
        finally:
            self._state = FetchState.IDLE
