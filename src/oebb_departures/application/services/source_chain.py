"""Ordered fallback across upstream journey sources."""

import logging
from typing import TYPE_CHECKING

from oebb_departures.application.services.record_normalizer import RecordNormalizer
from oebb_departures.domain.exceptions import AllSourcesExhaustedError, SourceUnavailableError
from oebb_departures.domain.models import NO_SOURCE, RouteDirection, SourceResult

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from oebb_departures.domain.ports import JourneySourceProvider


class SourceChain:
    """Tries the sources of a direction in priority order until one yields departures.

    Sources are never queried concurrently: the first one that produces at
    least one usable record wins and later sources are not consulted.
    """

    def __init__(self, source_provider: "JourneySourceProvider") -> None:
        """Initialize with the provider that builds the ordered source list."""
        self._source_provider = source_provider

    async def resolve(self, direction: RouteDirection) -> SourceResult:
        """Resolve ranked departure candidates for a direction.

        Returns:
            The winning source's candidates (sorted, at most three), or an
            empty result when sources answered but offered no usable journey.

        Raises:
            AllSourcesExhaustedError: If every source failed.
        """
        sources = self._source_provider.sources_for(direction)
        attempted: list[str] = []
        answered_empty = False

        for source in sources:
            attempted.append(source.name)
            try:
                legs = await source.fetch_legs(direction)
            except SourceUnavailableError as e:
                logger.warning(f"[{direction.key}] source {source.name} unavailable: {e}")
                continue

            candidates = RecordNormalizer.normalize_all(legs)
            if candidates:
                logger.info(
                    f"[{direction.key}] {source.name} yielded {len(candidates)} departure(s) "
                    f"from {len(legs)} leg(s)"
                )
                return SourceResult(source=source.name, candidates=candidates)

            logger.info(f"[{direction.key}] {source.name} returned no usable journeys")
            answered_empty = True

        if answered_empty:
            return SourceResult(source=NO_SOURCE)

        logger.error(f"[{direction.key}] all sources failed: {', '.join(attempted) or '(none)'}")
        raise AllSourcesExhaustedError(direction.key, attempted)
