"""Factory building the ordered journey sources of a direction."""

import logging
from typing import TYPE_CHECKING

from oebb_departures.adapters.config import AppConfig
from oebb_departures.adapters.hafas_mgate import MgateJourneySource
from oebb_departures.adapters.http_json_client import JsonHttpClient
from oebb_departures.adapters.transport_rest import RestJourneySource
from oebb_departures.domain.models import RouteDirection, SourceDescriptor, SourceKind
from oebb_departures.domain.ports import JourneySource, JourneySourceProvider

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class JourneySourceFactory(JourneySourceProvider):
    """Builds the source list per direction: mgate first when configured, then the REST chain."""

    def __init__(self, config: AppConfig, session: "ClientSession | None" = None) -> None:
        """Initialize with app config and optional aiohttp session.

        Args:
            config: Application configuration (HAFAS credential, user agent).
            session: aiohttp ClientSession shared by all sources.
        """
        self._config = config
        self._http_client = JsonHttpClient(session=session, user_agent=config.user_agent)
        # Sources are stateless apart from their descriptor, so one instance per descriptor
        self._sources: dict[SourceDescriptor, JourneySource] = {}

    def sources_for(self, direction: RouteDirection) -> list[JourneySource]:
        """Return the sources to try for the direction, highest priority first."""
        sources: list[JourneySource] = []

        if direction.primary is not None:
            if self._config.hafas_enabled:
                sources.append(self._get_source(direction.primary))
            else:
                logger.debug(
                    f"[{direction.key}] HAFAS_AID not set, skipping {direction.primary.name}"
                )

        sources.extend(self._get_source(descriptor) for descriptor in direction.sources)
        return sources

    def _get_source(self, descriptor: SourceDescriptor) -> JourneySource:
        source = self._sources.get(descriptor)
        if source is None:
            source = self._create_source(descriptor)
            self._sources[descriptor] = source
        return source

    def _create_source(self, descriptor: SourceDescriptor) -> JourneySource:
        if descriptor.kind is SourceKind.HAFAS_MGATE:
            if self._config.hafas_aid is None:
                raise ValueError(f"{descriptor.name} requires HAFAS_AID")
            return MgateJourneySource(descriptor, self._http_client, self._config.hafas_aid)
        return RestJourneySource(descriptor, self._http_client)
