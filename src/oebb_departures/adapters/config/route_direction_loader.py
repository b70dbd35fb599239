"""Route direction loader."""

from oebb_departures.adapters.config.app_config import AppConfig
from oebb_departures.adapters.hafas_mgate.constants import MGATE_SOURCE_NAME, MGATE_URL
from oebb_departures.adapters.transport_rest.constants import DEFAULT_REST_CHAIN
from oebb_departures.domain.models import RouteDirection, SourceDescriptor, SourceKind, Station

ST_POELTEN = Station(id="8100008", name="St. Pölten Hbf", short_name="St. Pölten")
LINZ = Station(id="8100013", name="Linz Hbf", short_name="Linz")


class RouteDirectionLoader:
    """Builds the two supported route directions from app config."""

    @staticmethod
    def load(config: AppConfig) -> list[RouteDirection]:
        """Build St. Pölten → Linz and Linz → St. Pölten with their source chains."""
        return [
            RouteDirectionLoader.build_direction("stpoelten-linz", ST_POELTEN, LINZ, config),
            RouteDirectionLoader.build_direction("linz-stpoelten", LINZ, ST_POELTEN, config),
        ]

    @staticmethod
    def build_direction(
        key: str, origin: Station, destination: Station, config: AppConfig
    ) -> RouteDirection:
        """Build one direction with the default REST chain and the mgate primary source."""
        sources = [
            SourceDescriptor(
                name=name,
                kind=SourceKind.JOURNEYS,
                url_template=url_template,
                method="GET",
                timeout_seconds=config.rest_timeout_seconds,
            )
            for name, url_template in DEFAULT_REST_CHAIN
        ]
        primary = SourceDescriptor(
            name=MGATE_SOURCE_NAME,
            kind=SourceKind.HAFAS_MGATE,
            url_template=MGATE_URL,
            method="POST",
            timeout_seconds=config.hafas_timeout_seconds,
        )
        return RouteDirection(
            key=key,
            origin=origin,
            destination=destination,
            sources=sources,
            primary=primary,
        )
