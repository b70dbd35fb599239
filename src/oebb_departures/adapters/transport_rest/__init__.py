"""REST journey adapters (transport.rest, Scotty query.exe, macistry)."""

from oebb_departures.adapters.transport_rest.leg_extractor import (
    JourneysLegExtractor,
    JourneysResponseError,
)
from oebb_departures.adapters.transport_rest.rest_journey_source import RestJourneySource

__all__ = ["JourneysLegExtractor", "JourneysResponseError", "RestJourneySource"]
