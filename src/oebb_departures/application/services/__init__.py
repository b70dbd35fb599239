"""Application services (use cases) for departure fetching."""

from oebb_departures.application.services.departure_service import RouteDepartureService
from oebb_departures.application.services.fetch_coordinator import FetchCoordinator, FetchState
from oebb_departures.application.services.record_normalizer import (
    MAX_DEPARTURES,
    RecordNormalizer,
)
from oebb_departures.application.services.source_chain import SourceChain

__all__ = [
    "MAX_DEPARTURES",
    "FetchCoordinator",
    "FetchState",
    "RecordNormalizer",
    "RouteDepartureService",
    "SourceChain",
]
