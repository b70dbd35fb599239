"""Domain models for ÖBB departures."""

from oebb_departures.domain.models.error_details import ErrorDetails
from oebb_departures.domain.models.fetch_result import NO_SOURCE, FetchResult, SourceResult
from oebb_departures.domain.models.route_direction import (
    RouteDirection,
    SourceDescriptor,
    SourceKind,
)
from oebb_departures.domain.models.station import Station
from oebb_departures.domain.models.train_departure import (
    DelayStatus,
    RankedDeparture,
    TrainDeparture,
)
from oebb_departures.domain.models.upstream_leg import UpstreamLeg

__all__ = [
    "NO_SOURCE",
    "DelayStatus",
    "ErrorDetails",
    "FetchResult",
    "RankedDeparture",
    "RouteDirection",
    "SourceDescriptor",
    "SourceKind",
    "SourceResult",
    "Station",
    "TrainDeparture",
    "UpstreamLeg",
]
