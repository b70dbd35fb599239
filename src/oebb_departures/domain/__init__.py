"""Domain layer - core business logic and models."""

from oebb_departures.domain.models import (
    DelayStatus,
    RouteDirection,
    TrainDeparture,
    UpstreamLeg,
)
from oebb_departures.domain.ports import (
    DepartureService,
    DisplayAdapter,
    JourneySource,
)

__all__ = [
    "DelayStatus",
    "DepartureService",
    "DisplayAdapter",
    "JourneySource",
    "RouteDirection",
    "TrainDeparture",
    "UpstreamLeg",
]
