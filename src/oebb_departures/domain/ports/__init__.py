"""Ports (interfaces) for the ports-and-adapters architecture."""

from oebb_departures.domain.ports.departure_service import DepartureService
from oebb_departures.domain.ports.display_adapter import DisplayAdapter
from oebb_departures.domain.ports.journey_source import JourneySource, JourneySourceProvider

__all__ = [
    "DepartureService",
    "DisplayAdapter",
    "JourneySource",
    "JourneySourceProvider",
]
