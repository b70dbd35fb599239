"""Adapters layer - external system integrations."""

from oebb_departures.adapters.config import AppConfig, RouteDirectionLoader
from oebb_departures.adapters.hafas_mgate import MgateJourneySource
from oebb_departures.adapters.journey_source_factory import JourneySourceFactory
from oebb_departures.adapters.transport_rest import RestJourneySource
from oebb_departures.adapters.web import StarletteWebAdapter

__all__ = [
    "AppConfig",
    "JourneySourceFactory",
    "MgateJourneySource",
    "RestJourneySource",
    "RouteDirectionLoader",
    "StarletteWebAdapter",
]
