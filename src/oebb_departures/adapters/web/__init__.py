"""Web adapter for the departures API."""

from oebb_departures.adapters.web.envelope import DeparturesEnvelope, ServiceInfo, TrainSchema
from oebb_departures.adapters.web.rate_limit_middleware import (
    RateLimitMiddleware,
    extract_client_ip,
)
from oebb_departures.adapters.web.starlette_app import StarletteWebAdapter, create_app
from oebb_departures.adapters.web.static_schedule import ScheduledService, StaticScheduleProvider
from oebb_departures.adapters.web.trains_endpoint import TrainsEndpoint

__all__ = [
    "DeparturesEnvelope",
    "RateLimitMiddleware",
    "ScheduledService",
    "ServiceInfo",
    "StarletteWebAdapter",
    "StaticScheduleProvider",
    "TrainSchema",
    "TrainsEndpoint",
    "create_app",
    "extract_client_ip",
]
