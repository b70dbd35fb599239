"""Configuration adapters."""

from oebb_departures.adapters.config.app_config import AppConfig
from oebb_departures.adapters.config.route_direction_loader import RouteDirectionLoader

__all__ = ["AppConfig", "RouteDirectionLoader"]
