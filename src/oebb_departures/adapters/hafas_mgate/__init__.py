"""HAFAS mgate adapters for the ÖBB trip planner."""

from oebb_departures.adapters.hafas_mgate.leg_extractor import (
    MgateLegExtractor,
    MgateResponseError,
)
from oebb_departures.adapters.hafas_mgate.mgate_journey_source import MgateJourneySource

__all__ = ["MgateJourneySource", "MgateLegExtractor", "MgateResponseError"]
