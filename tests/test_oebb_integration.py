"""End-to-end integration tests against the live upstream sources."""

import pytest

from oebb_departures.adapters.config import AppConfig, RouteDirectionLoader
from oebb_departures.adapters.journey_source_factory import JourneySourceFactory
from oebb_departures.application.services import MAX_DEPARTURES, RouteDepartureService
from oebb_departures.domain.exceptions import AllSourcesExhaustedError


@pytest.mark.integration
@pytest.mark.asyncio
async def test_stpoelten_linz_departures_from_live_chain() -> None:
    """Fetch St. Pölten → Linz through the real source chain."""
    import aiohttp

    config = AppConfig()
    directions = RouteDirectionLoader.load(config)

    async with aiohttp.ClientSession() as session:
        service = RouteDepartureService(directions, JourneySourceFactory(config, session=session))

        try:
            result = await service.fetch("stpoelten-linz")
        except AllSourcesExhaustedError as e:
            pytest.skip(f"No upstream reachable: {e.attempted}")

    assert len(result.departures) <= MAX_DEPARTURES
    for departure in result.departures:
        assert departure.delay_minutes >= 0
        assert departure.train_number
