"""Main entry point for the ÖBB departures service."""

import asyncio
import logging
import sys

import aiohttp

from oebb_departures.adapters.config import AppConfig, RouteDirectionLoader
from oebb_departures.adapters.journey_source_factory import JourneySourceFactory
from oebb_departures.adapters.web import StarletteWebAdapter
from oebb_departures.application.services import RouteDepartureService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()

    directions = RouteDirectionLoader.load(config)
    logger.info(f"Serving {len(directions)} direction(s):")
    for direction in directions:
        logger.info(f"  - {direction.key}: {direction.label}")

    if config.hafas_enabled:
        logger.info("HAFAS mgate enabled as primary source")
    else:
        logger.info("HAFAS_AID not set, using the REST chain only")

    # One aiohttp session shared by every upstream source
    async with aiohttp.ClientSession() as session:
        source_factory = JourneySourceFactory(config, session=session)
        departure_service = RouteDepartureService(directions, source_factory)

        display_adapter = StarletteWebAdapter(departure_service, config)

        try:
            await display_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await display_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
