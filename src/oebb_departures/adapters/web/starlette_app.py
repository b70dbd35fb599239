"""Starlette application and uvicorn-backed display adapter."""

import logging
from typing import TYPE_CHECKING

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.routing import Route

from oebb_departures.adapters.web.rate_limit_middleware import RateLimitMiddleware
from oebb_departures.adapters.web.static_schedule import StaticScheduleProvider
from oebb_departures.adapters.web.trains_endpoint import TrainsEndpoint, healthz
from oebb_departures.domain.ports import DisplayAdapter

if TYPE_CHECKING:
    import uvicorn

    from oebb_departures.adapters.config import AppConfig
    from oebb_departures.domain.ports import DepartureService

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ["GET", "OPTIONS"]
CORS_ALLOWED_HEADERS = [
    "X-CSRF-Token",
    "X-Requested-With",
    "Accept",
    "Accept-Version",
    "Content-Length",
    "Content-MD5",
    "Content-Type",
    "Date",
    "X-Api-Version",
]


def create_app(departure_service: "DepartureService", config: "AppConfig") -> Starlette:
    """Build the Starlette app serving the departures API."""
    static_schedule = (
        StaticScheduleProvider(config.timezone) if config.fallback_policy == "static" else None
    )
    endpoint = TrainsEndpoint(departure_service, config.fallback_policy, static_schedule)

    routes = [
        Route("/", endpoint.index, methods=ALLOWED_METHODS),
        Route("/api/trains/{direction}", endpoint.trains, methods=ALLOWED_METHODS),
        Route("/healthz", healthz, methods=ALLOWED_METHODS),
    ]

    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=ALLOWED_METHODS,
            allow_headers=CORS_ALLOWED_HEADERS,
        )
    ]
    if config.rate_limit_per_minute > 0:
        middleware.append(
            Middleware(RateLimitMiddleware, requests_per_minute=config.rate_limit_per_minute)
        )
    else:
        logger.info("Rate limiting disabled")

    return Starlette(routes=routes, middleware=middleware)


class StarletteWebAdapter(DisplayAdapter):
    """Serves the departures API over HTTP with uvicorn."""

    def __init__(self, departure_service: "DepartureService", config: "AppConfig") -> None:
        """Initialize the adapter.

        Args:
            departure_service: Service answering the per-direction requests.
            config: Application configuration (bind address, policies).
        """
        self.departure_service = departure_service
        self.config = config
        self._server: uvicorn.Server | None = None

    async def start(self) -> None:
        """Start the web server and block until it exits."""
        import uvicorn

        app = create_app(self.departure_service, self.config)
        server_config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_level="info",
        )
        self._server = uvicorn.Server(server_config)

        logger.info(f"Serving departures on http://{self.config.host}:{self.config.port}")
        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True
