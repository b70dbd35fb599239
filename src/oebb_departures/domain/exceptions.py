"""Errors raised while fetching departures.

Only ``AllSourcesExhaustedError`` and ``BusyError`` are meant to reach the web
boundary; ``SourceUnavailableError`` is absorbed by the source chain.
"""

from oebb_departures.domain.models.error_details import ErrorDetails


class DepartureFetchError(Exception):
    """Base class for departure fetching errors."""


class SourceUnavailableError(DepartureFetchError):
    """A single upstream source failed or answered with an unusable payload."""

    def __init__(self, source: str, details: ErrorDetails) -> None:
        self.source = source
        self.details = details
        status = f" (HTTP {details.status_code})" if details.status_code is not None else ""
        super().__init__(f"{source}: {details.reason}{status}")


class AllSourcesExhaustedError(DepartureFetchError):
    """Every configured source for a direction failed."""

    def __init__(self, direction: str, attempted: list[str]) -> None:
        self.direction = direction
        self.attempted = list(attempted)
        super().__init__("All APIs failed")


class BusyError(DepartureFetchError):
    """A fetch for the same direction is already in flight."""

    def __init__(self, direction: str) -> None:
        self.direction = direction
        super().__init__("API call in progress - please wait")


class UnknownDirectionError(DepartureFetchError):
    """The requested direction is not one of the configured ones."""

    def __init__(self, direction: str) -> None:
        self.direction = direction
        super().__init__(f"Unknown direction '{direction}'")
