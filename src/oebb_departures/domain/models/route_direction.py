"""Route direction and source descriptor domain models."""

from dataclasses import dataclass, field
from enum import StrEnum

from .station import Station


class SourceKind(StrEnum):
    """Response-shape tag of an upstream source."""

    HAFAS_MGATE = "hafas-mgate"  # HAFAS mgate.exe TripSearch (compact timestamps)
    JOURNEYS = "journeys"  # transport.rest style journeys/routes payload (ISO timestamps)


@dataclass(frozen=True)
class SourceDescriptor:
    """Describes how to query one upstream source."""

    name: str
    kind: SourceKind
    url_template: str
    method: str = "GET"
    timeout_seconds: float = 10.0


@dataclass(frozen=True)
class RouteDirection:
    """One of the supported travel directions with its ordered upstream sources."""

    key: str  # URL slug, e.g. "stpoelten-linz"
    origin: Station
    destination: Station
    sources: list[SourceDescriptor] = field(default_factory=list)
    primary: SourceDescriptor | None = None  # Credential-gated HAFAS mgate source

    @property
    def label(self) -> str:
        """Human readable route label, e.g. 'St. Pölten → Linz'."""
        return f"{self.origin.short_name} → {self.destination.short_name}"
