"""JSON response schemas of the web boundary."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from oebb_departures.domain.models import DelayStatus, TrainDeparture

SOURCE_ALL_FAILED = "none - all APIs failed"
SOURCE_BUSY = "none - request in progress"
SOURCE_STATIC = "static-schedule"


class _CamelModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict[str, Any]:
        """Dump with camelCase keys, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class TrainSchema(_CamelModel):
    """Wire representation of a train departure."""

    departure: str
    arrival: str
    train_type: str
    train_number: str
    delay: int
    status: DelayStatus
    platform: str

    @classmethod
    def from_departure(cls, departure: TrainDeparture) -> "TrainSchema":
        """Build the wire record from the domain record."""
        return cls(
            departure=departure.departure_clock,
            arrival=departure.arrival_clock,
            train_type=departure.train_type,
            train_number=departure.train_number,
            delay=departure.delay_minutes,
            status=departure.status,
            platform=departure.platform,
        )


class DeparturesEnvelope(_CamelModel):
    """Response envelope of the per-direction train endpoints."""

    route: str
    timestamp: str
    trains: list[TrainSchema]
    source: str
    real_time_data: bool
    success: bool
    error: str | None = None

    @classmethod
    def build(
        cls,
        route: str,
        departures: list[TrainDeparture],
        source: str,
        real_time_data: bool,
        success: bool,
        error: str | None = None,
        now: datetime | None = None,
    ) -> "DeparturesEnvelope":
        """Build an envelope stamped with the current UTC time."""
        stamp = (now or datetime.now(UTC)).astimezone(UTC)
        return cls(
            route=route,
            timestamp=stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            trains=[TrainSchema.from_departure(d) for d in departures],
            source=source,
            real_time_data=real_time_data,
            success=success,
            error=error,
        )


class ServiceInfo(_CamelModel):
    """Response of the root endpoint."""

    message: str
    description: str
    endpoints: list[str]
    version: str
    features: list[str]
