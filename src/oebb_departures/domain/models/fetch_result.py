"""Fetch result domain models."""

from dataclasses import dataclass, field

from .train_departure import RankedDeparture, TrainDeparture

NO_SOURCE = "none"


@dataclass(frozen=True)
class SourceResult:
    """Ranked candidates produced by the first source that yielded any."""

    source: str
    candidates: list[RankedDeparture] = field(default_factory=list)


@dataclass(frozen=True)
class FetchResult:
    """Normalized departures for one request and the source they came from."""

    departures: list[TrainDeparture]
    source: str = NO_SOURCE
