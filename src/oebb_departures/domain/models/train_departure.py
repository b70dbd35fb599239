"""Train departure domain model."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class DelayStatus(StrEnum):
    """Punctuality of a departure, derived from its delay in minutes."""

    ON_TIME = "on-time"
    SLIGHTLY_DELAYED = "slightly-delayed"
    DELAYED = "delayed"


@dataclass(frozen=True)
class TrainDeparture:
    """A single normalized train departure as served to clients."""

    departure_clock: str
    arrival_clock: str
    train_type: str
    train_number: str
    delay_minutes: int
    status: DelayStatus
    platform: str


@dataclass(frozen=True)
class RankedDeparture:
    """A departure paired with the instant it is ordered by.

    The sort key is the actual departure instant (planned plus delay). It only
    exists while candidates are being ranked and is dropped before records
    leave the application layer.
    """

    departure: TrainDeparture
    sort_key: datetime
