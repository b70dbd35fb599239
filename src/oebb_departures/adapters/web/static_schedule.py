"""Static timetable approximation served when every live source fails."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from oebb_departures.domain.models import DelayStatus, TrainDeparture

STATIC_RESULTS = 3


@dataclass(frozen=True)
class ScheduledService:
    """A service repeating every hour at a fixed minute."""

    minute: int
    train_type: str
    number_base: int  # Train number of the 00:xx run; later runs count up by two per hour
    travel_minutes: int
    platform: str = "?"

    def train_number(self, hour: int) -> str:
        """Train number of the run departing in the given hour."""
        return f"{self.train_type} {self.number_base + 2 * hour}"


# Direct trains per direction and hour: minute, type, number base, travel minutes, platforms
HOURLY_PATTERNS: dict[str, list[ScheduledService]] = {
    "stpoelten-linz": [
        ScheduledService(4, "RJX", 500, 43, "5 → 3"),
        ScheduledService(23, "WB", 900, 50, "7 → 4"),
        ScheduledService(34, "RJX", 600, 43, "5 → 3"),
        ScheduledService(53, "WB", 940, 50, "7 → 4"),
    ],
    "linz-stpoelten": [
        ScheduledService(2, "WB", 901, 50, "7 → 4"),
        ScheduledService(16, "RJX", 501, 43, "5 → 3"),
        ScheduledService(32, "WB", 941, 50, "7 → 4"),
        ScheduledService(46, "RJX", 601, 43, "5 → 3"),
    ],
}


class StaticScheduleProvider:
    """Computes the next departures from the hourly patterns."""

    def __init__(
        self,
        timezone: str = "Europe/Vienna",
        patterns: dict[str, list[ScheduledService]] | None = None,
    ) -> None:
        """Initialize with the timetable's timezone and hourly patterns."""
        self._timezone = ZoneInfo(timezone)
        self._patterns = patterns if patterns is not None else HOURLY_PATTERNS

    def next_departures(self, direction_key: str, now: datetime) -> list[TrainDeparture]:
        """Return the next three scheduled departures at or after ``now``.

        Unknown directions have no schedule and yield an empty list.
        """
        pattern = self._patterns.get(direction_key, [])
        if not pattern:
            return []

        local_now = now.astimezone(self._timezone)
        hour_start = local_now.replace(minute=0, second=0, microsecond=0)

        upcoming: list[tuple[datetime, ScheduledService]] = []
        # Two hours always cover three departures of a pattern with two or more runs;
        # scan a full day to stay correct for sparse patterns.
        for hour_offset in range(25):
            start = hour_start + timedelta(hours=hour_offset)
            for service in pattern:
                departs = start + timedelta(minutes=service.minute)
                if departs >= local_now:
                    upcoming.append((departs, service))
            if len(upcoming) >= STATIC_RESULTS:
                break

        upcoming.sort(key=lambda item: item[0])
        return [
            self._to_departure(departs, service) for departs, service in upcoming[:STATIC_RESULTS]
        ]

    @staticmethod
    def _to_departure(departs: datetime, service: ScheduledService) -> TrainDeparture:
        arrives = departs + timedelta(minutes=service.travel_minutes)
        return TrainDeparture(
            departure_clock=departs.strftime("%H:%M"),
            arrival_clock=arrives.strftime("%H:%M"),
            train_type=service.train_type,
            train_number=service.train_number(departs.hour),
            delay_minutes=0,
            status=DelayStatus.ON_TIME,
            platform=service.platform,
        )
