"""Parsing of upstream time encodings and formatting of display clocks.

Two upstream families encode time differently: HAFAS mgate uses compact digit
strings (``YYYYMMDD``, ``YYYYMMDDHHMM``, ``YYYYMMDDHHMMSS``), the REST sources
use ISO-8601. Both are turned into aware datetimes in Europe/Vienna here so the
rest of the pipeline never looks at raw strings.
"""

from datetime import UTC, date, datetime, timedelta
from enum import StrEnum
from zoneinfo import ZoneInfo

LOCAL_TIMEZONE = ZoneInfo("Europe/Vienna")
EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
UNKNOWN_CLOCK = "?"

_COMPACT_LENGTHS = (8, 12, 14)


class TimeFormat(StrEnum):
    """Raw time representation used by a source."""

    COMPACT = "compact"
    ISO = "iso"


def parse_source_time(raw: str | int | None, source_format: TimeFormat) -> datetime | None:
    """Parse a raw upstream time into an aware datetime.

    Args:
        raw: Raw value from the upstream payload.
        source_format: Which encoding the source uses.

    Returns:
        The instant tagged with Europe/Vienna (or its own offset for ISO strings
        that carry one), or None when the value is missing or unparseable.
    """
    if raw is None or raw == "":
        return None
    if source_format == TimeFormat.COMPACT:
        return _parse_compact(str(raw))
    return _parse_iso(str(raw))


def _parse_compact(value: str) -> datetime | None:
    if len(value) not in _COMPACT_LENGTHS or not value.isdigit():
        return None

    # Seconds of the 14-char form are ignored
    try:
        return datetime(
            int(value[0:4]),
            int(value[4:6]),
            int(value[6:8]),
            int(value[8:10]) if len(value) >= 12 else 0,
            int(value[10:12]) if len(value) >= 12 else 0,
            tzinfo=LOCAL_TIMEZONE,
        )
    except ValueError:
        return None


def _parse_iso(value: str) -> datetime | None:
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=LOCAL_TIMEZONE)
    return parsed


def combine_hafas_date_time(date_str: object, time_str: str | int | None) -> str | None:
    """Join a HAFAS connection date with a section time into the compact form.

    mgate reports section times as ``HHMMSS`` relative to the connection date,
    optionally prefixed by a two-digit day offset (``ddHHMMSS``) for trips
    that run past midnight. Values that are not in that shape are passed
    through unchanged so compact timestamps still parse.
    """
    if time_str is None:
        return None
    time_value = str(time_str)
    if (
        not isinstance(date_str, str)
        or len(date_str) != 8
        or not date_str.isdigit()
        or not time_value.isdigit()
    ):
        return time_value

    if len(time_value) == 6:
        return f"{date_str}{time_value}"
    if len(time_value) == 8:
        try:
            base = date(int(date_str[0:4]), int(date_str[4:6]), int(date_str[6:8]))
            shifted = base + timedelta(days=int(time_value[0:2]))
        except ValueError:
            return time_value
        return f"{shifted:%Y%m%d}{time_value[2:]}"
    return time_value


def format_clock(instant: datetime | None) -> str:
    """Render an instant as HH:MM in Europe/Vienna, or '?' when unknown."""
    if instant is None:
        return UNKNOWN_CLOCK
    return instant.astimezone(LOCAL_TIMEZONE).strftime("%H:%M")


def now_local() -> datetime:
    """Current instant in Europe/Vienna."""
    return datetime.now(UTC).astimezone(LOCAL_TIMEZONE)
