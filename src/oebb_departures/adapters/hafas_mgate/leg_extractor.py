"""Extractor for HAFAS mgate TripSearch responses."""

import logging
from datetime import datetime
from typing import Any

from oebb_departures.adapters.hafas_mgate.constants import SERVICE_OK
from oebb_departures.domain.models import UpstreamLeg
from oebb_departures.domain.time_codec import (
    TimeFormat,
    combine_hafas_date_time,
    parse_source_time,
)

logger = logging.getLogger(__name__)


class MgateResponseError(ValueError):
    """The mgate payload has no usable connection list."""


class MgateLegExtractor:
    """Turns mgate ``outConL`` connections into upstream legs."""

    @staticmethod
    def extract_legs(payload: Any) -> list[UpstreamLeg]:
        """Extract the first section of every connection.

        Args:
            payload: Decoded mgate JSON response.

        Returns:
            One leg per connection that has at least one section.

        Raises:
            MgateResponseError: If the payload lacks svcResL/res/outConL or the
                service reported an error.
        """
        result = MgateLegExtractor._service_result(payload)
        connections = result.get("outConL")
        if not isinstance(connections, list):
            raise MgateResponseError("response has no outConL")

        common = result.get("common")
        products = common.get("prodL") if isinstance(common, dict) else None
        if not isinstance(products, list):
            products = []

        legs = []
        for connection in connections:
            if not isinstance(connection, dict):
                continue
            sections = connection.get("secL")
            if not isinstance(sections, list) or not sections or not isinstance(sections[0], dict):
                logger.debug(f"Skipping mgate connection without sections: {connection.get('cid')}")
                continue
            try:
                legs.append(MgateLegExtractor._extract_leg(connection, sections[0], products))
            except (TypeError, ValueError, AttributeError) as e:
                logger.debug(f"Skipping malformed mgate connection {connection.get('cid')}: {e}")
        return legs

    @staticmethod
    def _service_result(payload: Any) -> dict[str, Any]:
        if not isinstance(payload, dict):
            raise MgateResponseError("response is not a JSON object")

        service_results = payload.get("svcResL")
        if not isinstance(service_results, list) or not service_results:
            raise MgateResponseError(f"response has no svcResL (err={payload.get('err')})")

        service = service_results[0]
        if not isinstance(service, dict):
            raise MgateResponseError("svcResL[0] is not an object")
        err = service.get("err")
        if err and err != SERVICE_OK:
            raise MgateResponseError(f"service error {err}: {service.get('errTxt', '')}".strip())

        result = service.get("res")
        if not isinstance(result, dict):
            raise MgateResponseError("svcResL[0] has no res")
        return result

    @staticmethod
    def _extract_leg(
        connection: dict[str, Any], section: dict[str, Any], products: list[Any]
    ) -> UpstreamLeg:
        date = connection.get("date")
        dep = _object(section.get("dep"))
        arr = _object(section.get("arr"))
        product = MgateLegExtractor._resolve_product(_object(section.get("jny")), products)

        return UpstreamLeg(
            planned_departure=MgateLegExtractor._parse_time(date, dep, "dTimeS", "timeS"),
            realtime_departure=MgateLegExtractor._parse_time(date, dep, "dTimeR", "timeR"),
            planned_arrival=MgateLegExtractor._parse_time(date, arr, "aTimeS", "timeS"),
            realtime_arrival=MgateLegExtractor._parse_time(date, arr, "aTimeR", "timeR"),
            line_label=_text(section.get("name")) or _text(product.get("line")),
            product_label=_text(product.get("name")),
            departure_platform=MgateLegExtractor._platform(dep, "d"),
            arrival_platform=MgateLegExtractor._platform(arr, "a"),
        )

    @staticmethod
    def _resolve_product(journey: dict[str, Any], products: list[Any]) -> dict[str, Any]:
        """Return the inlined product or look it up in common.prodL via prodX."""
        product = journey.get("prod")
        if isinstance(product, dict):
            return product

        index = journey.get("prodX")
        if isinstance(index, int) and 0 <= index < len(products):
            candidate = products[index]
            if isinstance(candidate, dict):
                return candidate
        return {}

    @staticmethod
    def _parse_time(
        date: Any, stop: dict[str, Any], key: str, fallback_key: str
    ) -> datetime | None:
        raw = stop.get(key) or stop.get(fallback_key)
        return parse_source_time(combine_hafas_date_time(date, raw), TimeFormat.COMPACT)

    @staticmethod
    def _platform(stop: dict[str, Any], prefix: str) -> str | None:
        """Prefer the realtime platform over the scheduled one."""
        for key in (f"{prefix}PlatfR", "platfR", f"{prefix}PlatfS", "platfS"):
            platform = _platform_text(stop.get(key))
            if platform:
                return platform
        return None


def _object(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _platform_text(value: Any) -> str | None:
    """Platforms come either as plain strings or as objects with txt/name."""
    if isinstance(value, dict):
        return _text(value.get("txt")) or _text(value.get("name"))
    return _text(value)


def _text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
