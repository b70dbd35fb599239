"""HTTP client for upstream JSON requests.

Every failure mode of a single request (network error, timeout, non-2xx
status, non-JSON body) is reported as SourceUnavailableError so the source
chain can advance to the next source.
"""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from oebb_departures.adapters.api_request_logger import log_api_request
from oebb_departures.domain.exceptions import SourceUnavailableError
from oebb_departures.domain.models import ErrorDetails

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

DEFAULT_HEADERS = {
    "Accept": "application/json",
}


class JsonHttpClient:
    """Issues bounded GET/POST requests and decodes JSON responses."""

    def __init__(self, session: "ClientSession | None", user_agent: str = "Mozilla/5.0") -> None:
        """Initialize with the shared aiohttp session.

        Args:
            session: aiohttp ClientSession used for all upstream requests.
            user_agent: User-Agent header sent upstream.
        """
        self._session = session
        self._headers = {**DEFAULT_HEADERS, "User-Agent": user_agent}

    async def request_json(
        self,
        source: str,
        method: str,
        url: str,
        timeout_seconds: float,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Args:
            source: Source name, used in errors and logs.
            method: "GET" or "POST".
            url: Fully expanded request URL.
            timeout_seconds: Total timeout for this request.
            payload: JSON body for POST requests.

        Raises:
            SourceUnavailableError: On any transport or decoding failure.
        """
        if not self._session:
            raise SourceUnavailableError(source, ErrorDetails(reason="no HTTP session available"))

        headers = dict(self._headers)
        if payload is not None:
            headers["Content-Type"] = "application/json"

        log_api_request(method, url, headers=headers, payload=payload)
        timeout = aiohttp.ClientTimeout(total=timeout_seconds)

        try:
            async with self._session.request(
                method, url, json=payload, headers=headers, timeout=timeout
            ) as response:
                return await self._handle_response(source, response, url)
        except TimeoutError as e:
            # asyncio.TimeoutError is an alias of TimeoutError on 3.11+
            raise SourceUnavailableError(
                source, ErrorDetails(reason=f"timed out after {timeout_seconds:g}s")
            ) from e
        except aiohttp.ClientError as e:
            raise SourceUnavailableError(source, ErrorDetails(reason=f"request failed: {e}")) from e

    async def _handle_response(self, source: str, response: "ClientResponse", url: str) -> Any:
        """Decode a response or raise SourceUnavailableError."""
        if not 200 <= response.status < 300:
            await self._log_error_response(response, url)
            raise SourceUnavailableError(
                source,
                ErrorDetails(status_code=response.status, reason="unexpected HTTP status"),
            )

        try:
            # Some upstreams send JSON as text/plain or text/html
            return await response.json(content_type=None)
        except ValueError as e:
            raise SourceUnavailableError(
                source,
                ErrorDetails(status_code=response.status, reason="response body is not JSON"),
            ) from e

    async def _log_error_response(self, response: "ClientResponse", url: str) -> None:
        """Log error response details."""
        try:
            error_text = await response.text()
        except (aiohttp.ClientError, TimeoutError, UnicodeDecodeError):
            error_text = ""
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        retry_after = response.headers.get("Retry-After")
        extra_info_str = f" [Retry-After: {retry_after}]" if retry_after else ""
        logger.warning(
            f"Upstream returned status {response.status} for {url}: "
            f"{error_body} (Content-Type: {content_type}){extra_info_str}"
        )
