"""Utility for logging upstream API requests when OEBB_LOG_REQUESTS is enabled."""

import copy
import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"
_SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key"}


def should_log_requests() -> bool:
    """Check if request logging is enabled via OEBB_LOG_REQUESTS environment variable."""
    return os.getenv("OEBB_LOG_REQUESTS", "").lower() == "true"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    return {k: REDACTED if k.lower() in _SENSITIVE_HEADERS else v for k, v in headers.items()}


def _redact_payload(payload: Any) -> Any:
    """Redact the HAFAS access id from an mgate request body."""
    if not isinstance(payload, dict) or not isinstance(payload.get("auth"), dict):
        return payload
    redacted = copy.deepcopy(payload)
    if "aid" in redacted["auth"]:
        redacted["auth"]["aid"] = REDACTED
    return redacted


def _format_payload(payload: Any) -> str:
    """Format payload for logging."""
    try:
        return (
            json.dumps(payload, indent=2, ensure_ascii=False)
            if isinstance(payload, dict)
            else str(payload)
        )
    except (TypeError, ValueError):
        return str(payload)


def log_api_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log upstream request details if OEBB_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST).
        url: Fully expanded request URL.
        headers: Request headers (optional, sensitive headers are redacted).
        payload: JSON request body (optional, the HAFAS credential is redacted).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {url}"]

    if headers:
        safe_headers = _redact_sensitive_headers(headers)
        log_parts.append(f"Headers: {json.dumps(safe_headers, indent=2)}")

    if payload is not None:
        log_parts.append(f"Payload: {_format_payload(_redact_payload(payload))}")

    logger.info("API Request:\n" + "\n".join(log_parts))
