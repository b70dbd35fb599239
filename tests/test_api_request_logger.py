"""Tests for API request logger."""

from unittest.mock import MagicMock, patch

import pytest

from oebb_departures.adapters.api_request_logger import (
    log_api_request,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given OEBB_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("OEBB_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    def test_when_env_set_to_true_capitalized_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given OEBB_LOG_REQUESTS=True (capitalized), when checking, then returns True."""
        monkeypatch.setenv("OEBB_LOG_REQUESTS", "True")

        assert should_log_requests() is True

    def test_when_env_set_to_false_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given OEBB_LOG_REQUESTS=false, when checking, then returns False."""
        monkeypatch.setenv("OEBB_LOG_REQUESTS", "false")

        assert should_log_requests() is False


@patch("oebb_departures.adapters.api_request_logger.should_log_requests", return_value=True)
@patch("oebb_departures.adapters.api_request_logger.logger")
class TestLogApiRequest:
    """Tests for log_api_request function."""

    def test_when_logging_enabled_then_logs_method_and_url(
        self, mock_logger: MagicMock, _mock_should_log: MagicMock
    ) -> None:
        """Given logging enabled, when calling with method and URL, then logs them."""
        log_api_request("GET", "https://oebb.macistry.com/api/journeys?from=1&to=2")

        mock_logger.info.assert_called_once()
        message = mock_logger.info.call_args[0][0]
        assert "GET https://oebb.macistry.com/api/journeys?from=1&to=2" in message

    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging disabled, when calling log_api_request, then does not log."""
        mock_should_log.return_value = False

        log_api_request("GET", "https://example.com/api")

        mock_logger.info.assert_not_called()

    def test_when_sensitive_headers_then_redacted(
        self, mock_logger: MagicMock, _mock_should_log: MagicMock
    ) -> None:
        """Given Authorization and Cookie headers, when logging, then their values are redacted."""
        log_api_request(
            "GET",
            "https://example.com/api",
            headers={"Authorization": "Bearer secret-token", "Cookie": "s=abc123", "Accept": "x"},
        )

        message = mock_logger.info.call_args[0][0]
        assert "***REDACTED***" in message
        assert "secret-token" not in message
        assert "abc123" not in message
        assert '"Accept": "x"' in message

    def test_when_mgate_payload_then_aid_redacted(
        self, mock_logger: MagicMock, _mock_should_log: MagicMock
    ) -> None:
        """Given an mgate body with auth.aid, when logging, then the credential is redacted."""
        payload = {"auth": {"aid": "top-secret-aid"}, "svcReqL": [{"meth": "TripSearch"}]}

        log_api_request("POST", "https://fahrplan.oebb.at/bin/mgate.exe", payload=payload)

        message = mock_logger.info.call_args[0][0]
        assert "Payload:" in message
        assert "TripSearch" in message
        assert "top-secret-aid" not in message
        assert payload["auth"]["aid"] == "top-secret-aid"

    def test_when_string_payload_then_logged_as_is(
        self, mock_logger: MagicMock, _mock_should_log: MagicMock
    ) -> None:
        """Given a string payload, when logging, then it is included verbatim."""
        log_api_request("POST", "https://example.com/api", payload="raw body")

        assert "Payload: raw body" in mock_logger.info.call_args[0][0]
