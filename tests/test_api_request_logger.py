"""Tests for API request logger."""

from unittest.mock import MagicMock, patch

import pytest

from gasoprice.adapters.api_request_logger import (
    log_api_request,
    log_api_response,
    should_log_requests,
)

LOGGER = "gasoprice.adapters.api_request_logger.logger"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, False), ("true", True), ("True", True), ("false", False), ("1", False)],
)
def test_should_log_requests(
    monkeypatch: pytest.MonkeyPatch, value: str | None, expected: bool
) -> None:
    """Given GASOPRICE_LOG_REQUESTS values, when checking, then only "true" enables logging."""
    if value is None:
        monkeypatch.delenv("GASOPRICE_LOG_REQUESTS", raising=False)
    else:
        monkeypatch.setenv("GASOPRICE_LOG_REQUESTS", value)

    assert should_log_requests() is expected


class TestLogApiRequest:
    """Tests for log_api_request."""

    @pytest.fixture(autouse=True)
    def _enable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GASOPRICE_LOG_REQUESTS", "true")

    def test_when_disabled_then_does_not_log(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given logging disabled, when logging a request, then nothing is logged."""
        monkeypatch.setenv("GASOPRICE_LOG_REQUESTS", "false")

        with patch(LOGGER) as mock_logger:
            log_api_request("GET", "https://example.test/api")

        mock_logger.info.assert_not_called()

    def test_logs_method_and_url(self) -> None:
        """Given a request, when logging, then method and URL are in the message."""
        with patch(LOGGER) as mock_logger:
            log_api_request("GET", "https://example.test/api/Listados/Provincias/")

        mock_logger.info.assert_called_once_with(
            "API Request: GET https://example.test/api/Listados/Provincias/"
        )

    @pytest.mark.parametrize("header", ["Authorization", "Cookie", "X-API-Key"])
    def test_sensitive_headers_are_redacted(self, header: str) -> None:
        """Given a sensitive header, when logging, then its value is redacted."""
        with patch(LOGGER) as mock_logger:
            log_api_request(
                "GET", "https://example.test/api", headers={header: "secret", "Accept": "json"}
            )

        message = mock_logger.info.call_args[0][0]
        assert "***REDACTED***" in message
        assert "secret" not in message
        assert "Accept" in message


class TestLogApiResponse:
    """Tests for log_api_response."""

    def test_logs_summary_when_enabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given logging enabled, when logging a response, then status and size are logged."""
        monkeypatch.setenv("GASOPRICE_LOG_REQUESTS", "true")

        with patch(LOGGER) as mock_logger:
            log_api_response("https://example.test/api", 200, 2048, 1.234)

        mock_logger.info.assert_called_once_with(
            "API Response: 200 from https://example.test/api (2048 bytes in 1.23s)"
        )

    def test_silent_when_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given logging disabled, when logging a response, then nothing is logged."""
        monkeypatch.delenv("GASOPRICE_LOG_REQUESTS", raising=False)
        mock_logger = MagicMock()

        with patch(LOGGER, mock_logger):
            log_api_response("https://example.test/api", 200, 10, 0.1)

        mock_logger.info.assert_not_called()
