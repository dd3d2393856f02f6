"""
Tests for the registry error handler decorator.

This module tests the handle_registry_errors decorator to ensure it
maps every requests failure to the right registry exception.
"""

import logging
from unittest.mock import Mock

import pytest
import requests

from orgsize.utils.api_error_handler import handle_registry_errors
from orgsize.utils.exceptions import (
    RegistryAuthenticationError,
    RegistryConnectionError,
    RegistryError,
    RegistryNotFoundError,
    RegistryRateLimitError,
    RegistryResponseError,
    RegistryServerError,
    RegistryTimeoutError,
)


def http_error(status_code, headers=None):
    mock_response = Mock()
    mock_response.status_code = status_code
    mock_response.headers = headers or {}
    error = requests.exceptions.HTTPError()
    error.response = mock_response
    return error


class MockRegistryClient:
    """Mock client with decorated methods that raise various exceptions."""

    def __init__(self, exc=None):
        self.logger = logging.getLogger("MockRegistryClient")
        self.timeout = 30
        self.exc = exc

    @handle_registry_errors()
    def get(self, url):
        if self.exc is not None:
            raise self.exc
        return {"url": url}


class TestHandleRegistryErrors:
    """Test suite for handle_registry_errors decorator."""

    def test_successful_call(self):
        """Decorator doesn't interfere with successful calls."""
        assert MockRegistryClient().get("https://r.test/x") == {"url": "https://r.test/x"}

    def test_timeout(self):
        client = MockRegistryClient(requests.exceptions.Timeout("Request timed out"))

        with pytest.raises(RegistryTimeoutError) as exc_info:
            client.get("https://r.test/x")

        assert exc_info.value.timeout_duration == 30
        assert exc_info.value.endpoint == "https://r.test/x"
        assert "timeout after 30s" in str(exc_info.value)

    def test_connection_error(self):
        client = MockRegistryClient(requests.exceptions.ConnectionError("Name resolution failed"))

        with pytest.raises(RegistryConnectionError) as exc_info:
            client.get("https://r.test/x")

        assert "Name resolution failed" in str(exc_info.value)

    @pytest.mark.parametrize(
        "status_code,expected",
        [
            (404, RegistryNotFoundError),
            (401, RegistryAuthenticationError),
            (403, RegistryAuthenticationError),
            (429, RegistryRateLimitError),
            (500, RegistryServerError),
            (503, RegistryServerError),
        ],
    )
    def test_http_status_mapping(self, status_code, expected):
        client = MockRegistryClient(http_error(status_code))

        with pytest.raises(expected) as exc_info:
            client.get("https://r.test/x")

        assert exc_info.value.status_code == status_code

    def test_other_http_status_is_generic(self):
        client = MockRegistryClient(http_error(400))

        with pytest.raises(RegistryError) as exc_info:
            client.get("https://r.test/x")

        assert type(exc_info.value) is RegistryError
        assert "(400)" in exc_info.value.message

    def test_rate_limit_reads_retry_after(self):
        client = MockRegistryClient(http_error(429, {"Retry-After": "60"}))

        with pytest.raises(RegistryRateLimitError) as exc_info:
            client.get("https://r.test/x")

        assert exc_info.value.retry_after == 60

    def test_invalid_json(self):
        client = MockRegistryClient(requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0))

        with pytest.raises(RegistryResponseError):
            client.get("https://r.test/x")

    def test_generic_request_exception(self):
        client = MockRegistryClient(requests.exceptions.RequestException("Network error occurred"))

        with pytest.raises(RegistryError) as exc_info:
            client.get("https://r.test/x")

        assert "Network error occurred" in str(exc_info.value)

    def test_registry_errors_pass_through(self):
        original = RegistryResponseError("bad shape")
        client = MockRegistryClient(original)

        with pytest.raises(RegistryResponseError) as exc_info:
            client.get("https://r.test/x")

        assert exc_info.value is original

    def test_unexpected_exceptions_propagate(self):
        client = MockRegistryClient(ValueError("bug"))

        with pytest.raises(ValueError):
            client.get("https://r.test/x")

    def test_errors_are_raised_without_logging(self, caplog):
        client = MockRegistryClient(http_error(500))

        with caplog.at_level(logging.DEBUG):
            with pytest.raises(RegistryServerError):
                client.get("https://r.test/x")

        assert caplog.records == []
