"""Tests for token acquisition."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest
import requests

from failover_menu.api_client import OpenApiClient
from failover_menu.auth import build_url
from failover_menu.exceptions import AuthenticationError, DeserializationError, TransportError

from .conftest import TOKEN_URL, make_response, token_response


class TestBuildUrl:
    @pytest.mark.parametrize(
        "endpoint, path",
        [
            ("https://h", "api/1/x"),
            ("https://h/", "/api/1/x"),
            ("https://h/", "api/1/x"),
        ],
    )
    def test_single_slash(self, endpoint: str, path: str) -> None:
        assert build_url(endpoint, path) == "https://h/api/1/x"


class TestAuthenticate:
    def test_success_stores_token(self, client: OpenApiClient, transport: MagicMock) -> None:
        transport.side_effect = [token_response("abc")]

        client.authenticate()

        assert client.token == "abc"
        assert client.is_authenticated

    def test_request_shape(self, client: OpenApiClient, transport: MagicMock) -> None:
        transport.side_effect = [token_response()]

        client.authenticate()

        kwargs = transport.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["url"] == TOKEN_URL
        assert kwargs["json"] == {"apiLogin": "api-login"}
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert "Timeout" not in kwargs["headers"]
        assert "Authorization" not in kwargs["headers"]
        assert kwargs["timeout"] == 5

    def test_timeout_header(self, client: OpenApiClient, transport: MagicMock) -> None:
        transport.side_effect = [token_response()]

        client.authenticate(timeout=15)

        assert transport.call_args.kwargs["headers"]["Timeout"] == "15"

    def test_error_description_surfaces(self, client: OpenApiClient, transport: MagicMock) -> None:
        transport.side_effect = [make_response(400, {"errorDescription": "bad login"})]

        with pytest.raises(AuthenticationError, match="bad login") as exc_info:
            client.authenticate()

        assert exc_info.value.status_code == 400
        assert exc_info.value.description == "bad login"
        assert exc_info.value.error_code is None
        assert not client.is_authenticated

    def test_error_code_kept(self, client: OpenApiClient, transport: MagicMock) -> None:
        transport.side_effect = [
            make_response(401, {"errorDescription": "Login is not authorized", "errorCode": "E1"})
        ]

        with pytest.raises(AuthenticationError) as exc_info:
            client.authenticate()

        assert exc_info.value.error_code == "E1"
        assert "E1" in str(exc_info.value)

    def test_non_json_error_body(self, client: OpenApiClient, transport: MagicMock) -> None:
        transport.side_effect = [make_response(502, text="Bad Gateway")]

        with pytest.raises(AuthenticationError, match="Bad Gateway") as exc_info:
            client.authenticate()

        assert exc_info.value.status_code == 502

    def test_missing_token_in_body(self, client: OpenApiClient, transport: MagicMock) -> None:
        transport.side_effect = [make_response(200, {"correlationId": "c"})]

        with pytest.raises(DeserializationError):
            client.authenticate()

        assert not client.is_authenticated

    def test_connection_failure(self, client: OpenApiClient, transport: MagicMock) -> None:
        transport.side_effect = requests.ConnectionError("refused")

        with pytest.raises(TransportError) as exc_info:
            client.authenticate()

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_reauthenticate_replaces_token(self, client: OpenApiClient, transport: MagicMock) -> None:
        transport.side_effect = [token_response("one"), token_response("two")]

        client.authenticate()
        client.authenticate()

        assert client.token == "two"

    def test_full_token_never_logged(
        self, client: OpenApiClient, transport: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        token = "f3b1c2d4-aaaa-bbbb-cccc-0123456789ab"
        transport.side_effect = [token_response(token)]

        with caplog.at_level(logging.DEBUG):
            client.authenticate()

        assert client.token == token
        assert caplog.records
        assert all(token not in record.getMessage() for record in caplog.records)
