"""Shared test fixtures for failover_menu.

The HTTP transport is never hit: tests replace ``Session.request`` on the
client's session with a mock that returns in-memory ``requests.Response``
objects built by :func:`make_response`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from failover_menu.api_client import OpenApiClient
from failover_menu.config import Credentials, Settings, reset_settings


ENDPOINT = "https://api.example.com"
TOKEN_URL = f"{ENDPOINT}/api/1/access_token"
ORGANIZATIONS_URL = f"{ENDPOINT}/api/1/organizations"


def make_response(status_code: int = 200, payload: Any = None, text: str | None = None) -> requests.Response:
    """Build a ``requests.Response`` with a JSON (or raw text) body."""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    if payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = (text or "").encode("utf-8")
    return response


def token_response(token: str = "tok-1") -> requests.Response:
    return make_response(200, {"correlationId": "c-1", "token": token})


def organizations_payload(*orgs: tuple[str, str]) -> dict[str, Any]:
    return {
        "correlationId": "c-2",
        "organizations": [
            {"id": org_id, "name": name, "responseType": "Simple"} for org_id, name in orgs
        ],
    }


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep settings singletons and FAILOVER_MENU_* env vars out of tests."""
    for var in [
        "FAILOVER_MENU_CREDENTIALS_PATH",
        "FAILOVER_MENU_REQUEST_TIMEOUT",
        "FAILOVER_MENU_MAX_RETRIES",
        "FAILOVER_MENU_AUTH_TIMEOUT",
        "FAILOVER_MENU_LOG_LEVEL",
    ]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(credentials_path=tmp_path / ".failovermenu", max_retries=0, request_timeout=5)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(
        endpoint=ENDPOINT + "/",
        login="api-login",
        key="secret-key",
        email="owner@example.com",
        expiration="2030-01-01",
    )


@pytest.fixture
def client(credentials: Credentials, settings: Settings) -> OpenApiClient:
    return OpenApiClient(credentials, settings)


@pytest.fixture
def transport(client: OpenApiClient, monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Mock for ``client.http_client.session.request``.

    Set ``transport.side_effect`` to a list of responses (or exceptions)
    in the order the client is expected to send requests.
    """
    mock = MagicMock(name="session.request")
    monkeypatch.setattr(client.http_client.session, "request", mock)
    return mock
