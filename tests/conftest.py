"""Shared fixtures: a relay app wired to a mocked provider token endpoint."""

from __future__ import annotations

from typing import Any, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from connectors.oauth2 import OAuth2Connector
from connectors.token_store import TokenStore
from main import create_app

AUTH_URL = "https://provider.example/o/oauth2/auth"
TOKEN_URL = "https://provider.example/token"


class FakeProvider:
    """Scriptable stand-in for the provider's token endpoint."""

    def __init__(self):
        self.payload: Dict[str, Any] = {"access_token": "X", "token_type": "Bearer"}
        self.status_code = 200
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        oauth_client_id="client-123",
        oauth_client_secret="s3cret",
        oauth_redirect_url="http://localhost:8080/callback",
        oauth_scope="openid email",
        oauth_auth_url=AUTH_URL,
        oauth_token_url=TOKEN_URL,
    )


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def connector(settings: Settings, provider: FakeProvider) -> OAuth2Connector:
    return OAuth2Connector.from_settings(
        settings, transport=httpx.MockTransport(provider.handler)
    )


@pytest.fixture
def store() -> TokenStore:
    return TokenStore()


@pytest.fixture
def client(settings, connector, store) -> TestClient:
    return TestClient(create_app(settings=settings, connector=connector, store=store))
