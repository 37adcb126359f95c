import json

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.deps import get_provider_client, get_registry
from app.clients.provider_client import ProviderClient
from app.llms.credentials import StaticCredentials
from app.llms.providers import DEFAULT_PROVIDERS
from app.llms.registry import ProviderRegistry

ALL_KEYS = {p.credential_name: f"test-{p.id}-key" for p in DEFAULT_PROVIDERS}


class Upstream:
    """Records outbound calls and answers them with a canned status/body."""

    def __init__(self):
        self.calls: list[httpx.Request] = []
        self.status_code = 200
        self.payload = {}
        self.raise_exc: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.raise_exc is not None:
            raise self.raise_exc
        if isinstance(self.payload, (bytes, str)):
            return httpx.Response(self.status_code, content=self.payload)
        return httpx.Response(self.status_code, json=self.payload)

    def last_json(self):
        return json.loads(self.calls[-1].content)


@pytest.fixture
def upstream():
    return Upstream()


@pytest.fixture
def credentials():
    return dict(ALL_KEYS)


@pytest.fixture
def registry(credentials):
    return ProviderRegistry(credentials=StaticCredentials(credentials))


@pytest.fixture
def provider_client(upstream):
    return ProviderClient(transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def client(registry, provider_client):
    app.dependency_overrides[get_registry] = lambda: registry
    app.dependency_overrides[get_provider_client] = lambda: provider_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
