from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from application import create_app
from config import AppConfig, DatabaseConfig, ProviderConfig, UploadConfig
from dependencies import get_http_client, get_store
from interfaces import DataStore

TRANSCRIBE_URL = "/api/v1/transcribe"
HEALTH_URL = "/api/v1/health"


class ProviderStub:
    """Stands in for the speech-to-text API and records every outbound call."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.json_body: object = {"text": "hello"}
        self.raw_body: bytes | None = None
        self.error: Exception | None = None

    def reply(self, status_code: int = 200, json_body: object = None, raw_body: bytes | None = None) -> None:
        self.status_code = status_code
        self.json_body = json_body
        self.raw_body = raw_body

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def call_count(self) -> int:
        return len(self.requests)


class FakeStore(DataStore):
    def __init__(self, connected: bool = True, broken: bool = False) -> None:
        self.connected = connected
        self.broken = broken

    def connect(self) -> None:
        pass

    def ping(self) -> bool:
        return self.connected and not self.broken

    def is_connected(self) -> bool:
        if self.broken:
            raise RuntimeError("connection state unavailable")
        return self.connected

    def close(self) -> None:
        pass


def make_config(
    api_key: str | None = "test-key",
    max_bytes: int = 1024 * 1024,
    base_url: str = "https://stt.example.test",
    ping_interval_seconds: float = 0,
) -> AppConfig:
    return AppConfig(
        database=DatabaseConfig(raw_url="sqlite://", ping_interval_seconds=ping_interval_seconds),
        provider=ProviderConfig(api_key=api_key, base_url=base_url),
        upload=UploadConfig(max_bytes=max_bytes),
    )


@pytest.fixture
def provider_stub() -> ProviderStub:
    return ProviderStub()


@pytest.fixture
def make_client(provider_stub: ProviderStub):
    clients: list[TestClient] = []

    def _make(config: AppConfig | None = None, store: DataStore | None = None) -> TestClient:
        app = create_app(config or make_config())
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(provider_stub))
        app.dependency_overrides[get_http_client] = lambda: http_client
        if store is not None:
            app.dependency_overrides[get_store] = lambda: store
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
