"""Shared fixtures: isolated settings, a recording mock upstream, a gateway TestClient."""

import os
from typing import Callable

import httpx
import pytest

# billbridge.api.main builds a module-level app from the environment on import
os.environ.setdefault("BILLBRIDGE_API_KEY", "test-api-key")

from fastapi.testclient import TestClient

from billbridge.api.main import create_app
from billbridge.infrastructure.settings import Settings

API_KEY = "test-api-key"


class RecordingUpstream:
    """httpx.MockTransport handler that records requests and answers via `respond`."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={"ok": True}
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture()
def settings() -> Settings:
    return Settings(api_key=API_KEY, max_request_mb=1, _env_file=None)


@pytest.fixture()
def upstream() -> RecordingUpstream:
    return RecordingUpstream()


@pytest.fixture()
def app(settings, upstream):
    return create_app(settings, transport=httpx.MockTransport(upstream))


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app, headers={"x-api-key": API_KEY})


@pytest.fixture()
def anon_client(app) -> TestClient:
    return TestClient(app)
