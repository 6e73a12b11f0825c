"""Pytest configuration and fixtures for profile SDK tests."""
import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from profile_sdk import ProfileClient
from profile_sdk.models import ServiceUrls

BASE_URL = "https://profiles.example.com"


class RecordingTransport:
    """Stands in for profile_sdk.transport.Transport and records every call."""

    def __init__(self, responses: Optional[List[Any]] = None):
        self.requests: List[tuple] = []
        self.responses = list(responses or [])

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        pass

    async def request(self, method, path, *, json=None, params=None):
        self.requests.append((method, path, {"json": json, "params": params}))
        response = self.responses.pop(0) if self.responses else httpx.Response(200, json={})
        if isinstance(response, Exception):
            raise response
        return response


class FakeServer:
    """httpx.MockTransport handler that replays canned responses."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responses: List[Any] = []

    def reply(self, response: Any) -> None:
        self.responses.append(response)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0) if self.responses else httpx.Response(200, json={})
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last.content)

    @staticmethod
    def raw_path(request: httpx.Request) -> str:
        """Request path exactly as sent, before percent-decoding."""
        return request.url.raw_path.decode("ascii").split("?")[0]


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def urls() -> ServiceUrls:
    return ServiceUrls()


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
async def client(server: FakeServer):
    """Provide a profile client talking to the fake server."""
    async with ProfileClient(base_url=BASE_URL, http_transport=httpx.MockTransport(server)) as c:
        yield c
