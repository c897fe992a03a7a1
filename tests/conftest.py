import asyncio
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from stress_interview.main import app
from stress_interview.services.gateway import get_http_client


class FakeGateway:
    """Records outbound requests and answers with a canned response."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = {"choices": [{"message": {"content": "Hello, tell me about yourself."}}]}

    def reply(self, status_code, body):
        self.status_code = status_code
        self.body = body

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last_payload(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def client(gateway, monkeypatch):
    monkeypatch.setenv("LOVABLE_API_KEY", "test-key")
    for name in ("AI_GATEWAY_URL", "AI_GATEWAY_MODEL", "AI_GATEWAY_MAX_TOKENS", "AI_GATEWAY_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(gateway.handler))
    app.dependency_overrides[get_http_client] = lambda: http_client
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    asyncio.run(http_client.aclose())
