import httpx
import pytest


class DummyAsyncClient:
    """Stands in for httpx.AsyncClient; replies from a queue of (status, body, content-type)."""

    responses = []
    calls = []

    def __init__(self, timeout=None):
        self.timeout = timeout

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def request(self, method, url, headers=None, params=None, json=None, data=None):
        DummyAsyncClient.calls.append({"method": method, "url": url, "headers": headers})
        req = httpx.Request(method, url, headers=headers)
        status, body, ctype = DummyAsyncClient.responses.pop(0)
        if isinstance(body, str):
            return httpx.Response(status, text=body, headers={"content-type": ctype}, request=req)
        return httpx.Response(status, json=body, headers={"content-type": ctype}, request=req)


@pytest.fixture
def dummy_http(monkeypatch):
    DummyAsyncClient.responses = []
    DummyAsyncClient.calls = []
    monkeypatch.setattr(httpx, "AsyncClient", DummyAsyncClient)
    return DummyAsyncClient


@pytest.fixture
def userinfo_payload():
    return {
        "sub": "u-123",
        "user": {
            "id": "u-123",
            "email_address": "a@b.com",
            "verified": True,
            "profile": {"full_name": "Jane Doe", "age": 25, "score": 95.7},
        },
        "name": "Jane",
        "email": "jane@example.com",
        "email_verified": True,
        "phone_verified": "yes",
        "zone_info": "Europe/Athens",
        "updated_at": 1700000000,
        "locale": None,
    }
