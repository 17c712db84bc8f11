"""
Pytest configuration and fixtures for PayzCore SDK tests.
"""
from __future__ import annotations

import asyncio
import json
import time
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx
import pytest

from payzcore import AsyncPayzCore, PayzCore


@dataclass
class _MockEntry:
    method: str
    url: str
    status_code: int = 200
    content: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)
    exception: Optional[Exception] = None


class HTTPXMock:
    """Queue of canned responses served through ``httpx.MockTransport``.

    Entries are matched on method and URL and consumed in order. Every request
    that reaches the transport is recorded in ``requests``.
    """

    def __init__(self) -> None:
        self._entries: list[_MockEntry] = []
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def add_response(
        self,
        *,
        url: str,
        method: str = "GET",
        status_code: int = 200,
        json: Any = None,
        content: Optional[bytes] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        response_headers = dict(headers or {})
        if content is None and json is not None:
            content = json_dumps_bytes(json)
            response_headers.setdefault("content-type", "application/json")
        self._entries.append(
            _MockEntry(
                method=method.upper(),
                url=url,
                status_code=status_code,
                content=content or b"",
                headers=response_headers,
            )
        )

    def add_exception(self, exception: Exception, *, url: str, method: str = "GET") -> None:
        self._entries.append(_MockEntry(method=method.upper(), url=url, exception=exception))

    def requests_for(self, method: str, url: str) -> list[httpx.Request]:
        wanted = (method.upper(), _normalize_url(url))
        return [r for r in self.requests if (r.method, _normalize_url(str(r.url))) == wanted]

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        entry = self._pop_match(request.method, str(request.url))
        if entry.exception is not None:
            raise entry.exception
        return httpx.Response(
            status_code=entry.status_code,
            headers=entry.headers,
            content=entry.content,
        )

    def _pop_match(self, method: str, url: str) -> _MockEntry:
        normalized_method = method.upper()
        normalized_url = _normalize_url(url)
        for idx, entry in enumerate(self._entries):
            if entry.method == normalized_method and _normalize_url(entry.url) == normalized_url:
                return self._entries.pop(idx)
        raise AssertionError(
            f"No mocked response for {normalized_method} {url}. "
            f"Available: {[f'{e.method} {e.url}' for e in self._entries]}"
        )


def json_dumps_bytes(payload: Any) -> bytes:
    return json.dumps(payload, default=str).encode("utf-8")


def _normalize_url(url: str) -> str:
    parts = urlsplit(url)
    normalized_query = urlencode(sorted(parse_qsl(parts.query, keep_blank_values=True)), doseq=True)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, normalized_query, parts.fragment))


BASE_URL = "https://api.payzcore.com"

# Mock response data
MOCK_RESPONSES = {
    "payment": {
        "id": "pay_abc123",
        "address": "TXyz1234567890abcdefghijklmnopqrs",
        "amount": "50.00",
        "network": "TRC20",
        "token": "USDT",
        "status": "pending",
        "expires_at": "2025-01-20T01:00:00Z",
        "external_order_id": "order_42",
        "qr_code": "data:image/png;base64,AAAA",
    },
    "payment_list_item": {
        "id": "pay_abc123",
        "external_ref": "user-123",
        "network": "TRC20",
        "token": "USDT",
        "address": "TXyz1234567890abcdefghijklmnopqrs",
        "expected_amount": "50.00",
        "paid_amount": "0",
        "status": "pending",
        "tx_hash": None,
        "expires_at": "2025-01-20T01:00:00Z",
        "paid_at": None,
        "created_at": "2025-01-20T00:00:00Z",
    },
    "payment_detail": {
        "id": "pay_abc123",
        "status": "paid",
        "expected_amount": "50.00",
        "paid_amount": "50.00",
        "address": "TXyz1234567890abcdefghijklmnopqrs",
        "network": "TRC20",
        "token": "USDT",
        "tx_hash": "a1b2c3",
        "expires_at": "2025-01-20T01:00:00Z",
        "transactions": [
            {
                "tx_hash": "a1b2c3",
                "amount": "50.00",
                "from": "TSender000000000000000000000000000",
                "confirmed": True,
                "confirmations": 19,
            }
        ],
    },
    "project": {
        "id": "proj_1",
        "name": "My Store",
        "slug": "my-store",
        "api_key": "pk_live_new",
        "webhook_secret": "whsec_new",
        "webhook_url": "https://example.com/webhooks/payzcore",
        "created_at": "2025-01-20T00:00:00Z",
    },
    "project_list_item": {
        "id": "proj_1",
        "name": "My Store",
        "slug": "my-store",
        "api_key": "pk_live_new",
        "webhook_url": None,
        "is_active": True,
        "created_at": "2025-01-20T00:00:00Z",
    },
}


@pytest.fixture
def api_key() -> str:
    """Test API key."""
    return "pk_test_abc"


@pytest.fixture
def base_url() -> str:
    """Test base URL."""
    return BASE_URL


@pytest.fixture
def mock_responses() -> dict:
    """Return mock response data."""
    return MOCK_RESPONSES


@pytest.fixture
def httpx_mock() -> HTTPXMock:
    return HTTPXMock()


@pytest.fixture
def sleeps(monkeypatch) -> list[float]:
    """Record backoff delays instead of sleeping."""
    delays: list[float] = []

    async def _async_sleep(delay, *args, **kwargs):
        delays.append(delay)

    def _sync_sleep(delay):
        delays.append(delay)

    monkeypatch.setattr(asyncio, "sleep", _async_sleep)
    monkeypatch.setattr(time, "sleep", _sync_sleep)
    return delays


@pytest.fixture
async def make_client(api_key, base_url, httpx_mock, sleeps):
    """Factory for async clients wired to ``httpx_mock``."""
    http_clients: list[httpx.AsyncClient] = []

    def _make(**kwargs: Any) -> AsyncPayzCore:
        http_client = httpx.AsyncClient(transport=httpx_mock.transport)
        http_clients.append(http_client)
        kwargs.setdefault("base_url", base_url)
        return AsyncPayzCore(kwargs.pop("api_key", api_key), http_client=http_client, **kwargs)

    yield _make
    for http_client in http_clients:
        await http_client.aclose()


@pytest.fixture
async def client(make_client) -> AsyncPayzCore:
    """Async client with default retry settings."""
    return make_client()


@pytest.fixture
def sync_client(api_key, base_url, httpx_mock, sleeps):
    """Sync client wired to ``httpx_mock``."""
    http_client = httpx.Client(transport=httpx_mock.transport)
    yield PayzCore(api_key, base_url=base_url, http_client=http_client)
    http_client.close()
