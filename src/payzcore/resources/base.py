"""
Base resource classes for PayzCore SDK.

Resources translate SDK calls into paths and bodies and hand them to the
owning client's ``request``; retries and error mapping live in the client.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional
from urllib.parse import quote, urlencode

if TYPE_CHECKING:
    from ..client import AsyncPayzCore, PayzCore


def build_path(path: str, params: Optional[Dict[str, Any]] = None) -> str:
    """Append the non-None ``params`` to ``path`` as a query string."""
    query = {k: v for k, v in (params or {}).items() if v is not None}
    if not query:
        return path
    return f"{path}?{urlencode(query)}"


def encode_id(value: str) -> str:
    """Percent-encode a path segment."""
    return quote(value, safe="")


class AsyncBaseResource:
    """Base class for async API resources.

    Attributes:
        _client: The async client instance
    """

    def __init__(self, client: "AsyncPayzCore") -> None:
        self._client = client

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self._client.request("GET", build_path(path, params))

    async def _post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self._client.request("POST", path, data)

    async def _patch(self, path: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self._client.request("PATCH", path, data)


class SyncBaseResource:
    """Base class for sync API resources.

    Attributes:
        _client: The sync client instance
    """

    def __init__(self, client: "PayzCore") -> None:
        self._client = client

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._client.request("GET", build_path(path, params))

    def _post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._client.request("POST", path, data)

    def _patch(self, path: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._client.request("PATCH", path, data)


__all__ = [
    "AsyncBaseResource",
    "SyncBaseResource",
    "build_path",
    "encode_id",
]
