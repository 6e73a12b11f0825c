from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote, urljoin, urlsplit

import httpx

from .exceptions import (
    ConfigurationError,
    NotFoundError,
    RemoteError,
    TransportError,
    TransportTimeoutError,
)
from .models import ErrorPayload

logger = logging.getLogger(__name__)


def item_path(collection: str, item_id: Any, *suffix: str) -> str:
    """Path of one item in a collection, with the id percent-encoded.

    Every reserved character in ``item_id`` is escaped, so ``a/b?c`` becomes
    ``a%2Fb%3Fc`` and cannot change the path or start a query string.
    """
    path = f"{collection.rstrip('/')}/{quote(str(item_id), safe='')}"
    for part in suffix:
        path += f"/{part}"
    return path


def decode_json(resp: httpx.Response) -> Any:
    """Decode a successful JSON response body."""
    try:
        return resp.json()
    except ValueError as exc:
        message = f"Failed to parse response: {exc}"
        raise RemoteError(
            resp.status_code,
            message,
            ErrorPayload(type="InvalidResponse", message=message),
        ) from exc


def compact(data: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Drop top-level keys whose value is None."""
    if data is None:
        return None
    return {k: v for k, v in data.items() if v is not None}


class Transport:
    def __init__(
        self,
        base_url: Optional[str],
        api_key: Optional[str],
        timeout: float,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.api_key = api_key
        self.timeout = timeout
        self._http_transport = http_transport
        self._client: Optional[httpx.AsyncClient] = None

    def set_api_key(self, api_key: Optional[str]) -> None:
        """Update the API key for authentication."""
        self.api_key = api_key

    async def __aenter__(self) -> "Transport":
        self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._http_transport)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self._client:
            await self._client.aclose()
            self._client = None

    def resolve_url(self, path: str) -> str:
        """Resolve ``path`` against the base URL the way a browser resolves a link."""
        if self.base_url:
            return urljoin(self.base_url, path)
        if urlsplit(path).scheme in ("http", "https"):
            return path
        raise ConfigurationError(f"Cannot request relative URL {path!r} without a base URL")

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        if not self._client:
            raise RuntimeError("Transport not started")
        url = self.resolve_url(path)
        headers = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            resp = await self._client.request(
                method, url, headers=headers, json=compact(json), params=compact(params)
            )
        except httpx.TimeoutException as exc:
            logger.warning(f"{method} {url} timed out: {exc}")
            raise TransportTimeoutError(str(exc)) from exc
        except httpx.RequestError as exc:
            logger.warning(f"{method} {url} failed: {exc}")
            raise TransportError(str(exc)) from exc

        logger.debug(f"{method} {url} -> {resp.status_code}")
        if not resp.is_success:
            raise self._remote_error(resp)
        return resp

    @staticmethod
    def _remote_error(resp: httpx.Response) -> RemoteError:
        raw_message = f"Request failed with status code {resp.status_code} {resp.reason_phrase}".rstrip()
        try:
            body = resp.json()
        except ValueError:
            body = None
        payload = ErrorPayload.from_body(body)
        error_cls = NotFoundError if resp.status_code == 404 else RemoteError
        return error_cls(resp.status_code, raw_message, payload)
