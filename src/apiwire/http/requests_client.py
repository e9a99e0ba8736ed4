"""
HTTP backend using the requests library.

requests is blocking, so every call runs in a worker thread and the verbs
stay awaitable without stalling the event loop.
"""
import asyncio
import logging
from typing import Any, Dict, Optional

import requests

from ..exceptions import BodyError, HTTPTransportError
from .base_client import DEFAULT_TIMEOUT, BaseHTTPClient, Form, Headers, Payload, Query
from .headers import redact
from .providers import backend_name

logger = logging.getLogger(__name__)


@backend_name("requests")
class RequestsHTTPClient(BaseHTTPClient):
    """HTTP backend backed by a :class:`requests.Session`.

    The session is shared by the worker threads of concurrent requests;
    requests does not promise Session thread safety, so use ``clone()`` to
    get a backend with its own session where that matters.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, default_headers: Optional[Headers] = None):
        super().__init__(timeout=timeout, default_headers=default_headers)
        self.session = requests.Session()

    async def get(self, url: str, headers: Optional[Headers], payload: Query) -> str:
        return await self._request("GET", url, headers, params=payload)

    async def post(self, url: str, headers: Optional[Headers], payload: Payload) -> str:
        return await self._request_json("POST", url, headers, payload)

    async def post_form(self, url: str, headers: Optional[Headers], payload: Form) -> str:
        return await self._request("POST", url, headers, data=payload)

    async def put(self, url: str, headers: Optional[Headers], payload: Payload) -> str:
        return await self._request_json("PUT", url, headers, payload)

    async def delete(self, url: str, headers: Optional[Headers], payload: Payload) -> str:
        return await self._request_json("DELETE", url, headers, payload)

    async def aclose(self) -> None:
        """Close the underlying :class:`requests.Session`."""
        self.session.close()

    async def _request_json(self, method: str, url: str, headers: Optional[Headers], payload: Payload) -> str:
        merged = self.merge_headers(headers)
        body = self.encode_json(merged, payload)
        return await self._send(method, url, merged, data=body)

    async def _request(self, method: str, url: str, headers: Optional[Headers], **kwargs: Any) -> str:
        return await self._send(method, url, self.merge_headers(headers), **kwargs)

    async def _send(self, method: str, url: str, headers: Headers, **kwargs: Any) -> str:
        logger.debug(f"Performing {method} request to {url} with headers {redact(headers)}")
        return await asyncio.to_thread(self._send_blocking, method, url, headers, kwargs)

    def _send_blocking(self, method: str, url: str, headers: Headers, kwargs: Dict[str, Any]) -> str:
        try:
            response = self.session.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
        except (requests.exceptions.ContentDecodingError, requests.exceptions.ChunkedEncodingError) as e:
            raise BodyError(f"Failed to read response body from {url}: {e}") from e
        except requests.RequestException as e:
            raise HTTPTransportError(f"{method} {url} failed: {e}") from e
        try:
            body = response.text
        except (UnicodeDecodeError, LookupError) as e:
            raise BodyError(f"Failed to decode response body from {url}: {e}") from e
        logger.debug(f"{method} {url} -> {response.status_code}")
        return self.check_status(method, url, response.status_code, body)
