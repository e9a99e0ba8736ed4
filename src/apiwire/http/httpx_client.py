"""
HTTP backend using httpx's native async client.
"""
import logging
from typing import Any, Optional

import httpx

from ..exceptions import BodyError, HTTPTransportError
from .base_client import DEFAULT_TIMEOUT, BaseHTTPClient, Form, Headers, Payload, Query
from .headers import redact
from .providers import backend_name

logger = logging.getLogger(__name__)


@backend_name("httpx")
class HttpxHTTPClient(BaseHTTPClient):
    """HTTP backend backed by :class:`httpx.AsyncClient`.

    Redirects are followed so that responses match the requests backend.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        default_headers: Optional[Headers] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the backend.

        Args:
            timeout: Per-request timeout in seconds
            default_headers: Headers sent with every request
            transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests
        """
        super().__init__(timeout=timeout, default_headers=default_headers)
        self._transport = transport
        self._client = httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    async def get(self, url: str, headers: Optional[Headers], payload: Query) -> str:
        return await self._send("GET", url, self.merge_headers(headers), params=payload)

    async def post(self, url: str, headers: Optional[Headers], payload: Payload) -> str:
        return await self._send_json("POST", url, headers, payload)

    async def post_form(self, url: str, headers: Optional[Headers], payload: Form) -> str:
        return await self._send("POST", url, self.merge_headers(headers), data=payload)

    async def put(self, url: str, headers: Optional[Headers], payload: Payload) -> str:
        return await self._send_json("PUT", url, headers, payload)

    async def delete(self, url: str, headers: Optional[Headers], payload: Payload) -> str:
        return await self._send_json("DELETE", url, headers, payload)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    def clone(self) -> "HttpxHTTPClient":
        return HttpxHTTPClient(
            timeout=self.timeout,
            default_headers=dict(self.default_headers),
            transport=self._transport,
        )

    async def _send_json(self, method: str, url: str, headers: Optional[Headers], payload: Payload) -> str:
        merged = self.merge_headers(headers)
        body = self.encode_json(merged, payload)
        return await self._send(method, url, merged, content=body)

    async def _send(self, method: str, url: str, headers: Headers, **kwargs: Any) -> str:
        logger.debug(f"Performing {method} request to {url} with headers {redact(headers)}")
        try:
            response = await self._client.request(method, url, headers=headers, **kwargs)
        except httpx.DecodingError as e:
            raise BodyError(f"Failed to read response body from {url}: {e}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise HTTPTransportError(f"{method} {url} failed: {e}") from e
        try:
            body = response.text
        except (UnicodeDecodeError, LookupError) as e:
            raise BodyError(f"Failed to decode response body from {url}: {e}") from e
        logger.debug(f"{method} {url} -> {response.status_code}")
        return self.check_status(method, url, response.status_code, body)
