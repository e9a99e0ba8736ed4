"""
API client request layer.

The client wraps an HTTP backend with two kinds of request helpers:

* Basic verbs (``get``, ``post``, ``post_form``, ``put``, ``delete``) only
  resolve relative URLs against the configured prefix. The authorization
  flow uses them to request tokens before one exists.
* Endpoint verbs (``endpoint_get``, ``endpoint_post``, ``endpoint_put``,
  ``endpoint_delete``) also attach the bearer authorization header, so API
  endpoint methods stay short.

There is no ``endpoint_post_form``: authenticated requests never send
form bodies.
"""
import logging
from typing import Optional

from .auth import Token, TokenStore
from .config.settings import ClientConfig
from .http import BaseHTTPClient, Form, Headers, Payload, Query, create_http_client, merge_headers
from .http.headers import bearer_auth

logger = logging.getLogger(__name__)

ABSOLUTE_URL_PREFIXES = ("http://", "https://")


class APIClient:
    """Authenticated client for a REST API reachable under a single prefix."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http: Optional[BaseHTTPClient] = None,
        token_store: Optional[TokenStore] = None,
    ):
        """Initialize the client.

        Args:
            config: Client configuration; defaults to ClientConfig()
            http: Backend to send requests with; created from ``config`` if omitted
            token_store: Source of the current access token
        """
        self.config = config or ClientConfig()
        self.prefix = self.config.prefix
        self.http = http or create_http_client(self.config.backend, timeout=self.config.timeout)
        self.token_store = token_store or TokenStore()
        logger.debug(f"APIClient initialized with prefix={self.prefix} backend={type(self.http).__name__}")

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP backend."""
        await self.http.aclose()

    def get_token(self) -> Token:
        return self.token_store.get_token()

    def endpoint_url(self, url: str) -> str:
        """Prepend the prefix to relative URLs like ``"me"``; return absolute URLs unchanged."""
        if not url.startswith(ABSOLUTE_URL_PREFIXES):
            return self.prefix + url
        return url

    def auth_headers(self) -> Headers:
        """Headers required for authenticated requests.

        Raises:
            AuthenticationUnavailableError: If no access token is set
        """
        key, value = bearer_auth(self.get_token())
        return {key: value}

    def _endpoint_headers(self, headers: Optional[Headers]) -> Headers:
        # Caller headers go last so an explicit authorization header wins.
        return merge_headers(self.auth_headers(), headers)

    async def get(self, url: str, headers: Optional[Headers], payload: Query) -> str:
        url = self.endpoint_url(url)
        return await self.http.get(url, headers, payload)

    async def post(self, url: str, headers: Optional[Headers], payload: Payload) -> str:
        url = self.endpoint_url(url)
        return await self.http.post(url, headers, payload)

    async def post_form(self, url: str, headers: Optional[Headers], payload: Form) -> str:
        url = self.endpoint_url(url)
        return await self.http.post_form(url, headers, payload)

    async def put(self, url: str, headers: Optional[Headers], payload: Payload) -> str:
        url = self.endpoint_url(url)
        return await self.http.put(url, headers, payload)

    async def delete(self, url: str, headers: Optional[Headers], payload: Payload) -> str:
        url = self.endpoint_url(url)
        return await self.http.delete(url, headers, payload)

    async def endpoint_get(self, url: str, payload: Query, headers: Optional[Headers] = None) -> str:
        """Authenticated GET; ``payload`` becomes the query string."""
        headers = self._endpoint_headers(headers)
        return await self.get(url, headers, payload)

    async def endpoint_post(self, url: str, payload: Payload, headers: Optional[Headers] = None) -> str:
        """Authenticated POST with a JSON body."""
        headers = self._endpoint_headers(headers)
        return await self.post(url, headers, payload)

    async def endpoint_put(self, url: str, payload: Payload, headers: Optional[Headers] = None) -> str:
        """Authenticated PUT with a JSON body."""
        headers = self._endpoint_headers(headers)
        return await self.put(url, headers, payload)

    async def endpoint_delete(self, url: str, payload: Payload, headers: Optional[Headers] = None) -> str:
        """Authenticated DELETE with a JSON body."""
        headers = self._endpoint_headers(headers)
        return await self.delete(url, headers, payload)
