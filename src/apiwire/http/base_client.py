"""
Base HTTP client abstract class.

Defines the request contract every HTTP backend must satisfy so that the
API client can use any of them interchangeably.

When a request has no parameters, the empty value of its payload type is
passed (``{}``), never ``None``. A JSON payload can itself be empty in
several ways, so a separate "absent" value would only add edge cases.
"""
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..exceptions import HTTPStatusError, PayloadEncodingError
from ..version import __version__

logger = logging.getLogger(__name__)

Headers = Dict[str, str]
Query = Dict[str, str]
Form = Dict[str, str]
Payload = Any

USER_AGENT = f"apiwire/{__version__}"
JSON_CONTENT_TYPE = "application/json"
DEFAULT_TIMEOUT = 30.0


def merge_headers(base: Headers, overrides: Optional[Headers]) -> Headers:
    """Return ``base`` updated with ``overrides``.

    Header names are case-insensitive on the wire, so an override replaces
    any existing entry with the same name in a different case.
    """
    merged = dict(base)
    for key, value in (overrides or {}).items():
        for existing in [k for k in merged if k.lower() == key.lower()]:
            del merged[existing]
        merged[key] = value
    return merged


class BaseHTTPClient(ABC):
    """Abstract base class for HTTP backends.

    All verbs receive an absolute URL, optional extra headers and a payload,
    and return the raw response body as text. Failures are raised as
    ClientError subclasses; nothing backend specific escapes.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, default_headers: Optional[Headers] = None):
        """Initialize shared backend settings.

        Args:
            timeout: Per-request timeout in seconds
            default_headers: Headers sent with every request, below per-request headers
        """
        self.timeout = timeout
        self.default_headers: Headers = {"User-Agent": USER_AGENT}
        if default_headers:
            self.default_headers = merge_headers(self.default_headers, default_headers)

    @abstractmethod
    async def get(self, url: str, headers: Optional[Headers], payload: Query) -> str:
        """Make GET request, sending ``payload`` as the query string."""
        pass

    @abstractmethod
    async def post(self, url: str, headers: Optional[Headers], payload: Payload) -> str:
        """Make POST request with a JSON body."""
        pass

    @abstractmethod
    async def post_form(self, url: str, headers: Optional[Headers], payload: Form) -> str:
        """Make POST request with a url-encoded form body."""
        pass

    @abstractmethod
    async def put(self, url: str, headers: Optional[Headers], payload: Payload) -> str:
        """Make PUT request with a JSON body."""
        pass

    @abstractmethod
    async def delete(self, url: str, headers: Optional[Headers], payload: Payload) -> str:
        """Make DELETE request with a JSON body."""
        pass

    async def aclose(self) -> None:
        """Release transport resources."""
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def clone(self) -> "BaseHTTPClient":
        """Return a new backend of the same type configured identically."""
        return type(self)(timeout=self.timeout, default_headers=dict(self.default_headers))

    def merge_headers(self, headers: Optional[Headers]) -> Headers:
        """Merge per-request headers over the backend defaults.

        Header names and values must be ASCII; anything else raises
        PayloadEncodingError before the request is sent, whichever
        transport is in use.
        """
        merged = merge_headers(self.default_headers, headers)
        for key, value in merged.items():
            try:
                key.encode("ascii")
                value.encode("ascii")
            except UnicodeEncodeError as e:
                raise PayloadEncodingError(f"Header {key!r} is not ASCII encodable: {e}") from e
        return merged

    def encode_json(self, headers: Headers, payload: Payload) -> bytes:
        """Serialize ``payload`` as a JSON body and set its content type in ``headers``."""
        try:
            body = json.dumps(payload, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise PayloadEncodingError(f"Payload is not JSON serializable: {e}") from e
        if not any(key.lower() == "content-type" for key in headers):
            headers["Content-Type"] = JSON_CONTENT_TYPE
        return body

    @staticmethod
    def check_status(method: str, url: str, status_code: int, body: str) -> str:
        """Return ``body`` for 2xx responses, raise HTTPStatusError otherwise."""
        if not 200 <= status_code < 300:
            logger.debug(f"{method} {url} failed with status {status_code}")
            raise HTTPStatusError(status_code, url, body)
        return body
