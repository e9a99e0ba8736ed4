"""
Header helpers and OAuth protocol field names.

The constants are wire-format literals used by the authorization flow and
must match what the remote API expects.
"""
import base64
from typing import Tuple

CLIENT_ID = "client_id"
CODE = "code"
GRANT_AUTH_CODE = "authorization_code"
GRANT_CLIENT_CREDS = "client_credentials"
GRANT_REFRESH_TOKEN = "refresh_token"
GRANT_TYPE = "grant_type"
REDIRECT_URI = "redirect_uri"
REFRESH_TOKEN = "refresh_token"
RESPONSE_CODE = "code"
RESPONSE_TYPE = "response_type"
SCOPE = "scope"
SHOW_DIALOG = "show_dialog"
STATE = "state"

AUTHORIZATION = "authorization"


def bearer_auth(token) -> Tuple[str, str]:
    """Build the token authorization header for ``token``.

    Args:
        token: Any object exposing an ``access_token`` string

    Returns:
        ``("authorization", "Bearer <access_token>")``
    """
    return AUTHORIZATION, f"Bearer {token.access_token}"


def basic_auth(user: str, password: str) -> Tuple[str, str]:
    """Build the HTTP basic authorization header used for credential exchange."""
    credentials = f"{user}:{password}".encode("utf-8")
    value = base64.b64encode(credentials).decode("ascii")
    return AUTHORIZATION, f"Basic {value}"


def redact(headers) -> dict:
    """Return a copy of ``headers`` safe for logging."""
    if not headers:
        return {}
    return {
        key: ("<redacted>" if key.lower() == AUTHORIZATION else value)
        for key, value in headers.items()
    }
