"""
Holder for the client's current access token.
"""
import logging
import threading
from typing import Optional

from ..exceptions import AuthenticationUnavailableError
from .token import Token

logger = logging.getLogger(__name__)


class TokenStore:
    """Thread-safe container for the current token.

    The request layer only reads from it; the authorization flow sets it.
    """

    def __init__(self, token: Optional[Token] = None):
        self._lock = threading.Lock()
        self._token = token

    def get_token(self) -> Token:
        """Return the current token.

        Raises:
            AuthenticationUnavailableError: If no token has been set
        """
        with self._lock:
            token = self._token
        if token is None:
            raise AuthenticationUnavailableError()
        return token

    def set_token(self, token: Token) -> None:
        with self._lock:
            self._token = token
        logger.debug("Access token updated")

    def clear(self) -> None:
        with self._lock:
            self._token = None
        logger.debug("Access token cleared")

    def has_token(self) -> bool:
        with self._lock:
            return self._token is not None
