"""Pydantic model for OAuth access tokens."""

import json
from datetime import datetime, timedelta, timezone
from typing import Optional, Set

from pydantic import BaseModel, Field, ValidationError, model_validator

from ..exceptions import ClientError

# Tokens this close to expiry are treated as expired.
EXPIRY_MARGIN = timedelta(seconds=10)


class Token(BaseModel):
    """Access token issued by the authorization server."""
    access_token: str
    token_type: str = "Bearer"
    expires_in: int = 3600
    expires_at: Optional[datetime] = None
    refresh_token: Optional[str] = None
    scopes: Set[str] = Field(default_factory=set)

    @model_validator(mode="after")
    def _fill_expires_at(self) -> "Token":
        if self.expires_at is None:
            self.expires_at = datetime.now(timezone.utc) + timedelta(seconds=self.expires_in)
        return self

    def is_expired(self) -> bool:
        """Whether the token is expired or about to expire."""
        return datetime.now(timezone.utc) + EXPIRY_MARGIN >= self.expires_at

    @classmethod
    def from_response(cls, text: str) -> "Token":
        """Build a token from a token endpoint response body.

        The endpoint sends granted scopes as one space separated ``scope`` string.
        """
        try:
            data = json.loads(text)
            scope = data.pop("scope", "") or ""
            return cls(scopes=set(scope.split()), **data)
        except (ValueError, TypeError, AttributeError, ValidationError) as e:
            raise ClientError(f"Invalid token response: {e}") from e
