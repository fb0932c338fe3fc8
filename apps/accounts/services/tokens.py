"""Bearer token issuing and verification."""

from dataclasses import dataclass
from datetime import datetime, timezone as dt_timezone
from typing import Optional
from uuid import UUID

from django.conf import settings
from rest_framework_simplejwt.backends import TokenBackend
from rest_framework_simplejwt.exceptions import TokenBackendError
from rest_framework_simplejwt.tokens import AccessToken

from .exceptions import InvalidTokenError


@dataclass(frozen=True)
class Credential:
    """Identity proven by a verified token."""

    user_id: UUID
    expires_at: datetime

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now(dt_timezone.utc)
        return now >= self.expires_at


def _jwt_settings() -> dict:
    return settings.SIMPLE_JWT


def issue_token(user) -> str:
    """Sign an access token embedding the user's id."""
    return str(AccessToken.for_user(user))


def verify_token(token: str, secret: str, *, algorithm: Optional[str] = None) -> Credential:
    """
    Verify signature and expiry of a token and extract its credential.

    Pure function of (token, secret): no database access.

    Raises:
        InvalidTokenError: If the token is missing, malformed, expired,
            signed with another secret, or lacks the expected claims.
    """
    if not token:
        raise InvalidTokenError("No token provided")

    jwt_settings = _jwt_settings()
    backend = TokenBackend(
        algorithm or jwt_settings.get('ALGORITHM', 'HS256'),
        signing_key=secret,
    )
    try:
        payload = backend.decode(token, verify=True)
    except TokenBackendError:
        raise InvalidTokenError("Invalid or expired token")

    if payload.get('token_type') != 'access':
        raise InvalidTokenError("Invalid or expired token")

    claim = jwt_settings.get('USER_ID_CLAIM', 'user_id')
    try:
        user_id = UUID(str(payload[claim]))
        expires_at = datetime.fromtimestamp(int(payload['exp']), tz=dt_timezone.utc)
    except (KeyError, TypeError, ValueError):
        raise InvalidTokenError("Invalid or expired token")

    return Credential(user_id=user_id, expires_at=expires_at)
