"""Session token utilities.

The external identity provider hands back a signed token after login; the
same token is kept in the session cookie and verified on every request.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from guestbook.config import AuthSettings


class TokenPayload(BaseModel):
    """Session token payload."""

    identity: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(identity: str, settings: AuthSettings) -> str:
    """Create a session token for an identity.

    Args:
        identity: Identity string (e.g. an email address)
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.session_expiry_days)

    payload = {
        "identity": identity,
        "exp": expiry,
    }

    return jwt.encode(
        payload, settings.session_secret, algorithm=settings.session_algorithm
    )


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired or carries no identity
    """
    try:
        payload = jwt.decode(
            token, settings.session_secret, algorithms=[settings.session_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    if not payload.get("identity"):
        raise JWTError("Token carries no identity")

    return TokenPayload(**payload)
