"""Session-cookie identity provider.

Login happens on an external page. That page is given an absolute callback
URL; after login it redirects the caller to the callback with a signed
session token, and the callback stores the token in a cookie. Each request
is then resolved by verifying the cookie.
"""

from urllib.parse import quote, urlencode

import logfire
from pydantic import ValidationError

from guestbook.config import AuthSettings
from guestbook.domain.service.auth_service import IdentityProvider
from guestbook.domain.value import Identity
from guestbook.util.jwt import JWTError, verify_token


def _to_identity(value: str) -> Identity | None:
    """Wrap an identity string; values Identity rejects mean an anonymous caller."""
    try:
        return Identity(value)
    except ValidationError as e:
        logfire.debug("Rejected identity from session", error=str(e))
        return None


class SessionIdentityProviderBase(IdentityProvider):
    """Base class for session identity providers.

    Provides type distinction for dependency injection.
    """

    def logout_url(self, continue_to: str) -> str:
        """Local logout route clearing the session cookie."""
        return f"/auth/logout?{urlencode({'continue': continue_to})}"


class SessionIdentityProvider(SessionIdentityProviderBase):
    """Identity provider verifying signed session tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize session identity provider.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def current_user(self, session_token: str | None) -> Identity | None:
        """Verify the session token and return its identity."""
        if not session_token:
            return None

        try:
            payload = verify_token(session_token, self.auth_settings)
        except JWTError as e:
            logfire.debug("Session token verification failed", error=str(e))
            return None

        return _to_identity(payload.identity)

    def login_url(self, continue_to: str) -> str:
        """External login page returning to the callback, then to `continue_to`."""
        callback = (
            f"{self.auth_settings.callback_url}?continue={quote(continue_to, safe='')}"
        )
        return f"{self.auth_settings.login_page_url}?{urlencode({'continue': callback})}"


class MockIdentityProvider(SessionIdentityProviderBase):
    """Mock identity provider for testing.

    The session cookie value is taken as the identity itself.
    """

    def current_user(self, session_token: str | None) -> Identity | None:
        """Return the cookie value as identity."""
        if not session_token:
            return None
        return _to_identity(session_token)

    def login_url(self, continue_to: str) -> str:
        """Return mock login URL."""
        return f"https://login.example.com/?{urlencode({'continue': continue_to, 'mock': 'true'})}"
