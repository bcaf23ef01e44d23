"""Authentication domain service."""

from abc import ABC, abstractmethod

import logfire

from guestbook.domain.value import Identity

from .base import Service


class IdentityProvider(ABC):
    """External identity provider interface.

    Resolves the caller of a request and produces login and logout URLs.
    """

    @abstractmethod
    def current_user(self, session_token: str | None) -> Identity | None:
        """Resolve the caller from a session token.

        Args:
            session_token: Session cookie value, if any

        Returns:
            Caller identity, or None for anonymous callers and bad tokens
        """
        pass

    @abstractmethod
    def login_url(self, continue_to: str) -> str:
        """Build the login URL.

        Args:
            continue_to: Site-relative path to return to after login

        Returns:
            URL to redirect the caller to
        """
        pass

    @abstractmethod
    def logout_url(self, continue_to: str) -> str:
        """Build the logout URL.

        Args:
            continue_to: Site-relative path to return to after logout

        Returns:
            URL to redirect the caller to
        """
        pass


class AuthService(Service):
    """Domain service wrapping the identity provider."""

    def __init__(self, identity_provider: IdentityProvider) -> None:
        """Initialize auth service.

        Args:
            identity_provider: Identity provider implementation
        """
        self.identity_provider = identity_provider

    def current_user(self, session_token: str | None) -> Identity | None:
        """Resolve the caller, treating any failure as anonymous."""
        if not session_token:
            return None

        user = self.identity_provider.current_user(session_token)
        if user is None:
            logfire.debug("Session token rejected, treating caller as anonymous")
        return user

    def login_url(self, continue_to: str = "/") -> str:
        """Login URL returning to `continue_to`."""
        return self.identity_provider.login_url(safe_continue(continue_to))

    def logout_url(self, continue_to: str = "/") -> str:
        """Logout URL returning to `continue_to`."""
        return self.identity_provider.logout_url(safe_continue(continue_to))


def safe_continue(continue_to: str | None) -> str:
    """Restrict a post-login destination to a path on this site.

    Absolute URLs, scheme-relative URLs and backslash tricks fall back to "/".
    """
    if not continue_to or not continue_to.startswith("/"):
        return "/"
    if continue_to.startswith("//") or "\\" in continue_to:
        return "/"
    return continue_to
