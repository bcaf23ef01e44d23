"""Identity infrastructure providers."""

from dishka import Scope, provide

from guestbook.adapter.identity import SessionIdentityProvider
from guestbook.config import Settings
from guestbook.domain.service import IdentityProvider
from guestbook.util.di.base import ProviderBase
from guestbook.util.error import ConfigurationError

PLACEHOLDER_SECRET = "CHANGE_ME_IN_PRODUCTION"


class IdentityProviderBase(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProviderBase):
    """Production identity provider using signed session cookies."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_provider(self, settings: Settings) -> IdentityProvider:
        """Provide session identity provider.

        Raises:
            ConfigurationError: If production runs with the placeholder secret
        """
        if (
            settings.environment == "production"
            and settings.auth.session_secret == PLACEHOLDER_SECRET
        ):
            raise ConfigurationError("AUTH__SESSION_SECRET must be set in production")

        return SessionIdentityProvider(auth_settings=settings.auth)
